"""Page objects - one per screen of the store."""

from .base import BasePage
from .cart import CartPage
from .checkout import CheckoutPage
from .checkout_complete import CheckoutCompletePage
from .checkout_overview import CheckoutOverviewPage
from .inventory import InventoryPage
from .login import LoginPage

__all__ = [
    "BasePage",
    "CartPage",
    "CheckoutCompletePage",
    "CheckoutOverviewPage",
    "CheckoutPage",
    "InventoryPage",
    "LoginPage",
]
