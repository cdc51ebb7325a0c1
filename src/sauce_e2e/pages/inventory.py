"""Inventory (product listing) page object."""

import logging
import random

from ..automation import AutomationHandle, ElementRef
from ..config import Config
from ..errors import ElementNotFoundError
from ..selection import select_unique
from .base import BasePage

logger = logging.getLogger(__name__)


class InventoryPage(BasePage):
    """Product listing with add-to-cart buttons and the cart link."""

    def __init__(self, handle: AutomationHandle, config: Config, rng: random.Random | None = None):
        super().__init__(handle, config)
        self.rng = rng

    @property
    def locators(self):
        return self.config.locators.inventory

    async def get_all_add_to_cart_buttons(self) -> list[ElementRef]:
        return await self.handle.locate_all(self.locators.add_to_cart_button)

    async def add_random_products_to_cart(self, number_of_products: int) -> list[int]:
        """
        Add randomly chosen products to the cart.

        Buttons are clicked in the order the indices were drawn, which is not
        their on-page order.

        Args:
            number_of_products: How many distinct products to add

        Returns:
            The indices that were clicked, in click order
        """
        buttons = await self.get_all_add_to_cart_buttons()
        indices = select_unique(len(buttons), number_of_products, self.rng)
        logger.debug("Adding products at indices %s of %d", indices, len(buttons))

        for index in indices:
            await self.handle.click(buttons[index])

        return indices

    async def add_product_to_cart_by_index(self, index: int) -> None:
        buttons = await self.get_all_add_to_cart_buttons()
        if not 0 <= index < len(buttons):
            raise ElementNotFoundError(
                f"No add-to-cart button at index {index} ({len(buttons)} available)",
                self.locators.add_to_cart_button,
            )
        await self.handle.click(buttons[index])

    async def get_all_product_names(self) -> list[str]:
        return await self.handle.all_text_contents(self.locators.product_name)

    async def get_cart_badge_count(self) -> int:
        """Number shown on the cart icon; 0 when the badge is absent."""
        if not await self.handle.count(self.locators.shopping_cart_badge):
            return 0
        return int(await self._text(self.locators.shopping_cart_badge))

    async def go_to_cart(self) -> None:
        await self._click(self.locators.shopping_cart_link)
