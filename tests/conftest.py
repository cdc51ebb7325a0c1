"""Shared fixtures: an in-memory stand-in for the Sauce Demo store."""

import random
from pathlib import Path

import pytest

from sauce_e2e.automation import AutomationHandle, ElementRef
from sauce_e2e.config import Config
from sauce_e2e.errors import ElementNotFoundError
from sauce_e2e.models import Screen
from sauce_e2e.test_data import TestDataProvider

PRODUCTS = [
    ("Sauce Labs Backpack", 29.99),
    ("Sauce Labs Bike Light", 9.99),
    ("Sauce Labs Bolt T-Shirt", 15.99),
    ("Sauce Labs Fleece Jacket", 49.99),
    ("Sauce Labs Onesie", 7.99),
    ("Test.allTheThings() T-Shirt (Red)", 15.99),
]

ACCOUNTS = {
    "standard_user": "secret_sauce",
    "locked_out_user": "secret_sauce",
    "problem_user": "secret_sauce",
}


class FakeStorefront(AutomationHandle):
    """Scripted storefront that reacts to the default selectors like the real site."""

    def __init__(self, config: Config):
        self.config = config
        self.loc = config.locators
        self.screen = Screen.LOGGED_OUT
        self.fields: dict[str, str] = {}
        self.cart: list[int] = []
        self.error: str | None = None
        self.actions: list[tuple[str, str]] = []
        self.added_indices: list[int] = []
        self.screenshots: list[Path] = []
        self.visited: list[str] = []

        # Knobs for failure scenarios
        self.confirmation_header = config.messages.order_success
        self.confirmation_text = config.messages.order_dispatched
        self.fail_screenshot = False
        self.drop_add_to_cart_at: int | None = None

    def _missing(self, element) -> ElementNotFoundError:
        return ElementNotFoundError(f"no element matches '{element}' on {self.screen.value}", str(element))

    async def navigate(self, url: str) -> None:
        self.actions.append(("navigate", url))
        self.visited.append(url)
        self.screen = Screen.LOGGED_OUT
        self.error = None

    async def fill(self, element: ElementRef, text: str) -> None:
        self.actions.append(("fill", str(element)))
        editable = {
            Screen.LOGGED_OUT: (self.loc.login.username_input, self.loc.login.password_input),
            Screen.CHECKOUT_INFO: (
                self.loc.checkout.first_name_input,
                self.loc.checkout.last_name_input,
                self.loc.checkout.postal_code_input,
            ),
        }
        if element.selector not in editable.get(self.screen, ()):
            raise self._missing(element)
        self.fields[element.selector] = text

    async def click(self, element: ElementRef) -> None:
        self.actions.append(("click", str(element)))
        sel = element.selector
        loc = self.loc

        if self.screen is Screen.LOGGED_OUT and sel == loc.login.login_button:
            self._submit_login()
        elif self.screen is Screen.INVENTORY and sel == loc.inventory.add_to_cart_button:
            self._toggle_product(element.index)
        elif self.screen is Screen.INVENTORY and sel == loc.inventory.shopping_cart_link:
            self.screen = Screen.CART
        elif self.screen is Screen.CART and sel == loc.cart.checkout_button:
            self.screen = Screen.CHECKOUT_INFO
        elif self.screen is Screen.CART and sel == loc.cart.continue_shopping:
            self.screen = Screen.INVENTORY
        elif self.screen is Screen.CART and sel == loc.cart.remove_button:
            if element.index is None or not 0 <= element.index < len(self.cart):
                raise self._missing(element)
            self.cart.pop(element.index)
        elif self.screen is Screen.CHECKOUT_INFO and sel == loc.checkout.continue_button:
            self._submit_checkout_info()
        elif self.screen is Screen.CHECKOUT_INFO and sel == loc.checkout.cancel_button:
            self.screen = Screen.CART
        elif self.screen is Screen.CHECKOUT_OVERVIEW and sel == loc.checkout_overview.finish_button:
            self.cart = []
            self.screen = Screen.CHECKOUT_COMPLETE
        elif self.screen is Screen.CHECKOUT_OVERVIEW and sel == loc.checkout_overview.cancel_button:
            self.screen = Screen.INVENTORY
        elif self.screen is Screen.CHECKOUT_COMPLETE and sel == loc.checkout_complete.back_home_button:
            self.screen = Screen.INVENTORY
        else:
            raise self._missing(element)

    def _submit_login(self) -> None:
        username = self.fields.get(self.loc.login.username_input, "")
        password = self.fields.get(self.loc.login.password_input, "")
        if username == "locked_out_user" and ACCOUNTS.get(username) == password:
            self.error = self.config.messages.locked_out_error
        elif ACCOUNTS.get(username) == password and username:
            self.error = None
            self.screen = Screen.INVENTORY
        else:
            self.error = self.config.messages.login_error

    def _submit_checkout_info(self) -> None:
        required = [
            ("First Name", self.loc.checkout.first_name_input),
            ("Last Name", self.loc.checkout.last_name_input),
            ("Postal Code", self.loc.checkout.postal_code_input),
        ]
        for label, selector in required:
            if not self.fields.get(selector):
                self.error = f"Error: {label} is required"
                return
        self.error = None
        self.screen = Screen.CHECKOUT_OVERVIEW

    def _toggle_product(self, index: int | None) -> None:
        if index is None or not 0 <= index < len(PRODUCTS):
            raise self._missing(ElementRef(self.loc.inventory.add_to_cart_button, index))
        self.added_indices.append(index)
        if index == self.drop_add_to_cart_at:
            return
        if index in self.cart:
            self.cart.remove(index)
        else:
            self.cart.append(index)

    def _prices(self) -> tuple[float, float, float]:
        subtotal = round(sum(PRODUCTS[i][1] for i in self.cart), 2)
        tax = round(subtotal * 0.08, 2)
        return subtotal, tax, round(subtotal + tax, 2)

    async def text_content(self, element: ElementRef) -> str:
        sel = element.selector
        loc = self.loc
        subtotal, tax, total = self._prices()

        if sel in (loc.login.error_message, loc.checkout.error_message) and self.error:
            return self.error
        if self.screen is Screen.INVENTORY and sel == loc.inventory.shopping_cart_badge and self.cart:
            return str(len(self.cart))
        if self.screen is Screen.CHECKOUT_OVERVIEW:
            labels = {
                loc.checkout_overview.subtotal: f"Item total: ${subtotal:.2f}",
                loc.checkout_overview.tax: f"Tax: ${tax:.2f}",
                loc.checkout_overview.total: f"Total: ${total:.2f}",
            }
            if sel in labels:
                return labels[sel]
        if self.screen is Screen.CHECKOUT_COMPLETE:
            if sel == loc.checkout_complete.complete_header:
                return self.confirmation_header
            if sel == loc.checkout_complete.complete_text:
                return self.confirmation_text
        raise self._missing(element)

    async def all_text_contents(self, selector: str) -> list[str]:
        if selector == self.loc.inventory.product_name:
            if self.screen is Screen.INVENTORY:
                return [name for name, _ in PRODUCTS]
            if self.screen in (Screen.CART, Screen.CHECKOUT_OVERVIEW):
                return [PRODUCTS[i][0] for i in self.cart]
        return []

    async def count(self, selector: str) -> int:
        loc = self.loc
        if self.screen is Screen.INVENTORY:
            if selector == loc.inventory.add_to_cart_button:
                return len(PRODUCTS)
            if selector == loc.inventory.shopping_cart_badge:
                return 1 if self.cart else 0
        if self.screen in (Screen.CART, Screen.CHECKOUT_OVERVIEW) and selector == loc.cart.cart_item:
            return len(self.cart)
        if self.screen is Screen.CART and selector == loc.cart.remove_button:
            return len(self.cart)
        if selector in (loc.login.error_message, loc.checkout.error_message):
            return 1 if self.error else 0
        return 0

    async def screenshot(self, path: Path, full_page: bool = True) -> Path:
        self.actions.append(("screenshot", str(path)))
        if self.fail_screenshot:
            raise OSError("disk full")
        self.screenshots.append(Path(path))
        return Path(path)

    def clicks_on(self, selector: str) -> list[str]:
        return [target for action, target in self.actions if action == "click" and target.startswith(selector)]


@pytest.fixture
def config() -> Config:
    """Default configuration, independent of any local YAML file."""
    return Config()


@pytest.fixture
def store(config) -> FakeStorefront:
    return FakeStorefront(config)


@pytest.fixture
def logged_in_store(store) -> FakeStorefront:
    store.screen = Screen.INVENTORY
    return store


@pytest.fixture
def test_data() -> TestDataProvider:
    return TestDataProvider()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
