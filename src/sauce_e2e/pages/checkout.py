"""Checkout information page object."""

from ..models import CustomerInfo
from .base import BasePage


class CheckoutPage(BasePage):
    """Checkout step one: customer name and postal code form."""

    @property
    def locators(self):
        return self.config.locators.checkout

    async def enter_first_name(self, first_name: str) -> None:
        await self._fill(self.locators.first_name_input, first_name)

    async def enter_last_name(self, last_name: str) -> None:
        await self._fill(self.locators.last_name_input, last_name)

    async def enter_postal_code(self, postal_code: str) -> None:
        await self._fill(self.locators.postal_code_input, postal_code)

    async def click_continue(self) -> None:
        await self._click(self.locators.continue_button)

    async def click_cancel(self) -> None:
        await self._click(self.locators.cancel_button)

    async def fill_checkout_information(self, first_name: str, last_name: str, postal_code: str) -> None:
        """Fill all three fields without submitting."""
        await self.enter_first_name(first_name)
        await self.enter_last_name(last_name)
        await self.enter_postal_code(postal_code)

    async def complete_checkout_info(self, customer_info: CustomerInfo) -> None:
        """Fill the form from fixture data and continue to the overview."""
        await self.fill_checkout_information(
            customer_info.first_name,
            customer_info.last_name,
            customer_info.postal_code,
        )
        await self.click_continue()

    async def get_error_message(self) -> str:
        return await self._text(self.locators.error_message)
