"""Checkout complete (order confirmation) page object."""

from pathlib import Path

from ..models import OrderConfirmation
from .base import BasePage


class CheckoutCompletePage(BasePage):
    """Order confirmation screen."""

    @property
    def locators(self):
        return self.config.locators.checkout_complete

    async def get_success_header(self) -> str:
        return await self._text(self.locators.complete_header)

    async def get_success_text(self) -> str:
        return await self._text(self.locators.complete_text)

    async def get_confirmation(self) -> OrderConfirmation:
        return OrderConfirmation(
            header=await self.get_success_header(),
            text=await self.get_success_text(),
        )

    async def click_back_home(self) -> None:
        await self._click(self.locators.back_home_button)

    async def verify_order_success(self) -> bool:
        """True if the header exactly matches the configured success message."""
        return await self.get_success_header() == self.config.messages.order_success

    async def take_screenshot(self, path: Path | None = None) -> Path:
        """Full-page screenshot, defaulting to the configured confirmation path."""
        return await self.handle.screenshot(path or self.config.screenshots.order_confirmation, full_page=True)
