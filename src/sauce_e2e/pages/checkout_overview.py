"""Checkout overview page object."""

from .base import BasePage


class CheckoutOverviewPage(BasePage):
    """Order summary with price labels and the finish button."""

    @property
    def locators(self):
        return self.config.locators.checkout_overview

    async def get_cart_items_count(self) -> int:
        return await self.handle.count(self.locators.cart_item)

    async def click_finish(self) -> None:
        await self._click(self.locators.finish_button)

    async def click_cancel(self) -> None:
        await self._click(self.locators.cancel_button)

    async def get_subtotal(self) -> str:
        return await self._text(self.locators.subtotal)

    async def get_tax(self) -> str:
        return await self._text(self.locators.tax)

    async def get_total(self) -> str:
        return await self._text(self.locators.total)
