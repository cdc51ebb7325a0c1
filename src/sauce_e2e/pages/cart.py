"""Cart page object."""

from ..errors import ElementNotFoundError
from .base import BasePage


class CartPage(BasePage):
    """Shopping cart: item list, checkout and continue-shopping buttons."""

    @property
    def locators(self):
        return self.config.locators.cart

    async def get_cart_items_count(self) -> int:
        return await self.handle.count(self.locators.cart_item)

    async def get_cart_item_names(self) -> list[str]:
        return await self.handle.all_text_contents(self.locators.cart_item_name)

    async def click_checkout(self) -> None:
        await self._click(self.locators.checkout_button)

    async def click_continue_shopping(self) -> None:
        await self._click(self.locators.continue_shopping)

    async def remove_item_by_index(self, index: int) -> None:
        """
        Remove the item at ``index`` in the cart as currently listed.

        The index is a cart position, not the product's inventory position.
        """
        buttons = await self.handle.locate_all(self.locators.remove_button)
        if not 0 <= index < len(buttons):
            raise ElementNotFoundError(
                f"No cart item at index {index} ({len(buttons)} in cart)",
                self.locators.remove_button,
            )
        await self.handle.click(buttons[index])
