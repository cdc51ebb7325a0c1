"""Login page object."""

from .base import BasePage


class LoginPage(BasePage):
    """Login screen: credentials form and error banner."""

    @property
    def locators(self):
        return self.config.locators.login

    async def navigate(self) -> None:
        """Open the store's base URL."""
        await self.handle.navigate(self.config.base_url)

    async def enter_username(self, username: str) -> None:
        await self._fill(self.locators.username_input, username)

    async def enter_password(self, password: str) -> None:
        await self._fill(self.locators.password_input, password)

    async def click_login_button(self) -> None:
        await self._click(self.locators.login_button)

    async def login(self, username: str, password: str) -> None:
        """Enter both credentials and submit."""
        await self.enter_username(username)
        await self.enter_password(password)
        await self.click_login_button()

    async def get_error_message(self) -> str:
        return await self._text(self.locators.error_message)
