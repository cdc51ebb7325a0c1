"""Base page object."""

from ..automation import AutomationHandle, ElementRef
from ..config import Config


class BasePage:
    """Shared plumbing for page objects.

    The automation handle is injected and outlives the page object; the page
    only owns the mapping from its operations to selectors in ``config``.
    """

    def __init__(self, handle: AutomationHandle, config: Config):
        self.handle = handle
        self.config = config

    def _el(self, selector: str, index: int | None = None) -> ElementRef:
        return self.handle.locate(selector, index)

    async def _fill(self, selector: str, text: str) -> None:
        await self.handle.fill(self._el(selector), text)

    async def _click(self, selector: str) -> None:
        await self.handle.click(self._el(selector))

    async def _text(self, selector: str) -> str:
        return await self.handle.text_content(self._el(selector))
