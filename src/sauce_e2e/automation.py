"""Automation handle: the capability boundary between page objects and the browser."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .errors import ActionTimeoutError, AutomationError, ElementNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementRef:
    """Reference to an element: a selector, optionally narrowed to the n-th match."""

    selector: str
    index: int | None = None

    def __str__(self) -> str:
        if self.index is None:
            return self.selector
        return f"{self.selector} >> nth={self.index}"


class AutomationHandle(ABC):
    """Abstract browser automation capability consumed by page objects."""

    def locate(self, selector: str, index: int | None = None) -> ElementRef:
        """Reference a single element without touching the browser."""
        return ElementRef(selector, index)

    async def locate_all(self, selector: str) -> list[ElementRef]:
        """Reference every element currently matching ``selector``."""
        return [ElementRef(selector, i) for i in range(await self.count(selector))]

    @abstractmethod
    async def navigate(self, url: str) -> None:
        """Open ``url`` and wait for the page to settle."""
        pass

    @abstractmethod
    async def fill(self, element: ElementRef, text: str) -> None:
        pass

    @abstractmethod
    async def click(self, element: ElementRef) -> None:
        pass

    @abstractmethod
    async def text_content(self, element: ElementRef) -> str:
        pass

    @abstractmethod
    async def all_text_contents(self, selector: str) -> list[str]:
        """Text of every match, in page order."""
        pass

    @abstractmethod
    async def count(self, selector: str) -> int:
        pass

    @abstractmethod
    async def screenshot(self, path: Path, full_page: bool = True) -> Path:
        pass


class PlaywrightHandle(AutomationHandle):
    """AutomationHandle backed by a Playwright async ``Page``."""

    def __init__(self, page: Page, navigation_timeout: int | None = None):
        self.page = page
        self.navigation_timeout = navigation_timeout

    def _locator(self, element: ElementRef) -> Locator:
        locator = self.page.locator(element.selector)
        if element.index is not None:
            locator = locator.nth(element.index)
        return locator

    async def _translate(self, element: ElementRef, action: str, error: PlaywrightError) -> AutomationError:
        """Map a Playwright failure onto the suite's error types."""
        if isinstance(error, PlaywrightTimeoutError):
            try:
                found = await self._locator(element).count()
            except PlaywrightError:
                found = 0
            if not found:
                return ElementNotFoundError(f"{action}: no element matches '{element}'", str(element))
            return ActionTimeoutError(f"{action}: timed out on '{element}'", str(element))
        return AutomationError(f"{action} failed on '{element}': {error.message}", str(element))

    async def navigate(self, url: str) -> None:
        logger.debug("Navigating to %s", url)
        try:
            await self.page.goto(url, timeout=self.navigation_timeout)
        except PlaywrightTimeoutError as e:
            raise ActionTimeoutError(f"navigate: timed out loading {url}") from e
        except PlaywrightError as e:
            raise AutomationError(f"navigate failed on {url}: {e.message}") from e

    async def fill(self, element: ElementRef, text: str) -> None:
        try:
            await self._locator(element).fill(text)
        except PlaywrightError as e:
            raise await self._translate(element, "fill", e) from e

    async def click(self, element: ElementRef) -> None:
        try:
            await self._locator(element).click()
        except PlaywrightError as e:
            raise await self._translate(element, "click", e) from e

    async def text_content(self, element: ElementRef) -> str:
        try:
            text = await self._locator(element).text_content()
        except PlaywrightError as e:
            raise await self._translate(element, "text_content", e) from e
        return text or ""

    async def all_text_contents(self, selector: str) -> list[str]:
        try:
            return await self.page.locator(selector).all_text_contents()
        except PlaywrightError as e:
            raise await self._translate(ElementRef(selector), "all_text_contents", e) from e

    async def count(self, selector: str) -> int:
        try:
            return await self.page.locator(selector).count()
        except PlaywrightError as e:
            raise await self._translate(ElementRef(selector), "count", e) from e

    async def screenshot(self, path: Path, full_page: bool = True) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            await self.page.screenshot(path=str(path), full_page=full_page)
        except PlaywrightError as e:
            raise AutomationError(f"screenshot to {path} failed: {e.message}") from e
        return path
