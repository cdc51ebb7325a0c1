"""
Browser session management using Playwright
"""

import logging

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright

from .automation import PlaywrightHandle
from .config import Config

logger = logging.getLogger(__name__)


class BrowserSession:
    """Owns one Playwright browser and an isolated context for a single run"""

    def __init__(self, config: Config):
        self.config = config
        self.playwright: Playwright | None = None
        self.browser: Browser | None = None
        self.context: BrowserContext | None = None

    async def start(self) -> None:
        """Launch the configured browser and open a fresh context"""
        browser_config = self.config.browser
        try:
            self.playwright = await async_playwright().start()
            launcher = getattr(self.playwright, browser_config.name)
            self.browser = await launcher.launch(headless=browser_config.headless)
            self.context = await self.browser.new_context(
                viewport={
                    "width": browser_config.viewport_width,
                    "height": browser_config.viewport_height,
                }
            )
            self.context.set_default_timeout(self.config.timeouts.default)
            self.context.set_default_navigation_timeout(self.config.timeouts.navigation)
        except Exception as e:
            if "Executable doesn't exist" in str(e):
                logger.error("Playwright browsers are not installed. Run: playwright install %s", browser_config.name)
            await self.stop()
            raise
        logger.info("Started %s (headless=%s)", browser_config.name, browser_config.headless)

    async def stop(self) -> None:
        """Release context, browser and driver"""
        if self.context:
            await self.context.close()
            self.context = None
        if self.browser:
            await self.browser.close()
            self.browser = None
        if self.playwright:
            await self.playwright.stop()
            self.playwright = None

    async def new_handle(self) -> PlaywrightHandle:
        """Open a new page wrapped in an automation handle"""
        if not self.context:
            await self.start()
        page = await self.context.new_page()
        return PlaywrightHandle(page, navigation_timeout=self.config.timeouts.navigation)

    async def __aenter__(self) -> "BrowserSession":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
