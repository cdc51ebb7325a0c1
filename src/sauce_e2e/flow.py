"""Purchase flow orchestrator.

Runs the journey login -> random products -> cart -> checkout -> confirmation
as a fixed, linear sequence of steps. Every check compares a value read from
the UI against the configuration table and raises ``AssertionMismatch`` on the
first difference, which aborts the remaining steps.
"""

import logging
import random
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

from .automation import AutomationHandle
from .config import Config
from .errors import AssertionMismatch
from .models import FlowResult, OrderConfirmation, Screen, StepRecord, StepStatus
from .pages import (
    CartPage,
    CheckoutCompletePage,
    CheckoutOverviewPage,
    CheckoutPage,
    InventoryPage,
    LoginPage,
)
from .test_data import TestDataProvider

logger = logging.getLogger(__name__)


class PurchaseFlow:
    """Composes page objects and fixture data into the purchase journey."""

    def __init__(
        self,
        handle: AutomationHandle,
        config: Config,
        test_data: TestDataProvider,
        rng: random.Random | None = None,
    ):
        self.config = config
        self.test_data = test_data

        self.login_page = LoginPage(handle, config)
        self.inventory_page = InventoryPage(handle, config, rng=rng)
        self.cart_page = CartPage(handle, config)
        self.checkout_page = CheckoutPage(handle, config)
        self.overview_page = CheckoutOverviewPage(handle, config)
        self.complete_page = CheckoutCompletePage(handle, config)

        self.result = FlowResult()

    @asynccontextmanager
    async def _step(self, name: str, screen: Screen) -> AsyncIterator[StepRecord]:
        """Record one step; any exception marks it failed and propagates."""
        record = StepRecord(
            number=len(self.result.steps) + 1,
            name=name,
            status=StepStatus.PASSED,
            screen=screen,
        )
        self.result.steps.append(record)
        logger.info("Step %d: %s...", record.number, name)
        try:
            yield record
        except BaseException as e:
            record.status = StepStatus.FAILED
            record.detail = str(e)
            logger.error("Step %d failed: %s", record.number, e)
            raise

    @staticmethod
    def _expect(check: str, expected: Any, actual: Any) -> None:
        if actual != expected:
            raise AssertionMismatch(check, expected, actual)
        logger.info("Verification: %s = %r", check, actual)

    async def run(self, products_to_buy: int | None = None, screenshot_path: Path | None = None) -> FlowResult:
        """
        Execute the full purchase journey.

        Args:
            products_to_buy: Override for the configured purchase count
            screenshot_path: Override for the confirmation screenshot destination

        Returns:
            FlowResult with one record per step

        Raises:
            AssertionMismatch: A verification failed
            AutomationError: A page action failed
        """
        # Each run starts from a clean record
        self.result = FlowResult()
        count = self.config.products_to_buy if products_to_buy is None else products_to_buy
        credentials = self.test_data.valid_credentials()
        customer_info = self.test_data.customer_info()
        messages = self.config.messages

        async with self._step("Navigating to Saucedemo website", Screen.LOGGED_OUT):
            await self.login_page.navigate()

        async with self._step("Logging in with valid credentials", Screen.INVENTORY):
            await self.login_page.login(credentials.username, credentials.password)

        async with self._step(f"Adding {count} random products to cart", Screen.INVENTORY) as step:
            self.result.selected_indices = await self.inventory_page.add_random_products_to_cart(count)
            step.detail = f"indices {self.result.selected_indices}"

        async with self._step("Navigating to shopping cart", Screen.CART) as step:
            await self.inventory_page.go_to_cart()
            items_count = await self.cart_page.get_cart_items_count()
            step.detail = f"{items_count} items"
            self._expect("cart item count", count, items_count)
            self.result.cart_items = await self.cart_page.get_cart_item_names()

        async with self._step("Proceeding to checkout", Screen.CHECKOUT_INFO):
            await self.cart_page.click_checkout()

        async with self._step("Filling checkout information", Screen.CHECKOUT_OVERVIEW):
            await self.checkout_page.complete_checkout_info(customer_info)

        async with self._step("Completing the order", Screen.CHECKOUT_COMPLETE):
            await self.overview_page.click_finish()

        async with self._step("Verifying order completion", Screen.CHECKOUT_COMPLETE) as step:
            try:
                header = await self.complete_page.get_success_header()
            finally:
                await self._capture_evidence(screenshot_path)
            self._expect("confirmation header", messages.order_success, header)

            text = await self.complete_page.get_success_text()
            self.result.confirmation = OrderConfirmation(header=header, text=text)
            self._expect("confirmation text", messages.order_dispatched, text)
            step.detail = header

        logger.info("All verifications passed")
        return self.result

    async def _capture_evidence(self, path: Path | None) -> None:
        """Best-effort screenshot; failures are logged, never raised."""
        try:
            self.result.screenshot_path = await self.complete_page.take_screenshot(path)
        except Exception as e:
            logger.warning("Could not capture confirmation screenshot: %s", e)
        else:
            logger.info("Screenshot saved to %s", self.result.screenshot_path)
