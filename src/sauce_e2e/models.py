"""Core data models for the E2E suite."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


class Screen(Enum):
    """Logical screens of the store, in journey order."""

    LOGGED_OUT = "logged_out"
    INVENTORY = "inventory"
    CART = "cart"
    CHECKOUT_INFO = "checkout_info"
    CHECKOUT_OVERVIEW = "checkout_overview"
    CHECKOUT_COMPLETE = "checkout_complete"


class StepStatus(Enum):
    """Outcome of a single orchestrated step."""

    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class Credentials:
    """Login credentials from the fixture store."""

    username: str
    password: str


@dataclass(frozen=True)
class CustomerInfo:
    """Customer details entered at checkout."""

    first_name: str
    last_name: str
    postal_code: str


@dataclass(frozen=True)
class OrderConfirmation:
    """Texts read from the confirmation screen."""

    header: str
    text: str


@dataclass
class StepRecord:
    """What happened during one step of the purchase flow."""

    number: int
    name: str
    status: StepStatus
    screen: Screen
    detail: str = ""
    started_at: datetime = field(default_factory=datetime.now)


@dataclass
class FlowResult:
    """Summary of a purchase flow run."""

    steps: list[StepRecord] = field(default_factory=list)
    selected_indices: list[int] = field(default_factory=list)
    cart_items: list[str] = field(default_factory=list)
    confirmation: OrderConfirmation | None = None
    screenshot_path: Path | None = None

    @property
    def passed(self) -> bool:
        return bool(self.steps) and all(s.status is StepStatus.PASSED for s in self.steps)

    @property
    def final_screen(self) -> Screen:
        if not self.steps:
            return Screen.LOGGED_OUT
        return self.steps[-1].screen
