"""Exception types raised by the E2E suite."""

from typing import Any


class E2EError(Exception):
    """Base class for all suite errors."""


class FixtureLoadError(E2EError):
    """Fixture file is missing, unparseable or incomplete."""


class PreconditionError(E2EError, ValueError):
    """An operation was invoked with arguments it cannot honour."""


class AutomationError(E2EError):
    """A browser action could not be completed."""

    def __init__(self, message: str, selector: str | None = None):
        super().__init__(message)
        self.selector = selector


class ElementNotFoundError(AutomationError):
    """Selector matched nothing (or not enough elements)."""


class ActionTimeoutError(AutomationError):
    """Action did not complete within the allotted time."""


class AssertionMismatch(E2EError, AssertionError):
    """An orchestrator check compared unequal."""

    def __init__(self, step: str, expected: Any, actual: Any):
        super().__init__(f"{step}: expected {expected!r}, got {actual!r}")
        self.step = step
        self.expected = expected
        self.actual = actual
