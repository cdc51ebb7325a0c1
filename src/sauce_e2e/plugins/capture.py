"""Pytest plugin that remembers phase reports so fixtures can capture failure evidence."""

from datetime import datetime
from pathlib import Path

import pytest


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Hook to execute after each test phase."""
    outcome = yield
    report = outcome.get_result()
    # Exposed as item.rep_setup / item.rep_call / item.rep_teardown
    setattr(item, f"rep_{report.when}", report)


def call_failed(item) -> bool:
    """True if the test body of ``item`` has run and failed."""
    report = getattr(item, "rep_call", None)
    return report is not None and report.failed


def failure_screenshot_path(item, failures_dir: Path) -> Path:
    """Timestamped screenshot destination for a failed test."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    clean_name = item.name.replace("::", "_").replace("/", "_").replace("[", "_").replace("]", "")
    return Path(failures_dir) / f"{clean_name}_{timestamp}.png"


def attach_screenshot(item, path: Path) -> None:
    """Record the screenshot on the item for reporting."""
    item.user_properties.append(("screenshot_path", str(path)))
