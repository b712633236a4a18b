"""
================================================================================
Failure Capture
================================================================================

Decides when a scenario counts as failed and saves its diagnostics.

A scenario fails in its setup phase when a precondition fixture (navigation,
sign-in, account registration) raises, and in its call phase when the test
body does. Both get the same screenshot, URL and backend response capture.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from loguru import logger
from playwright.async_api import Error as PlaywrightError

from .auth_commands import AuthCommands


FAILURE_PHASES = ("setup", "call")


def scenario_failed(item, phases: Iterable[str] = FAILURE_PHASES) -> bool:
    """
    True when any of `phases` of `item` failed.

    Relies on `rep_<phase>` attributes set by the `pytest_runtest_makereport`
    hook; a phase that never ran has no report and does not count.
    """
    for when in phases:
        report = getattr(item, f"rep_{when}", None)
        if report is not None and report.failed:
            return True
    return False


async def capture_failure_artifacts(commands: AuthCommands, name: str) -> Optional[Path]:
    """
    Screenshot the page behind `commands` and attach URL and responses.

    Returns:
        Screenshot path, or None when the page could no longer be captured
    """
    try:
        path = await commands.capture_failure(name)
    except PlaywrightError as e:
        logger.warning(f"Failed to capture screenshot on failure: {e}")
        return None

    logger.info(f"Failure screenshot: {path}")
    return path


__all__ = [
    "FAILURE_PHASES",
    "capture_failure_artifacts",
    "scenario_failed",
]
