"""
Repository-level pytest configuration.

Registers the command-line options that shape a UI run. They live here
because pytest only honours `pytest_addoption` in the root conftest.

Precedence for every UI setting: command-line option > environment
variable > testsuites/config/config.yaml > built-in default.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from autotest_tools.common import init_logger
from testsuites.ui_testing.framework.config_loader import ConfigLoader, logging_options


def pytest_addoption(parser):
    group = parser.getgroup("portal-ui", "Portal UI run options")
    group.addoption(
        "--ui-base-url",
        action="store",
        default=None,
        help="Portal base URL (overrides ui.base_url / UI_BASE_URL)",
    )
    group.addoption(
        "--ui-browser",
        action="store",
        choices=["chromium", "firefox", "webkit"],
        default=None,
        help="Browser engine for UI scenarios",
    )
    group.addoption(
        "--ui-headed",
        action="store_true",
        default=False,
        help="Show the browser window",
    )
    group.addoption(
        "--ui-slow-mo",
        action="store",
        type=int,
        default=None,
        help="Slow every browser operation down by N milliseconds",
    )


def pytest_configure(config):
    """Initialize loguru from the run configuration."""
    init_logger(**logging_options(ConfigLoader()))


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
