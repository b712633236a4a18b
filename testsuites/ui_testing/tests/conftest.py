"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for the authentication scenarios, providing
fixtures for browser management, session isolation and scenario data.

Key Features:
- One browser per run, one fresh context per scenario
- Cookies / storage cleared before every scenario
- Screenshot capture on failure
- Portal reachability preflight

================================================================================
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Error as PlaywrightError, Page

from autotest_tools.report_tools.allure_utils import attach_text, write_environment_properties
from testsuites.ui_testing.framework.auth_commands import AuthCommands
from testsuites.ui_testing.framework.browser_manager import (
    BrowserManager,
    prepare_artifact_dirs,
    probe_portal,
)
from testsuites.ui_testing.framework.config_loader import ConfigLoader, UiSettings
from testsuites.ui_testing.framework.data_factory import AccountFactory
from testsuites.ui_testing.framework.failure_capture import (
    capture_failure_artifacts,
    scenario_failed,
)
from testsuites.ui_testing.framework.fixture_loader import FixtureLoader, UserFixtures


# ================================================================================
# Settings & Data Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings(pytestconfig) -> UiSettings:
    """Run configuration with command-line overrides applied."""
    overrides = {
        "base_url": pytestconfig.getoption("--ui-base-url"),
        "browser": pytestconfig.getoption("--ui-browser"),
        "slow_mo": pytestconfig.getoption("--ui-slow-mo"),
    }
    if pytestconfig.getoption("--ui-headed"):
        overrides["headless"] = False

    settings = UiSettings.from_config(ConfigLoader(), overrides)
    logger.info(
        f"UI settings: {settings.base_url} | {settings.browser} | "
        f"headless={settings.headless} | viewport={settings.viewport}"
    )

    alluredir = pytestconfig.getoption("--alluredir", default=None)
    if alluredir:
        write_environment_properties(Path(alluredir), {
            "Portal": settings.base_url,
            "Browser": settings.browser,
            "Headless": settings.headless,
            "Viewport": f"{settings.viewport_width}x{settings.viewport_height}",
        })

    return settings


@pytest.fixture(scope="session")
def users(project_root: Path) -> UserFixtures:
    """The `users` fixture: valid account, sign-up template, invalid values."""
    directory = ConfigLoader().get("fixtures.directory")
    loader = FixtureLoader(project_root / directory if directory else None)
    return loader.users()


@pytest.fixture(scope="session")
def account_factory() -> AccountFactory:
    return AccountFactory()


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def portal_available(ui_settings: UiSettings) -> None:
    """Skip UI scenarios when the portal cannot be reached at all."""
    reason = probe_portal(ui_settings.base_url, timeout=ui_settings.page_load_timeout / 1000)
    if reason is None:
        return
    message = f"Portal {ui_settings.base_url} unreachable ({reason})"
    if ui_settings.skip_if_unreachable:
        pytest.skip(message)
    logger.error(message)


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(
    ui_settings: UiSettings,
    portal_available: None,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single browser for all scenarios in the run, reducing
    browser launch overhead.
    """
    prepare_artifact_dirs(ui_settings)

    manager = BrowserManager(ui_settings)
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(
            f"Cannot launch {ui_settings.browser}: {str(e).splitlines()[0]} "
            f"(run `playwright install {ui_settings.browser}`)"
        )
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each scenario, providing isolation.
    """
    context = await browser_manager.new_context()
    yield context
    await browser_manager.close_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(context: BrowserContext) -> AsyncGenerator[Page, None]:
    """Function-scoped page fixture."""
    page = await context.new_page()
    yield page
    await page.close()


# ================================================================================
# Command Helper Fixtures
# ================================================================================

@pytest_asyncio.fixture(loop_scope="session")
async def auth(
    request,
    page: Page,
    ui_settings: UiSettings,
) -> AsyncGenerator[AuthCommands, None]:
    """
    Command helpers bound to the scenario's page.

    When the scenario or one of its setup steps fails, a full-page
    screenshot, the current URL and the recent backend responses are
    attached to the report.
    """
    commands = AuthCommands(
        page,
        ui_settings.base_url,
        timeout=ui_settings.default_command_timeout,
        screenshot_dir=ui_settings.screenshots_folder,
    )
    yield commands

    if ui_settings.screenshot_on_failure and scenario_failed(request.node):
        await capture_failure_artifacts(commands, request.node.name)

    health = commands.locator_health_report()
    if health:
        attach_text(health, name="Locator Health")


@pytest_asyncio.fixture(autouse=True, loop_scope="session")
async def clean_session(auth: AuthCommands) -> None:
    """Every scenario starts with no cookies and empty local storage."""
    await auth.clear_session()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item (`rep_setup`, `rep_call`, ...)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
