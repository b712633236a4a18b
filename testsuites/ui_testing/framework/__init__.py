"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation layer for the portal authentication suite.

Components:
    - config_loader: YAML + environment run configuration
    - fixture_loader: Static credential / invalid-value fixtures
    - data_factory: Unique account data for repeatable sign-ups
    - smart_locator: Stable-identifier element location with drift diagnostics
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management
    - auth_commands: Sign-up / sign-in / sign-out command helpers
    - failure_capture: Failed-scenario detection and screenshots
      (import these two from their modules; they depend on the page objects)

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, UiSettings
from .fixture_loader import Credential, FixtureError, FixtureLoader, UserFixtures
from .data_factory import AccountFactory
from .smart_locator import SmartLocator, ElementNotFoundError
from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UiSettings",
    "Credential",
    "FixtureError",
    "FixtureLoader",
    "UserFixtures",
    "AccountFactory",
    "SmartLocator",
    "ElementNotFoundError",
    "BasePage",
    "BrowserManager",
]
