"""
================================================================================
Smart Locator
================================================================================

Element location by the portal's stable test identifiers:
    - `data-cy` attribute is the only selector used for interaction
    - A missing identifier always fails, after probing drift hints
      (`data-testid`, semantic selectors) so the error says where the
      element probably moved
    - Missing identifiers are collected into a health report

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from loguru import logger
from playwright.async_api import Locator, Page


STABLE_ID_ATTRIBUTE = "data-cy"


def stable_id_selector(test_id: str, attribute: str = STABLE_ID_ATTRIBUTE) -> str:
    """Build the CSS selector for a stable identifier, e.g. `[data-cy=email-input]`."""
    return f"[{attribute}={test_id}]"


class ElementNotFoundError(Exception):
    """Raised when a stable identifier is not visible within the timeout."""
    pass


@dataclass
class MissingIdentifier:
    """
    A stable identifier that could not be found.

    Attributes:
        element_name: Stable identifier of the element
        selector: The `data-cy` selector that was waited for
        candidates: Drift-hint selectors that matched at least one element
    """
    element_name: str
    selector: str
    candidates: List[str] = field(default_factory=list)


STABLE_IDS: Tuple[str, ...] = (
    # Navigation
    "signup-link",
    "signin-link",
    # Form inputs and controls
    "email-input",
    "password-input",
    "signup-button",
    "signin-button",
    "signin-form",
    # Authenticated area
    "user-menu",
    "signout-button",
    # Messages
    "success-message",
    "error-message",
    "email-error",
    "password-error",
)


class SmartLocator:
    """
    Stable-identifier element locator.

    Interaction only ever goes through `[data-cy=...]`. The `DRIFT_HINTS`
    selectors are never clicked or typed into; they are counted after a
    failed wait and reported in the error.

    Usage:
        >>> smart = SmartLocator(page, timeout=10000)
        >>> await smart.fill("email-input", "user@example.com")
        >>> await smart.click("signup-button")
    """

    # Format: stable identifier -> selector
    LOCATORS: Dict[str, str] = {test_id: stable_id_selector(test_id) for test_id in STABLE_IDS}

    # Format: stable identifier -> selectors where drifted markup usually ends up
    DRIFT_HINTS: Dict[str, List[str]] = {
        "signup-link": ["a[href$='/signup']"],
        "signin-link": ["a[href$='/signin']"],
        "email-input": ["input[type='email']", "input[name='email']"],
        "password-input": ["input[type='password']", "input[name='password']"],
        "signup-button": ["button:has-text('Sign Up')"],
        "signin-button": ["button:has-text('Sign In')"],
        "signin-form": ["form#signin-form"],
        "user-menu": ["[aria-label='User menu']"],
        "signout-button": ["button:has-text('Sign Out')"],
        "success-message": ["[role='status']"],
        "error-message": ["[role='alert']"],
        "email-error": ["#email-error"],
        "password-error": ["#password-error"],
    }

    def __init__(self, page: Page, timeout: int = 10000):
        """
        Initialize SmartLocator with Playwright page.

        Args:
            page: Playwright Page object
            timeout: Default wait in milliseconds (command timeout)
        """
        self.page = page
        self.timeout = timeout
        self._missing: Dict[str, MissingIdentifier] = {}

    def selector_for(self, element_name: str) -> str:
        """Return the `data-cy` selector for an element, raising if it is unknown."""
        selector = self.LOCATORS.get(element_name)
        if not selector:
            raise ElementNotFoundError(f"No locator defined for element: {element_name}")
        return selector

    def primary(self, element_name: str) -> Locator:
        """
        Locator for the stable identifier without waiting.

        Used for assertions with `expect(...)`, which carry their own waiting.
        """
        return self.page.locator(self.selector_for(element_name))

    async def locate(self, element_name: str, timeout: Optional[int] = None) -> Locator:
        """
        Wait for the stable identifier to be visible.

        Args:
            element_name: Element key in the locator map
            timeout: Timeout in milliseconds, command timeout when omitted

        Returns:
            Playwright Locator for the element

        Raises:
            ElementNotFoundError: When the identifier is not visible in time
        """
        selector = self.selector_for(element_name)
        timeout = self.timeout if timeout is None else timeout

        locator = self.page.locator(selector).first
        try:
            await locator.wait_for(state="visible", timeout=timeout)
        except Exception as e:
            missing = await self._diagnose(element_name, selector)
            error_msg = f"❌ '{element_name}' not visible: {selector} -> {str(e)[:80]}"
            if missing.candidates:
                error_msg += f"\n  Identifier may have drifted to: {', '.join(missing.candidates)}"
            logger.error(error_msg)
            raise ElementNotFoundError(error_msg) from e

        logger.debug(f"✅ Element '{element_name}' found: {selector}")
        return locator

    async def _diagnose(self, element_name: str, selector: str) -> MissingIdentifier:
        hints = [f"[data-testid='{element_name}']", *self.DRIFT_HINTS.get(element_name, [])]
        candidates = []
        for hint in hints:
            try:
                if await self.page.locator(hint).count():
                    candidates.append(hint)
            except Exception as e:
                logger.debug(f"Drift hint {hint} not evaluated: {e}")

        missing = MissingIdentifier(element_name, selector, candidates)
        self._missing[element_name] = missing
        return missing

    async def click(self, element_name: str, timeout: Optional[int] = None) -> None:
        locator = await self.locate(element_name, timeout=timeout)
        await locator.click()

    async def fill(self, element_name: str, value: str, timeout: Optional[int] = None) -> None:
        """Clear the input and type `value`; an empty value leaves it empty."""
        locator = await self.locate(element_name, timeout=timeout)
        await locator.fill(value)

    async def is_visible(self, element_name: str, timeout: int = 2000) -> bool:
        """
        Check if the stable identifier becomes visible within `timeout`.

        An absent element is an expected answer here, so it is not recorded
        as missing.
        """
        locator = self.page.locator(self.selector_for(element_name)).first
        try:
            await locator.wait_for(state="visible", timeout=timeout)
        except Exception:
            return False
        return await locator.is_visible()

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists identifiers that were missing during the scenario and where
        similar markup was found. Empty when nothing was missing.
        """
        if not self._missing:
            return ""

        report_lines = [
            "⚠️ Locator Health Report - Missing Stable Identifiers:",
            "",
        ]

        for element_name, missing in self._missing.items():
            report_lines.append(f"  [{element_name}] {missing.selector}")
            if missing.candidates:
                report_lines.append(f"    Similar markup: {', '.join(missing.candidates)}")
            else:
                report_lines.append("    No similar markup found")
            report_lines.append("")

        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "MissingIdentifier",
    "STABLE_IDS",
    "STABLE_ID_ATTRIBUTE",
    "stable_id_selector",
]
