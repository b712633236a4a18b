"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the portal base URL
    - Stable-identifier element interaction
    - Web-first assertions (visibility, text, URL)
    - Screenshot and failure diagnostics

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page, Response, expect

from .smart_locator import SmartLocator


# Default output directory for screenshots
SCREENSHOT_DIR = Path("reports") / "screenshots"

# Backend calls worth keeping for failure diagnosis
CAPTURED_URL_MARKERS = ("/api/", "identitytoolkit", "securetoken")


def contains_text(text: str) -> "re.Pattern[str]":
    """
    Substring pattern for `to_contain_text` / `to_have_url`.

    Matching deliberately ignores case: "Email already in use" also
    matches "email already in use", unlike a case-sensitive contains.
    """
    return re.compile(re.escape(text), re.IGNORECASE)


class ResponseRecorder:
    """
    Records the status of recent backend responses of one page.

    Bodies are never read (they carry tokens). Register one recorder per
    page; page objects sharing a page share its recorder.
    """

    def __init__(self, page: Page, limit: int = 20):
        self.limit = limit
        self.records: List[Dict[str, Any]] = []
        page.on("response", self.capture)

    def capture(self, response: Response) -> None:
        if not any(marker in response.url for marker in CAPTURED_URL_MARKERS):
            return
        self.records.append({
            "timestamp": datetime.now().isoformat(),
            "method": response.request.method,
            "url": response.url.split("?")[0],
            "status": response.status,
        })
        if len(self.records) > self.limit:
            self.records.pop(0)


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class SignInPage(BasePage):
            URL_PATH = "/signin"

            async def submit(self, email: str, password: str):
                await self.fill("email-input", email)
                await self.fill("password-input", password)
                await self.click("signin-button")
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str,
        timeout: int = 10000,
        screenshot_dir: Optional[Path] = None,
        smart: Optional[SmartLocator] = None,
        responses: Optional[ResponseRecorder] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL of the portal
            timeout: Command timeout in milliseconds for element waits/assertions
            screenshot_dir: Where screenshots are written
            smart: Locator shared with other page objects on the same page
            responses: Response recorder shared with other page objects on the same page
        """
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.screenshot_dir = Path(screenshot_dir or SCREENSHOT_DIR)
        self.smart = smart or SmartLocator(page, timeout=timeout)
        self.responses = responses or ResponseRecorder(page)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        await self.navigate_to(self.URL_PATH, wait_for=wait_for)

    async def navigate_to(self, path: str, wait_for: str = "load") -> None:
        """Navigate to a path under the base URL."""
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Visit {path}"):
            await self.page.goto(full_url, wait_until=wait_for)
            logger.debug(f"Navigated to: {full_url}")

    # =========================================================================
    # Element Interactions
    # =========================================================================

    def element(self, element_name: str) -> Locator:
        """Stable-identifier locator, for assertions."""
        return self.smart.primary(element_name)

    async def click(self, element_name: str) -> None:
        with allure.step(f"Click: {element_name}"):
            await self.smart.click(element_name)

    async def fill(self, element_name: str, value: str) -> None:
        """Clear the input and type `value` (password values are masked in the report)."""
        shown = "*" * len(value) if "password" in element_name.lower() else value
        with allure.step(f"Type into {element_name}: '{shown}'"):
            await self.smart.fill(element_name, value)

    async def is_visible(self, element_name: str, timeout: int = 2000) -> bool:
        return await self.smart.is_visible(element_name, timeout)

    # =========================================================================
    # Assertions
    # =========================================================================

    async def expect_visible(self, element_name: str) -> None:
        with allure.step(f"Assert {element_name} is visible"):
            await expect(self.element(element_name).first).to_be_visible(timeout=self.timeout)

    async def expect_text(self, element_name: str, text: str) -> None:
        """Assert the element is visible and contains `text`, ignoring case (see `contains_text`)."""
        with allure.step(f"Assert {element_name} contains '{text}'"):
            locator = self.element(element_name).first
            await expect(locator).to_be_visible(timeout=self.timeout)
            await expect(locator).to_contain_text(contains_text(text), timeout=self.timeout)

    async def expect_url_contains(self, fragment: str) -> None:
        with allure.step(f"Assert URL includes '{fragment}'"):
            await expect(self.page).to_have_url(contains_text(fragment), timeout=self.timeout)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        self.screenshot_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        safe_name = re.sub(r"[^\w.-]+", "_", name)
        filepath = self.screenshot_dir / f"{safe_name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> Path:
        """
        Capture debugging information on scenario failure.

        Saves:
            - Full-page screenshot
            - Current URL
            - Recent backend responses
        """
        with allure.step("Capture failure details"):
            path = await self.screenshot(f"failure_{test_name}", full_page=True)

            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT
            )

            if self.responses.records:
                allure.attach(
                    json.dumps(self.responses.records[-10:], indent=2),
                    name="Recent Backend Responses",
                    attachment_type=allure.attachment_type.JSON
                )
        return path


__all__ = [
    "BasePage",
    "ResponseRecorder",
    "contains_text",
]
