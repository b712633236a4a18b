"""
================================================================================
Dashboard Page Object (Async / Playwright)
================================================================================

Authenticated landing page. The user menu is the marker of a signed-in
session and hosts the sign-out control.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.page_base import BasePage


class DashboardPage(BasePage):
    """Dashboard page object (async)."""

    URL_PATH = "/dashboard"
    PAGE_TITLE = "Dashboard"

    @allure.step("Open dashboard directly")
    async def open(self) -> "DashboardPage":
        await self.navigate()
        return self

    @allure.step("Verify dashboard loaded")
    async def expect_loaded(self) -> None:
        await self.expect_url_contains(self.URL_PATH)

    @allure.step("Verify user is signed in")
    async def expect_signed_in(self) -> None:
        await self.expect_loaded()
        await self.expect_visible("user-menu")

    async def expect_success_message(self, text: str) -> None:
        await self.expect_text("success-message", text)

    async def has_user_menu(self, timeout: int = 2000) -> bool:
        """Non-failing probe for an authenticated session."""
        return await self.is_visible("user-menu", timeout=timeout)

    @allure.step("Sign out via user menu")
    async def sign_out(self) -> None:
        await self.click("user-menu")
        await self.click("signout-button")
        logger.info("Signed out")
