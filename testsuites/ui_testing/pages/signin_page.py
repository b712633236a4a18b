"""
================================================================================
Sign-In Page Object (Async / Playwright)
================================================================================

The sign-in page doubles as the landing route for unauthenticated access to
protected pages, so it also exposes a "signed out" check.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.pages.auth_form_page import AuthFormPage


class SignInPage(AuthFormPage):
    """Sign-in page object (async)."""

    URL_PATH = "/signin"
    PAGE_TITLE = "Sign In"
    SUBMIT_BUTTON = "signin-button"

    async def expect_rejected(self, message: str) -> None:
        """Error message shown and the browser stayed on /signin."""
        await self.expect_text("error-message", message)
        await self.expect_on_page()

    @allure.step("Verify sign-in form is displayed")
    async def expect_form_displayed(self) -> None:
        await self.expect_visible("signin-form")

    @allure.step("Verify browser is signed out")
    async def expect_signed_out(self) -> None:
        await self.expect_on_page()
        await self.expect_visible("signin-button")
