"""
================================================================================
Sign-Up Page Object (Async / Playwright)
================================================================================
"""

from __future__ import annotations

from testsuites.ui_testing.pages.auth_form_page import AuthFormPage


class SignUpPage(AuthFormPage):
    """Sign-up page object (async)."""

    URL_PATH = "/signup"
    PAGE_TITLE = "Sign Up"
    SUBMIT_BUTTON = "signup-button"

    async def expect_email_error(self, text: str = "valid email") -> None:
        """Email error shown, containing `text` in any letter case (deliberately not case-sensitive)."""
        await self.expect_text("email-error", text)

    async def expect_password_error(self) -> None:
        await self.expect_visible("password-error")

    async def expect_rejected(self, message: str) -> None:
        """Form-level error (e.g. duplicate account) is displayed."""
        await self.expect_text("error-message", message)
