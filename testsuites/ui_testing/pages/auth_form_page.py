"""
================================================================================
Authentication Form Page Object (Async / Playwright)
================================================================================

Shared shape of the sign-up and sign-in pages: an email input, a password
input, a submit control and inline validation errors beneath the inputs.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.page_base import BasePage


class AuthFormPage(BasePage):
    """Email/password form (async). Subclasses set URL_PATH and SUBMIT_BUTTON."""

    SUBMIT_BUTTON: str = ""

    async def fill_form(self, email: str, password: str) -> None:
        """Replace both field values; empty strings leave the field empty."""
        await self.fill("email-input", email)
        await self.fill("password-input", password)

    async def submit(self) -> None:
        await self.click(self.SUBMIT_BUTTON)

    async def submit_with(self, email: str, password: str) -> None:
        """Fill the form and activate the submit control."""
        with allure.step(f"Submit {self.PAGE_TITLE} form as '{email}'"):
            logger.info(f"Submitting {self.PAGE_TITLE} form (email={email!r})")
            await self.fill_form(email, password)
            await self.submit()

    async def expect_on_page(self) -> None:
        """Assert the browser is still on this form's route."""
        await self.expect_url_contains(self.URL_PATH)

    async def expect_field_errors(self) -> None:
        """Both inline validation errors are shown."""
        await self.expect_visible("email-error")
        await self.expect_visible("password-error")
