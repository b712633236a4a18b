"""
================================================================================
Authentication Commands
================================================================================

Reusable multi-step UI actions so scenarios stay declarative:

    navigate_to_sign_up / navigate_to_sign_in
        root -> navigation link -> route assertion
    sign_up / sign_in
        navigation + form fill + submit (no outcome assertion)
    sign_out
        user menu -> sign-out control (requires a signed-in session)

Each command drives the live portal; nothing here is mocked.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from testsuites.ui_testing.framework.fixture_loader import Credential
from testsuites.ui_testing.framework.page_base import ResponseRecorder
from testsuites.ui_testing.framework.smart_locator import SmartLocator
from testsuites.ui_testing.pages.dashboard_page import DashboardPage
from testsuites.ui_testing.pages.home_page import HomePage
from testsuites.ui_testing.pages.signin_page import SignInPage
from testsuites.ui_testing.pages.signup_page import SignUpPage


DUPLICATE_ACCOUNT_MESSAGE = "Email already in use"


class AuthCommands:
    """
    Command helpers bound to one browser page.

    Usage:
        auth = AuthCommands(page, "https://portal.example.com")
        await auth.sign_in("user@example.com", "Secret123!")
        await auth.dashboard.expect_signed_in()
        await auth.sign_out()
    """

    def __init__(
        self,
        page: Page,
        base_url: str,
        timeout: int = 10000,
        screenshot_dir: Optional[Path] = None,
    ):
        self.page = page
        self.smart = SmartLocator(page, timeout=timeout)
        self.responses = ResponseRecorder(page)

        shared = dict(smart=self.smart, responses=self.responses)
        self.home = HomePage(page, base_url, timeout, screenshot_dir, **shared)
        self.signup = SignUpPage(page, base_url, timeout, screenshot_dir, **shared)
        self.signin = SignInPage(page, base_url, timeout, screenshot_dir, **shared)
        self.dashboard = DashboardPage(page, base_url, timeout, screenshot_dir, **shared)

    # =========================================================================
    # Session state
    # =========================================================================

    async def clear_session(self) -> None:
        """Drop cookies and web storage so the scenario starts signed out."""
        with allure.step("Clear cookies and local storage"):
            await self.page.context.clear_cookies()
            # Storage is per-origin and about:blank has none to clear.
            if self.page.url.startswith("http"):
                await self.page.evaluate(
                    "() => { window.localStorage.clear(); window.sessionStorage.clear(); }"
                )
            logger.debug("Browser session state cleared")

    # =========================================================================
    # Navigation
    # =========================================================================

    @allure.step("Navigate to sign-up")
    async def navigate_to_sign_up(self) -> SignUpPage:
        await self.home.open()
        await self.home.follow("signup-link", SignUpPage.URL_PATH)
        return self.signup

    @allure.step("Navigate to sign-in")
    async def navigate_to_sign_in(self) -> SignInPage:
        await self.home.open()
        await self.home.follow("signin-link", SignInPage.URL_PATH)
        return self.signin

    # =========================================================================
    # Account flows
    # =========================================================================

    async def sign_up(self, email: str, password: str) -> None:
        """Navigate to sign-up and submit. The caller asserts the outcome."""
        with allure.step(f"Sign up as {email}"):
            await self.navigate_to_sign_up()
            await self.signup.submit_with(email, password)

    async def sign_in(self, email: str, password: str) -> None:
        """Navigate to sign-in and submit. The caller asserts the outcome."""
        with allure.step(f"Sign in as {email}"):
            await self.navigate_to_sign_in()
            await self.signin.submit_with(email, password)

    async def sign_out(self) -> None:
        """Open the user menu and sign out. Fails if no session is active."""
        await self.dashboard.sign_out()

    async def sign_out_if_signed_in(self, timeout: int = 5000) -> bool:
        """
        Sign out only when the user menu shows an active session.

        Returns:
            True if a sign-out was performed
        """
        if not await self.dashboard.has_user_menu(timeout=timeout):
            logger.info("No active session, skipping sign-out")
            return False
        await self.sign_out()
        return True

    @allure.step("Ensure account exists")
    async def ensure_account(self, credential: Credential) -> None:
        """
        Register `credential` and leave the browser signed out.

        An existing account from an earlier run is accepted; any other failure
        to reach either outcome propagates.
        """
        await self.sign_up(credential.email, credential.password)

        if await self.sign_out_if_signed_in(timeout=self.signup.timeout):
            logger.info(f"Created account {credential.email}")
            return

        await self.signup.expect_rejected(DUPLICATE_ACCOUNT_MESSAGE)
        logger.info(f"Account {credential.email} already registered")

    async def capture_failure(self, name: str) -> Path:
        """Screenshot, URL and recent backend responses of the current page."""
        return await self.home.capture_failure(name)

    def locator_health_report(self) -> str:
        """Stable identifiers that were missing on this page; empty when none were."""
        return self.smart.get_health_report()


__all__ = [
    "AuthCommands",
    "DUPLICATE_ACCOUNT_MESSAGE",
]
