"""
================================================================================
Home Page Object (Async / Playwright)
================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.page_base import BasePage


class HomePage(BasePage):
    """Application root with the sign-up / sign-in navigation links."""

    URL_PATH = "/"
    PAGE_TITLE = "Home"

    @allure.step("Open application root")
    async def open(self) -> "HomePage":
        await self.navigate()
        return self

    async def follow(self, link: str, expected_path: str) -> None:
        """Activate a navigation link and assert the route changed to `expected_path`."""
        await self.click(link)
        await self.expect_url_contains(expected_path)
