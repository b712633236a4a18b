"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Single browser instance per run
    - Fresh context per scenario (isolated cookies / storage)
    - Command and page-load timeouts applied to every context
    - Artifact folders (screenshots, videos) prepared per run
    - Portal reachability preflight

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import shutil
from typing import Any, Dict, Optional

import httpx
from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Playwright,
)

from .config_loader import UiSettings


class BrowserManager:
    """
    Manages the browser instance and per-scenario contexts.

    Usage:
        manager = BrowserManager(settings)
        await manager.start()
        context = await manager.new_context()
        page = await context.new_page()
        ...
        await manager.close()
    """

    # Chromium-only launch flags
    CHROMIUM_ARGS = [
        "--ignore-certificate-errors",
    ]

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "ignore_https_errors": True,
    }

    def __init__(self, settings: UiSettings):
        """
        Initialize browser manager.

        Args:
            settings: Browser type, headless mode, viewport, timeouts, artifacts
        """
        self.settings = settings

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: list[BrowserContext] = []

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()

        browser_launcher = getattr(self._playwright, self.settings.browser)

        launch_options: Dict[str, Any] = {
            "headless": self.settings.headless,
            "slow_mo": self.settings.slow_mo,
        }
        if self.settings.browser == "chromium":
            launch_options["args"] = list(self.CHROMIUM_ARGS)

        try:
            self._browser = await browser_launcher.launch(**launch_options)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise

        logger.debug(
            f"Browser started: {self.settings.browser} "
            f"(headless={self.settings.headless}, slow_mo={self.settings.slow_mo})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    def context_options(self, **options: Any) -> Dict[str, Any]:
        """Context options built from settings, overridable per call."""
        context_options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "viewport": self.settings.viewport,
            "base_url": self.settings.base_url,
        }
        if self.settings.video:
            context_options["record_video_dir"] = str(self.settings.videos_folder)
            context_options["record_video_size"] = self.settings.viewport
        context_options.update(options)
        return context_options

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext with command / page-load timeouts applied
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(**self.context_options(**options))
        context.set_default_timeout(self.settings.default_command_timeout)
        context.set_default_navigation_timeout(self.settings.page_load_timeout)
        self._contexts.append(context)

        return context

    async def close_context(self, context: BrowserContext) -> None:
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()


# =============================================================================
# Convenience Functions
# =============================================================================

def prepare_artifact_dirs(settings: UiSettings) -> None:
    """
    Create screenshot/video folders, emptying them first when
    `trash_assets_before_runs` is set.
    """
    folders = [settings.screenshots_folder]
    if settings.video:
        folders.append(settings.videos_folder)

    for folder in folders:
        if settings.trash_assets_before_runs and folder.exists():
            shutil.rmtree(folder)
            logger.debug(f"Trashed previous artifacts: {folder}")
        folder.mkdir(parents=True, exist_ok=True)


def probe_portal(base_url: str, timeout: float = 10.0) -> Optional[str]:
    """
    Check the portal answers HTTP at all.

    Any HTTP status counts as reachable; only transport errors do not.

    Returns:
        None when reachable, otherwise a human-readable reason
    """
    try:
        response = httpx.get(base_url, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as e:
        return f"{type(e).__name__}: {e}"

    logger.debug(f"Portal preflight: {base_url} -> {response.status_code}")
    return None


__all__ = [
    "BrowserManager",
    "prepare_artifact_dirs",
    "probe_portal",
]
