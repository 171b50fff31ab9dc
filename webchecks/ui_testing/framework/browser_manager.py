"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI verification runs.

Features:
    - One browser instance per session
    - Isolated contexts per test (clean cookies and storage)
    - Viewport presets applied per context
    - Browser type and headless mode from configuration

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config_loader import ConfigLoader
from .languages import VIEWPORTS, Viewport


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page(viewport=VIEWPORTS[2])
            await page.goto("https://www.google.com")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": VIEWPORTS[0].as_playwright(),
        "ignore_https_errors": True,
    }

    SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        config: Optional[ConfigLoader] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (``ui.headless`` when None)
            browser_type: 'chromium', 'firefox' or 'webkit' (``ui.browser`` when None)
            config: Configuration source
        """
        config = config or ConfigLoader()
        self.headless = config.get("ui.headless", True) if headless is None else headless
        self.browser_type = browser_type or config.get("ui.browser", "chromium")
        if self.browser_type not in self.SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.browser_type}', "
                f"expected one of {self.SUPPORTED_BROWSERS}"
            )

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: list[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    async def start(self) -> Browser:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )
        return self._browser

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

    async def new_context(
        self,
        viewport: Optional[Viewport] = None,
        **options: Any,
    ) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            viewport: Viewport preset (desktop when None)
            **options: Additional context options
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        if viewport is not None:
            context_options["viewport"] = viewport.as_playwright()

        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        viewport: Optional[Viewport] = None,
        **context_options: Any,
    ) -> Page:
        """Create new page in new or existing context."""
        if context is None:
            context = await self.new_context(viewport=viewport, **context_options)

        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
]
