"""
================================================================================
Visibility Assertions
================================================================================

Batch visibility checks over texts and selectors.

Each item of a batch is checked on its own, in order, with Playwright's
auto-retrying `expect`. The first item that is not in the expected state
fails the batch with a `VisibilityAssertionError` naming the item and the
expected state.

Usage:
    >>> checks = VisibilityAssertions(page, timeout=8000)
    >>> await checks.is_visible_content_multiple(["Privacy", "Terms"])
    >>> await checks.is_not_visible_element("#cookie-banner")

    # Scoped to an iframe body
    >>> body = await get_frame_body(page, "iframe[name='app']")
    >>> await VisibilityAssertions(body).is_visible_content("Maps")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, expect


DEFAULT_ASSERT_TIMEOUT = 10000

VISIBLE_ONLY = "visible=true"


class VisibilityAssertionError(AssertionError):
    """
    Raised when an element or text is not in the expected visibility state.

    Attributes:
        target: Text or selector that failed
        kind: "content" or "element"
        expected: "visible" or "hidden"
    """

    def __init__(self, target: str, kind: str, expected: str, detail: str = "") -> None:
        self.target = target
        self.kind = kind
        self.expected = expected
        message = f"Expected {kind} '{target}' to be {expected}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)


class VisibilityAssertions:
    """
    Visibility assertions bound to a scope.

    The scope is anything exposing ``locator()`` and ``get_by_text()``:
    a Page, a Frame, or a Locator (e.g. an iframe body).
    """

    def __init__(self, scope: Any, timeout: Optional[float] = None) -> None:
        self.scope = scope
        self.timeout = timeout if timeout is not None else DEFAULT_ASSERT_TIMEOUT

    # =========================================================================
    # Locator construction
    # =========================================================================

    def _content_locator(self, text: str) -> Locator:
        # Case-sensitive substring match
        return self.scope.get_by_text(re.compile(re.escape(text))).locator(VISIBLE_ONLY)

    def _element_locator(self, selector: str) -> Locator:
        return self.scope.locator(selector).locator(VISIBLE_ONLY)

    @staticmethod
    def _require(target: Optional[str], kind: str) -> str:
        if not target:
            raise ValueError(f"Cannot assert visibility of an empty {kind}")
        return target

    # =========================================================================
    # Single item checks
    # =========================================================================

    async def _expect_visible(self, locator: Locator, target: str, kind: str) -> None:
        try:
            await expect(locator.first).to_be_visible(timeout=self.timeout)
        except AssertionError as e:
            logger.error(f"{kind.capitalize()} not visible: {target}")
            raise VisibilityAssertionError(target, kind, "visible", str(e)) from e
        logger.debug(f"{kind.capitalize()} visible: {target}")

    async def _expect_hidden(self, locator: Locator, target: str, kind: str) -> None:
        try:
            await expect(locator).to_have_count(0, timeout=self.timeout)
        except AssertionError as e:
            logger.error(f"{kind.capitalize()} unexpectedly visible: {target}")
            raise VisibilityAssertionError(target, kind, "hidden", str(e)) from e
        logger.debug(f"{kind.capitalize()} hidden: {target}")

    async def is_visible_content(self, text: str) -> None:
        """Assert that some visible element contains ``text``."""
        text = self._require(text, "content")
        await self._expect_visible(self._content_locator(text), text, "content")

    async def is_not_visible_content(self, text: str) -> None:
        """Assert that no visible element contains ``text``."""
        text = self._require(text, "content")
        await self._expect_hidden(self._content_locator(text), text, "content")

    async def is_visible_element(self, selector: str) -> None:
        """Assert that at least one element matching ``selector`` is visible."""
        selector = self._require(selector, "element")
        await self._expect_visible(self._element_locator(selector), selector, "element")

    async def is_not_visible_element(self, selector: str) -> None:
        """Assert that no element matching ``selector`` is visible."""
        selector = self._require(selector, "element")
        await self._expect_hidden(self._element_locator(selector), selector, "element")

    # =========================================================================
    # Batch checks
    # =========================================================================

    async def is_visible_content_multiple(self, texts: Iterable[str]) -> None:
        texts = list(texts)
        with allure.step(f"Assert {len(texts)} texts are visible"):
            for text in texts:
                await self.is_visible_content(text)

    async def is_not_visible_content_multiple(self, texts: Iterable[str]) -> None:
        texts = list(texts)
        with allure.step(f"Assert {len(texts)} texts are not visible"):
            for text in texts:
                await self.is_not_visible_content(text)

    async def is_visible_element_multiple(self, selectors: Iterable[str]) -> None:
        selectors = list(selectors)
        with allure.step(f"Assert {len(selectors)} elements are visible"):
            for selector in selectors:
                await self.is_visible_element(selector)

    async def is_not_visible_element_multiple(self, selectors: Iterable[str]) -> None:
        selectors = list(selectors)
        with allure.step(f"Assert {len(selectors)} elements are not visible"):
            for selector in selectors:
                await self.is_not_visible_element(selector)


__all__ = [
    "VisibilityAssertions",
    "VisibilityAssertionError",
    "DEFAULT_ASSERT_TIMEOUT",
]
