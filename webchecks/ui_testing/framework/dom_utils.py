"""
================================================================================
DOM Utilities
================================================================================

Helpers that need more than a selector:

    - find_scrollable_parent: nearest ancestor that can actually scroll
    - get_frame_body: content root of an iframe once it has been populated
    - clean_state_reload: drop cookies and local storage, then reload

DOM traversal goes through a `DomInspector`, so the ancestor walk can run
against a fake tree in unit tests and against Playwright element handles in
a browser.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Tuple, TypeVar

import allure
from loguru import logger
from playwright.async_api import ElementHandle, Locator, Page


N = TypeVar("N")

SCROLLABLE_OVERFLOW = ("auto", "scroll")

# Matches once the frame body has any child node, text included
FRAME_CONTENT = "body:not(:empty)"


class DomInspector(Protocol[N]):
    """DOM queries needed to walk the ancestor chain of a node."""

    async def parent_of(self, node: N) -> Optional[N]:
        ...

    async def is_document_body(self, node: N) -> bool:
        ...

    async def overflow_y(self, node: N) -> str:
        ...

    async def scroll_metrics(self, node: N) -> Tuple[int, int]:
        """Return ``(scrollHeight, clientHeight)``."""
        ...

    async def scroll_to_bottom(self, node: N) -> None:
        ...


class PlaywrightDomInspector:
    """DomInspector backed by Playwright element handles."""

    async def parent_of(self, node: ElementHandle) -> Optional[ElementHandle]:
        handle = await node.evaluate_handle("el => el.parentElement")
        return handle.as_element()

    async def is_document_body(self, node: ElementHandle) -> bool:
        return await node.evaluate("el => el === document.body || el === document.documentElement")

    async def overflow_y(self, node: ElementHandle) -> str:
        return await node.evaluate("el => getComputedStyle(el).overflowY")

    async def scroll_metrics(self, node: ElementHandle) -> Tuple[int, int]:
        scroll_height, client_height = await node.evaluate(
            "el => [el.scrollHeight, el.clientHeight]"
        )
        return int(scroll_height), int(client_height)

    async def scroll_to_bottom(self, node: ElementHandle) -> None:
        await node.evaluate("el => el.scrollTo(0, el.scrollHeight)")


async def is_scrollable(node: N, inspector: DomInspector[N]) -> bool:
    """True when overflow-y allows scrolling and the content overflows."""
    if await inspector.overflow_y(node) not in SCROLLABLE_OVERFLOW:
        return False
    scroll_height, client_height = await inspector.scroll_metrics(node)
    return scroll_height > client_height


async def find_scrollable_parent(node: Optional[N], inspector: DomInspector[N]) -> Optional[N]:
    """
    Find the closest scrollable container of a node.

    The walk starts at ``node`` and follows parent elements upward. It stops
    at ``document.body``, which is never returned.

    Args:
        node: Starting element
        inspector: DOM query capability

    Returns:
        Nearest scrollable node, or None when the chain has none
    """
    current = node
    while current is not None and not await inspector.is_document_body(current):
        if await is_scrollable(current, inspector):
            return current
        current = await inspector.parent_of(current)

    logger.info("No scrollable parent found")
    return None


async def scroll_nearest_container_to_bottom(
    node: Optional[N],
    inspector: DomInspector[N],
) -> bool:
    """
    Scroll the closest scrollable container of ``node`` to its bottom.

    Returns:
        False when nothing could be scrolled (the layout fits the viewport)
    """
    container = await find_scrollable_parent(node, inspector)
    if container is None:
        return False
    await inspector.scroll_to_bottom(container)
    return True


async def get_frame_body(scope: Any, selector: str, timeout: float = 10000) -> Locator:
    """
    Return the ``body`` of an iframe once its document has content.

    The frame's document loads after the host element appears, so this
    waits for the host to attach and then until the frame body is no
    longer empty (any child node, text included). Playwright's
    TimeoutError propagates.

    Args:
        scope: Page or Frame containing the iframe
        selector: Selector of the iframe element
        timeout: Timeout in milliseconds for each wait

    Returns:
        Locator of the frame's body

    Raises:
        ValueError: The selector matched an element that is not a frame
    """
    with allure.step(f"Get frame body: {selector}"):
        host = await scope.wait_for_selector(selector, state="attached", timeout=timeout)
        frame = await host.content_frame()
        if frame is None:
            raise ValueError(f"Element '{selector}' is not a frame")

        # Locator waits keep polling across the frame's own navigations
        await frame.locator(FRAME_CONTENT).first.wait_for(state="attached", timeout=timeout)
        logger.debug(f"Frame populated: {selector}")
        return frame.locator("body")


async def clean_state_reload(page: Page) -> None:
    """Clear cookies and local storage, then reload the page."""
    with allure.step("Clean state reload"):
        await page.context.clear_cookies()
        await page.evaluate("() => window.localStorage.clear()")
        await page.reload()


__all__ = [
    "DomInspector",
    "PlaywrightDomInspector",
    "find_scrollable_parent",
    "scroll_nearest_container_to_bottom",
    "get_frame_body",
    "clean_state_reload",
]
