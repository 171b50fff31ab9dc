"""
================================================================================
Network Response Aliases
================================================================================

Named waits on background responses.

Register an alias for a URL pattern *before* the navigation that triggers the
request, then wait on the alias once the page is expected to have sent it:

    >>> aliases = RequestAliases(page)
    >>> aliases.register("loadFinishedRequest", "**/gen_204**")
    >>> await home.visit(Language.POLISH)
    >>> await aliases.wait("loadFinishedRequest")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
import fnmatch
from typing import Any, Callable, Dict, Mapping, Optional, Pattern, Union

from loguru import logger
from playwright.async_api import Response


UrlPattern = Union[str, Pattern[str]]

LOAD_FINISHED_ALIAS = "loadFinishedRequest"


def url_matches(url: str, pattern: UrlPattern) -> bool:
    """Match a URL against a glob string or a compiled regex."""
    if isinstance(pattern, str):
        return fnmatch.fnmatchcase(url, pattern)
    return pattern.search(url) is not None


class RequestAliases:
    """
    Aliases for responses the page is expected to receive.

    Each alias resolves on the first response matching its pattern after
    registration; later matches are ignored.
    """

    def __init__(self, page: Any, timeout: float = 15000) -> None:
        """
        Args:
            page: Playwright Page emitting ``response`` events
            timeout: Default wait timeout in milliseconds
        """
        self.page = page
        self.timeout = timeout
        self._pending: Dict[str, "asyncio.Future[Response]"] = {}

    def register(self, alias: str, pattern: UrlPattern) -> None:
        """Arm an alias; re-registering replaces the previous one."""
        future: "asyncio.Future[Response]" = asyncio.get_running_loop().create_future()

        def on_response(response: Response) -> None:
            if future.done() or not url_matches(response.url, pattern):
                return
            logger.debug(f"Alias '{alias}' matched: {response.url}")
            future.set_result(response)
            self.page.remove_listener("response", on_response)

        self._pending[alias] = future
        self.page.on("response", on_response)
        logger.debug(f"Registered alias '{alias}' for {pattern}")

    def register_many(self, patterns: Mapping[str, UrlPattern]) -> None:
        for alias, pattern in patterns.items():
            self.register(alias, pattern)

    async def wait(self, alias: str, timeout: Optional[float] = None) -> Response:
        """
        Wait until the aliased response has been received.

        Args:
            alias: Registered alias name
            timeout: Timeout in milliseconds (defaults to the instance timeout)

        Returns:
            The matching Playwright Response

        Raises:
            KeyError: Alias was never registered
            asyncio.TimeoutError: No matching response in time
        """
        if alias not in self._pending:
            raise KeyError(f"Alias '{alias}' is not registered")
        timeout = self.timeout if timeout is None else timeout
        response = await asyncio.wait_for(
            asyncio.shield(self._pending[alias]), timeout=timeout / 1000
        )
        logger.debug(f"Alias '{alias}' resolved with status {response.status}")
        return response


def intercepts_for(config: Any, page_name: str) -> Dict[str, str]:
    """Alias -> pattern map for a page from the ``intercepts`` config section."""
    return dict(config.get_section("intercepts").get(page_name) or {})


__all__ = [
    "RequestAliases",
    "LOAD_FINISHED_ALIAS",
    "url_matches",
    "intercepts_for",
]
