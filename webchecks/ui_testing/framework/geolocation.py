"""
================================================================================
Geolocation Client
================================================================================

Looks up the country of the current network origin. Some home page content
(the localized country name in the footer, the language promotion line)
depends on it.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional

import allure
import httpx
from loguru import logger


DEFAULT_GEOLOCATION_URL = "https://ipwho.is/"


class GeolocationError(Exception):
    """Raised when the geolocation service does not return a country."""
    pass


class GeolocationClient:
    """
    Async client for an IP geolocation service.

    Usage:
        >>> client = GeolocationClient()
        >>> await client.get_country()
        'Poland'
    """

    def __init__(
        self,
        url: str = DEFAULT_GEOLOCATION_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            url: Service endpoint returning JSON with a ``country`` field
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.url = url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: Any) -> "GeolocationClient":
        return cls(
            url=config.get("geolocation.url", DEFAULT_GEOLOCATION_URL),
            timeout=float(config.get("geolocation.timeout", 10.0)),
        )

    @allure.step("Get country from current IP")
    async def get_country(self) -> str:
        """
        Returns:
            Country name reported for the current IP (e.g. "Poland")

        Raises:
            GeolocationError: Non-200 response or no country in the body
        """
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        ) as client:
            response = await client.get(self.url)

        if response.status_code != 200:
            raise GeolocationError(
                f"Geolocation request failed: {response.status_code} {self.url}"
            )

        country = response.json().get("country")
        if not country:
            raise GeolocationError(f"Geolocation response has no country: {response.text[:200]}")

        logger.info(f"Current IP country: {country}")
        return country


__all__ = [
    "GeolocationClient",
    "GeolocationError",
    "DEFAULT_GEOLOCATION_URL",
]
