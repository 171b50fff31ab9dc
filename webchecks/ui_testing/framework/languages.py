"""
================================================================================
Languages and Viewports
================================================================================

Enumerated languages under test, their URL locale codes, and the named
screen-size presets every language is checked against.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class Language(str, Enum):
    """Language identifier used to pick a translation bundle."""

    ENGLISH = "english"
    POLISH = "polish"

    @property
    def locale_code(self) -> str:
        """URL-facing locale code (e.g. ``en-US``)."""
        return LANGUAGE_CODES[self]

    @classmethod
    def parse(cls, value: Union["Language", str, None]) -> Optional["Language"]:
        """
        Coerce a language given as enum, value or name.

        Args:
            value: ``Language.POLISH``, ``"polish"`` or ``"POLISH"``; None passes through

        Returns:
            Matching Language, or None when value is None

        Raises:
            ValueError: Unknown language name
        """
        if value is None or isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for language in cls:
            if normalized in (language.value, language.name.lower()):
                return language
        raise ValueError(f"Unknown language: {value!r}")


LANGUAGE_CODES: Dict[Language, str] = {
    Language.ENGLISH: "en-US",
    Language.POLISH: "pl",
}

DEFAULT_LANGUAGE = Language.ENGLISH


@dataclass(frozen=True)
class Viewport:
    """
    Named screen-size preset.

    Attributes:
        name: Preset name used in test ids (desktop, tablet, mobile)
        width: Viewport width in CSS pixels
        height: Viewport height in CSS pixels
    """
    name: str
    width: int
    height: int

    def as_playwright(self) -> Dict[str, int]:
        """Viewport in the shape Playwright expects."""
        return {"width": self.width, "height": self.height}


VIEWPORTS: List[Viewport] = [
    Viewport("desktop", 1920, 1080),
    Viewport("tablet", 768, 1024),
    Viewport("mobile", 500, 667),
]


def load_viewports(config: Any = None) -> List[Viewport]:
    """
    Read viewport presets from configuration (``ui.viewports``).

    Args:
        config: Object with a ``get(key, default)`` method, e.g. ConfigLoader

    Returns:
        Configured presets, or the built-in VIEWPORTS when none are configured
    """
    if config is None:
        return list(VIEWPORTS)
    raw = config.get("ui.viewports", None)
    if not raw:
        return list(VIEWPORTS)
    return [
        Viewport(name=str(item["name"]), width=int(item["width"]), height=int(item["height"]))
        for item in raw
    ]


__all__ = [
    "Language",
    "LANGUAGE_CODES",
    "DEFAULT_LANGUAGE",
    "Viewport",
    "VIEWPORTS",
    "load_viewports",
]
