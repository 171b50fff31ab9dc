"""
================================================================================
UI Verification Framework
================================================================================

Playwright-based, translation-aware page object framework.

Components:
    - languages: Language enum, locale codes, viewport presets
    - translations: translation store and fallback resolver
    - partitioning: split long text lists into scroll-sized groups
    - dom_utils: scrollable ancestor finder, iframe body accessor
    - assertions: batch visibility assertions
    - network_aliases: named waits on background responses
    - geolocation: country of the current network origin
    - page_base: base page object with URL templating
    - browser_manager: browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .assertions import VisibilityAssertionError, VisibilityAssertions
from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError
from .languages import DEFAULT_LANGUAGE, LANGUAGE_CODES, Language, Viewport, VIEWPORTS
from .page_base import BasePage, build_url
from .partitioning import split_into_parts
from .translations import TranslationStore, TranslationStoreError, Translator

__all__ = [
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_LANGUAGE",
    "LANGUAGE_CODES",
    "Language",
    "TranslationStore",
    "TranslationStoreError",
    "Translator",
    "Viewport",
    "VIEWPORTS",
    "VisibilityAssertionError",
    "VisibilityAssertions",
    "build_url",
    "split_into_parts",
]
