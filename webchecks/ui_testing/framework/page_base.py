"""
================================================================================
Base Page Object
================================================================================

Foundation class for the translation-aware Page Object Model.

Provides:
    - URL construction from a ``{langCode}`` template and a language
    - Navigation
    - Translation lookups with default-language fallback
    - URL / title / visibility assertions

Page objects keep no per-test state: the language is passed to every call
and selectors are rebuilt from the translations each time, so one instance
can serve a whole test that switches languages.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Optional

import allure
from loguru import logger
from playwright.async_api import Page, expect

from .assertions import VisibilityAssertions
from .config_loader import ConfigLoader
from .dom_utils import PlaywrightDomInspector, clean_state_reload
from .languages import DEFAULT_LANGUAGE, LANGUAGE_CODES, Language
from .translations import LanguageLike, Translator


LANG_PLACEHOLDER = "{langCode}"

DEFAULT_BASE_URL = "https://www.google.com"
DEFAULT_TIMEOUT_MS = 10000


def css_quote(value: str) -> str:
    """Quote a translated string for use inside a CSS attribute or :has-text() selector."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_url(
    template: str,
    language: LanguageLike = None,
    locale_override: Optional[str] = None,
) -> str:
    """
    Substitute a locale code into a URL template.

    The override wins; otherwise the language (default when None) is mapped
    to its locale code. Only the first placeholder is replaced.

    Examples:
        >>> build_url("/imghp?hl={langCode}", "polish")
        '/imghp?hl=pl'
        >>> build_url("/imghp?hl={langCode}", None, "en-US")
        '/imghp?hl=en-US'
    """
    if locale_override is not None:
        code = locale_override
    else:
        code = LANGUAGE_CODES[Language.parse(language) or DEFAULT_LANGUAGE]
    return template.replace(LANG_PLACEHOLDER, code, 1)


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class ImagesHomePage(BasePage):
            URL_TEMPLATE = "/imghp?hl={langCode}"

            def get_selectors(self, language=None):
                t = self.section(language, "images_page")
                return {"search_input": f'input[aria-label="{t["search_input_aria_label"]}"]'}
    """

    # Override in subclasses
    URL_TEMPLATE: str = "/?hl={langCode}"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        translator: Translator,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            translator: Resolver over the translation store
            base_url: Base URL for relative templates (``ui.base_url`` when None)
            timeout: Default timeout in milliseconds (``ui.timeout_ms`` when None)
        """
        self.page = page
        self.translator = translator
        if base_url is None or timeout is None:
            config = ConfigLoader()
            if base_url is None:
                base_url = config.get("ui.base_url", DEFAULT_BASE_URL)
            if timeout is None:
                timeout = config.get("ui.timeout_ms", DEFAULT_TIMEOUT_MS)
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self.dom = PlaywrightDomInspector()

    # =========================================================================
    # URLs and navigation
    # =========================================================================

    def get_base_url(
        self,
        language: LanguageLike = None,
        locale_override: Optional[str] = None,
    ) -> str:
        """Templated URL of this page for a language."""
        return build_url(self.URL_TEMPLATE, language, locale_override)

    def absolute_url(
        self,
        language: LanguageLike = None,
        locale_override: Optional[str] = None,
    ) -> str:
        """Templated URL joined onto ``base_url`` when the template is relative."""
        url = self.get_base_url(language, locale_override)
        if re.match(r"^https?://", url):
            return url
        return f"{self.base_url}{url}"

    async def visit(self, language: LanguageLike = None, wait_for: str = "load") -> "BasePage":
        """
        Navigate to this page in a language.

        Args:
            language: Page language (default when None)
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        url = self.absolute_url(language)
        with allure.step(f"Visit {url}"):
            await self.page.goto(url, wait_until=wait_for, timeout=self.timeout * 3)
            logger.debug(f"Navigated to: {url}")
        return self

    async def clean_state_reload(self) -> "BasePage":
        await clean_state_reload(self.page)
        return self

    # =========================================================================
    # Translations
    # =========================================================================

    def section(self, language: LanguageLike, group: str) -> Dict[str, str]:
        """All translations of a group for a language, with fallback."""
        return self.translator.section(language, group)

    def text(self, language: LanguageLike, group: str, key: str) -> str:
        return self.translator.text(language, group, key)

    # =========================================================================
    # Assertions
    # =========================================================================

    def visibility(self, scope: Any = None) -> VisibilityAssertions:
        """Visibility assertions on the page or on a narrower scope."""
        return VisibilityAssertions(scope if scope is not None else self.page, self.timeout)

    async def assert_url_contains(self, fragment: str) -> None:
        with allure.step(f"Assert URL contains: {fragment}"):
            await expect(self.page).to_have_url(re.compile(re.escape(fragment)), timeout=self.timeout)

    async def assert_title(self, title: str) -> None:
        with allure.step(f"Assert title: {title}"):
            await expect(self.page).to_have_title(title, timeout=self.timeout)

    async def assert_title_contains(self, fragment: str) -> None:
        with allure.step(f"Assert title contains: {fragment}"):
            await expect(self.page).to_have_title(re.compile(re.escape(fragment)), timeout=self.timeout)

    async def assert_svgs_visible(self, indices: Iterable[int]) -> None:
        """
        Assert that the svg elements at the given document positions are visible.

        Used where icons have no more reliable selector than their position.
        """
        indices = list(indices)
        with allure.step(f"Assert svgs {indices} are visible"):
            svgs = self.page.locator("svg")
            for index in indices:
                await expect(svgs.nth(index)).to_be_visible(timeout=self.timeout)


__all__ = [
    "BasePage",
    "build_url",
    "css_quote",
    "LANG_PLACEHOLDER",
]
