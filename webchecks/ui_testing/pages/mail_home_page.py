"""
================================================================================
Mail Home Page Object (Async / Playwright)
================================================================================

Landing page of the webmail property, reached from the search home page.

================================================================================
"""

from __future__ import annotations

from typing import Dict, List

import allure

from webchecks.ui_testing.framework.languages import Language
from webchecks.ui_testing.framework.page_base import BasePage, css_quote
from webchecks.ui_testing.framework.translations import LanguageLike


# Texts checked through selectors, or rendered only in collapsed menus
NOT_CHECKED_AS_CONTENT = (
    "logo_alt",
    "sign_in",
    "create_account",
    "for_work",
    "header_create_account",
    "header_for_work",
)

# The english landing page lives under the en-US locale
ENGLISH_LOCALE_OVERRIDE = "en-US"


class MailHomePage(BasePage):
    """Mail landing page object (async)."""

    URL_TEMPLATE = "https://workspace.google.com/intl/{langCode}/gmail/"
    PAGE_TITLE = "Gmail"

    def get_selectors(self, language: LanguageLike = None) -> Dict[str, str]:
        t = self.section(language, "mail_page")
        return {
            "create_account_button": f"gws-dropdown-button:has-text({css_quote(t['create_account'])})",
            "sign_in_button": f"a:has-text({css_quote(t['sign_in'])})",
            "header_create_account": f"[aria-label={css_quote(t['header_create_account'])}]",
            "cookie_bar": ".glue-cookie-notification-bar",
            "link_label": ".link__label",
            "logo": f"img[alt={css_quote(t['logo_alt'])}]",
        }

    def expected_url(self, language: LanguageLike = None) -> str:
        """URL the page must be on after navigating to it in ``language``."""
        parsed = Language.parse(language)
        override = ENGLISH_LOCALE_OVERRIDE if parsed in (None, Language.ENGLISH) else None
        return self.get_base_url(parsed, override)

    def expected_contents(self, language: LanguageLike = None) -> List[str]:
        return [
            value for key, value in self.section(language, "mail_page").items()
            if key not in NOT_CHECKED_AS_CONTENT
        ]

    @allure.step("Assert mail navigation")
    async def assert_navigation(self, language: LanguageLike = None) -> "MailHomePage":
        """
        Assert URL, title, translated texts and key elements of the landing page.

        Args:
            language: Expected page language (default when None)
        """
        await self.assert_url_contains(self.expected_url(language))
        await self.assert_title_contains(self.PAGE_TITLE)

        checks = self.visibility()
        await checks.is_visible_content_multiple(self.expected_contents(language))
        await checks.is_visible_element_multiple(self.get_selectors(language).values())
        return self


__all__ = ["MailHomePage"]
