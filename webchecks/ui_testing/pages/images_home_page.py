"""
================================================================================
Images Home Page Object (Async / Playwright)
================================================================================

Home page of the image-search property.

================================================================================
"""

from __future__ import annotations

from typing import Dict

import allure

from webchecks.ui_testing.framework.page_base import BasePage, css_quote
from webchecks.ui_testing.framework.translations import LanguageLike


IMAGES_SVG_INDICES = (0, 2, 4, 5)


class ImagesHomePage(BasePage):
    """Image-search home page object (async)."""

    URL_TEMPLATE = "/imghp?hl={langCode}"
    PAGE_TITLE = "Google Images"

    def get_selectors(self, language: LanguageLike = None) -> Dict[str, str]:
        t = self.section(language, "images_page")
        return {
            "logo": f"img[alt={css_quote(t['logo_alt'])}]",
            "search_input": f"input[aria-label={css_quote(t['search_input_aria_label'])}]",
        }

    async def assert_svgs_are_visible(self) -> "ImagesHomePage":
        await self.assert_svgs_visible(IMAGES_SVG_INDICES)
        return self

    @allure.step("Assert images navigation")
    async def assert_navigation(self, language: LanguageLike = None) -> "ImagesHomePage":
        """Assert URL, title, icons, footer, logo label and search input."""
        footer = self.section(language, "footer")
        images_label = self.text(language, "images_page", "images")
        selectors = self.get_selectors(language)

        await self.assert_url_contains(self.get_base_url(language))
        await self.assert_title_contains(self.PAGE_TITLE)
        await self.assert_svgs_are_visible()

        checks = self.visibility()
        await checks.is_visible_content_multiple(footer.values())

        # The "Images" label sits next to the logo, inside the logo's parent
        logo_parent = self.page.locator(selectors["logo"]).first.locator("xpath=..")
        await self.visibility(logo_parent).is_visible_content(images_label)

        await checks.is_visible_element_multiple(selectors.values())
        return self


__all__ = ["ImagesHomePage"]
