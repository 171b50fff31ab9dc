"""
================================================================================
Search Home Page Object (Async / Playwright)
================================================================================

Home page of the search property: search box and buttons, cookie consent
modal, apps menu (rendered in an iframe), footer, and the links to the mail
and image-search properties.

Every selector is derived from the translations of the language passed to
the call, so one instance serves all languages.

================================================================================
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, expect

from webchecks.ui_testing.framework.dom_utils import (
    get_frame_body,
    scroll_nearest_container_to_bottom,
)
from webchecks.ui_testing.framework.languages import DEFAULT_LANGUAGE, Language
from webchecks.ui_testing.framework.page_base import BasePage, css_quote
from webchecks.ui_testing.framework.partitioning import split_into_parts
from webchecks.ui_testing.framework.translations import LanguageLike


# Country name as the footer shows it, per page language.
# Extend when testing from other countries.
COUNTRY_NAME_TRANSLATIONS: Dict[str, Dict[Language, str]] = {
    "Poland": {
        Language.ENGLISH: "Poland",
        Language.POLISH: "Polska",
    },
}

# Label of the language the home page promotes, per page language
LANGUAGE_LABELS: Dict[Language, str] = {
    Language.ENGLISH: "polski",
    Language.POLISH: "English",
}

# Also present in the footer, so they stay visible after the modal closes
COOKIE_KEYS_SHARED_WITH_FOOTER = ("privacy", "terms")

HOME_SVG_INDICES = (0, 1, 3, 5, 6)


def initial_load_contents(
    country: str,
    language: LanguageLike,
    footer: Mapping[str, str],
    home_page: Mapping[str, str],
) -> List[str]:
    """
    Texts expected on the home page after the first load.

    Footer texts, then the language promotion line (only when an english page
    is opened from Poland), then the country name localized for the page
    language (the raw country identifier when there is no translation).

    Args:
        country: Country reported by the geolocation service
        language: Page language (default when None)
        footer: Resolved footer translations
        home_page: Resolved home page translations
    """
    language = Language.parse(language) or DEFAULT_LANGUAGE
    contents = list(footer.values())

    if country == "Poland" and language is Language.ENGLISH:
        contents.append(f"{home_page['offered_in']} {LANGUAGE_LABELS[Language.ENGLISH]}")

    contents.append(COUNTRY_NAME_TRANSLATIONS.get(country, {}).get(language, country))
    return contents


class SearchHomePage(BasePage):
    """Search home page object (async)."""

    URL_TEMPLATE = "/?hl={langCode}"
    PAGE_TITLE = "Google"

    APPS_CONTAINER = 'iframe[name="app"]'
    SUGGESTIONS_LIST = '[role="listbox"]'

    def get_selectors(self, language: LanguageLike = None) -> Dict[str, str]:
        t = self.section(language, "home_page")
        return {
            "search_input": f"textarea[aria-label={css_quote(t['search_input_label'])}]",
            "search_button": f"[aria-label={css_quote(t['search_button_aria_label'])}]",
            "feeling_lucky_button": f"[aria-label={css_quote(t['feeling_lucky_button_aria_label'])}]",
            "apps_toggle": f"[aria-label={css_quote(t['apps_toggle_aria_label'])}]",
            "apps_container": self.APPS_CONTAINER,
        }

    # =========================================================================
    # Element accessors
    # =========================================================================

    def get_search_input(self, language: LanguageLike = None) -> Locator:
        return self.page.locator(self.get_selectors(language)["search_input"])

    def get_search_button(self, language: LanguageLike = None) -> Locator:
        return self.page.locator(self.get_selectors(language)["search_button"])

    def get_feeling_lucky_button(self, language: LanguageLike = None) -> Locator:
        return self.page.locator(self.get_selectors(language)["feeling_lucky_button"])

    def get_apps_toggle(self, language: LanguageLike = None) -> Locator:
        return self.page.locator(self.get_selectors(language)["apps_toggle"])

    def get_apps_menu(self, language: LanguageLike = None) -> Locator:
        return self.page.locator(self.get_selectors(language)["apps_container"])

    async def get_apps_menu_body(self, language: LanguageLike = None) -> Locator:
        """Body of the apps menu iframe, once populated."""
        return await get_frame_body(
            self.page, self.get_selectors(language)["apps_container"], timeout=self.timeout
        )

    # =========================================================================
    # Cookie consent
    # =========================================================================

    @allure.step("Accept cookies if present")
    async def accept_cookies_if_present(self, language: LanguageLike = None) -> "SearchHomePage":
        """Click the visible button labelled exactly with the accept text, if any."""
        accept_text = self.text(language, "cookies_modal", "accept_all")
        buttons = self.page.locator("button").filter(
            has_text=re.compile(rf"^\s*{re.escape(accept_text)}\s*$")
        ).locator("visible=true")

        if await buttons.count():
            await buttons.first.click(force=True)
            logger.debug(f"Cookies accepted with: {accept_text}")
        else:
            logger.debug("No cookie consent button visible")
        return self

    @allure.step("Assert cookie modal contents are visible")
    async def assert_cookie_modal_contents_are_visible(
        self, language: LanguageLike = None
    ) -> "SearchHomePage":
        """
        Assert the modal texts in three groups, scrolling the modal between groups.

        On small viewports the lower part of the modal is only reachable by
        scrolling its container; on large ones there is nothing to scroll.
        """
        modal = self.section(language, "cookies_modal")
        checks = self.visibility()

        for part in split_into_parts(list(modal.values()), 3):
            await checks.is_visible_content_multiple(part)

            header = await self.page.get_by_text(modal["header"]).first.element_handle(
                timeout=self.timeout
            )
            if not await scroll_nearest_container_to_bottom(header, self.dom):
                logger.info("No scrollable parent found for the cookies modal header, moving on")
        return self

    @allure.step("Assert cookie modal contents are not visible")
    async def assert_cookie_modal_contents_are_not_visible(
        self, language: LanguageLike = None
    ) -> "SearchHomePage":
        modal = self.section(language, "cookies_modal")
        contents = [
            value for key, value in modal.items()
            if key not in COOKIE_KEYS_SHARED_WITH_FOOTER
        ]
        await self.visibility().is_not_visible_content_multiple(contents)
        return self

    # =========================================================================
    # Initial load
    # =========================================================================

    async def assert_svgs_are_visible(self) -> "SearchHomePage":
        """Logo and toolbar icons, asserted by position for lack of better selectors."""
        await self.assert_svgs_visible(HOME_SVG_INDICES)
        return self

    @allure.step("Assert initial load elements ({country})")
    async def assert_initial_load_expected_elements(
        self,
        language: LanguageLike = None,
        country: str = "",
    ) -> "SearchHomePage":
        """
        Assert title, icons, search controls and footer texts after the first load.

        Args:
            language: Page language (default when None)
            country: Country of the current network origin (GeolocationClient)
        """
        language = Language.parse(language) or DEFAULT_LANGUAGE
        footer = self.section(language, "footer")
        home_page = self.section(language, "home_page")
        selectors = self.get_selectors(language)

        await self.assert_title(self.PAGE_TITLE)
        await self.assert_svgs_are_visible()

        checks = self.visibility()
        await checks.is_visible_element_multiple([
            selectors["search_input"],
            selectors["search_button"],
            selectors["feeling_lucky_button"],
        ])
        await checks.is_visible_content_multiple(
            initial_load_contents(country, language, footer, home_page)
        )
        return self

    # =========================================================================
    # Apps menu
    # =========================================================================

    @allure.step("Open apps menu")
    async def open_apps_menu(self, language: LanguageLike = None) -> "SearchHomePage":
        await self.get_apps_toggle(language).first.click(timeout=self.timeout)
        return self

    @allure.step("Close apps menu")
    async def close_apps_menu(self) -> "SearchHomePage":
        """Close the menu by clicking outside of it."""
        await self.page.wait_for_timeout(200)
        await self.page.locator("body").click(position={"x": 50, "y": 50})
        return self

    @allure.step("Assert apps menu is visible")
    async def assert_apps_menu_is_visible(self, language: LanguageLike = None) -> "SearchHomePage":
        """Assert every app label in three groups, scrolling each group into view first."""
        apps = list(self.section(language, "apps_menu").values())
        body = await self.get_apps_menu_body(language)
        checks = self.visibility(body)

        for index, part in enumerate(split_into_parts(apps, 3)):
            if not part:
                continue
            await self.page.wait_for_timeout(200)
            if index > 0:
                await body.get_by_text(part[0]).first.scroll_into_view_if_needed(
                    timeout=self.timeout
                )
            await checks.is_visible_content_multiple(part)
        return self

    @allure.step("Assert apps menu is hidden")
    async def assert_apps_menu_is_hidden(self, language: LanguageLike = None) -> "SearchHomePage":
        await expect(self.get_apps_toggle(language).first).to_have_attribute(
            "aria-expanded", "false", timeout=self.timeout
        )
        await expect(self.get_apps_menu(language)).to_be_hidden(timeout=self.timeout)
        return self

    # =========================================================================
    # Search
    # =========================================================================

    @allure.step("Search: {text}")
    async def search(
        self,
        text: str,
        language: LanguageLike = None,
        submit: bool = False,
    ) -> "SearchHomePage":
        """Type into the search box key by key; press Enter when ``submit``."""
        search_input = self.get_search_input(language).first
        await search_input.press_sequentially(text, delay=50, timeout=self.timeout)
        if submit:
            await search_input.press("Enter")
        return self

    @allure.step("Assert autocomplete suggestions are visible")
    async def assert_autocomplete_suggestions_are_visible(
        self,
        suggestions: Iterable[str],
        language: LanguageLike = None,
    ) -> "SearchHomePage":
        await self.visibility().is_visible_element(self.SUGGESTIONS_LIST)
        listbox = self.page.locator(self.SUGGESTIONS_LIST).locator("visible=true").first
        await self.visibility(listbox).is_visible_content_multiple(suggestions)
        return self

    # =========================================================================
    # Navigation to linked properties
    # =========================================================================

    @allure.step("Open mail")
    async def open_mail(self) -> "SearchHomePage":
        """The mail link reads the same in every language, so the default text is used."""
        link_text = self.text(DEFAULT_LANGUAGE, "home_page", "gmail")
        await self.page.get_by_text(link_text, exact=True).first.click(timeout=self.timeout)
        return self

    @allure.step("Open images")
    async def open_images(self, language: Optional[LanguageLike] = None) -> "SearchHomePage":
        link_text = self.text(language, "home_page", "images")
        await self.page.get_by_text(link_text, exact=True).first.click(timeout=self.timeout)
        return self


__all__ = [
    "SearchHomePage",
    "initial_load_contents",
    "COUNTRY_NAME_TRANSLATIONS",
    "LANGUAGE_LABELS",
]
