"""
================================================================================
Challenge Page Object (Async / Playwright)
================================================================================

Bot-check page shown instead of search results when traffic looks automated.
The checkbox lives in an iframe; the explanation texts are on the page itself.

================================================================================
"""

from __future__ import annotations

import allure

from webchecks.ui_testing.framework.dom_utils import get_frame_body
from webchecks.ui_testing.framework.page_base import BasePage
from webchecks.ui_testing.framework.translations import LanguageLike


class ChallengePage(BasePage):
    """Bot-check page object (async)."""

    # Opening search results directly is enough to trigger the challenge
    URL_TEMPLATE = "/search?hl={langCode}&q=test+search"

    CHALLENGE_FRAME = 'iframe[title="reCAPTCHA"]'
    ANCHOR_LABEL = "#recaptcha-anchor-label"
    CHECKBOX_BORDER = ".recaptcha-checkbox-border"

    # Rendered inside the frame, checked through ANCHOR_LABEL instead
    IN_FRAME_KEYS = ("not_a_robot",)

    @allure.step("Assert challenge is visible")
    async def assert_challenge_is_visible(self, language: LanguageLike = None) -> "ChallengePage":
        """Assert the checkbox inside the frame and the texts around it."""
        translations = self.section(language, "challenge")

        body = await get_frame_body(self.page, self.CHALLENGE_FRAME, timeout=self.timeout)
        await self.visibility(body).is_visible_element_multiple(
            [self.ANCHOR_LABEL, self.CHECKBOX_BORDER]
        )

        outside_frame = [
            value for key, value in translations.items() if key not in self.IN_FRAME_KEYS
        ]
        await self.visibility().is_visible_content_multiple(outside_frame)
        return self


__all__ = ["ChallengePage"]
