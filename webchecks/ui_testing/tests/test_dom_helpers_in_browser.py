"""
================================================================================
DOM Helper Tests Against Local Markup (Async / Playwright)
================================================================================

Exercises the scrollable-parent finder, the iframe body accessor and the
visibility assertions on static HTML loaded with ``page.set_content``.
No network access is needed, but a browser is, so the module is ``live``.

================================================================================
"""

import allure
import pytest
from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from webchecks.ui_testing.framework.assertions import (
    VisibilityAssertionError,
    VisibilityAssertions,
)
from webchecks.ui_testing.framework.dom_utils import (
    PlaywrightDomInspector,
    find_scrollable_parent,
    get_frame_body,
    scroll_nearest_container_to_bottom,
)


NESTED_SCROLLERS = """
<div id="outer" style="height: 200px; overflow-y: scroll">
  <div id="inner" style="height: 100px; overflow-y: auto">
    <div id="content" style="height: 600px">
      <p id="start">Before you continue</p>
    </div>
  </div>
  <div style="height: 800px"></div>
</div>
"""

NO_SCROLLERS = """
<div id="plain">
  <p id="start">Nothing to scroll here</p>
</div>
"""

DELAYED_FRAME = """
<iframe name="app" srcdoc=""></iframe>
<script>
  setTimeout(() => {
    document.querySelector('iframe').srcdoc = '<p>Maps</p><p>Drive</p>';
  }, 300);
</script>
"""

TEXT_ONLY_FRAME = """
<iframe name="app" srcdoc=""></iframe>
<script>
  setTimeout(() => {
    document.querySelector('iframe').srcdoc = 'Loaded';
  }, 300);
</script>
"""

VISIBILITY_MARKUP = """
<p>Accept all</p>
<p style="display: none">Reject all</p>
<button id="shown">Shown</button>
<button id="hidden" style="visibility: hidden">Hidden</button>
"""


@allure.epic("UI Testing")
@allure.feature("DOM Helpers")
@pytest.mark.live
class TestDomHelpersInBrowser:

    @pytest.mark.asyncio
    async def test_finds_nearest_scrollable_parent(self, page: Page):
        await page.set_content(NESTED_SCROLLERS)
        start = await page.query_selector("#start")

        found = await find_scrollable_parent(start, PlaywrightDomInspector())

        assert found is not None
        assert await found.get_attribute("id") == "inner"

    @pytest.mark.asyncio
    async def test_no_scrollable_parent(self, page: Page):
        await page.set_content(NO_SCROLLERS)
        start = await page.query_selector("#start")

        assert await find_scrollable_parent(start, PlaywrightDomInspector()) is None

    @pytest.mark.asyncio
    async def test_scrolls_container_to_bottom(self, page: Page):
        await page.set_content(NESTED_SCROLLERS)
        start = await page.query_selector("#start")

        assert await scroll_nearest_container_to_bottom(start, PlaywrightDomInspector())
        scroll_top = await page.eval_on_selector("#inner", "el => el.scrollTop")
        assert scroll_top > 0

    @pytest.mark.asyncio
    async def test_frame_body_waits_for_content(self, page: Page):
        await page.set_content(DELAYED_FRAME)

        body = await get_frame_body(page, 'iframe[name="app"]', timeout=5000)

        await VisibilityAssertions(body, timeout=2000).is_visible_content_multiple(["Maps", "Drive"])

    @pytest.mark.asyncio
    async def test_frame_body_accepts_text_only_content(self, page: Page):
        await page.set_content(TEXT_ONLY_FRAME)

        body = await get_frame_body(page, 'iframe[name="app"]', timeout=5000)

        assert (await body.inner_text()).strip() == "Loaded"

    @pytest.mark.asyncio
    async def test_frame_body_times_out_on_empty_frame(self, page: Page):
        await page.set_content('<iframe name="app" srcdoc=""></iframe>')

        with pytest.raises(PlaywrightTimeoutError):
            await get_frame_body(page, 'iframe[name="app"]', timeout=500)

    @pytest.mark.asyncio
    async def test_visibility_batches(self, page: Page):
        await page.set_content(VISIBILITY_MARKUP)
        checks = VisibilityAssertions(page, timeout=1000)

        await checks.is_visible_content_multiple(["Accept all"])
        await checks.is_not_visible_content_multiple(["Reject all", "Not on the page"])
        await checks.is_visible_element_multiple(["#shown"])
        await checks.is_not_visible_element_multiple(["#hidden", "#missing"])

    @pytest.mark.asyncio
    async def test_visibility_failure_names_the_item(self, page: Page):
        await page.set_content(VISIBILITY_MARKUP)
        checks = VisibilityAssertions(page, timeout=500)

        with pytest.raises(VisibilityAssertionError) as exc_info:
            await checks.is_visible_content_multiple(["Accept all", "Reject all"])

        assert exc_info.value.target == "Reject all"
        assert exc_info.value.expected == "visible"

    @pytest.mark.asyncio
    async def test_content_match_is_case_sensitive(self, page: Page):
        await page.set_content(VISIBILITY_MARKUP)
        checks = VisibilityAssertions(page, timeout=500)

        await checks.is_visible_content("Accept all")
        await checks.is_not_visible_content("accept all")
