"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects and network aliases.

Key Features:
- One browser per session, one fresh context (clean cookies/storage) per test
- Page Object fixtures for all pages
- Response aliases armed from the ``intercepts`` config section
- Screenshot capture on failure

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import Browser, BrowserContext, Page

from webchecks.ui_testing.framework.browser_manager import BrowserManager
from webchecks.ui_testing.framework.config_loader import ConfigLoader
from webchecks.ui_testing.framework.geolocation import GeolocationClient
from webchecks.ui_testing.framework.languages import load_viewports
from webchecks.ui_testing.framework.network_aliases import RequestAliases
from webchecks.ui_testing.framework.translations import Translator
from webchecks.ui_testing.pages import (
    ChallengePage,
    ImagesHomePage,
    MailHomePage,
    SearchHomePage,
)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """Session-scoped browser manager fixture."""
    manager = BrowserManager()
    yield manager
    await manager.close()


@pytest.fixture(scope="session")
async def browser(browser_manager: BrowserManager) -> Browser:
    """Session-scoped browser fixture shared across all tests."""
    return await browser_manager.start()


@pytest.fixture(scope="function")
async def context(browser_manager: BrowserManager, browser: Browser) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    A new context per test means each test starts without cookies or storage.
    """
    context = await browser_manager.new_context()
    yield context
    await context.close()


@pytest.fixture(scope="function")
async def page(context: BrowserContext) -> AsyncGenerator[Page, None]:
    """Function-scoped page fixture."""
    page = await context.new_page()
    yield page
    await page.close()


@pytest.fixture(scope="session")
def viewports(config: ConfigLoader):
    return load_viewports(config)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(page: Page, translator: Translator) -> SearchHomePage:
    return SearchHomePage(page, translator)


@pytest.fixture
def mail_page(page: Page, translator: Translator) -> MailHomePage:
    return MailHomePage(page, translator)


@pytest.fixture
def images_page(page: Page, translator: Translator) -> ImagesHomePage:
    return ImagesHomePage(page, translator)


@pytest.fixture
def challenge_page(page: Page, translator: Translator) -> ChallengePage:
    return ChallengePage(page, translator)


# ================================================================================
# Network / Environment Fixtures
# ================================================================================

@pytest.fixture
async def aliases(page: Page, config: ConfigLoader) -> RequestAliases:
    """Response aliases bound to the test page (register before navigating)."""
    return RequestAliases(page, timeout=config.get("ui.timeout_ms", 10000) * 2)


@pytest.fixture(scope="session")
async def ip_country(config: ConfigLoader) -> str:
    """Country of the current network origin, looked up once per session."""
    return await GeolocationClient.from_config(config).get_country()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    The screenshot is taken on the running loop and attached to the
    Allure report when it completes.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        if hasattr(item, "funcargs") and "page" in item.funcargs:
            page = item.funcargs["page"]
            try:
                import asyncio
                loop = asyncio.get_event_loop()
                if loop.is_running():
                    task = loop.create_task(page.screenshot(full_page=True))

                    def _attach_done(t):
                        if t.exception() is None:
                            allure.attach(
                                t.result(),
                                name="failure_screenshot",
                                attachment_type=allure.attachment_type.PNG,
                            )

                    task.add_done_callback(_attach_done)
                else:
                    screenshot = loop.run_until_complete(page.screenshot(full_page=True))
                    allure.attach(
                        screenshot,
                        name="failure_screenshot",
                        attachment_type=allure.attachment_type.PNG,
                    )
            except Exception as e:
                # Log but don't fail if screenshot capture fails
                logger.warning(f"Failed to capture screenshot on failure: {e}")
