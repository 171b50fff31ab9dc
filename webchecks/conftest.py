"""
================================================================================
Test Suite Pytest Configuration
================================================================================

Registers markers, auto-marks tests by directory, configures logging once
per session and builds the shared translation fixtures.

================================================================================
"""

import pytest

from webchecks.ui_testing.framework.config_loader import ConfigLoader, PROJECT_ROOT
from webchecks.ui_testing.framework.log_setup import init_logger
from webchecks.ui_testing.framework.translations import TranslationStore, Translator


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "live: Drives a real browser, usually against the public site"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free unit tests"
    )
    config.addinivalue_line(
        "markers", "i18n: Tests running once per language"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add 'ui' / 'unit' markers based on the test directory."""
    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Localized Web Checks",
        "=" * 60,
        "",
    ]


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    init_logger()


@pytest.fixture(scope="session")
def config() -> ConfigLoader:
    return ConfigLoader()


@pytest.fixture(scope="session")
def translation_store(config: ConfigLoader) -> TranslationStore:
    """Translation store loaded from the configured directory."""
    return TranslationStore.from_directory(
        PROJECT_ROOT / config.get("translations.dir", "translations")
    )


@pytest.fixture(scope="session")
def translator(translation_store: TranslationStore) -> Translator:
    return Translator(translation_store)
