"""
Repository-level pytest configuration.

Provides:
  - Safe defaults for the environment variables the framework reads
  - The ``--run-live`` switch: tests marked ``live`` drive a real browser
    against the public site and are skipped unless it is given
    (or ``RUN_LIVE_UI=1`` is set)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Run tests marked 'live' (real browser, network access required).",
    )


def _live_enabled(config) -> bool:
    return config.getoption("--run-live") or os.getenv("RUN_LIVE_UI", "") in ("1", "true", "yes")


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless explicitly enabled."""
    if _live_enabled(config):
        return
    skip_live = pytest.mark.skip(reason="live UI test: use --run-live or RUN_LIVE_UI=1")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _env_defaults() -> Generator[None, None, None]:
    """Set environment defaults if not already provided by the user/CI."""
    defaults = {
        "UI_BASE_URL": "https://www.google.com",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
