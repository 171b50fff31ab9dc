import pytest

from webchecks.ui_testing.framework.languages import (
    DEFAULT_LANGUAGE,
    VIEWPORTS,
    Language,
    Viewport,
    load_viewports,
)


@pytest.mark.parametrize("value, expected", [
    (Language.POLISH, Language.POLISH),
    ("polish", Language.POLISH),
    ("ENGLISH", Language.ENGLISH),
    (" english ", Language.ENGLISH),
    (None, None),
])
def test_parse(value, expected):
    assert Language.parse(value) is expected


def test_parse_unknown():
    with pytest.raises(ValueError):
        Language.parse("klingon")


def test_locale_codes():
    assert Language.ENGLISH.locale_code == "en-US"
    assert Language.POLISH.locale_code == "pl"
    assert DEFAULT_LANGUAGE is Language.ENGLISH


class DummyConfig:

    def __init__(self, data):
        self.data = data

    def get(self, key, default=None):
        return self.data.get(key, default)


def test_viewports_from_config():
    config = DummyConfig({"ui.viewports": [{"name": "watch", "width": "200", "height": 240}]})

    assert load_viewports(config) == [Viewport("watch", 200, 240)]


@pytest.mark.parametrize("config", [None, DummyConfig({}), DummyConfig({"ui.viewports": []})])
def test_viewports_default(config):
    assert load_viewports(config) == VIEWPORTS


def test_shipped_viewports(config):
    viewports = load_viewports(config)

    assert [v.name for v in viewports] == ["desktop", "tablet", "mobile"]
    assert viewports[2].as_playwright() == {"width": 500, "height": 667}
