"""Tests for settings loading and environment overrides."""

from decimal import Decimal
from pathlib import Path

from flyercompare.runtime.paths import get_paths
from flyercompare.runtime.settings import build_settings, load_settings


def test_defaults_without_file() -> None:
    settings = load_settings()
    assert settings.extra_items_allowed == 1
    assert settings.unparsed_price_sentinel == Decimal("999999")
    assert settings.currency == "SZL"
    assert settings.catalog_url is None
    assert settings.catalog_table == "flyer_items"


def test_load_from_toml(isolated_home: Path) -> None:
    settings_file = get_paths().settings_file
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text(
        """
[compare]
extra_items_allowed = 2
unparsed_price_sentinel = 5000

[display]
currency = "R"

[catalog]
url = "https://catalog.example"
api_key = "file-key"
timeout = 5
""",
        encoding="utf-8",
    )

    settings = load_settings()

    assert settings.extra_items_allowed == 2
    assert settings.unparsed_price_sentinel == Decimal("5000")
    assert settings.currency == "R"
    assert settings.share_footer == "Shared via flyercompare"
    assert settings.catalog_url == "https://catalog.example"
    assert settings.catalog_api_key == "file-key"
    assert settings.catalog_timeout == 5.0


def test_environment_overrides_catalog() -> None:
    settings = build_settings(
        {"catalog": {"url": "https://file.example", "api_key": "file-key"}},
        environ={"FLYERCOMPARE_CATALOG_URL": "https://env.example", "FLYERCOMPARE_CATALOG_KEY": "env-key"},
    )
    assert settings.catalog_url == "https://env.example"
    assert settings.catalog_api_key == "env-key"


def test_invalid_values_fall_back_to_defaults() -> None:
    settings = build_settings(
        {"compare": {"extra_items_allowed": -1, "unparsed_price_sentinel": "lots"}, "display": "oops"},
        environ={},
    )
    assert settings.extra_items_allowed == 1
    assert settings.unparsed_price_sentinel == Decimal("999999")
    assert settings.currency == "SZL"


def test_bool_is_not_an_item_count() -> None:
    settings = build_settings({"compare": {"extra_items_allowed": True}}, environ={})
    assert settings.extra_items_allowed == 1
