"""Runtime loader for comparison and catalog settings.

Settings live in ``config/flyercompare.toml`` under the data root::

    [compare]
    extra_items_allowed = 1
    unparsed_price_sentinel = 999999

    [display]
    currency = "SZL"
    share_footer = "Shared via flyercompare"

    [catalog]
    url = "https://example.supabase.co"
    table = "flyer_items"
    api_key = "..."
    timeout = 30

``FLYERCOMPARE_CATALOG_URL`` and ``FLYERCOMPARE_CATALOG_KEY`` override the
catalog section. A missing file means defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path
from typing import Any

from flyercompare.compare.formatter import DEFAULT_CURRENCY, DEFAULT_SHARE_FOOTER
from flyercompare.compare.grouping import UNPARSED_PRICE_SENTINEL
from flyercompare.compare.matcher import EXTRA_ITEMS_ALLOWED
from flyercompare.runtime.logging import get_logger
from flyercompare.runtime.paths import get_paths

logger = get_logger(__name__)

DEFAULT_CATALOG_TABLE = "flyer_items"
DEFAULT_CATALOG_TIMEOUT = 30.0


@dataclass(frozen=True)
class CompareSettings:
    """Tunables for matching, display and catalog access."""

    extra_items_allowed: int = EXTRA_ITEMS_ALLOWED
    unparsed_price_sentinel: Decimal = UNPARSED_PRICE_SENTINEL
    currency: str = DEFAULT_CURRENCY
    share_footer: str = DEFAULT_SHARE_FOOTER
    catalog_url: str | None = None
    catalog_table: str = DEFAULT_CATALOG_TABLE
    catalog_api_key: str | None = None
    catalog_timeout: float = DEFAULT_CATALOG_TIMEOUT


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if not path.exists():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name, {})
    return value if isinstance(value, dict) else {}


def build_settings(data: dict[str, Any], environ: dict[str, str] | None = None) -> CompareSettings:
    """Build settings from parsed TOML plus environment overrides."""
    if environ is None:
        environ = dict(os.environ)

    compare = _section(data, "compare")
    display = _section(data, "display")
    catalog = _section(data, "catalog")
    defaults = CompareSettings()

    extra_items_allowed = compare.get("extra_items_allowed", defaults.extra_items_allowed)
    if not isinstance(extra_items_allowed, int) or isinstance(extra_items_allowed, bool) or extra_items_allowed < 0:
        logger.warning("Ignoring invalid extra_items_allowed=%r", extra_items_allowed)
        extra_items_allowed = defaults.extra_items_allowed

    sentinel = defaults.unparsed_price_sentinel
    if "unparsed_price_sentinel" in compare:
        try:
            sentinel = Decimal(str(compare["unparsed_price_sentinel"]))
        except InvalidOperation:
            logger.warning("Ignoring invalid unparsed_price_sentinel=%r", compare["unparsed_price_sentinel"])

    catalog_url = environ.get("FLYERCOMPARE_CATALOG_URL") or catalog.get("url") or None
    catalog_api_key = environ.get("FLYERCOMPARE_CATALOG_KEY") or catalog.get("api_key") or None

    return CompareSettings(
        extra_items_allowed=extra_items_allowed,
        unparsed_price_sentinel=sentinel,
        currency=str(display.get("currency", defaults.currency)),
        share_footer=str(display.get("share_footer", defaults.share_footer)),
        catalog_url=catalog_url,
        catalog_table=str(catalog.get("table", defaults.catalog_table)),
        catalog_api_key=catalog_api_key,
        catalog_timeout=float(catalog.get("timeout", defaults.catalog_timeout)),
    )


@lru_cache(maxsize=8)
def load_settings(settings_path: str | None = None) -> CompareSettings:
    """Load settings from the configured TOML file (cached)."""
    path = Path(settings_path) if settings_path is not None else get_paths().settings_file
    settings = build_settings(_load_toml(path))
    logger.debug("Loaded settings from %s", path)
    return settings


def reset_settings() -> None:
    load_settings.cache_clear()
