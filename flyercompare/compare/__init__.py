"""Deal comparison engine: normalize, match, deduplicate and group flyer deals."""

from flyercompare.compare.catalog import Catalog
from flyercompare.compare.dedupe import dedupe_deals, dedupe_key
from flyercompare.compare.grouping import (
    UNPARSED_PRICE_SENTINEL,
    build_comparison_groups,
    build_group,
    price_sort_key,
    sort_deals_by_price,
)
from flyercompare.compare.ingest import deal_from_record, deals_from_records, ingest_flyer_extraction
from flyercompare.compare.matcher import EXTRA_ITEMS_ALLOWED, MIN_COMBO_ITEMS, match_deals
from flyercompare.compare.normalizer import TOKEN_DELIMITER, normalize_item_names, resolve_item_names, token_key
from flyercompare.compare.search import search_deals, selected_total

__all__ = [
    "Catalog",
    "dedupe_deals",
    "dedupe_key",
    "UNPARSED_PRICE_SENTINEL",
    "build_comparison_groups",
    "build_group",
    "price_sort_key",
    "sort_deals_by_price",
    "deal_from_record",
    "deals_from_records",
    "ingest_flyer_extraction",
    "EXTRA_ITEMS_ALLOWED",
    "MIN_COMBO_ITEMS",
    "match_deals",
    "TOKEN_DELIMITER",
    "normalize_item_names",
    "resolve_item_names",
    "token_key",
    "search_deals",
    "selected_total",
]
