"""Saved shopping list workflow orchestration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from flyercompare.compare.catalog import Catalog
from flyercompare.compare.formatter import format_saved_list_share
from flyercompare.domain.saved_list import SavedList
from flyercompare.domain.session import Basket
from flyercompare.runtime import get_logger, get_paths, load_settings
from flyercompare.runtime.catalog_client import load_catalog_file
from flyercompare.runtime.list_storage import SavedListNotFound, SavedListStore

logger = get_logger(__name__)

ListStatus = Literal["ok", "empty", "not_found", "file_not_found"]


@dataclass(frozen=True)
class SavedListListing:
    """Saved lists for CLI display, newest first."""

    lists: list[SavedList]


def run_list_saved(store: SavedListStore | None = None) -> SavedListListing:
    return SavedListListing(lists=(store or SavedListStore()).list())


@dataclass(frozen=True)
class SaveBasketRequest:
    """Inputs for saving a basket snapshot built from catalog deal ids."""

    name: str
    deal_ids: Sequence[str]
    catalog_path: Path | None = None
    store: SavedListStore | None = None


@dataclass(frozen=True)
class SavedListResult:
    """Outcome from a saved-list workflow."""

    status: ListStatus
    saved_list: SavedList | None = None
    text: str | None = None
    missing_ids: list[str] = field(default_factory=list)
    error: str | None = None


def run_save_basket(request: SaveBasketRequest) -> SavedListResult:
    catalog_path = request.catalog_path or get_paths().catalog_cache_file
    if not catalog_path.exists():
        return SavedListResult(status="file_not_found", error=f"Catalog not found: {catalog_path}")

    catalog = Catalog(load_catalog_file(catalog_path))
    basket = Basket()
    missing: list[str] = []
    for deal_id in request.deal_ids:
        deal = catalog.get(deal_id)
        if deal is None:
            missing.append(deal_id)
            continue
        if not basket.is_in_basket(deal):
            basket.toggle(deal, deal.store)

    if not len(basket):
        return SavedListResult(status="empty", missing_ids=missing, error="No known deals to save")

    store = request.store or SavedListStore()
    saved = store.save(request.name, basket.items, basket.total)
    return SavedListResult(status="ok", saved_list=saved, missing_ids=missing)


def run_share_saved_list(list_id: str, store: SavedListStore | None = None) -> SavedListResult:
    """Render a saved list as shareable plain text."""
    try:
        saved = (store or SavedListStore()).get(list_id)
    except SavedListNotFound:
        return SavedListResult(status="not_found", error=f"Saved list not found: {list_id}")

    settings = load_settings()
    text = format_saved_list_share(saved, currency=settings.currency, footer=settings.share_footer)
    return SavedListResult(status="ok", saved_list=saved, text=text)


def run_delete_saved_list(list_id: str, store: SavedListStore | None = None) -> SavedListResult:
    if not (store or SavedListStore()).delete(list_id):
        return SavedListResult(status="not_found", error=f"Saved list not found: {list_id}")
    return SavedListResult(status="ok")


def run_clear_saved_lists(store: SavedListStore | None = None) -> SavedListResult:
    (store or SavedListStore()).clear()
    return SavedListResult(status="ok")
