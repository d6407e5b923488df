"""Comparison and search workflow orchestration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from flyercompare.compare.catalog import Catalog
from flyercompare.compare.grouping import build_comparison_groups
from flyercompare.compare.search import search_deals
from flyercompare.domain.deal import ComparisonGroup, Deal
from flyercompare.domain.session import ShoppingSession
from flyercompare.runtime import get_logger, get_paths, load_settings
from flyercompare.runtime.catalog_client import load_catalog_file

logger = get_logger(__name__)

CompareStatus = Literal["ok", "file_not_found", "empty"]


def _load_catalog(catalog_path: Path | None) -> Catalog | None:
    path = catalog_path if catalog_path is not None else get_paths().catalog_cache_file
    if not path.exists():
        return None
    return Catalog(load_catalog_file(path))


@dataclass(frozen=True)
class CompareRequest:
    """Inputs for building comparison groups from a cached catalog."""

    pick_ids: Sequence[str]
    basket_ids: Sequence[str] = ()
    budget: str | None = None
    catalog_path: Path | None = None


@dataclass(frozen=True)
class CompareResult:
    """Outcome from the comparison workflow."""

    status: CompareStatus
    groups: list[ComparisonGroup] = field(default_factory=list)
    session: ShoppingSession | None = None
    missing_ids: list[str] = field(default_factory=list)
    budget_rejected: bool = False
    error: str | None = None


def run_compare(request: CompareRequest) -> CompareResult:
    """Run compare flow: load catalog -> pick -> select basket -> group."""
    catalog = _load_catalog(request.catalog_path)
    if catalog is None:
        return CompareResult(
            status="file_not_found",
            error="Catalog not found. Run `flyercompare fetch` or pass --catalog.",
        )

    settings = load_settings()
    session = ShoppingSession()
    missing: list[str] = []

    for deal_id in request.pick_ids:
        deal = catalog.get(deal_id)
        if deal is None:
            missing.append(deal_id)
            continue
        session.picks.pick(deal, deal.store)

    for deal_id in request.basket_ids:
        deal = catalog.get(deal_id)
        if deal is None:
            missing.append(deal_id)
            continue
        session.basket.toggle(deal, deal.store)

    budget_rejected = False
    if request.budget is not None:
        budget_rejected = not session.budget.set_budget(request.budget)
        if budget_rejected:
            logger.warning("Ignoring invalid budget %r", request.budget)

    if missing:
        logger.warning("Deal ids not in catalog: %s", ", ".join(missing))

    if not len(session.picks):
        return CompareResult(
            status="empty",
            session=session,
            missing_ids=missing,
            budget_rejected=budget_rejected,
        )

    groups = build_comparison_groups(
        session.picks.items,
        catalog.deals,
        extra_items_allowed=settings.extra_items_allowed,
        sentinel=settings.unparsed_price_sentinel,
    )
    logger.info("Built %d comparison groups from %d deals", len(groups), len(catalog))
    return CompareResult(
        status="ok",
        groups=groups,
        session=session,
        missing_ids=missing,
        budget_rejected=budget_rejected,
    )


@dataclass(frozen=True)
class SearchRequest:
    """Inputs for searching the cached catalog."""

    query: str
    mode: str | None = None
    catalog_path: Path | None = None


@dataclass(frozen=True)
class SearchResult:
    """Outcome from the search workflow."""

    status: CompareStatus
    results: list[Deal] = field(default_factory=list)
    error: str | None = None


def run_search(request: SearchRequest) -> SearchResult:
    catalog = _load_catalog(request.catalog_path)
    if catalog is None:
        return SearchResult(
            status="file_not_found",
            error="Catalog not found. Run `flyercompare fetch` or pass --catalog.",
        )

    settings = load_settings()
    results = search_deals(catalog.deals, request.query, mode=request.mode, sentinel=settings.unparsed_price_sentinel)
    if not results:
        return SearchResult(status="empty")
    return SearchResult(status="ok", results=results)
