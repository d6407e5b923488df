"""Command handlers used by the unified CLI."""

import argparse
from pathlib import Path

from flyercompare.compare.formatter import (
    describe_saved_age,
    format_basket_summary,
    format_comparison_groups,
)
from flyercompare.runtime import get_logger, load_settings
from flyercompare.util.money import format_money

logger = get_logger(__name__)


def _optional_path(value: str | None) -> Path | None:
    return Path(value).expanduser() if value else None


def cmd_compare(args: argparse.Namespace) -> int:
    """Compare picked deals across stores and show the basket against the budget."""
    from flyercompare.application.compare import CompareRequest, run_compare

    result = run_compare(
        CompareRequest(
            pick_ids=args.pick_ids,
            basket_ids=args.basket or [],
            budget=args.budget,
            catalog_path=_optional_path(args.catalog),
        )
    )

    if result.status == "file_not_found":
        print(f"Error: {result.error}")
        return 1

    for deal_id in result.missing_ids:
        print(f"Warning: deal {deal_id} not found in catalog")
    if result.budget_rejected:
        print(f"Warning: budget {args.budget!r} must be a positive number; ignored.")

    if result.status == "empty":
        print("No items to compare.")
        return 1

    settings = load_settings()
    session = result.session
    assert session is not None
    print(format_comparison_groups(result.groups, session.basket, currency=settings.currency))

    if len(session.basket):
        print()
        print(format_basket_summary(session.basket.items, session.spent, settings.currency, footer=None))
    remaining = session.remaining
    if remaining is not None:
        print(f"\nBudget: {settings.currency} {format_money(session.budget.budget)}")
        print(f"Remaining: {settings.currency} {remaining:.2f}")
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    from flyercompare.application.compare import SearchRequest, run_search

    result = run_search(SearchRequest(query=args.query, mode=args.mode, catalog_path=_optional_path(args.catalog)))
    if result.status == "file_not_found":
        print(f"Error: {result.error}")
        return 1
    if result.status == "empty":
        print("No deals found.")
        return 0

    settings = load_settings()
    for deal in result.results:
        print(
            f"  [{deal.id}] {deal.display_name} @ {deal.store} "
            f"- {settings.currency} {format_money(deal.price)} ({deal.unit})"
        )
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Fetch the deal catalog into the local cache."""
    from flyercompare.application.catalog import CatalogFetchRequest, run_catalog_fetch

    result = run_catalog_fetch(CatalogFetchRequest(output_path=_optional_path(args.output)))
    if result.status != "ok":
        logger.error("%s", result.error)
        print(f"Catalog unavailable: {result.error}")
        return 1
    print(f"Fetched {result.deal_count} deals into {result.path}")
    return 0


def cmd_apply_changes(args: argparse.Namespace) -> int:
    from flyercompare.application.catalog import CatalogChangesRequest, run_apply_catalog_changes

    result = run_apply_catalog_changes(
        CatalogChangesRequest(changes_path=Path(args.changes).expanduser(), catalog_path=_optional_path(args.catalog))
    )
    if result.status != "ok":
        print(f"Error: {result.error}")
        return 1
    print(f"Applied {result.applied} change(s); catalog now has {result.deal_count} deals.")
    return 0


def cmd_save_list(args: argparse.Namespace) -> int:
    from flyercompare.application.lists import SaveBasketRequest, run_save_basket

    result = run_save_basket(
        SaveBasketRequest(name=args.name, deal_ids=args.deal_ids, catalog_path=_optional_path(args.catalog))
    )
    for deal_id in result.missing_ids:
        print(f"Warning: deal {deal_id} not found in catalog")
    if result.status != "ok" or result.saved_list is None:
        print(f"Error: {result.error}")
        return 1
    saved = result.saved_list
    print(f"Saved '{saved.name}' ({len(saved.items)} items) as {saved.id}")
    return 0


def cmd_lists(args: argparse.Namespace) -> int:
    from flyercompare.application.lists import run_list_saved

    listing = run_list_saved()
    if not listing.lists:
        print("No saved lists.")
        return 0

    settings = load_settings()
    for saved in listing.lists:
        print(
            f"  {saved.id}  {saved.name}  {len(saved.items)} items  "
            f"{describe_saved_age(saved.saved_at)}  {settings.currency} {format_money(saved.total)}"
        )
    return 0


def cmd_share(args: argparse.Namespace) -> int:
    from flyercompare.application.lists import run_share_saved_list

    result = run_share_saved_list(args.list_id)
    if result.status != "ok":
        print(f"Error: {result.error}")
        return 1
    print(result.text)
    return 0


def cmd_delete_list(args: argparse.Namespace) -> int:
    from flyercompare.application.lists import run_delete_saved_list

    result = run_delete_saved_list(args.list_id)
    if result.status != "ok":
        print(f"Error: {result.error}")
        return 1
    print(f"Deleted {args.list_id}")
    return 0


def cmd_clear_lists(args: argparse.Namespace) -> int:
    from flyercompare.application.lists import run_clear_saved_lists

    run_clear_saved_lists()
    print("All saved lists have been removed.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI comparison service."""
    import uvicorn

    from flyercompare.runtime import compare_server as server

    print(f"Starting compare server on {args.host}:{args.port}")
    print(f"Endpoints: http://{args.host}:{args.port}/compare | /search | /health")
    print("Press Ctrl+C to stop")

    uvicorn.run(server.app, host=args.host, port=args.port)
    return 0
