"""Tests for plain-text renderings."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from flyercompare.compare.formatter import (
    describe_saved_age,
    format_basket_summary,
    format_comparison_groups,
    format_saved_list_share,
)
from flyercompare.compare.grouping import build_comparison_groups
from flyercompare.compare.ingest import deal_from_record, deals_from_records
from flyercompare.domain.deal import BasketItem, ComparisonGroup
from flyercompare.domain.saved_list import SavedList
from flyercompare.domain.session import Basket


def _items() -> list[BasketItem]:
    rice = deal_from_record({"id": 1, "item": "Rice", "price": "$45", "store": "A"})
    combo = deal_from_record({"id": 2, "item": ["Bread", "Milk"], "price": "25.5", "store": "B"})
    return [BasketItem(deal=rice, selected_store="A"), BasketItem(deal=combo, selected_store="B")]


def test_format_basket_summary() -> None:
    text = format_basket_summary(_items(), Decimal("70.5"))
    assert text.splitlines() == [
        "My Shopping List (Total: SZL 70.50)",
        "",
        "• Rice @ A — SZL 45.00",
        "• Bread + Milk @ B — SZL 25.50",
        "",
        "Shared via flyercompare",
    ]


def test_format_basket_summary_without_footer() -> None:
    text = format_basket_summary(_items()[:1], Decimal("45"), currency="R", footer=None)
    assert text.splitlines()[-1] == "• Rice @ A — R 45.00"


def test_format_saved_list_share() -> None:
    saved = SavedList(
        id="abc",
        name="Weekly",
        saved_at=datetime(2025, 12, 2, 9, 30, tzinfo=timezone.utc),
        total=Decimal("70.50"),
        items=_items(),
    )
    lines = format_saved_list_share(saved).splitlines()
    assert lines[:4] == ["Weekly", "Saved on: 2025-12-02", "Total: SZL 70.50", ""]
    assert lines[4] == "• Rice @ A — SZL 45.00"
    assert lines[-1] == "Shared via flyercompare"


def test_describe_saved_age() -> None:
    now = datetime(2025, 12, 10, 12, 0, tzinfo=timezone.utc)
    assert describe_saved_age(now - timedelta(hours=3), now) == "Today"
    assert describe_saved_age(now - timedelta(days=1, hours=1), now) == "Yesterday"
    assert describe_saved_age(now - timedelta(days=4), now) == "4 days ago"
    assert describe_saved_age(now - timedelta(days=30), now) == "2025-11-10"


def test_format_comparison_groups_marks_cheapest_and_selected() -> None:
    catalog = deals_from_records(
        [
            {"id": 1, "item": "Rice", "price": "50", "store": "Shoprite"},
            {"id": 2, "item": "Rice", "price": "45", "store": "Spar"},
        ]
    )
    groups = build_comparison_groups([catalog[0]], catalog)
    basket = Basket()
    basket.toggle(catalog[0])

    lines = format_comparison_groups(groups, basket).splitlines()

    assert lines[0] == "Rice"
    assert lines[1] == "  [ ]* Spar      SZL 45.00  each"
    assert lines[2] == "  [x]  Shoprite  SZL 50.00  each"


def test_format_comparison_groups_empty_cases() -> None:
    assert format_comparison_groups([]) == "No items to compare."
    empty = ComparisonGroup(item_key="x ||| y", display_name="X + Y", is_combo=True)
    assert format_comparison_groups([empty]) == "X + Y [combo]\n  (no deals found)"
