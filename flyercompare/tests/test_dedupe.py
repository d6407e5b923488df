"""Tests for collapsing duplicate flyer listings."""

from flyercompare.compare.dedupe import dedupe_deals, dedupe_key
from flyercompare.compare.ingest import deal_from_record
from flyercompare.domain.deal import Deal, MultipleNames, SingleName


def test_deals_differing_only_in_id_collapse_to_first() -> None:
    first = deal_from_record({"id": 1, "item": "Rice", "price": "$45", "store": "B", "type": "single item"})
    second = deal_from_record({"id": 2, "item": "Rice", "price": "45.00", "store": "B", "type": "single item"})
    unique = dedupe_deals([first, second])
    assert unique == [first]


def test_dedupe_ignores_item_and_type_casing() -> None:
    first = deal_from_record({"id": 1, "item": "RICE", "price": "10", "store": "A", "type": "Single Item"})
    second = deal_from_record({"id": 2, "item": "rice", "price": "10", "store": "A", "type": "single item"})
    assert dedupe_key(first) == dedupe_key(second)
    assert len(dedupe_deals([first, second])) == 1


def test_different_store_or_price_is_kept() -> None:
    deals = [
        deal_from_record({"id": 1, "item": "Rice", "price": "10", "store": "A"}),
        deal_from_record({"id": 2, "item": "Rice", "price": "10", "store": "B"}),
        deal_from_record({"id": 3, "item": "Rice", "price": "11", "store": "A"}),
        deal_from_record({"id": 4, "item": "Rice", "price": "10", "store": "A", "unit": "per kg"}),
    ]
    assert [deal.id for deal in dedupe_deals(deals)] == [1, 2, 3, 4]


def test_dedupe_preserves_first_appearance_order() -> None:
    deals = [
        deal_from_record({"id": 1, "item": "B", "price": "5", "store": "A"}),
        deal_from_record({"id": 2, "item": "A", "price": "1", "store": "A"}),
        deal_from_record({"id": 3, "item": "B", "price": "5", "store": "A"}),
    ]
    assert [deal.id for deal in dedupe_deals(deals)] == [1, 2]


def test_dedupe_key_tolerates_missing_fields() -> None:
    bare = Deal(id=1, item=SingleName("Rice"), price=None, store=None, type=None, unit=None)  # type: ignore[arg-type]
    assert dedupe_key(bare) == ("", "rice", "0.00", "", "")
    assert dedupe_key(Deal(id=2, item=MultipleNames(("A", "B")))) == ("", "a|b", "0.00", "", "each")
