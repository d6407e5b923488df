"""Tests for the saved shopping list store."""

import json
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest

from flyercompare.compare.ingest import deal_from_record
from flyercompare.domain.deal import BasketItem
from flyercompare.runtime.list_storage import SAVED_LISTS_KEY, SavedListNotFound, SavedListStore


def _items() -> list[BasketItem]:
    deal = deal_from_record({"id": 1, "item": "Rice", "price": "$45", "store": "A"})
    return [BasketItem(deal=deal, selected_store="A")]


def test_save_and_get_round_trip(tmp_path: Path) -> None:
    store = SavedListStore(tmp_path / "lists.json")
    saved = store.save("Weekly", _items(), Decimal("45"))

    loaded = store.get(saved.id)
    assert loaded.name == "Weekly"
    assert loaded.total == Decimal("45.00")
    assert loaded.items[0].deal.display_name == "Rice"
    assert loaded.items[0].selected_store == "A"
    assert loaded.items[0].amount == Decimal("45.00")


def test_blob_layout(tmp_path: Path) -> None:
    path = tmp_path / "lists.json"
    store = SavedListStore(path)
    store.save("", _items(), Decimal("45"), saved_at=datetime(2025, 12, 2, tzinfo=timezone.utc))

    blob = json.loads(path.read_text(encoding="utf-8"))
    row = blob[SAVED_LISTS_KEY][0]
    assert row["name"] == "Shopping List"
    assert row["savedAt"] == "2025-12-02T00:00:00+00:00"
    assert row["total"] == "45.00"
    assert row["items"][0]["price"] == "$45"


def test_list_newest_first(tmp_path: Path) -> None:
    store = SavedListStore(tmp_path / "lists.json")
    store.save("old", [], Decimal("0"), saved_at=datetime(2025, 1, 1, tzinfo=timezone.utc))
    store.save("new", [], Decimal("0"), saved_at=datetime(2025, 6, 1, tzinfo=timezone.utc))
    store.save("mid", [], Decimal("0"), saved_at=datetime(2025, 3, 1, tzinfo=timezone.utc))

    assert [saved.name for saved in store.list()] == ["new", "mid", "old"]


def test_get_missing_raises(tmp_path: Path) -> None:
    store = SavedListStore(tmp_path / "lists.json")
    with pytest.raises(SavedListNotFound):
        store.get("nope")


def test_delete_and_clear(tmp_path: Path) -> None:
    path = tmp_path / "lists.json"
    store = SavedListStore(path)
    first = store.save("a", _items(), Decimal("45"))
    store.save("b", _items(), Decimal("45"))

    assert store.delete(first.id) is True
    assert store.delete(first.id) is False
    assert [saved.name for saved in store.list()] == ["b"]

    store.clear()
    assert not path.exists()
    assert store.list() == []


def test_corrupt_blob_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "lists.json"
    path.write_text("{not json", encoding="utf-8")
    store = SavedListStore(path)
    assert store.list() == []


def test_default_path_under_data_root(isolated_home: Path) -> None:
    store = SavedListStore()
    assert store.path == isolated_home.resolve() / "data" / "saved_shopping_lists.json"
