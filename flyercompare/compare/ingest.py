"""Convert catalog rows and flyer extraction output into Deal objects."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from flyercompare.compare.normalizer import resolve_item_names
from flyercompare.domain.deal import DEFAULT_UNIT, Deal

# Field names the extraction service and older catalog rows use for item names.
_ITEM_FIELDS = ("item", "itemName(s)", "items", "name")


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _raw_item(row: Mapping[str, Any]) -> object:
    for name in _ITEM_FIELDS:
        if name in row and row[name] is not None:
            return row[name]
    return None


def deal_from_record(row: Mapping[str, Any], store: str | None = None) -> Deal:
    """
    Build a Deal from a catalog row.

    The item field is resolved once here; price stays as scanned and is
    parsed on demand. A missing unit defaults to "each".
    """
    price = row.get("price")
    if isinstance(price, str):
        price = price.strip()
    return Deal(
        id=row.get("id"),  # type: ignore[arg-type]
        item=resolve_item_names(_raw_item(row)),
        price=price,
        store=_text(row.get("store")) or _text(store),
        type=_text(row.get("type")),
        unit=_text(row.get("unit")) or DEFAULT_UNIT,
        description=_text(row.get("description")),
        image=row.get("image") or None,
        created_at=row.get("created_at") or None,
    )


def deals_from_records(rows: Iterable[object]) -> list[Deal]:
    """Convert catalog rows, skipping anything that is not a row with an id."""
    deals: list[Deal] = []
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        if row.get("id") is None:
            continue
        deals.append(deal_from_record(row))
    return deals


def _new_deal_id() -> str:
    return uuid.uuid4().hex


def ingest_flyer_extraction(
    records: Iterable[object],
    store: str,
    id_factory: Callable[[], str | int] = _new_deal_id,
) -> list[Deal]:
    """
    Turn AI/OCR flyer extraction records into Deals for one store.

    Extraction records look like::

        {"itemName(s)": ["BUILD IT BOWSAW"], "price": "99.90",
         "type": "single item", "description": "600mm, each"}

    Records without any usable item name are dropped.
    """
    deals: list[Deal] = []
    for record in records:
        if not isinstance(record, Mapping):
            continue
        item = resolve_item_names(_raw_item(record))
        if not item.names:
            continue
        row = dict(record)
        row["id"] = record.get("id") or id_factory()
        deal = deal_from_record(row, store=store)
        deals.append(deal)
    return deals
