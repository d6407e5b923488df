"""Storage of saved shopping lists.

Saved lists are kept the way the mobile app keeps them: one key-value blob,
``saved_shopping_lists``, holding a JSON array of basket snapshots. Locally
the blob is a JSON file under the data directory.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any

from flyercompare.compare.ingest import deal_from_record
from flyercompare.domain.deal import BasketItem
from flyercompare.domain.saved_list import SavedList
from flyercompare.runtime.logging import get_logger
from flyercompare.runtime.paths import get_paths
from flyercompare.util.money import parse_money

logger = get_logger(__name__)

SAVED_LISTS_KEY = "saved_shopping_lists"


class SavedListNotFound(KeyError):
    """Raised when a saved list id does not exist."""


def _parse_saved_at(value: object) -> datetime:
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            parsed = None
        if parsed is not None:
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return datetime.fromtimestamp(0, tz=timezone.utc)


def saved_list_from_dict(row: dict[str, Any]) -> SavedList:
    """Rebuild a SavedList from its stored JSON form."""
    items = []
    for item_row in row.get("items") or []:
        if not isinstance(item_row, dict):
            continue
        deal = deal_from_record(item_row)
        items.append(BasketItem(deal=deal, selected_store=str(item_row.get("selected_store") or deal.store)))
    return SavedList(
        id=str(row.get("id", "")),
        name=str(row.get("name") or "Shopping List"),
        saved_at=_parse_saved_at(row.get("savedAt")),
        total=parse_money(row.get("total")),
        items=items,
    )


class SavedListStore:
    """JSON-file backed key-value store for saved lists."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else get_paths().saved_lists_file

    def _read_rows(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            blob = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load saved lists from %s: %s", self.path, e)
            return []
        rows = blob.get(SAVED_LISTS_KEY, []) if isinstance(blob, dict) else []
        return [row for row in rows if isinstance(row, dict)] if isinstance(rows, list) else []

    def _write_rows(self, rows: list[dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({SAVED_LISTS_KEY: rows}, indent=2), encoding="utf-8")

    def list(self) -> list[SavedList]:
        """All saved lists, newest first."""
        lists = [saved_list_from_dict(row) for row in self._read_rows()]
        lists.sort(key=lambda saved: saved.saved_at, reverse=True)
        return lists

    def get(self, list_id: str) -> SavedList:
        for row in self._read_rows():
            if str(row.get("id")) == list_id:
                return saved_list_from_dict(row)
        raise SavedListNotFound(list_id)

    def save(
        self,
        name: str,
        items: Sequence[BasketItem],
        total: Decimal,
        saved_at: datetime | None = None,
    ) -> SavedList:
        """Append a basket snapshot under a fresh id and timestamp."""
        saved = SavedList(
            id=uuid.uuid4().hex,
            name=name.strip() or "Shopping List",
            saved_at=saved_at or datetime.now(timezone.utc),
            total=total,
            items=list(items),
        )
        rows = self._read_rows()
        rows.append(saved.to_dict())
        self._write_rows(rows)
        logger.info("Saved shopping list %s (%d items)", saved.id, len(saved.items))
        return saved

    def delete(self, list_id: str) -> bool:
        rows = self._read_rows()
        kept = [row for row in rows if str(row.get("id")) != list_id]
        if len(kept) == len(rows):
            return False
        self._write_rows(kept)
        logger.info("Deleted shopping list %s", list_id)
        return True

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
        logger.info("Cleared all saved shopping lists")
