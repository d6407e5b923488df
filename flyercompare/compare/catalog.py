"""In-memory copy of the flyer deal catalog.

The catalog is owned by an external fetch-and-subscribe collaborator; this
copy only applies its insert/update/delete notifications, keyed by deal id.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from flyercompare.compare.ingest import deal_from_record
from flyercompare.domain.deal import Deal, same_id


class Catalog:
    """Ordered deal list with change-notification handlers."""

    def __init__(self, deals: Iterable[Deal] = ()) -> None:
        self._deals: list[Deal] = list(deals)

    def __iter__(self) -> Iterator[Deal]:
        return iter(self._deals)

    def __len__(self) -> int:
        return len(self._deals)

    @property
    def deals(self) -> list[Deal]:
        return list(self._deals)

    def get(self, deal_id: str | int) -> Deal | None:
        for deal in self._deals:
            if same_id(deal.id, deal_id):
                return deal
        return None

    def replace_all(self, deals: Iterable[Deal]) -> None:
        """Swap in a fresh bulk fetch."""
        self._deals = list(deals)

    def apply_insert(self, deal: Deal) -> None:
        self._deals.append(deal)

    def apply_update(self, deal: Deal) -> bool:
        """Replace the deal with the same id in place. Unknown ids are ignored."""
        for idx, existing in enumerate(self._deals):
            if same_id(existing.id, deal.id):
                self._deals[idx] = deal
                return True
        return False

    def apply_delete(self, deal_id: str | int) -> bool:
        before = len(self._deals)
        self._deals = [deal for deal in self._deals if not same_id(deal.id, deal_id)]
        return len(self._deals) != before

    def apply_change(self, payload: Mapping[str, Any]) -> bool:
        """
        Apply one realtime change payload.

        Payload shape: {"eventType": "INSERT"|"UPDATE"|"DELETE", "new": row, "old": row}

        Returns:
            True if the catalog changed.
        """
        event = str(payload.get("eventType") or payload.get("type") or "").upper()
        new_row = payload.get("new")
        old_row = payload.get("old")
        if not isinstance(new_row, Mapping):
            new_row = {}
        if not isinstance(old_row, Mapping):
            old_row = {}

        if event == "INSERT" and new_row.get("id") is not None:
            self.apply_insert(deal_from_record(new_row))
            return True
        if event == "UPDATE" and new_row.get("id") is not None:
            return self.apply_update(deal_from_record(new_row))
        if event == "DELETE":
            deal_id = old_row.get("id", new_row.get("id"))
            if deal_id is None:
                return False
            return self.apply_delete(deal_id)
        return False
