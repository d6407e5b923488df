"""Saved shopping list snapshot model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from flyercompare.domain.deal import BasketItem


@dataclass(frozen=True)
class SavedList:
    """A basket snapshot persisted under a generated id and timestamp."""

    id: str
    name: str
    saved_at: datetime
    total: Decimal
    items: list[BasketItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "savedAt": self.saved_at.isoformat(),
            "total": f"{self.total:.2f}",
            "items": [item.to_dict() for item in self.items],
        }
