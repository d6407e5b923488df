"""Data models for scanned flyer deals."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Union

from flyercompare.util.money import format_money, parse_money

DEFAULT_UNIT = "each"


@dataclass(frozen=True)
class SingleName:
    """Item field holding exactly one product name."""

    name: str

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True)
class MultipleNames:
    """Item field holding zero or several product names (a combo when > 1)."""

    names: tuple[str, ...] = ()


ItemNames = Union[SingleName, MultipleNames]


def same_id(left: object, right: object) -> bool:
    """Compare deal ids from mixed sources (JSON ints vs. string keys)."""
    if left is None or right is None:
        return False
    return str(left) == str(right)


def item_names_from_list(names: list[str]) -> ItemNames:
    """Wrap already-normalized names in the matching variant."""
    if len(names) == 1:
        return SingleName(names[0])
    return MultipleNames(tuple(names))


@dataclass(frozen=True)
class Deal:
    """A single priced listing extracted from a store flyer."""

    id: str | int
    item: ItemNames = field(default_factory=MultipleNames)
    # Raw price as scanned; see ``amount`` for the parsed value.
    price: str | int | float | Decimal | None = None
    store: str = ""
    type: str = ""
    unit: str = DEFAULT_UNIT
    description: str = ""
    image: str | None = None
    created_at: str | None = None

    @property
    def names(self) -> list[str]:
        return list(self.item.names)

    @property
    def amount(self) -> Decimal:
        return parse_money(self.price)

    @property
    def display_name(self) -> str:
        return " + ".join(self.names)

    @property
    def declared_combo(self) -> bool:
        return "combo" in (self.type or "").lower()

    @property
    def is_combo(self) -> bool:
        return len(self.item.names) > 1 or self.declared_combo

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable form, compatible with catalog rows."""
        item: str | list[str]
        if isinstance(self.item, SingleName):
            item = self.item.name
        else:
            item = list(self.item.names)
        row: dict[str, Any] = {
            "id": self.id,
            "item": item,
            "price": str(self.price) if isinstance(self.price, Decimal) else self.price,
            "amount": format_money(self.price),
            "store": self.store,
            "type": self.type,
            "unit": self.unit,
        }
        if self.description:
            row["description"] = self.description
        if self.image:
            row["image"] = self.image
        if self.created_at:
            row["created_at"] = self.created_at
        return row


@dataclass(frozen=True)
class PickedItem:
    """A deal the user marked as a representative item to compare."""

    deal: Deal
    selected_store: str = ""

    @property
    def id(self) -> str | int:
        return self.deal.id

    @property
    def names(self) -> list[str]:
        return self.deal.names

    @property
    def type(self) -> str:
        return self.deal.type

    @property
    def is_combo(self) -> bool:
        return self.deal.is_combo


@dataclass(frozen=True)
class BasketItem:
    """A deal the user has committed to buy."""

    deal: Deal
    selected_store: str = ""

    @property
    def id(self) -> str | int:
        return self.deal.id

    @property
    def amount(self) -> Decimal:
        return self.deal.amount

    def to_dict(self) -> dict[str, Any]:
        row = self.deal.to_dict()
        row["selected_store"] = self.selected_store or self.deal.store
        return row


@dataclass
class ComparisonGroup:
    """All catalog deals matching one picked item-set, cheapest first."""

    item_key: str
    display_name: str
    is_combo: bool
    deals: list[Deal] = field(default_factory=list)

    @property
    def cheapest_deal(self) -> Deal | None:
        return self.deals[0] if self.deals else None

    def to_dict(self) -> dict[str, Any]:
        cheapest = self.cheapest_deal
        return {
            "item_key": self.item_key,
            "display_name": self.display_name,
            "is_combo": self.is_combo,
            "deals": [deal.to_dict() for deal in self.deals],
            "cheapest_deal_id": cheapest.id if cheapest is not None else None,
        }
