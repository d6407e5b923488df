"""Per-session shopping state: picks, basket and budget.

A ``ShoppingSession`` is created by whoever drives the comparison (the CLI,
one HTTP request) and passed explicitly to the code that needs it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from flyercompare.domain.deal import BasketItem, Deal, PickedItem, same_id
from flyercompare.util.money import ZERO


class PickList:
    """Ordered list of representative items the user wants compared."""

    def __init__(self) -> None:
        self._items: list[PickedItem] = []

    @property
    def items(self) -> list[PickedItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def pick(self, deal: Deal, store: str | None = None) -> bool:
        """Add a pick; an id that is already picked is ignored."""
        if any(same_id(existing.id, deal.id) for existing in self._items):
            return False
        self._items.append(PickedItem(deal=deal, selected_store=store or deal.store))
        return True

    def unpick(self, deal_id: str | int) -> None:
        self._items = [item for item in self._items if not same_id(item.id, deal_id)]

    def clear(self) -> None:
        self._items = []


class Basket:
    """Deals the user committed to, keyed by deal id."""

    def __init__(self) -> None:
        self._items: list[BasketItem] = []

    @property
    def items(self) -> list[BasketItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_in_basket(self, deal: Deal) -> bool:
        return any(same_id(item.id, deal.id) for item in self._items)

    def toggle(self, deal: Deal, store: str | None = None) -> bool:
        """
        Add the deal if absent, remove it if present.

        Returns:
            True if the deal is in the basket afterwards.
        """
        if self.is_in_basket(deal):
            self.remove(deal.id)
            return False
        self._items.append(BasketItem(deal=deal, selected_store=store or deal.store))
        return True

    def remove(self, deal_id: str | int) -> None:
        self._items = [item for item in self._items if not same_id(item.id, deal_id)]

    def clear(self) -> None:
        self._items = []

    @property
    def total(self) -> Decimal:
        return sum((item.amount for item in self._items), ZERO)


def _coerce_budget(amount: object) -> Decimal | None:
    """Return a positive finite Decimal, or None if the input is not one."""
    if isinstance(amount, bool):
        return None
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, (int, float)):
        value = Decimal(str(amount))
    elif isinstance(amount, str):
        try:
            value = Decimal(amount.strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not value.is_finite() or value <= 0:
        return None
    return value


class BudgetTracker:
    """Optional spending ceiling for the current session."""

    def __init__(self, budget: Decimal | None = None) -> None:
        self._budget = budget

    @property
    def budget(self) -> Decimal | None:
        return self._budget

    def set_budget(self, amount: object) -> bool:
        """
        Set or clear the ceiling.

        ``None`` always clears. Non-numeric, non-positive or non-finite
        amounts are rejected and leave the current budget untouched.

        Returns:
            True if the state was updated.
        """
        if amount is None:
            self._budget = None
            return True
        value = _coerce_budget(amount)
        if value is None:
            return False
        self._budget = value
        return True

    def remaining(self, spent: Decimal) -> Decimal | None:
        if self._budget is None:
            return None
        return self._budget - spent


@dataclass
class ShoppingSession:
    """Everything one shopper has selected during a comparison session."""

    picks: PickList = field(default_factory=PickList)
    basket: Basket = field(default_factory=Basket)
    budget: BudgetTracker = field(default_factory=BudgetTracker)

    @property
    def spent(self) -> Decimal:
        return self.basket.total

    @property
    def remaining(self) -> Decimal | None:
        return self.budget.remaining(self.spent)

    def reset(self) -> None:
        """Forget picks when the comparison screen is left."""
        self.picks.clear()
