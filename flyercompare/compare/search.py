"""Free-text search over the deal catalog."""

from collections.abc import Sequence
from decimal import Decimal

from flyercompare.compare.grouping import UNPARSED_PRICE_SENTINEL, sort_deals_by_price
from flyercompare.domain.deal import Deal
from flyercompare.domain.session import Basket
from flyercompare.util.money import ZERO

MIN_QUERY_LENGTH = 2


def _searchable_fields(deal: Deal) -> list[str]:
    fields = [name.lower() for name in deal.names]
    fields.extend(
        value.lower()
        for value in (deal.store, deal.type, deal.unit, deal.description)
        if value
    )
    if deal.price is not None:
        fields.append(str(deal.price).lower())
    return fields


def deal_matches_query(deal: Deal, query: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return False
    return any(needle in field for field in _searchable_fields(deal))


def search_deals(
    catalog: Sequence[Deal],
    query: str,
    mode: str | None = None,
    sentinel: Decimal = UNPARSED_PRICE_SENTINEL,
) -> list[Deal]:
    """
    Find deals whose names, store, type, unit, description or price contain the query.

    Args:
        catalog: Deals to search
        query: Free text; shorter than two characters returns nothing
        mode: "single" or "combo" to keep only deals of that type
        sentinel: Sort value for unparseable prices

    Returns:
        Matching deals, cheapest first
    """
    if len(query.strip()) < MIN_QUERY_LENGTH:
        return []

    candidates = list(catalog)
    if mode:
        mode_word = mode.strip().lower()
        candidates = [deal for deal in candidates if mode_word in (deal.type or "").lower()]

    results = [deal for deal in candidates if deal_matches_query(deal, query)]
    return sort_deals_by_price(results, sentinel)


def selected_total(results: Sequence[Deal], basket: Basket) -> Decimal:
    """Sum of parsed prices for results that are currently in the basket."""
    return sum((deal.amount for deal in results if basket.is_in_basket(deal)), ZERO)
