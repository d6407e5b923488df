"""Collapse re-ingested copies of the same flyer listing."""

from collections.abc import Sequence

from flyercompare.compare.normalizer import lowercase_names
from flyercompare.domain.deal import Deal
from flyercompare.util.money import format_money


def dedupe_key(deal: Deal) -> tuple[str, str, str, str, str]:
    """(store, names, price, type, unit) identity; missing fields become ""."""
    return (
        deal.store or "",
        "|".join(lowercase_names(deal.item)),
        format_money(deal.price),
        (deal.type or "").lower(),
        (deal.unit or "").lower(),
    )


def dedupe_deals(deals: Sequence[Deal]) -> list[Deal]:
    """Keep the first deal for each dedupe key, preserving input order."""
    seen: set[tuple[str, str, str, str, str]] = set()
    unique: list[Deal] = []
    for deal in deals:
        key = dedupe_key(deal)
        if key in seen:
            continue
        seen.add(key)
        unique.append(deal)
    return unique
