"""Assemble per-pick comparison groups from the deal catalog."""

from collections.abc import Sequence
from decimal import Decimal

from flyercompare.compare.dedupe import dedupe_deals
from flyercompare.compare.matcher import EXTRA_ITEMS_ALLOWED, is_combo_pick, match_deals
from flyercompare.compare.normalizer import token_key
from flyercompare.domain.deal import ComparisonGroup, Deal, PickedItem
from flyercompare.util.money import try_parse_money

# Sort value for unparseable prices; must stay above every real price.
UNPARSED_PRICE_SENTINEL = Decimal("999999")


def price_sort_key(deal: Deal, sentinel: Decimal = UNPARSED_PRICE_SENTINEL) -> Decimal:
    amount = try_parse_money(deal.price)
    return sentinel if amount is None else amount


def sort_deals_by_price(
    deals: Sequence[Deal],
    sentinel: Decimal = UNPARSED_PRICE_SENTINEL,
) -> list[Deal]:
    """Stable ascending sort; ties keep their original order."""
    return sorted(deals, key=lambda deal: price_sort_key(deal, sentinel))


def build_group(
    pick: PickedItem | Deal,
    catalog: Sequence[Deal],
    extra_items_allowed: int = EXTRA_ITEMS_ALLOWED,
    sentinel: Decimal = UNPARSED_PRICE_SENTINEL,
) -> ComparisonGroup:
    matches = dedupe_deals(match_deals(pick, catalog, extra_items_allowed))
    names = pick.names
    return ComparisonGroup(
        item_key=token_key(names),
        display_name=" + ".join(names),
        is_combo=is_combo_pick(names, pick.type),
        deals=sort_deals_by_price(matches, sentinel),
    )


def build_comparison_groups(
    picks: Sequence[PickedItem | Deal],
    catalog: Sequence[Deal],
    extra_items_allowed: int = EXTRA_ITEMS_ALLOWED,
    sentinel: Decimal = UNPARSED_PRICE_SENTINEL,
) -> list[ComparisonGroup]:
    """
    Build one comparison group per distinct picked item-set.

    Picks sharing a token key collapse into the first one seen. Group order
    follows pick order, deal order within a group is price ascending.

    Args:
        picks: Picked items, in the order the user picked them
        catalog: Current deal catalog
        extra_items_allowed: Combo tolerance for extra bundled items
        sentinel: Sort value used for unparseable prices

    Returns:
        Comparison groups; empty when there are no picks.
    """
    groups: list[ComparisonGroup] = []
    seen_keys: set[str] = set()
    for pick in picks:
        key = token_key(pick.names)
        if key in seen_keys:
            continue
        seen_keys.add(key)
        groups.append(build_group(pick, catalog, extra_items_allowed, sentinel))
    return groups
