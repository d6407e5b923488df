"""Match catalog deals against a picked item.

Matching is plain case-insensitive substring containment: no stemming, edit
distance or synonyms. Picks with one name use single-item rules; picks with
several names (or a declared combo type) use combo rules.
"""

from collections.abc import Sequence

from flyercompare.compare.normalizer import lowercase_names
from flyercompare.domain.deal import Deal, PickedItem, same_id

# Combo tolerances; ``extra_items_allowed`` is overridable in settings.
EXTRA_ITEMS_ALLOWED = 1
MIN_COMBO_ITEMS = 2


def is_combo_pick(tokens: Sequence[str], declared_type: str | None = None) -> bool:
    return len(tokens) > 1 or "combo" in (declared_type or "").lower()


def _token_in_names(token: str, names: Sequence[str]) -> bool:
    return any(token in name for name in names)


def single_item_matches(token: str, deal: Deal) -> bool:
    """
    True if the deal is a single listing and one of its names contains the token.

    Combo deals never join a single-item group; they are compared in combo groups.
    """
    deal_names = lowercase_names(deal.item)
    if len(deal_names) >= MIN_COMBO_ITEMS or deal.declared_combo:
        return False
    return _token_in_names(token.lower(), deal_names)


def combo_matches(
    tokens: Sequence[str],
    deal: Deal,
    extra_items_allowed: int = EXTRA_ITEMS_ALLOWED,
) -> bool:
    """
    True if the deal is the same bundle as the picked tokens.

    All tokens must appear in the deal's names, the deal may carry at most
    ``extra_items_allowed`` more items than the pick, and the deal must itself
    be a multi-item listing.
    """
    if not tokens:
        return False
    deal_names = lowercase_names(deal.item)
    if len(deal_names) < MIN_COMBO_ITEMS:
        return False
    if len(deal_names) > len(tokens) + extra_items_allowed:
        return False
    return all(_token_in_names(token.lower(), deal_names) for token in tokens)


def match_deals(
    pick: PickedItem | Deal,
    catalog: Sequence[Deal],
    extra_items_allowed: int = EXTRA_ITEMS_ALLOWED,
) -> list[Deal]:
    """
    Return catalog deals considered the same product(s) as the pick.

    The deal that produced the pick (same id) is always included. Catalog
    order is preserved.
    """
    tokens = [token.lower() for token in pick.names]
    combo = is_combo_pick(tokens, pick.type)

    matches: list[Deal] = []
    for deal in catalog:
        if same_id(deal.id, pick.id):
            matches.append(deal)
            continue
        if not tokens:
            continue
        if combo:
            if combo_matches(tokens, deal, extra_items_allowed):
                matches.append(deal)
        elif single_item_matches(tokens[0], deal):
            matches.append(deal)
    return matches
