"""Plain-text renderings of comparison groups, baskets and saved lists."""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from flyercompare.domain.deal import BasketItem, ComparisonGroup
from flyercompare.domain.saved_list import SavedList
from flyercompare.domain.session import Basket
from flyercompare.util.money import format_money

DEFAULT_CURRENCY = "SZL"
DEFAULT_SHARE_FOOTER = "Shared via flyercompare"


def _basket_line(item: BasketItem, currency: str) -> str:
    store = item.selected_store or item.deal.store
    return f"• {item.deal.display_name} @ {store} — {currency} {format_money(item.deal.price)}"


def format_basket_summary(
    items: Sequence[BasketItem],
    total: Decimal,
    currency: str = DEFAULT_CURRENCY,
    footer: str | None = DEFAULT_SHARE_FOOTER,
) -> str:
    """Shareable text for the current basket: header, one line per item, footer."""
    lines = [f"My Shopping List (Total: {currency} {format_money(total)})", ""]
    lines.extend(_basket_line(item, currency) for item in items)
    if footer:
        lines.extend(["", footer])
    return "\n".join(lines)


def format_saved_list_share(
    saved_list: SavedList,
    currency: str = DEFAULT_CURRENCY,
    footer: str | None = DEFAULT_SHARE_FOOTER,
) -> str:
    """Shareable text for one saved list."""
    lines = [
        saved_list.name,
        f"Saved on: {saved_list.saved_at.date().isoformat()}",
        f"Total: {currency} {format_money(saved_list.total)}",
        "",
    ]
    lines.extend(_basket_line(item, currency) for item in saved_list.items)
    if footer:
        lines.extend(["", footer])
    return "\n".join(lines)


def describe_saved_age(saved_at: datetime, now: datetime | None = None) -> str:
    """Human label for how long ago a list was saved."""
    if now is None:
        now = datetime.now(saved_at.tzinfo)
    days = (now - saved_at).days
    if days <= 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    return saved_at.date().isoformat()


def _format_rows_aligned(rows: list[tuple[str, str, str, str]], indent: str = "  ") -> list[str]:
    """Align (marker, store, price, unit) columns; prices right-aligned."""
    if not rows:
        return []

    store_width = max(len(store) for _, store, _, _ in rows)
    price_width = max(len(price) for _, _, price, _ in rows)

    lines = []
    for marker, store, price, unit in rows:
        base = f"{indent}{marker} {store.ljust(store_width)}  {price.rjust(price_width)}"
        lines.append(f"{base}  {unit}" if unit else base)
    return lines


def format_comparison_groups(
    groups: Sequence[ComparisonGroup],
    basket: Basket | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """
    Render comparison groups as text tables.

    Each row is marked ``[x]`` when the deal is in the basket and ``*`` when
    it is the cheapest in its group.
    """
    if not groups:
        return "No items to compare."

    blocks: list[str] = []
    for group in groups:
        header = group.display_name or "(unnamed item)"
        if group.is_combo:
            header += " [combo]"
        rows: list[tuple[str, str, str, str]] = []
        for deal in group.deals:
            selected = basket is not None and basket.is_in_basket(deal)
            cheapest = deal is group.cheapest_deal
            marker = ("[x]" if selected else "[ ]") + ("*" if cheapest else " ")
            rows.append((marker, deal.store or "-", f"{currency} {format_money(deal.price)}", deal.unit))
        body = _format_rows_aligned(rows) or ["  (no deals found)"]
        blocks.append("\n".join([header, *body]))
    return "\n\n".join(blocks)
