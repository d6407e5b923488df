"""Currency parsing for flyer prices.

Flyer prices come out of OCR as free text ("$1,299.90", "SZL 45", "R 12.50",
"abc"). Every caller goes through ``try_parse_money`` / ``parse_money`` so the
cleanup rules live in one place.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

# Everything except digits, the decimal point and a sign is noise
# (currency symbols, thousands separators, whitespace, currency codes).
_MONEY_NOISE_RE = re.compile(r"[^0-9.\-]")
# Leading number of the cleaned text; trailing junk ("45.99." or "12-15") is ignored.
_LEADING_NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def try_parse_money(value: object) -> Decimal | None:
    """
    Parse a price into a non-negative 2dp Decimal.

    Returns None when the value is missing, unparseable, negative or not finite.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(_MONEY_NOISE_RE.sub("", value))
        if match is None:
            return None
        try:
            amount = Decimal(match.group())
        except InvalidOperation:
            return None
    else:
        return None

    if not amount.is_finite() or amount < 0:
        return None
    if amount == 0:
        return ZERO
    try:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the decimal context holds.
        return None


def parse_money(value: object) -> Decimal:
    """Parse a price, falling back to 0.00 for anything unparseable."""
    amount = try_parse_money(value)
    return ZERO if amount is None else amount


def format_money(value: object) -> str:
    """Render a price with exactly two fraction digits."""
    return f"{parse_money(value):.2f}"
