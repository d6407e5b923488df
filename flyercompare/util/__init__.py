"""Dependency-free helpers shared by the pure comparison layers.

Nothing under ``flyercompare.util`` may import other ``flyercompare`` modules.
"""

from .money import (
    CENTS,
    ZERO,
    format_money,
    parse_money,
    try_parse_money,
)

__all__ = [
    "CENTS",
    "ZERO",
    "format_money",
    "parse_money",
    "try_parse_money",
]
