"""Core domain models for flyercompare.

This module provides the data models used throughout the project:
- Deal, SingleName, MultipleNames: scanned flyer listings
- PickedItem, BasketItem, ComparisonGroup: comparison inputs and outputs
- ShoppingSession, PickList, Basket, BudgetTracker: per-session state
- SavedList: persisted basket snapshot

Usage:
    from flyercompare.domain import Deal, ShoppingSession
"""

from flyercompare.domain.deal import (
    DEFAULT_UNIT,
    BasketItem,
    ComparisonGroup,
    Deal,
    ItemNames,
    MultipleNames,
    PickedItem,
    SingleName,
    item_names_from_list,
    same_id,
)
from flyercompare.domain.saved_list import SavedList
from flyercompare.domain.session import Basket, BudgetTracker, PickList, ShoppingSession

__all__ = [
    "DEFAULT_UNIT",
    "BasketItem",
    "ComparisonGroup",
    "Deal",
    "ItemNames",
    "MultipleNames",
    "PickedItem",
    "SingleName",
    "item_names_from_list",
    "same_id",
    "SavedList",
    "Basket",
    "BudgetTracker",
    "PickList",
    "ShoppingSession",
]
