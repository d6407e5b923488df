"""Item name normalization for flyer deals.

OCR/AI extraction hands us the item field in several shapes:
    "Basmati Rice 2kg"
    "STANLEY SMALL ANGLE GRINDER, LARGE ANGLE GRINDER"
    ["STANLEY SMALL ANGLE GRINDER, LARGE ANGLE GRINDER"]
    ["bread", "milk"]

``normalize_item_names`` flattens all of them into an ordered list of trimmed
names, and ``token_key`` turns that list into the canonical identity used for
grouping picks and deduplicating deals.
"""

from collections.abc import Iterable

from flyercompare.domain.deal import ItemNames, MultipleNames, SingleName, item_names_from_list

TOKEN_DELIMITER = " ||| "


def _clean_names(values: Iterable[object]) -> list[str]:
    names: list[str] = []
    for value in values:
        # Non-string entries (numbers, nulls, nested lists) carry no usable name.
        if not isinstance(value, str):
            continue
        name = value.strip()
        if name:
            names.append(name)
    return names


def _split_on_commas(value: str) -> list[str]:
    return _clean_names(value.split(","))


def normalize_item_names(value: object) -> list[str]:
    """
    Flatten an item field of unknown shape into individual item names.

    Args:
        value: A string, a comma-delimited string, a list/tuple of strings,
               an already-resolved ``ItemNames``, or anything else.

    Returns:
        Ordered list of non-empty trimmed names. Unknown shapes give [].
    """
    if value is None:
        return []

    if isinstance(value, (SingleName, MultipleNames)):
        return _clean_names(value.names)

    if isinstance(value, str):
        if "," in value:
            return _split_on_commas(value)
        return _clean_names([value])

    if isinstance(value, (list, tuple)):
        names = _clean_names(value)
        # A one-element list is how the extractor ships comma-joined combos.
        if len(names) == 1 and "," in names[0]:
            return _split_on_commas(names[0])
        return names

    return []


def resolve_item_names(value: object) -> ItemNames:
    """Resolve a raw item field once into its tagged variant."""
    return item_names_from_list(normalize_item_names(value))


def lowercase_names(value: object) -> list[str]:
    return [name.lower() for name in normalize_item_names(value)]


def token_key(value: object) -> str:
    """Sorted, lowercased, delimiter-joined identity of an item-name set."""
    return TOKEN_DELIMITER.join(sorted(lowercase_names(value)))
