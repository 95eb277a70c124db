"""Small helpers for building names in generated documents."""

from __future__ import annotations

from typing import Sequence


def append_unique(items: Sequence[str], item: str) -> list[str]:
    """Return the items with the new one added at the end if it is not there yet."""
    if item in items:
        return list(items)
    return [*items, item]


def singular(plural: str) -> str:
    """Return the singular form of a collection name."""
    if plural.endswith("ves"):
        return plural[: -len("ves")] + "f"
    if plural.endswith("ies"):
        return plural[: -len("ies")] + "y"
    if plural.endswith("s"):
        return plural[:-1]
    return plural