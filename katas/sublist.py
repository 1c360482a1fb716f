"""Classify how two lists relate: equal, sublist, superlist or unequal."""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class Comparison(Enum):
    EQUAL = "equal"
    SUBLIST = "sublist"
    SUPERLIST = "superlist"
    UNEQUAL = "unequal"


def _contains(haystack: list, needle: list) -> bool:
    size = len(needle)
    first = needle[0]
    return any(
        haystack[start] == first and haystack[start : start + size] == needle
        for start in range(len(haystack) - size + 1)
    )


def sublist(a: Sequence, b: Sequence) -> Comparison:
    """How ``a`` relates to ``b`` as contiguous runs of items."""
    first, second = list(a), list(b)
    if not first and second:
        return Comparison.SUBLIST
    if first and not second:
        return Comparison.SUPERLIST
    if first == second:
        return Comparison.EQUAL
    if _contains(first, second):
        return Comparison.SUPERLIST
    if _contains(second, first):
        return Comparison.SUBLIST
    return Comparison.UNEQUAL