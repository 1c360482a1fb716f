"""Small helpers for a low-power game: integer division, strides, distance."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator, NamedTuple, TypeVar

T = TypeVar("T")


def divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Quotient truncated toward zero, and the remainder with the dividend's sign."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def evens(iterable: Iterable[T]) -> Iterator[T]:
    """Every other item, starting with the first."""
    return islice(iterable, 0, None, 2)


class Position(NamedTuple):
    """A point on the game grid."""

    x: int
    y: int

    def manhattan(self) -> int:
        return abs(self.x) + abs(self.y)