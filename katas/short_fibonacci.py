"""Small list builders."""

from __future__ import annotations


def create_empty() -> list[int]:
    return []


def create_buffer(count: int) -> list[int]:
    """A buffer of ``count`` zeroes."""
    return [0] * count


def fibonacci() -> list[int]:
    """The first five Fibonacci numbers."""
    return [1, 1, 2, 3, 5]