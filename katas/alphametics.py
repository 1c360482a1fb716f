"""Solver for alphametic addition puzzles such as ``SEND + MORE == MONEY``."""

from __future__ import annotations

import re
from collections import defaultdict
from operator import mul

_DELIMITERS = re.compile(r"[+= ]")


def _parse(puzzle: str) -> list[str]:
    return [term.strip() for term in _DELIMITERS.split(puzzle) if term.strip()]


def _weights(addends: list[str], result: str) -> dict[str, int]:
    """Net place value of each letter: addends count positive, the result negative."""
    weights: dict[str, int] = defaultdict(int)
    for term in addends:
        for power, letter in enumerate(reversed(term)):
            weights[letter] += 10**power
    for power, letter in enumerate(reversed(result)):
        weights[letter] -= 10**power
    return dict(weights)


def _reachable(weights: list[int], digits: frozenset[int]) -> tuple[int, int]:
    """Smallest and largest weighted sum the given letters can still reach."""
    positive = sorted((w for w in weights if w > 0), reverse=True)
    negative = sorted(w for w in weights if w < 0)
    ascending = sorted(digits)
    descending = ascending[::-1]
    high = sum(map(mul, positive, descending)) + sum(map(mul, negative, ascending))
    low = sum(map(mul, positive, ascending)) + sum(map(mul, negative, descending))
    return low, high


def solve(puzzle: str) -> dict[str, int] | None:
    """Map each letter to a distinct digit so the sum holds, or return None.

    The last term is the result; every term's first letter must not be zero.
    """
    terms = _parse(puzzle)
    if not terms:
        raise ValueError("puzzle has no terms")
    *addends, result = terms
    if any(len(addend) > len(result) for addend in addends):
        return None

    weights = _weights(addends, result)
    if len(weights) > 10:
        return None
    leading = {term[0] for term in terms}
    letters = sorted(weights, key=lambda c: (-abs(weights[c]), c))
    remaining = [[weights[c] for c in letters[depth:]] for depth in range(len(letters))]
    assignment: dict[str, int] = {}

    def place(depth: int, total: int, free: frozenset[int]) -> bool:
        if depth == len(letters):
            return total == 0
        low, high = _reachable(remaining[depth], free)
        if not low <= -total <= high:
            return False
        letter = letters[depth]
        for digit in sorted(free):
            if digit == 0 and letter in leading:
                continue
            assignment[letter] = digit
            if place(depth + 1, total + weights[letter] * digit, free - {digit}):
                return True
        assignment.pop(letter, None)
        return False

    if place(0, 0, frozenset(range(10))):
        return dict(assignment)
    return None