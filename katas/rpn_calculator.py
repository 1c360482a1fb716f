"""Evaluate integer expressions in reverse Polish notation."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Callable, Iterable, Union


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


_APPLY: dict[Operation, Callable[[int, int], int]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: _truncating_divide,
}


def evaluate(inputs: Iterable[Union[Operation, int]]) -> int | None:
    """Result of the expression, or None unless it leaves exactly one value."""
    stack: list[int] = []
    for item in inputs:
        if isinstance(item, Operation):
            if len(stack) < 2:
                return None
            right = stack.pop()
            left = stack.pop()
            stack.append(_APPLY[item](left, right))
        else:
            stack.append(item)
    return stack[0] if len(stack) == 1 else None