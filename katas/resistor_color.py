"""Resistor colour bands and their digit values."""

from __future__ import annotations

from enum import IntEnum


class ResistorColor(IntEnum):
    """Band colours, valued by the digit they stand for."""

    BLACK = 0
    BROWN = 1
    RED = 2
    ORANGE = 3
    YELLOW = 4
    GREEN = 5
    BLUE = 6
    VIOLET = 7
    GREY = 8
    WHITE = 9


def color_to_value(color: ResistorColor) -> int:
    return int(color)


def value_to_color_string(value: int) -> str:
    """Colour name such as ``Red`` for a digit, or ``value out of range``."""
    try:
        return ResistorColor(value).name.capitalize()
    except ValueError:
        return "value out of range"


def colors() -> list[ResistorColor]:
    """All colours in value order."""
    return list(ResistorColor)