"""Annotate a minesweeper board with counts of adjacent mines."""

from __future__ import annotations

MINE = "*"


def annotate(minefield: list[str]) -> list[str]:
    """Replace each empty square by its count of neighbouring mines, or a space for none."""

    def is_mine(row: int, col: int) -> bool:
        return 0 <= row < len(minefield) and 0 <= col < len(minefield[row]) and minefield[row][col] == MINE

    def square(row: int, col: int) -> str:
        if minefield[row][col] == MINE:
            return MINE
        count = sum(
            is_mine(r, c)
            for r in range(row - 1, row + 2)
            for c in range(col - 1, col + 2)
        )
        return str(count) if count else " "

    return ["".join(square(r, c) for c in range(len(line))) for r, line in enumerate(minefield)]