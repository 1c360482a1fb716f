"""A school roster grouped by grade."""

from __future__ import annotations

from collections import defaultdict


class School:
    """Students enrolled by grade."""

    def __init__(self) -> None:
        self._roster: dict[int, list[str]] = defaultdict(list)

    def add(self, grade: int, student: str) -> None:
        self._roster[grade].append(student)

    def grades(self) -> list[int]:
        """Grades with at least one student, ascending."""
        return sorted(self._roster)

    def grade(self, grade: int) -> list[str]:
        """Students in a grade, sorted by name."""
        return sorted(self._roster.get(grade, []))