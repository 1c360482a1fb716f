"""Tally football match results into a league table."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum

HEADER = "Team                           | MP |  W |  D |  L |  P"


class _Outcome(Enum):
    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"

    @property
    def opposite(self) -> _Outcome:
        return {
            _Outcome.WIN: _Outcome.LOSS,
            _Outcome.DRAW: _Outcome.DRAW,
            _Outcome.LOSS: _Outcome.WIN,
        }[self]


@dataclass
class _Record:
    wins: int = 0
    draws: int = 0
    losses: int = 0

    def record(self, outcome: _Outcome) -> None:
        if outcome is _Outcome.WIN:
            self.wins += 1
        elif outcome is _Outcome.DRAW:
            self.draws += 1
        else:
            self.losses += 1

    @property
    def played(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def points(self) -> int:
        return 3 * self.wins + self.draws


def tally(results: str) -> str:
    """League table for lines of ``home;away;win|draw|loss``.

    Teams are ordered by points, highest first, then by name.
    """
    records: defaultdict[str, _Record] = defaultdict(_Record)
    for line in results.splitlines():
        fields = line.split(";")
        if len(fields) < 3:
            raise ValueError(f"Invalid match line: {line!r}")
        home, away, text = fields[:3]
        try:
            outcome = _Outcome(text)
        except ValueError:
            raise ValueError("Invalid match result") from None
        records[home].record(outcome)
        records[away].record(outcome.opposite)

    ordered = sorted(records.items(), key=lambda item: (-item[1].points, item[0]))
    rows = [
        f"{team:<30} | {r.played:>2} | {r.wins:>2} | {r.draws:>2} | {r.losses:>2} | {r.points:>2}"
        for team, r in ordered
    ]
    return "\n".join([HEADER, *rows])