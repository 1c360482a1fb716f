"""Ages on the planets of the solar system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_SECONDS_PER_EARTH_YEAR = 31_557_600.0


@dataclass(frozen=True)
class Duration:
    """A span of time in Earth years."""

    earth_years: float

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        return cls(seconds / _SECONDS_PER_EARTH_YEAR)


class Planet(Enum):
    """Planets, valued by their orbital period in Earth years."""

    EARTH = 1.0
    MERCURY = 0.2408467
    VENUS = 0.61519726
    MARS = 1.8808158
    JUPITER = 11.862615
    SATURN = 29.447498
    URANUS = 84.016846
    NEPTUNE = 164.79132

    def years_during(self, duration: Duration) -> float:
        """Number of this planet's years that fit in the duration."""
        return duration.earth_years / self.value