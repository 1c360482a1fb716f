"""Decode an allergy score into the allergens it encodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Allergen(Enum):
    """Allergens, each worth one bit of the score."""

    EGGS = 0b00000001
    PEANUTS = 0b00000010
    SHELLFISH = 0b00000100
    STRAWBERRIES = 0b00001000
    TOMATOES = 0b00010000
    CHOCOLATE = 0b00100000
    POLLEN = 0b01000000
    CATS = 0b10000000


@dataclass(frozen=True)
class Allergies:
    """A person's allergy score."""

    score: int

    def is_allergic_to(self, allergen: Allergen) -> bool:
        return self.score & allergen.value == allergen.value

    def allergies(self) -> list[Allergen]:
        """Allergens in the score, in declaration order."""
        return [allergen for allergen in Allergen if self.is_allergic_to(allergen)]