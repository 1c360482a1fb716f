"""A player that can be revived and can cast spells."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    health: int
    mana: int | None
    level: int

    def revive(self) -> Player | None:
        """A fresh player if this one is dead; players of level 10 and above regain mana."""
        if self.health != 0:
            return None
        return Player(health=100, mana=100 if self.level >= 10 else None, level=self.level)

    def cast_spell(self, mana_cost: int) -> int:
        """Spend mana for twice its damage; without a mana pool, health pays instead."""
        if self.mana is None:
            self.health = max(self.health - mana_cost, 0)
            return 0
        if self.mana < mana_cost:
            return 0
        self.mana -= mana_cost
        return mana_cost * 2