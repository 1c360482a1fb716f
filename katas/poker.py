"""Pick the winning hands from a list of five-card poker hands."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

_FACES = {"A": 14, "K": 13, "Q": 12, "J": 11}


class Category(IntEnum):
    """Hand categories from weakest to strongest."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9


@dataclass(frozen=True, order=True)
class Rank:
    """A category with the card ranks that order hands within it."""

    category: Category
    values: tuple[int, ...]


@dataclass(frozen=True)
class Card:
    rank: int
    suit: str

    @classmethod
    def parse(cls, text: str) -> Card:
        """Parse a card such as ``10H`` or ``AS``."""
        if len(text) < 2:
            raise ValueError(f"invalid card: {text!r}")
        face, suit = text[:-1], text[-1]
        rank = _FACES[face] if face in _FACES else int(face)
        return cls(rank, suit)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


def _straight_high(ranks: list[int]) -> int | None:
    def consecutive(values: list[int]) -> bool:
        return all(a == b + 1 for a, b in zip(values, values[1:]))

    if consecutive(ranks):
        return ranks[0]
    if ranks[0] == 14 and ranks[-1] == 2 and consecutive(ranks[1:]):
        return ranks[1]
    return None


def _rank_cards(cards: tuple[Card, ...]) -> Rank:
    ranks = [card.rank for card in cards]
    counts = Counter(ranks)
    by_count: dict[int, list[int]] = {}
    for value, count in counts.items():
        by_count.setdefault(count, []).append(value)
    for values in by_count.values():
        values.sort(reverse=True)
    is_flush = len({card.suit for card in cards}) == 1

    high = _straight_high(ranks)
    if high is not None:
        category = Category.STRAIGHT_FLUSH if is_flush else Category.STRAIGHT
        return Rank(category, (high,))
    if is_flush:
        return Rank(Category.FLUSH, (ranks[0],))
    if 5 in by_count:
        raise ValueError("five of a kind is not supported")
    if 4 in by_count:
        return Rank(Category.FOUR_OF_A_KIND, (by_count[4][0],))
    if 3 in by_count and 2 in by_count:
        return Rank(Category.FULL_HOUSE, (by_count[3][0], by_count[2][0]))
    if 3 in by_count:
        return Rank(Category.THREE_OF_A_KIND, (by_count[3][0],))
    pairs = by_count.get(2, [])
    if len(pairs) == 2:
        return Rank(Category.TWO_PAIR, (pairs[0], pairs[1]))
    if pairs:
        return Rank(Category.ONE_PAIR, (pairs[0],))
    return Rank(Category.HIGH_CARD, (ranks[0],))


@dataclass(frozen=True)
class Hand:
    """A parsed hand, its cards highest first, and its rank."""

    text: str
    cards: tuple[Card, ...]
    rank: Rank

    @classmethod
    def parse(cls, text: str) -> Hand:
        cards = tuple(
            sorted((Card.parse(part) for part in text.split()), key=lambda c: c.rank, reverse=True)
        )
        if not cards:
            raise ValueError("a hand needs cards")
        return cls(text, cards, _rank_cards(cards))

    @property
    def strength(self) -> tuple[Rank, tuple[int, ...]]:
        """Key that orders hands: rank first, then card ranks highest first."""
        return self.rank, tuple(card.rank for card in self.cards)

    def __str__(self) -> str:
        return f"{' '.join(map(str, self.cards))}:{self.rank}"


def winning_hands(hands: list[str]) -> list[str]:
    """The given hand strings that tie for best, in input order."""
    if not hands:
        raise ValueError("no hands given")
    parsed = [Hand.parse(hand) for hand in hands]
    best = max(hand.strength for hand in parsed)
    return [hand.text for hand in parsed if hand.strength == best]