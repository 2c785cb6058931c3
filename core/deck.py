"""Hole cards and the working deck for a single simulation trial."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator

from core.errors import CardCollisionError, CardCountError
from utils.card_utils import FULL_DECK, Card, parse_card


@dataclass(frozen=True, slots=True)
class HoleCards:
    """Two distinct private cards owned by one player.

    Same rank is allowed (a pocket pair); the same card twice is not.
    """

    card1: Card
    card2: Card

    def __post_init__(self) -> None:
        if self.card1 == self.card2:
            raise CardCollisionError(f"Hole cards must be distinct, got {self.card1} twice")

    @classmethod
    def parse(cls, first: str, second: str) -> HoleCards:
        return cls(parse_card(first), parse_card(second))

    @property
    def cards(self) -> tuple[Card, Card]:
        return (self.card1, self.card2)

    def __iter__(self) -> Iterator[Card]:
        return iter((self.card1, self.card2))

    def __str__(self) -> str:
        return f"{self.card1}{self.card2}"


class Deck:
    """Ordered sequence of distinct cards, initially the full 52.

    Mutated only by :meth:`remove` and :meth:`shuffle`; :meth:`deal`
    pops from the top.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        self._cards: list[Card] = list(FULL_DECK if cards is None else cards)
        if len(set(self._cards)) != len(self._cards):
            raise CardCollisionError("Deck contains duplicate cards")

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    def remove(self, cards: Iterable[Card]) -> None:
        """Drop every card in *cards* that is present; unknown cards are ignored."""
        blocked = set(cards)
        self._cards = [card for card in self._cards if card not in blocked]

    def shuffle(self, rng: random.Random) -> None:
        """Unbiased in-place permutation (Fisher–Yates via ``rng.shuffle``)."""
        rng.shuffle(self._cards)

    def deal(self, count: int) -> list[Card]:
        if count < 0 or count > len(self._cards):
            raise CardCountError(f"Cannot deal {count} cards from a deck of {len(self._cards)}")
        dealt = self._cards[:count]
        del self._cards[:count]
        return dealt

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"<Deck cards={len(self._cards)}>"
