"""Five- and seven-card poker hand evaluation.

:func:`evaluate` classifies exactly five cards into one of ten
:class:`HandCategory` values plus an integer tie-break that is only
comparable within the same category.  :func:`best_of_seven` evaluates all
21 five-card subsets of seven cards and keeps the strongest.

Tie-break encodings (rank values 2–14, Ace low only in the wheel):

===============  =============================================
Category         Tie-break
===============  =============================================
Royal Flush      constant ``14``
Straight Flush   top card of the run (wheel = ``5``)
Four of a Kind   quad rank
Full House       ``trips * 100 + pair``
Flush            ranks high→low in base 15
Straight         top card of the run (wheel = ``5``)
Three of a Kind  trip rank
Two Pair         ``high_pair * 100 + low_pair``
Pair             pair rank
High Card        ranks high→low in base 15
===============  =============================================

Base 15 exceeds the largest rank value, so every position dominates all
positions below it and no two distinct rank lists share a value.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Sequence

from core.errors import CardCountError
from utils.card_utils import ACE, RANK_NAMES, Card

RANK_BASE = 15
PAIR_WEIGHT = 100

_ROYAL_RANKS = frozenset({10, 11, 12, 13, 14})
_WHEEL_RANKS = [14, 5, 4, 3, 2]

SEVEN_CHOOSE_FIVE: tuple[tuple[int, int, int, int, int], ...] = tuple(combinations(range(7), 5))
"""The 21 index tuples selecting five of seven cards."""


class HandCategory(IntEnum):
    """Hand categories, strictly increasing in strength."""

    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True, slots=True)
class HandStrength:
    """Result of evaluating exactly five cards.

    Attributes:
        category: One of the ten :class:`HandCategory` values.
        value:    Tie-break, comparable only within the same category.
        cards:    The five constituent cards, highest rank first.
    """

    category: HandCategory
    value: int
    cards: tuple[Card, ...]

    @property
    def key(self) -> tuple[int, int]:
        """Sort key consistent with :func:`compare_hands`."""
        return (int(self.category), self.value)

    def describe(self) -> str:
        return _describe(self)

    def __str__(self) -> str:
        return self.describe()


def _plural(rank: int) -> str:
    name = RANK_NAMES[rank]
    return f"{name}es" if name == "Six" else f"{name}s"


def _describe(strength: HandStrength) -> str:
    category = strength.category
    value = strength.value
    if category is HandCategory.ROYAL_FLUSH:
        return category.label
    if category in (HandCategory.STRAIGHT_FLUSH, HandCategory.STRAIGHT):
        return f"{category.label}, {RANK_NAMES[value]} high"
    if category in (HandCategory.FOUR_OF_A_KIND, HandCategory.THREE_OF_A_KIND, HandCategory.PAIR):
        return f"{category.label}, {_plural(value)}"
    if category is HandCategory.FULL_HOUSE:
        trips, pair = divmod(value, PAIR_WEIGHT)
        return f"{category.label}, {_plural(trips)} full of {_plural(pair)}"
    if category is HandCategory.TWO_PAIR:
        high, low = divmod(value, PAIR_WEIGHT)
        return f"{category.label}, {_plural(high)} and {_plural(low)}"
    top = max(card.rank for card in strength.cards)
    return f"{category.label}, {RANK_NAMES[top]} high"


def encode_ranks(ranks: Sequence[int]) -> int:
    """Positional base-15 encoding of *ranks* (already sorted high→low)."""
    value = 0
    for rank in ranks:
        value = value * RANK_BASE + rank
    return value


def _straight_top(ranks: list[int]) -> int | None:
    """Top card of a five-rank straight, ``5`` for the wheel, else ``None``.

    *ranks* must be sorted high→low.
    """
    if len(set(ranks)) != 5:
        return None
    if ranks[0] - ranks[4] == 4:
        return ranks[0]
    if ranks == _WHEEL_RANKS:
        return 5
    return None


def evaluate(cards: Sequence[Card]) -> HandStrength:
    """Classify exactly five cards.

    Categories are tested strongest first and the first match wins.

    Raises:
        CardCountError: if *cards* does not hold exactly five cards.
    """
    if len(cards) != 5:
        raise CardCountError(f"evaluate() needs exactly 5 cards, got {len(cards)}")

    ordered = tuple(sorted(cards, key=lambda card: (card.rank, card.suit), reverse=True))
    ranks = [card.rank for card in ordered]
    is_flush = len({card.suit for card in ordered}) == 1
    straight_top = _straight_top(ranks)

    counts = Counter(ranks)
    # (count, rank) pairs, most frequent first, higher rank breaking ties
    groups = sorted(((count, rank) for rank, count in counts.items()), reverse=True)
    shape = [count for count, _ in groups]

    if is_flush and set(ranks) == _ROYAL_RANKS:
        return HandStrength(HandCategory.ROYAL_FLUSH, ACE, ordered)
    if is_flush and straight_top is not None:
        return HandStrength(HandCategory.STRAIGHT_FLUSH, straight_top, ordered)
    if shape[0] == 4:
        return HandStrength(HandCategory.FOUR_OF_A_KIND, groups[0][1], ordered)
    if shape == [3, 2]:
        trips, pair = groups[0][1], groups[1][1]
        return HandStrength(HandCategory.FULL_HOUSE, trips * PAIR_WEIGHT + pair, ordered)
    if is_flush:
        return HandStrength(HandCategory.FLUSH, encode_ranks(ranks), ordered)
    if straight_top is not None:
        return HandStrength(HandCategory.STRAIGHT, straight_top, ordered)
    if shape[0] == 3:
        return HandStrength(HandCategory.THREE_OF_A_KIND, groups[0][1], ordered)
    if shape[:2] == [2, 2]:
        high, low = groups[0][1], groups[1][1]
        return HandStrength(HandCategory.TWO_PAIR, high * PAIR_WEIGHT + low, ordered)
    if shape[0] == 2:
        return HandStrength(HandCategory.PAIR, groups[0][1], ordered)
    return HandStrength(HandCategory.HIGH_CARD, encode_ranks(ranks), ordered)


def compare_hands(first: HandStrength, second: HandStrength) -> int:
    """Return ``1`` if *first* is stronger, ``-1`` if weaker, ``0`` on a tie."""
    if first.category != second.category:
        return 1 if first.category > second.category else -1
    if first.value != second.value:
        return 1 if first.value > second.value else -1
    return 0


def best_of_seven(cards: Sequence[Card]) -> HandStrength:
    """Strongest evaluation among all 21 five-card subsets of seven cards.

    Raises:
        CardCountError: if *cards* does not hold exactly seven cards.
    """
    if len(cards) != 7:
        raise CardCountError(f"best_of_seven() needs exactly 7 cards, got {len(cards)}")

    best: HandStrength | None = None
    for indices in SEVEN_CHOOSE_FIVE:
        strength = evaluate([cards[i] for i in indices])
        if best is None or compare_hands(strength, best) > 0:
            best = strength
    assert best is not None
    return best
