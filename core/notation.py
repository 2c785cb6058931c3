"""Shorthand starting-hand notation (``"AA"``, ``"AKs"``, ``"72o"``).

Resolves notation into concrete :class:`~core.deck.HoleCards`, choosing
suits uniformly at random among those not already committed elsewhere
(typically to the other player's hand).

Grammar::

    <rank><rank>            pocket pair when ranks match, offsuit otherwise
    <rank><rank>s           suited, ranks must differ
    <rank><rank>o           offsuit, ranks must differ

Rank characters are ``23456789TJQKA`` (case-insensitive).
"""

from __future__ import annotations

import logging
import random
from itertools import permutations
from typing import Iterable

from core.deck import HoleCards
from core.errors import InvalidNotationError, PairSuffixError, UnavailableCardsError
from utils.card_utils import RANK_CHARS, RANK_VALUES, RANKS, SUITS, Card

_log = logging.getLogger("equity.notation")

SUITED = "s"
OFFSUIT = "o"


def _parse_notation(notation: str) -> tuple[int, int, str]:
    """Split *notation* into ``(rank1, rank2, suffix)``; suffix is ``''`` for none."""
    if not isinstance(notation, str):
        raise InvalidNotationError(f"Hand notation must be a string, got {type(notation).__name__}")
    token = notation.strip()
    if len(token) not in (2, 3):
        raise InvalidNotationError(f"Invalid hand notation: {notation!r}")

    rank1 = RANK_VALUES.get(token[0].upper())
    rank2 = RANK_VALUES.get(token[1].upper())
    if rank1 is None or rank2 is None:
        raise InvalidNotationError(f"Invalid rank character in hand notation: {notation!r}")

    suffix = token[2].lower() if len(token) == 3 else ""
    if rank1 == rank2:
        if suffix:
            raise PairSuffixError(f"Pocket pair takes no suffix: {notation!r}")
        return rank1, rank2, ""
    if suffix not in ("", SUITED, OFFSUIT):
        raise InvalidNotationError(
            f"Invalid suffix {token[2]!r} in {notation!r}; use 's' for suited or 'o' for offsuit"
        )
    return rank1, rank2, suffix


def validate_notation(notation: str) -> None:
    """Raise :class:`InvalidNotationError` if *notation* is malformed."""
    _parse_notation(notation)


class HandNotationResolver:
    """Turns notation into concrete hole cards avoiding committed cards.

    Args:
        rng: Source of randomness for suit selection.  Pass a seeded
             ``random.Random`` for reproducible resolution.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def resolve(self, notation: str, committed: Iterable[Card] = ()) -> HoleCards:
        """Resolve *notation* into :class:`HoleCards`.

        Raises:
            InvalidNotationError:  malformed ranks or suffix.
            PairSuffixError:       a pocket pair with a suffix.
            UnavailableCardsError: no legal suit assignment remains.
        """
        rank1, rank2, suffix = _parse_notation(notation)
        blocked = set(committed)

        def free_suits(rank: int) -> list[str]:
            return [suit for suit in SUITS if Card(rank, suit) not in blocked]

        if rank1 == rank2:
            available = free_suits(rank1)
            if len(available) < 2:
                raise UnavailableCardsError(f"Not enough free suits left for {notation!r}")
            suit1, suit2 = self._rng.sample(available, 2)
        elif suffix == SUITED:
            available = [suit for suit in free_suits(rank1) if suit in free_suits(rank2)]
            if not available:
                raise UnavailableCardsError(f"No common free suit left for {notation!r}")
            suit1 = suit2 = self._rng.choice(available)
        else:
            second_free = free_suits(rank2)
            pairs = [
                (first, second)
                for first, second in permutations(SUITS, 2)
                if first in free_suits(rank1) and second in second_free
            ]
            if not pairs:
                raise UnavailableCardsError(f"No offsuit combination left for {notation!r}")
            suit1, suit2 = self._rng.choice(pairs)

        hole_cards = HoleCards(Card(rank1, suit1), Card(rank2, suit2))
        _log.debug("resolved %s -> %s", notation, hole_cards)
        return hole_cards


def resolve_hand(
    notation: str,
    committed: Iterable[Card] = (),
    rng: random.Random | None = None,
) -> HoleCards:
    """Module-level shortcut for :meth:`HandNotationResolver.resolve`."""
    return HandNotationResolver(rng).resolve(notation, committed)


def canonical_notation(hole_cards: HoleCards) -> str:
    """Canonical notation for concrete hole cards, higher rank first.

    ``As Ah`` → ``"AA"``, ``Kh Ah`` → ``"AKs"``, ``2c 7d`` → ``"72o"``.
    """
    first, second = hole_cards.card1, hole_cards.card2
    high, low = max(first.rank, second.rank), min(first.rank, second.rank)
    if high == low:
        return RANK_CHARS[high] * 2
    suffix = SUITED if first.suit == second.suit else OFFSUIT
    return f"{RANK_CHARS[high]}{RANK_CHARS[low]}{suffix}"


def starting_hands() -> list[str]:
    """All 169 canonical starting hands, strongest ranks first."""
    descending = RANKS[::-1]
    hands: list[str] = []
    for i, high in enumerate(descending):
        hands.append(high * 2)
        for low in descending[i + 1:]:
            hands.append(f"{high}{low}{SUITED}")
            hands.append(f"{high}{low}{OFFSUIT}")
    return hands
