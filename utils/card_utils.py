"""Card model, encoding and normalisation utilities.

A :class:`Card` is an immutable ``(rank, suit)`` pair.  Ranks are the
integers ``2``–``14`` (Ace high); suits are the characters ``'cdhs'`` and
carry no ordering.

The 52-card universe also maps to a flat ``[0, 51]`` integer space:
``index = rank_idx * 4 + suit_idx`` where ``RANKS = '23456789TJQKA'``
and ``SUITS = 'cdhs'``.

This module is the **single source of truth** for card-string helpers
used across ``core`` and ``tools``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

RANKS = "23456789TJQKA"
"""Ordered rank characters (``2``–``A``). Index position + 2 is the rank value."""

SUITS = "cdhs"
"""Suit characters (clubs, diamonds, hearts, spades)."""

ACE = 14
LOW_ACE = 1

RANK_VALUES: dict[str, int] = {char: idx + 2 for idx, char in enumerate(RANKS)}
RANK_CHARS: dict[int, str] = {value: char for char, value in RANK_VALUES.items()}

RANK_NAMES: dict[int, str] = {
    2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six", 7: "Seven",
    8: "Eight", 9: "Nine", 10: "Ten", 11: "Jack", 12: "Queen", 13: "King",
    14: "Ace",
}

_SUIT_SYMBOLS: dict[str, str] = {"c": "♣", "d": "♦", "h": "♥", "s": "♠"}


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card.

    Attributes:
        rank: Rank value in ``[2, 14]``; Ace is ``14``.
        suit: One of ``'c'``, ``'d'``, ``'h'``, ``'s'``.
    """

    rank: int
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANK_CHARS:
            raise ValueError(f"Invalid rank value: {self.rank!r}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit!r}")

    @classmethod
    def parse(cls, text: str) -> Card:
        return parse_card(text)

    @property
    def rank_char(self) -> str:
        return RANK_CHARS[self.rank]

    @property
    def index(self) -> int:
        return (self.rank - 2) * len(SUITS) + SUITS.index(self.suit)

    def pretty(self) -> str:
        """Display form with a suit glyph, e.g. ``"A♠"``."""
        return f"{self.rank_char}{_SUIT_SYMBOLS[self.suit]}"

    def __str__(self) -> str:
        return f"{self.rank_char}{self.suit}"


# ── Parsing / normalisation ───────────────────────────────────────


def rank_char_to_int(char: str) -> int:
    """Map a rank character (``'2'``–``'A'``, case-insensitive) to its value."""
    value = RANK_VALUES.get(char.strip().upper())
    if value is None:
        raise ValueError(f"Invalid rank character: {char!r}")
    return value


def normalize_card(card: str) -> str | None:
    """Normalise a card string to canonical ``Xs`` format.

    Accepts common variants like ``"10h"`` → ``"Th"``, ``"aS"`` → ``"As"``.
    Returns ``None`` if the input is not a valid card.
    """
    cleaned = card.strip().upper().replace("10", "T")
    if len(cleaned) != 2:
        return None
    rank = cleaned[0]
    suit = cleaned[1].lower()
    if rank not in RANKS or suit not in SUITS:
        return None
    return f"{rank}{suit}"


def parse_card(text: str) -> Card:
    """Parse a two-character card string (``"As"``, ``"10h"``) into a :class:`Card`.

    Raises ``ValueError`` on malformed input.
    """
    normalized = normalize_card(text) if isinstance(text, str) else None
    if normalized is None:
        raise ValueError(f"Invalid card string: {text!r}")
    return Card(RANK_VALUES[normalized[0]], normalized[1])


def parse_cards(text: str) -> list[Card]:
    """Parse a run of cards, either space separated or concatenated (``"AsKd"``)."""
    text = text.strip()
    if not text:
        return []
    if " " in text:
        parts = text.split()
    else:
        compact = text.upper().replace("10", "T")
        if len(compact) % 2 != 0:
            raise ValueError(f"Card run length must be a multiple of 2: {text!r}")
        parts = [compact[i:i + 2] for i in range(0, len(compact), 2)]
    return [parse_card(part) for part in parts]


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(str(card) for card in cards)


# ── Index encoding ────────────────────────────────────────────────


def card_to_index(card: str) -> int:
    """Convert a two-character card (e.g. ``'As'``) to an integer index.

    Raises ``ValueError`` if *card* contains invalid rank or suit.
    """
    return parse_card(card).index


def index_to_card(index: int) -> Card:
    """Convert an integer index back to a :class:`Card`."""
    if not 0 <= index <= 51:
        raise ValueError(f"Card index out of range [0, 51]: {index}")
    rank_idx, suit_idx = divmod(index, len(SUITS))
    return Card(rank_idx + 2, SUITS[suit_idx])


# ── Universe ──────────────────────────────────────────────────────


def full_deck() -> list[Card]:
    """The 52 distinct cards in index order."""
    return [index_to_card(index) for index in range(52)]


FULL_DECK: tuple[Card, ...] = tuple(full_deck())
