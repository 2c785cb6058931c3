"""Tests for core.notation — shorthand hand notation resolution."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from core.errors import InvalidNotationError, PairSuffixError, UnavailableCardsError
from core.notation import (
    HandNotationResolver,
    canonical_notation,
    resolve_hand,
    starting_hands,
    validate_notation,
)
from core.deck import HoleCards
from utils.card_utils import Card, parse_cards


@pytest.fixture
def resolver() -> HandNotationResolver:
    return HandNotationResolver(random.Random(1234))


# ── Grammar ───────────────────────────────────────────────────────


class TestParsing:
    @pytest.mark.parametrize("notation", ["", "A", "AKso", "1K", "AX", "A K", "10K"])
    def test_malformed_notation(self, resolver: HandNotationResolver, notation: str) -> None:
        with pytest.raises(InvalidNotationError):
            resolver.resolve(notation)

    @pytest.mark.parametrize("notation", ["AAs", "KKo", "22x"])
    def test_pair_with_suffix(self, resolver: HandNotationResolver, notation: str) -> None:
        with pytest.raises(PairSuffixError):
            resolver.resolve(notation)

    def test_unknown_suffix(self, resolver: HandNotationResolver) -> None:
        with pytest.raises(InvalidNotationError) as excinfo:
            resolver.resolve("AKx")
        assert not isinstance(excinfo.value, PairSuffixError)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            validate_notation("ZZ")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidNotationError):
            validate_notation(42)  # type: ignore[arg-type]

    def test_case_insensitive(self, resolver: HandNotationResolver) -> None:
        hole = resolver.resolve("akS")
        assert (hole.card1.rank, hole.card2.rank) == (14, 13)
        assert hole.card1.suit == hole.card2.suit


# ── Suit assignment ───────────────────────────────────────────────


class TestPocketPairs:
    def test_two_distinct_suits(self, resolver: HandNotationResolver) -> None:
        hole = resolver.resolve("QQ")
        assert hole.card1.rank == hole.card2.rank == 12
        assert hole.card1.suit != hole.card2.suit

    def test_avoids_committed_suits(self, resolver: HandNotationResolver) -> None:
        hole = resolver.resolve("AA", committed=parse_cards("As Ah"))
        assert {hole.card1.suit, hole.card2.suit} == {"c", "d"}

    def test_fails_with_fewer_than_two_suits(self, resolver: HandNotationResolver) -> None:
        with pytest.raises(UnavailableCardsError):
            resolver.resolve("AA", committed=parse_cards("As Ah Ad"))


class TestSuited:
    def test_same_suit(self, resolver: HandNotationResolver) -> None:
        hole = resolver.resolve("T9s")
        assert hole.card1 == Card(10, hole.card1.suit)
        assert hole.card2 == Card(9, hole.card1.suit)

    def test_only_common_free_suit_is_used(self, resolver: HandNotationResolver) -> None:
        committed = parse_cards("As Ah Kd")
        for _ in range(20):
            hole = resolver.resolve("AKs", committed=committed)
            assert hole.card1.suit == hole.card2.suit == "c"

    def test_fails_without_common_suit(self, resolver: HandNotationResolver) -> None:
        with pytest.raises(UnavailableCardsError):
            resolver.resolve("AKs", committed=parse_cards("As Ah Kd Kc"))

    def test_suit_choice_is_uniform(self) -> None:
        resolver = HandNotationResolver(random.Random(77))
        counts = Counter(resolver.resolve("AKs").card1.suit for _ in range(4000))
        assert set(counts) == {"c", "d", "h", "s"}
        assert all(850 <= count <= 1150 for count in counts.values())


class TestOffsuit:
    @pytest.mark.parametrize("notation", ["AKo", "AK", "72o", "72"])
    def test_different_suits(self, resolver: HandNotationResolver, notation: str) -> None:
        hole = resolver.resolve(notation)
        assert hole.card1.suit != hole.card2.suit

    def test_keeps_notation_order(self, resolver: HandNotationResolver) -> None:
        hole = resolver.resolve("27o")
        assert (hole.card1.rank, hole.card2.rank) == (2, 7)

    def test_finds_the_only_assignment(self, resolver: HandNotationResolver) -> None:
        # Ace only free in spades, King only free in spades and hearts
        committed = parse_cards("Ac Ad Ah Kc Kd")
        hole = resolver.resolve("AKo", committed=committed)
        assert hole == HoleCards(Card(14, "s"), Card(13, "h"))

    def test_fails_when_only_same_suit_remains(self, resolver: HandNotationResolver) -> None:
        committed = parse_cards("Ac Ad Ah Kc Kd Kh")
        with pytest.raises(UnavailableCardsError):
            resolver.resolve("AKo", committed=committed)

    def test_assignment_is_uniform(self) -> None:
        resolver = HandNotationResolver(random.Random(5))
        counts = Counter(
            (hole.card1.suit, hole.card2.suit)
            for hole in (resolver.resolve("72o") for _ in range(6000))
        )
        assert len(counts) == 12
        assert all(380 <= count <= 620 for count in counts.values())


# ── Helpers ───────────────────────────────────────────────────────


class TestCanonicalNotation:
    @pytest.mark.parametrize(
        ("cards", "expected"),
        [
            ("As Ah", "AA"),
            ("Kh Ah", "AKs"),
            ("2c 7d", "72o"),
            ("Td 9d", "T9s"),
        ],
    )
    def test_canonical(self, cards: str, expected: str) -> None:
        first, second = parse_cards(cards)
        assert canonical_notation(HoleCards(first, second)) == expected

    def test_169_starting_hands(self) -> None:
        hands = starting_hands()
        assert len(hands) == 169
        assert len(set(hands)) == 169
        assert hands[0] == "AA"
        assert sum(1 for hand in hands if len(hand) == 2) == 13

    def test_every_starting_hand_resolves_and_roundtrips(self, resolver: HandNotationResolver) -> None:
        for hand in starting_hands():
            assert canonical_notation(resolver.resolve(hand)) == hand

    def test_second_hand_avoids_first(self) -> None:
        rng = random.Random(8)
        for _ in range(200):
            first = resolve_hand("AA", rng=rng)
            second = resolve_hand("AA", committed=first.cards, rng=rng)
            assert not set(first.cards) & set(second.cards)
