"""Tests for utils.card_utils — the single source of truth for card helpers."""

from __future__ import annotations

import pytest

from utils.card_utils import (
    FULL_DECK,
    Card,
    card_to_index,
    format_cards,
    index_to_card,
    normalize_card,
    parse_card,
    parse_cards,
    rank_char_to_int,
)


# ── Card ──────────────────────────────────────────────────────────


class TestCard:
    def test_identity_is_rank_and_suit(self) -> None:
        assert Card(14, "s") == Card(14, "s")
        assert Card(14, "s") != Card(14, "h")
        assert len({Card(14, "s"), Card(14, "s"), Card(13, "s")}) == 2

    def test_str_and_pretty(self) -> None:
        assert str(Card(14, "s")) == "As"
        assert str(Card(10, "h")) == "Th"
        assert Card(2, "d").pretty() == "2♦"

    def test_invalid_rank_or_suit_raises(self) -> None:
        with pytest.raises(ValueError):
            Card(1, "s")
        with pytest.raises(ValueError):
            Card(15, "s")
        with pytest.raises(ValueError):
            Card(10, "x")

    def test_parse_classmethod(self) -> None:
        assert Card.parse("Kd") == Card(13, "d")


# ── Parsing / normalisation ───────────────────────────────────────


class TestNormalizeCard:
    def test_standard(self) -> None:
        assert normalize_card("Ah") == "Ah"
        assert normalize_card("2c") == "2c"
        assert normalize_card("Ts") == "Ts"

    def test_case_insensitive(self) -> None:
        assert normalize_card("aH") == "Ah"
        assert normalize_card("kD") == "Kd"

    def test_ten_alias(self) -> None:
        assert normalize_card("10h") == "Th"
        assert normalize_card("10S") == "Ts"

    def test_invalid_returns_none(self) -> None:
        assert normalize_card("XY") is None
        assert normalize_card("") is None
        assert normalize_card("A") is None
        assert normalize_card("Ahh") is None


class TestParseCard:
    def test_parse(self) -> None:
        assert parse_card("As") == Card(14, "s")
        assert parse_card(" 10c ") == Card(10, "c")

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_card("1s")
        with pytest.raises(ValueError):
            parse_card("")

    def test_parse_cards_compact_and_spaced(self) -> None:
        expected = [Card(14, "s"), Card(13, "d"), Card(10, "h")]
        assert parse_cards("AsKdTh") == expected
        assert parse_cards("As Kd 10h") == expected
        assert parse_cards("   ") == []

    def test_parse_cards_odd_length_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_cards("AsK")

    def test_format_cards(self) -> None:
        assert format_cards(parse_cards("AsKd")) == "As Kd"

    def test_rank_char_to_int(self) -> None:
        assert rank_char_to_int("a") == 14
        assert rank_char_to_int("T") == 10
        with pytest.raises(ValueError):
            rank_char_to_int("1")


# ── card_to_index / index_to_card ─────────────────────────────────


class TestCardIndexEncoding:
    def test_roundtrip(self) -> None:
        for i in range(52):
            assert index_to_card(i).index == i

    def test_known_values(self) -> None:
        assert card_to_index("2c") == 0
        assert card_to_index("As") == 51

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            card_to_index("XY")
        with pytest.raises(ValueError):
            index_to_card(52)
        with pytest.raises(ValueError):
            index_to_card(-1)


class TestFullDeck:
    def test_fifty_two_distinct_cards(self) -> None:
        assert len(FULL_DECK) == 52
        assert len(set(FULL_DECK)) == 52
