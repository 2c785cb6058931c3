"""Monte-Carlo equity simulator for two Hold'em starting hands.

Each trial removes the four hole cards from a fresh 52-card deck,
shuffles the remaining 48, deals five community cards and compares the
best five-card hand of each player.  Trials are independent, so a run
can be split across worker processes; every worker keeps local counts
and the partial results are summed once at the end.

Performance:
    Pure Python, a few thousand trials/s per core (each trial evaluates
    42 five-card hands).  Use ``workers`` for large runs.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from enum import IntEnum
from multiprocessing import Pool
from typing import Any

from core.deck import Deck, HoleCards
from core.errors import CardCollisionError, InvalidIterationsError
from core.hand_evaluator import HandStrength, best_of_seven, compare_hands
from utils.card_utils import Card

_log = logging.getLogger("equity.simulator")

COMMUNITY_CARDS = 5


class Winner(IntEnum):
    PLAYER1 = 0
    PLAYER2 = 1
    TIE = -1


@dataclass(frozen=True, slots=True)
class GameResult:
    """Outcome of a single trial.

    Attributes:
        player1_hand:    Best five-card hand of the first player.
        player2_hand:    Best five-card hand of the second player.
        community_cards: The five shared cards dealt this trial.
        winner:          Which side won, or :attr:`Winner.TIE`.
    """

    player1_hand: HandStrength
    player2_hand: HandStrength
    community_cards: tuple[Card, ...]
    winner: Winner


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """Aggregate counts for a simulation run.

    Attributes:
        player1_wins: Trials won outright by the first hand.
        player2_wins: Trials won outright by the second hand.
        ties:         Trials ending in a split pot.
        total_games:  Trials actually completed.
    """

    player1_wins: int
    player2_wins: int
    ties: int
    total_games: int

    def _rate(self, count: int) -> float:
        return count / self.total_games if self.total_games else 0.0

    @property
    def player1_win_rate(self) -> float:
        return self._rate(self.player1_wins)

    @property
    def player2_win_rate(self) -> float:
        return self._rate(self.player2_wins)

    @property
    def tie_rate(self) -> float:
        return self._rate(self.ties)

    @property
    def player1_equity(self) -> float:
        """Win rate plus half the tie rate."""
        return self.player1_win_rate + self.tie_rate / 2

    @property
    def player2_equity(self) -> float:
        return self.player2_win_rate + self.tie_rate / 2

    def merge(self, other: SimulationResult) -> SimulationResult:
        return SimulationResult(
            player1_wins=self.player1_wins + other.player1_wins,
            player2_wins=self.player2_wins + other.player2_wins,
            ties=self.ties + other.ties,
            total_games=self.total_games + other.total_games,
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "player1_wins": self.player1_wins,
            "player2_wins": self.player2_wins,
            "ties": self.ties,
            "total_games": self.total_games,
            "player1_win_rate": self.player1_win_rate,
            "player2_win_rate": self.player2_win_rate,
            "tie_rate": self.tie_rate,
        }


EMPTY_RESULT = SimulationResult(player1_wins=0, player2_wins=0, ties=0, total_games=0)


def validate_hands(hand1: HoleCards, hand2: HoleCards) -> None:
    """Raise :class:`CardCollisionError` unless all four hole cards are distinct."""
    cards = [*hand1, *hand2]
    if len(set(cards)) != len(cards):
        shared = sorted({str(card) for card in cards if cards.count(card) > 1})
        raise CardCollisionError(f"Hole cards overlap: {', '.join(shared)}")


def _validate_iterations(iterations: int) -> None:
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations <= 0:
        raise InvalidIterationsError(f"iterations must be a positive integer, got {iterations!r}")


def _split(total: int, parts: int) -> list[int]:
    """Partition *total* into *parts* near-equal non-zero chunks."""
    parts = max(1, min(parts, total))
    base, extra = divmod(total, parts)
    return [base + (1 if idx < extra else 0) for idx in range(parts)]


def _run_chunk(args: tuple[tuple[tuple[int, str], ...], int, int, float | None]) -> SimulationResult:
    """Worker entry point; cards travel as ``(rank, suit)`` tuples."""
    raw_cards, iterations, seed, time_budget = args
    cards = [Card(rank, suit) for rank, suit in raw_cards]
    simulator = EquitySimulator(rng=random.Random(seed))
    return simulator._run(
        HoleCards(cards[0], cards[1]),
        HoleCards(cards[2], cards[3]),
        iterations,
        time_budget,
    )


class EquitySimulator:
    """Runs repeated random board completions for two hands.

    Args:
        rng:  Random generator used for shuffling.  Takes precedence
              over *seed*.
        seed: Seed for a private ``random.Random`` when *rng* is omitted.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        if rng is not None:
            self._rng = rng
        elif seed is not None:
            self._rng = random.Random(seed)
        else:
            self._rng = random.Random()

    @property
    def rng(self) -> random.Random:
        return self._rng

    # ── Single trial ────────────────────────────────────────────────

    def play_trial(self, hand1: HoleCards, hand2: HoleCards) -> GameResult:
        """Deal one random board and decide the winner."""
        deck = Deck()
        deck.remove((*hand1, *hand2))
        deck.shuffle(self._rng)
        board = deck.deal(COMMUNITY_CARDS)

        strength1 = best_of_seven([*hand1, *board])
        strength2 = best_of_seven([*hand2, *board])
        outcome = compare_hands(strength1, strength2)
        if outcome > 0:
            winner = Winner.PLAYER1
        elif outcome < 0:
            winner = Winner.PLAYER2
        else:
            winner = Winner.TIE

        return GameResult(
            player1_hand=strength1,
            player2_hand=strength2,
            community_cards=tuple(board),
            winner=winner,
        )

    # ── Full run ────────────────────────────────────────────────────

    def simulate(
        self,
        hand1: HoleCards,
        hand2: HoleCards,
        iterations: int,
        *,
        workers: int = 1,
        time_budget: float | None = None,
    ) -> SimulationResult:
        """Run *iterations* trials and return aggregate counts.

        Args:
            hand1:       First player's hole cards.
            hand2:       Second player's hole cards.
            iterations:  Number of trials, must be positive.
            workers:     Worker processes; ``1`` runs in-process.
            time_budget: Optional wall-clock limit in seconds, checked
                         between trials.  When it expires the result
                         covers only the completed trials.

        Raises:
            InvalidIterationsError: if *iterations* is not a positive int.
            CardCollisionError:     if the hands share a card.
        """
        _validate_iterations(iterations)
        validate_hands(hand1, hand2)
        if time_budget is not None and time_budget <= 0:
            time_budget = None

        _log.debug("simulating %s vs %s, %d iterations, %d worker(s)", hand1, hand2, iterations, workers)
        started = time.perf_counter()

        if workers <= 1 or iterations < 2:
            result = self._run(hand1, hand2, iterations, time_budget)
        else:
            result = self._run_parallel(hand1, hand2, iterations, workers, time_budget)

        if result.total_games < iterations:
            _log.warning(
                "time budget of %.2fs reached after %d/%d trials",
                time_budget or 0.0, result.total_games, iterations,
            )
        _log.debug("finished %d trials in %.3fs", result.total_games, time.perf_counter() - started)
        return result

    def _run(
        self,
        hand1: HoleCards,
        hand2: HoleCards,
        iterations: int,
        time_budget: float | None,
    ) -> SimulationResult:
        deadline = time.monotonic() + time_budget if time_budget is not None else None
        wins1 = wins2 = ties = runs = 0

        for _ in range(iterations):
            if deadline is not None and time.monotonic() >= deadline:
                break
            winner = self.play_trial(hand1, hand2).winner
            if winner is Winner.PLAYER1:
                wins1 += 1
            elif winner is Winner.PLAYER2:
                wins2 += 1
            else:
                ties += 1
            runs += 1

        return SimulationResult(player1_wins=wins1, player2_wins=wins2, ties=ties, total_games=runs)

    def _run_parallel(
        self,
        hand1: HoleCards,
        hand2: HoleCards,
        iterations: int,
        workers: int,
        time_budget: float | None,
    ) -> SimulationResult:
        raw_cards = tuple((card.rank, card.suit) for card in (*hand1, *hand2))
        chunks = _split(iterations, workers)
        jobs = [
            (raw_cards, chunk, self._rng.getrandbits(64), time_budget)
            for chunk in chunks
        ]
        with Pool(processes=len(jobs)) as pool:
            partials = pool.map(_run_chunk, jobs)

        result = EMPTY_RESULT
        for partial in partials:
            result = result.merge(partial)
        return result


def simulate(
    hand1: HoleCards,
    hand2: HoleCards,
    iterations: int,
    rng: random.Random | None = None,
    *,
    workers: int = 1,
    time_budget: float | None = None,
) -> SimulationResult:
    """Module-level shortcut for :meth:`EquitySimulator.simulate`."""
    return EquitySimulator(rng=rng).simulate(
        hand1, hand2, iterations, workers=workers, time_budget=time_budget
    )
