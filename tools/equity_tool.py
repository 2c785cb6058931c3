"""Notation-level equity comparison tool.

Wraps :class:`core.simulator.EquitySimulator` and
:class:`core.notation.HandNotationResolver` behind a simplified interface
for the command-line layer: two notation strings in, an
:class:`EquityEstimate` with a human-readable summary out.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass

from core.deck import HoleCards
from core.notation import HandNotationResolver
from core.simulator import EquitySimulator, SimulationResult
from utils.config import SimulationConfig

_RULE = "=" * 42


@dataclass(slots=True)
class EquityEstimate:
    """Result of comparing two starting hands.

    Attributes:
        hand1:           Notation of the first hand as given.
        hand2:           Notation of the second hand as given.
        hole_cards1:     Concrete cards chosen for the first hand.
        hole_cards2:     Concrete cards chosen for the second hand.
        result:          Aggregate simulation counts.
        elapsed_seconds: Wall-clock time spent simulating.
    """

    hand1: str
    hand2: str
    hole_cards1: HoleCards
    hole_cards2: HoleCards
    result: SimulationResult
    elapsed_seconds: float

    @property
    def trials_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.result.total_games / self.elapsed_seconds

    def favourite(self) -> str | None:
        """Notation of the hand that won more often, ``None`` if level."""
        if self.result.player1_wins > self.result.player2_wins:
            return self.hand1
        if self.result.player2_wins > self.result.player1_wins:
            return self.hand2
        return None

    def summary(self) -> str:
        return format_summary(self.hand1, self.hand2, self.result)


def format_summary(hand1: str, hand2: str, result: SimulationResult) -> str:
    """Multi-line report of a simulation run."""
    if result.player1_wins > result.player2_wins:
        verdict = f"{hand1} is the long-run favourite"
    elif result.player2_wins > result.player1_wins:
        verdict = f"{hand2} is the long-run favourite"
    else:
        verdict = "Both hands are evenly matched"

    lines = [
        "Hold'em equity simulation",
        _RULE,
        f"Matchup: {hand1} vs {hand2}",
        f"Trials:  {result.total_games:,}",
        "",
        f"{hand1} wins: {result.player1_wins:,} ({result.player1_win_rate:.2%})",
        f"{hand2} wins: {result.player2_wins:,} ({result.player2_win_rate:.2%})",
        f"Ties:    {result.ties:,} ({result.tie_rate:.2%})",
        "",
        f"{hand1} equity: {result.player1_equity:.2%}",
        f"{hand2} equity: {result.player2_equity:.2%}",
        "",
        verdict,
        _RULE,
    ]
    return "\n".join(lines)


class EquityTool:
    """Facade over the resolver and simulator for notation matchups.

    Args:
        config: Simulation defaults; read from settings when omitted.
        rng:    Shared random generator for suit selection and shuffling.
                Falls back to ``config.seed`` when omitted.
    """

    def __init__(self, config: SimulationConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or SimulationConfig()
        if rng is None:
            rng = random.Random(self.config.seed) if self.config.seed is not None else random.Random()
        self.resolver = HandNotationResolver(rng)
        self.simulator = EquitySimulator(rng=rng)

    def resolve_pair(self, hand1: str, hand2: str) -> tuple[HoleCards, HoleCards]:
        """Resolve *hand1*, then *hand2* around the cards already given to *hand1*."""
        hole_cards1 = self.resolver.resolve(hand1)
        hole_cards2 = self.resolver.resolve(hand2, committed=hole_cards1.cards)
        return hole_cards1, hole_cards2

    def compare(
        self,
        hand1: str,
        hand2: str,
        iterations: int | None = None,
        *,
        workers: int | None = None,
        time_budget: float | None = None,
    ) -> EquityEstimate:
        """Simulate *hand1* against *hand2*.

        Args:
            hand1:       First hand notation (``"AA"``, ``"AKs"``, ``"72o"``).
            hand2:       Second hand notation.
            iterations:  Trials to run; defaults to ``config.iterations``.
            workers:     Worker processes; defaults to ``config.workers``.
            time_budget: Seconds; defaults to ``config.time_budget_seconds``.

        Returns:
            :class:`EquityEstimate` with resolved cards and counts.
        """
        hole_cards1, hole_cards2 = self.resolve_pair(hand1, hand2)
        started = time.perf_counter()
        result = self.simulator.simulate(
            hole_cards1,
            hole_cards2,
            iterations if iterations is not None else self.config.iterations,
            workers=workers if workers is not None else self.config.workers,
            time_budget=time_budget if time_budget is not None else self.config.time_budget_seconds,
        )
        return EquityEstimate(
            hand1=hand1,
            hand2=hand2,
            hole_cards1=hole_cards1,
            hole_cards2=hole_cards2,
            result=result,
            elapsed_seconds=time.perf_counter() - started,
        )
