"""run_equity.py — command-line entry point for the equity simulator.

Compares two Hold'em starting hands by Monte-Carlo simulation and prints
a summary with win/tie counts, percentages and throughput.

Usage::

    python run_equity.py AA 72o
    python run_equity.py AKs QQ 1000000 --workers 4
    python run_equity.py AA KK 50000 --seed 7

Environment variables (optional, see ``config.yaml``)
-----------------------------------------------------
``EQUITY_SIMULATION_ITERATIONS``     Default trial count (100000).
``EQUITY_SIMULATION_MAX_ITERATIONS`` Hard cap on requested trials.
``EQUITY_SIMULATION_WORKERS``        Worker processes (default 1).
``EQUITY_SIMULATION_SEED``           Seed for reproducible runs.
``EQUITY_NO_COLOR``                  Disable ANSI colours.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from core.errors import EquityError
from tools.equity_tool import EquityTool
from utils.config import DisplayConfig, SimulationConfig
from utils.logger import EquityLogger, configure_logging

NOTATION_HELP = """hand notation:
  pocket pair  AA, KK, 22
  suited       AKs, QJs, T9s
  offsuit      AKo, QJo, T9o (or AK, QJ, T9)
"""


def _build_parser(config: SimulationConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="equity",
        description="Hold'em starting-hand equity simulator",
        epilog=NOTATION_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("hand1", help="first hand, e.g. AA")
    parser.add_argument("hand2", help="second hand, e.g. 72o")
    parser.add_argument(
        "iterations", nargs="?", type=int, default=config.iterations,
        help=f"number of trials (default: {config.iterations:,})",
    )
    parser.add_argument(
        "--workers", type=int, default=config.workers,
        help=f"worker processes (default: {config.workers})",
    )
    parser.add_argument(
        "--seed", type=int, default=config.seed,
        help="seed for reproducible runs",
    )
    parser.add_argument(
        "--time-budget", type=float, default=config.time_budget_seconds,
        help="stop after this many seconds, keeping completed trials",
    )
    parser.add_argument(
        "--no-color", action="store_true",
        help="disable coloured output",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="log level for library diagnostics (default: WARNING)",
    )
    return parser


def _interpret(log: EquityLogger, hand1: str, hand2: str, win_rate1: float, win_rate2: float) -> None:
    gap = abs(win_rate1 - win_rate2)
    leader = hand1 if win_rate1 >= win_rate2 else hand2
    if gap < 0.05:
        log.status("The two hands are close to a coin flip.")
    elif gap < 0.20:
        log.status(f"{leader} holds a moderate edge.")
    else:
        log.status(f"{leader} is a heavy favourite.")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the simulation and print the report.

    Returns the process exit code: ``0`` on success, ``2`` on invalid
    input.
    """
    config = SimulationConfig()
    display = DisplayConfig()
    args = _build_parser(config).parse_args(argv)

    configure_logging(args.log_level or display.log_level)
    log = EquityLogger("Equity", color=False if (args.no_color or not display.color) else None)

    iterations = args.iterations
    if iterations <= 0:
        log.error(f"iterations must be positive, got {iterations}")
        return 2
    if iterations > config.max_iterations:
        log.warn(f"Capping {iterations:,} trials at {config.max_iterations:,}")
        iterations = config.clamp_iterations(iterations)
    if iterations < config.min_recommended_iterations:
        log.warn(
            f"{iterations:,} trials may give noisy estimates; use at least "
            f"{config.min_recommended_iterations:,}"
        )

    config.seed = args.seed
    tool = EquityTool(config)

    log.info(f"Simulating {args.hand1} vs {args.hand2} over {iterations:,} trials")
    try:
        estimate = tool.compare(
            args.hand1,
            args.hand2,
            iterations,
            workers=max(1, args.workers),
            time_budget=args.time_budget,
        )
    except EquityError as exc:
        log.error(str(exc))
        return 2

    log.status(f"{args.hand1} dealt as {estimate.hole_cards1}, {args.hand2} as {estimate.hole_cards2}")
    print(estimate.summary())

    log.success(f"Finished in {estimate.elapsed_seconds * 1000:.0f} ms")
    log.success(f"Throughput: {estimate.trials_per_second:,.0f} trials/s")
    result = estimate.result
    _interpret(log, args.hand1, args.hand2, result.player1_win_rate, result.player2_win_rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())
