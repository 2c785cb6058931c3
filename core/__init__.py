from __future__ import annotations

from typing import Any

__all__ = ["EquitySimulator", "HandNotationResolver", "SimulationResult", "best_of_seven", "evaluate"]


def __getattr__(name: str) -> Any:
	if name in {"EquitySimulator", "SimulationResult"}:
		from . import simulator

		return getattr(simulator, name)
	if name == "HandNotationResolver":
		from .notation import HandNotationResolver

		return HandNotationResolver
	if name in {"best_of_seven", "evaluate"}:
		from . import hand_evaluator

		return getattr(hand_evaluator, name)
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
