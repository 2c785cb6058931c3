"""Runtime configuration dataclasses.

Fields read their defaults from :data:`utils.settings.cfg` (environment
first, then ``config.yaml``) at construction time.  Override individual
fields when constructing from code (e.g. in tests).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from utils.settings import cfg


def _optional_int(key: str) -> int | None:
    raw = cfg.get_str(key, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _optional_positive_float(key: str) -> float | None:
    value = cfg.get_float(key, 0.0)
    return value if value > 0 else None


@dataclass(slots=True)
class SimulationConfig:
    """Simulation defaults and caller-side limits.

    NOTE: All fields use ``default_factory`` so that environment variables
    are read at **instantiation** time, not at import time.  This keeps
    ``monkeypatch.setenv`` in tests effective.
    """

    iterations: int = field(default_factory=lambda: cfg.get_int("simulation.iterations", 100_000))
    max_iterations: int = field(default_factory=lambda: cfg.get_int("simulation.max_iterations", 10_000_000))
    min_recommended_iterations: int = field(
        default_factory=lambda: cfg.get_int("simulation.min_recommended_iterations", 1_000)
    )
    workers: int = field(default_factory=lambda: max(1, cfg.get_int("simulation.workers", 1)))
    seed: int | None = field(default_factory=lambda: _optional_int("simulation.seed"))
    time_budget_seconds: float | None = field(
        default_factory=lambda: _optional_positive_float("simulation.time_budget_seconds")
    )

    def clamp_iterations(self, requested: int) -> int:
        """Cap *requested* at :attr:`max_iterations`."""
        return min(requested, self.max_iterations)


@dataclass(slots=True)
class DisplayConfig:
    """Console output preferences."""

    color: bool = field(default_factory=lambda: cfg.get_bool("logging.color", True))
    log_level: str = field(default_factory=lambda: cfg.get_str("logging.level", "WARNING").upper())
