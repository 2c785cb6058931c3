"""Tests for utils.settings and utils.config — env > yaml > default."""

from __future__ import annotations

from pathlib import Path

import pytest

from utils.config import DisplayConfig, SimulationConfig
from utils.settings import EquityConfig


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "simulation:\n"
        "  iterations: 5000\n"
        "  workers: 2\n"
        "  seed: 17\n"
        "  ratio: 0.25\n"
        "  verbose: 'yes'\n"
        "  broken: abc\n"
        "logging:\n"
        "  color: false\n",
        encoding="utf-8",
    )
    return path


class TestEquityConfig:
    def test_reads_yaml_values(self, yaml_file: Path) -> None:
        config = EquityConfig(yaml_file)
        assert config.get_int("simulation.iterations") == 5000
        assert config.get_float("simulation.ratio") == 0.25
        assert config.get_bool("simulation.verbose") is True
        assert config.get_bool("logging.color", True) is False
        assert config.get_dict("simulation")["workers"] == 2

    def test_env_overrides_yaml(self, yaml_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EQUITY_SIMULATION_ITERATIONS", "42")
        assert EquityConfig(yaml_file).get_int("simulation.iterations") == 42

    def test_malformed_values_fall_back_to_default(
        self, yaml_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EQUITY_SIMULATION_WORKERS", "many")
        config = EquityConfig(yaml_file)
        assert config.get_int("simulation.broken", 7) == 7
        assert config.get_int("simulation.workers", 1) == 2

    def test_missing_file_and_key_use_defaults(self, tmp_path: Path) -> None:
        config = EquityConfig(tmp_path / "absent.yaml")
        assert config.get_int("simulation.iterations", 99) == 99
        assert config.get_str("nothing.here", "x") == "x"
        assert config.get_dict("simulation") == {}

    def test_invalid_yaml_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("simulation: [unclosed\n", encoding="utf-8")
        assert EquityConfig(path).get_int("simulation.iterations", 3) == 3

    def test_reload_picks_up_changes(self, yaml_file: Path) -> None:
        config = EquityConfig(yaml_file)
        assert config.get_int("simulation.iterations") == 5000
        yaml_file.write_text("simulation:\n  iterations: 6000\n", encoding="utf-8")
        config.reload()
        assert config.get_int("simulation.iterations") == 6000


class TestSimulationConfig:
    def test_env_read_at_instantiation(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EQUITY_SIMULATION_ITERATIONS", "1234")
        monkeypatch.setenv("EQUITY_SIMULATION_SEED", "8")
        monkeypatch.setenv("EQUITY_SIMULATION_WORKERS", "0")
        config = SimulationConfig()
        assert config.iterations == 1234
        assert config.seed == 8
        assert config.workers == 1

    def test_time_budget_zero_means_unlimited(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EQUITY_SIMULATION_TIME_BUDGET_SECONDS", "0")
        assert SimulationConfig().time_budget_seconds is None
        monkeypatch.setenv("EQUITY_SIMULATION_TIME_BUDGET_SECONDS", "2.5")
        assert SimulationConfig().time_budget_seconds == 2.5

    def test_clamp_iterations(self) -> None:
        config = SimulationConfig(max_iterations=1000)
        assert config.clamp_iterations(5000) == 1000
        assert config.clamp_iterations(10) == 10

    def test_display_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EQUITY_LOGGING_COLOR", "off")
        monkeypatch.setenv("EQUITY_LOGGING_LEVEL", "debug")
        display = DisplayConfig()
        assert display.color is False
        assert display.log_level == "DEBUG"
