"""Centralised loader for ``config.yaml``.

Reads ``config.yaml`` from the project root and exposes its values through
dotted keys.  ``EQUITY_*`` environment variables **always take priority**
over the YAML file, which only supplies friendly defaults.

Usage::

    from utils.settings import cfg

    cfg.get_int("simulation.iterations")        # 100000
    cfg.get_bool("logging.color")               # True

Environment equivalent: the YAML key ``simulation.iterations`` becomes
``EQUITY_SIMULATION_ITERATIONS``.

Loading is lazy (on first access) and thread-safe.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any

import yaml

_log = logging.getLogger("equity.settings")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _find_config_path() -> Path:
    """Resolve ``config.yaml``, walking up from this module to the project root."""
    env_path = os.getenv("EQUITY_CONFIG_FILE", "").strip()
    if env_path:
        return Path(env_path)

    start = Path(__file__).resolve().parent
    for ancestor in [start, start.parent, start.parent.parent]:
        candidate = ancestor / "config.yaml"
        if candidate.exists():
            return candidate

    return start.parent / "config.yaml"


class EquityConfig:
    """Settings access with ``env > yaml > default`` priority.

    Attributes:
        _data:   Raw mapping loaded from YAML.
        _loaded: Whether the YAML has been read yet.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._data: dict[str, Any] = {}
        self._loaded: bool = False
        self._lock = threading.Lock()

    # ── Lazy loading ──────────────────────────────────────────────

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._load()
            self._loaded = True

    def _load(self) -> None:
        config_path = self._path or _find_config_path()
        if not config_path.exists():
            self._data = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except (OSError, yaml.YAMLError) as exc:
            _log.warning("Could not read %s (%s), using defaults", config_path, exc)
            self._data = {}
            return
        self._data = raw if isinstance(raw, dict) else {}

    def reload(self) -> None:
        """Force a re-read of the file."""
        with self._lock:
            self._loaded = False
            self._load()
            self._loaded = True

    # ── Dotted-key access ─────────────────────────────────────────

    def _resolve(self, dotted_key: str) -> Any:
        """``simulation.iterations`` → ``data["simulation"]["iterations"]``."""
        self._ensure_loaded()
        node: Any = self._data
        for part in dotted_key.split("."):
            if isinstance(node, dict):
                node = node.get(part)
            else:
                return None
        return node

    @staticmethod
    def _env_key(dotted_key: str) -> str:
        """``simulation.iterations`` → ``EQUITY_SIMULATION_ITERATIONS``."""
        return "EQUITY_" + dotted_key.upper().replace(".", "_")

    # ── Typed getters ─────────────────────────────────────────────

    def get_str(self, key: str, default: str = "") -> str:
        env_val = os.getenv(self._env_key(key), "").strip()
        if env_val:
            return env_val
        yaml_val = self._resolve(key)
        if yaml_val is not None:
            return str(yaml_val)
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        env_val = os.getenv(self._env_key(key), "").strip()
        if env_val:
            try:
                return int(env_val)
            except ValueError:
                pass
        yaml_val = self._resolve(key)
        if yaml_val is not None and not isinstance(yaml_val, bool):
            try:
                return int(yaml_val)
            except (ValueError, TypeError):
                pass
        return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        env_val = os.getenv(self._env_key(key), "").strip()
        if env_val:
            try:
                return float(env_val)
            except ValueError:
                pass
        yaml_val = self._resolve(key)
        if yaml_val is not None and not isinstance(yaml_val, bool):
            try:
                return float(yaml_val)
            except (ValueError, TypeError):
                pass
        return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        env_val = os.getenv(self._env_key(key), "").strip().lower()
        if env_val in _TRUE:
            return True
        if env_val in _FALSE:
            return False
        yaml_val = self._resolve(key)
        if isinstance(yaml_val, bool):
            return yaml_val
        if yaml_val is not None:
            raw = str(yaml_val).strip().lower()
            if raw in _TRUE:
                return True
            if raw in _FALSE:
                return False
        return default

    def get_dict(self, key: str) -> dict[str, Any]:
        yaml_val = self._resolve(key)
        if isinstance(yaml_val, dict):
            return dict(yaml_val)
        return {}

    def __repr__(self) -> str:
        self._ensure_loaded()
        return f"<EquityConfig sections={list(self._data.keys())}>"


cfg = EquityConfig()
