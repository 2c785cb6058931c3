"""Coloured terminal logger for the command-line layer.

Provides ANSI-coloured, module-prefixed console output.  Falls back to
plain text when the terminal does not support ANSI or when
``EQUITY_NO_COLOR=1`` / ``NO_COLOR`` is set.

Library modules under ``core`` log through the standard :mod:`logging`
module instead; :func:`configure_logging` wires those records to stderr.
"""

from __future__ import annotations

import logging
import os
import sys


# ---------------------------------------------------------------------------
# ANSI colour codes
# ---------------------------------------------------------------------------

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"

_FG_RED = "\033[31m"
_FG_GREEN = "\033[32m"
_FG_YELLOW = "\033[33m"
_FG_BLUE = "\033[34m"
_FG_MAGENTA = "\033[35m"
_FG_CYAN = "\033[36m"
_FG_WHITE = "\033[37m"
_FG_BRIGHT_GREEN = "\033[92m"


def _supports_color() -> bool:
    """Heuristic check for ANSI colour support."""
    if os.getenv("EQUITY_NO_COLOR", "").strip().lower() in {"1", "true", "yes"}:
        return False
    if os.getenv("NO_COLOR"):
        return False
    if os.name == "nt":
        if os.getenv("WT_SESSION") or os.getenv("TERM_PROGRAM") == "vscode":
            return True
        return False
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class EquityLogger:
    """Simple coloured logger with module prefix."""

    # Colour palette per module
    _MODULE_COLORS: dict[str, str] = {
        "Equity": _FG_YELLOW,
        "Simulator": _FG_CYAN,
        "Notation": _FG_MAGENTA,
        "Evaluator": _FG_BLUE,
        "CLI": _FG_GREEN,
    }

    def __init__(self, module: str, color: bool | None = None) -> None:
        self.module = module
        self._prefix_color = self._MODULE_COLORS.get(module, _FG_WHITE)
        self.color = _supports_color() if color is None else color

    def _format(self, level_color: str, level: str, message: str) -> str:
        if self.color:
            return (
                f"{self._prefix_color}{_BOLD}[{self.module}]{_RESET} "
                f"{level_color}{level}{_RESET} {message}"
            )
        return f"[{self.module}] {level} {message}"

    def info(self, message: str) -> None:
        print(self._format(_FG_GREEN, ">", message))

    def success(self, message: str) -> None:
        print(self._format(_FG_BRIGHT_GREEN, "+", message))

    def warn(self, message: str) -> None:
        print(self._format(_FG_YELLOW, "!", message))

    def error(self, message: str) -> None:
        print(self._format(_FG_RED, "X", message))

    def status(self, message: str) -> None:
        """Dimmed status line for non-critical events."""
        if self.color:
            print(f"{self._prefix_color}{_BOLD}[{self.module}]{_RESET} {_DIM}{message}{_RESET}")
        else:
            print(f"[{self.module}] {message}")

    def highlight(self, message: str) -> None:
        """Bold bright message (headline results)."""
        if self.color:
            print(f"{self._prefix_color}{_BOLD}[{self.module}] * {message}{_RESET}")
        else:
            print(f"[{self.module}] * {message}")


def configure_logging(level: str = "WARNING") -> None:
    """Route ``equity.*`` library records to stderr at *level*."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
