"""Coloured status lines printed to the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_WARN_EMOJI = "⚠️ "
_WARN_PLAIN = "!"
_SUCCESS_EMOJI = "✅"
_SUCCESS_PLAIN = "✓"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, message: str, colour: str) -> None:
    console = Console(highlight=False)
    line = Text()
    line.append(symbol, style=colour)
    line.append(" ")
    line.append(message, style=colour)
    console.print(line, soft_wrap=True)


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit(_WARN_PLAIN if no_emoji() else _WARN_EMOJI, message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit(_SUCCESS_PLAIN if no_emoji() else _SUCCESS_EMOJI, message, "green")