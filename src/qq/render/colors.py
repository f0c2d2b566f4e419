"""ANSI color markup for names and values."""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """ANSI escape sequences used in log lines."""

    BOLD = "\033[1m"
    CYAN = "\033[36m"
    RESET = "\033[0m"


NAME_COLOR = Color.BOLD
VALUE_COLOR = Color.CYAN


def colorize(text: str, color: Color, *, enabled: bool = True) -> str:
    """Wrap ``text`` in ``color`` and a trailing reset."""
    if not enabled:
        return text
    return f"{color.value}{text}{Color.RESET.value}"


__all__ = ["NAME_COLOR", "VALUE_COLOR", "Color", "colorize"]
