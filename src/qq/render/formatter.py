"""Combines argument names and runtime values into display strings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from qq.models.entries import LoggedValue
from qq.render.colors import NAME_COLOR, VALUE_COLOR, colorize
from qq.render.values import DEFAULT_MAX_DEPTH, render_value

if TYPE_CHECKING:
    from collections.abc import Sequence


def pair_values(names: Sequence[str] | None, values: Sequence[Any]) -> list[LoggedValue]:
    """Zip names with values.

    Names are only used when there is exactly one per value. Otherwise every
    value is left unnamed so that no name lands on the wrong value.
    """
    if names is None or len(names) != len(values):
        return [LoggedValue(value=value) for value in values]
    return [LoggedValue(value=value, name=name) for name, value in zip(names, values)]


def format_value(
    logged: LoggedValue,
    *,
    color: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Format one value as ``name=value``, or ``value`` when it has no name."""
    value = colorize(render_value(logged.value, max_depth=max_depth), VALUE_COLOR, enabled=color)
    if not logged.name:
        return value
    return f"{colorize(logged.name, NAME_COLOR, enabled=color)}={value}"


def format_args(
    names: Sequence[str] | None,
    values: Sequence[Any],
    *,
    color: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[str]:
    """Turn a call's values into display strings, one per value, in order.

    For example ``qq.log(port, 3 + 2)`` gives ``["port=443", "3 + 2=5"]``
    (with ANSI colors unless ``color`` is False).
    """
    return [
        format_value(logged, color=color, max_depth=max_depth)
        for logged in pair_values(names, values)
    ]


__all__ = ["format_args", "format_value", "pair_values"]
