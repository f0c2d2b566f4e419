"""Rendering of names and values for log lines."""

from qq.render.colors import Color, colorize
from qq.render.formatter import format_args, format_value, pair_values
from qq.render.values import render_value

__all__ = [
    "Color",
    "colorize",
    "format_args",
    "format_value",
    "pair_values",
    "render_value",
]
