from __future__ import annotations

from qq.render.colors import Color, colorize
from qq.render.formatter import format_args, pair_values

BOLD = Color.BOLD.value
CYAN = Color.CYAN.value
RESET = Color.RESET.value


def test_format_args_names_variables_and_leaves_literals_bare() -> None:
    formatted = format_args(["ip", "port", ""], ["1.2.3.4", 443, 5432])

    assert formatted == [
        f'{BOLD}ip{RESET}={CYAN}"1.2.3.4"{RESET}',
        f"{BOLD}port{RESET}={CYAN}443{RESET}",
        f"{CYAN}5432{RESET}",
    ]


def test_format_args_compound_expression() -> None:
    assert format_args(["a + b"], [5], color=False) == ["a + b=5"]


def test_format_args_without_names_keeps_every_value() -> None:
    assert format_args(None, [1, 2], color=False) == ["1", "2"]


def test_format_args_count_mismatch_drops_all_names() -> None:
    assert format_args(["only_one"], [1, 2], color=False) == ["1", "2"]
    assert format_args(["a", "b", "c"], [1, 2], color=False) == ["1", "2"]


def test_format_args_preserves_order_and_length() -> None:
    values = list(range(10))
    names = [f"v{i}" for i in values]

    formatted = format_args(names, values, color=False)

    assert formatted == [f"v{i}={i}" for i in values]


def test_pair_values() -> None:
    paired = pair_values(["x", ""], [1, 2])

    assert [(p.name, p.value) for p in paired] == [("x", 1), ("", 2)]


def test_colorize_disabled() -> None:
    assert colorize("text", Color.CYAN, enabled=False) == "text"
    assert colorize("text", Color.CYAN) == f"{CYAN}text{RESET}"
