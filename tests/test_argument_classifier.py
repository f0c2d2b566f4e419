from __future__ import annotations

from pathlib import Path

import pytest

from qq.models.calls import CallSite, CompoundArgument, IdentifierArgument, LiteralArgument
from qq.parse.arguments import render_expression
from qq.parse.calls import find_calls
from qq.parse.source import parse_source_file


def _write_python_file(root: Path, relative_path: str, source: str) -> Path:
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


def _classified(tmp_path: Path, source: str) -> list[object]:
    file_path = _write_python_file(tmp_path, "sample.py", source)
    last_line = len(source.splitlines())
    call_site = CallSite(path=str(file_path), line=last_line)
    calls = find_calls(parse_source_file(file_path), call_site)
    assert len(calls) == 1
    return list(calls[0].arguments)


@pytest.mark.parametrize(
    ("source", "expected_names"),
    [
        ("qq.log(x)\n", ["x"]),
        ("qq.log(a+b)\n", ["a + b"]),
        ("qq.log(5432)\n", [""]),
        ("qq.log(1.5, 'text', b'raw')\n", ["", "", ""]),
        ("qq.log(True, False, None, ...)\n", ["", "", "", ""]),
        ("qq.log(f'{x}')\n", [""]),
        ("qq.log([1, 2], {'a': 1}, (1, 2), {3})\n", ["", "", "", ""]),
        ("qq.log(len(xs))\n", ["len(xs)"]),
        ("qq.log(xs[ 0 ])\n", ["xs[0]"]),
        ("qq.log(xs[1:2])\n", ["xs[1:2]"]),
        ("qq.log(-x, not y)\n", ["-x", "not y"]),
        ("qq.log((a))\n", ["a"]),
        ("qq.log(a and b, a < b)\n", ["a and b", "a < b"]),
        ("qq.log(a if ok else b)\n", ["a if ok else b"]),
        ("qq.log(obj.attr)\n", ["obj.attr"]),
        ("qq.log(x for x in xs)\n", ["(x for x in xs)"]),
        ("qq.log(*values)\n", [""]),
        ("import math\nqq.log(math.pi)\n", [""]),
        ("import os.path\nqq.log(os)\n", [""]),
        ("from pathlib import Path\nqq.log(Path)\n", [""]),
        ("def handler():\n    pass\nqq.log(handler)\n", [""]),
        ("class Point:\n    pass\nqq.log(Point)\n", [""]),
    ],
)
def test_argument_display_names(
    tmp_path: Path, source: str, expected_names: list[str]
) -> None:
    arguments = _classified(tmp_path, source)

    assert [arg.display_name for arg in arguments] == expected_names


def test_argument_kinds(tmp_path: Path) -> None:
    arguments = _classified(tmp_path, "qq.log(port, a + b, 443)\n")

    assert arguments == [
        IdentifierArgument(name="port"),
        CompoundArgument(text="a + b"),
        LiteralArgument(),
    ]


def test_multi_line_expression_is_normalized(tmp_path: Path) -> None:
    source = "qq.log(\n    (first +\n        second),\n)\n"

    arguments = _classified(tmp_path, source)

    assert [arg.display_name for arg in arguments] == ["first + second"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a+b", "a + b"),
        ("f( x ,y )", "f(x, y)"),
        ("x=1", "x=1"),
        ("a +", ""),
        ("", ""),
        ("a, b", ""),
    ],
)
def test_render_expression(text: str, expected: str) -> None:
    assert render_expression(text) == expected
