from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from qq.logger import Logger, build_prefix
from qq.models.calls import CallSite
from qq.render.colors import Color
from qq.settings.config import QQConfig
from qq.sink.logfile import LogSinkError


class FakeClock:
    def __init__(self) -> None:
        self.now = 50.0

    def __call__(self) -> float:
        return self.now


def _fixed_now() -> datetime:
    return datetime(2024, 1, 2, 3, 4, 5)


def _make_logger(tmp_path: Path, clock: FakeClock | None = None, **overrides: object) -> Logger:
    settings: dict[str, object] = {"log_file": tmp_path / "qq.log", "color": False}
    settings.update(overrides)
    return Logger(
        QQConfig(**settings),
        clock=clock or FakeClock(),
        now=_fixed_now,
    )


def _run_as_file(tmp_path: Path, qq: Logger, source: str, file_source: str | None = None) -> dict:
    """Execute ``source`` as if it lived in a file with ``file_source`` on disk."""
    file_path = tmp_path / "script.py"
    if file_source is not None:
        file_path.write_text(file_source, encoding="utf-8")
    namespace: dict = {"qq": qq}
    exec(compile(source, str(file_path), "exec"), namespace)
    return namespace


def test_log_names_variables_and_leaves_literals_bare(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    ip = "1.2.3.4"
    port = 443

    entry = qq.log(ip, port, 5432)

    assert entry is not None
    assert entry.args == ['ip="1.2.3.4"', "port=443", "5432"]


def test_log_applies_color_markup(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path, color=True)
    port = 443

    entry = qq.log(port, 5432)

    assert entry is not None
    bold, cyan, reset = Color.BOLD.value, Color.CYAN.value, Color.RESET.value
    assert entry.args == [
        f"{bold}port{reset}={cyan}443{reset}",
        f"{cyan}5432{reset}",
    ]


def test_log_names_compound_expressions(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    a = 2
    b = 3
    items = ["x", "y"]

    entry = qq.log(a + b, len(items), items[0])

    assert entry is not None
    assert entry.args == ["a + b=5", "len(items)=2", 'items[0]="x"']


def test_log_multi_line_call(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    first = 1
    second = 2

    entry = qq.log(
        first,
        second,
    )

    assert entry is not None
    assert entry.args == ["first=1", "second=2"]


def test_log_two_calls_on_one_line(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    left = "l"
    right = "r"

    entries = [qq.log(left), qq.log(right, 0)]

    assert [e.args for e in entries if e is not None] == [
        ['left="l"'],
        ['right="r"', "0"],
    ]


def test_log_through_logger_held_under_another_name(tmp_path: Path) -> None:
    debug = _make_logger(tmp_path)
    holder = SimpleNamespace(tracer=debug)
    port = 443

    by_name = debug.log(port)
    by_attribute = holder.tracer.log(port, 1)

    assert by_name is not None
    assert by_name.args == ["port=443"]
    assert by_attribute is not None
    assert by_attribute.args == ["port=443", "1"]


def test_log_through_rebound_alias_in_file(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    source = "debug = qq\nport = 443\nentry = debug.log(port)\n"

    namespace = _run_as_file(tmp_path, qq, source, file_source=source)

    assert namespace["entry"].args == ["port=443"]


def test_method_names_do_not_hide_variables(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    source = (
        "class Repo:\n"
        "    def data(self):\n"
        "        pass\n"
        "\n"
        "data = [1, 2]\n"
        "entry = qq.log(data, Repo)\n"
    )

    namespace = _run_as_file(tmp_path, qq, source, file_source=source)

    assert namespace["entry"].args[0] == "data=[1, 2]"
    assert "=" not in namespace["entry"].args[1]


def test_prefix_reports_closing_line_of_multi_line_call(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    source = "x = 1\nentry = qq.log(\n    x,\n)\n"

    namespace = _run_as_file(tmp_path, qq, source, file_source=source)

    assert namespace["entry"].args == ["x=1"]
    assert " script.py:4 " in namespace["entry"].prefix


def test_log_writes_prefixed_line(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    value = 7

    qq.log(value)

    content = (tmp_path / "qq.log").read_text(encoding="utf-8")
    assert re.fullmatch(
        r"\n\[03:04:05 test_logger\.py:\d+ \S*test_log_writes_prefixed_line\] value=7\n",
        content,
    )


def test_log_groups_by_idle_gap(tmp_path: Path) -> None:
    clock = FakeClock()
    qq = _make_logger(tmp_path, clock=clock)

    first = qq.log(1)
    clock.now += 1.0
    second = qq.log(2)
    clock.now += 2.5
    third = qq.log(3)

    assert [e.grouped for e in (first, second, third) if e is not None] == [
        True,
        False,
        True,
    ]
    lines = (tmp_path / "qq.log").read_text(encoding="utf-8").split("\n")
    assert lines[0] == ""
    assert lines[1].endswith("] 1")
    assert lines[2].endswith("] 2")
    assert lines[3] == ""
    assert lines[4].endswith("] 3")


def test_log_without_arguments(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)

    entry = qq.log()

    assert entry is not None
    assert entry.args == []
    assert entry.line().endswith("] \n")


def test_unmatched_source_logs_unnamed_values(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)

    namespace = _run_as_file(tmp_path, qq, "x = 1\nentry = qq.log(x, 2)\n")

    assert namespace["entry"].args == ["1", "2"]


def test_unparsable_source_logs_unnamed_values(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)

    namespace = _run_as_file(
        tmp_path,
        qq,
        "x = 1\nentry = qq.log(x, 2)\n",
        file_source="def broken(:\nentry = qq.log(x, 2)\n",
    )

    assert namespace["entry"].args == ["1", "2"]


def test_source_matching_file_is_named(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    source = "x = 1\nentry = qq.log(x, 2)\n"

    namespace = _run_as_file(tmp_path, qq, source, file_source=source)

    assert namespace["entry"].args == ["x=1", "2"]


def test_argument_count_mismatch_logs_unnamed_values(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    source = "pair = (1, 2)\nentry = qq.log(*pair)\n"

    namespace = _run_as_file(tmp_path, qq, source, file_source=source)

    assert namespace["entry"].args == ["1", "2"]


def test_sink_failure_returns_none(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path, log_file=tmp_path)

    assert qq.log(1) is None


def test_sink_failure_raises_with_fail_fast(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path, log_file=tmp_path, fail_fast=True)

    with pytest.raises(LogSinkError):
        qq.log(1)


def test_argument_names_for_missing_file(tmp_path: Path) -> None:
    qq = _make_logger(tmp_path)
    call_site = CallSite(path=str(tmp_path / "gone.py"), line=1)

    assert qq.argument_names(call_site) is None


def test_build_prefix() -> None:
    call_site = CallSite(path="/src/app/server.py", line=42, function="app.server.connect")

    assert build_prefix(_fixed_now(), call_site) == "[03:04:05 server.py:42 app.server.connect] "
    assert build_prefix(_fixed_now(), None) == "[03:04:05 ?:0 ?] "


def test_build_prefix_uses_closing_line() -> None:
    call_site = CallSite(path="app.py", line=10, end_line=13, function="app.main")

    assert build_prefix(_fixed_now(), call_site) == "[03:04:05 app.py:13 app.main] "
