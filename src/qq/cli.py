"""Command-line interface for the qq log file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from qq.diagnostics import setup_logging
from qq.settings.config import ConfigError, QQConfig, load_config
from qq.sink.logfile import LogSink, LogSinkError

DEFAULT_SHOW_LINES = 20


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qq")
    parser.add_argument(
        "--root",
        default=".",
        help="Directory containing qq.toml (default: .)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print qq diagnostics to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("path", help="Print the log file path")

    show_parser = subparsers.add_parser("show", help="Print the end of the log file")
    show_parser.add_argument(
        "-n",
        "--lines",
        type=int,
        default=DEFAULT_SHOW_LINES,
        help=f"Number of lines to print (default: {DEFAULT_SHOW_LINES})",
    )

    subparsers.add_parser("clear", help="Truncate the log file")

    return parser


def _handle_path(config: QQConfig) -> int:
    sys.stdout.write(f"{config.log_file}\n")
    return 0


def _handle_show(config: QQConfig, lines: int) -> int:
    sink = LogSink(config.log_file, mode=config.file_mode)
    try:
        tail = sink.tail(lines)
    except FileNotFoundError:
        sys.stderr.write(f"no log file at {config.log_file}\n")
        return 1
    except OSError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    for line in tail:
        sys.stdout.write(f"{line}\n")
    return 0


def _handle_clear(config: QQConfig) -> int:
    sink = LogSink(config.log_file, mode=config.file_mode)
    try:
        sink.clear()
    except LogSinkError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(level="DEBUG", console=True)

    root = Path(args.root).expanduser().resolve()
    try:
        config = load_config(root)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    if args.command == "path":
        return _handle_path(config)

    if args.command == "show":
        return _handle_show(config, args.lines)

    if args.command == "clear":
        return _handle_clear(config)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
