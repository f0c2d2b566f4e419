"""The qq logger: name the arguments of a call and append them to a file."""

from __future__ import annotations

import threading
import time
from datetime import datetime
from typing import TYPE_CHECKING, Any

from qq.caller import locate_caller
from qq.diagnostics import get_logger
from qq.models.entries import LogEntry
from qq.parse.calls import find_argument_names
from qq.parse.source import SourceParseError, parse_source_file
from qq.render.formatter import format_args
from qq.settings.config import QQConfig
from qq.sink.logfile import LogSink, LogSinkError
from qq.sink.timer import GroupingTimer
from qq.utils import short_file_name

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from qq.models.calls import CallSite

logger = get_logger(__name__)


def build_prefix(timestamp: datetime, call_site: CallSite | None) -> str:
    """Return ``[HH:MM:SS file.py:line module.function] ``."""
    clock = timestamp.strftime("%H:%M:%S")
    if call_site is None:
        return f"[{clock} ?:0 ?] "
    return (
        f"[{clock} {short_file_name(call_site.path)}:{call_site.target_end_line} "
        f"{call_site.function}] "
    )


class Logger:
    """Writes ``name=value`` lines for each call to :meth:`log`.

    All mutable state (the grouping timer) lives on the instance and is
    guarded by a lock, so one instance can be shared between threads.
    """

    def __init__(
        self,
        config: QQConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config or QQConfig()
        self._timer = GroupingTimer(self.config.group_threshold, clock=clock)
        self._sink = LogSink(self.config.log_file, mode=self.config.file_mode)
        self._now = now
        self._lock = threading.Lock()

    @property
    def log_file(self) -> Path:
        return self._sink.path

    @property
    def sink(self) -> LogSink:
        return self._sink

    def log(self, *values: Any) -> LogEntry | None:
        """Append one line showing each value and the expression behind it.

        Returns the entry that was written, or None if the log file could
        not be written and ``fail_fast`` is off.

        Raises:
            LogSinkError: the log file could not be written and
                ``fail_fast`` is on.
        """
        return self._emit(values, depth=2)

    def argument_names(self, call_site: CallSite) -> list[str] | None:
        """Recover the source text of each argument of the call at ``call_site``."""
        try:
            parsed = parse_source_file(call_site.path)
        except SourceParseError as exc:
            logger.debug("Argument names unavailable: %s", exc)
            return None

        return find_argument_names(
            parsed,
            call_site,
            aliases=self.config.aliases,
            entry_points=self.config.entry_points,
        )

    def _emit(self, values: Sequence[Any], depth: int) -> LogEntry | None:
        """Format and write ``values``; ``depth`` locates the user's frame."""
        call_site = locate_caller(depth)
        names = self.argument_names(call_site) if call_site is not None else None
        if names is not None and len(names) != len(values):
            logger.debug(
                "Found %d argument names for %d values; logging without names",
                len(names),
                len(values),
            )

        args = format_args(
            names,
            values,
            color=self.config.color,
            max_depth=self.config.max_depth,
        )
        timestamp = self._now()

        with self._lock:
            entry = LogEntry(
                timestamp=timestamp,
                prefix=build_prefix(timestamp, call_site),
                args=args,
                grouped=not self._timer.reset(),
            )
            try:
                self._sink.write(entry.line())
            except LogSinkError as exc:
                if self.config.fail_fast:
                    raise
                logger.warning("qq output lost: %s", exc)
                return None

        return entry


__all__ = ["Logger", "build_prefix"]
