"""Append-only writes to the qq log file."""

from __future__ import annotations

import os
from collections import deque
from pathlib import Path

DEFAULT_FILE_MODE = 0o600


class LogSinkError(Exception):
    """Raised when the log file cannot be opened or written."""


class LogSink:
    """Writes whole lines to the log file.

    The file is opened right before and closed right after every write, so
    each line is on disk even if the process dies before the next call.
    """

    def __init__(self, path: str | Path, mode: int = DEFAULT_FILE_MODE) -> None:
        self.path = Path(path)
        self.mode = mode

    def write(self, text: str) -> None:
        """Append ``text`` to the log file.

        Raises:
            LogSinkError: the file cannot be opened or written.
        """
        try:
            fd = os.open(self.path, os.O_CREAT | os.O_APPEND | os.O_WRONLY, self.mode)
        except OSError as exc:
            msg = f"Failed to open log file {self.path}: {exc}"
            raise LogSinkError(msg) from exc

        try:
            f = os.fdopen(fd, "a", encoding="utf-8", errors="backslashreplace")
        except OSError as exc:
            os.close(fd)
            msg = f"Failed to open log file {self.path}: {exc}"
            raise LogSinkError(msg) from exc

        try:
            with f:
                f.write(text)
        except OSError as exc:
            msg = f"Failed to write log file {self.path}: {exc}"
            raise LogSinkError(msg) from exc

    def tail(self, count: int) -> list[str]:
        """Return the last ``count`` lines of the log file.

        Raises:
            FileNotFoundError: nothing has been logged yet.
        """
        if count <= 0:
            return []
        with self.path.open(encoding="utf-8", errors="replace") as f:
            return [line.rstrip("\n") for line in deque(f, maxlen=count)]

    def clear(self) -> bool:
        """Truncate the log file. Returns False if it does not exist."""
        if not self.path.is_file():
            return False
        try:
            with self.path.open("w", encoding="utf-8"):
                pass
        except OSError as exc:
            msg = f"Failed to clear log file {self.path}: {exc}"
            raise LogSinkError(msg) from exc
        return True


__all__ = ["DEFAULT_FILE_MODE", "LogSink", "LogSinkError"]
