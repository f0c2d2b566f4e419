"""Idle-gap tracking that splits log output into visual blocks."""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_GROUP_THRESHOLD = 2.0


class GroupingTimer:
    """Resettable timer that reports whether it was still running.

    A reset within ``threshold`` seconds of the previous one finds the timer
    running; a later reset (or the very first) finds it expired, which is the
    signal to start a new block of output.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_GROUP_THRESHOLD,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if threshold <= 0:
            msg = "threshold must be positive"
            raise ValueError(msg)
        self.threshold = threshold
        self._clock = clock
        self._last_reset: float | None = None
        self._lock = threading.Lock()

    def reset(self) -> bool:
        """Restart the timer and return True if it had not expired yet."""
        with self._lock:
            now = self._clock()
            was_running = (
                self._last_reset is not None
                and now - self._last_reset < self.threshold
            )
            self._last_reset = now
            return was_running


__all__ = ["DEFAULT_GROUP_THRESHOLD", "GroupingTimer"]
