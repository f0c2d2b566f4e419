"""Stack inspection: where was qq called from?"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from qq.models.calls import CallSite

if TYPE_CHECKING:
    from types import FrameType


def _function_name(frame: FrameType) -> str:
    module = frame.f_globals.get("__name__", "?")
    return f"{module}.{frame.f_code.co_qualname}"


def locate_caller(depth: int = 1) -> CallSite | None:
    """Describe the frame ``depth`` levels above the function calling this.

    ``locate_caller(1)`` inside ``f`` describes the code that called ``f``.
    Returns None when the interpreter does not expose frames that deep.
    """
    frame = inspect.currentframe()
    try:
        # +1 skips locate_caller itself
        for _ in range(depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None

        info = inspect.getframeinfo(frame, context=0)
        positions = info.positions
        line = info.lineno or 0
        end_line = positions.end_lineno if positions is not None else None
        col = positions.col_offset if positions is not None else None
        end_col = positions.end_col_offset if positions is not None else None

        return CallSite(
            path=info.filename,
            line=line,
            end_line=end_line,
            col=col,
            end_col=end_col if end_line is not None else None,
            function=_function_name(frame),
        )
    finally:
        del frame


__all__ = ["locate_caller"]
