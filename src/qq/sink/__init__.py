"""Output side of qq: grouping and the log file."""

from qq.sink.logfile import DEFAULT_FILE_MODE, LogSink, LogSinkError
from qq.sink.timer import DEFAULT_GROUP_THRESHOLD, GroupingTimer

__all__ = [
    "DEFAULT_FILE_MODE",
    "DEFAULT_GROUP_THRESHOLD",
    "GroupingTimer",
    "LogSink",
    "LogSinkError",
]
