"""qq: log values together with the expressions that produced them.

    import qq

    qq.log(ip, port, 5432)
    # [14:03:07 server.py:42 app.server.connect] ip="1.2.3.4" port=443 5432

Lines are appended to ``qq.LOG_FILE`` (``qq.log`` in the temp directory)
unless ``qq.toml`` in the working directory says otherwise.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from qq.diagnostics import get_logger
from qq.logger import Logger
from qq.models.entries import LogEntry
from qq.settings.config import ConfigError, QQConfig, default_log_file, load_config
from qq.sink.logfile import LogSinkError

__version__ = "0.1.0"

LOG_FILE = default_log_file()

_logger = get_logger(__name__)

_default_logger: Logger | None = None
_default_lock = threading.Lock()


def configure(config: QQConfig | None = None) -> Logger:
    """Replace the logger used by :func:`log`.

    Without ``config`` the configuration is read from ``qq.toml`` in the
    current working directory.
    """
    global _default_logger
    if config is None:
        config = _load_default_config()
    with _default_lock:
        _default_logger = Logger(config)
        return _default_logger


def default_logger() -> Logger:
    """Return the logger used by :func:`log`, creating it on first use."""
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = Logger(_load_default_config())
        return _default_logger


def _load_default_config() -> QQConfig:
    try:
        return load_config(Path.cwd())
    except ConfigError as exc:
        _logger.warning("Ignoring qq config: %s", exc)
        return QQConfig()


def log(*values: Any) -> LogEntry | None:
    """Log ``values``, naming each one after the expression that produced it.

    ``qq.log(ip, port, 5432)`` appends ``ip="1.2.3.4" port=443 5432``.
    Returns the written entry, or None if the log file could not be written.
    """
    return default_logger()._emit(values, depth=2)


__all__ = [
    "LOG_FILE",
    "ConfigError",
    "LogEntry",
    "LogSinkError",
    "Logger",
    "QQConfig",
    "configure",
    "default_logger",
    "log",
]
