"""
Internal diagnostics for qq.

qq writes its own output to the qq log file; this module only covers
messages about qq itself (parse fallbacks, sink failures).

Usage:
    from qq.diagnostics import setup_logging, get_logger

    # In cli.py (once at startup)
    setup_logging(level='DEBUG', console=True)

    # In any module
    logger = get_logger(__name__)
    logger.debug("Some debug message")
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "qq"

# Libraries stay silent unless the host application configures logging.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(level: str = "WARNING", console: bool = False) -> None:
    """
    Configure diagnostics for qq.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        console: If True, log to stderr
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(console_handler)

    logger.debug("Logging configured: level=%s, console=%s", level, console)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance under the ``qq`` namespace
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
