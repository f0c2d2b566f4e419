"""Configuration for qq."""

from qq.settings.config import (
    CONFIG_FILENAME,
    ConfigError,
    QQConfig,
    default_log_file,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "QQConfig",
    "default_log_file",
    "load_config",
]
