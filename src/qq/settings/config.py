from __future__ import annotations

import tempfile
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from qq.render.values import DEFAULT_MAX_DEPTH
from qq.sink.logfile import DEFAULT_FILE_MODE
from qq.sink.timer import DEFAULT_GROUP_THRESHOLD
from qq.utils import is_identifier

CONFIG_FILENAME = "qq.toml"

LOG_FILENAME = "qq.log"


def default_log_file() -> Path:
    """Location of qq.log under the platform's temporary directory."""
    return Path(tempfile.gettempdir()) / LOG_FILENAME


class QQConfig(BaseModel):
    """Configuration for qq logging."""

    model_config = ConfigDict(extra="forbid")

    log_file: Path = Field(
        default_factory=default_log_file,
        description="File that log lines are appended to",
    )
    group_threshold: float = Field(
        default=DEFAULT_GROUP_THRESHOLD,
        gt=0,
        description="Idle seconds after which a blank line separates output",
    )
    aliases: list[str] = Field(
        default_factory=lambda: ["qq"],
        min_length=1,
        description="Names the qq module is called through (alias.log(...))",
    )
    entry_points: list[str] = Field(
        default_factory=lambda: ["log"],
        min_length=1,
        description="Function names recognized on an alias",
    )
    color: bool = Field(default=True, description="Wrap names and values in ANSI colors")
    fail_fast: bool = Field(
        default=False,
        description="Raise LogSinkError to the caller instead of returning None",
    )
    file_mode: int = Field(
        default=DEFAULT_FILE_MODE,
        ge=0,
        le=0o777,
        description="Permission bits used when the log file is created",
    )
    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        description="Nesting depth after which values render as '...'",
    )

    @field_validator("aliases", "entry_points")
    @classmethod
    def validate_identifiers(cls, v: list[str]) -> list[str]:
        """Reject names that could never appear as ``alias.entry``."""
        for name in v:
            if not is_identifier(name):
                msg = f"'{name}' is not a valid Python identifier"
                raise ValueError(msg)
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_log_file(cls, v: Any) -> Any:
        if isinstance(v, str):
            if not v.strip():
                msg = "log_file must be a non-empty path"
                raise ValueError(msg)
            return Path(v).expanduser()
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> QQConfig:
    """Load configuration from qq.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return QQConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return QQConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
