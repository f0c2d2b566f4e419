"""Models for values and lines written to the qq log file."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LoggedValue(BaseModel):
    """A runtime value paired with the source text that produced it."""

    model_config = ConfigDict(frozen=True)

    value: Any
    name: str = ""


class LogEntry(BaseModel):
    """One line as written to the log file."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    prefix: str
    args: list[str] = Field(default_factory=list)
    grouped: bool = Field(
        default=False,
        description="True when a blank separator line precedes the entry",
    )

    def line(self) -> str:
        """Render the entry exactly as it is appended to the log file."""
        separator = "\n" if self.grouped else ""
        return f"{separator}{self.prefix}{' '.join(self.args)}\n"


__all__ = ["LogEntry", "LoggedValue"]
