"""Data models shared by the parse, render and sink layers."""

from qq.models.calls import (
    ArgumentNode,
    CallExpression,
    CallSite,
    CompoundArgument,
    IdentifierArgument,
    LiteralArgument,
    SourceSpan,
)
from qq.models.entries import LogEntry, LoggedValue

__all__ = [
    "ArgumentNode",
    "CallExpression",
    "CallSite",
    "CompoundArgument",
    "IdentifierArgument",
    "LiteralArgument",
    "LogEntry",
    "LoggedValue",
    "SourceSpan",
]
