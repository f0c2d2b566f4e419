"""Parsing utilities for recovering argument names at a call site."""

from qq.parse.arguments import classify_argument, render_expression
from qq.parse.bindings import FileBindings, collect_bindings
from qq.parse.calls import find_argument_names, find_calls
from qq.parse.source import ParsedSource, SourceParseError, parse_source_file

__all__ = [
    "FileBindings",
    "ParsedSource",
    "SourceParseError",
    "classify_argument",
    "collect_bindings",
    "find_argument_names",
    "find_calls",
    "parse_source_file",
    "render_expression",
]
