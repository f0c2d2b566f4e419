"""Shared utilities for qq."""

from __future__ import annotations

import keyword
from pathlib import PurePath


def short_file_name(file_path: str | PurePath) -> str:
    """Return the final path component used in log prefixes.

    Examples:
        >>> short_file_name("/home/me/project/app/main.py")
        'main.py'
        >>> short_file_name("<stdin>")
        '<stdin>'
    """
    path_str = file_path.as_posix() if isinstance(file_path, PurePath) else str(file_path)
    normalized_parts = [part for part in path_str.replace("\\", "/").split("/") if part]
    return normalized_parts[-1] if normalized_parts else path_str


def is_identifier(name: str) -> bool:
    """Return True if ``name`` can be used as a Python variable name.

    Examples:
        >>> is_identifier("qq")
        True
        >>> is_identifier("q.q")
        False
    """
    return name.isidentifier() and not keyword.iskeyword(name)
