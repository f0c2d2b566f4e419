"""Tree-sitter parsing of the file that issued a ``qq.log`` call."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from tree_sitter import Language, Node, Parser, Tree
from tree_sitter_python import language as get_python_language

from qq.diagnostics import get_logger
from qq.models.calls import SourceSpan

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = get_logger(__name__)

_LANGUAGE: Language | None = None


class SourceParseError(Exception):
    """Raised when a source file cannot be read or does not parse cleanly."""


def _get_language() -> Language:
    """Initialize and return the Tree-sitter Python language."""
    global _LANGUAGE
    if _LANGUAGE is None:
        _LANGUAGE = Language(get_python_language())

    return _LANGUAGE


@dataclass(frozen=True)
class ParsedSource:
    """Syntax tree of one file as it was on disk at the time of the call."""

    path: str
    source_bytes: bytes
    tree: Tree

    @property
    def root_node(self) -> Node:
        return self.tree.root_node


def parse_source_file(file_path: str | Path) -> ParsedSource:
    """Parse the current on-disk contents of ``file_path``.

    Nothing is cached: every call reads and parses the file again, so edits
    made while the program runs are picked up.

    Raises:
        SourceParseError: the file is unreadable or has syntax errors.
    """
    path = Path(file_path)
    try:
        source_bytes = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read {path}: {exc}"
        raise SourceParseError(msg) from exc

    # A fresh parser per call keeps concurrent callers independent.
    tree = Parser(_get_language()).parse(source_bytes)
    if tree.root_node.has_error:
        msg = f"Syntax errors in {path}"
        raise SourceParseError(msg)

    logger.debug("Parsed %s (%d bytes)", path, len(source_bytes))
    return ParsedSource(path=str(path), source_bytes=source_bytes, tree=tree)


def node_text(node: Node | None) -> str:
    """Decode the source text covered by ``node``."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf8", errors="replace")


def node_span(node: Node) -> SourceSpan:
    return SourceSpan(
        start_line=node.start_point[0] + 1,
        start_col=node.start_point[1],
        end_line=node.end_point[0] + 1,
        end_col=node.end_point[1],
    )


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all of its descendants in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


__all__ = [
    "ParsedSource",
    "SourceParseError",
    "iter_nodes",
    "node_span",
    "node_text",
    "parse_source_file",
]
