"""Classification of ``qq.log`` argument nodes into names and literals."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from qq.models.calls import (
    ArgumentNode,
    CompoundArgument,
    IdentifierArgument,
    LiteralArgument,
)
from qq.parse.source import node_text

if TYPE_CHECKING:
    from tree_sitter import Node

    from qq.parse.bindings import FileBindings

# Expressions whose source text is worth showing next to the value.
COMPOUND_NODE_TYPES = frozenset(
    {
        "attribute",
        "await",
        "binary_operator",
        "boolean_operator",
        "call",
        "comparison_operator",
        "conditional_expression",
        "dictionary_comprehension",
        "generator_expression",
        "keyword_argument",
        "lambda",
        "list_comprehension",
        "named_expression",
        "not_operator",
        "parenthesized_expression",
        "set_comprehension",
        "slice",
        "subscript",
        "unary_operator",
    }
)


def render_expression(text: str) -> str:
    """Return ``text`` re-printed from its AST, or "" if it does not parse.

    The text is parsed as the only argument of a dummy call, which also
    accepts keyword arguments, generator arguments and multi-line
    expressions.

    Examples:
        >>> render_expression("a+b")
        'a + b'
        >>> render_expression("(x  [ 1 ])")
        'x[1]'
        >>> render_expression("a +")
        ''
    """
    try:
        tree = ast.parse(f"_(\n{text}\n)", mode="eval")
    except SyntaxError:
        return ""

    call = tree.body
    if not isinstance(call, ast.Call):
        return ""
    parts: list[ast.AST] = [*call.args, *call.keywords]
    if len(parts) != 1:
        return ""

    try:
        return ast.unparse(parts[0])
    except (ValueError, RecursionError):
        return ""


def _attribute_root(node: Node) -> Node | None:
    """Return the identifier at the base of an attribute chain, if any."""
    current: Node | None = node
    while current is not None and current.type == "attribute":
        current = current.child_by_field_name("object")
    if current is not None and current.type == "identifier":
        return current
    return None


def classify_argument(node: Node, bindings: FileBindings) -> ArgumentNode:
    """Classify one argument node of a recognized call.

    Identifiers that name variables keep their name. Compound expressions are
    rendered back to normalized source. Literals, and identifiers bound to
    modules, functions or classes, carry no name.
    """
    if node.type == "identifier":
        name = node_text(node)
        if bindings.is_variable(name, node):
            return IdentifierArgument(name=name)
        return LiteralArgument()

    if node.type not in COMPOUND_NODE_TYPES:
        return LiteralArgument()

    if node.type == "attribute":
        root = _attribute_root(node)
        # math.pi behaves like a package constant
        if root is not None and bindings.is_imported(node_text(root), node):
            return LiteralArgument()

    text = render_expression(node_text(node))
    if not text:
        return LiteralArgument()
    return CompoundArgument(text=text)


__all__ = ["COMPOUND_NODE_TYPES", "classify_argument", "render_expression"]
