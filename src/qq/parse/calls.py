"""Tree-sitter lookup of the ``qq.log(...)`` call behind a stack frame."""

from __future__ import annotations

from typing import TYPE_CHECKING

from qq.diagnostics import get_logger
from qq.models.calls import CallExpression
from qq.parse.arguments import classify_argument
from qq.parse.bindings import collect_bindings
from qq.parse.source import iter_nodes, node_span, node_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tree_sitter import Node

    from qq.models.calls import CallSite
    from qq.parse.bindings import FileBindings
    from qq.parse.source import ParsedSource

logger = get_logger(__name__)

DEFAULT_ALIASES = ("qq",)
DEFAULT_ENTRY_POINTS = ("log",)

RECEIVER_NODE_TYPES = ("identifier", "attribute")


def _ends_at(node: Node, call_site: CallSite) -> bool:
    """Check the node against the position of the call's closing parenthesis.

    With a column this is an exact match. Without one, every call ending on
    the same line qualifies.
    """
    if node.end_point[0] + 1 != call_site.target_end_line:
        return False
    if call_site.end_col is None:
        return True
    return node.end_point[1] == call_site.end_col


def _recognized_callee(
    callee_node: Node | None,
    aliases: set[str],
    entry_points: set[str],
    *,
    any_receiver: bool = False,
) -> str | None:
    """Return "receiver.entry" if the callee is a qq entry point, else None.

    With ``any_receiver`` the object may be any name or attribute chain, so
    ``debug.log(...)`` on a Logger held under another name still qualifies.
    """
    if callee_node is None or callee_node.type != "attribute":
        return None

    object_node = callee_node.child_by_field_name("object")
    attribute_node = callee_node.child_by_field_name("attribute")
    if object_node is None or object_node.type not in RECEIVER_NODE_TYPES:
        return None
    if attribute_node is None or attribute_node.type != "identifier":
        return None

    receiver = node_text(object_node)
    entry = node_text(attribute_node)
    if entry not in entry_points:
        return None
    if not any_receiver and (object_node.type != "identifier" or receiver not in aliases):
        return None
    return f"{receiver}.{entry}"


def _argument_nodes(call_node: Node) -> list[Node]:
    arguments = call_node.child_by_field_name("arguments")
    if arguments is None:
        return []
    # qq.log(x for x in xs) has a bare generator as its argument list
    if arguments.type == "generator_expression":
        return [arguments]
    return [child for child in arguments.named_children if child.type != "comment"]


def _build_call(node: Node, callee_expr: str, bindings: FileBindings) -> CallExpression:
    return CallExpression(
        span=node_span(node),
        callee_expr=callee_expr,
        arguments=[classify_argument(arg, bindings) for arg in _argument_nodes(node)],
    )


def find_calls(
    parsed: ParsedSource,
    call_site: CallSite,
    *,
    aliases: Iterable[str] = DEFAULT_ALIASES,
    entry_points: Iterable[str] = DEFAULT_ENTRY_POINTS,
) -> list[CallExpression]:
    """Find recognized calls that end where ``call_site`` says, in tree order.

    Names bound by ``import qq as <alias>`` in the file are recognized in
    addition to ``aliases``. When the call site carries an end column the
    match is exact, and any ``<receiver>.<entry point>(...)`` call qualifies.
    """
    bindings = collect_bindings(parsed.root_node)
    alias_set = set(aliases) | bindings.library_aliases
    entry_set = set(entry_points)
    exact = call_site.end_col is not None

    calls: list[CallExpression] = []
    for node in iter_nodes(parsed.root_node):
        if node.type != "call" or not _ends_at(node, call_site):
            continue
        callee_expr = _recognized_callee(
            node.child_by_field_name("function"),
            alias_set,
            entry_set,
            any_receiver=exact,
        )
        if callee_expr is None:
            continue
        calls.append(_build_call(node, callee_expr, bindings))

    return calls


def find_argument_names(
    parsed: ParsedSource,
    call_site: CallSite,
    *,
    aliases: Iterable[str] = DEFAULT_ALIASES,
    entry_points: Iterable[str] = DEFAULT_ENTRY_POINTS,
) -> list[str] | None:
    """Return the display names of the call's arguments.

    Literals contribute an empty string, e.g. ``qq.log(ip, port, 5432)``
    gives ``["ip", "port", ""]``. When several recognized calls match the
    same position their names are concatenated; callers detect this through
    the count check against the runtime values. Returns None when no call
    matches.
    """
    calls = find_calls(
        parsed, call_site, aliases=aliases, entry_points=entry_points
    )
    if not calls:
        logger.debug(
            "No qq call ends at %s:%s", call_site.path, call_site.target_end_line
        )
        return None

    if len(calls) > 1:
        logger.debug(
            "%d qq calls end at %s:%s; argument names are concatenated",
            len(calls),
            call_site.path,
            call_site.target_end_line,
        )

    names: list[str] = []
    for call in calls:
        names.extend(call.argument_names())
    return names


__all__ = [
    "DEFAULT_ALIASES",
    "DEFAULT_ENTRY_POINTS",
    "find_argument_names",
    "find_calls",
]
