"""Names bound by import, def and class statements in a parsed file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from qq.parse.source import iter_nodes, node_text

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tree_sitter import Node

LIBRARY_MODULE = "qq"

SCOPE_NODE_TYPES = ("function_definition", "class_definition")

# Byte range of the def/class that owns a scope; None is the module.
ScopeKey = tuple[int, int] | None


@dataclass
class ScopeNames:
    """Non-variable names bound directly in one scope."""

    imported: set[str] = field(default_factory=set)
    definitions: set[str] = field(default_factory=set)


def _scope_key(node: Node) -> tuple[int, int]:
    return (node.start_byte, node.end_byte)


def _enclosing_scope(node: Node) -> Node | None:
    """Return the closest def or class strictly above ``node``."""
    current = node.parent
    while current is not None:
        if current.type in SCOPE_NODE_TYPES:
            return current
        current = current.parent
    return None


def visible_scopes(node: Node) -> list[ScopeKey]:
    """Scopes whose bindings are visible at ``node``, innermost first.

    A class body is visible only to code placed directly in it, not to the
    methods it defines.
    """
    keys: list[ScopeKey] = []
    scope = _enclosing_scope(node)
    innermost = True
    while scope is not None:
        if innermost or scope.type == "function_definition":
            keys.append(_scope_key(scope))
        innermost = False
        scope = _enclosing_scope(scope)
    keys.append(None)
    return keys


@dataclass
class FileBindings:
    """Non-variable names of one file, grouped by the scope that binds them.

    ``scopes`` maps each def/class (and the module, under ``None``) to the
    modules, imported objects, functions and classes bound directly in it.
    ``library_aliases`` holds the names under which the qq module itself
    was imported anywhere in the file.
    """

    scopes: dict[ScopeKey, ScopeNames] = field(default_factory=dict)
    library_aliases: set[str] = field(default_factory=set)

    @property
    def imported(self) -> set[str]:
        """Names imported at module level."""
        return self.scope(None).imported

    @property
    def definitions(self) -> set[str]:
        """Functions and classes defined at module level."""
        return self.scope(None).definitions

    def scope(self, key: ScopeKey) -> ScopeNames:
        return self.scopes.get(key) or ScopeNames()

    def _visible(self, node: Node | None) -> Iterator[ScopeNames]:
        keys = visible_scopes(node) if node is not None else [None]
        for key in keys:
            if key in self.scopes:
                yield self.scopes[key]

    def is_imported(self, name: str, node: Node | None = None) -> bool:
        """Check whether ``name`` refers to an import where ``node`` sits.

        Without ``node`` only module-level bindings are consulted.
        """
        return any(name in names.imported for names in self._visible(node))

    def is_variable(self, name: str, node: Node | None = None) -> bool:
        return not any(
            name in names.imported or name in names.definitions
            for names in self._visible(node)
        )


def _process_import_node(
    node: Node, names: ScopeNames, aliases: set[str], library: str
) -> None:
    """Process a standard import node (import x, import x.y as z)."""
    for name_node in node.children_by_field_name("name"):
        if name_node.type == "aliased_import":
            module = node_text(name_node.child_by_field_name("name"))
            alias = node_text(name_node.child_by_field_name("alias"))
            names.imported.add(alias)
            if module == library:
                aliases.add(alias)
            continue

        module = node_text(name_node)
        # "import a.b" binds "a"
        names.imported.add(module.split(".")[0])
        if module == library:
            aliases.add(library)


def _process_import_from_node(node: Node, names: ScopeNames) -> None:
    """Process a from-import node (from x import y, from x import y as z)."""
    for name_node in node.children_by_field_name("name"):
        if name_node.type == "aliased_import":
            names.imported.add(node_text(name_node.child_by_field_name("alias")))
        else:
            names.imported.add(node_text(name_node).split(".")[-1])


def collect_bindings(root: Node, library: str = LIBRARY_MODULE) -> FileBindings:
    """Collect import aliases and def/class names, keyed by binding scope."""
    bindings = FileBindings()

    def names_for(node: Node) -> ScopeNames:
        scope = _enclosing_scope(node)
        key = _scope_key(scope) if scope is not None else None
        return bindings.scopes.setdefault(key, ScopeNames())

    for node in iter_nodes(root):
        if node.type == "import_statement":
            _process_import_node(node, names_for(node), bindings.library_aliases, library)
        elif node.type == "import_from_statement":
            _process_import_from_node(node, names_for(node))
        elif node.type in SCOPE_NODE_TYPES:
            name = node_text(node.child_by_field_name("name"))
            if name:
                names_for(node).definitions.add(name)

    for names in bindings.scopes.values():
        names.imported.discard("")
    return bindings


__all__ = [
    "LIBRARY_MODULE",
    "FileBindings",
    "ScopeNames",
    "collect_bindings",
    "visible_scopes",
]
