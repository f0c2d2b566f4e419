"""Structural, type-revealing rendering of runtime values.

``render_value`` shows the shape of composite values instead of their
``str()``: strings are quoted, containers are expanded recursively, and
objects without a custom ``__repr__`` show their class and attributes.

    >>> render_value({"port": 443, "hosts": ("a", "b")})
    '{"port": 443, "hosts": ("a", "b")}'
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from functools import singledispatch
from typing import Any

import orjson
from pydantic import BaseModel

DEFAULT_MAX_DEPTH = 6
ELLIPSIS = "..."


@dataclasses.dataclass
class _RenderContext:
    """Tracks nesting depth and the containers currently being rendered."""

    max_depth: int
    depth: int = 0
    active: set[int] = dataclasses.field(default_factory=set)

    def render(self, value: Any) -> str:
        if self.depth >= self.max_depth:
            return ELLIPSIS
        key = id(value)
        if key in self.active:
            return ELLIPSIS

        self.active.add(key)
        self.depth += 1
        try:
            if isinstance(value, Enum):
                return _render_enum(value)
            return _render(value, self)
        finally:
            self.depth -= 1
            self.active.discard(key)

    def join(self, items: Any) -> str:
        return ", ".join(self.render(item) for item in items)

    def fields(self, pairs: Any) -> str:
        return ", ".join(f"{name}={self.render(value)}" for name, value in pairs)


def render_value(value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Render ``value`` recursively, showing its runtime shape."""
    return _RenderContext(max_depth=max_depth).render(value)


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001 - user __repr__ may raise anything
        return f"<{type(value).__name__} object>"


def _type_prefix(value: Any, base: type) -> str:
    """Name subclasses of builtin containers, e.g. OrderedDict."""
    return "" if type(value) is base else type(value).__name__


def _has_default_repr(value: Any) -> bool:
    return type(value).__repr__ is object.__repr__


def _render_enum(value: Enum) -> str:
    return f"{type(value).__name__}.{value.name}"


@singledispatch
def _render(value: Any, ctx: _RenderContext) -> str:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        pairs = (
            (f.name, getattr(value, f.name, None))
            for f in dataclasses.fields(value)
            if f.repr
        )
        return f"{type(value).__name__}({ctx.fields(pairs)})"

    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict) and _has_default_repr(value):
        return f"{type(value).__name__}({ctx.fields(attrs.items())})"

    return _safe_repr(value)


@_render.register(str)
def _(value: str, ctx: _RenderContext) -> str:
    # str.__str__ skips overrides on subclasses
    plain = str.__str__(value)
    try:
        text = orjson.dumps(plain).decode()
    except orjson.JSONEncodeError:
        # lone surrogates
        text = repr(plain)
    prefix = _type_prefix(value, str)
    return f"{prefix}({text})" if prefix else text


@_render.register(bool)
@_render.register(int)
@_render.register(float)
@_render.register(complex)
@_render.register(bytes)
@_render.register(bytearray)
@_render.register(type(None))
def _(value: Any, ctx: _RenderContext) -> str:
    return _safe_repr(value)


@_render.register(list)
def _(value: list, ctx: _RenderContext) -> str:
    prefix = _type_prefix(value, list)
    body = f"[{ctx.join(value)}]"
    return f"{prefix}({body})" if prefix else body


@_render.register(tuple)
def _(value: tuple, ctx: _RenderContext) -> str:
    field_names = getattr(type(value), "_fields", None)
    if isinstance(field_names, tuple):
        return f"{type(value).__name__}({ctx.fields(zip(field_names, value))})"

    body = f"({ctx.render(value[0])},)" if len(value) == 1 else f"({ctx.join(value)})"
    prefix = _type_prefix(value, tuple)
    return f"{prefix}{body}" if prefix else body


@_render.register(set)
@_render.register(frozenset)
def _(value: set | frozenset, ctx: _RenderContext) -> str:
    name = type(value).__name__
    if not value:
        return f"{name}()"
    body = "{" + ctx.join(value) + "}"
    return body if type(value) is set else f"{name}({body})"


@_render.register(dict)
def _(value: dict, ctx: _RenderContext) -> str:
    items = ", ".join(f"{ctx.render(k)}: {ctx.render(v)}" for k, v in value.items())
    body = "{" + items + "}"
    prefix = _type_prefix(value, dict)
    return f"{prefix}({body})" if prefix else body


@_render.register(BaseModel)
def _(value: BaseModel, ctx: _RenderContext) -> str:
    pairs = ((name, getattr(value, name, None)) for name in type(value).model_fields)
    return f"{type(value).__name__}({ctx.fields(pairs)})"


__all__ = ["DEFAULT_MAX_DEPTH", "ELLIPSIS", "render_value"]
