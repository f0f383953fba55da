"""Type-expression helpers: inference from values and origin/argument splitting."""

from __future__ import annotations

import types
from collections.abc import Collection, Mapping
from typing import Any, Union, get_args, get_origin

# Text and byte strings are collections of themselves; they are always leaves.
_LEAF_COLLECTIONS: tuple[type, ...] = (str, bytes, bytearray, memoryview)


def is_union(type_expr: Any) -> bool:
    origin = get_origin(type_expr)
    return origin is types.UnionType or origin is Union


def split_type(type_expr: Any) -> tuple[Any, tuple[Any, ...]]:
    """Return ``(origin, args)`` for a class, a generic alias or a union."""

    if is_union(type_expr):
        return Union, get_args(type_expr)
    origin = get_origin(type_expr)
    if origin is None:
        return type_expr, ()
    return origin, get_args(type_expr)


def union_of(members: list[Any]) -> Any:
    """Collapse element types into one expression, preserving first-seen order."""

    unique: list[Any] = []
    for member in members:
        if member not in unique:
            unique.append(member)
    if len(unique) == 1:
        return unique[0]
    return Union[tuple(unique)]


def infer_type(value: object) -> Any:
    """Build the type expression of a concrete value by walking it once.

    Empty containers infer to their bare class since there is no element type
    to check.
    """

    value_type = type(value)
    if isinstance(value, _LEAF_COLLECTIONS):
        return value_type
    if isinstance(value, Mapping):
        if not value:
            return value_type
        keys = [infer_type(key) for key in value.keys()]
        items = [infer_type(item) for item in value.values()]
        return types.GenericAlias(value_type, (union_of(keys), union_of(items)))
    if isinstance(value, tuple):
        if not value:
            return value_type
        return types.GenericAlias(value_type, tuple(infer_type(item) for item in value))
    if isinstance(value, Collection):
        if not value:
            return value_type
        return types.GenericAlias(value_type, (union_of([infer_type(item) for item in value]),))
    return value_type


def describe_type(type_expr: Any) -> str:
    """Human-readable type name for diagnostics and capability listings."""

    if get_origin(type_expr) is not None:
        return repr(type_expr).replace("typing.", "")
    if isinstance(type_expr, type):
        if type_expr.__module__ == "builtins":
            return type_expr.__qualname__
        return f"{type_expr.__module__}.{type_expr.__qualname__}"
    return repr(type_expr)
