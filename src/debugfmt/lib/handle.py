"""The ``dbg`` entry point and the handle it returns."""

from __future__ import annotations

import io
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from debugfmt.lib.registry import get_default_registry
from debugfmt.lib.tags import normalize_tags
from debugfmt.lib.typeexpr import describe_type, infer_type, split_type

if TYPE_CHECKING:
    from debugfmt.lib.formatting import StreamT
    from debugfmt.lib.registry import Capability, Registry
    from debugfmt.lib.tags import ModeTag


@dataclass(frozen=True, slots=True, eq=False)
class DebugHandle:
    """A borrowed value paired with its already-resolved capability.

    Construct through :func:`dbg`; the handle holds a reference to the value,
    not a copy, and is meant to be written once right away.
    """

    value: Any
    type_expr: Any
    tags: frozenset[type[ModeTag]]
    capability: Capability
    registry: Registry = field(repr=False)

    def write_to(self, stream: StreamT) -> StreamT:
        self.capability.render(stream, self.value)
        return stream

    def with_tags(self, *tags: type[ModeTag]) -> DebugHandle:
        """Same value and type, different tags; only the capability lookup is redone."""

        capability = self.registry.resolve(self.type_expr, tags)
        return replace(self, tags=normalize_tags(tags), capability=capability)

    def __str__(self) -> str:
        return self.write_to(io.StringIO()).getvalue()

    def __format__(self, format_spec: str) -> str:
        if format_spec:
            raise ValueError(f"Debug handles take no format specifier, got {format_spec!r}")
        return str(self)


def dbg(
    value: Any,
    *tags: type[ModeTag],
    as_type: Any = None,
    registry: Registry | None = None,
) -> DebugHandle:
    """Resolve the debug capability for ``value`` under ``tags``.

    Raises :class:`~debugfmt.lib.errors.MissingCapabilityError` (or its element
    variant) here, before anything is written. ``as_type`` declares the type
    expression instead of inferring it; its class must be the value's class.
    """

    target = registry if registry is not None else get_default_registry()
    inferred = infer_type(value)
    if as_type is None:
        capability = target.resolve(inferred, tags)
        type_expr = inferred
    else:
        declared_origin, _ = split_type(as_type)
        if declared_origin is not type(value):
            raise TypeError(
                f"as_type '{describe_type(as_type)}' does not match value of type "
                f"'{describe_type(type(value))}'"
            )
        capability = target.resolve(as_type, tags)
        # The declared type may be looser than the contents; those must resolve too.
        target.resolve(inferred, tags)
        type_expr = as_type
    return DebugHandle(
        value=value,
        type_expr=type_expr,
        tags=normalize_tags(tags),
        capability=capability,
        registry=target,
    )
