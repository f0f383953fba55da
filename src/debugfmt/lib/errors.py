"""Capability resolution errors.

Every error here is raised while a handle is being constructed or a
capability is being registered, never while output is being written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from debugfmt.lib.tags import describe_tags
from debugfmt.lib.typeexpr import describe_type

if TYPE_CHECKING:
    from debugfmt.lib.tags import ModeTag


class DebugCapabilityError(TypeError):
    """Base class for missing debug support."""


class MissingCapabilityError(DebugCapabilityError):
    """No capability is registered for a (type, tags) key."""

    def __init__(self, type_expr: Any, tags: frozenset[type[ModeTag]] = frozenset()) -> None:
        self.type_expr = type_expr
        self.tags = tags
        super().__init__(self._message())

    def _message(self) -> str:
        suffix = f" with tags [{describe_tags(self.tags)}]" if self.tags else ""
        return f"Type '{describe_type(self.type_expr)}' does not implement debug{suffix}"


class MissingElementCapabilityError(MissingCapabilityError):
    """A container's element type has no default capability."""

    def __init__(
        self,
        container: Any,
        element: Any,
        tags: frozenset[type[ModeTag]] = frozenset(),
    ) -> None:
        self.container = container
        self.element = element
        super().__init__(container, tags)

    def _message(self) -> str:
        return (
            f"'{describe_type(self.container)}' requires that "
            f"'{describe_type(self.element)}' is debug for it to derive debug"
        )


class DuplicateCapabilityError(ValueError):
    """A capability key was registered twice."""


class UnknownTagError(KeyError):
    """A mode tag name does not match any registered tag."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown mode tag"
