"""Capability registry keyed by (type, mode tags)."""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass, field
from typing import Any, TypeAlias, Union

from debugfmt.lib.errors import (
    DuplicateCapabilityError,
    MissingCapabilityError,
    MissingElementCapabilityError,
    UnknownTagError,
)
from debugfmt.lib.formatting import RenderFn
from debugfmt.lib.tags import ModeTag, Pretty, describe_tags, normalize_tags
from debugfmt.lib.typeexpr import describe_type, split_type

logger = logging.getLogger(__name__)

# Arity for capabilities whose every type argument is an element type (tuples).
VARIADIC = -1

CapabilityKey: TypeAlias = tuple[type, frozenset[type[ModeTag]]]


@dataclass(frozen=True, slots=True)
class Capability:
    """One debug implementation for a concrete class and tag set.

    ``arity`` is the number of type parameters that must themselves be debug
    (untagged) before this capability may be used: 0 for scalars, 1 for
    sequences, 2 for mappings, ``VARIADIC`` for tuples.
    """

    origin: type
    render: RenderFn
    tags: frozenset[type[ModeTag]] = frozenset()
    arity: int = 0
    description: str = ""

    @property
    def key(self) -> CapabilityKey:
        return (self.origin, self.tags)

    def label(self) -> str:
        name = describe_type(self.origin)
        if not self.tags:
            return name
        return f"{name} [{describe_tags(self.tags)}]"


def _empty_capabilities() -> dict[CapabilityKey, Capability]:
    return {}


def _empty_tags() -> dict[str, type[ModeTag]]:
    return {}


@dataclass(slots=True)
class Registry:
    """Exact-match lookup table from (class, tag set) to a Capability."""

    _capabilities: dict[CapabilityKey, Capability] = field(default_factory=_empty_capabilities)
    _tags: dict[str, type[ModeTag]] = field(default_factory=_empty_tags)

    @classmethod
    def with_defaults(cls) -> Registry:
        # Imported here: container formatters build handles, which import this module.
        from debugfmt.lib.builtins import register_builtin_formatters
        from debugfmt.lib.containers import register_container_formatters

        registry = cls()
        registry.register_tag(Pretty)
        register_builtin_formatters(registry)
        register_container_formatters(registry)
        return registry

    def register(self, capability: Capability) -> Capability:
        """Add one capability; a key may only be registered once."""

        if not isinstance(capability.origin, type):
            raise TypeError(f"Capability origin must be a class, got {capability.origin!r}")
        if capability.arity != 0 and not issubclass(capability.origin, Collection):
            # Element types are inferred by iterating the value.
            raise TypeError(
                f"Capability for '{describe_type(capability.origin)}' declares element types "
                "but the class is not a Collection"
            )
        existing = self._capabilities.get(capability.key)
        if existing is not None:
            raise DuplicateCapabilityError(
                f"Duplicate debug capability for '{capability.label()}': already registered "
                f"by {existing.render!r}"
            )
        self._capabilities[capability.key] = capability
        logger.debug("Registered debug capability '%s'.", capability.label())
        return capability

    def implementation(
        self,
        origin: type,
        *tags: type[ModeTag],
        arity: int = 0,
    ) -> Callable[[RenderFn], RenderFn]:
        """Decorator form of :meth:`register` for a plain render function."""

        def decorator(render: RenderFn) -> RenderFn:
            self.register(
                Capability(
                    origin=origin,
                    render=render,
                    tags=normalize_tags(tags),
                    arity=arity,
                    description=(render.__doc__ or "").strip(),
                )
            )
            return render

        return decorator

    def register_tag(self, tag: type[ModeTag]) -> None:
        normalize_tags((tag,))
        existing = self._tags.get(tag.name)
        if existing is not None and existing is not tag:
            raise DuplicateCapabilityError(f"Duplicate mode tag name '{tag.name}'")
        self._tags[tag.name] = tag

    def tag_named(self, name: str) -> type[ModeTag]:
        normalized = name.strip().lower()
        if normalized not in self._tags:
            raise UnknownTagError(
                f"Unknown mode tag '{name}'; expected one of {sorted(self._tags)}"
            )
        return self._tags[normalized]

    def resolve(self, type_expr: Any, tags: Iterable[type[ModeTag]] = ()) -> Capability:
        """Return the capability for ``type_expr`` under ``tags`` or raise.

        Element type parameters of generic capabilities are checked recursively
        against their untagged entries.
        """

        key_tags = normalize_tags(tuple(tags))
        origin, args = split_type(type_expr)
        capability = self._capabilities.get((origin, key_tags)) if origin is not Union else None
        if capability is None:
            raise MissingCapabilityError(type_expr, key_tags)
        if capability.arity != 0 and args:
            self._check_elements(type_expr, capability, args)
        return capability

    def implements(self, type_expr: Any, *tags: type[ModeTag]) -> bool:
        try:
            self.resolve(type_expr, tags)
        except MissingCapabilityError:
            return False
        return True

    def keys(self) -> tuple[CapabilityKey, ...]:
        return tuple(sorted(self._capabilities, key=lambda key: self._capabilities[key].label()))

    def capabilities(self) -> tuple[Capability, ...]:
        return tuple(self._capabilities[key] for key in self.keys())

    def _check_elements(
        self,
        container: Any,
        capability: Capability,
        args: tuple[Any, ...],
    ) -> None:
        elements = tuple(arg for arg in args if arg is not Ellipsis)
        if capability.arity != VARIADIC and len(elements) != capability.arity:
            raise TypeError(
                f"'{describe_type(container)}' expects {capability.arity} type parameter(s), "
                f"got {len(elements)}"
            )
        for element in elements:
            self._check_element(container, element)

    def _check_element(self, container: Any, element: Any) -> None:
        origin, members = split_type(element)
        if origin is Union:
            for member in members:
                self._check_element(container, member)
            return
        try:
            self.resolve(element)
        except MissingElementCapabilityError:
            raise
        except MissingCapabilityError as error:
            raise MissingElementCapabilityError(container, element) from error


_default_registry: Registry | None = None


def get_default_registry() -> Registry:
    """Return the process-wide registry, built with the builtin formatters on first use."""

    global _default_registry
    if _default_registry is None:
        _default_registry = Registry.with_defaults()
    return _default_registry


def debug_impl(
    origin: type,
    *tags: type[ModeTag],
    arity: int = 0,
    registry: Registry | None = None,
) -> Callable[[RenderFn], RenderFn]:
    """Register ``render(stream, value) -> stream`` as the debug capability of ``origin``."""

    target = registry if registry is not None else get_default_registry()
    return target.implementation(origin, *tags, arity=arity)
