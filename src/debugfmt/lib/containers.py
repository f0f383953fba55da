"""Sequence and mapping debug capabilities built on the collection renderer."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any

from debugfmt.lib.collection import render_collection
from debugfmt.lib.handle import dbg
from debugfmt.lib.registry import VARIADIC, Capability
from debugfmt.lib.tags import Pretty

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from debugfmt.lib.formatting import StreamT
    from debugfmt.lib.registry import Registry

PRETTY_INDENT = "   "


def _put_element(stream: StreamT, item: object, *, registry: Registry) -> None:
    dbg(item, registry=registry).write_to(stream)


def _put_entry(stream: StreamT, entry: tuple[Any, Any], *, registry: Registry) -> None:
    key, value = entry
    dbg(key, registry=registry).write_to(stream)
    stream.write(": ")
    dbg(value, registry=registry).write_to(stream)


def _put_pretty_entry(stream: StreamT, entry: tuple[Any, Any], *, registry: Registry) -> None:
    stream.write(PRETTY_INDENT)
    _put_entry(stream, entry, registry=registry)


def render_sequence(stream: StreamT, value: Sequence[Any], *, registry: Registry) -> StreamT:
    return render_collection(
        stream,
        value,
        left="{",
        right="}",
        delimiter=", ",
        empty="{}",
        put=partial(_put_element, registry=registry),
    )


def render_mapping(stream: StreamT, value: Mapping[Any, Any], *, registry: Registry) -> StreamT:
    return render_collection(
        stream,
        value.items(),
        left="{",
        right="}",
        delimiter=", ",
        empty="{}",
        put=partial(_put_entry, registry=registry),
    )


def render_mapping_pretty(
    stream: StreamT,
    value: Mapping[Any, Any],
    *,
    registry: Registry,
) -> StreamT:
    return render_collection(
        stream,
        value.items(),
        left="{\n",
        right="\n}",
        delimiter=",\n",
        empty="{}",
        put=partial(_put_pretty_entry, registry=registry),
    )


def register_container_formatters(registry: Registry) -> None:
    """Register list/tuple/dict capabilities; element types must be debug themselves."""

    sequence = partial(render_sequence, registry=registry)
    registry.register(
        Capability(origin=list, render=sequence, arity=1, description="inline sequence")
    )
    registry.register(
        Capability(origin=tuple, render=sequence, arity=VARIADIC, description="inline sequence")
    )
    registry.register(
        Capability(
            origin=dict,
            render=partial(render_mapping, registry=registry),
            arity=2,
            description="inline mapping",
        )
    )
    registry.register(
        Capability(
            origin=dict,
            render=partial(render_mapping_pretty, registry=registry),
            tags=frozenset({Pretty}),
            arity=2,
            description="one entry per line",
        )
    )
