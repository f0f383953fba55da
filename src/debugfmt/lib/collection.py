"""Generic delimited rendering shared by every container formatter."""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from debugfmt.lib.formatting import PutFn, StreamT


def render_collection(
    stream: StreamT,
    items: Iterable[Any],
    *,
    left: str,
    right: str,
    delimiter: str,
    empty: str,
    put: PutFn,
) -> StreamT:
    """Write ``left item delimiter item ... right``, or ``empty`` for no items.

    ``put(stream, item)`` renders each item; this function never formats
    items itself. Items are buffered first so one-pass iterables work and the
    delimiter is never written after the last item.
    """

    if isinstance(items, Sized) and len(items) == 0:
        stream.write(empty)
        return stream

    buffered = list(items)
    if not buffered:
        stream.write(empty)
        return stream

    *leading, last = buffered
    stream.write(left)
    for item in leading:
        put(stream, item)
        stream.write(delimiter)
    put(stream, last)
    stream.write(right)
    return stream
