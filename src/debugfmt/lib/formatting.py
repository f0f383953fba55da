"""Stream protocol and render callable shapes shared by every formatter."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, TypeVar, runtime_checkable


@runtime_checkable
class TextStream(Protocol):
    """Anything text can be written to: files, ``io.StringIO``, ``sys.stdout``."""

    def write(self, text: str, /) -> object: ...


StreamT = TypeVar("StreamT", bound=TextStream)

RenderFn: TypeAlias = Callable[[Any, Any], Any]
"""``render(stream, value) -> stream`` for one capability."""

PutFn: TypeAlias = Callable[[Any, Any], object]
"""Per-item callback used by the collection renderer."""
