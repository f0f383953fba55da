"""Mode tags that select alternate debug capabilities for the same type."""

from __future__ import annotations

from typing import Any, ClassVar


class ModeTag:
    """Empty marker type used as part of a capability key.

    Subclasses are never instantiated; the class object itself is the tag.
    Each tag carries a lowercase ``name`` used by config files and the CLI.
    """

    name: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("name"):
            cls.name = cls.__name__.lower()

    def __new__(cls, *args: Any, **kwargs: Any) -> ModeTag:
        raise TypeError(f"Mode tag '{cls.__name__}' is a marker and cannot be instantiated")


class Pretty(ModeTag):
    """Multi-line container rendering, one entry per line."""


def normalize_tags(tags: tuple[object, ...] | frozenset[object]) -> frozenset[type[ModeTag]]:
    """Validate tag classes and collapse them into an unordered lookup key."""

    normalized: set[type[ModeTag]] = set()
    for tag in tags:
        if not (isinstance(tag, type) and issubclass(tag, ModeTag)) or tag is ModeTag:
            raise TypeError(f"Expected a ModeTag subclass, got {tag!r}")
        normalized.add(tag)
    return frozenset(normalized)


def describe_tags(tags: frozenset[type[ModeTag]]) -> str:
    return ", ".join(sorted(tag.name for tag in tags))
