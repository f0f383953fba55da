"""Core debugfmt library exports."""

from debugfmt.lib.collection import render_collection
from debugfmt.lib.errors import (
    DebugCapabilityError,
    DuplicateCapabilityError,
    MissingCapabilityError,
    MissingElementCapabilityError,
    UnknownTagError,
)
from debugfmt.lib.handle import DebugHandle, dbg
from debugfmt.lib.registry import Capability, Registry, debug_impl, get_default_registry
from debugfmt.lib.tags import ModeTag, Pretty

__all__ = [
    "Capability",
    "DebugCapabilityError",
    "DebugHandle",
    "DuplicateCapabilityError",
    "MissingCapabilityError",
    "MissingElementCapabilityError",
    "ModeTag",
    "Pretty",
    "Registry",
    "UnknownTagError",
    "dbg",
    "debug_impl",
    "get_default_registry",
    "render_collection",
]
