"""Opt-in debug formatting for Python values."""

from debugfmt.lib import (
    Capability,
    DebugCapabilityError,
    DebugHandle,
    DuplicateCapabilityError,
    MissingCapabilityError,
    MissingElementCapabilityError,
    ModeTag,
    Pretty,
    Registry,
    UnknownTagError,
    dbg,
    debug_impl,
    get_default_registry,
    render_collection,
)

__version__ = "0.1.0"

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
    "__version__",
    "dbg",
    "debug_impl",
    "get_default_registry",
    "render_collection",
]
