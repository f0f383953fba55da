"""Debug capabilities for integers and text strings."""

from __future__ import annotations

import ctypes
import math
import sys
from typing import TYPE_CHECKING

from debugfmt.lib.registry import Capability

if TYPE_CHECKING:
    from debugfmt.lib.formatting import StreamT
    from debugfmt.lib.registry import Registry

_LOG10_2 = math.log10(2)

# Several of these are platform aliases of one another (c_longlong is c_long on
# LP64), so registration deduplicates them.
FIXED_WIDTH_INTEGERS: tuple[type[ctypes._SimpleCData], ...] = (
    ctypes.c_byte,
    ctypes.c_ubyte,
    ctypes.c_short,
    ctypes.c_ushort,
    ctypes.c_int,
    ctypes.c_uint,
    ctypes.c_long,
    ctypes.c_ulong,
    ctypes.c_longlong,
    ctypes.c_ulonglong,
)


def decimal_digits(value: int) -> str:
    """``str(value)`` without tripping the interpreter's int-to-str digit limit.

    Values under the limit use the native conversion; larger ones are split
    by a power of ten and each half converted separately.
    """

    if value < 0:
        return "-" + decimal_digits(-value)
    limit = sys.get_int_max_str_digits()
    # Each decimal digit needs more than 3 bits, so this stays under the limit.
    if limit == 0 or value.bit_length() <= 3 * limit:
        return str(value)
    split = int(value.bit_length() * _LOG10_2) // 2
    high, low = divmod(value, 10**split)
    return decimal_digits(high) + decimal_digits(low).zfill(split)


def render_int(stream: StreamT, value: int) -> StreamT:
    stream.write(decimal_digits(value))
    return stream


def render_fixed_width_int(stream: StreamT, value: ctypes._SimpleCData) -> StreamT:
    stream.write(decimal_digits(value.value))
    return stream


def render_str(stream: StreamT, value: str) -> StreamT:
    # No escaping: embedded quotes and control characters are written as-is.
    stream.write(f'"{value}"')
    return stream


def register_builtin_formatters(registry: Registry) -> None:
    registry.register(Capability(origin=int, render=render_int, description="decimal digits"))
    for c_type in dict.fromkeys(FIXED_WIDTH_INTEGERS):
        registry.register(
            Capability(origin=c_type, render=render_fixed_width_int, description="decimal digits")
        )
    registry.register(Capability(origin=str, render=render_str, description="double-quoted text"))
