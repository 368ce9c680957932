"""Bit-level helpers for single-precision floats and unsigned integers."""

from __future__ import annotations

import math
import struct

_F32 = struct.Struct("<f")
_U32 = struct.Struct("<I")

CANONICAL_NAN_BITS = 0x7FC0_0000


def _f32_bits(value: float) -> int:
    return _U32.unpack(_F32.pack(value))[0]


def to_canon_bits(value: float) -> int:
    """Return the bits of ``value`` as an f32, with every NaN and both zeros canonical.

    All NaNs map to the bits of the quiet NaN and ``-0.0`` maps to the bits
    of ``0.0``, so the result can be used for hashing and equality.
    """
    if math.isnan(value):
        return CANONICAL_NAN_BITS
    if value == 0.0:
        return 0
    return _f32_bits(value)


def div_ceil(value: int, other: int) -> int:
    """Divide two unsigned integers, rounding the quotient up."""
    if value < 0 or other < 0:
        raise ValueError("div_ceil takes unsigned integers")
    if other == 0:
        raise ZeroDivisionError("division by zero")
    return (value + other - 1) // other