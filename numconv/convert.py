"""ECMAScript / WebIDL numeric conversions for float64 values.

Two layers, matching each other one for one:

- ``f64_to_*`` take a raw float64 bit pattern (an int in [0, 2**64)).
- ``to_*`` take a Python float.

Integer results are plain Python ints already folded into the target
range. ``to_integer`` / ``f64_to_integer`` stay in the float domain.
"""

from __future__ import annotations

from dataclasses import dataclass

from .bits import (
    F64_EXP_BIAS,
    F64_FRAC_BITS,
    F64_SIGN,
    F64_ZERO,
    bits_f64,
    check_bits,
    exp_f64,
    f64_bits,
    is_inf_f64,
    is_nan_f64,
    is_zero_f64,
)
from .strategies import GENERIC, Int32Strategy
from .widths import to_int_width, to_uint_width

# ---------------------------------------------------------------------------
# Bit-pattern entry points
# ---------------------------------------------------------------------------


def f64_to_int8(ui: int) -> int:
    return to_int_width(check_bits(ui), 8)


def f64_to_uint8(ui: int) -> int:
    return to_uint_width(check_bits(ui), 8)


def f64_to_int16(ui: int) -> int:
    return to_int_width(check_bits(ui), 16)


def f64_to_uint16(ui: int) -> int:
    return to_uint_width(check_bits(ui), 16)


def f64_to_int32(ui: int) -> int:
    """ES ToInt32."""
    return to_int_width(check_bits(ui), 32)


def f64_to_uint32(ui: int) -> int:
    """ES ToUint32."""
    return to_uint_width(check_bits(ui), 32)


def f64_to_int64(ui: int) -> int:
    """WebIDL long long conversion."""
    return to_int_width(check_bits(ui), 64)


def f64_to_uint64(ui: int) -> int:
    """WebIDL unsigned long long conversion."""
    return to_uint_width(check_bits(ui), 64)


def f64_to_integer(ui: int) -> int:
    """ES ToInteger: truncate toward zero, NaN becomes +0.

    Zeros and infinities come back unchanged. Values in (-1, 0) give -0,
    the same as ceil() would.
    """
    check_bits(ui)
    if is_nan_f64(ui):
        return F64_ZERO
    if is_zero_f64(ui) or is_inf_f64(ui):
        return ui
    exponent: int = exp_f64(ui) - F64_EXP_BIAS
    if exponent < 0:
        return ui & F64_SIGN
    # No fraction bits left.
    if exponent >= F64_FRAC_BITS:
        return ui
    fraction_mask: int = (1 << (F64_FRAC_BITS - exponent)) - 1
    return ui & ~fraction_mask


# ---------------------------------------------------------------------------
# Float entry points
# ---------------------------------------------------------------------------


def to_int8(d: float) -> int:
    return f64_to_int8(f64_bits(d))


def to_uint8(d: float) -> int:
    return f64_to_uint8(f64_bits(d))


def to_int16(d: float) -> int:
    return f64_to_int16(f64_bits(d))


def to_uint16(d: float) -> int:
    return f64_to_uint16(f64_bits(d))


def to_int32(d: float) -> int:
    return f64_to_int32(f64_bits(d))


def to_uint32(d: float) -> int:
    return f64_to_uint32(f64_bits(d))


def to_int64(d: float) -> int:
    return f64_to_int64(f64_bits(d))


def to_uint64(d: float) -> int:
    return f64_to_uint64(f64_bits(d))


def to_integer(d: float) -> float:
    return bits_f64(f64_to_integer(f64_bits(d)))


# ---------------------------------------------------------------------------
# Converter: entry points bound to a ToInt32 strategy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Converter:
    int32: Int32Strategy = GENERIC

    def to_int32(self, d: float) -> int:
        return self.int32(f64_bits(d))

    def f64_to_int32(self, ui: int) -> int:
        return self.int32(check_bits(ui))
