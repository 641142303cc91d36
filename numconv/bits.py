"""Float64 bit patterns: packing, field extraction, classification."""

from __future__ import annotations

import struct

# ---------------------------------------------------------------------------
# Layer 1: Constants
# ---------------------------------------------------------------------------

MASK64: int = 0xFFFFFFFFFFFFFFFF
F64_SIGN: int = 0x8000000000000000
F64_INF: int = 0x7FF0000000000000
F64_NEG_INF: int = F64_SIGN | F64_INF
DEFAULT_NAN: int = 0x7FF8000000000000
F64_ZERO: int = 0
F64_NEG_ZERO: int = F64_SIGN

F64_EXP_BIAS: int = 0x3FF
F64_FRAC_BITS: int = 52


class NumconvError(Exception):
    """Base for all numconv errors."""


class BitPatternError(NumconvError, ValueError):
    """A value cannot be read as a float64: too wide for 64 bits, or not a double."""


# ---------------------------------------------------------------------------
# Layer 2: Conversion between float and bits
# ---------------------------------------------------------------------------


def f64_bits(d: float) -> int:
    try:
        packed = struct.pack("<d", d)
    except (struct.error, OverflowError):
        raise BitPatternError(
            "not representable as a double: " + type(d).__name__ + " value"
        ) from None
    return struct.unpack("<Q", packed)[0]


def bits_f64(ui: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", check_bits(ui)))[0]


def check_bits(ui: int) -> int:
    if ui < 0 or ui > MASK64:
        raise BitPatternError("not a 64-bit pattern: " + hex(ui))
    return ui


# ---------------------------------------------------------------------------
# Layer 3: Fields and predicates
# ---------------------------------------------------------------------------


def sign_f64(ui: int) -> int:
    return (ui >> 63) & 1


def exp_f64(ui: int) -> int:
    return (ui >> 52) & 0x7FF


def frac_f64(ui: int) -> int:
    return ui & 0x000FFFFFFFFFFFFF


def is_nan_f64(ui: int) -> bool:
    return (ui & 0x7FFFFFFFFFFFFFFF) > F64_INF


def is_inf_f64(ui: int) -> bool:
    return (ui & 0x7FFFFFFFFFFFFFFF) == F64_INF


def is_zero_f64(ui: int) -> bool:
    return (ui & 0x7FFFFFFFFFFFFFFF) == 0
