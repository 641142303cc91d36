"""Double to fixed-width integer conversion, ECMAScript style.

Works directly on the float64 bit pattern. floor(abs(d)) is never
materialized; only the bits that can land inside the target width are.
"""

from __future__ import annotations

from .bits import F64_EXP_BIAS, F64_FRAC_BITS, NumconvError, exp_f64, sign_f64

WIDTHS: tuple[int, ...] = (8, 16, 32, 64)


class WidthError(NumconvError, ValueError):
    """Requested integer width is not one of WIDTHS."""


def check_width(width: int) -> int:
    if width not in WIDTHS:
        raise WidthError("unsupported width: " + str(width))
    return width


def to_uint_width(ui: int, width: int) -> int:
    """Return the value in [0, 2**width) congruent to sign(d) * floor(abs(d)).

    NaN and the infinities give 0.
    """
    check_width(width)
    mask: int = (1 << width) - 1
    # Not a true exponent for NaN, infinities and subnormals.
    exponent: int = exp_f64(ui) - F64_EXP_BIAS
    # abs(d) < 1, including zeros and subnormals.
    if exponent < 0:
        return 0
    # Every bit that could land below 2**width is zero: too large, inf or NaN.
    # (2**84 and 2**84 + 2**32 are adjacent doubles, so for width 32 an
    # exponent of 84 already means floor(abs(d)) == 0 mod 2**32.)
    if exponent >= F64_FRAC_BITS + width:
        return 0
    if exponent > F64_FRAC_BITS:
        result: int = (ui << (exponent - F64_FRAC_BITS)) & mask
    else:
        result = (ui >> (F64_FRAC_BITS - exponent)) & mask
    # Right shifts drag exponent/sign bits into the window, and the implicit
    # leading 1 only shows up in the result while exponent < width.
    if exponent < width:
        implicit_one: int = 1 << exponent
        result = result & (implicit_one - 1)
        result = result + implicit_one
    if sign_f64(ui) != 0:
        return (~result + 1) & mask
    return result


def to_int_width(ui: int, width: int) -> int:
    """Same congruence class as to_uint_width, folded into the signed range."""
    return fold_signed(to_uint_width(ui, width), width)


def fold_signed(u: int, width: int) -> int:
    """Reinterpret an unsigned width-bit value as two's-complement signed."""
    check_width(width)
    max_value: int = (1 << (width - 1)) - 1
    min_value: int = -max_value - 1
    if u <= max_value:
        return u
    return (min_value + (u - max_value)) - 1
