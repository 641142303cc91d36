"""Interchangeable ToInt32 implementations.

Every strategy computes the same total function over all float64 bit
patterns; they differ only in how the work is split up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .bits import F64_EXP_BIAS, NumconvError
from .widths import fold_signed, to_int_width

MASK32: int = 0xFFFFFFFF


class StrategyError(NumconvError, ValueError):
    """No ToInt32 strategy is registered under the requested name."""


@dataclass(frozen=True)
class Int32Strategy:
    name: str
    convert: Callable[[int], int]

    def __call__(self, ui: int) -> int:
        return self.convert(ui)


def _generic_int32(ui: int) -> int:
    return to_int_width(ui, 32)


def _shift32(word: int, dist: int) -> int:
    """Shift a 32-bit word left for positive dist, right for negative."""
    if dist >= 32 or dist <= -32:
        return 0
    if dist >= 0:
        return (word << dist) & MASK32
    return word >> (0 - dist)


def _split_word_int32(ui: int) -> int:
    """ToInt32 computed on the two 32-bit halves of the pattern.

    The low word carries the bottom 32 significand bits, the high word the
    sign, exponent and top 20 significand bits. Each half is shifted into
    place on its own and the two are OR-ed together.
    """
    hi: int = (ui >> 32) & MASK32
    lo: int = ui & MASK32
    exponent: int = ((hi >> 20) & 0x7FF) - F64_EXP_BIAS
    # Zeros, subnormals and everything below 1.0.
    if exponent < 0:
        return 0
    # Implicit leading 1. This overwrites an exponent bit, which is gone
    # once the sign and exponent are shifted out below.
    hi = hi | (1 << 20)
    low_part: int = _shift32(lo, exponent - 52)
    # Top of the significand now sits at bit 31, i.e. 2**52 in lo's scale.
    upper: int = (hi << 11) & MASK32
    high_part: int = _shift32(upper, exponent - 31)
    result: int = low_part | high_part
    # Infinities and NaNs fall out as 0 here: both shifts run off the word.
    if (hi >> 31) != 0:
        result = ((result ^ MASK32) + 1) & MASK32
    return fold_signed(result, 32)


GENERIC = Int32Strategy("generic", _generic_int32)
SPLIT_WORD = Int32Strategy("split-word", _split_word_int32)

INT32_STRATEGIES: dict[str, Int32Strategy] = {
    GENERIC.name: GENERIC,
    SPLIT_WORD.name: SPLIT_WORD,
}


def get_int32_strategy(name: str) -> Int32Strategy:
    if name not in INT32_STRATEGIES:
        raise StrategyError(
            "unknown int32 strategy '"
            + name
            + "' (expected one of: "
            + ", ".join(sorted(INT32_STRATEGIES))
            + ")"
        )
    return INT32_STRATEGIES[name]
