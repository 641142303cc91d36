"""ECMAScript numeric conversions for float64 values — public API."""

from __future__ import annotations

from .bits import (
    BitPatternError as BitPatternError,
    NumconvError as NumconvError,
    bits_f64,
    exp_f64,
    f64_bits,
    frac_f64,
    is_inf_f64,
    is_nan_f64,
    is_zero_f64,
    sign_f64,
)
from .convert import (
    Converter,
    f64_to_int8,
    f64_to_int16,
    f64_to_int32,
    f64_to_int64,
    f64_to_integer,
    f64_to_uint8,
    f64_to_uint16,
    f64_to_uint32,
    f64_to_uint64,
    to_int8,
    to_int16,
    to_int32,
    to_int64,
    to_integer,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
)
from .strategies import (
    GENERIC,
    SPLIT_WORD,
    Int32Strategy,
    StrategyError as StrategyError,
    get_int32_strategy,
)
from .widths import WidthError as WidthError, to_int_width, to_uint_width
