"""numconv CLI — print ECMAScript conversions of float64 values."""

from __future__ import annotations

import sys
from typing import Callable

from .bits import NumconvError, bits_f64, check_bits, f64_bits
from .convert import (
    Converter,
    f64_to_int8,
    f64_to_int16,
    f64_to_int64,
    f64_to_integer,
    f64_to_uint8,
    f64_to_uint16,
    f64_to_uint32,
    f64_to_uint64,
)
from .strategies import get_int32_strategy

OPS: list[str] = [
    "int8",
    "uint8",
    "int16",
    "uint16",
    "int32",
    "uint32",
    "int64",
    "uint64",
    "integer",
]

USAGE: str = """\
numconv [OPTIONS] VALUE...

Print ECMAScript conversions of each VALUE, one line per value.

Options:
  --op OP                 Conversion to print: int8, uint8, int16, uint16,
                          int32, uint32, int64, uint64, integer
                          (repeatable; default: all)
  --bits                  Read each VALUE as a hex float64 bit pattern
  --int32-strategy NAME   ToInt32 implementation: generic, split-word
  --help                  Show this help message
"""


def _format_integer(ui: int) -> str:
    return repr(bits_f64(f64_to_integer(ui)))


def op_table(converter: Converter) -> dict[str, Callable[[int], str]]:
    return {
        "int8": lambda ui: str(f64_to_int8(ui)),
        "uint8": lambda ui: str(f64_to_uint8(ui)),
        "int16": lambda ui: str(f64_to_int16(ui)),
        "uint16": lambda ui: str(f64_to_uint16(ui)),
        "int32": lambda ui: str(converter.f64_to_int32(ui)),
        "uint32": lambda ui: str(f64_to_uint32(ui)),
        "int64": lambda ui: str(f64_to_int64(ui)),
        "uint64": lambda ui: str(f64_to_uint64(ui)),
        "integer": _format_integer,
    }


def parse_value(text: str, as_bits: bool) -> int:
    """Turn a command-line VALUE into a float64 bit pattern."""
    if as_bits:
        digits = text[2:] if text.lower().startswith("0x") else text
        try:
            ui = int(digits, 16)
        except ValueError:
            raise NumconvError("invalid bit pattern '" + text + "'") from None
        return check_bits(ui)
    try:
        d = float(text)
    except ValueError:
        raise NumconvError("invalid value '" + text + "'") from None
    return f64_bits(d)


def format_line(
    text: str, ui: int, ops: list[str], table: dict[str, Callable[[int], str]]
) -> str:
    parts: list[str] = []
    for op in ops:
        parts.append(op + "=" + table[op](ui))
    return text + ": " + " ".join(parts)


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    values: list[str] = []
    ops: list[str] = []
    as_bits = False
    strategy_name = "generic"
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--bits":
            as_bits = True
            i += 1
        elif arg == "--op":
            if i + 1 >= len(args):
                print("numconv: --op requires an argument", file=sys.stderr)
                return 2
            op = args[i + 1]
            if op not in OPS:
                print("numconv: unknown op '" + op + "'", file=sys.stderr)
                return 2
            ops.append(op)
            i += 2
        elif arg == "--int32-strategy":
            if i + 1 >= len(args):
                print(
                    "numconv: --int32-strategy requires an argument", file=sys.stderr
                )
                return 2
            strategy_name = args[i + 1]
            i += 2
        elif arg == "--":
            values.extend(args[i + 1 :])
            break
        elif arg.startswith("-") and not _looks_numeric(arg):
            print("numconv: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        else:
            values.append(arg)
            i += 1
    if len(values) == 0:
        print("numconv: missing VALUE argument", file=sys.stderr)
        return 2
    try:
        converter = Converter(int32=get_int32_strategy(strategy_name))
    except NumconvError as e:
        print("numconv: " + str(e), file=sys.stderr)
        return 2
    if len(ops) == 0:
        ops = OPS
    table = op_table(converter)
    status = 0
    for text in values:
        try:
            ui = parse_value(text, as_bits)
        except NumconvError as e:
            print("numconv: " + str(e), file=sys.stderr)
            status = 1
            continue
        print(format_line(text, ui, ops, table))
    return status


def _looks_numeric(arg: str) -> bool:
    """Negative numbers such as -1.5 or -inf are values, not flags."""
    body = arg[1:]
    if body == "":
        return False
    if body[0].isdigit() or body[0] == ".":
        return True
    return body.lower() in ("inf", "infinity", "nan")


if __name__ == "__main__":
    sys.exit(main())
