"""Pytest configuration for the numconv test suite."""

import random
import sys
from pathlib import Path

import pytest

# Make the numconv package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

SEED = 0xF64

# Exponents likely to trigger edge cases
SPECIAL_EXPS = [
    0x000,  # subnormal / zero
    0x001,  # smallest normal
    0x3FE,  # 0.5 .. 1.0
    0x3FF,  # 1.0 .. 2.0
    0x400,
    0x406,  # 2^7 .. 2^8
    0x40E,  # 2^15 .. 2^16
    0x41E,  # 2^31 .. 2^32
    0x41F,  # 2^32 .. 2^33
    0x432,  # near int53 boundary
    0x433,  # 2^52 (ULP = 1)
    0x434,  # 2^53 (ULP = 2)
    0x43E,  # 2^63 .. 2^64
    0x43F,  # 2^64 .. 2^65
    0x452,  # 2^83: last exponent with bits below 2^32
    0x453,  # 2^84
    0x472,  # 2^115: last exponent with bits below 2^64
    0x473,  # 2^116
    0x7FE,  # largest finite
    0x7FF,  # inf / NaN
]

# Significands likely to trigger edge cases
SPECIAL_SIGS = [
    0x0000000000000,  # zero
    0x0000000000001,  # smallest
    0x8000000000000,  # half
    0xFFFFFFFFFFFFF,  # max
    0x00000FFFFFFFF,  # low word all ones
    0xFFFFF00000000,  # high word all ones
    0x0000080000000,  # bit 31
    0x0000100000000,  # bit 32
]


def weighted_f64(rng: random.Random) -> int:
    """Generate a float64 bit pattern weighted toward boundary cases."""
    r: int = rng.randint(0, 99)
    if r < 30:
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    elif r < 50:
        exp = rng.randint(0, 0x7FF)
        sig = rng.choice(SPECIAL_SIGS)
    elif r < 60:
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.choice(SPECIAL_SIGS)
    else:
        exp = rng.randint(0, 0x7FF)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    sign = rng.randint(0, 1)
    return (sign << 63) | (exp << 52) | sig


def pytest_addoption(parser):
    """Add --rounds option."""
    parser.addoption(
        "--rounds",
        type=int,
        default=100_000,
        help="Random bit patterns per fuzz test",
    )


@pytest.fixture
def rounds(request) -> int:
    return request.config.getoption("rounds")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)
