"""Carry-producing single-digit operations.

`clip` is the only place where radix reduction happens; `add` and `mult`
build an accumulator and hand it to `clip`.

e.g. with radix 10 and no carry in:

    mult(3, 5) == (5, 1)     # 3 x 5 = 15
    add(9, 9, 1) == (9, 1)   # 9 + 9 + 1 = 19
"""

from __future__ import annotations

from .errors import AccumulatorError
from .types import RADIX, DigitCarry


def clip(value: int, *, radix: int = RADIX) -> DigitCarry:
    """Split a non-negative accumulator into `(value mod radix, value div radix)`."""
    if value < 0:
        raise AccumulatorError(f"accumulator must be non-negative, got {value}")
    carry, digit = divmod(value, radix)
    return DigitCarry(digit, carry)


def add(a: int, b: int, carry: int = 0, *, radix: int = RADIX) -> DigitCarry:
    """`a + b + carry`, reduced to a digit and the carry out."""
    return clip(a + b + carry, radix=radix)


def mult(a: int, b: int, carry: int = 0, *, radix: int = RADIX) -> DigitCarry:
    """`a * b + carry`, reduced to a digit and the carry out.

    For digits of `radix` the carry out is always below `radix`, since
    `(R-1)*(R-1) + (R-1) < R*R`.
    """
    return clip(a * b + carry, radix=radix)
