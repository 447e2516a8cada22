"""Digit and radix model for the `digits` kernel.

Units/conventions:
- a *digit* is a plain `int` in `[0, RADIX)`; one digit per list element
  (never bit-packed).
- a *digit array* is little-endian: index 0 is the least-significant digit.
- arrays carry no length or sign; `num_digits` always travels with the array.
"""

from __future__ import annotations

from typing import MutableSequence, NamedTuple, Sequence

from .errors import OperandLengthError, RadixError

Digit = int
DigitArray = MutableSequence[int]
DigitView = Sequence[int]

RADIX: int = 10
DIGIT_BASE: int = RADIX


class DigitCarry(NamedTuple):
    """Result of a carry-producing scalar op."""

    digit: int
    carry: int


def check_radix(radix: int) -> int:
    if not isinstance(radix, int) or isinstance(radix, bool):
        raise RadixError("radix must be an int")
    if radix < 2:
        raise RadixError(f"radix must be >= 2, got {radix}")
    return radix


def check_span(name: str, digits: DigitView, num_digits: int, *, offset: int = 0) -> None:
    """Require `digits[offset:offset + num_digits]` to exist."""
    if not isinstance(num_digits, int) or isinstance(num_digits, bool):
        raise TypeError(f"{name} digit count must be an int")
    if num_digits < 0:
        raise OperandLengthError(f"{name} digit count must be non-negative, got {num_digits}")
    if offset < 0:
        raise OperandLengthError(f"{name} offset must be non-negative, got {offset}")
    if offset + num_digits > len(digits):
        raise OperandLengthError(
            f"{name} holds {len(digits)} digits, needs {offset + num_digits}"
        )
