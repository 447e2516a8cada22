"""Carry propagation through a digit array.

Carry is always applied in index order, low digit to high digit. This is the
one ordering constraint in the kernel: everything else (independent additions,
the digit-pair products of a multiplication) can be computed in any order.

Carry resolution sits behind `CarryResolver` so the sequential driver (one
`digits_add_across` per partial product) and the column driver (one deferred
pass over accumulated columns) can be swapped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .scalar import add, clip
from .types import RADIX, DigitArray, check_radix, check_span


def digits_add_across(
    digits: DigitArray,
    num_digits: int,
    extra: int,
    *,
    offset: int = 0,
    radix: int = RADIX,
) -> int:
    """Add `extra` into `digits[offset:offset + num_digits]`, rippling the carry.

    Stops as soon as the carry is zero; digits past that point are left
    untouched. Returns the carry remaining after the last position (non-zero
    means the sum overflowed the span).
    """
    check_radix(radix)
    check_span("digits", digits, num_digits, offset=offset)

    carry = extra
    i = 0
    while carry != 0 and i < num_digits:
        digits[offset + i], carry = add(digits[offset + i], 0, carry, radix=radix)
        i += 1
    return carry


class CarryResolver(ABC):
    """Turns pending carries into digits, always low to high."""

    name: str = ""

    def resolve(
        self,
        digits: DigitArray,
        num_digits: int,
        extra: int,
        *,
        offset: int = 0,
        radix: int = RADIX,
    ) -> int:
        """Add one value at `offset` and propagate it. Returns the carry out."""
        return digits_add_across(digits, num_digits, extra, offset=offset, radix=radix)

    @abstractmethod
    def resolve_columns(
        self,
        columns: Sequence[int],
        out: DigitArray,
        num_digits: int,
        *,
        radix: int = RADIX,
    ) -> int:
        """Write `sum(columns[k] * radix**k)` into `out[:num_digits]`.

        Columns may hold values of any non-negative size; positions past
        `len(columns)` count as zero. Returns the carry past `num_digits`.
        """


class SequentialCarryResolver(CarryResolver):
    """One early-exit `digits_add_across` per column."""

    name = "sequential"

    def resolve_columns(
        self,
        columns: Sequence[int],
        out: DigitArray,
        num_digits: int,
        *,
        radix: int = RADIX,
    ) -> int:
        check_radix(radix)
        check_span("out", out, num_digits)
        for k in range(num_digits):
            out[k] = 0

        overflow = 0
        for k in range(min(len(columns), num_digits)):
            overflow += digits_add_across(out, num_digits - k, int(columns[k]), offset=k, radix=radix)
        for k in range(num_digits, len(columns)):
            # Columns entirely past the span only feed the overflow.
            overflow += int(columns[k]) * radix ** (k - num_digits)
        return overflow


class ColumnCarryResolver(CarryResolver):
    """A single deferred pass: `out[k], carry = clip(columns[k] + carry)`."""

    name = "column"

    def resolve_columns(
        self,
        columns: Sequence[int],
        out: DigitArray,
        num_digits: int,
        *,
        radix: int = RADIX,
    ) -> int:
        check_radix(radix)
        check_span("out", out, num_digits)
        carry = 0
        for k in range(num_digits):
            value = int(columns[k]) if k < len(columns) else 0
            out[k], carry = clip(value + carry, radix=radix)
        scale = 1
        for k in range(num_digits, len(columns)):
            carry += int(columns[k]) * scale
            scale *= radix
        return carry
