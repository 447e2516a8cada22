"""Array-level addition, radix complement, and the zero predicate.

Destinations are written in place and never grow. When a result needs more
digits than the destination span, the high part is dropped and the carry out
is returned to the caller.
"""

from __future__ import annotations

from .propagate import digits_add_across
from .scalar import add
from .types import RADIX, DigitArray, DigitView, check_radix, check_span


def digits_is_zero(digits: DigitView, num_digits: int, *, offset: int = 0) -> bool:
    """True when every digit in the span is zero (vacuously true for an empty span)."""
    check_span("digits", digits, num_digits, offset=offset)
    for i in range(offset, offset + num_digits):
        if digits[i] != 0:
            return False
    return True


def digits_add(
    sum_digits: DigitArray,
    sum_num_digits: int,
    op1: DigitView,
    op1_num_digits: int,
    op2: DigitView,
    op2_num_digits: int,
    *,
    radix: int = RADIX,
) -> int:
    """Compute `sum = op1 + op2` over exactly `sum_num_digits` digits.

    Operands shorter than the sum read as zero-padded on the high end.
    Returns the carry out of the top digit (0 if the sum fits).

    `sum_digits` may alias either operand: position `i` is read before it is
    written.
    """
    check_radix(radix)
    check_span("sum", sum_digits, sum_num_digits)
    check_span("op1", op1, op1_num_digits)
    check_span("op2", op2, op2_num_digits)

    carry = 0
    for i in range(sum_num_digits):
        a = op1[i] if i < op1_num_digits else 0
        b = op2[i] if i < op2_num_digits else 0
        sum_digits[i], carry = add(a, b, carry, radix=radix)
    return carry


def digits_complement(digits: DigitArray, num_digits: int, *, radix: int = RADIX) -> int:
    """Replace the span with its radix complement, in place.

    e.g. with radix 10:

        239487 -> 760512 + 1 -> 760513

    Returns the carry out of the final `+1`, which is 1 only when the input
    was all zeros (the complement of zero is zero).
    """
    check_radix(radix)
    check_span("digits", digits, num_digits)

    top = radix - 1
    for i in range(num_digits):
        digits[i] = top - digits[i]
    return digits_add_across(digits, num_digits, 1, radix=radix)
