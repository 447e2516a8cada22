"""Tests for src/mpz/digits/arrays.py: add, complement, zero predicate."""

import pytest

from src.mpz.digits.arrays import digits_add, digits_complement, digits_is_zero
from src.mpz.digits.convert import digits_from_int, digits_to_int
from src.mpz.digits.errors import OperandLengthError, RadixError


# ---------------------------------------------------------------------------
# digits_is_zero
# ---------------------------------------------------------------------------

class TestIsZero:
    def test_all_zero(self):
        assert digits_is_zero([0, 0, 0], 3) is True

    def test_empty_is_vacuously_zero(self):
        assert digits_is_zero([], 0) is True

    def test_only_last_digit_nonzero(self):
        assert digits_is_zero([0, 0, 0, 1], 4) is False

    def test_only_first_digit_nonzero(self):
        assert digits_is_zero([1, 0, 0], 3) is False

    def test_ignores_digits_past_length(self):
        assert digits_is_zero([0, 0, 5], 2) is True

    def test_offset(self):
        assert digits_is_zero([5, 0, 0], 2, offset=1) is True

    def test_short_buffer_rejected(self):
        with pytest.raises(OperandLengthError):
            digits_is_zero([0], 2)


# ---------------------------------------------------------------------------
# digits_add
# ---------------------------------------------------------------------------

class TestAdd:
    def test_equal_lengths(self):
        out = [0, 0, 0]
        # 123 + 456 = 579
        assert digits_add(out, 3, [3, 2, 1], 3, [6, 5, 4], 3) == 0
        assert out == [9, 7, 5]

    def test_carry_out_when_sum_overflows(self):
        out = [0, 0]
        # 99 + 1 = 100 -> two digits hold 00, carry 1
        assert digits_add(out, 2, [9, 9], 2, [1], 1) == 1
        assert out == [0, 0]

    def test_wider_sum_holds_carry(self):
        out = [0, 0, 0]
        assert digits_add(out, 3, [9, 9], 2, [1], 1) == 0
        assert out == [0, 0, 1]

    def test_shorter_operands_zero_padded(self):
        out = [7, 7, 7, 7]
        assert digits_add(out, 4, [5], 1, [5, 4], 2) == 0
        assert out == [0, 5, 0, 0]

    def test_sum_narrower_than_operands_truncates(self):
        out = [0]
        # Only position 0 is computed: 5 + 7 = 12 -> digit 2, carry 1.
        carry = digits_add(out, 1, [5, 1], 2, [7, 1], 2)
        assert out == [2]
        assert carry == 1

    def test_zero_length_sum(self):
        assert digits_add([], 0, [1], 1, [2], 1) == 0

    def test_in_place_on_operand(self):
        acc = [9, 9, 0]
        assert digits_add(acc, 3, acc, 3, [2], 1) == 0
        assert acc == [1, 0, 1]

    def test_hex(self):
        out = [0, 0]
        assert digits_add(out, 2, [0xF, 0xF], 2, [0x1], 1, radix=16) == 1
        assert out == [0, 0]

    def test_short_operand_rejected(self):
        with pytest.raises(OperandLengthError, match="op1"):
            digits_add([0, 0], 2, [1], 2, [1], 1)

    @pytest.mark.parametrize(
        "x,y,width",
        [(0, 0, 1), (5, 4, 1), (5, 5, 1), (499, 500, 3), (500, 500, 3), (999, 999, 3)],
    )
    def test_carry_iff_sum_reaches_radix_power(self, x, y, width):
        out = [0] * width
        carry = digits_add(
            out, width, digits_from_int(x, width), width, digits_from_int(y, width), width
        )
        assert carry == (1 if x + y >= 10**width else 0)
        assert digits_to_int(out, width) == (x + y) % 10**width


# ---------------------------------------------------------------------------
# digits_complement
# ---------------------------------------------------------------------------

class TestComplement:
    def test_ten_complement_of_32(self):
        digits = [2, 3]
        assert digits_complement(digits, 2) == 0
        # (9-2, 9-3) = (7, 6), +1 -> 68; 32 + 68 = 100
        assert digits == [8, 6]

    def test_docstring_example(self):
        digits = digits_from_int(239487, 6)
        digits_complement(digits, 6)
        assert digits_to_int(digits, 6) == 760513

    def test_zero_is_fixed_point(self):
        digits = [0, 0, 0]
        assert digits_complement(digits, 3) == 1
        assert digits == [0, 0, 0]

    def test_double_complement_is_identity(self):
        original = [1, 0, 4, 9]
        digits = list(original)
        digits_complement(digits, 4)
        digits_complement(digits, 4)
        assert digits == original

    def test_binary_twos_complement(self):
        # 0b0110 (6) -> 0b1010 (10)
        digits = [0, 1, 1, 0]
        digits_complement(digits, 4, radix=2)
        assert digits == [0, 1, 0, 1]

    def test_only_span_is_touched(self):
        digits = [2, 3, 5]
        digits_complement(digits, 2)
        assert digits == [8, 6, 5]

    def test_subtraction_by_complement_and_add(self):
        # 532 - 174 = 358 using a 3-digit residue system.
        minuend = digits_from_int(532, 3)
        subtrahend = digits_from_int(174, 3)
        digits_complement(subtrahend, 3)
        out = [0, 0, 0]
        carry = digits_add(out, 3, minuend, 3, subtrahend, 3)
        assert digits_to_int(out, 3) == 358
        # Carry out signals a non-negative difference.
        assert carry == 1

    def test_empty(self):
        digits: list[int] = []
        assert digits_complement(digits, 0) == 1
        assert digits == []


# ---------------------------------------------------------------------------
# Radix checks
# ---------------------------------------------------------------------------

class TestBadRadix:
    @pytest.mark.parametrize("radix", [0, 1, -10])
    def test_add_leaves_sum_untouched(self, radix):
        out = [5]
        with pytest.raises(RadixError):
            digits_add(out, 1, [3], 1, [4], 1, radix=radix)
        assert out == [5]

    @pytest.mark.parametrize("radix", [0, 1])
    def test_complement_leaves_digits_untouched(self, radix):
        digits = [2, 3]
        with pytest.raises(RadixError):
            digits_complement(digits, 2, radix=radix)
        assert digits == [2, 3]

    def test_non_int_radix(self):
        out = [0]
        with pytest.raises(RadixError):
            digits_add(out, 1, [3], 1, [4], 1, radix=10.0)  # type: ignore[arg-type]
