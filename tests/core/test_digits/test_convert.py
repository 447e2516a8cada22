"""Tests for src/mpz/digits/convert.py: char and int conversions."""

import numpy as np
import pytest

from src.mpz.digits.config import KernelConfig
from src.mpz.digits.convert import (
    char_to_digit,
    char_to_digit_checked,
    digit_from_char,
    digit_to_char,
    digits_from_int,
    digits_to_int,
    validate_digits,
)
from src.mpz.digits.errors import (
    DigitOverflowError,
    DigitRangeError,
    InvalidDigitCharError,
    RadixError,
)
from src.mpz.digits.multiply import long_multiplication


# ---------------------------------------------------------------------------
# Single characters
# ---------------------------------------------------------------------------

class TestCharConversion:
    def test_round_trip_decimal(self):
        for c in "0123456789":
            assert digit_to_char(char_to_digit(c)) == c

    def test_digit_to_char(self):
        assert digit_to_char(0) == "0"
        assert digit_to_char(9) == "9"

    def test_alias(self):
        assert digit_from_char is char_to_digit

    @pytest.mark.parametrize("c", ["a", "/", ":", " ", "", "12", "Z"])
    def test_lenient_default_maps_to_zero(self, c):
        assert char_to_digit(c) == 0

    def test_strict_raises(self):
        with pytest.raises(InvalidDigitCharError, match="'x'"):
            char_to_digit("x", strict=True)

    def test_strict_error_is_value_error(self):
        with pytest.raises(ValueError):
            char_to_digit(":", strict=True)

    def test_hex(self):
        assert char_to_digit("f", radix=16) == 15
        assert char_to_digit("F", radix=16) == 15
        assert digit_to_char(15, radix=16) == "f"

    def test_base36_limit(self):
        assert char_to_digit("z", radix=36) == 35
        with pytest.raises(ValueError, match="radix <= 36"):
            char_to_digit("0", radix=37)

    def test_digit_to_char_out_of_range(self):
        with pytest.raises(DigitRangeError):
            digit_to_char(10)
        with pytest.raises(DigitRangeError):
            digit_to_char(-1)

    def test_digit_to_char_numpy_product_digits(self):
        product = np.zeros(4, dtype=np.int64)
        long_multiplication(product, np.array([3, 0]), np.array([2, 0]), 2)
        assert isinstance(product[0], np.integer)
        assert "".join(digit_to_char(d) for d in product[::-1]) == "0006"

    def test_digit_to_char_numpy_scalars(self):
        assert digit_to_char(np.uint8(15), radix=16) == "f"
        with pytest.raises(DigitRangeError):
            digit_to_char(np.int64(10))
        with pytest.raises(DigitRangeError):
            digit_to_char(np.bool_(True))
        with pytest.raises(DigitRangeError):
            digit_to_char(True)

    def test_non_str_rejected(self):
        with pytest.raises(TypeError):
            char_to_digit(5)  # type: ignore[arg-type]

    def test_checked_uses_config(self):
        assert char_to_digit_checked("?") == 0
        with pytest.raises(InvalidDigitCharError):
            char_to_digit_checked("?", KernelConfig(strict_chars=True))
        assert char_to_digit_checked("7", KernelConfig(radix=8, strict_chars=True)) == 7
        with pytest.raises(InvalidDigitCharError):
            char_to_digit_checked("8", KernelConfig(radix=8, strict_chars=True))


# ---------------------------------------------------------------------------
# validate_digits
# ---------------------------------------------------------------------------

class TestValidateDigits:
    def test_valid(self):
        validate_digits([0, 9, 5], 3)

    def test_reports_index(self):
        with pytest.raises(DigitRangeError, match="at index 2") as exc:
            validate_digits([0, 9, 10], 3)
        assert exc.value.index == 2
        assert exc.value.value == 10

    def test_ignores_past_length(self):
        validate_digits([1, 2, 99], 2)

    def test_negative_digit(self):
        with pytest.raises(DigitRangeError):
            validate_digits([-1], 1)

    def test_bool_is_not_a_digit(self):
        with pytest.raises(DigitRangeError):
            validate_digits([True], 1)

    def test_bad_radix(self):
        with pytest.raises(RadixError):
            validate_digits([0], 1, radix=1)

    def test_numpy_array(self):
        validate_digits(np.array([1, 2]), 2)
        validate_digits(np.array([0, 15], dtype=np.uint8), 2, radix=16)

    def test_numpy_out_of_range_reports_index(self):
        with pytest.raises(DigitRangeError, match="at index 1") as exc:
            validate_digits(np.array([1, 12, 3]), 3)
        assert exc.value.index == 1

    def test_numpy_bool_array_rejected(self):
        with pytest.raises(DigitRangeError):
            validate_digits(np.array([True, False]), 2)


# ---------------------------------------------------------------------------
# Int conversion
# ---------------------------------------------------------------------------

class TestIntConversion:
    def test_little_endian(self):
        assert digits_from_int(1234, 6) == [4, 3, 2, 1, 0, 0]

    def test_to_int(self):
        assert digits_to_int([4, 3, 2, 1, 0, 0], 6) == 1234

    def test_to_int_prefix(self):
        assert digits_to_int([4, 3, 2, 1], 2) == 34

    def test_zero_width_zero(self):
        assert digits_from_int(0, 0) == []

    def test_overflow(self):
        with pytest.raises(DigitOverflowError, match="does not fit"):
            digits_from_int(1000, 3)

    def test_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            digits_from_int(-1, 3)

    def test_binary(self):
        assert digits_from_int(6, 4, radix=2) == [0, 1, 1, 0]
