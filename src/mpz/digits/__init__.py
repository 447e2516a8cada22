"""`digits`: fixed-radix digit-array arithmetic kernel.

A digit array is a mutable little-endian sequence of ints in `[0, radix)`
whose length is always supplied by the caller. Every operation is a pure
transformation over caller-owned buffers:

- no allocation of result storage, no resizing,
- overflow past the destination is truncated and returned as a carry,
- digit values are not range-checked on the hot path (see `validate_digits`).

Public API:
- scalar: `clip`, `add`, `mult`
- propagation: `digits_add_across`, `CarryResolver` and its two drivers
- arrays: `digits_add`, `digits_complement`, `digits_is_zero`
- multiply: `long_multiplication`, `digits_mult`, `MultiplyStrategy` registry
- conversion: `digit_to_char`, `char_to_digit`, `digits_from_int`, `digits_to_int`
"""

from .arrays import digits_add, digits_complement, digits_is_zero
from .config import DEFAULT_CONFIG, KernelConfig, config_from_env
from .convert import (
    char_to_digit,
    char_to_digit_checked,
    digit_from_char,
    digit_to_char,
    digits_from_int,
    digits_to_int,
    validate_digits,
)
from .errors import (
    AccumulatorError,
    DigitKernelError,
    DigitOverflowError,
    DigitRangeError,
    InvalidDigitCharError,
    OperandLengthError,
    RadixError,
    UnknownStrategyError,
)
from .multiply import (
    ColumnMultiplication,
    GradeSchoolMultiplication,
    KaratsubaMultiplication,
    MultiplyStrategy,
    available_strategies,
    digits_mult,
    get_strategy,
    long_multiplication,
    register_strategy,
    select_strategy,
)
from .parallel import column_multiplication, column_products
from .propagate import CarryResolver, ColumnCarryResolver, SequentialCarryResolver, digits_add_across
from .scalar import add, clip, mult
from .types import DIGIT_BASE, RADIX, Digit, DigitArray, DigitCarry

__all__ = [
    "RADIX",
    "DIGIT_BASE",
    "Digit",
    "DigitArray",
    "DigitCarry",
    "clip",
    "add",
    "mult",
    "digits_add_across",
    "CarryResolver",
    "SequentialCarryResolver",
    "ColumnCarryResolver",
    "digits_add",
    "digits_complement",
    "digits_is_zero",
    "long_multiplication",
    "digits_mult",
    "column_multiplication",
    "column_products",
    "MultiplyStrategy",
    "GradeSchoolMultiplication",
    "ColumnMultiplication",
    "KaratsubaMultiplication",
    "register_strategy",
    "get_strategy",
    "available_strategies",
    "select_strategy",
    "digit_to_char",
    "char_to_digit",
    "digit_from_char",
    "char_to_digit_checked",
    "validate_digits",
    "digits_from_int",
    "digits_to_int",
    "KernelConfig",
    "DEFAULT_CONFIG",
    "config_from_env",
    "DigitKernelError",
    "AccumulatorError",
    "RadixError",
    "DigitRangeError",
    "InvalidDigitCharError",
    "OperandLengthError",
    "DigitOverflowError",
    "UnknownStrategyError",
]
