"""
Multiple-precision integer building blocks
"""

from .digits import (
    RADIX,
    DigitCarry,
    KernelConfig,
    add,
    char_to_digit,
    clip,
    digit_to_char,
    digits_add,
    digits_add_across,
    digits_complement,
    digits_is_zero,
    digits_mult,
    long_multiplication,
    mult,
)

__all__ = [
    "RADIX",
    "DigitCarry",
    "KernelConfig",
    "clip",
    "add",
    "mult",
    "digits_add_across",
    "digits_add",
    "digits_complement",
    "digits_is_zero",
    "long_multiplication",
    "digits_mult",
    "digit_to_char",
    "char_to_digit",
]
