"""Conversions between digits and characters / Python ints.

Character mapping uses `0-9` then `a-z`, so it covers radixes up to 36.

`char_to_digit` keeps the lenient policy of the decimal kernel it replaces:
a character outside the alphabet decodes to 0. Pass `strict=True` (or use
`char_to_digit_checked` with a strict `KernelConfig`) to get
`InvalidDigitCharError` instead.
"""

from __future__ import annotations

import numbers
from typing import Optional

from .config import DEFAULT_CONFIG, KernelConfig
from .errors import DigitOverflowError, DigitRangeError, InvalidDigitCharError
from .types import RADIX, DigitView, check_radix, check_span

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
MAX_CHAR_RADIX = len(_ALPHABET)


def _is_digit(d, radix: int) -> bool:
    # numpy integer scalars count; bools (Python or numpy) do not.
    return isinstance(d, numbers.Integral) and not isinstance(d, bool) and 0 <= d < radix


def _require_char_radix(radix: int) -> None:
    check_radix(radix)
    if radix > MAX_CHAR_RADIX:
        raise ValueError(f"character mapping supports radix <= {MAX_CHAR_RADIX}, got {radix}")


def digit_to_char(d: int, *, radix: int = RADIX) -> str:
    _require_char_radix(radix)
    if not _is_digit(d, radix):
        raise DigitRangeError(d, radix)
    return _ALPHABET[int(d)]


def char_to_digit(c: str, *, radix: int = RADIX, strict: bool = False) -> int:
    """Decode one character. Unknown characters give 0 unless `strict`."""
    _require_char_radix(radix)
    if not isinstance(c, str):
        raise TypeError("c must be a str")
    d = _ALPHABET.find(c.lower()) if len(c) == 1 else -1
    if 0 <= d < radix:
        return d
    if strict:
        raise InvalidDigitCharError(c, radix)
    return 0


digit_from_char = char_to_digit


def char_to_digit_checked(c: str, config: Optional[KernelConfig] = None) -> int:
    """`char_to_digit` with radix and strictness taken from `config`."""
    cfg = config if config is not None else DEFAULT_CONFIG
    return char_to_digit(c, radix=cfg.radix, strict=cfg.strict_chars)


def validate_digits(digits: DigitView, num_digits: int, *, radix: int = RADIX, offset: int = 0) -> None:
    """Raise `DigitRangeError` at the first element of the span that is not a digit.

    The arithmetic entry points assume valid digits and do not call this.
    """
    check_radix(radix)
    check_span("digits", digits, num_digits, offset=offset)
    for i in range(offset, offset + num_digits):
        d = digits[i]
        if not _is_digit(d, radix):
            raise DigitRangeError(d, radix, index=i)


def digits_from_int(value: int, num_digits: int, *, radix: int = RADIX) -> list[int]:
    """Little-endian digits of a non-negative `value`, zero-padded to `num_digits`."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("value must be an int")
    if value < 0:
        raise ValueError("value must be non-negative")
    check_radix(radix)
    if num_digits < 0:
        raise ValueError("num_digits must be non-negative")

    out = [0] * num_digits
    v = value
    for i in range(num_digits):
        if v == 0:
            break
        v, out[i] = divmod(v, radix)
    if v != 0:
        raise DigitOverflowError(f"{value} does not fit in {num_digits} radix-{radix} digits")
    return out


def digits_to_int(digits: DigitView, num_digits: int, *, radix: int = RADIX) -> int:
    check_span("digits", digits, num_digits)
    value = 0
    for i in range(num_digits - 1, -1, -1):
        value = value * radix + digits[i]
    return value
