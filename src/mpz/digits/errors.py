"""Exception types for the `digits` kernel.

Truncation is not an error here: an operation whose result does not fit its
destination returns the residual carry instead of raising. These exceptions
cover malformed inputs only.
"""

from __future__ import annotations


class DigitKernelError(Exception):
    """Base class for every error raised by the kernel."""


class RadixError(DigitKernelError, ValueError):
    """Raised when a radix is not an int >= 2."""


class DigitRangeError(DigitKernelError, ValueError):
    """Raised when a value is not a digit of the active radix."""

    def __init__(self, value: object, radix: int, index: int | None = None) -> None:
        self.value = value
        self.radix = radix
        self.index = index
        where = "" if index is None else f" at index {index}"
        super().__init__(f"digit out of range{where}: {value!r} (radix {radix})")


class InvalidDigitCharError(DigitKernelError, ValueError):
    """Raised by strict decoding when a character is not a digit."""

    def __init__(self, char: str, radix: int) -> None:
        self.char = char
        self.radix = radix
        super().__init__(f"invalid digit character {char!r} for radix {radix}")


class OperandLengthError(DigitKernelError, ValueError):
    """Raised when a buffer is shorter than its declared digit count."""


class DigitOverflowError(DigitKernelError, OverflowError):
    """Raised when an integer needs more digits than were requested."""


class UnknownStrategyError(DigitKernelError, KeyError):
    """Raised when a multiply strategy name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown multiply strategy: {self.name}"


class AccumulatorError(DigitKernelError, ValueError):
    """Raised when a negative accumulator reaches radix reduction."""
