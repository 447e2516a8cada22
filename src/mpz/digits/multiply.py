"""Digit-array multiplication.

`digits_mult()` is the public entry point. It dispatches to a
`MultiplyStrategy`; every strategy honours the same caller contract:

- `op1` and `op2` hold (at least) `num_digits` digits each,
- `product` has room for `2 * num_digits` digits and is overwritten,
- nothing is returned; `2n` digits always hold the full product.

Built-in strategies:

- `grade_school`: schoolbook O(n^2), carry propagated after every digit pair.
- `column`: the same products mapped all at once, carries resolved in one
  deferred pass (see `parallel.py`).
- `karatsuba`: reserved slot for a divide-and-conquer variant; not implemented.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from .config import DEFAULT_CONFIG, KernelConfig
from .errors import UnknownStrategyError
from .parallel import column_multiplication
from .propagate import CarryResolver, SequentialCarryResolver
from .scalar import mult
from .types import RADIX, DigitArray, DigitView, check_radix, check_span

logger = logging.getLogger(__name__)

_SEQUENTIAL = SequentialCarryResolver()


def check_mult_operands(product: DigitView, op1: DigitView, op2: DigitView, num_digits: int) -> None:
    check_span("op1", op1, num_digits)
    check_span("op2", op2, num_digits)
    check_span("product", product, 2 * num_digits)


def long_multiplication(
    product: DigitArray,
    op1: DigitView,
    op2: DigitView,
    num_digits: int,
    *,
    radix: int = RADIX,
    resolver: Optional[CarryResolver] = None,
) -> None:
    """Compute `product = op1 * op2` with grade-school multiplication.

    For each digit pair `(i, j)` the product digit is added at `i + j` and its
    carry at `i + j + 1`, each propagated through the rest of `product`.
    """
    check_radix(radix)
    check_mult_operands(product, op1, op2, num_digits)
    if resolver is None:
        resolver = _SEQUENTIAL

    width = 2 * num_digits
    for k in range(width):
        product[k] = 0

    for i in range(num_digits):
        for j in range(num_digits):
            k = i + j
            prod, carry = mult(op2[i], op1[j], radix=radix)
            resolver.resolve(product, width - k, prod, offset=k, radix=radix)
            resolver.resolve(product, width - k - 1, carry, offset=k + 1, radix=radix)


class MultiplyStrategy(ABC):
    """A way to fill `product` with `op1 * op2` (see module docstring)."""

    name: str = ""

    @abstractmethod
    def multiply(
        self,
        product: DigitArray,
        op1: DigitView,
        op2: DigitView,
        num_digits: int,
        *,
        radix: int = RADIX,
    ) -> None:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class GradeSchoolMultiplication(MultiplyStrategy):
    name = "grade_school"

    def __init__(self, resolver: Optional[CarryResolver] = None) -> None:
        self.resolver = resolver if resolver is not None else _SEQUENTIAL

    def multiply(self, product, op1, op2, num_digits, *, radix=RADIX) -> None:
        long_multiplication(product, op1, op2, num_digits, radix=radix, resolver=self.resolver)


class ColumnMultiplication(MultiplyStrategy):
    name = "column"

    def __init__(self, resolver: Optional[CarryResolver] = None) -> None:
        self.resolver = resolver

    def multiply(self, product, op1, op2, num_digits, *, radix=RADIX) -> None:
        column_multiplication(product, op1, op2, num_digits, radix=radix, resolver=self.resolver)


class KaratsubaMultiplication(MultiplyStrategy):
    """Divide-and-conquer O(n^1.585) slot.

    Register a working implementation under the same name to enable it;
    `digits_mult()` callers need no changes.
    """

    name = "karatsuba"

    def multiply(self, product, op1, op2, num_digits, *, radix=RADIX) -> None:
        raise NotImplementedError("karatsuba multiplication is not implemented")


_STRATEGIES: dict[str, MultiplyStrategy] = {}


def register_strategy(strategy: MultiplyStrategy) -> MultiplyStrategy:
    """Register (or replace) a strategy under `strategy.name`."""
    if not isinstance(strategy, MultiplyStrategy):
        raise TypeError("strategy must be a MultiplyStrategy")
    if not strategy.name:
        raise ValueError("strategy must have a non-empty name")
    previous = _STRATEGIES.get(strategy.name)
    if previous is not None and previous is not strategy:
        logger.debug("replacing multiply strategy %r: %r -> %r", strategy.name, previous, strategy)
    _STRATEGIES[strategy.name] = strategy
    return strategy


def get_strategy(name: str) -> MultiplyStrategy:
    try:
        return _STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(name) from None


def available_strategies() -> tuple[str, ...]:
    return tuple(sorted(_STRATEGIES))


for _builtin in (GradeSchoolMultiplication(), ColumnMultiplication(), KaratsubaMultiplication()):
    register_strategy(_builtin)
del _builtin


def select_strategy(num_digits: int, config: Optional[KernelConfig] = None) -> MultiplyStrategy:
    """Pick the strategy for an `num_digits`-digit multiply under `config`."""
    cfg = config if config is not None else DEFAULT_CONFIG
    threshold = cfg.fast_multiply_threshold
    if threshold > 0 and num_digits >= threshold:
        logger.debug(
            "num_digits=%d >= %d, using %r", num_digits, threshold, cfg.fast_multiply_strategy
        )
        return get_strategy(cfg.fast_multiply_strategy)
    return get_strategy(cfg.multiply_strategy)


def digits_mult(
    product: DigitArray,
    op1: DigitView,
    op2: DigitView,
    num_digits: int,
    *,
    radix: Optional[int] = None,
    strategy: Union[MultiplyStrategy, str, None] = None,
    config: Optional[KernelConfig] = None,
) -> None:
    """Compute `product = op1 * op2`.

    `op1` and `op2` must hold `num_digits` digits each and `product` at least
    `2 * num_digits`. `radix` defaults to the config's radix.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    if radix is None:
        radix = cfg.radix

    if strategy is None:
        chosen = select_strategy(num_digits, cfg)
    elif isinstance(strategy, str):
        chosen = get_strategy(strategy)
    else:
        chosen = strategy

    chosen.multiply(product, op1, op2, num_digits, radix=radix)
