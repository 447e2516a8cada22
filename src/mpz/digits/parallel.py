"""Data-parallel (column) multiplication driver.

The digit-pair products of a schoolbook multiply have no data dependency on
each other. This driver computes them all at once as column sums

    columns[k] = sum(op1[j] * op2[i] for i + j == k)

with `numpy.convolve`, then resolves every carry in a single low-to-high pass.
The output is digit-for-digit identical to `long_multiplication`.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .propagate import CarryResolver, ColumnCarryResolver
from .types import RADIX, DigitArray, DigitView, check_radix, check_span

logger = logging.getLogger(__name__)

_INT64_SAFE = 1 << 62
_COLUMN = ColumnCarryResolver()


def column_dtype(num_digits: int, radix: int = RADIX) -> type:
    """int64 when every column sum fits, else Python ints (object)."""
    bound = max(num_digits, 1) * (radix - 1) * (radix - 1)
    if bound < _INT64_SAFE:
        return np.int64
    return object


def column_products(op1: DigitView, op2: DigitView, num_digits: int, *, radix: int = RADIX) -> np.ndarray:
    """Return the `2n - 1` column sums of `op1 * op2` (empty when `n == 0`)."""
    check_radix(radix)
    check_span("op1", op1, num_digits)
    check_span("op2", op2, num_digits)
    dtype = column_dtype(num_digits, radix)
    if num_digits == 0:
        return np.zeros(0, dtype=dtype)
    if dtype is object:
        # numpy has no object-dtype convolve; accumulate the outer product instead.
        logger.debug("column sums may exceed int64 (n=%d, radix=%d); using object dtype", num_digits, radix)
        a = np.array([int(d) for d in op1[:num_digits]], dtype=object)
        columns = np.zeros(2 * num_digits - 1, dtype=object)
        for i in range(num_digits):
            columns[i:i + num_digits] += int(op2[i]) * a
        return columns
    a = np.array([int(d) for d in op1[:num_digits]], dtype=np.int64)
    b = np.array([int(d) for d in op2[:num_digits]], dtype=np.int64)
    return np.convolve(a, b)


def column_multiplication(
    product: DigitArray,
    op1: DigitView,
    op2: DigitView,
    num_digits: int,
    *,
    radix: int = RADIX,
    resolver: Optional[CarryResolver] = None,
) -> None:
    """Compute `product = op1 * op2` via column sums and one deferred carry pass."""
    check_radix(radix)
    check_span("product", product, 2 * num_digits)
    if resolver is None:
        resolver = _COLUMN

    columns = column_products(op1, op2, num_digits, radix=radix)
    resolver.resolve_columns(columns.tolist(), product, 2 * num_digits, radix=radix)
