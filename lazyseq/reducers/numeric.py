"""
Numeric reducers
================

Arithmetic folds with NaN poisoning: once a NaN is seen the result is NaN
and the fold stops pulling, so a NaN at a finite position of an endless
source still terminates.

NOTE: This module defines `sum`, the builtin is not used here.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from .._helpers import is_nan
from .._types import Number
from .fold import reduce


def sum(source: Iterable[Number]) -> Number:
    """Sum of all items; 0 for an empty source."""
    return reduce(source, lambda acc, item: acc + item, 0, is_nan)


def average(source: Iterable[Number]) -> float:
    """Arithmetic mean; NaN for an empty source."""

    def accumulate(acc: tuple[Number, int], item: Number) -> tuple[Number, int]:
        total, count = acc
        return total + item, count + 1

    def poisoned(acc: tuple[Number, int]) -> bool:
        return is_nan(acc[0])

    total, count = reduce(source, accumulate, (0, 0), poisoned)
    if count == 0 or is_nan(total):
        return math.nan
    return total / count


def product(source: Iterable[Number]) -> Number:
    """
    Product of all items; 1 for an empty source.

    Stops at the first zero, so an endless source containing 0 terminates.
    """
    return reduce(source, lambda acc, item: acc * item, 1, lambda acc: acc == 0 or is_nan(acc))


def norm(source: Iterable[Number]) -> float:
    """Euclidean norm of the items taken as a vector."""
    squares = reduce(source, lambda acc, item: acc + item * item, 0, is_nan)
    return math.sqrt(squares)


__all__ = ("average", "norm", "product", "sum")
