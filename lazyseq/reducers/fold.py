"""
Fold combinators
================

Eager left fold with optional early stop. Every other reducer is built on it.
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Ok

from .._helpers import fit_arity
from .._types import Accumulator
from ..core import cursor_of


def reduce[T, U](
    source: Iterable[T],
    accumulate: Accumulator[T, U],
    initial: U,
    stop: Accumulator[T, bool] | None = None,
) -> U:
    """
    Fold `source` into one value, pulling one item at a time.

    `accumulate(acc, item, index, source)` returns the next accumulator.
    After each step `stop(acc, item, index, source)` is asked whether to
    halt; if it returns true the current accumulator is returned without
    pulling any further.

    Example:
        reduce(increments(1), lambda acc, n: acc + n, 0, lambda acc: acc % 13 == 0)
        # 78
    """
    step_fn = fit_arity(accumulate, 4, fallback=2)
    stop_fn = fit_arity(stop, 4, fallback=2) if stop is not None else None

    acc = initial
    index = 0
    cursor = cursor_of(source)
    while True:
        match cursor.advance():
            case Ok(item):
                acc = step_fn(acc, item, index, source)
                if stop_fn is not None and stop_fn(acc, item, index, source):
                    return acc
                index += 1
            case _:
                return acc


__all__ = ("reduce",)
