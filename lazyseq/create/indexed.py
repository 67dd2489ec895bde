"""
Index-driven sources
====================

Sequences whose item at position i is computed from i.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from kungfu import Ok

from .._helpers import constantly
from .._types import Step
from ..core import Cursor, LazySeq, Seq


class _IndexedStepCursor[T](Cursor[T]):
    __slots__ = ("_f", "_index")

    def __init__(self, f: Callable[[int], Step[T]]) -> None:
        super().__init__()
        self._f = f
        self._index = 0

    def _advance(self) -> Step[T]:
        step = self._f(self._index)
        self._index += 1
        return step


class _IndexedValueCursor[T](Cursor[T]):
    __slots__ = ("_f", "_index")

    def __init__(self, f: Callable[[int], T]) -> None:
        super().__init__()
        self._f = f
        self._index = 0

    def _advance(self) -> Step[T]:
        item = self._f(self._index)
        self._index += 1
        return Ok(item)


def from_indexed_step[T](f: Callable[[int], Step[T]]) -> Seq[T]:
    """
    Sequence where position i is `f(i)`, a Step.

    Ends at the first Done returned by `f`; `f` is not called after that.

    Example:
        upto_6 = from_indexed_step(lambda i: value(i) if i <= 6 else done())
        list(upto_6)  # [0, 1, 2, 3, 4, 5, 6]
    """
    return LazySeq(lambda: _IndexedStepCursor(f))


def from_indexed_value[T](f: Callable[[int], T]) -> Seq[T]:
    """Endless sequence where position i is `f(i)`."""
    return LazySeq(lambda: _IndexedValueCursor(f))


def constant[T](item: T) -> Seq[T]:
    """Endless sequence of `item`."""
    return from_indexed_value(constantly(item))


def increments(start: float = 0, step: float = 1) -> Seq[float]:
    """Endless arithmetic progression: start, start + step, start + 2 * step, ..."""
    return from_indexed_value(lambda index: start + index * step)


def random_numbers() -> Seq[float]:
    """Endless sequence of pseudorandom floats in [0, 1)."""
    return from_indexed_value(lambda _: random.random())


__all__ = (
    "constant",
    "from_indexed_step",
    "from_indexed_value",
    "increments",
    "random_numbers",
)
