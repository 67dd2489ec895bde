"""
Map combinators
===============

One-to-one and one-to-many item transforms.

NOTE: This module defines `map`, the builtin is not used here.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Ok

from .._helpers import fit_arity
from .._types import IndexedCallback, Step
from ..core import Cursor, LazySeq, Seq, cursor_of


class _MapCursor[T, U](Cursor[U]):
    __slots__ = ("_upstream", "_f", "_source", "_index")

    def __init__(self, source: Iterable[T], f: Callable[[T, int, Iterable[T]], U]) -> None:
        super().__init__()
        self._upstream = cursor_of(source)
        self._f = f
        self._source = source
        self._index = 0

    def _advance(self) -> Step[U]:
        match self._upstream.advance():
            case Ok(item):
                mapped = self._f(item, self._index, self._source)
                self._index += 1
                return Ok(mapped)
            case stop:
                return stop


def map[T, U](source: Iterable[T], f: IndexedCallback[T, U]) -> Seq[U]:
    """
    Lazily apply `f` to every item.

    `f` is called as f(item, index, source) and may declare fewer
    parameters. It runs only when the mapped item is pulled.
    """
    fitted = fit_arity(f, 3)
    return LazySeq(lambda: _MapCursor(source, fitted))


def flat_map[T, U](source: Iterable[T], f: IndexedCallback[T, U | Iterable[U]]) -> Seq[U]:
    """
    Map, then splice results carrying the Nestable tag one level deep.

    Scalar results are yielded as they are.

    Example:
        list(flat_map([1, 2], lambda x: [x, x * 10]))  # [1, 10, 2, 20]
        list(flat_map([1, 2], lambda x: x + 1))        # [2, 3]
    """
    from ..stateful.flatten import flat

    return typing.cast(Seq[U], flat(map(source, f), 1))


__all__ = ("map", "flat_map")
