"""
Zip combinators
===============

Pairwise combination of two sequences.
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Error, Ok

from .._types import Step
from ..core import Cursor, LazySeq, Seq, cursor_of, done


class _PairCursor[T, U](Cursor[tuple[T | None, U | None]]):
    __slots__ = ("_left", "_right")

    def __init__(self, left: Iterable[T], right: Iterable[U]) -> None:
        super().__init__()
        self._left = cursor_of(left)
        self._right = cursor_of(right)

    def _advance(self) -> Step[tuple[T | None, U | None]]:
        a = self._left.advance()
        b = self._right.advance()
        if isinstance(a, Error) and isinstance(b, Error):
            return done()
        return Ok((_payload(a), _payload(b)))


def _payload[T](step: Step[T]) -> T | None:
    match step:
        case Ok(item):
            return item
        case _:
            return None


def pair[T, U](left: Iterable[T], right: Iterable[U]) -> Seq[tuple[T | None, U | None]]:
    """
    Tuples of items at the same position in `left` and `right`.

    Ends only when both are exhausted; the side that ends first is
    filled with None:
        list(pair([1, 2], ["a"]))  # [(1, "a"), (2, None)]
    """
    return LazySeq(lambda: _PairCursor(left, right))


__all__ = ("pair",)
