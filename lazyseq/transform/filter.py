"""Filter combinators

Selection by predicate.

NOTE: This module defines `filter`, the builtin is not used here."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Ok

from .._helpers import fit_arity
from .._types import IndexedCallback, Step
from ..core import Cursor, LazySeq, Seq, cursor_of

class _FilterCursor[T](Cursor[T]):
    __slots__ = ("_upstream", "_predicate", "_source", "_index")

    def __init__(
        self,
        source: Iterable[T],
        predicate: Callable[[T, int, Iterable[T]], bool],
    ) -> None:
        super().__init__()
        self._upstream = cursor_of(source)
        self._predicate = predicate
        self._source = source
        self._index = 0

    def _advance(self) -> Step[T]:
        while True:
            step = self._upstream.advance()
            match step:
                case Ok(item):
                    index = self._index
                    self._index += 1
                    if self._predicate(item, index, self._source):
                        return step
                case _:
                    return step

def filter[T](source: Iterable[T], predicate: IndexedCallback[T, bool]) -> Seq[T]:
    """
    Items for which `predicate` is truthy.

    `predicate` is called as predicate(item, index, source), where index is
    the upstream position of the item.
    """
    fitted = fit_arity(predicate, 3)
    return LazySeq(lambda: _FilterCursor(source, fitted))

__all__ = ("filter",)
