"""Side effects combinators

for_each drives a sequence for its effects; lazy_observer attaches an
effect which runs only as items are actually pulled."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Ok

from .._helpers import fit_arity
from .._types import IndexedCallback, Step
from ..core import Cursor, LazySeq, Seq, cursor_of

def for_each[T](source: Iterable[T], f: IndexedCallback[T, object]) -> None:
    """
    Call f(item, index, source) for every item, in order. Non-lazy.

    Example:
        seen = []
        for_each(take(increments(1), 3), seen.append)
        seen  # [1, 2, 3]
    """
    effect = fit_arity(f, 3)
    for index, item in enumerate(cursor_of(source)):
        effect(item, index, source)

class _ObserverCursor[T](Cursor[T]):
    __slots__ = ("_upstream", "_effect", "_source", "_index")

    def __init__(self, source: Iterable[T], effect: Callable[[T, int, Iterable[T]], object]) -> None:
        super().__init__()
        self._upstream = cursor_of(source)
        self._effect = effect
        self._source = source
        self._index = 0

    def _advance(self) -> Step[T]:
        step = self._upstream.advance()
        match step:
            case Ok(item):
                self._effect(item, self._index, self._source)
                self._index += 1
            case _:
                pass
        return step

def lazy_observer[T](source: Iterable[T], f: IndexedCallback[T, object]) -> Seq[T]:
    """
    Observe items as they flow through, without changing them.

    f(item, index, source) runs right before each item is handed
    downstream, once per pull, and never at construction time.
    """
    effect = fit_arity(f, 3)
    return LazySeq(lambda: _ObserverCursor(source, effect))

__all__ = ("for_each", "lazy_observer")
