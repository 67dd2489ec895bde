"""Concatenation."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Ok

from .._types import Step
from ..core import Cursor, LazySeq, Seq, cursor_of, done


class _ConcatCursor[T](Cursor[T]):
    """Drains each source in order; a source is opened only when reached."""

    __slots__ = ("_sources", "_next", "_current")

    def __init__(self, sources: tuple[Iterable[T], ...]) -> None:
        super().__init__()
        self._sources = sources
        self._next = 0
        self._current: Cursor[T] | None = None

    def _advance(self) -> Step[T]:
        while True:
            if self._current is None:
                if self._next >= len(self._sources):
                    return done()
                self._current = cursor_of(self._sources[self._next])
                self._next += 1
            step = self._current.advance()
            match step:
                case Ok(_):
                    return step
                case _:
                    self._current = None


def concat[T, U](head: Iterable[T], *tails: Iterable[U]) -> Seq[T | U]:
    """
    `head` followed by every tail, in order.

    Example:
        list(concat([1, 1, 0, 1], [True, False, True]))
        # [1, 1, 0, 1, True, False, True]
    """
    sources: tuple[Iterable[T | U], ...] = (head, *tails)
    return LazySeq(lambda: _ConcatCursor(sources))


__all__ = ("concat",)
