"""
Slicing combinators
===================

Count-bounded (take, drop) and predicate-bounded (until, drop_until) slices.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Ok

from .._helpers import fit_arity
from .._types import IndexedCallback, Step
from ..core import Cursor, LazySeq, Seq, cursor_of, done


class _TakeCursor[T](Cursor[T | None]):
    __slots__ = ("_upstream", "_remaining")

    def __init__(self, source: Iterable[T], n: float) -> None:
        super().__init__()
        self._upstream = cursor_of(source)
        self._remaining = n

    def _advance(self) -> Step[T | None]:
        if self._remaining <= 0:
            return done()
        self._remaining -= 1
        match self._upstream.advance():
            case Ok(item):
                return Ok(item)
            case _:
                return Ok(None)


class _DropCursor[T](Cursor[T]):
    __slots__ = ("_upstream", "_skip")

    def __init__(self, source: Iterable[T], n: float) -> None:
        super().__init__()
        self._upstream = cursor_of(source)
        self._skip = n

    def _advance(self) -> Step[T]:
        while self._skip > 0:
            self._skip -= 1
            self._upstream.advance()
        return self._upstream.advance()


class _UntilCursor[T](Cursor[T]):
    __slots__ = ("_upstream", "_predicate", "_source", "_include_last", "_index", "_hit")

    def __init__(
        self,
        source: Iterable[T],
        predicate: Callable[[T, int, Iterable[T]], bool],
        include_last: bool,
    ) -> None:
        super().__init__()
        self._upstream = cursor_of(source)
        self._predicate = predicate
        self._source = source
        self._include_last = include_last
        self._index = 0
        self._hit = False

    def _advance(self) -> Step[T]:
        # The boundary item was yielded on the previous pull.
        if self._hit:
            return done()
        match self._upstream.advance():
            case Ok(item):
                self._hit = self._predicate(item, self._index, self._source)
                self._index += 1
                if not self._hit or self._include_last:
                    return Ok(item)
                return done()
            case stop:
                return stop


class _DropUntilCursor[T](Cursor[T]):
    __slots__ = ("_upstream", "_predicate", "_source", "_include_first", "_dropping")

    def __init__(
        self,
        source: Iterable[T],
        predicate: Callable[[T, int, Iterable[T]], bool],
        include_first: bool,
    ) -> None:
        super().__init__()
        self._upstream = cursor_of(source)
        self._predicate = predicate
        self._source = source
        self._include_first = include_first
        self._dropping = True

    def _advance(self) -> Step[T]:
        index = 0
        while self._dropping:
            step = self._upstream.advance()
            match step:
                case Ok(item):
                    if self._predicate(item, index, self._source):
                        self._dropping = False
                        if self._include_first:
                            return step
                    index += 1
                case _:
                    return step
        return self._upstream.advance()


def take[T](source: Iterable[T], n: float) -> Seq[T | None]:
    """
    First `n` items.

    Pulls at most `n` times from one upstream cursor. If the upstream runs
    out first, the remaining positions yield None instead of ending early:
        list(take([1, 2], 4))  # [1, 2, None, None]
    """
    return LazySeq(lambda: _TakeCursor(source, n))


def drop[T](source: Iterable[T], n: float) -> Seq[T]:
    """Skip the first `n` items (on first pull), then pass the rest through."""
    return LazySeq(lambda: _DropCursor(source, n))


def until[T](
    source: Iterable[T],
    predicate: IndexedCallback[T, bool],
    include_last: bool = True,
) -> Seq[T]:
    """
    Items up to the first one matching `predicate`.

    The matching item is included when `include_last` is true.
    `predicate` is called as predicate(item, index, source).
    """
    fitted = fit_arity(predicate, 3)
    return LazySeq(lambda: _UntilCursor(source, fitted, include_last))


def drop_until[T](
    source: Iterable[T],
    predicate: IndexedCallback[T, bool],
    include_first: bool = True,
) -> Seq[T]:
    """
    Items from the first one matching `predicate` onwards.

    The matching item is included when `include_first` is true.
    """
    fitted = fit_arity(predicate, 3)
    return LazySeq(lambda: _DropUntilCursor(source, fitted, include_first))


__all__ = ("drop", "drop_until", "take", "until")
