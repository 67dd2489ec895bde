"""Lookahead cursor."""

from __future__ import annotations

from collections.abc import Iterable

from .._types import Step
from ..core import Cursor, cursor_of


class PeekCursor[T](Cursor[T]):
    """
    Cursor with one step of lookahead.

    peek() never moves the position: repeated calls return the same cached
    step object, and the next advance() returns exactly that step.
    """

    __slots__ = ("_upstream", "_peeked")

    def __init__(self, upstream: Cursor[T]) -> None:
        super().__init__()
        self._upstream = upstream
        self._peeked: Step[T] | None = None

    def peek(self) -> Step[T]:
        if self._finished is not None:
            return self._finished
        if self._peeked is None:
            self._peeked = self._upstream.advance()
        return self._peeked

    def _advance(self) -> Step[T]:
        step = self.peek()
        self._peeked = None
        return step


def peekable[T](source: Iterable[T]) -> PeekCursor[T]:
    """
    Cursor over `source` with lookahead.

    Returns a cursor, not a sequence: it is consumed directly.
    """
    return PeekCursor(cursor_of(source))


__all__ = ("PeekCursor", "peekable")
