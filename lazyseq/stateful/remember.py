"""
Remembering sequence
====================

Replays a single upstream pass to any number of cursors.

All cursors share one upstream cursor and one growing buffer; each cursor
only keeps its own offset into the buffer. The upstream is advanced exactly
once per position, no matter how many cursors reach it.

NOTE: Not safe for concurrent use. One logical thread must drive all
      cursors of a Remembered, or callers synchronise externally.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable

from kungfu import Ok

from .._types import Step
from ..core import Cursor, Seq, cursor_of

logger = logging.getLogger(__name__)


class _Memory[T]:
    """Shared arena: upstream cursor (opened on first pull) and the buffer."""

    __slots__ = ("_source", "_upstream", "buffer", "end")

    def __init__(self, source: Iterable[T]) -> None:
        self._source = source
        self._upstream: Cursor[T] | None = None
        self.buffer: list[T] = []
        self.end: Step[typing.Never] | None = None

    def at(self, position: int) -> Step[T]:
        """Step at `position`, pulling upstream only past the buffer end."""
        if position < len(self.buffer):
            return Ok(self.buffer[position])
        if self.end is not None:
            return self.end

        if self._upstream is None:
            self._upstream = cursor_of(self._source)
        step = self._upstream.advance()
        match step:
            case Ok(item):
                self.buffer.append(item)
            case _:
                self.end = step
                logger.debug("remembered upstream exhausted after %d items", len(self.buffer))
        return step


class _ReplayCursor[T](Cursor[T]):
    __slots__ = ("_memory", "_position")

    def __init__(self, memory: _Memory[T]) -> None:
        super().__init__()
        self._memory = memory
        self._position = 0

    def _advance(self) -> Step[T]:
        step = self._memory.at(self._position)
        self._position += 1
        return step


class Remembered[T](Seq[T]):
    """Sequence memoizing one pass over its source."""

    __slots__ = ("_memory",)

    def __init__(self, source: Iterable[T]) -> None:
        self._memory = _Memory(source)

    def cursor(self) -> Cursor[T]:
        return _ReplayCursor(self._memory)

    @property
    def buffered(self) -> int:
        """Number of items pulled from the source so far."""
        return len(self._memory.buffer)

    @property
    def exhausted(self) -> bool:
        """True once the source has signalled Done."""
        return self._memory.end is not None


def remember[T](source: Iterable[T]) -> Remembered[T]:
    """
    Memoize `source` so it can be replayed.

    Makes a use-once source (generator, cursor) restartable, and avoids
    recomputing expensive upstream work for later cursors.

    Example:
        squares = remember(map(increments(), expensive_square))
        list(take(squares, 3))  # computes 3 squares
        list(take(squares, 5))  # computes 2 more
    """
    return Remembered(source)


__all__ = ("Remembered", "remember")
