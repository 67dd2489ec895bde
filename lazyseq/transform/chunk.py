"""
Chunk combinators
=================

Group items into fixed-size lists.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable, Sequence

from kungfu import Ok

from .._errors import ChunkSizeError
from .._helpers import is_whole
from .._types import Step
from ..core import Cursor, LazySeq, Seq, cursor_of, done

logger = logging.getLogger(__name__)


class _SliceChunkCursor[T](Cursor[list[T]]):
    """Chunks of an in-memory sequence, taken by slicing."""

    __slots__ = ("_items", "_size", "_offset")

    def __init__(self, items: Sequence[T], size: int) -> None:
        super().__init__()
        self._items = items
        self._size = size
        self._offset = 0

    def _advance(self) -> Step[list[T]]:
        if self._offset >= len(self._items):
            return done()
        chunk = list(self._items[self._offset : self._offset + self._size])
        self._offset += self._size
        return Ok(chunk)


class _BufferChunkCursor[T](Cursor[list[T]]):
    """Chunks of any source, accumulated in a buffer until full."""

    __slots__ = ("_upstream", "_size")

    def __init__(self, source: Iterable[T], size: int) -> None:
        super().__init__()
        self._upstream = cursor_of(source)
        self._size = size

    def _advance(self) -> Step[list[T]]:
        buffer: list[T] = []
        while len(buffer) < self._size:
            step = self._upstream.advance()
            match step:
                case Ok(item):
                    buffer.append(item)
                case _:
                    if buffer:
                        return Ok(buffer)
                    return step
        return Ok(buffer)


def chunkify[T](source: Iterable[T], chunk_size: int) -> Seq[list[T]]:
    """
    Group items into lists of `chunk_size`; the last one may be shorter.

    `chunk_size` is validated at call time: anything other than a positive
    whole number raises ChunkSizeError.

    Example:
        list(chunkify(range(5), 2))  # [[0, 1], [2, 3], [4]]
    """
    if not is_whole(chunk_size) or chunk_size <= 0:
        logger.debug("rejecting chunk size %r", chunk_size)
        raise ChunkSizeError(chunk_size)
    size = int(chunk_size)

    if isinstance(source, Sequence):
        items = typing.cast(Sequence[T], source)
        return LazySeq(lambda: _SliceChunkCursor(items, size))
    return LazySeq(lambda: _BufferChunkCursor(source, size))


__all__ = ("chunkify",)
