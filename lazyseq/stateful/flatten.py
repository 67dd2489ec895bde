"""
Flatten combinators
===================

Splice nested sequences into their parent.

An item is nested when it carries the Nestable capability tag
(Seq, Cursor, list, tuple or any registered class). Everything else,
strings included, is a leaf.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable

from kungfu import Ok

from .._errors import DepthError
from .._helpers import is_whole
from .._types import Step
from ..core import Cursor, LazySeq, Seq, cursor_of, done, is_nested

logger = logging.getLogger(__name__)


class _FlattenCursor(Cursor[typing.Any]):
    """Depth-first splicing with an explicit stack of open cursors."""

    __slots__ = ("_stack", "_depth", "_end")

    def __init__(self, source: Iterable[typing.Any], depth: int | None) -> None:
        super().__init__()
        self._stack: list[Cursor[typing.Any]] = [cursor_of(source)]
        # None means unbounded
        self._depth = depth
        self._end: Step[typing.Never] = done()

    def _splices(self) -> bool:
        return self._depth is None or len(self._stack) <= self._depth

    def _advance(self) -> Step[typing.Any]:
        while self._stack:
            step = self._stack[-1].advance()
            match step:
                case Ok(item) if is_nested(item) and self._splices():
                    self._stack.append(cursor_of(item))
                case Ok(_):
                    return step
                case _:
                    self._stack.pop()
                    if not self._stack:
                        # Keep the outermost trailing value.
                        self._end = step
        return self._end


def flat[T](source: Iterable[typing.Any], depth: int = 1) -> Seq[T]:
    """
    Splice nested sequences up to `depth` levels.

    depth=0 passes items through unchanged. `depth` is validated at call
    time: anything other than a non-negative whole number raises DepthError.

    Example:
        list(flat([1, [2, [3]]]))     # [1, 2, [3]]
        list(flat([1, [2, [3]]], 2))  # [1, 2, 3]
    """
    if not is_whole(depth) or depth < 0:
        logger.debug("rejecting flatten depth %r", depth)
        raise DepthError(depth)
    levels = int(depth)
    return LazySeq(lambda: _FlattenCursor(source, levels))


def complete_flat[T](source: Iterable[typing.Any]) -> Seq[T]:
    """
    Splice nested sequences at every level.

    Yields only leaves, depth-first, left to right.
    """
    return LazySeq(lambda: _FlattenCursor(source, None))


__all__ = ("complete_flat", "flat")
