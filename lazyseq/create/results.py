"""Replaying externally produced steps."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Ok

from .._types import Step
from ..core import Cursor, LazySeq, Seq, cursor_of, done


class _ResultsCursor[T](Cursor[T]):
    __slots__ = ("_results",)

    def __init__(self, results: Cursor[Step[T] | None]) -> None:
        super().__init__()
        self._results = results

    def _advance(self) -> Step[T]:
        match self._results.advance():
            case Ok(None):
                return done()
            case Ok(step):
                return step
            case _:
                return done()


def from_results[T](results: Iterable[Step[T] | None]) -> Seq[T]:
    """
    Sequence replaying a source of steps.

    Each Ok(item) entry yields item; an Error(Done(x)) entry ends the
    sequence with trailing value x. A missing (None) entry, or running
    out of entries, ends it cleanly with Done().

    Example:
        list(from_results([value(0), value(1), done(2)]))  # [0, 1]
    """
    return LazySeq(lambda: _ResultsCursor(cursor_of(results)))


__all__ = ("from_results",)
