"""
Cursor
======

Mutable single-owner stepping object.

Every cursor built by lazyseq is fused: once it returns a terminal step,
it keeps returning that same step and never touches its upstream again.
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Iterator

from kungfu import Error, Ok

from .._types import Step
from .step import done
from .tags import Nestable


@typing.runtime_checkable
class SupportsAdvance[T](typing.Protocol):
    """Anything with an advance() method returning a Step."""

    def advance(self) -> Step[T]: ...


class Cursor[T](Nestable):
    """
    Base cursor.

    Subclasses implement `_advance()`. `advance()` wraps it with fused
    termination, so `_advance()` is never called after it returned Done.

    A cursor is also a Python iterator and a use-once sequence:
    `cursor()` returns the cursor itself.
    """

    __slots__ = ("_finished",)

    def __init__(self) -> None:
        self._finished: Step[typing.Never] | None = None

    @abc.abstractmethod
    def _advance(self) -> Step[T]:
        raise NotImplementedError

    def advance(self) -> Step[T]:
        """Pull the next step."""
        if self._finished is not None:
            return self._finished
        step = self._advance()
        if isinstance(step, Error):
            self._finished = step
        return step

    @property
    def finished(self) -> bool:
        """True once a terminal step was returned."""
        return self._finished is not None

    def cursor(self) -> Cursor[T]:
        return self

    # Protocol methods

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        match self.advance():
            case Ok(item):
                return item
            case Error(stop):
                raise StopIteration(stop.value)


class IteratorCursor[T](Cursor[T]):
    """Cursor over a plain Python iterator."""

    __slots__ = ("_iterator",)

    def __init__(self, iterator: Iterator[T]) -> None:
        super().__init__()
        self._iterator = iterator

    def _advance(self) -> Step[T]:
        try:
            item = next(self._iterator)
        except StopIteration as stop:
            return done(stop.value)
        return Ok(item)


class FusedCursor[T](Cursor[T]):
    """
    Fused view of any object with an advance() method.

    Used for foreign cursors which may resume after signalling Done.
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: SupportsAdvance[T]) -> None:
        super().__init__()
        self._inner = inner

    def _advance(self) -> Step[T]:
        return self._inner.advance()


__all__ = ("Cursor", "FusedCursor", "IteratorCursor", "SupportsAdvance")
