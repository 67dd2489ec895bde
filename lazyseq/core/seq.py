"""
Seq
===

Immutable, restartable sequence descriptor.

Each `cursor()` call returns a new cursor positioned at the start.
Sequences are built by sources and transformers; nothing is pulled
until something drives a cursor.
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable, Iterable, Iterator

from .._errors import NotASequenceError
from .cursor import Cursor, FusedCursor, IteratorCursor, SupportsAdvance
from .tags import Nestable


@typing.runtime_checkable
class SupportsCursor[T](typing.Protocol):
    """Anything with a cursor() method."""

    def cursor(self) -> SupportsAdvance[T]: ...


class Seq[T](Nestable):
    """Restartable sequence. Subclasses implement `cursor()`."""

    __slots__ = ()

    @abc.abstractmethod
    def cursor(self) -> Cursor[T]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[T]:
        return self.cursor()


class LazySeq[T](Seq[T]):
    """
    Sequence built from a zero-argument cursor factory.

    The factory runs once per `cursor()` call, never at construction.
    """

    __slots__ = ("_make",)

    def __init__(self, make: Callable[[], Cursor[T]], /) -> None:
        self._make = make

    def cursor(self) -> Cursor[T]:
        return self._make()


def cursor_of[T](source: Iterable[T] | SupportsCursor[T] | SupportsAdvance[T]) -> Cursor[T]:
    """
    Produce a fused cursor from any supported source.

    - Cursor: returned as is (use-once)
    - anything with cursor(): its cursor, fused if foreign
    - anything with advance(): fused wrapper (use-once)
    - iterable: cursor over iter(source)
    """
    if isinstance(source, Cursor):
        return source
    if isinstance(source, SupportsCursor):
        produced = source.cursor()
        if isinstance(produced, Cursor):
            return produced
        return FusedCursor(produced)
    if isinstance(source, SupportsAdvance):
        return FusedCursor(source)
    if isinstance(source, Iterable):
        return IteratorCursor(iter(source))
    raise NotASequenceError(source)


def as_seq[T](source: Iterable[T]) -> Seq[T]:
    """Wrap any source as a Seq. Sequences are returned unchanged."""
    if isinstance(source, Seq):
        return source
    return LazySeq(lambda: cursor_of(source))


__all__ = ("LazySeq", "Seq", "SupportsCursor", "as_seq", "cursor_of")
