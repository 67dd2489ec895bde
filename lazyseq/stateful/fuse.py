"""Fused termination."""

from __future__ import annotations

from collections.abc import Iterable

from ..core import FusedCursor, LazySeq, Seq, cursor_of


def fuse[T](source: Iterable[T]) -> Seq[T]:
    """
    Guarantee Done is final.

    Every cursor of the result keeps returning Done once it has, even if
    the underlying cursor would resume. Cursors built by lazyseq already
    behave this way; fuse() is for foreign cursors and subclasses that
    override advance().
    """
    return LazySeq(lambda: FusedCursor(cursor_of(source)))


__all__ = ("fuse",)
