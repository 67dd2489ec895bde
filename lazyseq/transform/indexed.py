"""Indexed pairs."""

from __future__ import annotations

from collections.abc import Iterable

from ..core import Seq
from .map import map


def indexed_pairs[T](source: Iterable[T]) -> Seq[tuple[int, T]]:
    """
    Pair every item with its zero-based position.

    Example:
        list(indexed_pairs("ab"))  # [(0, "a"), (1, "b")]
    """
    return map(source, lambda item, index: (index, item))


__all__ = ("indexed_pairs",)
