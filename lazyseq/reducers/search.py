"""
Search reducers
===============

Quantifiers and first-match scans. All of them stop pulling as soon as the
answer is known.

NOTE: On an endless source whose items never settle the answer
      (some() with no match, every() with no miss, ...) these never return.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable

from kungfu import Ok

from .._helpers import fit_arity, same_value_zero
from .._types import IndexedCallback
from ..core import cursor_of
from ..transform.map import map
from .fold import reduce


def some[T](source: Iterable[T], predicate: IndexedCallback[T, bool]) -> bool:
    """True if `predicate` holds for any item. Evaluated item by item."""
    results = map(source, predicate)
    return reduce(results, lambda acc, result: acc or bool(result), False, lambda acc: acc)


def every[T](source: Iterable[T], predicate: IndexedCallback[T, bool]) -> bool:
    """True if `predicate` holds for all items. Evaluated item by item."""
    results = map(source, predicate)
    return reduce(results, lambda acc, result: acc and bool(result), True, lambda acc: not acc)


def _first_match[T](
    source: Iterable[T],
    predicate: IndexedCallback[T, bool],
) -> tuple[int, T] | None:
    test = fit_arity(predicate, 3)
    cursor = cursor_of(source)
    index = 0
    while True:
        match cursor.advance():
            case Ok(item):
                if test(item, index, source):
                    return index, item
                index += 1
            case _:
                return None


def find[T](source: Iterable[T], predicate: IndexedCallback[T, bool]) -> T | None:
    """First item matching `predicate`, or None."""
    match _first_match(source, predicate):
        case (_, item):
            return item
        case _:
            return None


def find_index[T](source: Iterable[T], predicate: IndexedCallback[T, bool]) -> int:
    """Position of the first item matching `predicate`, or -1."""
    match _first_match(source, predicate):
        case (index, _):
            return index
        case _:
            return -1


def includes[T](source: Iterable[T], item: typing.Any) -> bool:
    """
    True if `item` occurs in `source`.

    Uses identity, or value equality between primitives (numbers, strings,
    bytes, None). NaN matches NaN. Containers are never compared deeply.
    """
    return some(source, lambda candidate: same_value_zero(candidate, item))


__all__ = ("every", "find", "find_index", "includes", "some")
