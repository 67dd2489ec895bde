"""
Fluent builder for chaining sequence operations.

    from lazyseq import create, flow

    flow(create.increments(1)).filter(lambda n: n % 2).take(5).to_list()
    # [1, 3, 5, 7, 9]

Each chaining method wraps the underlying Seq with the matching operation
and returns a new Flow; nothing is pulled until a terminal method
(reduce, sum, for_each, to_list, ...) or iteration drives it.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from . import combine, effectors, reducers, stateful, transform
from ._types import Accumulator, IndexedCallback, Number
from .core import Seq, as_seq


@dataclass(frozen=True, slots=True)
class Flow[T]:
    """
    Fluent wrapper over a Seq.

    Direct value-based implementation (no AST): each method calls the
    corresponding operation function.
    """

    seq: Seq[T]

    # Transformers

    def map[U](self, f: IndexedCallback[T, U]) -> Flow[U]:
        return Flow(transform.map(self.seq, f))

    def flat_map[U](self, f: IndexedCallback[T, U | Iterable[U]]) -> Flow[U]:
        return Flow(transform.flat_map(self.seq, f))

    def filter(self, predicate: IndexedCallback[T, bool]) -> Flow[T]:
        return Flow(transform.filter(self.seq, predicate))

    def take(self, n: float) -> Flow[T | None]:
        return Flow(transform.take(self.seq, n))

    def drop(self, n: float) -> Flow[T]:
        return Flow(transform.drop(self.seq, n))

    def until(self, predicate: IndexedCallback[T, bool], include_last: bool = True) -> Flow[T]:
        return Flow(transform.until(self.seq, predicate, include_last))

    def drop_until(self, predicate: IndexedCallback[T, bool], include_first: bool = True) -> Flow[T]:
        return Flow(transform.drop_until(self.seq, predicate, include_first))

    def indexed_pairs(self) -> Flow[tuple[int, T]]:
        return Flow(transform.indexed_pairs(self.seq))

    def chunkify(self, chunk_size: int) -> Flow[list[T]]:
        return Flow(transform.chunkify(self.seq, chunk_size))

    # Stateful

    def flat(self, depth: int = 1) -> Flow[typing.Any]:
        return Flow(stateful.flat(self.seq, depth))

    def complete_flat(self) -> Flow[typing.Any]:
        return Flow(stateful.complete_flat(self.seq))

    def remember(self) -> Flow[T]:
        return Flow(stateful.remember(self.seq))

    def fuse(self) -> Flow[T]:
        return Flow(stateful.fuse(self.seq))

    def peekable(self) -> stateful.PeekCursor[T]:
        return stateful.peekable(self.seq)

    # Combinators

    def pair[U](self, other: Iterable[U]) -> Flow[tuple[T | None, U | None]]:
        return Flow(combine.pair(self.seq, other))

    def concat[U](self, *tails: Iterable[U]) -> Flow[T | U]:
        return Flow(combine.concat(self.seq, *tails))

    # Effectors

    def observe(self, f: IndexedCallback[T, object]) -> Flow[T]:
        return Flow(effectors.lazy_observer(self.seq, f))

    def for_each(self, f: IndexedCallback[T, object]) -> None:
        effectors.for_each(self.seq, f)

    # Reducers

    def reduce[U](
        self,
        accumulate: Accumulator[T, U],
        initial: U,
        stop: Accumulator[T, bool] | None = None,
    ) -> U:
        return reducers.reduce(self.seq, accumulate, initial, stop)

    def some(self, predicate: IndexedCallback[T, bool]) -> bool:
        return reducers.some(self.seq, predicate)

    def every(self, predicate: IndexedCallback[T, bool]) -> bool:
        return reducers.every(self.seq, predicate)

    def find(self, predicate: IndexedCallback[T, bool]) -> T | None:
        return reducers.find(self.seq, predicate)

    def find_index(self, predicate: IndexedCallback[T, bool]) -> int:
        return reducers.find_index(self.seq, predicate)

    def includes(self, item: typing.Any) -> bool:
        return reducers.includes(self.seq, item)

    def sum(self) -> Number:
        return reducers.sum(typing.cast(Seq[Number], self.seq))

    def average(self) -> float:
        return reducers.average(typing.cast(Seq[Number], self.seq))

    def product(self) -> Number:
        return reducers.product(typing.cast(Seq[Number], self.seq))

    def norm(self) -> float:
        return reducers.norm(typing.cast(Seq[Number], self.seq))

    def to_list(self) -> list[T]:
        """Drain into a list. Never returns for an endless sequence."""
        return list(self.seq)

    # Protocol methods

    def lower(self) -> Seq[T]:
        return self.seq

    def __iter__(self) -> Iterator[T]:
        return iter(self.seq)


def flow[T](source: Iterable[T]) -> Flow[T]:
    """Start a fluent chain from any source."""
    return Flow(as_seq(source))


__all__ = ("Flow", "flow")
