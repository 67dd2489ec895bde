"""
Curried operations for point-free pipelines.

Every sequence-first operation `op(source, *args)` becomes
`op(*args)(source)`, so stages can be built before the source exists:

    from lazyseq import create, fp

    first_odds = fp.pipe(
        create.increments(1),
        fp.filter(lambda n: n % 2),
        fp.take(5),
        list,
    )
    # [1, 3, 5, 7, 9]

Operations taking only the sequence (sum, complete_flat, ...) are
re-exported unchanged.

NOTE: This module shadows the builtins map, filter and sum.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from functools import wraps

from . import combine, effectors, reducers, stateful, transform


def curry[T, R, **P](
    op: Callable[typing.Concatenate[Iterable[T], P], R],
) -> Callable[P, Callable[[Iterable[T]], R]]:
    """
    Turn `op(source, *args, **kwargs)` into `op(*args, **kwargs)(source)`.

    Purely structural: nothing is evaluated until the returned stage is
    applied, and then `op` runs exactly as if called directly.
    """

    @wraps(op)
    def bind(*args: P.args, **kwargs: P.kwargs) -> Callable[[Iterable[T]], R]:
        def stage(source: Iterable[T]) -> R:
            return op(source, *args, **kwargs)

        return stage

    return bind


def pipe(source: typing.Any, *stages: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """Feed `source` through `stages` left to right."""
    result = source
    for stage in stages:
        result = stage(result)
    return result


# Transformers
map = curry(transform.map)
flat_map = curry(transform.flat_map)
take = curry(transform.take)
drop = curry(transform.drop)
until = curry(transform.until)
drop_until = curry(transform.drop_until)
filter = curry(transform.filter)
chunkify = curry(transform.chunkify)
indexed_pairs = transform.indexed_pairs

# Stateful
flat = curry(stateful.flat)
complete_flat = stateful.complete_flat
remember = stateful.remember
peekable = stateful.peekable
fuse = stateful.fuse

# Combinators
pair = curry(combine.pair)
concat = curry(combine.concat)

# Reducers
reduce = curry(reducers.reduce)
some = curry(reducers.some)
every = curry(reducers.every)
find = curry(reducers.find)
find_index = curry(reducers.find_index)
includes = curry(reducers.includes)
sum = reducers.sum
average = reducers.average
product = reducers.product
norm = reducers.norm

# Effectors
for_each = curry(effectors.for_each)
lazy_observer = curry(effectors.lazy_observer)

__all__ = (
    # Adapter
    "curry",
    "pipe",
    # Transformers
    "chunkify",
    "drop",
    "drop_until",
    "filter",
    "flat_map",
    "indexed_pairs",
    "map",
    "take",
    "until",
    # Stateful
    "complete_flat",
    "flat",
    "fuse",
    "peekable",
    "remember",
    # Combinators
    "concat",
    "pair",
    # Reducers
    "average",
    "every",
    "find",
    "find_index",
    "includes",
    "norm",
    "product",
    "reduce",
    "some",
    "sum",
    # Effectors
    "for_each",
    "lazy_observer",
)
