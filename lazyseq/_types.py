"""
Core type definitions for lazyseq.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

if typing.TYPE_CHECKING:
    from .core.step import Done

# ============================================================================
# Type aliases
# ============================================================================

# Step = result of advancing a cursor: Ok(item) or Error(Done(trailing))
type Step[T] = Result[T, Done[typing.Any]]

# IndexedCallback = callback receiving (item, index, source)
# NOTE: Callbacks may declare fewer parameters, see _helpers.fit_arity.
type IndexedCallback[T, R] = Callable[..., R]

# Accumulator = reduce callback receiving (acc, item, index, source)
type Accumulator[T, U] = Callable[..., U]

# Number = what the numeric folds work with
type Number = int | float

__all__ = (
    "Step",
    "IndexedCallback",
    "Accumulator",
    "Number",
)
