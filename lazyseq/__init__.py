"""
lazyseq - composable operations over pull-based lazy sequences.

Sources, transformers and combinators only describe a pipeline; reducers,
effectors and iteration are the only things that pull.

Architecture:
- core: Step (kungfu Result), Cursor (fused, advance()), Seq (restartable)
- create: sequence sources (namespace import: `from lazyseq import create`)
- transform / stateful / combine: lazy operations, sequence-first
- reducers / effectors: eager consumers
- fp: curried operations for point-free pipelines
- flow: fluent builder

Any Python iterable is accepted wherever a sequence is expected.
Plain iterators and generators are use-once; wrap them in remember()
to replay them.
"""

__version__ = "0.4.0"

# Core types
from ._types import Accumulator, IndexedCallback, Number, Step
from .core import (
    Cursor,
    Done,
    FusedCursor,
    IteratorCursor,
    LazySeq,
    Nestable,
    Seq,
    as_seq,
    cursor_of,
    done,
    is_done,
    is_nested,
    value,
)

# Internal helpers (for custom operations)
from . import _helpers

# Sources (namespace)
from . import create

# Stateless transformers
from .transform import (
    chunkify,
    drop,
    drop_until,
    filter,
    flat_map,
    indexed_pairs,
    map,
    take,
    until,
)

# Stateful transformers
from .stateful import (
    PeekCursor,
    Remembered,
    complete_flat,
    flat,
    fuse,
    peekable,
    remember,
)

# Combinators
from .combine import concat, pair

# Reducers
from .reducers import (
    average,
    every,
    find,
    find_index,
    includes,
    norm,
    product,
    reduce,
    some,
    sum,
)

# Effectors
from .effectors import for_each, lazy_observer

# Curry adapter (namespace)
from . import fp

# Fluent builder
from .flow import Flow, flow

# Errors
from ._errors import (
    ChunkSizeError,
    DepthError,
    LazySeqError,
    NotASequenceError,
    RangeStepError,
    RangeValidationError,
)

__all__ = (
    "__version__",
    # Types
    "Accumulator",
    "IndexedCallback",
    "Number",
    "Step",
    # Core
    "Cursor",
    "Done",
    "FusedCursor",
    "IteratorCursor",
    "LazySeq",
    "Nestable",
    "Seq",
    "as_seq",
    "cursor_of",
    "done",
    "is_done",
    "is_nested",
    "value",
    # Internal helpers (for custom operations)
    "_helpers",
    # Namespaces
    "create",
    "fp",
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
    "PeekCursor",
    "Remembered",
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
    # Fluent
    "Flow",
    "flow",
    # Errors
    "ChunkSizeError",
    "DepthError",
    "LazySeqError",
    "NotASequenceError",
    "RangeStepError",
    "RangeValidationError",
)
