from .cursor import Cursor, FusedCursor, IteratorCursor, SupportsAdvance
from .seq import LazySeq, Seq, SupportsCursor, as_seq, cursor_of
from .step import Done, done, is_done, value
from .tags import Nestable, is_nested

__all__ = (
    # Step
    "Done",
    "done",
    "is_done",
    "value",
    # Cursors
    "Cursor",
    "FusedCursor",
    "IteratorCursor",
    "SupportsAdvance",
    # Sequences
    "LazySeq",
    "Seq",
    "SupportsCursor",
    "as_seq",
    "cursor_of",
    # Tags
    "Nestable",
    "is_nested",
)
