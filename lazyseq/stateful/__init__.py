from .flatten import complete_flat, flat
from .fuse import fuse
from .peek import PeekCursor, peekable
from .remember import Remembered, remember

__all__ = (
    "PeekCursor",
    "Remembered",
    "complete_flat",
    "flat",
    "fuse",
    "peekable",
    "remember",
)
