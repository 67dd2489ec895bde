from __future__ import annotations

import typing


class LazySeqError(Exception):
    """Base class for all lazyseq errors."""


class RangeValidationError(LazySeqError, ValueError):
    """A numeric parameter is outside its allowed range."""


class ChunkSizeError(RangeValidationError):
    """chunkify() got a chunk size that is not a positive whole number."""

    size: object

    def __init__(self, size: object) -> None:
        self.size = size
        super().__init__(f"Chunk size must be a positive integer, got {size!r}")


class DepthError(RangeValidationError):
    """flat() got a depth that is not a non-negative whole number."""

    depth: object

    def __init__(self, depth: object) -> None:
        self.depth = depth
        super().__init__(f"Depth must be a non-negative integer, got {depth!r}")


class RangeStepError(RangeValidationError):
    """range() got a zero step, which never reaches the end."""

    step: object

    def __init__(self, step: object) -> None:
        self.step = step
        super().__init__(f"Range step must be non-zero, got {step!r}")


class NotASequenceError(LazySeqError, TypeError):
    """Value can not produce a cursor."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"{type(value).__name__!r} object can not produce a cursor")


__all__ = (
    "ChunkSizeError",
    "DepthError",
    "LazySeqError",
    "NotASequenceError",
    "RangeStepError",
    "RangeValidationError",
)
