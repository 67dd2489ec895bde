"""
Inclusive numeric ranges.

NOTE: This module defines `range`, the builtin is not used here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kungfu import Ok

from .._errors import RangeStepError
from .._types import Number, Step
from ..core import Cursor, LazySeq, Seq, done

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RangeSpec:
    """Normalised range parameters. `step` is always signed by direction."""

    start: Number
    end: Number
    step: Number

    def __post_init__(self) -> None:
        if self.step == 0:
            logger.debug("rejecting zero range step")
            raise RangeStepError(self.step)

    @staticmethod
    def of(end_or_start: Number, end: Number | None = None, step: Number = 1) -> RangeSpec:
        """Build from range() arguments: sign of `step` ignored, direction from the bounds."""
        if end is None:
            start, stop = 0, end_or_start
        else:
            start, stop = end_or_start, end
        magnitude = abs(step)
        return RangeSpec(start, stop, magnitude if stop > start else -magnitude)

    @property
    def upwards(self) -> bool:
        return self.step > 0

    def contains(self, current: Number) -> bool:
        return current <= self.end if self.upwards else current >= self.end


class _RangeCursor(Cursor[Number]):
    __slots__ = ("_spec", "_current")

    def __init__(self, spec: RangeSpec) -> None:
        super().__init__()
        self._spec = spec
        self._current = spec.start

    def _advance(self) -> Step[Number]:
        current = self._current
        if not self._spec.contains(current):
            return done()
        self._current = current + self._spec.step
        return Ok(current)


def range(end_or_start: Number, end: Number | None = None, step: Number = 1) -> Seq[Number]:
    """
    Inclusive range of numbers.

    With one argument the range is [0, end_or_start], otherwise
    [end_or_start, end]. The sign of `step` is ignored: the direction
    comes from the bounds. Raises RangeStepError at call time for a zero step.

    Example:
        list(range(5))          # [0, 1, 2, 3, 4, 5]
        list(range(14, 24, 2))  # [14, 16, 18, 20, 22, 24]
        list(range(12, 2, 2))   # [12, 10, 8, 6, 4, 2]
    """
    spec = RangeSpec.of(end_or_start, end, step)
    return LazySeq(lambda: _RangeCursor(spec))


__all__ = ("RangeSpec", "range")
