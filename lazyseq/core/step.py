"""
Step
====

Result of advancing a cursor.

A step is a kungfu Result: Ok(item) carries the next item, Error(Done(...))
marks the end of the sequence and carries an optional trailing value.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from kungfu import Error, Ok

from .._types import Step


@dataclass(frozen=True, slots=True)
class Done[R]:
    """Termination signal with an optional trailing value."""

    value: R | None = None


def value[T](item: T) -> Step[T]:
    """Step carrying `item`."""
    return Ok(item)


def done[R](trailing: R | None = None) -> Step[typing.Never]:
    """Terminal step, optionally carrying a trailing value."""
    return Error(Done(trailing))


def is_done(step: Step[typing.Any]) -> bool:
    """True if `step` is terminal."""
    return isinstance(step, Error)


__all__ = ("Done", "value", "done", "is_done")
