"""Internal helpers for lazyseq.

Common functions used across multiple operation modules.
These are not part of the public API but can be used when writing custom operations."""

from __future__ import annotations

import inspect
import math
import numbers
import typing
from collections.abc import Callable

def constantly[T](value: T) -> Callable[..., T]:
    """
    Build a function which ignores its arguments and always returns `value`.

    Example:
        never = constantly(False)
        never(1, 2, 3)  # False
    """
    def const(*_: typing.Any) -> T:
        return value

    return const

# Callback arity fitting
def positional_arity(fn: Callable[..., typing.Any], limit: int, fallback: int = 1) -> int:
    """
    Count how many positional arguments `fn` accepts, capped at `limit`.

    Functions with *args are treated as accepting `limit`. Callables whose
    signature can not be inspected (many builtins, e.g. max) are assumed
    to accept `fallback`.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return min(fallback, limit)

    count = 0
    for param in sig.parameters.values():
        match param.kind:
            case inspect.Parameter.VAR_POSITIONAL:
                return limit
            case inspect.Parameter.POSITIONAL_ONLY | inspect.Parameter.POSITIONAL_OR_KEYWORD:
                count += 1
            case _:
                pass
    return min(count, limit)

def fit_arity[R](fn: Callable[..., R], limit: int, fallback: int = 1) -> Callable[..., R]:
    """
    Adapt `fn` so it can always be called with `limit` positional arguments.

    Operations call their callbacks with the full argument list, e.g.
    (item, index, source). A callback declaring fewer parameters gets
    only the leading ones, so `lambda x: x * 2` works as a map callback.
    """
    arity = positional_arity(fn, limit, fallback)
    if arity >= limit:
        return fn

    def fitted(*args: typing.Any) -> R:
        return fn(*args[:arity])

    return fitted

# Numeric checks
def is_whole(value: object) -> bool:
    """True for ints and integral floats. Booleans are rejected."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, float) and value.is_integer()

def is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)

# Equality
_PRIMITIVES = (int, float, complex, str, bytes, type(None))

def same_value_zero(a: object, b: object) -> bool:
    """
    Identity or primitive equality. NaN equals NaN.

    Booleans only match booleans: True does not match 1. Containers and
    other objects only match themselves: [1] does not match [1].
    """
    if a is b:
        return True
    if isinstance(a, _PRIMITIVES) and isinstance(b, _PRIMITIVES):
        # True and 1 are different values
        if isinstance(a, bool) != isinstance(b, bool):
            return False
        if is_nan(a) and is_nan(b):
            return True
        return a == b
    return False

__all__ = (
    "constantly",
    "positional_arity",
    "fit_arity",
    "is_whole",
    "is_nan",
    "same_value_zero",
)
