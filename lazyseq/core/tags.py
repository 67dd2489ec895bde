"""
Capability tags.

Nestable marks values which flattening operations splice instead of yielding.
Membership is explicit: subclass it or call Nestable.register(cls).
"""

from __future__ import annotations

import abc


class Nestable(abc.ABC):
    """Capability tag: instances are nested sequences for flat/flat_map."""

    __slots__ = ()


Nestable.register(list)
Nestable.register(tuple)


def is_nested(item: object) -> bool:
    """True if `item` carries the Nestable tag."""
    return isinstance(item, Nestable)


__all__ = ("Nestable", "is_nested")
