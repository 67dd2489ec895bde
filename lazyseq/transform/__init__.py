from .chunk import chunkify
from .filter import filter
from .indexed import indexed_pairs
from .map import flat_map, map
from .slice import drop, drop_until, take, until

__all__ = (
    "chunkify",
    "drop",
    "drop_until",
    "filter",
    "flat_map",
    "indexed_pairs",
    "map",
    "take",
    "until",
)
