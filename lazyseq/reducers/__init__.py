from .fold import reduce
from .numeric import average, norm, product, sum
from .search import every, find, find_index, includes, some

__all__ = (
    # Fold
    "reduce",
    # Search
    "every",
    "find",
    "find_index",
    "includes",
    "some",
    # Numeric
    "average",
    "norm",
    "product",
    "sum",
)
