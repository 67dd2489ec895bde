"""
Sequence sources.

Namespace import is the preferred style:
    from lazyseq import create

    naturals = create.increments(1)
    digits = create.range(9)
"""

from .indexed import (
    constant,
    from_indexed_step,
    from_indexed_value,
    increments,
    random_numbers,
)
from .ranges import RangeSpec, range
from .results import from_results
from .text import from_char_codes, from_chars

__all__ = (
    "RangeSpec",
    "constant",
    "from_char_codes",
    "from_chars",
    "from_indexed_step",
    "from_indexed_value",
    "from_results",
    "increments",
    "random_numbers",
    "range",
)
