from .concat import concat
from .zip import pair

__all__ = (
    "concat",
    "pair",
)
