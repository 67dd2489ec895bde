from .effects import for_each, lazy_observer

__all__ = (
    "for_each",
    "lazy_observer",
)
