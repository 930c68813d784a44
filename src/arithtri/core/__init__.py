"""Core modules for arithtri."""

__all__ = [
    "cache",
    "config",
    "elements",
    "exceptions",
    "index",
    "ranges",
    "stats",
    "sums",
    "traversal",
    "triangle",
]
