from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _load_version

from .core.cache import CacheStats, TriangleCache
from .core.config import TriangleConfig, load_config
from .core.exceptions import (
    ConfigError,
    InvalidIndex,
    TriangleError,
    TriangleOverflow,
    UnboundedIndexError,
    UnsupportedElement,
)
from .core.index import END, START, Index, Unbounded
from .core.ranges import ColumnRange, RangeShape, classify_range
from .core.sums import SumPlan, SumStrategy
from .core.traversal import TriangleIterator, TriangleView
from .core.triangle import Triangle
from .sequences import AdjacentPairs, adjacent_pairs, partitioned, range_contains

try:
    __version__ = _load_version("arithtri")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Triangle",
    "TriangleConfig",
    "load_config",
    "Index",
    "Unbounded",
    "START",
    "END",
    "ColumnRange",
    "RangeShape",
    "classify_range",
    "SumPlan",
    "SumStrategy",
    "TriangleIterator",
    "TriangleView",
    "TriangleCache",
    "CacheStats",
    "TriangleError",
    "InvalidIndex",
    "TriangleOverflow",
    "UnboundedIndexError",
    "UnsupportedElement",
    "ConfigError",
    "AdjacentPairs",
    "adjacent_pairs",
    "partitioned",
    "range_contains",
    "__version__",
]
