"""The arithmetic (Pascal's) triangle as an on-demand data structure.

Row 0 holds ``base``; every later element is the sum of the element above
it and the element above and to the left, with blanks counting as zero::

    0:   1
    1:   1  1
    2:   1  2  1
    3:   1  3  3  1
    4:   1  4  6  4  1

Only interior values in the left half of a row are ever computed; the
first and last columns are the base and the right half mirrors the left.
Computed values are memoised in a :class:`TriangleCache` owned by the
triangle.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

import numpy as np

from .cache import MISSING, CacheStats, TriangleCache
from .config import TriangleConfig
from .elements import UNSET, ElementKind, ElementOps
from .exceptions import InvalidIndex, UnboundedIndexError, UnsupportedElement
from .index import Index, Unbounded
from .sums import SumPlan, plan_range_sum, range_sum, row_sum
from .traversal import TriangleIterator, TriangleView

logger = logging.getLogger(__name__)

Scratch = Optional[Dict[Tuple[int, int], Any]]


def _fold(row: int, column: int) -> Tuple[int, int]:
    return row, min(column, row - column)


class Triangle:
    def __init__(
        self,
        base: Any = 1,
        *,
        zero: Any = UNSET,
        config: Optional[TriangleConfig] = None,
    ):
        self.base = base
        self.ops = ElementOps.for_base(base, zero)
        self.config = (config or TriangleConfig()).normalized()
        self._cache = TriangleCache(thread_safe=self.config.thread_safe)

    def __repr__(self) -> str:
        return f"Triangle(base={self.base!r}, cached={len(self._cache)})"

    @property
    def zero(self) -> Any:
        return self.ops.zero

    # Shape -------------------------------------------------------------------

    @staticmethod
    def number_of_columns(row: int) -> int:
        row = operator.index(row)
        return row + 1 if row >= 0 else 0

    # Lookup ------------------------------------------------------------------

    def value(self, row: int, column: int) -> Any:
        """Return the element at ``(row, column)``.

        Raises :class:`InvalidIndex` for a negative row. Columns outside
        ``[0, row]`` are blanks and read as the additive zero.
        """
        row = operator.index(row)
        column = operator.index(column)
        if row < 0:
            raise InvalidIndex("A row must have a non-negative index", row=row, column=column)
        return self._element(row, column)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, Index):
            return self._element(key.row, key.column)
        if isinstance(key, Unbounded):
            raise UnboundedIndexError("The unbounded end index does not address an element")
        if isinstance(key, tuple) and len(key) == 2:
            return self.value(*key)
        raise TypeError(f"Triangle indices must be Index or (row, column); got {key!r}")

    def _element(self, row: int, column: int) -> Any:
        if row < 0 or column < 0 or column > row:
            return self.ops.zero
        if column == 0 or column == row:
            return self.base
        row, column = _fold(row, column)
        with self._cache.guard():
            cached = self._cache.lookup(row, column)
            if cached is not MISSING:
                return cached
            scratch: Scratch = None if self.config.write_back else {}
            if self.config.uses_recursion(row):
                return self._recurse(row, column, scratch)
            logger.debug("Resolving (%d, %d) with the work-queue fill", row, column)
            return self._fill(row, column, scratch)

    def _known(self, row: int, column: int, scratch: Scratch) -> Any:
        """Value at ``(row, column)`` if it needs no computation, else ``MISSING``."""
        if row < 0 or column < 0 or column > row:
            return self.ops.zero
        if column == 0 or column == row:
            return self.base
        row, column = _fold(row, column)
        if scratch is not None:
            value = scratch.get((row, column), MISSING)
            if value is not MISSING:
                return value
        return self._cache.peek(row, column, MISSING)

    def _remember(self, row: int, column: int, value: Any, scratch: Scratch) -> None:
        if scratch is None:
            self._cache.store(row, column, value)
        else:
            scratch[(row, column)] = value

    def _recurse(self, row: int, column: int, scratch: Scratch) -> Any:
        lhs = self._known(row - 1, column, scratch)
        if lhs is MISSING:
            lhs = self._recurse(*_fold(row - 1, column), scratch)
        rhs = self._known(row - 1, column - 1, scratch)
        if rhs is MISSING:
            rhs = self._recurse(*_fold(row - 1, column - 1), scratch)
        total = lhs + rhs
        self._remember(row, column, total, scratch)
        return total

    def _fill(self, row: int, column: int, scratch: Scratch) -> Any:
        pending = [(row, column)]
        while pending:
            r, c = pending[-1]
            if self._known(r, c, scratch) is not MISSING:
                pending.pop()
                continue
            lhs = self._known(r - 1, c, scratch)
            rhs = self._known(r - 1, c - 1, scratch)
            if lhs is MISSING or rhs is MISSING:
                if lhs is MISSING:
                    pending.append(_fold(r - 1, c))
                if rhs is MISSING:
                    pending.append(_fold(r - 1, c - 1))
                continue
            pending.pop()
            self._remember(r, c, lhs + rhs, scratch)
        return self._known(row, column, scratch)

    def row(self, row: int) -> List[Any]:
        """All elements of ``row``, left to right."""
        row = operator.index(row)
        if row < 0:
            raise InvalidIndex("A row must have a non-negative index", row=row)
        left = [self._element(row, column) for column in range(row // 2 + 1)]
        right = left[: (row + 1) // 2][::-1]
        return left + right

    def to_array(self, rows: int, dtype: Any = None) -> np.ndarray:
        """Materialise rows ``0..rows-1`` as a lower-triangular ``(rows, rows)`` array."""
        rows = operator.index(rows)
        if rows < 0:
            raise ValueError("rows must be non-negative")
        target = np.dtype(dtype) if dtype is not None else self._array_dtype(rows)
        out = np.zeros((rows, rows), dtype=target)
        for r in range(rows):
            out[r, : r + 1] = self.row(r)
        return out

    def _array_dtype(self, rows: int) -> np.dtype:
        if self.ops.dtype is not None:
            return self.ops.dtype
        if self.ops.kind is ElementKind.INTEGER:
            if rows == 0:
                return np.dtype(np.int64)
            peak = self._element(rows - 1, (rows - 1) // 2)
            info = np.iinfo(np.int64)
            return np.dtype(np.int64) if info.min <= peak <= info.max else np.dtype(object)
        if np.ndim(self.base) != 0:
            raise UnsupportedElement("Only scalar elements can be materialised as an array")
        return np.asarray(self.base).dtype

    # Sums --------------------------------------------------------------------

    def sum_of_row(self, row: int) -> Any:
        """Sum of every element of ``row`` (zero for a negative row)."""
        return row_sum(self, operator.index(row))

    def plan_sum(self, columns: Any, row: int) -> SumPlan:
        row = operator.index(row)
        return plan_range_sum(
            columns,
            row,
            self.ops,
            row_sum_available=self._row_sum_available(row),
        )

    def sum_of_columns(self, columns: Any, row: int) -> Any:
        """Sum of the elements of ``row`` at ``columns``.

        Columns outside the row are ignored. ``columns`` may be a ``range``,
        a ``slice``, a closed ``(first, last)`` pair or a ``ColumnRange``.
        """
        return range_sum(self, self.plan_sum(columns, row))

    def explain_sum(self, columns: Any, row: int) -> str:
        return self.plan_sum(columns, row).explain()

    def _row_sum_available(self, row: int) -> bool:
        if self.config.overflow == "wrap":
            return True
        limit = self.ops.max_shift_row(self.base)
        return limit is None or row <= limit

    # Cache -------------------------------------------------------------------

    def cache_stats(self) -> CacheStats:
        return self._cache.stats()

    def clear_cache(self) -> None:
        self._cache.clear()

    def cached_coordinates(self) -> FrozenSet[Tuple[int, int]]:
        return frozenset(self._cache)

    # Traversal ---------------------------------------------------------------

    def __iter__(self) -> TriangleIterator:
        return TriangleIterator(self)

    def view(self) -> TriangleView:
        return TriangleView(self)
