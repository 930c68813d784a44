"""Column ranges and the shape classification used by range sums."""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Tuple

# Rows shorter than this have no interior: every column is 0, 1, row-1 or row.
SMALL_ROW_LIMIT = 4
INTERIOR_MARGIN = 2


@dataclass(frozen=True)
class ColumnRange:
    """Half-open run of columns ``[start, stop)``."""

    start: int
    stop: int

    def __post_init__(self) -> None:
        start = operator.index(self.start)
        stop = operator.index(self.stop)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "stop", max(start, stop))

    @classmethod
    def closed(cls, first: int, last: int) -> "ColumnRange":
        return cls(first, operator.index(last) + 1)

    @classmethod
    def full(cls, row: int) -> "ColumnRange":
        return cls(0, row + 1)

    @property
    def is_empty(self) -> bool:
        return self.stop <= self.start

    @property
    def first(self) -> Optional[int]:
        return None if self.is_empty else self.start

    @property
    def last(self) -> Optional[int]:
        return None if self.is_empty else self.stop - 1

    def clipped(self, row: int) -> "ColumnRange":
        start = max(self.start, 0)
        stop = min(self.stop, max(row + 1, 0))
        return ColumnRange(start, max(start, stop))

    def covers(self, other: "ColumnRange") -> bool:
        if other.is_empty:
            return False
        return self.start <= other.start and other.stop <= self.stop

    def __contains__(self, column: object) -> bool:
        if not isinstance(column, numbers.Integral):
            return False
        return self.start <= column < self.stop

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.stop))

    def __len__(self) -> int:
        return self.stop - self.start


class RangeShape(Enum):
    EMPTY = "empty"
    SINGLE = "single"
    FULL_ROW = "full_row"
    SMALL_ROW = "small_row"
    INTERIOR = "interior"
    EXTERIOR = "exterior"


def coerce_columns(columns: Any, row: Optional[int] = None) -> ColumnRange:
    """Convert a ``range``, ``slice``, closed ``(first, last)`` pair or
    :class:`ColumnRange` into a :class:`ColumnRange`.

    Slice bounds are absolute columns (negative values are not counted from
    the end of the row); an open ``stop`` runs to the end of ``row``.
    """
    if isinstance(columns, ColumnRange):
        return columns
    if isinstance(columns, range):
        if columns.step != 1:
            raise ValueError(f"Column ranges must have step 1; got {columns.step}")
        return ColumnRange(columns.start, columns.stop)
    if isinstance(columns, slice):
        if columns.step not in (None, 1):
            raise ValueError(f"Column slices must have step 1; got {columns.step}")
        start = 0 if columns.start is None else operator.index(columns.start)
        if columns.stop is None:
            if row is None:
                raise ValueError("An open-ended column slice needs a row to end at")
            return ColumnRange(start, max(start, row + 1))
        return ColumnRange(start, columns.stop)
    if isinstance(columns, (tuple, list)) and len(columns) == 2:
        first, last = columns
        return ColumnRange.closed(first, last)
    if isinstance(columns, numbers.Integral):
        return ColumnRange.closed(columns, columns)
    raise TypeError(
        "Columns must be a range, slice, (first, last) pair or ColumnRange; "
        f"got {type(columns).__name__}"
    )


def interior_band(row: int) -> ColumnRange:
    """Columns ``[2, row - 2)``, the part of a row summed element by element."""
    return ColumnRange(INTERIOR_MARGIN, max(INTERIOR_MARGIN, row - INTERIOR_MARGIN))


def classify_range(columns: Any, row: int) -> Tuple[RangeShape, ColumnRange]:
    """Return the shape of ``columns`` within ``row`` and the row-clipped range.

    Shapes are tested in a fixed order: empty, single column, the whole row,
    a row too short to have an interior, a range inside the interior band,
    and finally anything touching the boundary columns.
    """
    clipped = coerce_columns(columns, row).clipped(row)
    if clipped.is_empty:
        return RangeShape.EMPTY, clipped
    if len(clipped) == 1:
        return RangeShape.SINGLE, clipped
    if clipped == ColumnRange.full(row):
        return RangeShape.FULL_ROW, clipped
    if row < SMALL_ROW_LIMIT:
        return RangeShape.SMALL_ROW, clipped
    if interior_band(row).covers(clipped):
        return RangeShape.INTERIOR, clipped
    return RangeShape.EXTERIOR, clipped


def complement(clipped: ColumnRange, row: int) -> Tuple[ColumnRange, ColumnRange]:
    """In-row columns outside ``clipped``, as the runs before and after it."""
    return ColumnRange(0, clipped.start), ColumnRange(clipped.stop, row + 1)
