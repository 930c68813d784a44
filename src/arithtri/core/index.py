"""Row-major coordinates into the arithmetic triangle.

An :class:`Index` addresses ``(row, column)`` with ``0 <= column <= row``.
Indices order row-major, so stepping forward walks each row left to right
before moving down. Every index also has an *ordinal*, its position in that
walk (``row * (row + 1) // 2 + column``), which makes offsets and distances
O(1) instead of a step-by-step walk.

:data:`END` is the end marker of the (infinite) index space. It is a
distinct object rather than a very large coordinate, so no arithmetic is
ever performed on it by accident.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .exceptions import InvalidIndex, UnboundedIndexError


def triangular(n: int) -> int:
    """Number of elements in rows ``0..n-1``."""
    return n * (n + 1) // 2


@dataclass(frozen=True, order=True)
class Index:
    row: int
    column: int

    def __post_init__(self) -> None:
        row = operator.index(self.row)
        column = operator.index(self.column)
        if row < 0:
            raise InvalidIndex("A row must have a non-negative index", row=row, column=column)
        if column < 0:
            raise InvalidIndex(
                "A column must have a non-negative index", row=row, column=column
            )
        if column > row:
            raise InvalidIndex(f"Column {column} does not exist in row {row}", row=row, column=column)
        # normalise numpy integers and other index-likes to plain ints
        object.__setattr__(self, "row", row)
        object.__setattr__(self, "column", column)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Index":
        ordinal = operator.index(ordinal)
        if ordinal < 0:
            raise InvalidIndex(f"Ordinal {ordinal} precedes the first index")
        row = (math.isqrt(8 * ordinal + 1) - 1) // 2
        return cls(row, ordinal - triangular(row))

    @property
    def ordinal(self) -> int:
        return triangular(self.row) + self.column

    def next(self) -> "Index":
        """Return the following index, wrapping to the next row after the last column."""
        if self.column < self.row:
            return Index(self.row, self.column + 1)
        return Index(self.row + 1, 0)

    def previous(self) -> "Index":
        if self.column > 0:
            return Index(self.row, self.column - 1)
        if self.row == 0:
            raise InvalidIndex("Cannot step before the first index", row=0, column=0)
        return Index(self.row - 1, self.row - 1)

    def advanced(self, by: int) -> "Index":
        """Return the index ``by`` steps away (negative values step backwards)."""
        return Index.from_ordinal(self.ordinal + operator.index(by))

    def distance_to(self, other: "Position") -> int:
        if isinstance(other, Unbounded):
            raise UnboundedIndexError("Distance to the unbounded end index is infinite")
        return other.ordinal - self.ordinal

    def indexes_for_sum(self) -> Tuple[Optional["Index"], Optional["Index"]]:
        """Return the two parents ``(row-1, column)`` and ``(row-1, column-1)``.

        A parent that falls outside the triangle is returned as ``None`` and
        contributes the additive zero.
        """
        row = self.row - 1
        return _maybe_index(row, self.column), _maybe_index(row, self.column - 1)

    def is_column_first_or_last(self) -> bool:
        return self.column == 0 or self.column == self.row

    def mirrored(self) -> "Index":
        return Index(self.row, self.row - self.column)


class Unbounded:
    """End marker of the index space; compares greater than every :class:`Index`."""

    _instance: Optional["Unbounded"] = None

    def __new__(cls) -> "Unbounded":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END"

    def __reduce__(self):
        return (Unbounded, ())

    def __hash__(self) -> int:
        return hash(Unbounded)

    def __eq__(self, other: object) -> bool:
        return other is self

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (Index, Unbounded)):
            return False
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, (Index, Unbounded)):
            return other is self
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, (Index, Unbounded)):
            return other is not self
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, (Index, Unbounded)):
            return True
        return NotImplemented

    def next(self) -> "Unbounded":
        raise UnboundedIndexError("Cannot advance beyond the unbounded end index")

    def previous(self) -> Index:
        raise UnboundedIndexError("The unbounded end index has no predecessor")

    @property
    def ordinal(self) -> int:
        raise UnboundedIndexError("The unbounded end index has no ordinal")


END = Unbounded()
START = Index(0, 0)

Position = Union[Index, Unbounded]


def _maybe_index(row: int, column: int) -> Optional[Index]:
    if row < 0 or column < 0 or column > row:
        return None
    return Index(row, column)
