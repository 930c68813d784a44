"""Row-major traversal of a triangle.

Iterating a triangle yields its elements forever: row 0, then row 1 left to
right, and so on. :class:`TriangleView` exposes the underlying index space
with an unbounded end marker, for code that wants collection-style
positions rather than a stream of values.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, Iterator, Optional

from .exceptions import UnboundedIndexError
from .index import END, START, Index, Position, Unbounded

if TYPE_CHECKING:
    from .triangle import Triangle


class TriangleIterator:
    """Single-pass iterator; ``index`` is the position of the next element."""

    def __init__(self, triangle: "Triangle", start: Index = START):
        self._triangle = triangle
        self.index = start

    def __iter__(self) -> "TriangleIterator":
        return self

    def __next__(self) -> Any:
        value = self._triangle[self.index]
        self.index = self.index.next()
        return value


class TriangleView:
    def __init__(self, triangle: "Triangle"):
        self._triangle = triangle

    @property
    def start_index(self) -> Index:
        return START

    @property
    def end_index(self) -> Unbounded:
        return END

    def __getitem__(self, position: Position) -> Any:
        return self._triangle[position]

    def __iter__(self) -> TriangleIterator:
        return TriangleIterator(self._triangle)

    def indices(self, start: Index = START) -> Iterator[Index]:
        position = start
        while True:
            yield position
            position = position.next()

    def index_after(self, position: Position) -> Index:
        return position.next()

    def index_before(self, position: Position) -> Index:
        return position.previous()

    def index(
        self,
        position: Position,
        offset: int,
        limit: Optional[Position] = None,
    ) -> Optional[Position]:
        """Return the index ``offset`` steps from ``position``.

        With a ``limit`` in the direction of travel, ``None`` is returned when
        the result would pass it. A limit behind ``position`` is ignored.
        """
        offset = operator.index(offset)
        if isinstance(position, Unbounded):
            if offset == 0:
                return position
            raise UnboundedIndexError("Cannot offset from the unbounded end index")
        if offset == 0:
            return position
        target = position.ordinal + offset
        if limit is not None and not isinstance(limit, Unbounded):
            if offset > 0 and limit >= position and target > limit.ordinal:
                return None
            if offset < 0 and limit <= position and target < limit.ordinal:
                return None
        return Index.from_ordinal(target)

    def distance(self, start: Position, end: Position) -> int:
        if isinstance(start, Unbounded):
            if isinstance(end, Unbounded):
                return 0
            raise UnboundedIndexError("Distance from the unbounded end index is infinite")
        return start.distance_to(end)
