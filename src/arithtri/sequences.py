"""Small sequence helpers used alongside the triangle.

None of these depend on :mod:`arithtri.core`.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union, overload

T = TypeVar("T")

_NOTHING = object()


class AdjacentPairs:
    """Pairs of each element with its successor.

    Iteration is lazy and works on any iterable, including infinite ones.
    When the base is a sized, indexable sequence the pairs also support
    ``len()``, integer indexing and ``reversed()``. With ``wrapping`` the
    last element is paired with the first as well.
    """

    def __init__(self, base: Iterable[T], wrapping: bool = False):
        self._base = base
        self.wrapping = bool(wrapping)

    def __iter__(self) -> Iterator[Tuple[T, T]]:
        iterator = iter(self._base)
        first = next(iterator, _NOTHING)
        if first is _NOTHING:
            return
        previous = first
        for current in iterator:
            yield previous, current
            previous = current
        if self.wrapping:
            yield previous, first

    def _sequence(self) -> Sequence:
        if not isinstance(self._base, Sequence):
            raise TypeError(
                f"{type(self._base).__name__} is not a sequence; adjacent pairs can only be iterated"
            )
        return self._base

    def __len__(self) -> int:
        count = len(self._sequence())
        if self.wrapping:
            return count
        return max(0, count - 1)

    def __getitem__(self, position: int) -> Tuple[T, T]:
        base = self._sequence()
        size = len(self)
        position = operator.index(position)
        if position < 0:
            position += size
        if not 0 <= position < size:
            raise IndexError("adjacent pair index out of range")
        second = position + 1
        if second == len(base):
            second = 0
        return base[position], base[second]

    def __reversed__(self) -> Iterator[Tuple[T, T]]:
        for position in range(len(self) - 1, -1, -1):
            yield self[position]

    def __repr__(self) -> str:
        return f"AdjacentPairs({self._base!r}, wrapping={self.wrapping})"


def adjacent_pairs(iterable: Iterable[T], wrapping: bool = False) -> AdjacentPairs:
    return AdjacentPairs(iterable, wrapping=wrapping)


@overload
def partitioned(items: Iterable[T], predicate: Callable[[T], Any]) -> Tuple[List[T], List[T]]: ...


@overload
def partitioned(items: Iterable[T], *, up_to: int) -> Tuple[List[T], List[T]]: ...


def partitioned(
    items: Iterable[T],
    predicate: Optional[Callable[[T], Any]] = None,
    *,
    up_to: Optional[int] = None,
) -> Tuple[List[T], List[T]]:
    """Split ``items`` in two, keeping the original order in each part.

    With a ``predicate`` the result is ``(matching, non_matching)``. With
    ``up_to`` it is ``(items[:up_to], items[up_to:])``.
    """
    if (predicate is None) == (up_to is None):
        raise TypeError("partitioned() takes exactly one of predicate or up_to")
    if up_to is not None:
        values = list(items)
        cut = operator.index(up_to)
        if not 0 <= cut <= len(values):
            raise IndexError(f"Cut index {cut} is outside 0..{len(values)}")
        return values[:cut], values[cut:]
    matching: List[T] = []
    non_matching: List[T] = []
    for item in items:
        (matching if predicate(item) else non_matching).append(item)
    return matching, non_matching


RangeLike = Union[range, Tuple[int, int]]


def _bounds(value: RangeLike) -> Tuple[int, int]:
    """Half-open ``(start, stop)`` of a unit-step range or closed pair."""
    if isinstance(value, range):
        if value.step != 1:
            raise ValueError(f"Only unit-step ranges are supported; got step {value.step}")
        return value.start, value.stop
    first, last = value
    return operator.index(first), operator.index(last) + 1


def range_contains(outer: RangeLike, inner: RangeLike) -> bool:
    """True when ``inner`` is non-empty and every value of it lies in ``outer``.

    Ranges are ``range`` objects (step 1) or closed ``(first, last)`` pairs.
    """
    inner_start, inner_stop = _bounds(inner)
    if inner_stop <= inner_start:
        return False
    outer_start, outer_stop = _bounds(outer)
    return outer_start <= inner_start and inner_stop <= outer_stop
