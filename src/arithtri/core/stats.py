"""Lookup-count estimates for the row-sum and range-sum strategies.

A "lookup" is one value-engine read of an arbitrary column. Reads of the
first and last column are free (they are the base) and are not counted.
Counts are computed from run bounds, so planning never walks a row.
"""

from __future__ import annotations

from typing import Dict, Iterable

from .elements import ElementOps
from .ranges import SMALL_ROW_LIMIT, ColumnRange


def _charged(columns: ColumnRange, row: int) -> int:
    free = {0, row}
    return len(columns) - sum(1 for column in free if column in columns)


def row_sum_lookups(row: int, ops: ElementOps) -> int:
    if row < 0 or ops.is_integer or row < SMALL_ROW_LIMIT:
        return 0
    midpoint, remainder = divmod(row + 1, 2)
    return _charged(ColumnRange(0, midpoint + remainder), row)


def direct_lookups(columns: ColumnRange, row: int) -> int:
    return _charged(columns, row)


def complement_lookups(excluded: Iterable[ColumnRange], row: int, ops: ElementOps) -> int:
    return row_sum_lookups(row, ops) + sum(_charged(run, row) for run in excluded)


def compute_sum_stats(
    columns: ColumnRange,
    excluded: Iterable[ColumnRange],
    row: int,
    ops: ElementOps,
) -> Dict[str, int]:
    excluded = tuple(excluded)
    return {
        "columns": len(columns),
        "excluded": sum(len(run) for run in excluded),
        "direct_lookups": direct_lookups(columns, row),
        "complement_lookups": complement_lookups(excluded, row, ops),
        "row_sum_lookups": row_sum_lookups(row, ops),
    }
