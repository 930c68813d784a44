"""Row sums and column-range sums.

Range sums go through an explicit plan: :func:`plan_range_sum` classifies
the requested columns and picks a strategy, and :func:`range_sum` executes
it. Whatever the strategy, the result is the sum of ``value(row, c)`` over
the requested columns that exist in the row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Tuple

from .elements import ElementOps
from .ranges import SMALL_ROW_LIMIT, ColumnRange, RangeShape, classify_range, complement
from .stats import compute_sum_stats

if TYPE_CHECKING:
    from .triangle import Triangle

logger = logging.getLogger(__name__)


class SumStrategy(Enum):
    ZERO = "zero"
    LOOKUP = "lookup"
    ROW_SUM = "row_sum"
    DIRECT = "direct"
    COMPLEMENT = "complement"


_SHAPE_STRATEGY: Dict[RangeShape, SumStrategy] = {
    RangeShape.EMPTY: SumStrategy.ZERO,
    RangeShape.SINGLE: SumStrategy.LOOKUP,
    RangeShape.FULL_ROW: SumStrategy.ROW_SUM,
    RangeShape.SMALL_ROW: SumStrategy.DIRECT,
    RangeShape.INTERIOR: SumStrategy.DIRECT,
}


@dataclass(frozen=True)
class SumPlan:
    row: int
    shape: RangeShape
    strategy: SumStrategy
    columns: ColumnRange
    excluded: Tuple[int, ...] = ()
    stats: Dict[str, int] = field(default_factory=dict, compare=False)

    def manifest(self) -> Dict[str, Any]:
        return {
            "row": self.row,
            "shape": self.shape.value,
            "strategy": self.strategy.value,
            "columns": [self.columns.start, self.columns.stop],
            "excluded": list(self.excluded),
            "stats": dict(self.stats),
        }

    def explain(self) -> str:
        span = (
            "no columns"
            if self.columns.is_empty
            else f"columns {self.columns.first}..{self.columns.last}"
        )
        line = f"row {self.row}, {span}: {self.shape.value} -> {self.strategy.value}"
        if self.excluded:
            line += f" (excluding {', '.join(str(c) for c in self.excluded)})"
        return line


def row_sum(triangle: "Triangle", row: int) -> Any:
    """Sum of a whole row; ``base << row`` for integer elements."""
    ops = triangle.ops
    if row < 0:
        return ops.zero
    if ops.is_integer:
        return ops.shift(triangle.base, row, overflow=triangle.config.overflow)
    return row_sum_generic(triangle, row)


def row_sum_generic(triangle: "Triangle", row: int) -> Any:
    """Sum of a whole row for any additive element, reading half the row."""
    ops = triangle.ops
    if row < 0:
        return ops.zero
    if row == 0:
        return triangle.base
    if row < SMALL_ROW_LIMIT:
        return ops.double(row_sum_generic(triangle, row - 1))
    midpoint, remainder = divmod(row + 1, 2)
    half = ops.total(triangle.value(row, column) for column in range(midpoint))
    total = ops.double(half)
    if remainder:
        total = total + triangle.value(row, midpoint)
    return total


def plan_range_sum(
    columns: Any,
    row: int,
    ops: ElementOps,
    *,
    row_sum_available: bool = True,
) -> SumPlan:
    """Choose how to sum ``columns`` of ``row``.

    ``row_sum_available`` is false when the row sum itself cannot be formed
    (a fixed-width integer row sum that would overflow under the ``raise``
    policy); the complement strategy is then never chosen.
    """
    shape, clipped = classify_range(columns, row)
    excluded: Tuple[int, ...] = ()
    if shape is RangeShape.EXTERIOR:
        runs = complement(clipped, row)
        stats = compute_sum_stats(clipped, runs, row, ops)
        strategy = _exterior_strategy(stats, ops, row_sum_available)
        if strategy is SumStrategy.COMPLEMENT:
            # cheaper than direct, so the runs are short
            excluded = tuple(column for run in runs for column in run)
    else:
        stats = compute_sum_stats(clipped, (), row, ops)
        strategy = _SHAPE_STRATEGY[shape]
    return SumPlan(
        row=row,
        shape=shape,
        strategy=strategy,
        columns=clipped,
        excluded=excluded,
        stats=stats,
    )


def _exterior_strategy(
    stats: Dict[str, int],
    ops: ElementOps,
    row_sum_available: bool,
) -> SumStrategy:
    if not ops.supports_subtraction or not row_sum_available:
        return SumStrategy.DIRECT
    if stats["complement_lookups"] < stats["direct_lookups"]:
        return SumStrategy.COMPLEMENT
    return SumStrategy.DIRECT


def _sum_columns(triangle: "Triangle", row: int, columns) -> Any:
    return triangle.ops.total(triangle.value(row, column) for column in columns)


def _run_zero(triangle: "Triangle", plan: SumPlan) -> Any:
    return triangle.ops.zero


def _run_lookup(triangle: "Triangle", plan: SumPlan) -> Any:
    return triangle.value(plan.row, plan.columns.start)


def _run_row_sum(triangle: "Triangle", plan: SumPlan) -> Any:
    return row_sum(triangle, plan.row)


def _run_direct(triangle: "Triangle", plan: SumPlan) -> Any:
    return _sum_columns(triangle, plan.row, plan.columns)


def _run_complement(triangle: "Triangle", plan: SumPlan) -> Any:
    total = row_sum(triangle, plan.row)
    return total - _sum_columns(triangle, plan.row, plan.excluded)


_EXECUTORS: Dict[SumStrategy, Callable[["Triangle", SumPlan], Any]] = {
    SumStrategy.ZERO: _run_zero,
    SumStrategy.LOOKUP: _run_lookup,
    SumStrategy.ROW_SUM: _run_row_sum,
    SumStrategy.DIRECT: _run_direct,
    SumStrategy.COMPLEMENT: _run_complement,
}


def range_sum(triangle: "Triangle", plan: SumPlan) -> Any:
    logger.debug("Range sum %s", plan.explain())
    return _EXECUTORS[plan.strategy](triangle, plan)
