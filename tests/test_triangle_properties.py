from math import comb

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from arithtri import RangeShape, Triangle

_TRIANGLE = Triangle()
_SCALED = Triangle(7)

rows = st.integers(min_value=0, max_value=80)


@st.composite
def coordinates(draw):
    row = draw(rows)
    column = draw(st.integers(min_value=0, max_value=row))
    return row, column


@st.composite
def column_ranges(draw):
    row = draw(rows)
    first = draw(st.integers(min_value=-5, max_value=row + 5))
    last = draw(st.integers(min_value=first - 1, max_value=row + 5))
    return row, first, last


@given(rows)
def test_boundary_columns_equal_base(row):
    assert _SCALED.value(row, 0) == _SCALED.value(row, row) == 7


@given(coordinates())
def test_horizontal_symmetry(coordinate):
    row, column = coordinate
    assert _TRIANGLE.value(row, column) == _TRIANGLE.value(row, row - column)


@given(coordinates())
def test_recurrence_holds_in_the_interior(coordinate):
    row, column = coordinate
    if 0 < column < row:
        expected = _TRIANGLE.value(row - 1, column) + _TRIANGLE.value(row - 1, column - 1)
        assert _TRIANGLE.value(row, column) == expected


@given(coordinates())
def test_values_are_scaled_binomials(coordinate):
    row, column = coordinate
    assert _SCALED.value(row, column) == 7 * comb(row, column)


@given(rows, st.integers(min_value=-10, max_value=-1))
def test_columns_outside_the_row_read_as_zero(row, offset):
    assert _TRIANGLE.value(row, offset) == 0
    assert _TRIANGLE.value(row, row - offset) == 0


@given(rows)
def test_row_sum_is_sum_of_elements(row):
    assert _SCALED.sum_of_row(row) == sum(_SCALED.row(row)) == 7 * 2**row


@settings(max_examples=300)
@given(column_ranges())
def test_range_sum_matches_clipped_sum(case):
    row, first, last = case
    expected = sum(_SCALED.value(row, c) for c in range(max(first, 0), min(last, row) + 1))
    assert _SCALED.sum_of_columns((first, last), row) == expected


@given(column_ranges(), st.floats(min_value=-4.0, max_value=4.0, allow_nan=False))
def test_range_sum_for_float_elements(case, base):
    row, first, last = case
    t = Triangle(base)
    expected = sum(base * comb(row, c) for c in range(max(first, 0), min(last, row) + 1))
    assert t.sum_of_columns((first, last), row) == pytest.approx(expected, rel=1e-9, abs=1e-6)


@given(column_ranges())
def test_plan_shape_is_consistent_with_clipped_columns(case):
    row, first, last = case
    plan = _TRIANGLE.plan_sum((first, last), row)
    if plan.shape is RangeShape.EMPTY:
        assert plan.columns.is_empty
    elif plan.shape is RangeShape.SINGLE:
        assert len(plan.columns) == 1
    elif plan.shape is RangeShape.FULL_ROW:
        assert (plan.columns.start, plan.columns.stop) == (0, row + 1)
    else:
        assert 0 <= plan.columns.start and plan.columns.stop <= row + 1
