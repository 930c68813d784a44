from fractions import Fraction
from math import comb

import numpy as np
import pytest

from arithtri import END, Index, InvalidIndex, Triangle, UnboundedIndexError
from tests._elements import Tally


def test_first_and_last_columns_are_base():
    t = Triangle()
    for row in (0, 1, 2, 3, 100):
        assert t.value(row, 0) == 1
        assert t.value(row, row) == 1


def test_second_and_penultimate_columns():
    t = Triangle()
    assert t.value(2, 1) == 2
    assert t.value(3, 1) == 3
    assert t.value(42, 1) == 42
    assert t.value(100, 1) == 100
    assert t.value(3, 2) == 3
    assert t.value(42, 41) == 42
    assert t.value(100, 99) == 100


def test_columns_in_the_middle():
    t = Triangle()
    assert t.value(6, 2) == 15
    assert t.value(6, 3) == 20
    assert t.value(6, 4) == 15
    assert t.value(7, 2) == 21
    assert t.value(7, 3) == 35
    assert t.value(7, 4) == 35
    assert t.value(7, 5) == 21


def test_large_rows_are_exact_integers():
    t = Triangle()
    assert t.value(200, 100) == comb(200, 100)


def test_columns_outside_the_row_are_zero():
    t = Triangle()
    assert t.value(5, -1) == 0
    assert t.value(5, 6) == 0
    assert t.value(0, 1) == 0


def test_negative_row_raises():
    t = Triangle()
    with pytest.raises(InvalidIndex) as excinfo:
        t.value(-1, 0)
    assert excinfo.value.row == -1
    assert isinstance(excinfo.value, ValueError)


def test_number_of_columns():
    assert Triangle.number_of_columns(0) == 1
    assert Triangle.number_of_columns(5) == 6
    assert Triangle.number_of_columns(-3) == 0


def test_subscript_forms_agree():
    t = Triangle()
    assert t[6, 3] == t[Index(6, 3)] == t.value(6, 3) == 20
    with pytest.raises(UnboundedIndexError):
        t[END]
    with pytest.raises(TypeError):
        t["6,3"]


def test_custom_base_scales_every_element():
    t = Triangle(3)
    assert t.value(6, 3) == 60
    assert t.value(9, 0) == 3


def test_float_and_fraction_elements():
    floats = Triangle(0.5)
    assert floats.value(6, 2) == pytest.approx(7.5)
    assert floats.zero == 0.0

    fractions = Triangle(Fraction(1, 3))
    assert fractions.value(4, 2) == Fraction(2, 1)
    assert fractions.value(4, 9) == Fraction(0)


def test_numpy_integer_elements_keep_their_dtype():
    t = Triangle(np.int32(2))
    value = t.value(10, 4)
    assert isinstance(value, np.int32)
    assert value == 2 * comb(10, 4)


def test_element_without_subtraction_needs_only_addition():
    t = Triangle(Tally(1), zero=Tally(0))
    assert t.value(6, 3) == Tally(20)
    assert t.value(6, 7) == Tally(0)


def test_row_lists_every_column():
    t = Triangle()
    assert t.row(0) == [1]
    assert t.row(1) == [1, 1]
    assert t.row(4) == [1, 4, 6, 4, 1]
    assert t.row(7) == [1, 7, 21, 35, 35, 21, 7, 1]
    with pytest.raises(InvalidIndex):
        t.row(-1)


def test_to_array_is_lower_triangular():
    table = Triangle().to_array(6)
    assert table.shape == (6, 6)
    assert table.dtype == np.int64
    assert table[4].tolist() == [1, 4, 6, 4, 1, 0]
    assert np.all(np.triu(table, k=1) == 0)


def test_to_array_falls_back_to_objects_for_huge_values():
    table = Triangle().to_array(70)
    assert table.dtype == object
    assert table[69, 34] == comb(69, 34)


def test_to_array_with_explicit_dtype():
    table = Triangle(0.25).to_array(4, dtype=np.float32)
    assert table.dtype == np.float32
    assert table[3].tolist() == [0.25, 0.75, 0.75, 0.25]
