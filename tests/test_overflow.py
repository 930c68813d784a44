import logging

import numpy as np
import pytest

from arithtri import Triangle, TriangleConfig, TriangleOverflow
from arithtri.core.elements import ElementKind, ElementOps


def test_python_integers_never_overflow():
    assert Triangle().sum_of_row(200) == 2**200


def test_fixed_width_row_sum_within_range():
    t = Triangle(np.int8(1))
    total = t.sum_of_row(6)
    assert isinstance(total, np.int8)
    assert total == 64


def test_fixed_width_row_sum_raises_by_default():
    t = Triangle(np.int8(1))
    with pytest.raises(TriangleOverflow) as excinfo:
        t.sum_of_row(7)
    assert excinfo.value.bits == 8
    assert excinfo.value.dtype == "int8"
    assert excinfo.value.row == 7
    assert isinstance(excinfo.value, OverflowError)


def test_int64_row_sum_limit():
    t = Triangle(np.int64(1))
    assert t.sum_of_row(62) == 2**62
    with pytest.raises(TriangleOverflow):
        t.sum_of_row(63)


def test_wrap_policy_matches_twos_complement(caplog):
    t = Triangle(np.int8(1), config=TriangleConfig(overflow="wrap"))
    with caplog.at_level(logging.WARNING, logger="arithtri.core.elements"):
        assert t.sum_of_row(7) == np.int8(-128)
    assert "wraps around int8" in caplog.text
    assert t.sum_of_row(8) == np.int8(0)

    unsigned = Triangle(np.uint8(3), config=TriangleConfig(overflow="wrap"))
    assert unsigned.sum_of_row(7) == np.uint8((3 * 128) % 256)


def test_negative_fixed_width_base():
    t = Triangle(np.int8(-1))
    assert t.sum_of_row(7) == np.int8(-128)
    with pytest.raises(TriangleOverflow):
        t.sum_of_row(8)


def test_max_shift_row():
    assert ElementOps.for_base(np.int8(1)).max_shift_row(np.int8(1)) == 6
    assert ElementOps.for_base(np.int8(-1)).max_shift_row(np.int8(-1)) == 7
    assert ElementOps.for_base(np.uint16(3)).max_shift_row(np.uint16(3)) == 14
    assert ElementOps.for_base(5).max_shift_row(5) is None


def test_element_kinds():
    assert ElementOps.for_base(1).kind is ElementKind.INTEGER
    assert ElementOps.for_base(np.int16(1)).kind is ElementKind.FIXED_WIDTH
    assert ElementOps.for_base(1.5).kind is ElementKind.GENERIC
    assert ElementOps.for_base(True).kind is ElementKind.GENERIC
    assert ElementOps.for_base(np.int16(1)).dtype_name == "int16"
