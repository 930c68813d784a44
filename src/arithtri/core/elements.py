"""Arithmetic over triangle elements.

The triangle only needs an additive identity and ``+``. Integer bases unlock
the ``base << row`` row-sum shortcut; numpy integer scalars are fixed width,
so that shortcut is checked against ``numpy.iinfo`` and either raises or
wraps the way numpy's own integer arithmetic does.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import numpy as np

from .exceptions import TriangleOverflow, UnsupportedElement

logger = logging.getLogger(__name__)

UNSET = object()
_NO_DIFFERENCE = object()


class ElementKind(Enum):
    INTEGER = "integer"  # arbitrary precision Python int
    FIXED_WIDTH = "fixed_width"  # numpy integer scalar
    GENERIC = "generic"


def element_kind(value: Any) -> ElementKind:
    if isinstance(value, np.integer):
        return ElementKind.FIXED_WIDTH
    if isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_)):
        return ElementKind.INTEGER
    return ElementKind.GENERIC


@dataclass(frozen=True)
class ElementOps:
    kind: ElementKind
    zero: Any
    supports_subtraction: bool
    dtype: Optional[np.dtype] = None

    @classmethod
    def for_base(cls, base: Any, zero: Any = UNSET) -> "ElementOps":
        kind = element_kind(base)
        dtype = np.dtype(type(base)) if kind is ElementKind.FIXED_WIDTH else None
        difference = _difference(base)
        subtracts = difference is not _NO_DIFFERENCE
        if zero is UNSET:
            zero = difference if subtracts else _default_zero(base)
        return cls(kind=kind, zero=zero, supports_subtraction=subtracts, dtype=dtype)

    @property
    def is_integer(self) -> bool:
        return self.kind is not ElementKind.GENERIC

    @property
    def dtype_name(self) -> str:
        if self.dtype is not None:
            return self.dtype.name
        return self.kind.value

    def double(self, value: Any) -> Any:
        return value + value

    def total(self, values) -> Any:
        result = self.zero
        for value in values:
            result = result + value
        return result

    def shift(self, base: Any, row: int, *, overflow: str = "raise") -> Any:
        """Return ``base * 2**row`` for integer elements."""
        if self.kind is ElementKind.INTEGER:
            return base << row
        if self.kind is not ElementKind.FIXED_WIDTH:
            raise UnsupportedElement(
                f"Shift requires an integer element; got {type(base).__name__}"
            )
        info = np.iinfo(self.dtype)
        exact = int(base) << row
        if info.min <= exact <= info.max:
            return self.dtype.type(exact)
        if overflow == "raise":
            raise TriangleOverflow(
                "Row sum exceeds the representable range of the element type",
                row=row,
                dtype=self.dtype.name,
                bits=info.bits,
            )
        logger.warning(
            "Row sum for row %d wraps around %s (%d bits)", row, self.dtype.name, info.bits
        )
        span = 1 << info.bits
        return self.dtype.type((exact - info.min) % span + info.min)

    def max_shift_row(self, base: Any) -> Optional[int]:
        """Largest row whose integer row sum still fits, ``None`` when unbounded."""
        if self.kind is not ElementKind.FIXED_WIDTH:
            return None
        value = int(base)
        if value == 0:
            return None
        info = np.iinfo(self.dtype)
        limit = info.max if value > 0 else -info.min
        magnitude = abs(value)
        row = 0
        while magnitude << (row + 1) <= limit:
            row += 1
        return row


def _difference(base: Any) -> Any:
    try:
        return base - base
    except TypeError:
        return _NO_DIFFERENCE


def _default_zero(base: Any) -> Any:
    try:
        return type(base)()
    except TypeError as exc:
        raise UnsupportedElement(
            f"Cannot derive an additive zero for {type(base).__name__}; pass zero= explicitly"
        ) from exc
