from __future__ import annotations

from typing import Optional


class TriangleError(Exception):
    """Base class for arithtri-specific exceptions."""


class InvalidIndex(TriangleError, ValueError):
    def __init__(
        self,
        message: str,
        *,
        row: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(f"{message}{_format_coordinate(row, column)}")
        self.row = row
        self.column = column


class TriangleOverflow(TriangleError, OverflowError):
    def __init__(
        self,
        message: str,
        *,
        row: Optional[int] = None,
        dtype: Optional[str] = None,
        bits: Optional[int] = None,
    ):
        detail = []
        if dtype is not None:
            detail.append(f"dtype={dtype}")
        if bits is not None:
            detail.append(f"bits={bits}")
        if row is not None:
            detail.append(f"row={row}")
        suffix = f" ({', '.join(detail)})" if detail else ""
        super().__init__(f"{message}{suffix}")
        self.row = row
        self.dtype = dtype
        self.bits = bits


class UnboundedIndexError(TriangleError, IndexError):
    pass


class UnsupportedElement(TriangleError, TypeError):
    pass


class ConfigError(TriangleError, ValueError):
    pass


def _format_coordinate(row: Optional[int], column: Optional[int]) -> str:
    if row is None and column is None:
        return ""
    parts = []
    if row is not None:
        parts.append(f"row {row}")
    if column is not None:
        parts.append(f"column {column}")
    return f" ({', '.join(parts)})"
