from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import numpy as np

from .core.config import TriangleConfig, load_config
from .core.exceptions import TriangleError
from .core.ranges import ColumnRange
from .core.triangle import Triangle

_DTYPES = (
    "int",
    "float",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
)


def _make_base(text: str, dtype: str) -> Any:
    if dtype == "float":
        return float(text)
    if dtype == "int":
        return int(text)
    return np.dtype(dtype).type(int(text))


def _build_triangle(args: argparse.Namespace) -> Triangle:
    config = load_config(args.config) if args.config is not None else TriangleConfig()
    return Triangle(_make_base(args.base, args.dtype), config=config)


def _plain(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


def _write_output(path: Path, table: np.ndarray) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if str(path).lower().endswith(".json"):
        rows = [[_plain(v) for v in row[: i + 1]] for i, row in enumerate(table)]
        path.write_text(json.dumps(rows, indent=2), encoding="utf-8")
    else:
        np.save(path, table, allow_pickle=table.dtype == object)


def _run(args: argparse.Namespace) -> None:
    triangle = _build_triangle(args)
    if args.cmd == "value":
        print(_plain(triangle.value(args.row, args.column)))
    elif args.cmd == "row":
        print(" ".join(str(_plain(v)) for v in triangle.row(args.row)))
    elif args.cmd == "row-sum":
        print(_plain(triangle.sum_of_row(args.row)))
    elif args.cmd == "range-sum":
        columns = ColumnRange.closed(args.first, args.last)
        print(_plain(triangle.sum_of_columns(columns, args.row)))
    elif args.cmd == "explain":
        plan = triangle.plan_sum(ColumnRange.closed(args.first, args.last), args.row)
        print(plan.explain())
        print(json.dumps(plan.manifest(), indent=2))
    elif args.cmd == "rows":
        if args.out is None:
            for r in range(args.count):
                print(" ".join(str(_plain(v)) for v in triangle.row(r)))
            return
        _write_output(args.out, triangle.to_array(args.count))


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--base", default="1", help="Value of the first and last columns (default: 1)")
    parser.add_argument(
        "--dtype",
        default="int",
        choices=_DTYPES,
        help="Element type (default: int, arbitrary precision)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional TOML/JSON file with triangle settings",
    )
    parser.add_argument("--verbose", action="store_true", help="Log evaluation details")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Arithmetic triangle utilities")
    subparsers = parser.add_subparsers(dest="cmd")

    value_parser = subparsers.add_parser("value", help="Print the element at ROW, COLUMN")
    value_parser.add_argument("row", type=int)
    value_parser.add_argument("column", type=int)

    row_parser = subparsers.add_parser("row", help="Print every element of ROW")
    row_parser.add_argument("row", type=int)

    row_sum_parser = subparsers.add_parser("row-sum", help="Print the sum of ROW")
    row_sum_parser.add_argument("row", type=int)

    range_parser = subparsers.add_parser(
        "range-sum", help="Print the sum of columns FIRST..LAST (inclusive) of ROW"
    )
    explain_parser = subparsers.add_parser(
        "explain", help="Show how the sum of columns FIRST..LAST of ROW is computed"
    )
    for sub in (range_parser, explain_parser):
        sub.add_argument("row", type=int)
        sub.add_argument("first", type=int)
        sub.add_argument("last", type=int)

    rows_parser = subparsers.add_parser("rows", help="Print or save the first COUNT rows")
    rows_parser.add_argument("count", type=int)
    rows_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Optional output path (.npy/.json). If omitted, prints the rows",
    )

    for sub in (value_parser, row_parser, row_sum_parser, range_parser, explain_parser, rows_parser):
        _add_common(sub)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.cmd is None:
        parser.print_help()
        return

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")
    try:
        _run(args)
    except TriangleError as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
