#!/usr/bin/env python3
"""
Evaluation-strategy benchmark for the arithmetic triangle.

Times cold lookups (fresh triangle per run) and warm lookups (cache already
filled) for the recursive and work-queue strategies, plus the read-only
configuration that never writes back to the cache, and a sweep of range
sums that exercises every dispatch branch.
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from arithtri import Triangle, TriangleConfig


@dataclass
class BenchmarkResult:
    name: str
    min_s: float
    mean_s: float
    iterations: int
    lookups_per_s: Optional[float]


def bench(
    fn: Callable[[], Any],
    *,
    iterations: int,
    warmup: int,
) -> Iterable[float]:
    timings = []
    for step in range(iterations + warmup):
        start = time.perf_counter()
        fn()
        elapsed = time.perf_counter() - start
        if step >= warmup:
            timings.append(elapsed)
    return timings


def _summarise(name: str, timings: list, lookups: int) -> BenchmarkResult:
    min_s = min(timings)
    mean_s = sum(timings) / len(timings)
    return BenchmarkResult(
        name=name,
        min_s=min_s,
        mean_s=mean_s,
        iterations=len(timings),
        lookups_per_s=lookups / min_s if min_s > 0 else None,
    )


def run_cold(name: str, config: TriangleConfig, *, row: int, iterations: int, warmup: int):
    columns = range(0, row // 2 + 1)

    def invoke():
        triangle = Triangle(config=config)
        for column in columns:
            triangle.value(row, column)

    timings = list(bench(invoke, iterations=iterations, warmup=warmup))
    return _summarise(f"cold/{name}", timings, len(columns))


def run_warm(name: str, config: TriangleConfig, *, row: int, iterations: int, warmup: int):
    triangle = Triangle(config=config)
    columns = range(0, row + 1)

    def invoke():
        for column in columns:
            triangle.value(row, column)

    timings = list(bench(invoke, iterations=iterations, warmup=warmup))
    return _summarise(f"warm/{name}", timings, len(columns))


def run_range_sums(*, row: int, iterations: int, warmup: int) -> BenchmarkResult:
    triangle = Triangle()
    ranges = [(first, last) for first in range(-2, row + 2, 3) for last in range(first, row + 3, 3)]

    def invoke():
        for columns in ranges:
            triangle.sum_of_columns(columns, row)

    timings = list(bench(invoke, iterations=iterations, warmup=warmup))
    return _summarise("range-sums", timings, len(ranges))


def format_results(results: Iterable[BenchmarkResult]) -> str:
    header = f"{'benchmark':<24} {'min (ms)':>12} {'mean (ms)':>12} {'iters':>8} {'lookups/s':>14}"
    rows = [header]
    for result in results:
        rate = result.lookups_per_s or math.nan
        rows.append(
            f"{result.name:<24} {result.min_s * 1e3:12.3f} {result.mean_s * 1e3:12.3f} "
            f"{result.iterations:8d} {rate:14.1f}"
        )
    return "\n".join(rows)


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark arithtri evaluation strategies and range-sum dispatch."
    )
    parser.add_argument("--row", type=int, default=200, help="Row to evaluate (default: 200).")
    parser.add_argument(
        "--iterations", type=int, default=10, help="Timed iterations per benchmark (default: 10)."
    )
    parser.add_argument(
        "--warmup", type=int, default=2, help="Warmup iterations to discard (default: 2)."
    )
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    if args.row < 0:
        print("--row must be non-negative", file=sys.stderr)
        return 1

    configs = {
        "recursive": TriangleConfig(strategy="recursive"),
        "iterative": TriangleConfig(strategy="iterative"),
        "read-only": TriangleConfig(write_back=False),
    }
    results = []
    for name, config in configs.items():
        results.append(
            run_cold(name, config, row=args.row, iterations=args.iterations, warmup=args.warmup)
        )
        results.append(
            run_warm(name, config, row=args.row, iterations=args.iterations, warmup=args.warmup)
        )
    results.append(run_range_sums(row=args.row, iterations=args.iterations, warmup=args.warmup))

    print(format_results(results))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
