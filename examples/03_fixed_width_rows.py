"""Fixed-width numpy elements: strict and wrapping row sums."""

import numpy as np

from arithtri import Triangle, TriangleConfig, TriangleOverflow

strict = Triangle(np.int16(1))
print("int16 row 14 sum:", strict.sum_of_row(14))
try:
    strict.sum_of_row(15)
except TriangleOverflow as exc:
    print("overflow:", exc)

wrapping = Triangle(np.int16(1), config=TriangleConfig(overflow="wrap"))
print("int16 row 15 sum (wrapped):", wrapping.sum_of_row(15))

deep = Triangle(config=TriangleConfig(strategy="iterative"))
print("C(10000, 3) =", deep.value(10_000, 3))
print("cache:", deep.cache_stats())
