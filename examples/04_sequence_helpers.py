"""The small sequence helpers that ship alongside the triangle."""

from arithtri import Triangle, adjacent_pairs, partitioned, range_contains

row = Triangle().row(6)
print("row 6:", row)
print("neighbour differences:", [b - a for a, b in adjacent_pairs(row)])
print("ring pairs:", list(adjacent_pairs("abc", wrapping=True)))

evens, odds = partitioned(row, lambda v: v % 2 == 0)
print("even:", evens, "odd:", odds)
print("split at 3:", partitioned(row, up_to=3))

print("0..<7 contains 2...4:", range_contains(range(0, 7), (2, 4)))
print("0..<7 contains 5..<5:", range_contains(range(0, 7), range(5, 5)))
