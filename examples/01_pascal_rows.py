"""Print the first rows of the triangle and a few of its emergent patterns."""

from itertools import islice

from arithtri import Triangle

triangle = Triangle()

width = len(" ".join(str(v) for v in triangle.row(9)))
for row in range(10):
    print(" ".join(str(v) for v in triangle.row(row)).center(width))

# Row sums are powers of two; the second column counts the rows.
print("row sums:", [triangle.sum_of_row(row) for row in range(10)])
print("second column:", [triangle.value(row, 1) for row in range(1, 10)])

# Row-major enumeration is unbounded; take what you need.
print("first 15 elements:", list(islice(triangle, 15)))

table = triangle.to_array(8)
print(table)
