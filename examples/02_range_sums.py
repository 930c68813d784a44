"""Show which strategy each column-range sum takes."""

from arithtri import Triangle

triangle = Triangle()

for columns, row in [
    ((3, 3), 12),
    ((0, 12), 12),
    ((0, 1), 3),
    ((4, 7), 12),
    ((1, 11), 12),
    ((0, 2), 40),
    ((-5, 50), 12),
]:
    total = triangle.sum_of_columns(columns, row)
    print(f"{triangle.explain_sum(columns, row):<60} = {total}")

floats = Triangle(0.5)
plan = floats.plan_sum((1, 20), 20)
print(plan.manifest())
print(floats.sum_of_columns((1, 20), 20))
