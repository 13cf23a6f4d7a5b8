# cpkit

cpkit is a small library of algorithms and formulas that come up in competitive programming.
It has no runtime dependencies and needs Python 3.10 or newer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `cpkit.fenwick`

- `FenwickTree(size)` is a 1-indexed binary indexed tree of sums over the positions `1..size`. Its methods:
  - `prefix_sum(index)` returns the sum of positions `1..index`. It returns 0 when `index` is below 1 and raises `IndexError` when `index` is past the end.
  - `add(index, value)` adds `value` at one position. A position below 1 or past the end is ignored.
  - `range_add(left, right, value)` adds `value` to each position in `left..right`. Read the values back with `prefix_sum`.
  - `range_sum(left, right)` returns the sum of positions `left..right`.
  - `len(tree)` gives the size.
- `greater_before_counts(values, upper)` returns, for each value, how many earlier values are greater than or equal to it. Every value must lie in `1..upper`; otherwise it raises `ValueError`.
- `salary_queries(salaries, queries)` handles two kinds of query, after coordinate compression:
  - `("?", low, high)` counts the employees whose salary lies in `low..high`;
  - `("!", employee, salary)` changes the salary of a 1-indexed employee.

  It returns the answers to the `?` queries in order.
- `crayon_queries(operations)` handles three kinds of operation:
  - `("D", left, right)` draws a segment. Segments are numbered 1, 2, ... in the order they are drawn.
  - `("C", number)` cancels a drawn segment. An unknown number does nothing.
  - `("Q", left, right)` counts the live segments that intersect `left..right`.

  It returns the answers to the `Q` operations in order.

### `cpkit.graph`

Nodes are numbered `0..node_count - 1`. Edges are `(u, v)` pairs.

- `find_bridges(node_count, edges)` returns the bridges as sorted `(smaller, larger)` pairs. An edge that appears more than once is never a bridge.
- `bridge_components(node_count, edges)` returns the components that are left once every bridge is removed. Components are ordered by their smallest node. Within a component, nodes are listed in depth-first discovery order.
- `articulation_points(node_count, edges)` returns the cut vertices, sorted.

### `cpkit.pairs`

- `sum_of_pair_differences(values)` sums `d(a_i, a_j)` over all pairs `i < j`.
  - `d(x, y)` is `y - x` when `|x - y| > 1`.
  - `d(x, y)` is 0 when the two values differ by at most one.

  The result is an exact Python integer.

### `cpkit.parallelogram`

- `count_parallelograms(points)` counts the parallelograms whose vertices are among the given points. It matches pairs of points whose midpoints coincide.

### `cpkit.grid`

- `diagonals(grid)` groups the cells by anti-diagonal (`row + column`). Within each group, cells are in row order.
- `min_palindromic_path_changes(grid)` returns the fewest cell flips needed so that every right/down path reads as a palindrome. A cell equal to 0 counts as zero; any other cell counts as one.

### `cpkit.counting`

- `MOD` is the modulus, 100000007.
- `prime_exponents(number)` returns the exponents of the prime factorisation of `number`, in increasing prime order.
- `count_at_least(exponents, threshold)` counts sequences `f` with `min(e_i // f_i) >= threshold`, modulo `MOD`.
- `count_exactly(exponents, threshold)` counts sequences `f` with `min(e_i // f_i) == threshold`, modulo `MOD`.
- `count_sequences(number, power, threshold)` applies `count_exactly` to the exponents of `number ** power`.

### `cpkit.formulas`

Closed-form formulas for plane and solid geometry, covering:

- the sum of an integer range (`range_sum`);
- chords, arcs, sectors, segments and common chords of circles;
- kissing-circle curvatures;
- triangle area from sides (`heron_area`), from medians, and for equilateral and isosceles triangles;
- the inradius, circumradius and exradius of a triangle;
- polygon interior angles and diagonal counts;
- regular polygon sides, apothems, circumradii, central angles and areas;
- the volumes of a spherical cap, a sphere, a hemisphere, a cylinder, a cone, a triangular prism, a pyramid, a regular tetrahedron, a frustum and a torus.

Angles are in radians, except `regular_polygon_central_angle`, which returns degrees. Inputs that describe no valid figure raise `ValueError`. Examples are sides that form no triangle and circles that do not intersect.

## Example

```python
from cpkit.fenwick import FenwickTree
from cpkit.graph import find_bridges

tree = FenwickTree(10)
tree.add(3, 5)
tree.add(7, 2)
print(tree.range_sum(1, 5))   # 5

print(find_bridges(4, [(0, 1), (1, 2), (2, 0), (2, 3)]))   # [(2, 3)]
```

## What it does not do

cpkit is a library only. It has no command-line program, and nothing in it reads problem input from standard input or prints answers. You call its functions with Python values and they return Python values.