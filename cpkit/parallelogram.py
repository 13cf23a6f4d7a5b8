"""Counting parallelograms among points through shared diagonal midpoints."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import combinations


def count_parallelograms(points: Iterable[tuple[int, int]]) -> int:
    """Count parallelograms with vertices among the points.

    Two pairs of points whose midpoints coincide are the diagonals of one
    parallelogram. Points are taken as given; with three collinear points
    degenerate figures are counted too.
    """
    midpoints = Counter(
        (ax + bx, ay + by) for (ax, ay), (bx, by) in combinations(list(points), 2)
    )
    return sum(count * (count - 1) // 2 for count in midpoints.values())