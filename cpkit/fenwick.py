"""Fenwick (binary indexed) tree and a few query solvers built on it."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


class FenwickTree:
    """A 1-indexed Fenwick tree of sums over positions 1..size."""

    def __init__(self, size):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.size = size
        self._tree = [0] * (size + 1)

    def __len__(self):
        return self.size

    def prefix_sum(self, index):
        """Return the sum of positions 1..index; 0 when index is below 1."""
        if index > self.size:
            raise IndexError(f"index {index} beyond tree size {self.size}")
        total = 0
        while index >= 1:
            total += self._tree[index]
            index -= index & -index
        return total

    def add(self, index, value):
        """Add value at a position; positions below 1 or past the end are ignored."""
        if index <= 0:
            return
        while index <= self.size:
            self._tree[index] += value
            index += index & -index

    def range_add(self, left, right, value):
        """Add value to every position in left..right, read back with prefix_sum."""
        self.add(left, value)
        self.add(right + 1, -value)

    def range_sum(self, left, right):
        """Return the sum of positions left..right."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


def greater_before_counts(values: Iterable[int], upper: int) -> list[int]:
    """For each value, count the earlier values that are greater than or equal to it.

    Values must lie in 1..upper.
    """
    tree = FenwickTree(upper)
    counts = []
    for value in values:
        if not 1 <= value <= upper:
            raise ValueError(f"value {value} outside 1..{upper}")
        counts.append(tree.prefix_sum(upper) - tree.prefix_sum(value - 1))
        tree.add(value, 1)
    return counts


def salary_queries(salaries: Sequence[int], queries: Iterable[tuple[str, int, int]]) -> list[int]:
    """Answer salary range queries with point updates.

    Each query is ``("?", low, high)`` to count employees earning within
    low..high, or ``("!", employee, salary)`` to change the salary of the
    1-indexed employee. Returns the answers to the counting queries in order.
    """
    employees = list(salaries)
    parsed = list(queries)
    coordinates = set(employees)
    for kind, first, second in parsed:
        if kind == "?":
            coordinates.update((first, second))
        elif kind == "!":
            coordinates.add(second)
        else:
            raise ValueError(f"unknown query kind {kind!r}")

    rank = {value: position for position, value in enumerate(sorted(coordinates), start=1)}
    tree = FenwickTree(len(rank))
    ranked = [rank[salary] for salary in employees]
    for position in ranked:
        tree.add(position, 1)

    answers = []
    for kind, first, second in parsed:
        if kind == "?":
            answers.append(tree.range_sum(rank[first], rank[second]))
        else:
            if not 1 <= first <= len(ranked):
                raise IndexError(f"employee {first} outside 1..{len(ranked)}")
            tree.add(ranked[first - 1], -1)
            ranked[first - 1] = rank[second]
            tree.add(ranked[first - 1], 1)
    return answers


def crayon_queries(operations: Iterable[tuple]) -> list[int]:
    """Process segment draw, cancel and overlap-count operations.

    Operations are ``("D", left, right)`` to draw a segment (segments are
    numbered 1, 2, ... in drawing order), ``("C", number)`` to cancel a drawn
    segment, and ``("Q", left, right)`` to count the live segments that
    intersect left..right. Cancelling an unknown number does nothing.
    Returns the answers to the ``Q`` operations in order.
    """
    parsed = list(operations)
    coordinates = set()
    for operation in parsed:
        kind = operation[0]
        if kind in ("D", "Q"):
            coordinates.update(operation[1:3])
        elif kind != "C":
            raise ValueError(f"unknown operation kind {kind!r}")

    ordered = sorted(coordinates)

    def compress(value):
        return bisect_left(ordered, value) + 1

    starts = FenwickTree(len(ordered))
    ends = FenwickTree(len(ordered))
    drawn: dict[int, tuple[int, int]] = {}
    answers = []
    for operation in parsed:
        kind = operation[0]
        if kind == "D":
            left, right = compress(operation[1]), compress(operation[2])
            drawn[len(drawn) + 1] = (left, right)
            starts.add(left, 1)
            ends.add(right, 1)
        elif kind == "C":
            left, right = drawn.get(operation[1], (0, 0))
            starts.add(left, -1)
            ends.add(right, -1)
        else:
            left, right = compress(operation[1]), compress(operation[2])
            answers.append(starts.prefix_sum(right) - ends.prefix_sum(left - 1))
    return answers