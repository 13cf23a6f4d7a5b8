"""Anti-diagonal traversal of a grid and palindromic path repair."""

from __future__ import annotations

from collections.abc import Sequence


def _shape(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(grid)
    columns = len(grid[0]) if rows else 0
    if any(len(row) != columns for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, columns


def diagonals(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Group the cells by anti-diagonal (row + column), each in row order."""
    rows, columns = _shape(grid)
    if not rows or not columns:
        return []
    groups: list[list[int]] = [[] for _ in range(rows + columns - 1)]
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            groups[r + c].append(cell)
    return groups


def min_palindromic_path_changes(grid: Sequence[Sequence[int]]) -> int:
    """Fewest cells to flip so every right/down path reads as a palindrome.

    Cells equal to 0 count as zeros, anything else as ones. Paired
    anti-diagonals from both corners must agree; the middle one is free.
    """
    groups = diagonals(grid)
    changes = 0
    for front, back in zip(groups[: len(groups) // 2], reversed(groups)):
        cells = front + back
        zeros = sum(1 for cell in cells if cell == 0)
        changes += min(zeros, len(cells) - zeros)
    return changes