"""Fenwick trees, graph bridges and cut vertices, grid diagonals, counting and geometry formulas."""

__version__ = "0.1.0"
__all__ = ["counting", "fenwick", "formulas", "graph", "grid", "pairs", "parallelogram"]