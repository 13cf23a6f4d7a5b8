"""Sum of a pair difference that ignores neighbouring values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def sum_of_pair_differences(values: Iterable[int]) -> int:
    """Sum d(a_i, a_j) over every pair i < j.

    d(x, y) is y - x when |x - y| > 1 and 0 otherwise. The result is an
    exact integer of any size.
    """
    total = 0
    prefix = 0
    seen: Counter = Counter()
    for position, value in enumerate(values):
        contribution = position * value - prefix
        # Earlier values one below contributed +1 each, one above -1 each; undo both.
        contribution -= seen[value - 1]
        contribution += seen[value + 1]
        total += contribution
        prefix += value
        seen[value] += 1
    return total