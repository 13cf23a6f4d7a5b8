"""Counting sequences whose floor-quotient minimum equals a threshold."""

from __future__ import annotations

from collections.abc import Iterable
from math import prod

MOD = 100_000_007


def prime_exponents(number: int) -> list[int]:
    """Exponents of the prime factorisation of number, in increasing prime order."""
    if number < 1:
        raise ValueError(f"number must be positive, got {number}")
    exponents = []
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            count = 0
            while number % divisor == 0:
                number //= divisor
                count += 1
            exponents.append(count)
        divisor += 1
    if number > 1:
        exponents.append(1)
    return exponents


def _check_threshold(threshold: int) -> None:
    if threshold < 1:
        raise ValueError(f"threshold must be at least 1, got {threshold}")


def count_at_least(exponents: Iterable[int], threshold: int) -> int:
    """Count sequences f with min(e_i // f_i) >= threshold, modulo MOD.

    A zero f_i is taken to leave its term unbounded.
    """
    _check_threshold(threshold)
    return prod((exponent // threshold + 1) % MOD for exponent in exponents) % MOD


def count_exactly(exponents: Iterable[int], threshold: int) -> int:
    """Count sequences f with min(e_i // f_i) == threshold, modulo MOD."""
    _check_threshold(threshold)
    values = list(exponents)
    return (count_at_least(values, threshold) - count_at_least(values, threshold + 1)) % MOD


def count_sequences(number: int, power: int, threshold: int) -> int:
    """Solve the count for the exponents of number ** power."""
    if power < 0:
        raise ValueError(f"power must be non-negative, got {power}")
    return count_exactly([exponent * power for exponent in prime_exponents(number)], threshold)