"""Counting puzzles: pairs, budgets, clouds, candies, birds, socks and sums."""

from __future__ import annotations

from collections import Counter
from itertools import combinations, product
from typing import Sequence

_START_ENERGY = 100
_THUNDERHEAD = 1
_PICK_LIMIT = 100


def divisible_sum_pairs(values: Sequence[int], k: int) -> int:
    """Count the pairs ``i < j`` whose sum divides evenly by ``k``."""
    return sum(1 for x, y in combinations(values, 2) if (x + y) % k == 0)


def electronics_shop(keyboards: Sequence[int], drives: Sequence[int], b: int) -> int:
    """Return the most that one keyboard and one drive can cost within budget ``b``, or -1."""
    return max(
        (cost for cost in (x + y for x, y in product(keyboards, drives)) if cost <= b),
        default=-1,
    )


def jumping_on_clouds(c: Sequence[int], k: int) -> int:
    """Return the energy left after jumping ``k`` clouds at a time round to the start.

    Each jump costs one unit, and landing on a thunderhead costs two more.
    """
    if not c:
        raise ValueError("jumping_on_clouds needs at least one cloud")
    energy = _START_ENERGY
    position = 0
    while True:
        position = (position + k) % len(c)
        energy -= 1
        if c[position] == _THUNDERHEAD:
            energy -= 2
        if position == 0:
            return energy


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """Say for each kid whether the extra candies would give them the most."""
    most = max(candies, default=0)
    return [count + extra_candies >= most for count in candies]


def migratory_birds(arr: Sequence[int]) -> int:
    """Return the most frequently sighted bird type, the lowest on a tie; 1 if none."""
    counts = Counter(arr)
    if not counts:
        return 1
    return min(counts, key=lambda bird: (-counts[bird], bird))


def min_max_sum(arr: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest sums of all but one of the values."""
    if not arr:
        raise ValueError("min_max_sum needs at least one value")
    total = sum(arr)
    return total - max(arr), total - min(arr)


def picking_numbers(arr: Sequence[int]) -> int:
    """Return the size of the largest subset whose values differ by at most one.

    Values must lie in ``0..99``.
    """
    counts = [0] * _PICK_LIMIT
    for value in arr:
        if not 0 <= value < _PICK_LIMIT:
            raise ValueError(f"value out of range 0..{_PICK_LIMIT - 1}: {value}")
        counts[value] += 1
    return max(low + high for low, high in zip(counts, counts[1:]))


def plus_minus(arr: Sequence[int]) -> tuple[float, float, float]:
    """Return the ratios of positive, negative and zero values."""
    if not arr:
        raise ValueError("plus_minus needs at least one value")
    n = len(arr)
    positive = sum(1 for value in arr if value > 0)
    negative = sum(1 for value in arr if value < 0)
    zero = n - positive - negative
    return positive / n, negative / n, zero / n


def sock_merchant(arr: Sequence[int]) -> int:
    """Count the pairs of socks of matching colour."""
    return sum(count // 2 for count in Counter(arr).values())


def permutation_equation(p: Sequence[int]) -> list[int]:
    """For each ``x`` in ``1..n`` return the ``y`` with ``p[p[y]] == x`` (1-based)."""
    n = len(p)
    if sorted(p) != list(range(1, n + 1)):
        raise ValueError("p must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(p, start=1)}
    return [position[position[x]] for x in range(1, n + 1)]


def a_very_big_sum(values: Sequence[int]) -> int:
    """Return the sum of the values, however large."""
    return sum(values)