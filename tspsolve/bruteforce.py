"""Exhaustive search over every tour from city 0."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import pairwise

from .problem import INF, Matrix, Solution


def tour_length(matrix: Matrix, order: Sequence[int]) -> float:
    """Length of the tour 0 -> order... -> 0."""
    return sum(matrix[start][end] for start, end in pairwise((0, *order, 0)))


def _orderings(items: list[int], first: int = 0) -> Iterator[tuple[int, ...]]:
    """Yield every ordering of ``items`` in swap-recursion order."""
    if first >= len(items) - 1:
        yield tuple(items)
        return
    for index in range(first, len(items)):
        items[first], items[index] = items[index], items[first]
        yield from _orderings(items, first + 1)
        items[first], items[index] = items[index], items[first]


def _whole(value: float) -> float:
    return float(math.trunc(value)) if math.isfinite(value) else value


def solve_bruteforce(matrix: Matrix) -> Solution:
    """Try every tour from city 0 and keep the first shortest one.

    Tour lengths are compared and reported truncated to whole units.
    """
    size = len(matrix)
    if size < 2:
        raise ValueError("at least two cities are needed")
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")

    best = INF
    best_order = None
    for order in _orderings(list(range(1, size))):
        value = _whole(tour_length(matrix, order))
        if value < best:
            best = value
            best_order = order

    if best_order is None:
        raise ValueError("the graph has no Hamiltonian cycle")
    return Solution(best, (0, *best_order, 0))