"""Branch and bound search over reduced cost matrices."""

from __future__ import annotations

from dataclasses import dataclass

from .problem import INF, Matrix, Solution


@dataclass
class _Node:
    matrix: Matrix
    cost: float
    vertex: int
    level: int
    path: tuple[tuple[int, int], ...]


def reduce_matrix(matrix: Matrix) -> tuple[Matrix, float]:
    """Subtract row then column minima; return the new matrix and their sum.

    Rows or columns that hold only missing edges are left alone and add
    nothing to the cost. The input is not modified.
    """
    reduced = [list(row) for row in matrix]

    row_mins = []
    for row in reduced:
        low = min(row, default=INF)
        row_mins.append(low)
        if low < INF:
            row[:] = [value - low if value < INF else value for value in row]

    col_mins = []
    for column_index, column in enumerate(list(zip(*reduced))):
        low = min(column)
        col_mins.append(low)
        if low < INF:
            for row in reduced:
                if row[column_index] < INF:
                    row[column_index] -= low

    cost = 0.0
    for column_low, row_low in zip(col_mins, row_mins):
        if column_low < INF:
            cost += column_low
        if row_low < INF:
            cost += row_low
    return reduced, cost


def _cheapest(live: list[_Node]) -> int:
    """Index of the cheapest live node; ties go to the most recently added."""
    best_index = None
    best_cost = INF
    for index, node in reversed(list(enumerate(live))):
        if node.cost < best_cost:
            best_cost = node.cost
            best_index = index
    if best_index is None:
        raise ValueError("no node with a finite bound is left")
    return best_index


def solve_branch_and_bound(matrix: Matrix) -> Solution:
    """Find a shortest tour from city 0 by least-cost branch and bound."""
    size = len(matrix)
    if size == 0:
        raise ValueError("the matrix is empty")
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")

    root = [list(row) for row in matrix]
    root[0][0] = INF
    root, cost = reduce_matrix(root)
    live = [_Node(root, cost, 0, 0, ())]

    while live:
        node = live.pop(_cheapest(live))
        if node.level == size - 1:
            path = node.path + ((node.vertex, 0),)
            return Solution(node.cost, tuple(start for start, _ in path) + (0,))

        for target, edge in enumerate(node.matrix[node.vertex]):
            if edge >= INF:
                continue
            child = [list(row) for row in node.matrix]
            child[node.vertex] = [INF] * size
            for row in child:
                row[target] = INF
            child[target][0] = INF
            child, bound = reduce_matrix(child)
            live.append(
                _Node(
                    child,
                    node.cost + edge + bound,
                    target,
                    node.level + 1,
                    node.path + ((node.vertex, target),),
                )
            )

    raise ValueError("the graph has no Hamiltonian cycle")