import itertools
import random

import pytest

from tspsolve.bruteforce import solve_bruteforce, tour_length
from tspsolve.problem import INF, random_matrix


def _uniform(size):
    return [[INF if row == column else 1.0 for column in range(size)] for row in range(size)]


def _int_matrix(size, seed):
    rng = random.Random(seed)
    return [
        [INF if row == column else float(rng.randint(1, 40)) for column in range(size)]
        for row in range(size)
    ]


def test_tour_length_uniform():
    assert tour_length(_uniform(4), (2, 1, 3)) == 4.0


def test_tour_length_with_missing_edge():
    matrix = _uniform(3)
    matrix[1][2] = INF
    assert tour_length(matrix, (1, 2)) == INF


def test_tour_length_reverse_of_symmetric_matrix_is_equal():
    matrix = _int_matrix(5, 1)
    symmetric = [
        [min(matrix[a][b], matrix[b][a]) for b in range(5)] for a in range(5)
    ]
    assert tour_length(symmetric, (1, 2, 3, 4)) == tour_length(symmetric, (4, 3, 2, 1))


@pytest.mark.parametrize("seed", range(4))
def test_solution_is_no_longer_than_any_tour(seed):
    matrix = _int_matrix(5, seed)
    solution = solve_bruteforce(matrix)
    assert all(
        solution.length <= tour_length(matrix, order)
        for order in itertools.permutations(range(1, 5))
    )
    assert tour_length(matrix, solution.tour[1:-1]) == solution.length


def test_length_is_truncated_to_whole_units():
    matrix = random_matrix(5, random.Random(2))
    solution = solve_bruteforce(matrix)
    exact = tour_length(matrix, solution.tour[1:-1])
    assert solution.length.is_integer()
    assert solution.length <= exact < solution.length + 1


def test_ties_keep_first_ordering():
    assert solve_bruteforce(_uniform(4)).tour == (0, 1, 2, 3, 0)


def test_two_cities():
    solution = solve_bruteforce([[INF, 3.0], [5.0, INF]])
    assert solution.tour == (0, 1, 0)
    assert solution.length == tour_length([[INF, 3.0], [5.0, INF]], (1,))


def test_tour_visits_every_city_once():
    solution = solve_bruteforce(_int_matrix(6, 8))
    assert solution.tour[0] == solution.tour[-1] == 0
    assert sorted(solution.tour[:-1]) == list(range(6))


def test_single_city_is_an_error():
    with pytest.raises(ValueError):
        solve_bruteforce([[INF]])


def test_no_edges_is_an_error():
    with pytest.raises(ValueError):
        solve_bruteforce([[INF] * 3 for _ in range(3)])


def test_non_square_is_an_error():
    with pytest.raises(ValueError):
        solve_bruteforce([[INF, 1.0, 2.0], [1.0, INF]])