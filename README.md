# tspsolve

Find the shortest closed tour through every city of a small travelling-salesman
problem. Two exact methods are offered:

- **branch and bound**, using reduced cost matrices as lower bounds;
- **brute force**, trying every ordering of the cities.

Both methods start and end the tour at city `0`.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

Each method has its own command, and both take the same options:

```
tspsolve-branch -f values.txt      # solve the matrix stored in values.txt
tspsolve-branch -e                 # solve configuration.txt in the current directory
tspsolve-branch -n 10              # solve a random 10 x 10 matrix

tspsolve-bruteforce -f values.txt
tspsolve-bruteforce -e
tspsolve-bruteforce -n 8
```

Run without options, or with options it does not recognise, a command prints a
short usage summary and exits with status 0. If the matrix file cannot be
opened, a message saying so is printed, followed by the usage summary.

After the search the command prints the tour length, the order in which the
cities are visited and the time taken, in seconds and milliseconds. If the
matrix cannot be solved (for instance it is empty, not square, or has no tour
through every city), a line starting with `error:` is written to standard error
and the exit status is 1.

The random matrices of `-n` always use the same seed, so the same `n` gives the
same problem on every run. Each off-diagonal distance is a random integer
between 0 and 2^31 - 1 divided by 1000; the diagonal is `inf`.

The `tspsolve` command runs either method, chosen by name before the same
options:

```
tspsolve branch -n 10
tspsolve bruteforce -f values.txt
```

Without a valid method name it prints a usage line to standard error and exits
with status 2.

Brute force examines `(n - 1)!` tours, so keep `n` small with it.

## Matrix files

A matrix file holds one row per line, with the values separated by spaces. The
value in row `i`, column `j` is the cost of going from city `i` to city `j`.
Write `inf` where there is no road:

```
inf 20 30 10 11
15 inf 16 4 2
3 5 inf 2 4
19 6 18 inf 3
16 4 7 16 inf
```

The number of lines gives the number of cities. Each line must hold at least
that many values; any beyond that are ignored, and a line with too few raises
`ValueError`.

## Python

```python
from tspsolve.problem import parse_matrix, read_matrix
from tspsolve.branch import solve_branch_and_bound
from tspsolve.bruteforce import solve_bruteforce

matrix = read_matrix("values.txt")
best = solve_branch_and_bound(matrix)
same = solve_bruteforce(matrix)
print(best.length, best.tour)   # e.g. 28.0 (0, 3, 1, 4, 2, 0)
```

- `tspsolve.problem.parse_matrix(text)` reads the file format from a string;
  `read_matrix(path)` reads it from a file. Missing edges become `math.inf`.
- `tspsolve.problem.random_matrix(size, rng=None)` builds a random problem from
  a `random.Random` instance (a fixed seed when none is given).
- `tspsolve.problem.Solution` is a frozen dataclass with `length` and `tour`;
  the tour starts and ends with city `0`.
- `tspsolve.branch.reduce_matrix(matrix)` subtracts row and then column minima
  and returns the reduced matrix with the sum of the minima, leaving the input
  unchanged.
- `tspsolve.bruteforce.tour_length(matrix, order)` gives the length of the tour
  `0 -> order... -> 0`.

Both solvers raise `ValueError` for a matrix that is not square or has no tour
through every city. Brute force needs at least two cities, and it compares and
reports tour lengths truncated to whole units, so its length can differ from
the branch and bound one by a fraction when distances are not whole numbers.