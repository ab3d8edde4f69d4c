"""Command line front end for the two solvers."""

from __future__ import annotations

import random
import re
import sys
import time
from collections.abc import Callable, Sequence

from .branch import solve_branch_and_bound
from .bruteforce import solve_bruteforce
from .problem import Matrix, Solution, random_matrix, read_matrix

EMBEDDED_FILE = "configuration.txt"

_HEADERS = {
    "branch": "\n \033[0;33m--- Branch And Bound method ---\033[0m \n\n",
    "bruteforce": "\n \033[0;33m-----  Bruteforce method -----\033[0m \n\n",
}

_SIZE_LABELS = {
    "branch": "Size of graph : ",
    "bruteforce": "Size of graph  : ",
}

_SOLUTION_HEADS = {
    "branch": "\n\033[0;33mSolution :\033[0m\n\033[0;33m - Length :\033[0m "
    "{length:f}\n\033[0;33m - Path   :\033[0m ",
    "bruteforce": "\n\033[0;33mSolution :\033[0m \n\033[0;33m - Length :\033[0m "
    "{length:f}\n\033[0;33m - Path   : \033[0m",
}

_SOLVERS: dict[str, Callable[[Matrix], Solution]] = {
    "branch": solve_branch_and_bound,
    "bruteforce": solve_bruteforce,
}

_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _out(text: str) -> None:
    print(text, end="")


def _atoi(text: str) -> int:
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _usage(method: str) -> int:
    _out(
        "\033[0;35mCommand :\033[0m \n\n"
        f"\033[0;35m    With custom file :\033[0m         {method} -f values.txt\n"
        f"\033[0;35m    With embedded file  :\033[0m      {method} -e\n"
        f"\033[0;35m    With n * n random values :\033[0m {method} -n number\n\n"
    )
    return 0


def _print_solution(method: str, solution: Solution) -> None:
    _out(_SOLUTION_HEADS[method].format(length=solution.length))
    _out("".join(f"{city} - " for city in solution.tour[:-1]))
    _out("0\n\n")


def run(method: str, argv: Sequence[str]) -> int:
    """Run one solver with the given options; return the exit status."""
    if method not in _SOLVERS:
        raise ValueError(f"unknown method: {method!r}")
    _out(_HEADERS[method])

    args = list(argv)
    source = None
    size = 0
    if not args or len(args) > 2:
        return _usage(method)
    if len(args) == 1:
        if args[0] != "-e":
            return _usage(method)
        _out("You selected the \033[0;32membedded file\033[0m option.\n")
        source = EMBEDDED_FILE
    else:
        option, value = args
        if option.startswith("-f"):
            _out("You selected the \033[0;32mfile\033[0m option.\n")
            source = value
        elif option.startswith("-n"):
            _out("You selected the \033[0;32mrandom - n\033[0m option.\n")
            size = _atoi(value)
        else:
            return _usage(method)

    try:
        if source is not None:
            try:
                matrix = read_matrix(source)
            except OSError:
                _out("Erreur : Cannot read file with success \n")
                _out(
                    "\033[0;31mThe file does not exist.\033[0m \n"
                    "\033[0;34mHint : try the -e option !\033[0m\n\n"
                )
                return _usage(method)
            _out("Read file with success ! \n")
            _out("read data ..\n")
            _out(f"{_SIZE_LABELS[method]}{len(matrix)}\n")
        else:
            matrix = random_matrix(size, random.Random(1))

        start = time.monotonic_ns()
        solution = _SOLVERS[method](matrix)
        elapsed = time.monotonic_ns() - start
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    _print_solution(method, solution)
    _out(
        "\033[0;33mElapsed time :\033[0m \n"
        f" \033[0;33m- s      :\033[0m {elapsed / 1e9:f}\n"
        f" \033[0;33m- ms     :\033[0m {elapsed / 1e6:f}\n\n\n"
    )
    return 0


def branch_main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the branch and bound command."""
    return run("branch", sys.argv[1:] if argv is None else argv)


def bruteforce_main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the exhaustive search command."""
    return run("bruteforce", sys.argv[1:] if argv is None else argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point taking the method name as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in _SOLVERS:
        print(
            "usage: tspsolve {branch,bruteforce} [-e | -f FILE | -n NUMBER]",
            file=sys.stderr,
        )
        return 2
    return run(args[0], args[1:])