"""Distance matrices, their text format and solver results."""

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

INF = math.inf
"""Distance used for a missing edge."""

RAND_MAX = 2**31 - 1
"""Largest raw value drawn for a random distance (divided by 1000)."""

Matrix = list[list[float]]

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class Solution:
    """A closed tour starting and ending at city 0, with its length."""

    length: float
    tour: tuple[int, ...]


def _parse_value(token: str) -> float:
    """Read one distance: ``inf...`` is a missing edge, else the leading number."""
    if token.startswith("inf"):
        return INF
    match = _NUMBER.match(token)
    return float(match.group(1)) if match else 0.0


def parse_matrix(text: str) -> Matrix:
    """Parse a square distance matrix, one row per line.

    The number of lines fixes the size; each line must hold at least that many
    space separated values and any further values are ignored.
    """
    lines = text.splitlines()
    size = len(lines)
    matrix: Matrix = []
    for number, line in enumerate(lines, start=1):
        tokens = line.split()
        if len(tokens) < size:
            raise ValueError(
                f"line {number} holds {len(tokens)} values, expected {size}"
            )
        matrix.append([_parse_value(token) for token in tokens[:size]])
    return matrix


def read_matrix(path: Union[str, PathLike]) -> Matrix:
    """Read a distance matrix from a text file."""
    with open(path, encoding="utf-8") as handle:
        return parse_matrix(handle.read())


def random_matrix(size: int, rng: random.Random | None = None) -> Matrix:
    """Build a random ``size`` x ``size`` matrix with no self loops."""
    if size < 0:
        raise ValueError("size must not be negative")
    if rng is None:
        rng = random.Random(1)
    return [
        [INF if row == column else rng.randint(0, RAND_MAX) / 1000.0
         for column in range(size)]
        for row in range(size)
    ]