"""Exact travelling-salesman solvers: branch and bound and exhaustive search."""

__version__ = "0.1.0"