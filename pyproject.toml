[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tspsolve"
version = "0.1.0"
description = "Exact travelling-salesman tours by branch and bound or exhaustive search"
requires-python = ">=3.10"
dependencies = []
keywords = ["tsp", "travelling salesman", "branch and bound", "brute force", "hamiltonian cycle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tspsolve = "tspsolve.cli:main"
tspsolve-branch = "tspsolve.cli:branch_main"
tspsolve-bruteforce = "tspsolve.cli:bruteforce_main"

[tool.hatch.build.targets.wheel]
packages = ["tspsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
