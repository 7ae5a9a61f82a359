[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlemath"
version = "0.1.0"
description = "Small solvers for classic math puzzles: point reflection, sock drawing, prime factors, supply drops and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "puzzles", "geometry", "primes", "combinatorics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puzzlemath-find-point = "puzzlemath.points:main"
puzzlemath-maximum-draws = "puzzlemath.socks:main"
puzzlemath-prime-count = "puzzlemath.primes:main"
puzzlemath-game-with-cells = "puzzlemath.supplies:main"
puzzlemath-summing-series = "puzzlemath.series:main"
puzzlemath-moving-tiles = "puzzlemath.tiles:main"
puzzlemath-search-insert = "puzzlemath.search:main"
puzzlemath-connecting-towns = "puzzlemath.routes:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlemath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
