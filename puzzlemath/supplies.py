"""Fewest supply drops covering every cell of an n by m grid."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .points import _emit


def game_with_cells(n: int, m: int) -> int:
    """Return the fewest packages that supply all bases on an n by m grid.

    A package dropped on a grid corner supplies the four cells that share it.
    """
    if n % 2 == 0 and m % 2 == 0:
        return n * m // 4
    if n % 2 == 0:
        return n * (m + 1) // 4
    if m % 2 == 0:
        return (n + 1) * m // 4
    return (n + 1) * (m + 1) // 4


def main(argv: Sequence[str] | None = None) -> int:
    """Read the grid size from stdin and write the number of packages."""
    argparse.ArgumentParser(
        description="Minimum packages to supply every base on a grid."
    ).parse_args(argv)
    n, m = (int(token) for token in sys.stdin.readline().split()[:2])
    _emit([game_with_cells(n, m)])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())