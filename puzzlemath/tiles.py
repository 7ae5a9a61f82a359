"""Times at which two squares sliding along y = x overlap by a given area."""

from __future__ import annotations

import argparse
import contextlib
import math
import os
import sys
from typing import IO, ContextManager, Iterable, Sequence


def moving_tiles(l: int, s1: int, s2: int, queries: Iterable[int]) -> list[float]:
    """Return, for each area in queries, when the two tiles overlap by that area.

    Both squares have side l and move along y = x with speeds s1 and s2.
    """
    speed = abs(s1 - s2)
    if speed == 0:
        raise ValueError("tiles moving at the same speed never change overlap")
    diagonal = math.sqrt(2) * l
    return [(diagonal - math.sqrt(2 * area)) / speed for area in queries]


def _open_output() -> ContextManager[IO[str]]:
    path = os.environ.get("OUTPUT_PATH")
    if path:
        return open(path, "w", encoding="utf-8")
    return contextlib.nullcontext(sys.stdout)


def main(argv: Sequence[str] | None = None) -> int:
    """Read tile parameters and area queries from stdin and write each time."""
    argparse.ArgumentParser(
        description="Time at which two moving tiles overlap by each queried area."
    ).parse_args(argv)
    lines = iter(sys.stdin)
    l, s1, s2 = (int(token) for token in next(lines).split()[:3])
    count = int(next(lines))
    queries = [int(next(lines)) for _ in range(count)]
    with _open_output() as out:
        for time in moving_tiles(l, s1, s2, queries):
            out.write(f"{time:.15g}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())