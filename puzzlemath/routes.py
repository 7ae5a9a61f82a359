"""Number of paths through a chain of cities, modulo 1234567."""

from __future__ import annotations

import argparse
import contextlib
import os
import sys
from typing import IO, ContextManager, Sequence

MODULUS = 1_234_567


def connecting_towns(n: int, routes: Sequence[int]) -> int:
    """Return the paths from the first to the n-th city modulo 1234567.

    routes[i] is the number of roads between city i and city i + 1.
    """
    legs = routes[: n - 1] if n > 1 else []
    if len(legs) < n - 1:
        raise ValueError(f"expected {n - 1} route counts, got {len(legs)}")
    total = 1
    for roads in legs:
        total = total * roads % MODULUS
    return total


def _open_output() -> ContextManager[IO[str]]:
    path = os.environ.get("OUTPUT_PATH")
    if path:
        return open(path, "w", encoding="utf-8")
    return contextlib.nullcontext(sys.stdout)


def main(argv: Sequence[str] | None = None) -> int:
    """Read city chains from stdin and write the path count for each."""
    argparse.ArgumentParser(
        description="Paths from the first city to the last, modulo 1234567."
    ).parse_args(argv)
    lines = iter(sys.stdin)
    count = int(next(lines))
    with _open_output() as out:
        for _ in range(count):
            n = int(next(lines))
            routes = [int(token) for token in next(lines).split()]
            out.write(f"{connecting_towns(n, routes)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())