"""Point reflection: rotate one point 180 degrees about another.

Also holds the line-oriented input and output shared by the package's commands.
"""

from __future__ import annotations

import argparse
import contextlib
import os
import sys
from typing import Iterable, Iterator, Sequence


def find_point(px: int, py: int, qx: int, qy: int) -> tuple[int, int]:
    """Return the reflection of point (px, py) through point (qx, qy)."""
    return 2 * qx - px, 2 * qy - py


def _queries() -> Iterator[str]:
    """Yield the lines that follow a leading count line on standard input."""
    lines = iter(sys.stdin)
    first = next(lines, None)
    if first is None:
        raise ValueError("missing query count")
    for _ in range(int(first)):
        line = next(lines, None)
        if line is None:
            raise ValueError("fewer input lines than the query count")
        yield line


def _emit(answers: Iterable[object]) -> None:
    """Write one answer per line to $OUTPUT_PATH, or to stdout if it is unset."""
    path = os.environ.get("OUTPUT_PATH")
    target = (
        open(path, "w", encoding="utf-8")
        if path
        else contextlib.nullcontext(sys.stdout)
    )
    with target as out:
        for answer in answers:
            out.write(f"{answer}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Read point pairs from stdin and write each reflected point."""
    argparse.ArgumentParser(
        description="Reflect point p through point q for each input line."
    ).parse_args(argv)

    def reflect(line: str) -> str:
        px, py, qx, qy = (int(token) for token in line.split()[:4])
        return " ".join(str(value) for value in find_point(px, py, qx, qy))

    _emit(reflect(line) for line in _queries())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())