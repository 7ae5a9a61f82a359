"""Sum of the series whose n-th term is n*n - (n-1)*(n-1)."""

from __future__ import annotations

import argparse
from typing import Sequence

from .points import _emit, _queries

MODULUS = 1_000_000_007


def summing_series(n: int) -> int:
    """Return the sum of the first n terms modulo 10**9 + 7."""
    reduced = n % MODULUS
    return reduced * reduced % MODULUS


def main(argv: Sequence[str] | None = None) -> int:
    """Read term counts from stdin and write each series sum."""
    argparse.ArgumentParser(
        description="Sum of n*n - (n-1)*(n-1) series modulo 10**9+7."
    ).parse_args(argv)
    _emit(summing_series(int(line)) for line in _queries())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())