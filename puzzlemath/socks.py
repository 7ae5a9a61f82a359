"""Socks to draw to be sure of a matching pair."""

from __future__ import annotations

import argparse
from typing import Sequence

from .points import _emit, _queries


def maximum_draws(n: int) -> int:
    """Return the number of socks to draw from n colours to guarantee a pair."""
    return n + 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read colour counts from stdin and write the draws needed for each."""
    argparse.ArgumentParser(
        description="Socks to remove to be certain of a matching pair."
    ).parse_args(argv)
    _emit(maximum_draws(int(line)) for line in _queries())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())