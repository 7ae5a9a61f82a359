"""Index of a target in a sorted list, or where it would be inserted."""

from __future__ import annotations

import argparse
import bisect
from typing import Sequence

from .points import _emit

_DEFAULT_NUMS = (1, 3, 5, 6)
_DEFAULT_TARGET = 5


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of target in sorted distinct nums, or its insertion index."""
    return bisect.bisect_left(nums, target)


def main(argv: Sequence[str] | None = None) -> int:
    """Write the search-insert position of a target within a list of numbers."""
    parser = argparse.ArgumentParser(
        description="Position of a target in a sorted list of distinct integers."
    )
    parser.add_argument("target", nargs="?", type=int, default=_DEFAULT_TARGET)
    parser.add_argument("nums", nargs="*", type=int)
    args = parser.parse_args(argv)
    nums = args.nums or list(_DEFAULT_NUMS)
    _emit([search_insert(nums, args.target)])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())