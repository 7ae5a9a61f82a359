"""Largest count of distinct prime factors among numbers up to a limit."""

from __future__ import annotations

import argparse
from typing import Sequence

from .points import _emit, _queries


def is_prime(n: int) -> bool:
    """Trial-division primality test using odd divisors only.

    Intended for odd candidates of at least 3; even numbers are not rejected.
    """
    if n in (2, 3):
        return True
    divisor = 3
    while divisor * divisor <= n + 1:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def prime_count(n: int) -> int:
    """Return the most distinct prime factors of any integer in [1, n]."""
    if n <= 1:
        return 0
    if n <= 5:
        return 1
    product = 2
    count = 1
    candidate = 3
    while product * candidate <= n:
        if is_prime(candidate):
            product *= candidate
            count += 1
        candidate += 2
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Read limits from stdin and write the distinct prime factor count for each."""
    argparse.ArgumentParser(
        description="Maximum number of distinct prime factors up to n."
    ).parse_args(argv)
    _emit(prime_count(int(line)) for line in _queries())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())