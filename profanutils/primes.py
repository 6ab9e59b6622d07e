"""Prime counting, used as a simple processor benchmark."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

DEFAULT_LIMIT = 15 * 1000 * 1000


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime, by trial division with the 6k +/- 1 pattern."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def count_primes(limit: int) -> int:
    """Return how many primes are below ``limit``."""
    return sum(1 for i in range(limit) if is_prime(i))


def main(argv: Sequence[str] | None = None) -> int:
    """Count primes below a limit and report how long it took."""
    parser = argparse.ArgumentParser(prog="perf", description="Time a prime count.")
    parser.add_argument("limit", nargs="?", type=int, default=DEFAULT_LIMIT)
    args = parser.parse_args(argv)
    print("Starting the performance test...")
    start = time.monotonic()
    count = count_primes(args.limit)
    elapsed = int(time.monotonic() - start)
    print(f"Find {count} prime numbers in {elapsed} seconds")
    return 0