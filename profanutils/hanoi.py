"""Solutions to the Tower of Hanoi puzzle."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from .cstdlib import atoi

Move = tuple[int, int, int]


def _moves(n: int, from_rod: int, to_rod: int, aux_rod: int) -> Iterator[Move]:
    if n == 1:
        yield (1, from_rod, to_rod)
        return
    yield from _moves(n - 1, from_rod, aux_rod, to_rod)
    yield (n, from_rod, to_rod)
    yield from _moves(n - 1, aux_rod, to_rod, from_rod)


def solve(n: int, from_rod: int = 0, to_rod: int = 1, aux_rod: int = 2) -> Iterator[Move]:
    """Yield ``(disk, from_rod, to_rod)`` moves that carry ``n`` disks to ``to_rod``.

    Raises ValueError when ``n`` is less than one.
    """
    if n < 1:
        raise ValueError(f"number of disks must be at least 1: {n}")
    return _moves(n, from_rod, to_rod, aux_rod)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves for a number of disks, asking for it when not given."""
    parser = argparse.ArgumentParser(prog="hanoi", description="Solve the Tower of Hanoi.")
    parser.add_argument("disks", nargs="?", help="number of disks")
    args = parser.parse_args(argv)
    text = args.disks if args.disks is not None else input("Enter number of disks: ")
    try:
        moves = solve(atoi(text))
    except ValueError as exc:
        print(f"hanoi: {exc}", file=sys.stderr)
        return 1
    for disk, src, dst in moves:
        print(f"Move disk {disk} from rod {src} to rod {dst}")
    return 0