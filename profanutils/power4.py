"""Connect-four on an 8x8 grid, with a simple computer opponent."""

from __future__ import annotations

import random
from collections.abc import Iterator

SIZE = 8
EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2
_LINE = 4

_SYMBOLS = {EMPTY: " ", PLAYER_ONE: "@", PLAYER_TWO: "X"}


def piece_symbol(num: int) -> str:
    """Return the character that shows a cell: ``@``, ``X``, blank, or ``?``."""
    return _SYMBOLS.get(num, "?")


class Grid:
    """An 8x8 board stored as columns; row 0 is the top, row 7 the bottom."""

    def __init__(self) -> None:
        self.cells = [[EMPTY] * SIZE for _ in range(SIZE)]

    def copy(self) -> Grid:
        """Return an independent copy of the board."""
        other = Grid()
        other.cells = [list(column) for column in self.cells]
        return other

    def is_full(self, column: int) -> bool:
        """Tell whether ``column`` has no free cell left."""
        self._check_column(column)
        return self.cells[column][0] != EMPTY

    def _check_column(self, column: int) -> None:
        if not 0 <= column < SIZE:
            raise ValueError(f"column out of range: {column}")

    def drop(self, column: int, player: int) -> int:
        """Drop a piece of ``player`` into ``column`` and return the row it lands on.

        Raises ValueError for a column outside the board, a full column, or an
        empty ``player``.
        """
        if player == EMPTY:
            raise ValueError("player must not be empty")
        if self.is_full(column):
            raise ValueError(f"column {column} is full")
        cells = self.cells[column]
        row = 0
        while row + 1 < SIZE and cells[row + 1] == EMPTY:
            row += 1
        cells[row] = player
        return row

    def _lines(self) -> Iterator[tuple[int, int, int, int]]:
        t = self.cells
        for c in range(SIZE):
            for l in range(SIZE - _LINE + 1):
                yield t[c][l], t[c][l + 1], t[c][l + 2], t[c][l + 3]
                yield t[l][c], t[l + 1][c], t[l + 2][c], t[l + 3][c]
        for c in range(SIZE - _LINE + 1):
            for l in range(SIZE - _LINE + 1):
                yield t[c][l], t[c + 1][l + 1], t[c + 2][l + 2], t[c + 3][l + 3]
                yield t[l + 3][c], t[l + 2][c + 1], t[l + 1][c + 2], t[l][c + 3]

    def winner(self) -> int:
        """Return the player owning the first four-in-a-row found, or 0 when none."""
        for a, b, c, d in self._lines():
            if a != EMPTY and a == b == c == d:
                return a
        return EMPTY


def winning_column(grid: Grid, player: int) -> int | None:
    """Return the first column where a piece of ``player`` leaves a line of four, or None."""
    for column in range(SIZE):
        if grid.is_full(column):
            continue
        trial = grid.copy()
        trial.drop(column, player)
        if trial.winner():
            return column
    return None


def ai_choice(grid: Grid, rng: random.Random | None = None) -> int:
    """Pick the computer's column: win if possible, else block, else a random free column.

    Raises ValueError when every column is full.
    """
    for player in (PLAYER_TWO, PLAYER_ONE):
        column = winning_column(grid, player)
        if column is not None:
            return column
    free = [column for column in range(SIZE) if not grid.is_full(column)]
    if not free:
        raise ValueError("the grid is full")
    rng = rng if rng is not None else random.Random()
    while True:
        column = rng.randrange(SIZE)
        if column in free:
            return column