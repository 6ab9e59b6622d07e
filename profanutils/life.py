"""Conway's Game of Life on a bounded board whose outside is always dead."""

from __future__ import annotations

DEFAULT_ROWS = 20
DEFAULT_COLS = 40

ALIVE = "X"
DEAD = "."

Run = tuple[str, bool]


def next_value(alive: bool, count: int) -> bool:
    """Return a cell's next state given how many of its neighbours are alive."""
    if count == 2:
        return bool(alive)
    return count == 3


class Board:
    """A ``rows`` x ``cols`` grid of cells, all dead at first."""

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"invalid board size: {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells = [[False] * cols for _ in range(rows)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} board")

    def toggle(self, row: int, col: int) -> None:
        """Flip the cell at ``row``, ``col`` between alive and dead."""
        self._check(row, col)
        self.cells[row][col] = not self.cells[row][col]

    def _neighbours(self, row: int, col: int) -> int:
        return sum(
            self.cells[r][c]
            for r in range(max(row - 1, 0), min(row + 2, self.rows))
            for c in range(max(col - 1, 0), min(col + 2, self.cols))
            if (r, c) != (row, col)
        )

    def step(self) -> None:
        """Advance the board by one generation."""
        self.cells = [
            [next_value(alive, self._neighbours(r, c)) for c, alive in enumerate(line)]
            for r, line in enumerate(self.cells)
        ]

    def clear(self) -> None:
        """Make every cell dead."""
        self.cells = [[False] * self.cols for _ in range(self.rows)]

    def render(self, cursor: tuple[int, int] | None = None) -> list[list[Run]]:
        """Draw each row as runs of ``(text, highlighted)``.

        Cells are ``X`` or ``.`` separated by spaces; the cell under ``cursor``
        forms its own highlighted run.
        """
        if cursor is not None:
            self._check(*cursor)
        rows: list[list[Run]] = []
        for r, line in enumerate(self.cells):
            chars = [ALIVE if alive else DEAD for alive in line]
            if cursor is None or cursor[0] != r:
                rows.append([(" ".join(chars), False)])
                continue
            col = cursor[1]
            before = "".join(ch + " " for ch in chars[:col])
            rest = chars[col + 1 :]
            after = " " + " ".join(rest) if rest else ""
            runs = [(before, False), (chars[col], True), (after, False)]
            rows.append([run for run in runs if run[0]])
        return rows