import pytest

from profanutils.life import DEFAULT_COLS, DEFAULT_ROWS, Board, next_value


def alive_cells(board):
    return {
        (r, c)
        for r, line in enumerate(board.cells)
        for c, alive in enumerate(line)
        if alive
    }


def plain(row_runs):
    return "".join(text for text, _ in row_runs)


@pytest.mark.parametrize(
    "alive, count, expected",
    [
        (True, 2, True),
        (False, 2, False),
        (True, 3, True),
        (False, 3, True),
        (True, 1, False),
        (True, 4, False),
        (False, 0, False),
    ],
)
def test_next_value_rules(alive, count, expected):
    assert next_value(alive, count) is expected


def test_default_size():
    board = Board()
    assert (board.rows, board.cols) == (DEFAULT_ROWS, DEFAULT_COLS)
    assert alive_cells(board) == set()


def test_invalid_size():
    with pytest.raises(ValueError):
        Board(0, 5)


def test_toggle_twice_restores():
    board = Board(5, 5)
    board.toggle(2, 3)
    assert alive_cells(board) == {(2, 3)}
    board.toggle(2, 3)
    assert alive_cells(board) == set()


def test_toggle_out_of_range():
    with pytest.raises(IndexError):
        Board(5, 5).toggle(5, 0)


def test_blinker_has_period_two():
    board = Board(8, 8)
    for r in (2, 3, 4):
        board.toggle(r, 6)
    start = alive_cells(board)
    board.step()
    middle = alive_cells(board)
    assert middle != start
    assert len(middle) == len(start)
    board.step()
    assert alive_cells(board) == start


def test_block_is_still():
    board = Board(6, 6)
    for r, c in [(1, 1), (1, 2), (2, 1), (2, 2)]:
        board.toggle(r, c)
    before = alive_cells(board)
    board.step()
    assert alive_cells(board) == before


def test_lonely_corner_cell_dies():
    board = Board(4, 4)
    board.toggle(0, 0)
    board.step()
    assert alive_cells(board) == set()


def test_clear():
    board = Board(4, 4)
    board.toggle(1, 1)
    board.clear()
    assert alive_cells(board) == set()


def test_render_without_cursor():
    board = Board(3, 4)
    board.toggle(1, 2)
    rows = board.render()
    assert [plain(r) for r in rows][1] == ". . X ."
    assert all(len(plain(r)) == board.cols * 2 - 1 for r in rows)
    assert all(not highlighted for r in rows for _, highlighted in r)


def test_render_with_cursor_highlights_cell():
    board = Board(3, 4)
    board.toggle(1, 2)
    plain_rows = [plain(r) for r in board.render()]
    rows = board.render((1, 2))
    assert [plain(r) for r in rows] == plain_rows
    highlighted = [text for r in rows for text, lit in r if lit]
    assert highlighted == ["X"]


def test_render_cursor_at_edges():
    board = Board(2, 3)
    first = board.render((0, 0))[0]
    last = board.render((0, 2))[0]
    assert first[0] == (".", True)
    assert last[-1] == (".", True)


def test_render_cursor_out_of_range():
    with pytest.raises(IndexError):
        Board(2, 2).render((0, 2))