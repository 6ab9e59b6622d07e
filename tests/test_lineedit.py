import pytest

from profanutils.lineedit import Key, LineEditor


def test_typing_builds_line():
    assert LineEditor(20).feed(["a", "b", "c", Key.ENTER]) == "abc"


def test_insert_after_moving_left():
    editor = LineEditor(20)
    assert editor.feed(["a", "c", Key.LEFT, "b", Key.ENTER]) == "abc"
    assert editor.cursor == 2


def test_left_and_right_stay_in_bounds():
    editor = LineEditor(20)
    editor.feed(["x", Key.RIGHT, Key.RIGHT, Key.LEFT, Key.LEFT, Key.LEFT, "y", Key.ENTER])
    assert editor.text == "yx"


def test_backspace_at_start_does_nothing():
    editor = LineEditor(20)
    assert editor.feed(["a", Key.LEFT, Key.BACKSPACE, Key.ENTER]) == "a"


def test_backspace_removes_before_cursor():
    assert LineEditor(20).feed(["a", "b", "c", Key.LEFT, Key.BACKSPACE, Key.ENTER]) == "ac"


def test_delete_removes_under_cursor():
    assert LineEditor(20).feed(["a", "b", "c", Key.LEFT, Key.LEFT, Key.DELETE, Key.ENTER]) == "ac"


def test_delete_refused_at_line_start():
    editor = LineEditor(20)
    assert editor.feed(["a", "b", Key.LEFT, Key.LEFT, Key.DELETE, Key.ENTER]) == "ab"


def test_size_limits_typed_characters():
    editor = LineEditor(3)
    assert editor.feed(["1", "2", "3", "4", Key.ENTER]) == "12"


def test_tab_appends_spaces():
    editor = LineEditor(20)
    text = editor.feed(["a", Key.TAB, "b", Key.ENTER])
    assert text == "a" + " " * 4 + "b"


def test_tab_ignored_without_room():
    assert LineEditor(5).feed(["a", Key.TAB, Key.ENTER]) == "a"


def test_history_recall_older_and_newer():
    editor = LineEditor(20, ["second", "first"])
    editor.press(Key.OLDER)
    assert editor.text == "second"
    editor.press(Key.OLDER)
    assert editor.text == "first"
    editor.press(Key.OLDER)
    assert editor.text == "first"
    editor.press(Key.NEWER)
    assert editor.text == "second"
    assert editor.cursor == len("second")


def test_newer_from_first_entry_clears_without_moving_back():
    editor = LineEditor(20, ["second", "first"])
    editor.press(Key.OLDER)
    editor.press(Key.NEWER)
    assert editor.text == ""
    editor.press(Key.OLDER)
    assert editor.text == "first"


def test_history_entry_truncated_to_size():
    editor = LineEditor(4, ["abcdefgh"])
    editor.press(Key.OLDER)
    assert editor.text == "abcdefgh"[:4]


def test_feed_without_enter_raises():
    with pytest.raises(EOFError):
        LineEditor(10).feed(["a"])


def test_char_key_requires_single_character():
    with pytest.raises(ValueError):
        LineEditor(10).press(Key.CHAR, "ab")


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        LineEditor(0)