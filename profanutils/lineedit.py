"""A one-line text editor driven by key presses, with history recall."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum, auto


class Key(Enum):
    """Keys the editor reacts to; ``CHAR`` carries a printable character."""

    CHAR = auto()
    LEFT = auto()
    RIGHT = auto()
    OLDER = auto()
    NEWER = auto()
    BACKSPACE = auto()
    DELETE = auto()
    TAB = auto()
    ENTER = auto()


_TAB_WIDTH = 4


class LineEditor:
    """Edit a line of at most ``size - 1`` typed characters.

    ``history`` lists earlier lines, most recent first.
    """

    def __init__(self, size: int, history: Sequence[str] = ()) -> None:
        if size < 1:
            raise ValueError(f"size must be positive: {size}")
        self.size = size
        self._history = list(history)
        self._history_index = 0
        self._chars: list[str] = []
        self.cursor = 0

    @property
    def text(self) -> str:
        """The current contents of the line."""
        return "".join(self._chars)

    def _load(self, line: str) -> None:
        self._chars = list(line[: self.size])
        self.cursor = len(self._chars)

    def press(self, key: Key, char: str | None = None) -> bool:
        """Apply one key press; return True once Enter has been pressed."""
        chars = self._chars
        if key is Key.ENTER:
            return True
        if key is Key.CHAR:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"a single character is required, got {char!r}")
            if self.size >= len(chars) + 2:
                chars.insert(self.cursor, char)
                self.cursor += 1
        elif key is Key.LEFT:
            if self.cursor:
                self.cursor -= 1
        elif key is Key.RIGHT:
            if self.cursor < len(chars):
                self.cursor += 1
        elif key is Key.OLDER:
            if self._history_index < len(self._history):
                self._load(self._history[self._history_index])
                self._history_index += 1
        elif key is Key.NEWER:
            if self._history_index < 2:
                self._chars = []
                self.cursor = 0
            else:
                self._history_index -= 1
                self._load(self._history[self._history_index - 1])
        elif key is Key.BACKSPACE:
            if self.cursor:
                self.cursor -= 1
                del chars[self.cursor]
        elif key is Key.DELETE:
            # Deleting is refused at the very start of the line as well as at its end.
            if self.cursor and self.cursor < len(chars):
                del chars[self.cursor]
        elif key is Key.TAB:
            if self.size >= len(chars) + 5:
                # Spaces overwrite the characters under the cursor.
                for _ in range(_TAB_WIDTH):
                    if self.cursor < len(chars):
                        chars[self.cursor] = " "
                    else:
                        chars.append(" ")
                    self.cursor += 1
        return False

    def feed(self, events: Iterable[Key | str]) -> str:
        """Apply keys and characters until Enter and return the line.

        Raises EOFError when the events run out before Enter.
        """
        for event in events:
            done = self.press(event) if isinstance(event, Key) else self.press(Key.CHAR, event)
            if done:
                return self.text
        raise EOFError("input ended before Enter")