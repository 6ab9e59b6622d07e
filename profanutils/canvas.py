"""An off-screen pixel canvas that pushes only changed pixels to a display."""

from __future__ import annotations

from collections.abc import Callable

DEFAULT_WIDTH = 320
DEFAULT_HEIGHT = 200

_FULL_REFRESH = 4
_SMART_REFRESH = 1


class Canvas:
    """A ``width`` x ``height`` grid of 32-bit colours.

    Without ``refresh_all`` the first two renders send every pixel and later
    renders send only pixels that changed; with it every render is full.
    """

    def __init__(
        self,
        refresh_all: bool = False,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"invalid canvas size: {width}x{height}")
        self.width = width
        self.height = height
        self._current = [0] * (width * height)
        self._last = [0] * (width * height)
        self.refresh_mode = int(bool(refresh_all)) + 3

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return y * self.width + x

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x``, row ``y``."""
        self._current[self._index(x, y)] = color

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x``, row ``y``."""
        return self._current[self._index(x, y)]

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill the rectangle whose top-left corner is ``(x, y)``."""
        for row in range(y, y + height):
            for col in range(x, x + width):
                self.set_pixel(col, row, color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Draw a straight line between two points, both included."""
        dx = x2 - x1
        dy = y2 - y1
        steps = max(abs(dx), abs(dy))
        if steps == 0:
            self.set_pixel(x1, y1, color)
            return
        x_step = dx / steps
        y_step = dy / steps
        x, y = float(x1), float(y1)
        for _ in range(steps + 1):
            self.set_pixel(int(x), int(y), color)
            x += x_step
            y += y_step

    def clear(self, color: int = 0) -> None:
        """Set every pixel to ``color``."""
        self._current = [color] * (self.width * self.height)

    def render(self, sink: Callable[[int, int, int], object]) -> int:
        """Send pixels to ``sink(x, y, color)`` and return how many were sent."""
        full = self.refresh_mode > _SMART_REFRESH
        sent = 0
        for index, (old, new) in enumerate(zip(self._last, self._current)):
            if full or old != new:
                y, x = divmod(index, self.width)
                sink(x, y, new)
                self._last[index] = new
                sent += 1
        if self.refresh_mode != _FULL_REFRESH and self.refresh_mode > _SMART_REFRESH:
            self.refresh_mode -= 1
        return sent