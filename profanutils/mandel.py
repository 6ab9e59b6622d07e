"""Mandelbrot set rendering."""

from __future__ import annotations

from .canvas import Canvas

MAX_ITER = 64
XMIN = -2.4
XMAX = 1.0
YMIN = -1.25
YMAX = 1.2
COLOR_STEP = 100


def escape_count(cx: float, cy: float, max_iter: int = MAX_ITER) -> int:
    """Return how many iterations ``z = z*z + c`` takes to leave radius 2, at most ``max_iter``."""
    xn = yn = 0.0
    n = 0
    while xn * xn + yn * yn < 4 and n < max_iter:
        xn, yn = xn * xn - yn * yn + cx, 2 * xn * yn + cy
        n += 1
    return n


def render(canvas: Canvas) -> None:
    """Fill ``canvas`` with the set; each pixel gets its escape count times 100."""
    width, height = canvas.width, canvas.height
    for y in range(height):
        cy = y * (YMIN - YMAX) / height + YMAX
        for x in range(width):
            cx = x * (XMAX - XMIN) / width + XMIN
            canvas.set_pixel(x, y, escape_count(cx, cy) * COLOR_STEP)