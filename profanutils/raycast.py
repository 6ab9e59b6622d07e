"""A small ray-casting renderer over a fixed 10x10 map."""

from __future__ import annotations

from collections.abc import Collection

from .canvas import Canvas

MAP_SIZE = 10
PI = 3.14159
MATH_LOOP = 7
BLOCK_HEIGHT = 2
MINIMAP_SIZE = 4
PLAYER_SPEED = 5
ROT_SPEED = 3
FOV = PI / 4
RAY_STEP = 0.1

FLOOR_COLOR = 0x000044
CEILING_COLOR = 0x66FFFF
PLAYER_COLOR = 0xFFFFFF
HEADING_COLOR = 0x00FF00

MAP = (
    1, 1, 1, 1, 1, 1, 1, 1, 1, 6,
    2, 0, 0, 0, 0, 0, 0, 0, 0, 6,
    2, 0, 0, 0, 0, 0, 0, 0, 0, 6,
    2, 0, 0, 0, 0, 0, 0, 0, 0, 6,
    2, 0, 0, 0, 0, 0, 0, 0, 0, 6,
    2, 0, 0, 0, 0, 0, 0, 0, 0, 6,
    2, 0, 0, 0, 0, 0, 5, 0, 0, 6,
    2, 0, 0, 0, 0, 0, 5, 0, 0, 6,
    2, 0, 0, 0, 0, 0, 5, 0, 0, 6,
    2, 7, 7, 7, 9, 7, 7, 7, 7, 7,
)

_PALETTE = (
    0x000000, 0x0000AA, 0x00AA00, 0x00AAAA, 0xAA0000, 0xAA00AA, 0xAA5500, 0xAAAAAA,
    0x555555, 0x5555FF, 0x55FF55, 0x55FFFF, 0xFF5555, 0xFF55FF, 0xFFFF55, 0xFFFFFF,
)


def taylor_cos(x: float) -> float:
    """Cosine of ``x`` radians from a short Taylor series after wrapping to [-PI, PI]."""
    while x > PI:
        x -= 2 * PI
    while x < -PI:
        x += 2 * PI
    result = 1.0
    power = 1.0
    fact = 1.0
    for i in range(MATH_LOOP):
        power *= -x * x
        fact *= (2 * i + 1) * (2 * i + 2)
        result += power / fact
    return result


def taylor_sin(x: float) -> float:
    """Sine of ``x`` radians, as the cosine shifted by a quarter turn."""
    return taylor_cos(x - PI / 2)


def convert_color(index: int) -> int:
    """Return the 24-bit colour of palette entry ``index``; 0 outside the palette."""
    return _PALETTE[index] if 0 <= index < len(_PALETTE) else 0


def cast_ray(x: float, y: float, angle: float) -> tuple[float, int]:
    """March from ``(x, y)`` along ``angle`` and return the distance and wall value hit.

    Leaving the map counts as hitting a wall of value 0.
    """
    dx = taylor_cos(angle)
    dy = taylor_sin(angle)
    distance = 0.0
    while True:
        distance += RAY_STEP
        map_x = int(x + dx * distance)
        map_y = int(y + dy * distance)
        if not (0 <= map_x < MAP_SIZE and 0 <= map_y < MAP_SIZE):
            return distance, 0
        cell = MAP[map_x + map_y * MAP_SIZE]
        if cell > 0:
            return distance, cell


def render_frame(canvas: Canvas, x: float, y: float, rot: float) -> None:
    """Draw the 3D view seen from ``(x, y)`` facing ``rot`` and the minimap on ``canvas``."""
    width, height = canvas.width, canvas.height
    half_height = height // 2
    for i in range(width):
        distance, cell = cast_ray(x, y, rot + FOV / 2 - FOV * i / width)
        center = int(half_height * BLOCK_HEIGHT / distance)
        top = half_height - center
        bottom = half_height + center
        wall = convert_color(cell)
        for j in range(height):
            if j < top:
                canvas.set_pixel(i, j, CEILING_COLOR)
            elif j > bottom:
                canvas.set_pixel(i, j, FLOOR_COLOR)
            else:
                canvas.set_pixel(i, j, wall)

    left = width - MINIMAP_SIZE * MAP_SIZE
    head_x = int(x + taylor_cos(rot) * 2)
    head_y = int(y + taylor_sin(rot) * 2)
    for i in range(MAP_SIZE):
        for j in range(MAP_SIZE):
            px, py = left + i * MINIMAP_SIZE, j * MINIMAP_SIZE
            canvas.draw_rect(px, py, MINIMAP_SIZE, MINIMAP_SIZE, convert_color(MAP[i + j * MAP_SIZE]))
            if i == int(x) and j == int(y):
                canvas.draw_rect(px, py, MINIMAP_SIZE, MINIMAP_SIZE, PLAYER_COLOR)
            if i == head_x and j == head_y:
                half = MINIMAP_SIZE // 2
                canvas.draw_rect(px, py, half, half, HEADING_COLOR)


def move_player(
    x: float,
    y: float,
    rot: float,
    keys: Collection[str],
    elapsed: float,
) -> tuple[float, float, float]:
    """Apply held keys over ``elapsed`` milliseconds and return the new ``(x, y, rot)``.

    Keys: ``q``/``d`` turn left/right, ``z``/``s`` move forward/back, ``a``/``e``
    step sideways. The position stays inside the map's inner cells.
    """
    turn = ROT_SPEED * elapsed / 1000
    step = PLAYER_SPEED * elapsed / 1000
    if "q" in keys:
        rot += turn
    if "d" in keys:
        rot -= turn
    if "z" in keys:
        x += taylor_cos(rot) * step
        y += taylor_sin(rot) * step
    if "s" in keys:
        x -= taylor_cos(rot) * step
        y -= taylor_sin(rot) * step
    if "a" in keys:
        x += taylor_cos(rot + PI / 2) * step
        y += taylor_sin(rot + PI / 2) * step
    if "e" in keys:
        x += taylor_cos(rot - PI / 2) * step
        y += taylor_sin(rot - PI / 2) * step

    x = min(max(x, 1), MAP_SIZE - 2)
    y = min(max(y, 1), MAP_SIZE - 2)
    if rot > PI:
        rot -= 2 * PI
    if rot < -PI:
        rot += 2 * PI
    return x, y, rot