import math

import pytest

from profanutils.canvas import Canvas
from profanutils.raycast import (
    CEILING_COLOR,
    FLOOR_COLOR,
    MAP_SIZE,
    PI,
    cast_ray,
    convert_color,
    move_player,
    render_frame,
    taylor_cos,
    taylor_sin,
)


@pytest.mark.parametrize("angle", [-3.0, -1.5, -0.4, 0.0, 0.7, 1.6, 2.9, 7.0])
def test_taylor_cos_close_to_math(angle):
    assert taylor_cos(angle) == pytest.approx(math.cos(angle), abs=1e-3)


@pytest.mark.parametrize("angle", [-2.5, -1.0, 0.0, 0.5, 1.2, 2.8])
def test_taylor_sin_close_to_math(angle):
    assert taylor_sin(angle) == pytest.approx(math.sin(angle), abs=1e-3)


def test_convert_color_palette():
    assert convert_color(0) == 0x000000
    assert convert_color(1) == 0x0000AA
    assert convert_color(15) == 0xFFFFFF
    assert convert_color(16) == 0


def test_cast_ray_hits_east_wall():
    distance, color = cast_ray(5, 5, 0)
    assert color == 6
    assert int(5 + distance) == 9


def test_cast_ray_hits_west_wall():
    distance, color = cast_ray(5, 5, PI)
    assert color == 2
    assert distance > 0


def test_render_frame_sky_floor_and_minimap():
    canvas = Canvas()
    render_frame(canvas, 5, 5, 0)
    assert canvas.get_pixel(0, 0) == CEILING_COLOR
    assert canvas.get_pixel(0, canvas.height - 1) == FLOOR_COLOR
    left = canvas.width - 4 * MAP_SIZE
    assert canvas.get_pixel(left, 0) == convert_color(1)
    assert canvas.get_pixel(left + 5 * 4 + 1, 5 * 4 + 3) == 0xFFFFFF


def test_move_without_keys_keeps_position():
    assert move_player(4.5, 3.5, 0.3, set(), 100) == (4.5, 3.5, 0.3)


def test_forward_then_back_returns():
    x, y, rot = move_player(5, 5, 0.4, {"z"}, 100)
    assert (x, y) != (5, 5)
    x2, y2, _ = move_player(x, y, rot, {"s"}, 100)
    assert x2 == pytest.approx(5)
    assert y2 == pytest.approx(5)


def test_position_is_clamped():
    x, y, _ = move_player(8, 5, 0, {"z"}, 5000)
    assert x == MAP_SIZE - 2
    x, y, _ = move_player(5, 1, -PI / 2, {"z"}, 5000)
    assert y == 1


def test_rotation_wraps():
    _, _, rot = move_player(5, 5, 3.1, {"q"}, 100)
    assert -PI <= rot <= PI
    _, _, rot = move_player(5, 5, -3.1, {"d"}, 100)
    assert -PI <= rot <= PI