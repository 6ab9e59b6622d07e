"""A rotating wireframe cube with perspective projection."""

from __future__ import annotations

from dataclasses import dataclass, field

from .canvas import Canvas

PI = 3.141592
MATH_LOOP = 100
FOCAL_DISTANCE = 100
DEPTH_OFFSET = 256
SCREEN_OFFSET = 100
CUBE_COLOR = 0xFFFFFF
TRIANGLE_COLOR = 0xFFFF00


@dataclass(frozen=True)
class Point3:
    """A point in space with integer coordinates."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class Point2:
    """A point on the screen."""

    x: int
    y: int


@dataclass(frozen=True)
class Line:
    """An edge between two points of a shape, given by index."""

    i1: int
    i2: int
    color: int


@dataclass
class Shape:
    """Points joined by lines, with the last projection of the points."""

    points: list[Point3]
    lines: list[Line]
    screen_points: list[Point2] = field(default_factory=list)


def cos_deg(angle: float) -> float:
    """Cosine of ``angle`` degrees from a Taylor series."""
    x = angle * PI / 180
    result = 1.0
    power = 1.0
    fact = 1.0
    for i in range(MATH_LOOP):
        power *= -x * x
        fact *= (2 * i + 1) * (2 * i + 2)
        result += power / fact
    return result


def sin_deg(angle: float) -> float:
    """Sine of ``angle`` degrees from a Taylor series."""
    x = angle * PI / 180
    result = x
    power = x
    fact = 1.0
    for i in range(MATH_LOOP):
        power *= -x * x
        fact *= (2 * i + 2) * (2 * i + 3)
        result += power / fact
    return result


def make_cube(size: int) -> Shape:
    """Return a cube of half-side ``size`` with its faces split into triangles."""
    s = size
    points = [
        Point3(s, s, s), Point3(s, -s, s), Point3(-s, -s, s), Point3(-s, s, s),
        Point3(s, s, -s), Point3(s, -s, -s), Point3(-s, -s, -s), Point3(-s, s, -s),
    ]
    edges = [(0, 1), (1, 2), (2, 3), (3, 0), (4, 5), (5, 6), (6, 7), (7, 4),
             (0, 4), (1, 5), (2, 6), (3, 7)]
    diagonals = [(0, 2), (4, 6), (0, 5), (1, 6), (2, 7), (3, 4)]
    lines = [Line(a, b, CUBE_COLOR) for a, b in edges]
    lines += [Line(a, b, TRIANGLE_COLOR) for a, b in diagonals]
    return Shape(points, lines)


def rotate(shape: Shape, x: float, y: float, z: float) -> Shape:
    """Return a new shape turned by ``z``, then ``y``, then ``x`` degrees.

    Coordinates are truncated to integers after each turn.
    """
    cx, sx = cos_deg(x), sin_deg(x)
    cy, sy = cos_deg(y), sin_deg(y)
    cz, sz = cos_deg(z), sin_deg(z)
    points = []
    for p in shape.points:
        x1, y1, z1 = p.x, p.y, p.z
        x1, y1 = int(x1 * cz - y1 * sz), int(x1 * sz + y1 * cz)
        x1, z1 = int(x1 * cy + z1 * sy), int(-x1 * sy + z1 * cy)
        y1, z1 = int(y1 * cx - z1 * sx), int(y1 * sx + z1 * cx)
        points.append(Point3(x1, y1, z1))
    return Shape(points, list(shape.lines))


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def project(point: Point3) -> Point2:
    """Project ``point`` onto the screen plane, truncating toward zero."""
    depth = point.z + FOCAL_DISTANCE + DEPTH_OFFSET
    if depth == 0:
        raise ZeroDivisionError("point lies in the projection plane of the eye")
    return Point2(
        _trunc_div(point.x * FOCAL_DISTANCE, depth),
        _trunc_div(point.y * FOCAL_DISTANCE, depth),
    )


def _plot_line(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
    dx, dy = x2 - x1, y2 - y1
    steps = max(abs(dx), abs(dy), 1)
    x_step, y_step = dx / steps, dy / steps
    x, y = float(x1), float(y1)
    for _ in range(steps + 1):
        px, py = int(x), int(y)
        if 0 <= px < canvas.width and 0 <= py < canvas.height:
            canvas.set_pixel(px, py, color)
        x += x_step
        y += y_step


def draw(shape: Shape, canvas: Canvas) -> None:
    """Clear ``canvas`` and draw every line of ``shape``; pixels off the canvas are skipped."""
    canvas.clear(0)
    shape.screen_points = [project(p) for p in shape.points]
    for line in shape.lines:
        p1 = shape.screen_points[line.i1]
        p2 = shape.screen_points[line.i2]
        _plot_line(
            canvas,
            p1.x + SCREEN_OFFSET,
            p1.y + SCREEN_OFFSET,
            p2.x + SCREEN_OFFSET,
            p2.y + SCREEN_OFFSET,
            line.color,
        )