"""Drawing primitives that rasterise onto a :class:`~oledgfx.canvas.Canvas`."""

from __future__ import annotations

import math
import struct
from typing import Callable, Iterator, Sequence

from oledgfx.canvas import Canvas

__all__ = [
    "pnpoly",
    "is_in_angle",
    "draw_line",
    "draw_rectangle",
    "draw_triangle",
    "draw_circle",
    "draw_ellipse",
    "draw_arc",
]

Point = tuple[int, int]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def pnpoly(vertx: Sequence[int], verty: Sequence[int], testx: int, testy: int) -> bool:
    """Whether a point lies inside the polygon with the given vertex coordinates."""
    vertices = list(zip(vertx, verty))
    inside = False
    for (xi, yi), (xj, yj) in zip(vertices, vertices[-1:] + vertices[:-1]):
        if (yi > testy) != (yj > testy) and testx < _trunc_div((xj - xi) * (testy - yi), yj - yi) + xi:
            inside = not inside
    return inside


def is_in_angle(x: int, y: int, start_angle: int, end_angle: int) -> bool:
    """Whether the direction of (x, y) lies between two angles in degrees.

    0 points right, 180 or -180 left; angles grow clockwise, so points below
    the centre have positive angles. When ``start_angle`` is not less than
    ``end_angle`` the range wraps through 180.
    """
    angle = int(math.atan2(y, x) / 3.14 * 180)
    if start_angle < end_angle:
        return start_angle <= angle <= end_angle
    return angle >= start_angle or angle <= end_angle


def _line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point]:
    if y0 == y1:
        low, high = sorted((x0, x1))
        for x in range(low, high + 1):
            yield x, y0
        return
    if x0 == x1:
        low, high = sorted((y0, y1))
        for y in range(low, high + 1):
            yield x0, y
        return

    if x0 > x1:
        x0, y0, x1, y1 = x1, y1, x0, y0
    flip_y = y0 > y1
    if flip_y:
        y0, y1 = -y0, -y1
    swap_xy = y1 - y0 > x1 - x0
    if swap_xy:
        x0, y0 = y0, x0
        x1, y1 = y1, x1

    def restore(x: int, y: int) -> Point:
        if swap_xy:
            x, y = y, x
        return (x, -y) if flip_y else (x, y)

    dx = x1 - x0
    dy = y1 - y0
    incr_e = 2 * dy
    incr_ne = 2 * (dy - dx)
    d = 2 * dy - dx
    x, y = x0, y0
    yield restore(x, y)
    while x < x1:
        x += 1
        if d < 0:
            d += incr_e
        else:
            y += 1
            d += incr_ne
        yield restore(x, y)


def draw_line(canvas: Canvas, x0: int, y0: int, x1: int, y1: int) -> None:
    """Draw a straight line between two end points, both included."""
    for point in _line_points(x0, y0, x1, y1):
        canvas.draw_point(*point)


def draw_rectangle(canvas: Canvas, x: int, y: int, width: int, height: int, filled: bool) -> None:
    """Draw a rectangle outline, or a solid rectangle when ``filled``."""
    if filled:
        for i in range(x, x + width):
            for j in range(y, y + height):
                canvas.draw_point(i, j)
        return
    for i in range(x, x + width):
        canvas.draw_point(i, y)
        canvas.draw_point(i, y + height - 1)
    for j in range(y, y + height):
        canvas.draw_point(x, j)
        canvas.draw_point(x + width - 1, j)


def draw_triangle(
    canvas: Canvas, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, filled: bool
) -> None:
    """Draw a triangle outline, or a solid triangle when ``filled``."""
    if not filled:
        draw_line(canvas, x0, y0, x1, y1)
        draw_line(canvas, x0, y0, x2, y2)
        draw_line(canvas, x1, y1, x2, y2)
        return
    vx = (x0, x1, x2)
    vy = (y0, y1, y2)
    for i in range(min(vx), max(vx) + 1):
        for j in range(min(vy), max(vy) + 1):
            if pnpoly(vx, vy, i, j):
                canvas.draw_point(i, j)


def _circle_offsets(radius: int, filled: bool) -> Iterator[Point]:
    """Offsets from the centre of the pixels of a circle, by the midpoint method."""
    d = 1 - radius
    x, y = 0, radius
    yield from ((x, y), (-x, -y), (y, x), (-y, -x))
    if filled:
        for j in range(-y, y):
            yield 0, j
    while x < y:
        x += 1
        if d < 0:
            d += 2 * x + 1
        else:
            y -= 1
            d += 2 * (x - y) + 1
        yield from ((x, y), (y, x), (-x, -y), (-y, -x), (x, -y), (y, -x), (-x, y), (-y, x))
        if filled:
            for j in range(-y, y):
                yield x, j
                yield -x, j
            for j in range(-x, x):
                yield -y, j
                yield y, j


def _plot_offsets(
    canvas: Canvas, x: int, y: int, offsets: Iterator[Point], accept: Callable[[int, int], bool]
) -> None:
    for dx, dy in offsets:
        if accept(dx, dy):
            canvas.draw_point(x + dx, y + dy)


def draw_circle(canvas: Canvas, x: int, y: int, radius: int, filled: bool) -> None:
    """Draw a circle around (x, y), solid when ``filled``."""
    _plot_offsets(canvas, x, y, _circle_offsets(radius, filled), lambda dx, dy: True)


def draw_arc(
    canvas: Canvas, x: int, y: int, radius: int, start_angle: int, end_angle: int, filled: bool
) -> None:
    """Draw the part of a circle between two angles; a sector when ``filled``."""
    _plot_offsets(
        canvas,
        x,
        y,
        _circle_offsets(radius, filled),
        lambda dx, dy: is_in_angle(dx, dy, start_angle, end_angle),
    )


def _ellipse_offsets(a: int, b: int, filled: bool) -> Iterator[Point]:
    """Offsets from the centre of the pixels of an axis-aligned ellipse."""
    x, y = 0, b
    d1 = _f32(b * b + a * a * (-b + 0.5))

    def arc_points() -> Iterator[Point]:
        yield from ((x, y), (-x, -y), (-x, y), (x, -y))

    def fill_columns() -> Iterator[Point]:
        for j in range(-y, y):
            yield x, j
            yield -x, j

    if filled:
        for j in range(-y, y):
            yield 0, j
    yield from arc_points()

    while b * b * (x + 1) < a * a * (y - 0.5):
        if d1 <= 0:
            d1 = _f32(d1 + b * b * (2 * x + 3))
        else:
            d1 = _f32(d1 + b * b * (2 * x + 3) + a * a * (-2 * y + 2))
            y -= 1
        x += 1
        if filled:
            yield from fill_columns()
        yield from arc_points()

    d2 = _f32(b * b * (x + 0.5) * (x + 0.5) + a * a * (y - 1) * (y - 1) - a * a * b * b)
    while y > 0:
        if d2 <= 0:
            d2 = _f32(d2 + b * b * (2 * x + 2) + a * a * (-2 * y + 3))
            x += 1
        else:
            d2 = _f32(d2 + a * a * (-2 * y + 3))
        y -= 1
        if filled:
            yield from fill_columns()
        yield from arc_points()


def draw_ellipse(canvas: Canvas, x: int, y: int, a: int, b: int, filled: bool) -> None:
    """Draw an ellipse with horizontal half-axis ``a`` and vertical half-axis ``b``."""
    _plot_offsets(canvas, x, y, _ellipse_offsets(a, b, filled), lambda dx, dy: True)