"""Line rasterization: the single drawing primitive every shape builds on.

``line_points`` walks the dominant axis of a segment one pixel at a time and
computes the minor-axis coordinate on the ideal line, rounded half-up. The
result is an 8-connected run of pixels that always contains both endpoints.

The minor coordinate comes from the integer line equation
``y * dx = dy * x + c`` evaluated with exact integer arithmetic, so drawing
``a -> b`` and ``b -> a`` produces the same pixel set even where the ideal
line passes exactly through a half-pixel.

Example:
    >>> list(line_points((0, 0), (4, 0)))
    [Point2D(x=0, y=0), Point2D(x=1, y=0), Point2D(x=2, y=0), Point2D(x=3, y=0), Point2D(x=4, y=0)]
"""

from __future__ import annotations

from typing import Iterable, Iterator

from pixelstroke.core.types import ColorLike, Point2D, PointLike, as_point
from pixelstroke.render.surface import PixelSurface

__all__ = ["line_points", "draw_line", "draw_segments"]


def _round_div(num: int, den: int) -> int:
    """Return ``num / den`` rounded half-up, using integers only."""
    if den < 0:
        num = -num
        den = -den
    return (2 * num + den) // (2 * den)


def line_points(start: PointLike, end: PointLike) -> Iterator[Point2D]:
    """Yield the pixels of the segment ``start -> end`` in drawing order.

    One pixel is produced per integer step along the dominant axis, followed
    by the exact endpoint. A zero-length segment yields its point once.
    """
    x0, y0 = as_point(start)
    x1, y1 = as_point(end)
    dx = x1 - x0
    dy = y1 - y0
    sx = 1 if dx >= 0 else -1
    sy = 1 if dy >= 0 else -1

    if abs(dx) > abs(dy):
        # Wider than tall: x is the independent variable, dx != 0
        c = y0 * dx - dy * x0
        for x in range(x0, x1, sx):
            yield Point2D(x, _round_div(dy * x + c, dx))
    elif dy != 0:
        # Taller than wide (includes vertical): y is independent, dy != 0
        c = x0 * dy - dx * y0
        for y in range(y0, y1, sy):
            yield Point2D(_round_div(dx * y + c, dy), y)

    yield Point2D(x1, y1)


def draw_line(
    surface: PixelSurface, start: PointLike, end: PointLike, color: ColorLike
) -> None:
    """Write every pixel of ``start -> end`` to ``surface``.

    No clipping is performed; backends ignore out-of-canvas writes.
    """
    for p in line_points(start, end):
        surface.draw_pixel(p, color)


def draw_segments(
    surface: PixelSurface,
    segments: Iterable[tuple[PointLike, PointLike]],
    color: ColorLike,
) -> None:
    """Draw each ``(start, end)`` pair in order."""
    for start, end in segments:
        draw_line(surface, start, end, color)
