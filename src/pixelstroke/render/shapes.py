"""Outline shapes composed from the line primitive.

Each shape exists in two layers:

- a pure geometry helper (``triangle_segments``, ``circle_points``,
  ``sierpinski_triangles`` ...) returning points or segments, usable without
  any surface;
- a :class:`ShapeComposer` method that feeds that geometry, in a fixed
  order, through :func:`pixelstroke.core.raster.draw_line`.

Coordinates are integer pixels (x right, y down). Float results of
trigonometry or curve evaluation are rounded to the nearest pixel.

Animated shapes take an :class:`AnimationState`, advance it, draw with the
new angle and return the advanced state. The caller keeps it for the next
frame.
"""

from __future__ import annotations

from math import cos, radians, sin
from typing import Iterator, List, Sequence, Tuple

from pixelstroke.core.animation import AnimationState
from pixelstroke.core.linalg import mat2_apply, rotation2
from pixelstroke.core.raster import draw_line, draw_segments
from pixelstroke.core.types import Color, ColorLike, Point2D, PointLike, as_point
from pixelstroke.render.surface import PixelSurface

__all__ = [
    "Segment",
    "Triangle",
    "triangle_segments",
    "rotate_points",
    "rectangle_segments",
    "circle_points",
    "fake_cube_segments",
    "bezier_point",
    "curve_points",
    "polyline_segments",
    "sierpinski_triangles",
    "ShapeComposer",
]

Segment = Tuple[Point2D, Point2D]
Triangle = Tuple[Point2D, Point2D, Point2D]

CIRCLE_SAMPLES = 361
DEFAULT_CURVE_STEPS = 100


def polyline_segments(points: Sequence[Point2D]) -> List[Segment]:
    """Connect consecutive points: ``[(p0, p1), (p1, p2), ...]``."""
    return [(points[i], points[i + 1]) for i in range(len(points) - 1)]


def triangle_segments(p1: PointLike, p2: PointLike, p3: PointLike) -> List[Segment]:
    """Edges p1->p2, p2->p3, p3->p1 in that order."""
    a, b, c = as_point(p1), as_point(p2), as_point(p3)
    return [(a, b), (b, c), (c, a)]


def rotate_points(
    points: Sequence[PointLike], angle: float, pivot: PointLike = (0, 0)
) -> List[Point2D]:
    """Rotate points counter-clockwise (in math axes) by ``angle`` radians about ``pivot``."""
    m = rotation2(angle)
    px, py = as_point(pivot)
    out: List[Point2D] = []
    for p in points:
        x, y = as_point(p)
        rx, ry = mat2_apply(m, (x - px, y - py))
        out.append(Point2D(round(rx) + px, round(ry) + py))
    return out


def rectangle_segments(dimensions: PointLike, position: PointLike) -> List[Segment]:
    """Axis-aligned outline from ``position`` to ``position + dimensions``."""
    w, h = as_point(dimensions)
    x, y = as_point(position)
    top_left = Point2D(x, y)
    top_right = Point2D(x + w, y)
    bottom_right = Point2D(x + w, y + h)
    bottom_left = Point2D(x, y + h)
    return [
        (top_left, top_right),
        (top_right, bottom_right),
        (bottom_right, bottom_left),
        (bottom_left, top_left),
    ]


def circle_points(center: PointLike, radius: int) -> List[Point2D]:
    """Sample the circle at every whole degree from 0 to 360 inclusive.

    The first and last samples coincide, closing the 360-segment polygon.
    """
    cx, cy = as_point(center)
    r = float(radius)
    return [
        Point2D(cx + round(cos(radians(deg)) * r), cy + round(sin(radians(deg)) * r))
        for deg in range(CIRCLE_SAMPLES)
    ]


def fake_cube_segments(
    dimensions: Tuple[int, int, int], position: PointLike
) -> List[Segment]:
    """2.5D box: front face, back face offset by ``depth``, four joining edges."""
    w, h, depth = (int(v) for v in dimensions)
    x, y = as_point(position)
    front = rectangle_segments((w, h), (x, y))
    back = rectangle_segments((w, h), (x + depth, y + depth))
    corners = [Point2D(x, y), Point2D(x + w, y), Point2D(x + w, y + h), Point2D(x, y + h)]
    joins = [(c, c.offset(depth, depth)) for c in corners]
    return front + back + joins


def bezier_point(
    start: PointLike, end: PointLike, control: PointLike, t: float
) -> Tuple[float, float]:
    """Quadratic Bezier ``(1-t)^2*start + 2t(1-t)*control + t^2*end``."""
    u = 1.0 - t
    a = u * u
    b = 2.0 * t * u
    c = t * t
    return (
        a * start[0] + b * control[0] + c * end[0],
        a * start[1] + b * control[1] + c * end[1],
    )


def curve_points(
    start: PointLike,
    end: PointLike,
    control: PointLike,
    steps: int = DEFAULT_CURVE_STEPS,
) -> List[Point2D]:
    """Sample the curve at ``t = i / steps`` for ``i`` in ``0..steps``.

    The parameter is derived from an integer counter, so the last sample is
    exactly ``end`` and no float drift accumulates across steps.

    Raises:
        ValueError: if ``steps`` < 1.
    """
    if steps < 1:
        raise ValueError(f"curve steps must be >= 1, got {steps}")
    s, e, c = as_point(start), as_point(end), as_point(control)
    pts = [s]
    for i in range(1, steps):
        pts.append(as_point(bezier_point(s, e, c, i / steps)))
    pts.append(e)
    return pts


def _midpoint(p: Point2D, q: Point2D) -> Point2D:
    return Point2D((p.x + q.x) // 2, (p.y + q.y) // 2)


def sierpinski_triangles(
    a: PointLike, b: PointLike, c: PointLike, generation: int
) -> Iterator[Triangle]:
    """Yield the leaf triangles of a Sierpinski subdivision, depth first.

    Generation 1 is the input triangle itself; each further generation
    replaces a triangle by its three corner sub-triangles, leaving the
    centre one out. A work stack replaces recursion so deep generations do
    not hit the interpreter recursion limit. The yield order matches the
    recursive corner order (a-corner, b-corner, c-corner).

    Raises:
        ValueError: if ``generation`` is not an integer >= 1.
    """
    if isinstance(generation, bool) or not isinstance(generation, int):
        raise ValueError(f"generation must be an integer, got {generation!r}")
    if generation < 1:
        raise ValueError(f"generation must be >= 1, got {generation}")
    return _walk_sierpinski(as_point(a), as_point(b), as_point(c), generation)


def _walk_sierpinski(
    a: Point2D, b: Point2D, c: Point2D, generation: int
) -> Iterator[Triangle]:
    stack: List[Tuple[Point2D, Point2D, Point2D, int]] = [(a, b, c, generation)]
    while stack:
        x, y, z, depth = stack.pop()
        if depth == 1:
            yield (x, y, z)
            continue
        m_xy = _midpoint(x, y)
        m_yz = _midpoint(y, z)
        m_zx = _midpoint(z, x)
        # Pushed in reverse so the a-corner is processed first
        stack.append((m_zx, m_yz, z, depth - 1))
        stack.append((m_xy, y, m_yz, depth - 1))
        stack.append((x, m_xy, m_zx, depth - 1))


class ShapeComposer:
    """Draws outline shapes onto a :class:`PixelSurface` via ``draw_line``."""

    def __init__(self, surface: PixelSurface) -> None:
        self._surface = surface

    @property
    def surface(self) -> PixelSurface:
        return self._surface

    def draw_line(self, start: PointLike, end: PointLike, color: ColorLike) -> None:
        draw_line(self._surface, start, end, Color.of(color))

    def draw_triangle(
        self, p1: PointLike, p2: PointLike, p3: PointLike, color: ColorLike
    ) -> None:
        draw_segments(self._surface, triangle_segments(p1, p2, p3), Color.of(color))

    def draw_rotated_triangle(
        self,
        p1: PointLike,
        p2: PointLike,
        p3: PointLike,
        color: ColorLike,
        state: AnimationState,
        *,
        pivot: PointLike = (0, 0),
    ) -> AnimationState:
        """Advance ``state``, rotate the vertices by its angle and draw.

        Returns the advanced state for the caller to pass in next frame.
        """
        nxt = state.advance()
        r1, r2, r3 = rotate_points((p1, p2, p3), nxt.angle, pivot)
        self.draw_triangle(r1, r2, r3, color)
        return nxt

    def draw_rectangle(
        self, dimensions: PointLike, position: PointLike, color: ColorLike
    ) -> None:
        draw_segments(
            self._surface, rectangle_segments(dimensions, position), Color.of(color)
        )

    def draw_circle(self, center: PointLike, radius: int, color: ColorLike) -> None:
        draw_segments(
            self._surface,
            polyline_segments(circle_points(center, radius)),
            Color.of(color),
        )

    def draw_fake_cube(
        self,
        dimensions: Tuple[int, int, int],
        position: PointLike,
        color: ColorLike,
    ) -> None:
        draw_segments(
            self._surface, fake_cube_segments(dimensions, position), Color.of(color)
        )

    def draw_curve(
        self,
        start: PointLike,
        end: PointLike,
        control: PointLike,
        color: ColorLike,
        *,
        steps: int = DEFAULT_CURVE_STEPS,
    ) -> None:
        draw_segments(
            self._surface,
            polyline_segments(curve_points(start, end, control, steps)),
            Color.of(color),
        )

    def draw_sierpinski_triangle(
        self,
        a: PointLike,
        b: PointLike,
        c: PointLike,
        generation: int,
        color: ColorLike,
    ) -> int:
        """Draw every leaf triangle; returns how many were drawn."""
        col = Color.of(color)
        count = 0
        for x, y, z in sierpinski_triangles(a, b, c, generation):
            draw_segments(self._surface, triangle_segments(x, y, z), col)
            count += 1
        return count
