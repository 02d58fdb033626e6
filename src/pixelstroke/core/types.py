"""Value types shared by the rasterizer, shape composer and projector.

All types are immutable and compare by value. Points and colors are
``NamedTuple`` subclasses so plain tuples can be passed wherever a point or
color is expected; :func:`as_point` and :meth:`Color.of` normalize them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Sequence, Tuple, Union

__all__ = [
    "Point2D",
    "Point3D",
    "Color",
    "LineSegment",
    "Wireframe",
    "PointLike",
    "ColorLike",
    "as_point",
    "WHITE",
    "BLACK",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "MAGENTA",
    "CYAN",
]


class Point2D(NamedTuple):
    """Integer screen-space pixel coordinate."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point2D":
        return Point2D(self.x + dx, self.y + dy)


class Point3D(NamedTuple):
    """Object-space coordinate before projection."""

    x: float
    y: float
    z: float


class Color(NamedTuple):
    """RGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    @classmethod
    def of(cls, value: Sequence[int]) -> "Color":
        """Build a color from any 3-sequence, validating the channel range.

        Raises:
            ValueError: when the sequence is not length 3 or a channel is
                outside 0..255.
        """
        if isinstance(value, Color):
            return value
        if len(value) != 3:
            raise ValueError(f"color needs exactly 3 channels, got {len(value)}")
        channels = tuple(int(c) for c in value)
        for c in channels:
            if c < 0 or c > 255:
                raise ValueError(f"color channel out of range 0..255: {c}")
        return cls(*channels)


PointLike = Union[Point2D, Tuple[int, int], Sequence[int]]
ColorLike = Union[Color, Tuple[int, int, int], Sequence[int]]


def as_point(p: PointLike) -> Point2D:
    """Normalize a 2-sequence into a :class:`Point2D`.

    Float components are rounded to the nearest pixel.
    """
    if isinstance(p, Point2D):
        return p
    x, y = p[0], p[1]
    if not isinstance(x, int):
        x = round(x)
    if not isinstance(y, int):
        y = round(y)
    return Point2D(int(x), int(y))


class LineSegment(NamedTuple):
    """Ordered pair of endpoints; drawing direction does not change the pixels."""

    start: Point2D
    end: Point2D


@dataclass(frozen=True, slots=True)
class Wireframe:
    """Vertices plus an explicit edge list of vertex index pairs."""

    vertices: Tuple[Union[Point2D, Point3D], ...]
    edges: Tuple[Tuple[int, int], ...] = field(default=())

    def segments(self) -> list[tuple[Union[Point2D, Point3D], Union[Point2D, Point3D]]]:
        return [(self.vertices[i], self.vertices[j]) for i, j in self.edges]


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
MAGENTA = Color(255, 0, 255)
CYAN = Color(0, 255, 255)
