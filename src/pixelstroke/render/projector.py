"""Perspective-projected rotating wireframe cube.

The cube is 8 corners of a box anchored at its object-local origin and the
12 edges of a rectangular prism. Each frame the corners are rotated about
the vertical axis, translated to the requested position, pushed through a
frustum projection and mapped into the canvas viewport. Edges are clipped
against the near plane in camera space first, so a cube reaching the camera
never produces unbounded screen coordinates. Projection is recomputed from
scratch every call; nothing is cached between frames.

Coordinates and units
---------------------
- Object/world space: right-handed, camera at the origin looking down -Z.
  A cube is visible when its z coordinates are negative (in front of the
  camera).
- Screen space: integer pixels, x right, y down (world +Y appears up).
- Angles: radians.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from pixelstroke.core.animation import AnimationState
from pixelstroke.core.linalg import (
    Mat4,
    Viewport,
    clip_near,
    frustum4,
    mat4_apply,
    mat4_mul,
    project,
    rotate_y4,
    translate4,
)
from pixelstroke.core.raster import draw_segments
from pixelstroke.core.types import (
    Color,
    ColorLike,
    LineSegment,
    Point2D,
    Point3D,
    Wireframe,
)
from pixelstroke.render.surface import PixelSurface

__all__ = [
    "CUBE_EDGES",
    "Frustum",
    "Projector3D",
    "cube_vertices",
    "cube_wireframe",
]

# Index pairs into ``cube_vertices``: the 12 edges of the box, each vertex
# touching exactly three of them.
CUBE_EDGES: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 3),
    (2, 3),
    (4, 0),
    (2, 0),
    (2, 6),
    (4, 6),
    (6, 7),
    (5, 7),
    (3, 7),
    (4, 5),
    (1, 5),
)


def cube_vertices(dimensions: Sequence[float]) -> List[Point3D]:
    """Corners of a ``(width, height, depth)`` box with one corner at the origin."""
    w, h, d = (float(v) for v in dimensions)
    return [
        Point3D(0.0, 0.0, 0.0),
        Point3D(w, 0.0, 0.0),
        Point3D(0.0, 0.0, d),
        Point3D(w, 0.0, d),
        Point3D(0.0, h, 0.0),
        Point3D(w, h, 0.0),
        Point3D(0.0, h, d),
        Point3D(w, h, d),
    ]


def cube_wireframe(dimensions: Sequence[float]) -> Wireframe:
    return Wireframe(vertices=tuple(cube_vertices(dimensions)), edges=CUBE_EDGES)


@dataclass(frozen=True, slots=True)
class Frustum:
    """Perspective volume bounds; the defaults give a 90 degree field of view."""

    left: float = -1.0
    right: float = 1.0
    bottom: float = -1.0
    top: float = 1.0
    near: float = 1.0
    far: float = 100.0

    def matrix(self) -> Mat4:
        return frustum4(
            self.left, self.right, self.bottom, self.top, self.near, self.far
        )


class Projector3D:
    """Projects and draws a rotating cube into a fixed viewport.

    Parameters
    ----------
    viewport: ``(x, y, width, height)`` in pixels, usually the full canvas.
    frustum: Projection bounds; validated once at construction.
    """

    def __init__(self, viewport: Viewport, frustum: Frustum | None = None) -> None:
        self._viewport: Viewport = tuple(float(v) for v in viewport)  # type: ignore[assignment]
        self._frustum = frustum if frustum is not None else Frustum()
        self._projection = self._frustum.matrix()

    @classmethod
    def for_canvas(
        cls, width: int, height: int, frustum: Frustum | None = None
    ) -> "Projector3D":
        return cls((0.0, 0.0, float(width), float(height)), frustum)

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def frustum(self) -> Frustum:
        return self._frustum

    def model_matrix(self, position: Sequence[float], angle: float) -> Mat4:
        """Rotation about the object origin followed by translation to ``position``."""
        tx, ty, tz = (float(v) for v in position)
        return mat4_mul(translate4(tx, ty, tz), rotate_y4(angle))

    def eye_points(
        self, points: Sequence[Point3D], position: Sequence[float], angle: float
    ) -> List[Point3D]:
        """Object-space points moved into camera space by the model transform."""
        model = self.model_matrix(position, angle)
        out: List[Point3D] = []
        for p in points:
            x, y, z, _w = mat4_apply(model, (p[0], p[1], p[2], 1.0))
            out.append(Point3D(x, y, z))
        return out

    def _to_screen(self, eye: Point3D) -> Point2D:
        sx, sy, _depth = project(eye, self._projection, self._viewport)
        return Point2D(round(sx), round(sy))

    def project_points(
        self, points: Sequence[Point3D], position: Sequence[float], angle: float
    ) -> List[Point2D]:
        return [self._to_screen(p) for p in self.eye_points(points, position, angle)]

    def project_cube(
        self, dimensions: Sequence[float], position: Sequence[float], angle: float
    ) -> List[Point2D]:
        """Screen positions of the 8 cube corners, in ``cube_vertices`` order.

        Corners behind the near plane have no meaningful screen position.
        """
        return self.project_points(cube_vertices(dimensions), position, angle)

    def cube_segments(
        self, dimensions: Sequence[float], position: Sequence[float], angle: float
    ) -> List[LineSegment]:
        """Screen-space cube edges, clipped against the near plane.

        An edge crossing the near plane is shortened to the plane; an edge
        entirely on the camera side of it is dropped.
        """
        wire = Wireframe(
            vertices=tuple(
                self.eye_points(cube_vertices(dimensions), position, angle)
            ),
            edges=CUBE_EDGES,
        )
        out: List[LineSegment] = []
        for a, b in wire.segments():
            clipped = clip_near(a, b, self._frustum.near)  # type: ignore[arg-type]
            if clipped is None:
                continue
            start, end = clipped
            out.append(LineSegment(self._to_screen(start), self._to_screen(end)))  # type: ignore[arg-type]
        return out

    def render_cube(
        self,
        surface: PixelSurface,
        dimensions: Sequence[float],
        position: Sequence[float],
        color: ColorLike,
        state: AnimationState,
    ) -> AnimationState:
        """Advance ``state``, project with the new angle and draw the 12 edges."""
        nxt = state.advance()
        draw_segments(
            surface,
            self.cube_segments(dimensions, position, nxt.angle),
            Color.of(color),
        )
        return nxt
