"""Small linear-algebra helpers for 2D rotation and 3D perspective projection.

Vectors are plain tuples and matrices are row-major tuples of row tuples, so
every function here is pure and allocation-light. Implementations use only
the Python standard library (math).

Conventions
-----------
- Angles are radians.
- 3D uses a right-handed frame with the camera at the origin looking down
  -Z (the OpenGL convention), so points in front of the camera have z < 0.
- ``project`` maps clip space to a viewport ``(x, y, width, height)`` and
  flips Y so that world +Y points up on screen.
"""

from __future__ import annotations

from math import copysign, cos, sin
from typing import Optional, Tuple

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "Mat2",
    "Mat4",
    "Viewport",
    "rotation2",
    "mat2_apply",
    "clip_near",
    "translate4",
    "rotate_y4",
    "frustum4",
    "mat4_mul",
    "mat4_apply",
    "project",
]

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]
Mat2 = Tuple[Vec2, Vec2]
Mat4 = Tuple[Vec4, Vec4, Vec4, Vec4]
Viewport = Tuple[float, float, float, float]

# Smallest |w| used for the perspective divide; points on the camera plane
# are pushed just off it instead of dividing by zero.
_MIN_W = 1e-9


def rotation2(angle: float) -> Mat2:
    """Counter-clockwise 2D rotation matrix ``[[c, -s], [s, c]]``."""
    c = cos(angle)
    s = sin(angle)
    return ((c, -s), (s, c))


def mat2_apply(m: Mat2, v: Vec2) -> Vec2:
    x, y = v
    return (m[0][0] * x + m[0][1] * y, m[1][0] * x + m[1][1] * y)


def translate4(tx: float, ty: float, tz: float) -> Mat4:
    return (
        (1.0, 0.0, 0.0, float(tx)),
        (0.0, 1.0, 0.0, float(ty)),
        (0.0, 0.0, 1.0, float(tz)),
        (0.0, 0.0, 0.0, 1.0),
    )


def rotate_y4(angle: float) -> Mat4:
    """Rotation about the vertical (Y) axis."""
    c = cos(angle)
    s = sin(angle)
    return (
        (c, 0.0, s, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (-s, 0.0, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def frustum4(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4:
    """Perspective frustum matrix (same layout as ``glFrustum``).

    Raises:
        ValueError: if the bounds describe an empty or inverted volume.
    """
    if right == left or top == bottom:
        raise ValueError("frustum left/right and bottom/top must differ")
    if near <= 0 or far <= near:
        raise ValueError("frustum requires 0 < near < far")
    rl = right - left
    tb = top - bottom
    fn = far - near
    return (
        (2.0 * near / rl, 0.0, (right + left) / rl, 0.0),
        (0.0, 2.0 * near / tb, (top + bottom) / tb, 0.0),
        (0.0, 0.0, -(far + near) / fn, -2.0 * far * near / fn),
        (0.0, 0.0, -1.0, 0.0),
    )


def mat4_mul(a: Mat4, b: Mat4) -> Mat4:
    """Matrix product ``a @ b``."""
    rows = []
    for i in range(4):
        ai = a[i]
        rows.append(
            tuple(
                ai[0] * b[0][j] + ai[1] * b[1][j] + ai[2] * b[2][j] + ai[3] * b[3][j]
                for j in range(4)
            )
        )
    return (rows[0], rows[1], rows[2], rows[3])  # type: ignore[return-value]


def mat4_apply(m: Mat4, v: Vec4) -> Vec4:
    x, y, z, w = v
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z + m[0][3] * w,
        m[1][0] * x + m[1][1] * y + m[1][2] * z + m[1][3] * w,
        m[2][0] * x + m[2][1] * y + m[2][2] * z + m[2][3] * w,
        m[3][0] * x + m[3][1] * y + m[3][2] * z + m[3][3] * w,
    )


def clip_near(a: Vec3, b: Vec3, near: float) -> Optional[Tuple[Vec3, Vec3]]:
    """Clip an eye-space segment to the visible side of the near plane.

    The visible half-space is ``z <= -near``. Returns None when the whole
    segment is on the camera side, otherwise the (possibly shortened)
    segment with the clipped endpoint placed on the plane.
    """
    limit = -near
    a_in = a[2] <= limit
    b_in = b[2] <= limit
    if a_in and b_in:
        return (a, b)
    if not a_in and not b_in:
        return None
    t = (limit - a[2]) / (b[2] - a[2])
    hit = (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t, limit)
    return (a, hit) if a_in else (hit, b)


def project(point: Vec3, mvp: Mat4, viewport: Viewport) -> Vec3:
    """Transform an object-space point to window coordinates.

    Applies ``mvp``, divides by ``w`` and maps normalized device coordinates
    into ``viewport``. Returns ``(x, y, depth)`` with depth in ``[0, 1]`` for
    points inside the near/far range.
    """
    cx, cy, cz, cw = mat4_apply(mvp, (point[0], point[1], point[2], 1.0))
    if abs(cw) < _MIN_W:
        cw = copysign(_MIN_W, cw)
    nx = cx / cw
    ny = cy / cw
    nz = cz / cw
    vx, vy, vw, vh = viewport
    sx = vx + (nx * 0.5 + 0.5) * vw
    sy = vy + (0.5 - ny * 0.5) * vh
    return (sx, sy, nz * 0.5 + 0.5)
