from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import given, settings

from pixelstroke.core.raster import line_points
from pixelstroke.core.types import Point2D

coord = st.integers(min_value=-500, max_value=500)
point = st.builds(Point2D, coord, coord)


@settings(deadline=None, max_examples=200)
@given(p=point)
def test_degenerate_segment_is_one_pixel(p: Point2D) -> None:
    assert list(line_points(p, p)) == [p]


@settings(deadline=None, max_examples=300)
@given(a=point, b=point)
def test_connected_and_includes_endpoints(a: Point2D, b: Point2D) -> None:
    pts = list(line_points(a, b))
    assert pts[0] == a
    assert pts[-1] == b
    for p, q in zip(pts, pts[1:]):
        assert abs(p.x - q.x) <= 1
        assert abs(p.y - q.y) <= 1
        assert p != q


@settings(deadline=None, max_examples=300)
@given(a=point, b=point)
def test_one_pixel_per_major_axis_step(a: Point2D, b: Point2D) -> None:
    pts = list(line_points(a, b))
    assert len(pts) == max(abs(b.x - a.x), abs(b.y - a.y)) + 1
    assert len(set(pts)) == len(pts)


@settings(deadline=None, max_examples=300)
@given(a=point, b=point)
def test_direction_independent(a: Point2D, b: Point2D) -> None:
    assert set(line_points(a, b)) == set(line_points(b, a))


@settings(deadline=None, max_examples=200)
@given(a=point, b=point)
def test_pixels_stay_near_ideal_line(a: Point2D, b: Point2D) -> None:
    dx = b.x - a.x
    dy = b.y - a.y
    length = max(abs(dx), abs(dy))
    for p in line_points(a, b):
        if length == 0:
            assert p == a
            continue
        # Distance along the minor axis from the ideal line is at most half a pixel
        if abs(dx) > abs(dy):
            ideal = a.y + dy * (p.x - a.x) / dx
            assert abs(p.y - ideal) <= 0.5 + 1e-9
        else:
            ideal = a.x + dx * (p.y - a.y) / dy
            assert abs(p.x - ideal) <= 0.5 + 1e-9
