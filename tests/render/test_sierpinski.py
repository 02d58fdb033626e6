from __future__ import annotations

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from pixelstroke.core.types import WHITE, Point2D
from pixelstroke.render.shapes import ShapeComposer, sierpinski_triangles

P = Point2D


def test_generation_one_is_the_input_triangle() -> None:
    assert list(sierpinski_triangles((0, 0), (64, 0), (0, 64), 1)) == [
        (P(0, 0), P(64, 0), P(0, 64))
    ]


def test_generation_two_corner_order() -> None:
    assert list(sierpinski_triangles((0, 0), (64, 0), (0, 64), 2)) == [
        (P(0, 0), P(32, 0), P(0, 32)),
        (P(32, 0), P(64, 0), P(32, 32)),
        (P(0, 32), P(32, 32), P(0, 64)),
    ]


def test_generation_four_leaves() -> None:
    leaves = list(sierpinski_triangles((0, 0), (64, 0), (0, 64), 4))
    assert len(leaves) == 27
    assert leaves[0] == (P(0, 0), P(8, 0), P(0, 8))
    for a, b, c in leaves:
        assert b == a.offset(8, 0)
        assert c == a.offset(0, 8)
    assert len(set(leaves)) == 27


@pytest.mark.parametrize("generation", [0, -1, 1.5, True, "3"])
def test_rejects_invalid_generation(generation) -> None:
    with pytest.raises(ValueError):
        sierpinski_triangles((0, 0), (1, 0), (0, 1), generation)


def test_deep_generation_does_not_recurse() -> None:
    # 3**(g-1) leaves; iterate lazily without building the list
    count = sum(1 for _ in sierpinski_triangles((0, 0), (4096, 0), (0, 4096), 9))
    assert count == 3**8


@settings(deadline=None, max_examples=50)
@given(generation=st.integers(min_value=1, max_value=6))
def test_leaf_count_is_power_of_three(generation: int) -> None:
    leaves = list(sierpinski_triangles((400, 50), (750, 550), (50, 550), generation))
    assert len(leaves) == 3 ** (generation - 1)


def test_composer_returns_leaf_count(surface) -> None:
    drawn = ShapeComposer(surface).draw_sierpinski_triangle(
        (400, 50), (750, 550), (50, 550), 6, WHITE
    )
    assert drawn == 243
    assert P(400, 50) in surface.pixels
    assert P(750, 550) in surface.pixels
    assert P(50, 550) in surface.pixels


def test_composer_rejects_invalid_generation_before_drawing(surface) -> None:
    with pytest.raises(ValueError):
        ShapeComposer(surface).draw_sierpinski_triangle(
            (0, 0), (1, 0), (0, 1), 0, WHITE
        )
    assert surface.writes == []
