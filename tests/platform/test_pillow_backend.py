from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from pixelstroke.core.raster import draw_line
from pixelstroke.core.types import BLACK, RED, WHITE, Point2D
from pixelstroke.platform.display.pillow_backend import PillowDisplayBackend


def test_size_and_initial_frame_is_black() -> None:
    backend = PillowDisplayBackend(size=(32, 16))
    assert backend.size() == (32, 16)
    assert backend.pixel(0, 0) == (0, 0, 0)


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-1, 5)])
def test_rejects_non_positive_size(size) -> None:
    with pytest.raises(ValueError):
        PillowDisplayBackend(size=size)


def test_draw_and_present() -> None:
    backend = PillowDisplayBackend(size=(10, 10))
    surface = backend.begin_frame()
    surface.clear(BLACK)
    draw_line(surface, (0, 0), (9, 0), RED)
    backend.end_frame()
    assert backend.frames_presented == 1
    assert backend.pixel(0, 0) == RED
    assert backend.pixel(9, 0) == RED
    assert backend.pixel(0, 1) == BLACK


def test_presented_frame_is_a_snapshot() -> None:
    backend = PillowDisplayBackend(size=(4, 4))
    surface = backend.begin_frame()
    surface.draw_pixel(Point2D(1, 1), WHITE)
    backend.end_frame()
    surface = backend.begin_frame()
    surface.clear(RED)
    # Not yet presented
    assert backend.pixel(1, 1) == WHITE
    assert backend.pixel(0, 0) == BLACK
    backend.end_frame()
    assert backend.pixel(1, 1) == RED


def test_out_of_canvas_writes_are_ignored() -> None:
    backend = PillowDisplayBackend(size=(5, 5))
    surface = backend.begin_frame()
    draw_line(surface, (-3, 2), (7, 2), WHITE)
    backend.end_frame()
    assert surface.writes == 5  # type: ignore[attr-defined]
    assert all(backend.pixel(x, 2) == WHITE for x in range(5))


def test_save_png(tmp_path: Path) -> None:
    backend = PillowDisplayBackend(size=(8, 6))
    surface = backend.begin_frame()
    surface.draw_pixel(Point2D(3, 2), WHITE)
    backend.end_frame()
    out = tmp_path / "nested" / "frame.png"
    backend.save_png(str(out))
    with Image.open(out) as img:
        assert img.size == (8, 6)
        assert img.convert("RGB").getpixel((3, 2)) == (255, 255, 255)
