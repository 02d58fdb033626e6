from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

# Headless SDL for every test that touches pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from pixelstroke.core.types import Point2D  # noqa: E402


class RecordingSurface:
    """PixelSurface double that records every write in order."""

    def __init__(self) -> None:
        self.writes: list[tuple[Point2D, tuple[int, int, int]]] = []
        self.clears: list[tuple[int, int, int]] = []

    def draw_pixel(self, point: Point2D, color: tuple[int, int, int]) -> None:
        self.writes.append((Point2D(point[0], point[1]), tuple(color)))  # type: ignore[arg-type]

    def clear(self, color: tuple[int, int, int]) -> None:
        self.clears.append(tuple(color))  # type: ignore[arg-type]
        self.writes.clear()

    @property
    def points(self) -> list[Point2D]:
        return [p for p, _ in self.writes]

    @property
    def pixels(self) -> set[Point2D]:
        return {p for p, _ in self.writes}


@pytest.fixture
def make_surface() -> Callable[[], RecordingSurface]:
    return RecordingSurface


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    monkeypatch.setenv("PIXELSTROKE_HOME", str(home))
    return home
