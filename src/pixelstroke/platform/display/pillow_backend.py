"""Pillow framebuffer DisplayBackend for headless rendering and export.

The frame lives in a ``PIL.Image`` in RGB mode. Nothing is shown on screen;
``end_frame`` only snapshots the finished frame so ``image`` always holds
the last presented frame while the next one is being drawn. Requires no
SDL, which makes it the default for ``--headless`` runs and PNG export.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image

from pixelstroke.core.types import ColorLike, Point2D
from pixelstroke.render.surface import DisplayBackend, PixelSurface

logger = logging.getLogger(__name__)


class _PillowSurface(PixelSurface):
    """Writes pixels straight into the backing image, counting writes."""

    def __init__(self, img: Image.Image) -> None:
        self._img = img
        self._pixels = img.load()
        self._w, self._h = img.size
        self.writes = 0

    def draw_pixel(self, point: Point2D, color: ColorLike) -> None:
        x, y = point
        if 0 <= x < self._w and 0 <= y < self._h:
            r, g, b = color
            self._pixels[x, y] = (int(r), int(g), int(b))
            self.writes += 1

    def clear(self, color: ColorLike) -> None:
        r, g, b = color
        self._img.paste((int(r), int(g), int(b)), (0, 0, self._w, self._h))


class PillowDisplayBackend(DisplayBackend):
    def __init__(self, size: Tuple[int, int] = (800, 600)) -> None:
        self._w, self._h = int(size[0]), int(size[1])
        if self._w <= 0 or self._h <= 0:
            raise ValueError(f"canvas size must be positive, got {size}")
        self._frame = Image.new("RGB", (self._w, self._h), (0, 0, 0))
        self._presented: Image.Image = self._frame.copy()
        self.frames_presented = 0

    def size(self) -> Tuple[int, int]:
        return (self._w, self._h)

    def begin_frame(self) -> PixelSurface:
        return _PillowSurface(self._frame)

    def end_frame(self) -> None:
        self._presented = self._frame.copy()
        self.frames_presented += 1

    @property
    def image(self) -> Image.Image:
        """The last presented frame."""
        return self._presented

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        r, g, b = self._presented.getpixel((x, y))  # type: ignore[misc]
        return (int(r), int(g), int(b))

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._presented.save(path, format="PNG")
        logger.info("frame saved to %s", path)
