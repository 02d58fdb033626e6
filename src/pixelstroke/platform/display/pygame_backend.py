"""Pygame-based DisplayBackend with headless (offscreen) support.

This module implements a PixelSurface and DisplayBackend using pygame.
It's suitable for deterministic, headless tests by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from pixelstroke.platform.display.pygame_backend import PygameDisplayBackend

    backend = PygameDisplayBackend(size=(800, 600))
    surface = backend.begin_frame()
    surface.clear((0, 0, 0))
    surface.draw_pixel((10, 10), (255, 255, 0))
    backend.end_frame()
    backend.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Tuple

from pixelstroke.core.types import ColorLike, Point2D
from pixelstroke.render.surface import DisplayBackend, PixelSurface

logger = logging.getLogger(__name__)

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


def _pygame_color(c: ColorLike) -> Tuple[int, int, int]:
    r, g, b = c
    return int(r), int(g), int(b)


class _PygameSurface(PixelSurface):
    def __init__(self, surface: Any) -> None:
        self._surface = surface
        self._w, self._h = surface.get_size()

    def draw_pixel(self, point: Point2D, color: ColorLike) -> None:
        x, y = point
        # Out-of-canvas writes are dropped
        if 0 <= x < self._w and 0 <= y < self._h:
            self._surface.set_at((x, y), _pygame_color(color))

    def clear(self, color: ColorLike) -> None:
        self._surface.fill(_pygame_color(color))


class PygameDisplayBackend(DisplayBackend):
    """Pygame implementation of DisplayBackend with offscreen surface.

    Drawing always targets an offscreen surface. When ``create_window`` is
    set (and SDL is not in dummy mode) a window is opened and the offscreen
    buffer is blitted and flipped on every ``end_frame``.
    """

    def __init__(
        self, size: Tuple[int, int] = (800, 600), *, create_window: bool = False
    ) -> None:
        local_pg = pg
        if local_pg is None:
            raise RuntimeError(
                "pygame is not available. "
                "Ensure it is installed and that SDL is configured."
            )

        # Ensure headless if requested
        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        if not local_pg.get_init():
            local_pg.init()

        self._width, self._height = int(size[0]), int(size[1])
        self._window_surface = None
        if create_window and os.environ.get("SDL_VIDEODRIVER") != "dummy":
            try:
                self._window_surface = local_pg.display.set_mode(
                    (self._width, self._height)
                )
                local_pg.display.set_caption("pixelstroke")
            except local_pg.error as exc:
                logger.warning(
                    "window creation failed (%s); falling back to offscreen. "
                    "Check SDL_VIDEODRIVER and display permissions.",
                    exc,
                )
                self._window_surface = None

        self._surface = local_pg.Surface((self._width, self._height))
        self.frames_presented = 0

    @property
    def has_window(self) -> bool:
        return self._window_surface is not None

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def begin_frame(self) -> PixelSurface:
        return _PygameSurface(self._surface)

    def end_frame(self) -> None:
        # If we have a window, blit the offscreen buffer and flip
        local_pg = pg
        if self._window_surface is not None and local_pg is not None:
            self._window_surface.blit(self._surface, (0, 0))
            local_pg.display.flip()
        self.frames_presented += 1

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        """Read back one pixel of the offscreen buffer (RGB)."""
        c = self._surface.get_at((x, y))
        return (c.r, c.g, c.b)

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        pg.image.save(self._surface, path)
        logger.info("frame saved to %s", path)

    def shutdown(self) -> None:
        if pg is not None and pg.get_init():
            pg.quit()
