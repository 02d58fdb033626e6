"""Framework-agnostic pixel surface and display backend protocols.

The drawing core only ever calls :meth:`PixelSurface.draw_pixel`. Display
backends (pygame, Pillow, test doubles) own the pixel buffer and decide what
happens to writes outside the canvas; every bundled backend ignores them.
"""

from __future__ import annotations

from typing import Protocol, Tuple

from pixelstroke.core.types import ColorLike, Point2D


class PixelSurface(Protocol):
    def draw_pixel(self, point: Point2D, color: ColorLike) -> None:
        ...

    def clear(self, color: ColorLike) -> None:
        ...


class DisplayBackend(Protocol):
    def size(self) -> Tuple[int, int]:
        ...

    def begin_frame(self) -> PixelSurface:
        ...

    def end_frame(self) -> None:
        ...

    def save_png(self, path: str) -> None:
        ...
