"""Pygame InputBackend mapping window events to slideshow input events.

Keys of interest are reported by name (``left``, ``right``, ``escape``,
``q``); pointer motion is reported as ``mouse`` events carrying the pointer
position. In headless mode (dummy video) pygame delivers no real events;
tests can synthesize them with ``pygame.event.post``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generator

pg: Any = None
try:  # pragma: no cover - optional dependency in CI
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


@dataclass(slots=True)
class InputEvent:
    type: str  # "quit" | "key" | "mouse"
    key: str = ""
    x: int = 0
    y: int = 0


def _key_name(key: int) -> str:
    if key == pg.K_LEFT:
        return "left"
    if key == pg.K_RIGHT:
        return "right"
    if key == pg.K_ESCAPE:
        return "escape"
    if key == pg.K_q:
        return "q"
    return ""


class PygameInputBackend:
    """Collects pygame events and emits :class:`InputEvent`s.

    Use pump() once per frame to drain the pygame queue.
    """

    def __init__(self) -> None:
        if pg is None:
            raise RuntimeError("pygame not available for input backend")
        if not pg.get_init():
            pg.init()

    def pump(self) -> Generator[InputEvent, None, None]:
        for ev in pg.event.get():
            if ev.type == pg.QUIT:
                yield InputEvent("quit")
            elif ev.type == pg.KEYDOWN:
                name = _key_name(ev.key)
                if name:
                    yield InputEvent("key", key=name)
            elif ev.type == pg.MOUSEMOTION:
                yield InputEvent("mouse", x=int(ev.pos[0]), y=int(ev.pos[1]))
