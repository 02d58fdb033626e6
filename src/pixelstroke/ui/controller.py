"""
Slideshow controller for pixelstroke.

Provides a SlideshowController that owns the frame tick, the current slide,
the pointer position and the animation state of the rotating shapes. Each
frame it drains input, clears the surface, draws the current slide through
the shape composer or the cube projector and presents the frame.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

from pixelstroke.config import RuntimeConfig
from pixelstroke.core.animation import AnimationState
from pixelstroke.core.time import TimeSource
from pixelstroke.core.types import Point2D
from pixelstroke.platform.input.pygame_input import InputEvent
from pixelstroke.render.projector import Frustum, Projector3D
from pixelstroke.render.shapes import ShapeComposer
from pixelstroke.render.surface import DisplayBackend, PixelSurface

logger = logging.getLogger(__name__)


class SlideshowController:
    """Owns the frame loop, input handling and per-slide drawing."""

    def __init__(
        self,
        *,
        display: DisplayBackend,
        cfg: RuntimeConfig,
        ts: TimeSource,
        input_backend: Optional[Any] = None,
    ) -> None:
        self._display = display
        self._cfg = cfg
        self._ts = ts
        self._input = input_backend
        self._running: bool = False

        s = cfg.settings
        self._width, self._height = cfg.canvas_size
        self._slides: List[str] = list(cfg.slide_order)
        self.slide: int = s.start_slide % len(self._slides)
        self.pointer: Point2D = Point2D(0, 0)
        self.triangle_state = AnimationState(step=s.triangle_step_rad)
        self.cube_state = AnimationState(step=s.cube_step_rad)
        self.frames: int = 0
        # Viewport is fixed from the configured canvas size
        self._projector = Projector3D.for_canvas(
            self._width, self._height, Frustum(**cfg.frustum)
        )
        self._draw_fns: Dict[str, Callable[[ShapeComposer], None]] = {
            "line": self._draw_line_slide,
            "rectangle": self._draw_rectangle_slide,
            "rotated_triangle": self._draw_rotated_triangle_slide,
            "circle": self._draw_circle_slide,
            "curve": self._draw_curve_slide,
            "sierpinski": self._draw_sierpinski_slide,
            "fake_cube": self._draw_fake_cube_slide,
            "cube": self._draw_cube_slide,
        }

    # --- navigation ------------------------------------------------------
    @property
    def slide_name(self) -> str:
        return self._slides[self.slide]

    @property
    def running(self) -> bool:
        return self._running

    def next_slide(self) -> None:
        self.slide = (self.slide + 1) % len(self._slides)
        logger.debug("slide -> %d (%s)", self.slide, self.slide_name)

    def prev_slide(self) -> None:
        self.slide = (self.slide - 1) % len(self._slides)
        logger.debug("slide -> %d (%s)", self.slide, self.slide_name)

    def handle_events(self, events: Iterable[InputEvent]) -> None:
        for ev in events:
            if ev.type == "quit":
                self._running = False
            elif ev.type == "key":
                if ev.key == "right":
                    self.next_slide()
                elif ev.key == "left":
                    self.prev_slide()
                elif ev.key in ("escape", "q"):
                    self._running = False
            elif ev.type == "mouse":
                self.pointer = Point2D(ev.x, ev.y)

    def _process_input(self) -> None:
        if self._input is None:
            return
        self.handle_events(self._input.pump())

    # --- drawing ---------------------------------------------------------
    def _color(self, name: str) -> tuple[int, int, int]:
        return self._cfg.slide_colors[name]

    def _draw_line_slide(self, shapes: ShapeComposer) -> None:
        center = (self._width // 2, self._height // 2)
        shapes.draw_line(center, self.pointer, self._color("line"))

    def _draw_rectangle_slide(self, shapes: ShapeComposer) -> None:
        shapes.draw_rectangle(
            (self._width - 100, self._height - 100), (50, 50), self._color("rectangle")
        )

    def _draw_rotated_triangle_slide(self, shapes: ShapeComposer) -> None:
        self.triangle_state = shapes.draw_rotated_triangle(
            (100, 100),
            (100, 200),
            (200, 200),
            self._color("rotated_triangle"),
            self.triangle_state,
        )

    def _draw_circle_slide(self, shapes: ShapeComposer) -> None:
        shapes.draw_circle(
            (self._width // 2, self._height // 2), 250, self._color("circle")
        )

    def _draw_curve_slide(self, shapes: ShapeComposer) -> None:
        shapes.draw_curve(
            (50, 50),
            (self._width - 50, self._height - 50),
            self.pointer,
            self._color("curve"),
            steps=self._cfg.settings.curve_steps,
        )

    def _draw_sierpinski_slide(self, shapes: ShapeComposer) -> None:
        shapes.draw_sierpinski_triangle(
            (self._width // 2, 50),
            (self._width - 50, self._height - 50),
            (50, self._height - 50),
            self._cfg.settings.sierpinski_generation,
            self._color("sierpinski"),
        )

    def _draw_fake_cube_slide(self, shapes: ShapeComposer) -> None:
        shapes.draw_fake_cube(
            (200, 200, 50),
            (self._width // 2 - 100, self._height // 2 - 100),
            self._color("fake_cube"),
        )

    def _draw_cube_slide(self, shapes: ShapeComposer) -> None:
        self.cube_state = self._projector.render_cube(
            shapes.surface,
            self._cfg.cube_dimensions,
            self._cfg.cube_position,
            self._color("cube"),
            self.cube_state,
        )

    def draw_slide(self, surface: PixelSurface) -> None:
        """Clear ``surface`` and draw the current slide onto it."""
        surface.clear(self._cfg.settings.background)
        self._draw_fns[self.slide_name](ShapeComposer(surface))

    def render_frame(self) -> None:
        surface = self._display.begin_frame()
        self.draw_slide(surface)
        self._display.end_frame()
        self.frames += 1

    # --- loop ------------------------------------------------------------
    async def run(self, *, max_frames: Optional[int] = None) -> None:
        """Render frames at the target rate until stopped or ``max_frames``."""
        self._running = True
        dt_target = 1.0 / max(1e-6, float(self._cfg.settings.target_fps))
        logger.info(
            "slideshow started at %.1f fps on slide %d (%s)",
            self._cfg.settings.target_fps,
            self.slide,
            self.slide_name,
        )
        try:
            while self._running:
                t0 = self._ts.monotonic()
                self._process_input()
                if not self._running:
                    break
                self.render_frame()
                if max_frames is not None and self.frames >= max_frames:
                    break
                elapsed = self._ts.monotonic() - t0
                await self._ts.sleep(max(0.0, dt_target - elapsed))
        finally:
            self._running = False
            logger.info("slideshow stopped after %d frames", self.frames)

    async def stop(self) -> None:
        self._running = False

    def export_slides(self, out_dir: str | Path) -> List[Path]:
        """Render every slide once and save each frame as ``NN_<name>.png``."""
        out = Path(out_dir)
        out.mkdir(parents=True, exist_ok=True)
        start = self.slide
        paths: List[Path] = []
        for idx, name in enumerate(self._slides):
            self.slide = idx
            self.render_frame()
            path = out / f"{idx:02d}_{name}.png"
            self._display.save_png(str(path))
            paths.append(path)
        self.slide = start
        return paths
