"""Interactive shape slideshow (application entrypoint).

Opens a window, steps through the eight shape slides with the left/right
arrow keys and feeds the pointer position to the line and curve slides. The
async `main_async` entry runs the windowed loop; `_main_headless_async`
renders offscreen for CI, tests and PNG export.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from pydantic import ValidationError

from pixelstroke.config import RuntimeConfig, make_runtime_config
from pixelstroke.core.time import RealTimeSource, SimTimeSource
from pixelstroke.platform.display.pillow_backend import PillowDisplayBackend
from pixelstroke.render.surface import DisplayBackend
from pixelstroke.settings.store import SettingsStore
from pixelstroke.ui.controller import SlideshowController

logger = logging.getLogger(__name__)


def _print_help() -> None:
    print("Keys: LEFT/RIGHT = previous/next slide, q/ESC = quit")


def _make_display(
    backend: str, rc: RuntimeConfig, *, create_window: bool
) -> DisplayBackend:
    if backend == "pillow":
        return PillowDisplayBackend(size=rc.canvas_size)
    if not create_window:
        # Offscreen pygame must not try to reach a real display
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from pixelstroke.platform.display.pygame_backend import PygameDisplayBackend

    return PygameDisplayBackend(size=rc.canvas_size, create_window=create_window)


def _runtime_config(args: argparse.Namespace) -> RuntimeConfig:
    """Build the runtime config, reporting bad overrides as a usage error.

    With ``--save-settings`` the effective settings are persisted.
    """
    try:
        rc = make_runtime_config(args=args)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in exc.errors()
        )
        build_parser().error(f"invalid option value ({problems})")
    if getattr(args, "save_settings", False):
        SettingsStore.save(rc.settings)
        logger.info("settings saved to %s", SettingsStore.settings_path())
    return rc


async def main_async(args: argparse.Namespace) -> None:
    from pixelstroke.platform.display.pygame_backend import PygameDisplayBackend
    from pixelstroke.platform.input.pygame_input import PygameInputBackend

    rc = _runtime_config(args)
    display = PygameDisplayBackend(size=rc.canvas_size, create_window=True)
    if not display.has_window:
        logger.warning("no window available; use --headless to render offscreen")
    ui = SlideshowController(
        display=display,
        cfg=rc,
        ts=RealTimeSource(),
        input_backend=PygameInputBackend(),
    )
    _print_help()
    ui_task = asyncio.create_task(ui.run(), name="slideshow")
    try:
        await ui_task
    finally:
        if not ui_task.done():
            ui_task.cancel()
        await asyncio.gather(ui_task, return_exceptions=True)
        display.shutdown()


async def _main_headless_async(args: argparse.Namespace) -> SlideshowController:
    """Headless runner for CI, tests and export.

    Renders offscreen with a simulated clock so frames are produced as fast
    as they can be drawn. With ``--export`` every slide is written to PNG;
    otherwise ``--frames`` frames of the start slide are rendered.
    """
    rc = _runtime_config(args)
    display = _make_display(getattr(args, "backend", "pillow"), rc, create_window=False)
    ui = SlideshowController(display=display, cfg=rc, ts=SimTimeSource())
    export_dir = getattr(args, "export", None)
    try:
        if export_dir:
            paths = ui.export_slides(export_dir)
            logger.info("exported %d slides to %s", len(paths), export_dir)
        else:
            await ui.run(max_frames=max(1, int(getattr(args, "frames", 1))))
    finally:
        shutdown = getattr(display, "shutdown", None)
        if shutdown is not None:
            shutdown()
    return ui


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Canvas and slide options default to None so persisted settings apply
    unless overridden.
    """
    p = argparse.ArgumentParser(description="pixelstroke shape slideshow")
    p.add_argument("--width", type=int, default=None, help="Canvas width in px")
    p.add_argument("--height", type=int, default=None, help="Canvas height in px")
    p.add_argument("--fps", type=float, default=None, help="Target frames per second")
    p.add_argument(
        "--slide", type=int, default=None, help="Index of the first slide (0-7)"
    )
    p.add_argument(
        "--generation",
        type=int,
        default=None,
        help="Sierpinski subdivision depth (>= 1)",
    )
    p.add_argument(
        "--headless",
        dest="headless",
        action="store_true",
        help="Render offscreen without a window (suitable for CI/tests)",
    )
    p.add_argument(
        "--frames",
        type=int,
        default=1,
        help="Frames to render in headless mode (default: 1)",
    )
    p.add_argument(
        "--export",
        type=str,
        default=None,
        help="Headless only: write one PNG per slide into this directory",
    )
    p.add_argument(
        "--backend",
        choices=("pillow", "pygame"),
        default="pillow",
        help="Offscreen backend for headless mode (default: pillow)",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    p.add_argument(
        "--save-settings",
        dest="save_settings",
        action="store_true",
        help="Persist the effective settings (with overrides) as new defaults",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """
    return build_parser().parse_args(argv)

