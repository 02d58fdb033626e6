"""Centralized value sets loaded from YAML.

This module provides a single place to access the slide order, slide
colours, animation steps, frustum bounds and default canvas size. The master
source is ``values.yml`` in this package.

On import we load and parse the YAML. A missing or malformed file falls back
to the hard-coded defaults below (which mirror ``values.yml``) so the
application can still run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import yaml

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ---------------------------------------------------
_FALLBACK_CANVAS = {"width": 800, "height": 600, "target_fps": 60.0}
_FALLBACK_BACKGROUND = (0, 0, 0)
_FALLBACK_ANIMATION = {"triangle_step_rad": 0.025, "cube_step_rad": 0.05}
_FALLBACK_FRUSTUM = {
    "left": -1.0,
    "right": 1.0,
    "bottom": -1.0,
    "top": 1.0,
    "near": 1.0,
    "far": 100.0,
}
_FALLBACK_SLIDE_ORDER = [
    "line",
    "rectangle",
    "rotated_triangle",
    "circle",
    "curve",
    "sierpinski",
    "fake_cube",
    "cube",
]
_FALLBACK_SLIDE_COLORS = {
    "line": (255, 255, 255),
    "rectangle": (255, 0, 0),
    "rotated_triangle": (0, 255, 0),
    "circle": (0, 0, 255),
    "curve": (255, 255, 0),
    "sierpinski": (255, 0, 255),
    "fake_cube": (0, 255, 255),
    "cube": (255, 255, 255),
}
_FALLBACK_SIERPINSKI_GENERATION = 6
_FALLBACK_CURVE_STEPS = 100
_FALLBACK_CUBE = {"dimensions": (250, 250, 250), "position": (-125, -125, -750)}


def _rgb(v: object) -> Tuple[int, int, int] | None:
    if (
        isinstance(v, (list, tuple))
        and len(v) == 3
        and all(isinstance(c, int) and 0 <= c <= 255 for c in v)
    ):
        return (int(v[0]), int(v[1]), int(v[2]))
    return None


def _triple(v: object) -> Tuple[float, float, float] | None:
    if (
        isinstance(v, (list, tuple))
        and len(v) == 3
        and all(isinstance(c, (int, float)) for c in v)
    ):
        return (float(v[0]), float(v[1]), float(v[2]))
    return None


def _load(path: Path) -> Dict[str, Any]:
    """Parse ``path`` into a dict; empty dict when missing or malformed."""
    if not path.exists():
        logger.warning("values file not found, using defaults: %s", path)
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("failed to read %s, using defaults: %s", path, exc)
        return {}
    if not isinstance(raw, dict):
        logger.warning("values file %s is not a mapping, using defaults", path)
        return {}
    return raw


# --- Load YAML -----------------------------------------------------------
_canvas: Dict[str, float] = dict(_FALLBACK_CANVAS)
_background: Tuple[int, int, int] = _FALLBACK_BACKGROUND
_animation: Dict[str, float] = dict(_FALLBACK_ANIMATION)
_frustum: Dict[str, float] = dict(_FALLBACK_FRUSTUM)
_slide_order: List[str] = list(_FALLBACK_SLIDE_ORDER)
_slide_colors: Dict[str, Tuple[int, int, int]] = dict(_FALLBACK_SLIDE_COLORS)
_sierpinski_generation: int = _FALLBACK_SIERPINSKI_GENERATION
_curve_steps: int = _FALLBACK_CURVE_STEPS
_cube: Dict[str, Tuple[float, float, float]] = {
    k: tuple(float(c) for c in v) for k, v in _FALLBACK_CUBE.items()  # type: ignore[misc]
}

raw = _load(_YAML_PATH)

canvas = raw.get("canvas")
if isinstance(canvas, dict):
    for k in ("width", "height", "target_fps"):
        v = canvas.get(k)
        if isinstance(v, (int, float)) and v > 0:
            _canvas[k] = v

bg = _rgb(raw.get("background"))
if bg is not None:
    _background = bg

anim = raw.get("animation")
if isinstance(anim, dict):
    for k in ("triangle_step_rad", "cube_step_rad"):
        v = anim.get(k)
        if isinstance(v, (int, float)) and v >= 0:
            _animation[k] = float(v)

fr = raw.get("frustum")
if isinstance(fr, dict):
    _frustum.update(
        {k: float(v) for k, v in fr.items() if k in _frustum and isinstance(v, (int, float))}
    )

slides = raw.get("slides")
if isinstance(slides, dict):
    order = slides.get("order")
    if isinstance(order, list) and order and all(x in _slide_colors for x in order):
        _slide_order = list(order)
    colors = slides.get("colors")
    if isinstance(colors, dict):
        for name, v in colors.items():
            rgb = _rgb(v)
            if name in _slide_colors and rgb is not None:
                _slide_colors[name] = rgb

sp = raw.get("sierpinski")
if isinstance(sp, dict) and isinstance(sp.get("generation"), int):
    _sierpinski_generation = max(1, int(sp["generation"]))

cv = raw.get("curve")
if isinstance(cv, dict) and isinstance(cv.get("steps"), int):
    _curve_steps = max(1, int(cv["steps"]))

cb = raw.get("cube")
if isinstance(cb, dict):
    for k in ("dimensions", "position"):
        t = _triple(cb.get(k))
        if t is not None:
            _cube[k] = t

# --- Public accessors ----------------------------------------------------
CANVAS_DEFAULTS: Dict[str, float] = dict(_canvas)
BACKGROUND: Tuple[int, int, int] = _background
ANIMATION_STEPS: Dict[str, float] = dict(_animation)
FRUSTUM_BOUNDS: Dict[str, float] = dict(_frustum)
SLIDE_ORDER: Sequence[str] = tuple(_slide_order)
SLIDE_COLORS: Dict[str, Tuple[int, int, int]] = dict(_slide_colors)
SIERPINSKI_GENERATION: int = _sierpinski_generation
CURVE_STEPS: int = _curve_steps
CUBE_DEFAULTS: Dict[str, Tuple[float, float, float]] = dict(_cube)

__all__ = [
    "CANVAS_DEFAULTS",
    "BACKGROUND",
    "ANIMATION_STEPS",
    "FRUSTUM_BOUNDS",
    "SLIDE_ORDER",
    "SLIDE_COLORS",
    "SIERPINSKI_GENERATION",
    "CURVE_STEPS",
    "CUBE_DEFAULTS",
]
