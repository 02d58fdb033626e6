"""Runtime configuration helpers.

Small aggregator that merges the value sets from ``settings.values``, the
persisted Settings store and optional CLI overrides into the
:class:`RuntimeConfig` the slideshow is built from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from .settings.schema import Settings
from .settings.store import SettingsStore
from .settings.values import CUBE_DEFAULTS, FRUSTUM_BOUNDS, SLIDE_COLORS, SLIDE_ORDER

logger = logging.getLogger(__name__)

# argparse attribute -> Settings field
_CLI_OVERRIDES = {
    "width": "canvas_width",
    "height": "canvas_height",
    "fps": "target_fps",
    "slide": "start_slide",
    "generation": "sierpinski_generation",
}


@dataclass(slots=True)
class RuntimeConfig:
    settings: Settings
    slide_order: Sequence[str] = field(default_factory=lambda: tuple(SLIDE_ORDER))
    slide_colors: Dict[str, Tuple[int, int, int]] = field(
        default_factory=lambda: dict(SLIDE_COLORS)
    )
    frustum: Dict[str, float] = field(default_factory=lambda: dict(FRUSTUM_BOUNDS))
    cube_dimensions: Tuple[float, float, float] = CUBE_DEFAULTS["dimensions"]
    cube_position: Tuple[float, float, float] = CUBE_DEFAULTS["position"]

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (self.settings.canvas_width, self.settings.canvas_height)


def make_runtime_config(
    *, args: Optional[object] = None, settings: Optional[Settings] = None
) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and CLI overrides.

    Rules:
    - ``settings`` when given, otherwise ``SettingsStore.load()``, provides
      the baseline (defaults when nothing is persisted).
    - Attributes of *args* (argparse.Namespace-like) that are not None
      override the matching settings fields for this session only.
    - The merged values are re-validated, so an invalid override raises
      ``pydantic.ValidationError``.
    """
    base = settings if settings is not None else SettingsStore.load()
    overrides: Dict[str, Any] = {}
    if args is not None:
        for attr, field_name in _CLI_OVERRIDES.items():
            value = getattr(args, attr, None)
            if value is not None:
                overrides[field_name] = value
    if overrides:
        logger.debug("applying CLI overrides: %s", overrides)
        base = Settings.model_validate({**base.model_dump(), **overrides})
    return RuntimeConfig(settings=base)
