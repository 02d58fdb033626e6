"""Pydantic model for user settings."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from .values import (
    ANIMATION_STEPS,
    BACKGROUND,
    CANVAS_DEFAULTS,
    CURVE_STEPS,
    SIERPINSKI_GENERATION,
    SLIDE_ORDER,
)

# Deeper generations multiply leaf triangles by 3 each step and stop
# adding visible detail on any realistic canvas.
MAX_SIERPINSKI_GENERATION = 12


class Settings(BaseModel):
    """Slideshow settings persisted to disk.

    Parameters
    ----------
    canvas_width, canvas_height: Canvas size in pixels. Read once at startup
        to build the cube projection viewport.
    target_fps: Frame rate the slideshow loop paces itself to.
    start_slide: Index of the slide shown first.
    sierpinski_generation: Subdivision depth of the fractal slide (>= 1).
    curve_steps: Number of segments used to sample the Bezier slide.
    triangle_step_rad / cube_step_rad: Rotation advanced per frame.
    background: RGB clear colour.
    """

    canvas_width: int = Field(default=int(CANVAS_DEFAULTS["width"]), gt=0)
    canvas_height: int = Field(default=int(CANVAS_DEFAULTS["height"]), gt=0)
    target_fps: float = Field(default=float(CANVAS_DEFAULTS["target_fps"]), gt=0)
    start_slide: int = Field(default=0, ge=0)
    sierpinski_generation: int = Field(default=SIERPINSKI_GENERATION)
    curve_steps: int = Field(default=CURVE_STEPS, ge=1)
    triangle_step_rad: float = Field(default=ANIMATION_STEPS["triangle_step_rad"], ge=0)
    cube_step_rad: float = Field(default=ANIMATION_STEPS["cube_step_rad"], ge=0)
    background: Tuple[int, int, int] = Field(default=BACKGROUND)

    @field_validator("sierpinski_generation")
    @classmethod
    def _chk_generation(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sierpinski_generation must be >= 1")
        if v > MAX_SIERPINSKI_GENERATION:
            raise ValueError(
                f"sierpinski_generation must be <= {MAX_SIERPINSKI_GENERATION}"
            )
        return v

    @field_validator("background")
    @classmethod
    def _chk_background(cls, v: Tuple[int, int, int]) -> Tuple[int, int, int]:
        for c in v:
            if c < 0 or c > 255:
                raise ValueError("background channels must be within 0..255")
        return v

    @model_validator(mode="after")
    def _chk_start_slide(self) -> "Settings":
        if self.start_slide >= len(SLIDE_ORDER):
            raise ValueError(
                f"start_slide must be < {len(SLIDE_ORDER)} (number of slides)"
            )
        return self
