"""Explicit animation state for rotating shapes.

An :class:`AnimationState` replaces a process-wide static angle: the frame
driver owns one value per animated shape, passes it into the draw call and
keeps the state that comes back. Angles are radians wrapped into
``[0, 2*pi)`` on every advance so the value stays bounded over an unbounded
number of frames.

Example:
    state = AnimationState(step=0.05)
    for _ in range(3):
        state = state.advance()
    # state.angle == 0.15 (approximately)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from math import isfinite, tau

__all__ = ["AnimationState", "wrap_angle"]


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians into ``[0, 2*pi)``."""
    wrapped = angle % tau
    # float modulo can land exactly on tau for tiny negative inputs
    if wrapped >= tau:
        wrapped = 0.0
    return wrapped


@dataclass(frozen=True, slots=True)
class AnimationState:
    """Rotation angle (radians) and the amount it advances per call."""

    angle: float = 0.0
    step: float = 0.0

    def __post_init__(self) -> None:
        if not isfinite(self.angle):
            raise ValueError(f"angle must be finite, got {self.angle}")
        if not isfinite(self.step) or self.step < 0:
            raise ValueError(f"step must be a finite value >= 0, got {self.step}")
        if not 0.0 <= self.angle < tau:
            object.__setattr__(self, "angle", wrap_angle(self.angle))

    def advance(self, frames: int = 1) -> "AnimationState":
        """Return a new state advanced by ``frames`` steps."""
        return replace(self, angle=wrap_angle(self.angle + self.step * frames))
