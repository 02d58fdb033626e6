from __future__ import annotations

from math import inf, nan, pi, tau

import pytest

from pixelstroke.core.animation import AnimationState, wrap_angle


def test_default_state() -> None:
    s = AnimationState()
    assert s.angle == 0.0
    assert s.step == 0.0


def test_advance_returns_new_state() -> None:
    s = AnimationState(step=0.05)
    n = s.advance()
    assert s.angle == 0.0
    assert n.angle == pytest.approx(0.05)
    assert n.step == 0.05


def test_advance_multiple_frames() -> None:
    s = AnimationState(step=0.025).advance(4)
    assert s.angle == pytest.approx(0.1)


def test_angle_wraps_into_range() -> None:
    s = AnimationState(angle=tau - 0.01, step=0.05).advance()
    assert 0.0 <= s.angle < tau
    assert s.angle == pytest.approx(0.04)


def test_long_run_stays_bounded() -> None:
    s = AnimationState(step=0.05)
    for _ in range(10_000):
        s = s.advance()
        assert 0.0 <= s.angle < tau


def test_constructor_wraps_angle() -> None:
    assert AnimationState(angle=3 * pi).angle == pytest.approx(pi)
    assert AnimationState(angle=-pi / 2).angle == pytest.approx(1.5 * pi)


@pytest.mark.parametrize("angle", [nan, inf, -inf])
def test_rejects_non_finite_angle(angle: float) -> None:
    with pytest.raises(ValueError):
        AnimationState(angle=angle)


@pytest.mark.parametrize("step", [nan, inf, -0.1])
def test_rejects_bad_step(step: float) -> None:
    with pytest.raises(ValueError):
        AnimationState(step=step)


def test_state_is_frozen() -> None:
    s = AnimationState()
    with pytest.raises(AttributeError):
        s.angle = 1.0  # type: ignore[misc]


def test_wrap_angle() -> None:
    assert wrap_angle(0.0) == 0.0
    assert wrap_angle(tau) == pytest.approx(0.0)
    assert wrap_angle(-1e-18) < tau
