from __future__ import annotations

import argparse

import pytest
from pydantic import ValidationError

from pixelstroke.config import make_runtime_config
from pixelstroke.settings.schema import Settings
from pixelstroke.settings.store import SettingsStore


def _ns(**kw) -> argparse.Namespace:
    base = {"width": None, "height": None, "fps": None, "slide": None, "generation": None}
    base.update(kw)
    return argparse.Namespace(**base)


def test_defaults_without_persisted_settings() -> None:
    rc = make_runtime_config()
    assert rc.canvas_size == (800, 600)
    assert len(rc.slide_order) == 8
    assert rc.cube_position == (-125.0, -125.0, -750.0)
    assert rc.frustum["far"] == 100.0


def test_persisted_settings_are_loaded() -> None:
    SettingsStore.save(Settings(sierpinski_generation=4))
    assert make_runtime_config().settings.sierpinski_generation == 4


def test_cli_overrides_take_precedence() -> None:
    SettingsStore.save(Settings(canvas_width=320))
    rc = make_runtime_config(args=_ns(width=640, height=480, slide=3, generation=2))
    assert rc.canvas_size == (640, 480)
    assert rc.settings.start_slide == 3
    assert rc.settings.sierpinski_generation == 2
    # Overrides are not persisted
    assert SettingsStore.load().canvas_width == 320


def test_none_args_keep_baseline() -> None:
    s = Settings(target_fps=30.0)
    rc = make_runtime_config(args=_ns(), settings=s)
    assert rc.settings is s


def test_invalid_override_raises() -> None:
    with pytest.raises(ValidationError):
        make_runtime_config(args=_ns(generation=0))
