from __future__ import annotations

import json
from pathlib import Path

import pytest

from pixelstroke.settings.schema import Settings
from pixelstroke.settings.store import SettingsStore


def test_settings_path_honours_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PIXELSTROKE_HOME", str(tmp_path))
    assert SettingsStore.settings_path() == tmp_path / "settings.json"


def test_load_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PIXELSTROKE_HOME", str(tmp_path))
    s = SettingsStore.load()
    assert isinstance(s, Settings)
    assert s.sierpinski_generation == 6
    assert (s.canvas_width, s.canvas_height) == (800, 600)


def test_roundtrip(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PIXELSTROKE_HOME", str(tmp_path / "nested"))
    s = Settings(sierpinski_generation=3, start_slide=7, background=(10, 20, 30))
    SettingsStore.save(s)
    s2 = SettingsStore.load()
    assert s2.sierpinski_generation == 3
    assert s2.start_slide == 7
    assert s2.background == (10, 20, 30)
    assert not SettingsStore.settings_path().with_suffix(".tmp").exists()


def test_corrupt_returns_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PIXELSTROKE_HOME", str(tmp_path))
    p = SettingsStore.settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("{broken")
    s = SettingsStore.load()
    assert s.sierpinski_generation == 6


def test_invalid_values_return_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PIXELSTROKE_HOME", str(tmp_path))
    p = SettingsStore.settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps({"sierpinski_generation": 0}))
    assert SettingsStore.load() == Settings()
