from __future__ import annotations

import logging
import math
from pathlib import Path

import pytest

from aquafx.scene_runner.config import (
    AssetConfig,
    WindowConfig,
    resolve_assets,
    resolve_header,
    resolve_scene_config,
    resolve_window,
)
from common import settings


@pytest.fixture(autouse=True)
def _no_env_autoplay(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("AQX_AUTOPLAY", raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


def test_window_defaults() -> None:
    assert resolve_window({}) == WindowConfig()
    assert WindowConfig().background_color == "#1099bb"


def test_explicit_arguments_override_config() -> None:
    cfg = {"window": {"width": 800, "height": 600, "fps": 30, "caption": "cfg"}}
    win = resolve_window(cfg, width=1024, title="arg")
    assert (win.width, win.height, win.fps, win.caption) == (1024, 600, 30, "arg")


@pytest.mark.parametrize("kwargs", [{"width": 0}, {"height": -1}, {"fps": 0}, {"width": "wide"}])
def test_invalid_explicit_arguments_raise(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        resolve_window({}, **kwargs)


def test_invalid_config_values_warn_and_use_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        win = resolve_window({"window": {"width": -5, "fps": "x"}})
    assert (win.width, win.fps) == (1280, 60)
    assert caplog.records


def test_header_from_config() -> None:
    cfg = {
        "header": {
            "text": "HELLO",
            "font_names": "Arial",
            "font_size": 40,
            "shadow": {"color": "#112233", "distance": 3, "angle": 0},
        }
    }
    h = resolve_header(cfg)
    assert h.text == "HELLO"
    assert h.font_names == ("Arial",)
    assert h.font_size == 40.0
    assert (h.shadow_color, h.shadow_distance, h.shadow_angle) == ("#112233", 3.0, 0.0)


def test_header_defaults_shadow_below() -> None:
    h = resolve_header(None)
    assert h.shadow_angle == pytest.approx(math.pi / 2)
    assert h.shadow_distance == 2.0


def test_asset_paths_resolved_against_root(tmp_path: Path) -> None:
    a = resolve_assets({"assets": {"background_image": "img/bg.png"}}, tmp_path)
    assert a.background_image == str(tmp_path / "img" / "bg.png")
    assert a.displacement_image is None
    assert a.displacement_size == AssetConfig().displacement_size


def test_autoplay_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = {"triggers": {"autoplay": True}}
    assert resolve_scene_config(cfg).fx.autoplay is True
    assert resolve_scene_config(cfg, autoplay=False).fx.autoplay is False

    monkeypatch.setenv("AQX_AUTOPLAY", "0")
    settings.reload_from_env()
    assert resolve_scene_config(cfg).fx.autoplay is False
    assert resolve_scene_config({}, autoplay=True).fx.autoplay is True


def test_invalid_config_colors_warn_and_use_defaults(caplog: pytest.LogCaptureFixture) -> None:
    cfg = {
        "window": {"background_color": "zzz"},
        "header": {"color": "#12", "shadow": {"color": [1, 2]}},
    }
    with caplog.at_level(logging.WARNING, logger="aquafx.scene_runner.config"):
        conf = resolve_scene_config(cfg)
    assert conf.window.background_color == "#1099bb"
    assert conf.header.color == "ffffff"
    assert conf.header.shadow_color == "#000000"
    assert len([r for r in caplog.records if "invalid color" in r.getMessage()]) == 3


def test_valid_config_colors_are_kept() -> None:
    conf = resolve_scene_config(
        {"window": {"background_color": [16, 153, 187]}, "header": {"color": "#ff0000"}}
    )
    assert conf.window.background_color == [16, 153, 187]
    assert conf.header.color == "#ff0000"


def test_invalid_explicit_background_raises() -> None:
    with pytest.raises(ValueError):
        resolve_window({}, background="zzz")
