"""
どこで: `aquafx.scene_runner.config`（純粋関数/設定型）。
何を: YAML 構成と `run_scene` の明示引数から、ウィンドウ/ヘッダ/アセット/エフェクト設定を解決する。
なぜ: `aquafx.scene` を薄く保ち、GL/ウィンドウ無しで設定解決をテストできるようにするため。

優先順位: 明示引数 > 環境変数（`AQX_AUTOPLAY`）> 設定ファイル > 既定値。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from engine.fx.config import FxConfig
from engine.render.types import HeaderStyle
from util.color import normalize_color
from util.utils import config_section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowConfig:
    width: int = 1280
    height: int = 720
    fps: int = 60
    caption: str = "AQUA-SHOP"
    background_color: object = "#1099bb"


@dataclass(frozen=True)
class AssetConfig:
    """ローカルのアセットパス（None なら手続き生成）。"""

    background_image: str | None = None
    displacement_image: str | None = None
    displacement_size: int = 256


@dataclass(frozen=True)
class SceneConfig:
    window: WindowConfig = field(default_factory=WindowConfig)
    header: HeaderStyle = field(default_factory=HeaderStyle)
    assets: AssetConfig = field(default_factory=AssetConfig)
    fx: FxConfig = field(default_factory=FxConfig)


def _positive_int(value: Any, name: str) -> int:
    try:
        v = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a positive integer, got {value!r}") from e
    if v <= 0:
        raise ValueError(f"{name} must be > 0, got {v}")
    return v


def _config_int(section: Mapping[str, Any], key: str, default: int) -> int:
    """設定ファイル側の整数。不正値は警告して既定へ。"""
    if section.get(key) is None:
        return default
    try:
        return _positive_int(section[key], key)
    except ValueError as e:
        logger.warning("%s; using %s", e, default)
        return default


def _explicit_color(value: object) -> object:
    normalize_color(value)  # 不正値は ValueError
    return value


def _config_color(raw: Any, key: str, default: object) -> object:
    """設定ファイル側の色。`normalize_color` で解釈できない値は警告して既定へ。"""
    if raw is None:
        return default
    try:
        normalize_color(raw)
    except ValueError as e:
        logger.warning("invalid color %s=%r (%s); using %r", key, raw, e, default)
        return default
    return raw


def _resolve_asset_path(raw: Any, project_root: Path | None) -> str | None:
    if not raw:
        return None
    p = Path(str(raw)).expanduser()
    if not p.is_absolute() and project_root is not None:
        p = project_root / p
    return str(p)


def resolve_window(
    cfg: Mapping[str, Any] | None,
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    background: object | None = None,
    title: str | None = None,
) -> WindowConfig:
    """ウィンドウ設定を解決する。明示引数の不正値は ValueError。"""
    sec = config_section(cfg, "window")
    d = WindowConfig()
    return WindowConfig(
        width=_positive_int(width, "width") if width is not None else _config_int(sec, "width", d.width),
        height=(
            _positive_int(height, "height")
            if height is not None
            else _config_int(sec, "height", d.height)
        ),
        fps=_positive_int(fps, "fps") if fps is not None else _config_int(sec, "fps", d.fps),
        caption=str(title) if title is not None else str(sec.get("caption", d.caption)),
        background_color=(
            _explicit_color(background)
            if background is not None
            else _config_color(sec.get("background_color"), "background_color", d.background_color)
        ),
    )


def resolve_header(cfg: Mapping[str, Any] | None) -> HeaderStyle:
    sec = config_section(cfg, "header")
    shadow = sec.get("shadow") if isinstance(sec.get("shadow"), Mapping) else {}
    d = HeaderStyle()
    fonts = sec.get("font_names", d.font_names)
    if isinstance(fonts, str):
        fonts = (fonts,)
    try:
        font_size = float(sec.get("font_size", d.font_size))
        distance = float(shadow.get("distance", d.shadow_distance))
        angle = float(shadow.get("angle", d.shadow_angle))
    except (TypeError, ValueError):
        logger.warning("invalid header style values; using defaults")
        font_size, distance, angle = d.font_size, d.shadow_distance, d.shadow_angle
    if not math.isfinite(angle):
        angle = d.shadow_angle
    return HeaderStyle(
        text=str(sec.get("text", d.text)),
        font_names=tuple(str(f) for f in fonts),
        font_size=font_size,
        color=_config_color(sec.get("color"), "header.color", d.color),
        shadow_color=_config_color(shadow.get("color"), "header.shadow.color", d.shadow_color),
        shadow_distance=distance,
        shadow_angle=angle,
    )


def resolve_assets(cfg: Mapping[str, Any] | None, project_root: Path | None = None) -> AssetConfig:
    sec = config_section(cfg, "assets")
    d = AssetConfig()
    return AssetConfig(
        background_image=_resolve_asset_path(sec.get("background_image"), project_root),
        displacement_image=_resolve_asset_path(sec.get("displacement_image"), project_root),
        displacement_size=_config_int(sec, "displacement_size", d.displacement_size),
    )


def resolve_scene_config(
    cfg: Mapping[str, Any] | None,
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    background: object | None = None,
    title: str | None = None,
    autoplay: bool | None = None,
    project_root: Path | None = None,
) -> SceneConfig:
    """設定辞書と明示引数から `SceneConfig` を組み立てる。"""
    fx = FxConfig.from_mapping(cfg)
    if autoplay is None:
        from common.settings import get as _get_settings

        autoplay = _get_settings().AUTOPLAY
    if autoplay is not None:
        fx = replace(fx, autoplay=bool(autoplay))
    return SceneConfig(
        window=resolve_window(
            cfg, width=width, height=height, fps=fps, background=background, title=title
        ),
        header=resolve_header(cfg),
        assets=resolve_assets(cfg, project_root),
        fx=fx,
    )


__all__ = [
    "AssetConfig",
    "SceneConfig",
    "WindowConfig",
    "resolve_assets",
    "resolve_header",
    "resolve_scene_config",
    "resolve_window",
]
