"""
どこで: `engine.fx.config`。
何を: クロック前進/トリガ/リップル/ショックウェーブ既定値の設定を frozen dataclass で定義し、YAML 辞書から解決する。
なぜ: 魔法定数（0.05, 4.7, 0.2, 1000ms）を宣言的に一箇所へ集め、設定ファイルで再調整できるようにするため。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from effects.shockwave import DEFAULT_INACTIVITY_THRESHOLD, ShockwaveParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockConfig:
    """クロック前進の設定。

    Parameters
    ----------
    rate : float
        フレームデルタ 1.0 あたりのクロック増分。
    inactivity_threshold : float
        休止判定の閾値（`clock >= threshold` で DORMANT）。
    reference_fps : float
        秒単位の dt をフレームデルタへ換算する基準（`frame_delta = dt * reference_fps`）。
    """

    rate: float = 0.05
    inactivity_threshold: float = DEFAULT_INACTIVITY_THRESHOLD
    reference_fps: float = 60.0

    @property
    def active_frames(self) -> float:
        """発火から休止までのフレーム数（挙動上の契約値, 既定 94）。"""
        if self.rate <= 0.0:
            return math.inf
        return self.inactivity_threshold / self.rate


@dataclass(frozen=True)
class MotionTriggerConfig:
    """ポインタ移動による確率トリガの設定（確率 `chance` とクールダウン `min_delay_ms`）。"""

    chance: float = 0.2
    min_delay_ms: float = 1000.0


@dataclass(frozen=True)
class DisplacementConfig:
    scale: tuple[float, float] = (20.0, 20.0)
    step: float = 1.0


@dataclass(frozen=True)
class FxConfig:
    clock: ClockConfig = field(default_factory=ClockConfig)
    motion: MotionTriggerConfig = field(default_factory=MotionTriggerConfig)
    displacement: DisplacementConfig = field(default_factory=DisplacementConfig)
    shockwave: ShockwaveParams = field(default_factory=ShockwaveParams)
    autoplay: bool = False

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any] | None) -> "FxConfig":
        """`load_config()` の辞書から解決する（欠落キーは既定、不正値は警告して既定）。"""
        from util.utils import config_section

        clock_sec = config_section(cfg, "clock")
        trig_sec = config_section(cfg, "triggers")
        disp_sec = config_section(cfg, "displacement")
        wave_sec = config_section(cfg, "shockwave")

        clock_d = ClockConfig()
        clock = ClockConfig(
            rate=_as_positive_float(clock_sec, "rate", clock_d.rate),
            inactivity_threshold=_as_positive_float(
                clock_sec, "inactivity_threshold", clock_d.inactivity_threshold
            ),
            reference_fps=_as_positive_float(clock_sec, "reference_fps", clock_d.reference_fps),
        )
        motion_d = MotionTriggerConfig()
        motion = MotionTriggerConfig(
            chance=_as_float(trig_sec, "motion_chance", motion_d.chance),
            min_delay_ms=_as_float(trig_sec, "motion_min_delay_ms", motion_d.min_delay_ms),
        )
        disp_d = DisplacementConfig()
        displacement = DisplacementConfig(
            scale=_as_pair(disp_sec, "scale", disp_d.scale),
            step=_as_float(disp_sec, "step", disp_d.step),
        )
        wave_d = ShockwaveParams()
        shockwave = ShockwaveParams(
            speed=_as_float(wave_sec, "speed", wave_d.speed),
            amplitude=_as_float(wave_sec, "amplitude", wave_d.amplitude),
            wavelength=_as_float(wave_sec, "wavelength", wave_d.wavelength),
            brightness=_as_float(wave_sec, "brightness", wave_d.brightness),
            radius=_as_float(wave_sec, "radius", wave_d.radius),
        )
        return cls(
            clock=clock,
            motion=motion,
            displacement=displacement,
            shockwave=shockwave,
            autoplay=bool(trig_sec.get("autoplay", False)),
        )


def _as_float(section: Mapping[str, Any], key: str, default: float) -> float:
    if key not in section or section[key] is None:
        return float(default)
    try:
        return float(section[key])
    except (TypeError, ValueError):
        logger.warning("invalid config value %s=%r; using %s", key, section[key], default)
        return float(default)


def _as_positive_float(section: Mapping[str, Any], key: str, default: float) -> float:
    """有限かつ正の値のみ受理する（それ以外は警告して既定値）。"""
    value = _as_float(section, key, default)
    if not math.isfinite(value) or value <= 0.0:
        logger.warning("invalid config value %s=%r; using %s", key, value, default)
        return float(default)
    return value


def _as_pair(
    section: Mapping[str, Any], key: str, default: tuple[float, float]
) -> tuple[float, float]:
    raw = section.get(key)
    if raw is None:
        return default
    if isinstance(raw, (int, float)):
        return (float(raw), float(raw))
    try:
        x, y = raw
        return (float(x), float(y))
    except (TypeError, ValueError):
        logger.warning("invalid config value %s=%r; using %s", key, raw, default)
        return default


__all__ = ["ClockConfig", "DisplacementConfig", "FxConfig", "MotionTriggerConfig"]
