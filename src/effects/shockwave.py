"""
どこで: `effects.shockwave`。
何を: 1 つのショックウェーブ歪みインスタンス（形状パラメータ + 可変クロック + 原点）と状態 `EffectState`。
なぜ: 時間ロジック（前進/発火）を `engine.fx` に置き、ここは描画側がフレーム毎に読む純データに保つため。

状態機械:
- `fire: * -> ACTIVE(clock=0)`（`engine.fx.trigger.fire`）
- `advance: ACTIVE -> ACTIVE | DORMANT`（`engine.fx.clock.ClockAdvancer`）
- `clock >= inactivity_threshold` が DORMANT。DORMANT のクロックは前進しない。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Point = tuple[float, float]

DEFAULT_INACTIVITY_THRESHOLD = 4.7


class EffectState(Enum):
    ACTIVE = "active"
    DORMANT = "dormant"


@dataclass(frozen=True)
class ShockwaveParams:
    """描画側へそのまま渡す形状パラメータ（単位はビューポート座標系）。

    値域の検証は行わない（負の半径などは設定側の責務）。
    """

    speed: float = 200.0
    amplitude: float = 40.0
    wavelength: float = 50.0
    brightness: float = 1.0
    radius: float = 380.0


@dataclass
class Shockwave:
    """独立したクロックを持つ歪みエフェクト。

    Parameters
    ----------
    name : str
        レジストリ上の名前（ログ用）。
    params : ShockwaveParams
        生成後は不変の形状パラメータ。
    origin : tuple[float, float]
        歪みの中心（ビューポート座標、左下原点）。
    clock : float
        前回発火からの経過擬似時間。負値（既定）なら閾値で初期化（休止状態で生成）。
    inactivity_threshold : float
        これ以上でクロックが止まる閾値。
    """

    name: str
    params: ShockwaveParams = field(default_factory=ShockwaveParams)
    origin: Point = (0.0, 0.0)
    clock: float = -1.0
    inactivity_threshold: float = DEFAULT_INACTIVITY_THRESHOLD

    def __post_init__(self) -> None:
        if self.clock < 0.0:
            self.clock = float(self.inactivity_threshold)

    # ---- 形状パラメータ（読み取り専用の委譲） ----
    @property
    def speed(self) -> float:
        return self.params.speed

    @property
    def amplitude(self) -> float:
        return self.params.amplitude

    @property
    def wavelength(self) -> float:
        return self.params.wavelength

    @property
    def brightness(self) -> float:
        return self.params.brightness

    @property
    def radius(self) -> float:
        return self.params.radius

    # ---- 状態 ----
    @property
    def state(self) -> EffectState:
        if self.clock >= self.inactivity_threshold:
            return EffectState.DORMANT
        return EffectState.ACTIVE

    @property
    def is_dormant(self) -> bool:
        return self.state is EffectState.DORMANT


__all__ = [
    "DEFAULT_INACTIVITY_THRESHOLD",
    "EffectState",
    "Point",
    "Shockwave",
    "ShockwaveParams",
]
