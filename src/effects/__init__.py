"""
どこで: `effects` パッケージ。
何を: シーンに重ねる歪みエフェクトのデータモデル（Shockwave / ScrollingDisplacement）と順序付きレジストリ。
なぜ: 時間ロジック（`engine.fx`）と描画（`engine.render`）の双方が参照する共有状態を一箇所に置くため。
"""

from .displacement import ScrollingDisplacement
from .registry import EffectRegistry, SceneFilter
from .shockwave import EffectState, Shockwave, ShockwaveParams

__all__ = [
    "EffectRegistry",
    "EffectState",
    "SceneFilter",
    "ScrollingDisplacement",
    "Shockwave",
    "ShockwaveParams",
]
