"""
どこで: `engine.fx.clock`。
何を: 毎フレーム 1 回、登録済みショックウェーブのクロックを `frame_delta * rate` だけ進め、リップルをスクロールする。
なぜ: 時間前進のロジックをエフェクト本体から切り離し、全エフェクトを独立に・同一規則で進めるため。

ホットパス（毎フレーム）で呼ばれるため、ブロック/例外送出/ログ出力をしない。
"""

from __future__ import annotations

from effects.registry import EffectRegistry
from effects.shockwave import EffectState, Shockwave

from ..core.tickable import Tickable
from .config import ClockConfig


class ClockAdvancer(Tickable):
    """EffectRegistry のクロックを前進させる Tickable。"""

    def __init__(self, registry: EffectRegistry, config: ClockConfig | None = None):
        self.registry = registry
        self.config = config if config is not None else ClockConfig()

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        """pyglet の dt [sec] をフレームデルタ（60fps で 1.0）へ換算して前進する。"""
        self.advance(dt * self.config.reference_fps)

    def advance(self, frame_delta: float) -> None:
        """全エフェクトを 1 フレーム分進める。

        - スクロールリップルは無条件で 1 ステップ進む。
        - 各ショックウェーブは ACTIVE の間だけクロックを加算（閾値でのクランプはしない）。
        """
        scroll = self.registry.scroll
        if scroll is not None:
            scroll.scroll()
        for effect in self.registry.shockwaves():
            self.advance_effect(effect, frame_delta)

    def advance_effect(self, effect: Shockwave, frame_delta: float) -> EffectState:
        """1 エフェクトを進めて遷移後の状態を返す（DORMANT は不変）。"""
        # 負のデルタは 0 扱い（発火以外でクロックは減らない）
        if effect.clock < effect.inactivity_threshold:
            effect.clock += max(0.0, frame_delta) * self.config.rate
        return effect.state


__all__ = ["ClockAdvancer"]
