"""
どこで: `aquafx.scene_runner.wiring`。
何を: 設定からエフェクト（primary/secondary ショックウェーブ + スクロールリップル）とトリガ群を結線する。
なぜ: ウィンドウや GL に依存しない形でエフェクトエンジンを組み立て、`init_only` やテストから同じ経路を使うため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from effects.displacement import ScrollingDisplacement
from effects.registry import EffectRegistry
from effects.shockwave import Shockwave
from engine.core.tickable import Tickable
from engine.fx.clock import ClockAdvancer
from engine.fx.config import FxConfig
from engine.fx.trigger import (
    AutoRespawnTrigger,
    ClickTrigger,
    MotionTrigger,
    RandomSource,
    random_point,
    wall_clock_ms,
)

logger = logging.getLogger(__name__)

PRIMARY = "primary"
SECONDARY = "secondary"


@dataclass
class EffectEngine:
    """結線済みのエフェクト一式。"""

    registry: EffectRegistry
    advancer: ClockAdvancer
    click: ClickTrigger
    motion: MotionTrigger
    autoplay: AutoRespawnTrigger | None = None

    def tickables(self) -> list[Tickable]:
        """FrameClock に渡す順序（前進 → 自動再発火）。"""
        out: list[Tickable] = [self.advancer]
        if self.autoplay is not None:
            out.append(self.autoplay)
        return out


def build_registry(
    fx: FxConfig,
    viewport_size: tuple[float, float],
    pattern_size: tuple[float, float],
    rng: RandomSource,
) -> EffectRegistry:
    """リップル + 2 つのショックウェーブ（休止状態・ランダム原点）を登録順に作る。"""
    scroll = ScrollingDisplacement(
        pattern_width=float(pattern_size[0]),
        pattern_height=float(pattern_size[1]),
        scale=fx.displacement.scale,
        step=fx.displacement.step,
    )
    registry = EffectRegistry(scroll)
    for name in (PRIMARY, SECONDARY):
        registry.add(
            Shockwave(
                name,
                params=fx.shockwave,
                origin=random_point(rng, viewport_size),
                inactivity_threshold=fx.clock.inactivity_threshold,
            )
        )
    return registry


def build_engine(
    fx: FxConfig,
    viewport_size: Callable[[], tuple[float, float]],
    pattern_size: tuple[float, float],
    rng: RandomSource,
    *,
    now_ms: Callable[[], float] = wall_clock_ms,
) -> EffectEngine:
    """レジストリ・前進器・トリガを結線する。

    - クリック: primary を無条件発火
    - ポインタ移動: secondary を確率 + クールダウンで発火
    - autoplay: primary が休止したらランダム位置で再発火
    """
    registry = build_registry(fx, viewport_size(), pattern_size, rng)
    primary = registry.get(PRIMARY)
    secondary = registry.get(SECONDARY)
    engine = EffectEngine(
        registry=registry,
        advancer=ClockAdvancer(registry, fx.clock),
        click=ClickTrigger(primary),
        motion=MotionTrigger(secondary, fx.motion, rng=rng, now_ms=now_ms),
        autoplay=AutoRespawnTrigger(primary, viewport_size, rng=rng) if fx.autoplay else None,
    )
    logger.debug(
        "effect engine: %d shockwaves, active_frames=%.1f, autoplay=%s",
        len(registry),
        fx.clock.active_frames,
        fx.autoplay,
    )
    return engine


__all__ = ["EffectEngine", "PRIMARY", "SECONDARY", "build_engine", "build_registry"]
