"""
どこで: `engine.fx.trigger`。
何を: 発火 `fire(effect, point)` と、それを呼ぶ 3 種のトリガ（クリック/確率+クールダウン/自動再発火）。
なぜ: 入力イベント毎の「いつ発火するか」の方針をエフェクト本体から分離し、トリガ毎に独立した状態を持たせるため。

方針:
- 発火は常に割り込み再始動（アニメーション途中でも clock=0 と原点移動。キューイング/無視はしない）。
- 確率ゲートとクールダウンゲートは両方必須。確率は平均レート、クールダウンは最悪時の連発を抑える。
- ゲートによる不発は正常動作であり、警告/エラーとして記録しない。
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Protocol

from effects.shockwave import Point, Shockwave

from ..core.tickable import Tickable
from .config import MotionTriggerConfig

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...


def wall_clock_ms() -> float:
    """単調増加の壁時計 [ms]（システム時刻の巻き戻りに影響されない）。"""
    return time.monotonic() * 1000.0


def fire(effect: Shockwave, point: Point) -> None:
    """原点を `point` へ移し、クロックを 0 に戻す（状態に関わらず ACTIVE へ）。"""
    effect.origin = (float(point[0]), float(point[1]))
    effect.clock = 0.0
    logger.debug("fire %s at (%.1f, %.1f)", effect.name, effect.origin[0], effect.origin[1])


class ClickTrigger:
    """クリック毎に無条件で発火する決定的トリガ（レート制限/乱数なし）。"""

    def __init__(self, effect: Shockwave):
        self.effect = effect

    def on_click(self, x: float, y: float) -> None:
        fire(self.effect, (x, y))


class CooldownGate:
    """最小間隔 `min_delay_ms` を課すレートリミッタ（1 つのトリガが専有する）。"""

    def __init__(self, min_delay_ms: float = 1000.0):
        self.min_delay_ms = float(min_delay_ms)
        self.last_fire_ms: float | None = None

    def is_open(self, now_ms: float) -> bool:
        """未発火、または前回から `min_delay_ms` を超えて経過していれば True。"""
        if self.last_fire_ms is None:
            return True
        return now_ms - self.last_fire_ms > self.min_delay_ms

    def mark(self, now_ms: float) -> None:
        self.last_fire_ms = float(now_ms)


class MotionTrigger:
    """ポインタ移動イベント毎に確率 `chance` で発火を試みる、クールダウン付きトリガ。

    Parameters
    ----------
    effect : Shockwave
        発火対象（セカンダリ）。
    config : MotionTriggerConfig | None
        確率と最小間隔。
    rng : RandomSource | None
        `random()` を持つ乱数源。None なら `random.Random()`。
    now_ms : Callable[[], float]
        現在時刻 [ms] を返す関数（テストで差し替え可能）。
    """

    def __init__(
        self,
        effect: Shockwave,
        config: MotionTriggerConfig | None = None,
        *,
        rng: RandomSource | None = None,
        now_ms: Callable[[], float] = wall_clock_ms,
    ):
        conf = config if config is not None else MotionTriggerConfig()
        self.effect = effect
        self.chance = float(conf.chance)
        self.gate = CooldownGate(conf.min_delay_ms)
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._now_ms = now_ms

    def on_move(self, x: float, y: float) -> bool:
        """発火したら True。乱数は毎イベント 1 回だけ消費する。"""
        now = self._now_ms()
        lucky = self._rng.random() < self.chance
        if not (lucky and self.gate.is_open(now)):
            return False
        self.gate.mark(now)
        fire(self.effect, (x, y))
        return True


class AutoRespawnTrigger(Tickable):
    """休止したエフェクトをビューポート内のランダム位置で即座に再発火する（autoplay）。"""

    def __init__(
        self,
        effect: Shockwave,
        viewport_size: Callable[[], tuple[float, float]],
        *,
        rng: RandomSource | None = None,
    ):
        self.effect = effect
        self._viewport_size = viewport_size
        self._rng: RandomSource = rng if rng is not None else random.Random()

    def tick(self, dt: float) -> None:
        if not self.effect.is_dormant:
            return
        fire(self.effect, random_point(self._rng, self._viewport_size()))


def random_point(rng: RandomSource, size: tuple[float, float]) -> Point:
    """`[0, w) x [0, h)` の一様乱数点。"""
    w, h = size
    return (rng.uniform(0.0, float(w)), rng.uniform(0.0, float(h)))


__all__ = [
    "AutoRespawnTrigger",
    "ClickTrigger",
    "CooldownGate",
    "MotionTrigger",
    "RandomSource",
    "fire",
    "random_point",
    "wall_clock_ms",
]
