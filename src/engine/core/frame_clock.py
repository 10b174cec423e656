"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定とループ管理）。
なぜ: pyglet の clock から 1 本のコールバックで全コンポーネントの更新順を統一するため。
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。"""

    def __init__(
        self,
        tickables: Sequence[Tickable],
        *,
        time_source: Callable[[], float] = time.perf_counter,
    ):
        self._tickables = tuple(tickables)
        self._time_source = time_source
        self._last_time = time_source()
        self.frames = 0

    @property
    def tickables(self) -> tuple[Tickable, ...]:
        return self._tickables

    # pyglet.clock.schedule_interval から呼ばせる
    def tick(self, dt: float | None = None) -> None:
        now = self._time_source()
        if dt is None:  # pyglet は dt を渡してくれる
            dt = now - self._last_time
        self._last_time = now
        self.frames += 1

        for t in self._tickables:
            t.tick(dt)
