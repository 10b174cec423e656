"""
どこで: `effects.displacement`。
何を: 非表示のディスプレイスメントマップを横スクロールさせる連続リップルの状態。
なぜ: ショックウェーブとは独立に毎フレーム無条件で進み、休止の概念を持たない効果を分けて扱うため。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScrollingDisplacement:
    """スクロールオフセット（px）とマップ寸法・強度。

    `scroll()` は `offset += step` のあと `offset > pattern_width` なら 0 へ戻す
    （幅 500 なら …, 499, 500, 0）。
    """

    pattern_width: float
    pattern_height: float | None = None
    scale: tuple[float, float] = (20.0, 20.0)
    step: float = 1.0
    offset: float = 0.0
    name: str = "displacement"

    def scroll(self) -> float:
        self.offset += self.step
        if self.offset > self.pattern_width:
            self.offset = 0.0
        return self.offset

    @property
    def map_size(self) -> tuple[float, float]:
        h = self.pattern_height if self.pattern_height is not None else self.pattern_width
        return (float(self.pattern_width), float(h))


__all__ = ["ScrollingDisplacement"]
