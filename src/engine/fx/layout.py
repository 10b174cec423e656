"""
どこで: `engine.fx.layout`。
何を: ビューポートのリサイズ時に背景/ヘッダなどの静的要素を中心へ再配置する。
なぜ: エフェクトとは独立した、同じイベント駆動形のレイアウト規則を 1 箇所に置くため。
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


class Positionable(Protocol):
    x: float
    y: float


class LayoutResponder:
    """管理要素の `x`/`y` をビューポート中心へ合わせる（冪等）。"""

    def __init__(self, elements: Sequence[Positionable] = ()):
        self._elements = list(elements)

    def add(self, element: Positionable) -> None:
        self._elements.append(element)

    @property
    def elements(self) -> list[Positionable]:
        return list(self._elements)

    def on_resize(self, width: float, height: float) -> tuple[float, float]:
        cx, cy = width / 2, height / 2
        for el in self._elements:
            el.x = cx
            el.y = cy
        logger.debug("layout centered at (%.1f, %.1f) for %sx%s", cx, cy, width, height)
        return cx, cy


__all__ = ["LayoutResponder", "Positionable"]
