"""
どこで: `effects` のレジストリ層。
何を: シーンに適用するフィルタを固定順序（スクロールリップル → 各ショックウェーブの登録順）で保持する。
なぜ: 描画側が毎フレーム同じ順序でパラメータを読み、クロック前進も同じ集合を走査できるようにするため。

公開 API 概要:
- `EffectRegistry.add(effect)` / `get(name)` / `shockwaves()` / `filters()`
- `set_scroll(displacement)`: 先頭に適用される連続リップル（任意）
"""

from __future__ import annotations

from typing import Iterator, Union

from common.base_registry import BaseRegistry

from .displacement import ScrollingDisplacement
from .shockwave import Shockwave

SceneFilter = Union[ScrollingDisplacement, Shockwave]


class EffectRegistry(BaseRegistry):
    """名前付きショックウェーブの順序付き集合。"""

    def __init__(self, scroll: ScrollingDisplacement | None = None) -> None:
        super().__init__()
        self._scroll = scroll

    def add(self, effect: Shockwave) -> Shockwave:
        """`effect.name` で登録して返す（重複名は ValueError）。"""
        if not isinstance(effect, Shockwave):
            raise TypeError(f"Shockwave のみ登録可能です: got {effect!r}")
        return self.register(effect.name)(effect)

    def set_scroll(self, scroll: ScrollingDisplacement | None) -> None:
        self._scroll = scroll

    @property
    def scroll(self) -> ScrollingDisplacement | None:
        return self._scroll

    def shockwaves(self) -> list[Shockwave]:
        """登録順のショックウェーブ。"""
        return list(self._registry.values())

    def filters(self) -> list[SceneFilter]:
        """描画へ渡すフィルタ列（スクロール → ショックウェーブ）。"""
        out: list[SceneFilter] = []
        if self._scroll is not None:
            out.append(self._scroll)
        out.extend(self.shockwaves())
        return out

    def __iter__(self) -> Iterator[Shockwave]:
        return iter(self.shockwaves())

    def __len__(self) -> int:
        return len(self._registry)


__all__ = ["EffectRegistry", "SceneFilter"]
