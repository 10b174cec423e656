"""
どこで: `engine.render.types`。
何を: 描画層で共有する軽量な値型（ヘッダ文字スタイル）とシャドウ位置の計算。
なぜ: pyglet を import せずに設定解決（`aquafx.scene_runner.config`）から参照できるようにするため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class HeaderStyle:
    """ヘッダ文字のスタイル。`shadow_angle` はラジアン（π/2 で真下）。"""

    text: str = "AQUA-SHOP"
    font_names: Sequence[str] = ("Helvetica", "Arial", "sans-serif")
    font_size: float = 56
    color: object = "ffffff"
    shadow_color: object = "#000000"
    shadow_distance: float = 2.0
    shadow_angle: float = math.pi / 2


def shadow_offset(style: HeaderStyle) -> tuple[float, float]:
    """シャドウの (dx, dy)。pyglet は y 上向きなので下方向は負。"""
    d = float(style.shadow_distance)
    return (math.cos(style.shadow_angle) * d, -math.sin(style.shadow_angle) * d)


__all__ = ["HeaderStyle", "shadow_offset"]
