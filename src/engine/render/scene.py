"""
どこで: `engine.render.scene`。
何を: 背景スプライトとヘッダ文字（ドロップシャドウ付き）を pyglet の Batch に構成する。
なぜ: フィルタ適用前の「素のシーン」を 1 回の `draw()` でオフスクリーンへ描けるようにし、
      レイアウト応答からは `x`/`y` を持つ要素として扱えるようにするため。
"""

from __future__ import annotations

import numpy as np
import pyglet

from util.color import to_u8_rgba

from .types import HeaderStyle, shadow_offset


class HeaderText:
    """本文ラベルとシャドウラベルを同じアンカー位置で動かす複合要素。"""

    def __init__(
        self,
        style: HeaderStyle,
        *,
        batch: pyglet.graphics.Batch,
        shadow_group: pyglet.graphics.Group,
        text_group: pyglet.graphics.Group,
    ):
        self.style = style
        self._dx, self._dy = shadow_offset(style)
        fonts = list(style.font_names)
        common = dict(
            font_name=fonts,
            font_size=style.font_size,
            anchor_x="center",
            anchor_y="center",
            batch=batch,
        )
        self.shadow = pyglet.text.Label(
            style.text, color=to_u8_rgba(style.shadow_color), group=shadow_group, **common
        )
        self.label = pyglet.text.Label(
            style.text, color=to_u8_rgba(style.color), group=text_group, **common
        )
        self._x = 0.0
        self._y = 0.0

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = float(value)
        self.label.x = self._x
        self.shadow.x = self._x + self._dx

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = float(value)
        self.label.y = self._y
        self.shadow.y = self._y + self._dy


def image_from_rgba(rgba: np.ndarray, *, center_anchor: bool = True) -> pyglet.image.ImageData:
    """(h, w, 4) uint8 を pyglet ImageData へ（既定で中心アンカー）。"""
    h, w = int(rgba.shape[0]), int(rgba.shape[1])
    img = pyglet.image.ImageData(w, h, "RGBA", np.ascontiguousarray(rgba, dtype=np.uint8).tobytes())
    if center_anchor:
        img.anchor_x = w // 2
        img.anchor_y = h // 2
    return img


class SceneLayer:
    """フィルタ対象のシーン（背景 + ヘッダ）。"""

    def __init__(self, background_rgba: np.ndarray, header_style: HeaderStyle | None = None):
        self.batch = pyglet.graphics.Batch()
        self._groups = [pyglet.graphics.Group(order=i) for i in range(3)]
        self.background = pyglet.sprite.Sprite(
            image_from_rgba(background_rgba), batch=self.batch, group=self._groups[0]
        )
        self.header = HeaderText(
            header_style if header_style is not None else HeaderStyle(),
            batch=self.batch,
            shadow_group=self._groups[1],
            text_group=self._groups[2],
        )

    def elements(self) -> list[object]:
        """レイアウト応答で中心合わせする要素。"""
        return [self.background, self.header]

    def draw(self) -> None:
        self.batch.draw()

    def delete(self) -> None:
        self.background.delete()
        self.header.label.delete()
        self.header.shadow.delete()


__all__ = ["HeaderText", "SceneLayer", "image_from_rgba"]
