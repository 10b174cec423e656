"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: リサイズ可能な pyglet Window（背景クリア）と描画コールバック登録を提供。
なぜ: シーン合成/フィルタ処理を GUI 依存から切り離し、`on_draw` の順序を一箇所で管理するため。

使用例:
    win = RenderWindow(960, 640, bg_color=(0.06, 0.6, 0.73, 1.0))
    win.add_draw_callback(compositor_draw)
    pyglet.app.run()
"""

from __future__ import annotations

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "aquafx",
        bg_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
        resizable: bool = True,
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトルバー文字列。
            bg_color: 背景色 RGBA（0.0〜1.0）。
            resizable: True でユーザのリサイズを許可（`on_resize` が発火する）。
        """
        config = Config(double_buffer=True, vsync=True)
        super().__init__(
            width=width, height=height, caption=caption, config=config, resizable=resizable
        )
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []

    @property
    def bg_color(self) -> tuple[float, float, float, float]:
        return self._bg_color

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()
