"""
どこで: `engine.render.compositor`。
何を: シーンをオフスクリーンへ描き、レジストリのフィルタ列（リップル → ショックウェーブ）を順に適用して画面へ出す。
なぜ: エフェクト側はパラメータを書き換えるだけにし、毎フレームそれを読んで描く責務をここへ閉じ込めるため。
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

import moderngl as mgl
import numpy as np

from effects.displacement import ScrollingDisplacement
from effects.registry import SceneFilter
from effects.shockwave import Shockwave

from .shader import Shader

logger = logging.getLogger(__name__)

_QUAD = np.array([-1.0, -1.0, 1.0, -1.0, -1.0, 1.0, 1.0, 1.0], dtype="f4")


def plan_passes(filters: Sequence[SceneFilter]) -> list[tuple[str, SceneFilter]]:
    """フィルタ列を描画パス列へ変換する（休止中のショックウェーブは見た目が中立なので省く）。"""
    passes: list[tuple[str, SceneFilter]] = []
    for f in filters:
        if isinstance(f, ScrollingDisplacement):
            passes.append(("displacement", f))
        elif isinstance(f, Shockwave):
            if not f.is_dormant:
                passes.append(("shockwave", f))
        else:
            raise TypeError(f"unsupported scene filter: {f!r}")
    return passes


class _Target:
    """テクスチャ + FBO の組。"""

    def __init__(self, ctx: Any, size: tuple[int, int]):
        self.texture = ctx.texture(size, 4)
        self.texture.filter = (mgl.LINEAR, mgl.LINEAR)
        self.texture.repeat_x = False
        self.texture.repeat_y = False
        self.fbo = ctx.framebuffer(color_attachments=[self.texture])

    def release(self) -> None:
        self.fbo.release()
        self.texture.release()


class FilterCompositor:
    """オフスクリーン合成とフィルタのピンポン適用を管理する。

    Parameters
    ----------
    ctx : moderngl.Context
        pyglet ウィンドウと共有する ModernGL コンテキスト。
    displacement_map : np.ndarray
        (h, w, 4) uint8。repeat アドレッシングで横スクロールさせる。
    viewport_size : tuple[int, int]
        論理ビューポート（ウィンドウ座標, px）。シェーダの座標系。
    framebuffer_size : tuple[int, int] | None
        実ピクセル寸法（HiDPI で論理サイズと異なる）。None なら viewport と同じ。
    """

    def __init__(
        self,
        ctx: Any,
        displacement_map: np.ndarray,
        *,
        viewport_size: tuple[int, int],
        framebuffer_size: tuple[int, int] | None = None,
    ):
        self.ctx = ctx
        self._blit = Shader.create_blit(ctx)
        self._displacement = Shader.create_displacement(ctx)
        self._shockwave = Shader.create_shockwave(ctx)
        self._vbo = ctx.buffer(_QUAD.tobytes())
        self._vaos = {
            "blit": ctx.simple_vertex_array(self._blit, self._vbo, "in_pos"),
            "displacement": ctx.simple_vertex_array(self._displacement, self._vbo, "in_pos"),
            "shockwave": ctx.simple_vertex_array(self._shockwave, self._vbo, "in_pos"),
        }
        h, w = int(displacement_map.shape[0]), int(displacement_map.shape[1])
        self.map_texture = ctx.texture(
            (w, h), 4, np.ascontiguousarray(displacement_map, dtype=np.uint8).tobytes()
        )
        self.map_texture.repeat_x = True
        self.map_texture.repeat_y = True
        self.map_texture.filter = (mgl.LINEAR, mgl.LINEAR)
        self._set_sampler(self._displacement, "u_map", 1)

        self._targets: list[_Target] = []
        self.viewport_size = (1, 1)
        self.framebuffer_size = (1, 1)
        self.resize(viewport_size, framebuffer_size)

    # ---- サイズ管理 ----
    def resize(
        self, viewport_size: tuple[int, int], framebuffer_size: tuple[int, int] | None = None
    ) -> None:
        """オフスクリーンターゲットを張り直す（同寸法なら何もしない）。"""
        vw, vh = max(1, int(viewport_size[0])), max(1, int(viewport_size[1]))
        fb = framebuffer_size if framebuffer_size is not None else (vw, vh)
        fw, fh = max(1, int(fb[0])), max(1, int(fb[1]))
        if self._targets and (fw, fh) == self.framebuffer_size and (vw, vh) == self.viewport_size:
            return
        for t in self._targets:
            t.release()
        self._targets = [_Target(self.ctx, (fw, fh)) for _ in range(3)]
        self.viewport_size = (vw, vh)
        self.framebuffer_size = (fw, fh)
        self.ctx.screen.viewport = (0, 0, fw, fh)
        logger.debug("compositor targets %sx%s (viewport %sx%s)", fw, fh, vw, vh)

    # ---- 描画 ----
    def render(
        self,
        draw_scene: Callable[[], None],
        filters: Sequence[SceneFilter],
        clear_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
    ) -> None:
        """シーン描画 → 各パス → 画面へブリット。"""
        scene, ping, pong = self._targets
        scene.fbo.use()
        scene.fbo.clear(*clear_color)
        draw_scene()

        self.ctx.disable(mgl.BLEND)
        src = scene
        for i, (kind, f) in enumerate(plan_passes(filters)):
            dst = ping if i % 2 == 0 else pong
            dst.fbo.use()
            src.texture.use(location=0)
            if kind == "displacement":
                self._bind_displacement(f)  # type: ignore[arg-type]
            else:
                self._bind_shockwave(f)  # type: ignore[arg-type]
            self._vaos[kind].render(mgl.TRIANGLE_STRIP)
            src = dst

        self.ctx.screen.use()
        src.texture.use(location=0)
        self._vaos["blit"].render(mgl.TRIANGLE_STRIP)
        self.ctx.enable(mgl.BLEND)

    def _bind_displacement(self, d: ScrollingDisplacement) -> None:
        prog = self._displacement
        self.map_texture.use(location=1)
        self._set_uniform(prog, "u_viewport", self.viewport_size)
        self._set_uniform(prog, "u_map_size", d.map_size)
        self._set_uniform(prog, "u_offset", (float(d.offset), 0.0))
        self._set_uniform(prog, "u_scale", (float(d.scale[0]), float(d.scale[1])))

    def _bind_shockwave(self, w: Shockwave) -> None:
        prog = self._shockwave
        self._set_uniform(prog, "u_viewport", self.viewport_size)
        self._set_uniform(prog, "u_center", (float(w.origin[0]), float(w.origin[1])))
        self._set_uniform(prog, "u_time", float(w.clock))
        self._set_uniform(prog, "u_speed", float(w.speed))
        self._set_uniform(
            prog,
            "u_wave",
            (float(w.amplitude), float(w.wavelength), float(w.brightness), float(w.radius)),
        )

    @staticmethod
    def _set_uniform(prog: Any, name: str, value: Any) -> None:
        # ドライバ最適化で消えた uniform は無視
        if name in prog:
            prog[name].value = value

    @staticmethod
    def _set_sampler(prog: Any, name: str, location: int) -> None:
        if name in prog:
            prog[name].value = location

    def release(self) -> None:
        """GPU リソースを解放。"""
        for t in self._targets:
            t.release()
        self._targets = []
        for vao in self._vaos.values():
            vao.release()
        self._vbo.release()
        self.map_texture.release()
        for prog in (self._blit, self._displacement, self._shockwave):
            prog.release()


__all__ = ["FilterCompositor", "plan_passes"]
