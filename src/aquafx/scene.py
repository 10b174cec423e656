"""
どこで: `aquafx.scene`（実行ランナー）。
何を: 背景 + タイトルのシーンに、スクロールリップルとショックウェーブ群を重ねて pyglet ウィンドウで実行する。
なぜ: 設定解決・エフェクト結線・ウィンドウ/GL・入力イベント・フレーム駆動を 1 つの入口にまとめるため。

実行フロー（概要）:
1) ロギング: `AQX_LOG_LEVEL` で最小構成を適用（アプリ側で設定済みなら何もしない）。
2) 設定: `util.utils.load_config()` の YAML と明示引数から `SceneConfig` を解決。
3) エフェクト: リップル + primary/secondary ショックウェーブ（休止状態で生成）とトリガを結線。
   `init_only=True` ならここで戻る（pyglet/ModernGL を import しない）。
4) ウィンドウ/GL: `RenderWindow` と ModernGL コンテキスト、背景/マップのテクスチャ、`SceneLayer`、
   `FilterCompositor` を生成。
5) イベント:
   - クリック → primary を発火（無条件）
   - ポインタ移動/ドラッグ → secondary を確率 + クールダウンで発火
   - リサイズ → 背景/ヘッダを中心へ、オフスクリーンを張り直し
   - ESC → 終了（GPU リソース解放）
6) フレーム駆動: `FrameClock` が `ClockAdvancer`（と autoplay）の `tick(dt)` を `pyglet.clock` で駆動。

スレッド:
- すべてのコールバックは pyglet のイベントループ（主スレッド）で順に完了まで実行される。
  エフェクトの共有状態はこの前提でロックなしに更新している（`engine.fx` 参照）。

例:
    from aquafx import run_scene

    run_scene(width=960, height=640, autoplay=True)
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from common.logging import setup_default_logging
from common.settings import get as get_settings
from util.utils import _find_project_root, load_config

from .scene_runner.config import SceneConfig, resolve_scene_config
from .scene_runner.wiring import EffectEngine, build_engine

logger = logging.getLogger(__name__)


def run_scene(
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    background: str | tuple[float, ...] | None = None,
    title: str | None = None,
    autoplay: bool | None = None,
    seed: int | None = None,
    init_only: bool = False,
) -> None:
    """シーンを実行する。

    Parameters
    ----------
    width, height : int | None
        初期ウィンドウサイズ [px]。None で設定ファイル（既定 1280x720）。
    fps : int | None
        tick レート。None で設定ファイル（既定 60）。
    background : str | tuple | None
        クリア色（Hex または RGB(A)）。None で設定ファイル（既定 `#1099bb`）。
    title : str | None
        ウィンドウのキャプション。
    autoplay : bool | None
        True で primary が休止するたびランダム位置で自動再発火。None で環境変数/設定ファイル。
    seed : int | None
        乱数シード。None なら `AQX_SEED`、それも無ければ非決定。
    init_only : bool
        True で設定解決とエフェクト結線だけを行い、ウィンドウを開かずに戻る。
    """
    settings = get_settings()
    setup_default_logging(settings.LOG_LEVEL)

    project_root = _find_project_root(Path(__file__).parent)
    conf = resolve_scene_config(
        load_config(),
        width=width,
        height=height,
        fps=fps,
        background=background,
        title=title,
        autoplay=autoplay,
        project_root=project_root,
    )
    resolved_seed = seed if seed is not None else settings.RANDOM_SEED
    rng = random.Random(resolved_seed)

    if init_only:
        win = conf.window
        size = conf.assets.displacement_size
        engine = build_engine(conf.fx, lambda: (win.width, win.height), (size, size), rng)
        logger.info(
            "init_only: %dx%d @ %dfps, %d shockwaves, autoplay=%s",
            win.width,
            win.height,
            win.fps,
            len(engine.registry),
            conf.fx.autoplay,
        )
        return None

    _run_window(conf, rng, resolved_seed)
    return None


def _run_window(conf: SceneConfig, rng: random.Random, seed: int | None) -> None:
    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import moderngl
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import RenderWindow
    from engine.fx.layout import LayoutResponder
    from engine.render.compositor import FilterCompositor
    from engine.render.scene import SceneLayer
    from engine.render.textures import (
        procedural_background,
        procedural_displacement_map,
        resolve_texture,
    )
    from util.color import normalize_color

    win_conf = conf.window
    bg_rgba = normalize_color(win_conf.background_color)

    # ---- ウィンドウ & ModernGL ------------------------------------
    window = RenderWindow(win_conf.width, win_conf.height, caption=win_conf.caption, bg_color=bg_rgba)
    mgl_ctx = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    # ---- テクスチャ ------------------------------------------------
    background_tex = resolve_texture(
        conf.assets.background_image,
        lambda: procedural_background(win_conf.width, win_conf.height),
    )
    map_tex = resolve_texture(
        conf.assets.displacement_image,
        lambda: procedural_displacement_map(conf.assets.displacement_size, seed=seed),
    )
    pattern_size = (int(map_tex.shape[1]), int(map_tex.shape[0]))

    # ---- エフェクト ------------------------------------------------
    engine: EffectEngine = build_engine(
        conf.fx, lambda: (window.width, window.height), pattern_size, rng
    )

    # ---- シーン & レイアウト --------------------------------------
    scene = SceneLayer(background_tex, conf.header)
    layout = LayoutResponder(scene.elements())
    layout.on_resize(window.width, window.height)

    compositor = FilterCompositor(
        mgl_ctx,
        map_tex,
        viewport_size=(window.width, window.height),
        framebuffer_size=window.get_framebuffer_size(),
    )

    def _draw_main() -> None:
        compositor.render(scene.draw, engine.registry.filters(), clear_color=bg_rgba)

    window.add_draw_callback(_draw_main)

    # ---- フレーム駆動 ----------------------------------------------
    frame_clock = FrameClock(engine.tickables())
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / win_conf.fps)

    # ---- pyglet イベント -------------------------------------------
    @window.event
    def on_mouse_press(x, y, button, modifiers):  # noqa: ANN001
        engine.click.on_click(x, y)

    @window.event
    def on_mouse_motion(x, y, dx, dy):  # noqa: ANN001
        engine.motion.on_move(x, y)

    @window.event
    def on_mouse_drag(x, y, dx, dy, buttons, modifiers):  # noqa: ANN001
        engine.motion.on_move(x, y)

    @window.event
    def on_resize(width, height):  # noqa: ANN001
        # None を返して既定ハンドラ（ビューポート/射影更新）にも処理させる
        layout.on_resize(width, height)
        compositor.resize((width, height), window.get_framebuffer_size())

    @window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            window.close()

    @window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        if getattr(on_close, "_closed", False):
            return
        pyglet.clock.unschedule(frame_clock.tick)
        compositor.release()
        scene.delete()
        setattr(on_close, "_closed", True)
        pyglet.app.exit()

    logger.info(
        "scene started: %dx%d @ %dfps, %d shockwaves, autoplay=%s, active_frames=%.1f",
        window.width,
        window.height,
        win_conf.fps,
        len(engine.registry),
        conf.fx.autoplay,
        conf.fx.clock.active_frames,
    )
    pyglet.app.run()


__all__ = ["run_scene"]
