"""
どこで: `aquafx.cli`。
何を: `aquafx` コマンド（argparse）。ウィンドウサイズ/FPS/autoplay/シードなどを上書きして `run_scene` を呼ぶ。
なぜ: スクリプトを書かずに設定ファイルの値を試せるようにするため。
"""

from __future__ import annotations

import argparse
from typing import Sequence

from .scene import run_scene


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="aquafx", description="shockwave effect layer over a 2D scene")
    p.add_argument("--width", type=int, default=None, help="initial window width [px]")
    p.add_argument("--height", type=int, default=None, help="initial window height [px]")
    p.add_argument("--fps", type=int, default=None, help="tick rate")
    p.add_argument("--background", default=None, help="clear color (#RRGGBB)")
    p.add_argument("--title", default=None, help="window caption")
    p.add_argument(
        "--autoplay",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="respawn the primary shockwave whenever it goes dormant",
    )
    p.add_argument("--seed", type=int, default=None, help="random seed")
    p.add_argument(
        "--init-only", action="store_true", help="resolve config and wire effects, then exit"
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    run_scene(
        width=args.width,
        height=args.height,
        fps=args.fps,
        background=args.background,
        title=args.title,
        autoplay=args.autoplay,
        seed=args.seed,
        init_only=args.init_only,
    )
    return 0


__all__ = ["build_parser", "main"]
