"""
どこで: `aquafx` 入口（高レベル公開 API）。
何を: シーン実行 `run_scene`（別名 `run`）と、エフェクトの主要型を再輸出。
なぜ: 利用者が単一名前空間から設定→実行まで完結できるようにするため。

Usage:
    from aquafx import run

    run(autoplay=True)
"""

from effects import EffectRegistry, EffectState, ScrollingDisplacement, Shockwave, ShockwaveParams

from .scene import run_scene as run
from .scene import run_scene as run_scene

__all__ = [
    "run",
    "run_scene",
    "EffectRegistry",
    "EffectState",
    "ScrollingDisplacement",
    "Shockwave",
    "ShockwaveParams",
]

__version__ = "2026.10"
