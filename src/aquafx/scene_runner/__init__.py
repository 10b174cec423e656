"""
どこで: `aquafx.scene_runner` サブパッケージ。
何を: `run_scene` の下請け（設定解決・エフェクト結線）を提供。
なぜ: 入口モジュールを薄くし、ウィンドウ無しでテスト可能な部分を分離するため。
"""

from .config import SceneConfig, resolve_scene_config
from .wiring import EffectEngine, build_engine

__all__ = ["EffectEngine", "SceneConfig", "build_engine", "resolve_scene_config"]
