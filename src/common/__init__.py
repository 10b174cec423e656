"""
どこで: `common` パッケージ。
何を: 設定/環境変数/ロギング/レジストリ基底など、層をまたいで使う軽量ユーティリティ。
なぜ: effects/engine/aquafx の依存の向きを単純に保つため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]
