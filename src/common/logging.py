"""
どこで: `common.logging`。
何を: ランナー起動時に 1 度だけ適用する最小ロギング設定と、レベル名の解決を提供。
なぜ: 各モジュールは `logging.getLogger(__name__)` だけを使い、構成は入口に集約するため。
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str | None, default: int = logging.INFO) -> int:
    """`"debug"` / `"INFO"` / `10` などを logging のレベル値へ解決する（不明値は既定）。"""
    if level is None:
        return default
    if isinstance(level, str):
        lvl = logging.getLevelName(level.strip().upper())
        return lvl if isinstance(lvl, int) else default
    return int(level)


def setup_default_logging(level: int | str | None = "INFO") -> None:
    """ルートロガーへ最小構成を適用する。

    - ルートに既にハンドラがあればアプリ側の設定を尊重して何もしない
    - `run_scene` など上位ランナーから呼び出す想定
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=resolve_level(level), format=_FORMAT)


__all__ = ["resolve_level", "setup_default_logging"]
