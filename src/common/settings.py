"""
どこで: `common.settings`
何を: `AQX_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: ログレベルや乱数シードの上書きを `os.getenv` の散在なしに扱い、テストから再読込できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_optional_bool, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # 乱数（None なら非決定）
    RANDOM_SEED: int | None = None

    # Scene
    AUTOPLAY: bool | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `AQX_AUTOPLAY` は未設定/解釈不能なら None のまま（設定ファイルの値を優先させる）。
    """
    _settings.LOG_LEVEL = env_str("AQX_LOG_LEVEL", "INFO").upper()
    _settings.RANDOM_SEED = env_int("AQX_SEED", None)
    _settings.AUTOPLAY = env_optional_bool("AQX_AUTOPLAY")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
