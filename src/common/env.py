"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパ（int/bool/str）。
なぜ: `os.getenv` と不正値ガードを各所に散らさず、`common.settings` から一様に読むため。
"""

from __future__ import annotations

import os
from typing import Optional

_TRUE = {"true", "t", "yes", "y", "on"}
_FALSE = {"false", "f", "no", "n", "off"}


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得する。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        未設定/不正値のときに返す値。
    min_value : Optional[int]
        下限。下回った値は下限へ丸める。
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_optional_bool(name: str) -> Optional[bool]:
    """真偽環境変数を取得（未設定/解釈不能は None。呼び出し側の既定を優先させる）。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    s = raw.strip().lower()
    if s.lstrip("-").isdigit():
        return int(s) != 0
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return None


def env_str(name: str, default: str) -> str:
    """文字列環境変数を取得（空文字は未設定扱い）。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


__all__ = ["env_int", "env_optional_bool", "env_str"]
