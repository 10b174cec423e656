"""
どこで: `common.base_registry`
何を: 名前正規化付きの順序保持レジストリ基底。
なぜ: エフェクト（shockwave 等）の登録・取得・一覧を一貫したキー規則で扱うため。
"""

from __future__ import annotations

import re
from abc import ABC
from typing import Any, Callable


class BaseRegistry(ABC):
    """レジストリの基底クラス。

    - 文字列キーは正規化される（大文字小文字・キャメル→スネーク・ハイフンを吸収）。
    - 登録順は保持される（dict の挿入順）。
    """

    def __init__(self) -> None:
        self._registry: dict[str, Any] = {}

    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def _normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "PrimaryWave" -> "primary_wave"）。"""
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        if not name:
            raise ValueError("レジストリキーは空であってはなりません")
        name = name.replace("-", "_")
        return cls._camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """オブジェクトを登録するデコレータ（名前省略時は `__name__` から推論）。"""

        def decorator(obj: Any) -> Any:
            key = self._normalize_key(name) if name else self._normalize_key(obj.__name__)
            if key in self._registry and self._registry[key] is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        key = self._normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"'{name}' は登録されていません")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録順の名前一覧。"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        return self._normalize_key(name) in self._registry

    def unregister(self, name: str) -> None:
        """登録解除（存在しない名前は無視）。"""
        self._registry.pop(self._normalize_key(name), None)

    def clear(self) -> None:
        self._registry.clear()

    @property
    def registry(self) -> dict[str, Any]:
        """読み取り用のコピー。"""
        return self._registry.copy()
