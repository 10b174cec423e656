from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


class _Registry(BaseRegistry):
    pass


def test_register_infers_snake_case_name_from_object() -> None:
    reg = _Registry()

    @reg.register()
    class PrimaryWave:  # noqa: D401 - テスト用
        pass

    assert reg.is_registered("primary_wave")
    assert reg.get("PrimaryWave") is PrimaryWave
    assert reg.list_all() == ["primary_wave"]


def test_duplicate_name_rejected_but_same_object_allowed() -> None:
    reg = _Registry()
    obj = object()
    reg.register("secondary")(obj)
    reg.register("Secondary")(obj)  # 同一物の再登録は許容
    with pytest.raises(ValueError):
        reg.register("secondary")(object())


def test_get_missing_raises_key_error() -> None:
    with pytest.raises(KeyError):
        _Registry().get("nope")


def test_invalid_keys() -> None:
    reg = _Registry()
    with pytest.raises(ValueError):
        reg.is_registered("")
    with pytest.raises(TypeError):
        reg.is_registered(1)  # type: ignore[arg-type]


def test_hyphenated_camel_case_key() -> None:
    reg = _Registry()
    reg.register("My-Effect")(object())
    # ハイフン→アンダースコアとキャメル→スネークの合成で二重 '_' になる
    assert reg.list_all() == ["my__effect"]
    assert reg.is_registered("My-Effect")


def test_unregister_clear_and_registry_copy() -> None:
    reg = _Registry()
    reg.register("a")(1)
    reg.register("b")(2)
    reg.unregister("missing")  # 例外にならない
    reg.unregister("A")
    assert reg.list_all() == ["b"]
    snapshot = reg.registry
    snapshot["c"] = 3
    assert not reg.is_registered("c")
    reg.clear()
    assert reg.list_all() == []
