"""共通フィクスチャ。

- 乱数シード固定の `random.Random`
- 手動で進める擬似ミリ秒時計
- 常に当たる/外れる乱数源
"""

from __future__ import annotations

import random

import pytest

from effects.shockwave import Shockwave


class FakeClockMs:
    """`now_ms` に渡す手動時計。"""

    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def set(self, t: float) -> None:
        self.now = float(t)


class FixedRandom:
    """`random()` が常に同じ値を返す乱数源（`uniform` は下端を返す）。"""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(12345)


@pytest.fixture()
def fake_clock() -> FakeClockMs:
    return FakeClockMs()


@pytest.fixture()
def always_pass() -> FixedRandom:
    return FixedRandom(0.0)


@pytest.fixture()
def never_pass() -> FixedRandom:
    return FixedRandom(0.99)


@pytest.fixture()
def wave() -> Shockwave:
    return Shockwave("primary", origin=(10.0, 20.0))
