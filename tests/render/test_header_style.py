from __future__ import annotations

import math

import pytest

from engine.render.types import HeaderStyle, shadow_offset


def test_default_shadow_points_down() -> None:
    dx, dy = shadow_offset(HeaderStyle())
    assert dx == pytest.approx(0.0, abs=1e-9)
    assert dy == pytest.approx(-2.0)


def test_shadow_offset_scales_with_distance() -> None:
    dx, dy = shadow_offset(HeaderStyle(shadow_distance=4.0, shadow_angle=0.0))
    assert (dx, dy) == pytest.approx((4.0, 0.0))
    dx, dy = shadow_offset(HeaderStyle(shadow_distance=2.0, shadow_angle=math.pi / 4))
    assert dx == pytest.approx(math.sqrt(2.0))
    assert dy == pytest.approx(-math.sqrt(2.0))


def test_header_defaults() -> None:
    style = HeaderStyle()
    assert style.text == "AQUA-SHOP"
    assert style.font_size == 56
