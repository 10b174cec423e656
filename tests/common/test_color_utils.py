from __future__ import annotations

import pytest

from util.color import normalize_color, parse_hex_color_str, to_u8_rgba


def test_parse_hex_background_default() -> None:
    r, g, b, a = parse_hex_color_str("#1099bb")
    assert (r, g, b, a) == pytest.approx((0x10 / 255, 0x99 / 255, 0xBB / 255, 1.0))


@pytest.mark.parametrize("text", ["0x1099BB", "1099bb", "  #1099BB  "])
def test_parse_hex_prefix_and_case_variants(text: str) -> None:
    assert parse_hex_color_str(text) == parse_hex_color_str("#1099bb")


def test_parse_hex_with_alpha() -> None:
    assert parse_hex_color_str("#000000CC")[3] == pytest.approx(0xCC / 255)


@pytest.mark.parametrize("text", ["#123", "not-a-color", "#GGGGGG"])
def test_parse_hex_invalid(text: str) -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str(text)


def test_normalize_unit_tuple_gets_opaque_alpha() -> None:
    assert normalize_color((0.1, 0.2, 0.3)) == pytest.approx((0.1, 0.2, 0.3, 1.0))


def test_normalize_byte_tuple_is_clamped_and_scaled() -> None:
    assert normalize_color((300, 128, -5)) == pytest.approx((1.0, 128 / 255, 0.0, 1.0))


@pytest.mark.parametrize("value", [None, 12, (1, 2), "#12"])
def test_normalize_rejects_unsupported(value: object) -> None:
    with pytest.raises(ValueError):
        normalize_color(value)


def test_to_u8_rgba_for_label_colors() -> None:
    assert to_u8_rgba("ffffff") == (255, 255, 255, 255)
    assert to_u8_rgba((0.0, 1.0, 0.5)) == (0, 255, 128, 255)
