"""
どこで: `util.color`。
何を: 色指定（Hex 文字列 / RGB(A) タプル 0–1 or 0–255）を RGBA へ正規化する。
なぜ: 設定ファイルの背景色やヘッダ色を GL（0–1）と pyglet Label（0–255）の双方へ渡すため。
"""

from __future__ import annotations

from typing import Sequence

RGBA = tuple[float, float, float, float]


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "RRGGBB" など（大文字小文字不問）。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(t[i : i + 2], 16) for i in range(0, len(t), 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    全要素が 0..1 の数列はそのまま、それ以外は 0–255 とみなしてクランプ・スケールする。
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    seq: Sequence[object] = value
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        vals = [float(v) for v in seq]  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(vals) == 3:
        vals.append(1.0 if all(0.0 <= v <= 1.0 for v in vals) else 255.0)
    if all(0.0 <= v <= 1.0 for v in vals):
        r, g, b, a = vals
        return (r, g, b, a)
    r, g, b, a = (max(0, min(255, int(round(v)))) / 255.0 for v in vals)
    return (r, g, b, a)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する（pyglet Label 用）。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


__all__ = ["parse_hex_color_str", "normalize_color", "to_u8_rgba"]
