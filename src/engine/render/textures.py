"""
どこで: `engine.render.textures`。
何を: 背景画像/ディスプレイスメントマップの RGBA 配列（uint8, 行 0 = 下端）を用意する。ファイル読込と numpy による手続き生成。
なぜ: 外部アセットが無い/壊れている環境でも同じパイプラインで起動できるようにするため（ネットワーク取得はしない）。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import numpy as np

logger = logging.getLogger(__name__)


def procedural_background(
    width: int,
    height: int,
    *,
    top: tuple[int, int, int] = (16, 153, 187),
    bottom: tuple[int, int, int] = (4, 38, 64),
) -> np.ndarray:
    """縦グラデーションにコースティクス風の明暗を重ねた背景（shape=(h, w, 4)）。"""
    w = max(1, int(width))
    h = max(1, int(height))
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None, None]
    lo = np.asarray(bottom, dtype=np.float32)[None, None, :]
    hi = np.asarray(top, dtype=np.float32)[None, None, :]
    rgb = lo + (hi - lo) * t

    yy, xx = np.mgrid[0:h, 0:w].astype(np.float32)
    caustic = np.sin(xx * 0.045 + np.sin(yy * 0.03) * 2.0) * np.cos(yy * 0.05 - xx * 0.01)
    rgb = rgb * (1.0 + 0.12 * caustic[:, :, None])

    out = np.empty((h, w, 4), dtype=np.uint8)
    out[:, :, :3] = np.clip(rgb, 0.0, 255.0).astype(np.uint8)
    out[:, :, 3] = 255
    return out


def procedural_displacement_map(size: int = 256, *, seed: int | None = None) -> np.ndarray:
    """継ぎ目なくタイル可能なディスプレイスメントマップ（r/g が変位, 中立値 128）。

    周期 `size` の整数周波数の正弦和なので、repeat アドレッシングで継ぎ目が出ない。
    """
    n = max(2, int(size))
    rng = np.random.default_rng(seed)
    u = np.arange(n, dtype=np.float32) * (2.0 * np.pi / n)
    yy, xx = np.meshgrid(u, u, indexing="ij")

    def _field() -> np.ndarray:
        acc = np.zeros((n, n), dtype=np.float32)
        for octave in range(1, 5):
            fx, fy = rng.integers(1, 3 * octave + 1, size=2)
            phase = rng.uniform(0.0, 2.0 * np.pi)
            acc += np.sin(fx * xx + fy * yy + phase) / octave
        peak = float(np.max(np.abs(acc))) or 1.0
        return acc / peak

    out = np.empty((n, n, 4), dtype=np.uint8)
    out[:, :, 0] = np.clip(128.0 + 127.0 * _field(), 0, 255).astype(np.uint8)
    out[:, :, 1] = np.clip(128.0 + 127.0 * _field(), 0, 255).astype(np.uint8)
    out[:, :, 2] = 128
    out[:, :, 3] = 255
    return out


def load_image_rgba(path: str | Path) -> np.ndarray | None:
    """画像ファイルを RGBA 配列で返す（失敗時は警告して None）。"""
    p = Path(path).expanduser()
    if not p.is_file():
        logger.warning("image not found: %s", p)
        return None
    import pyglet  # 遅延 import（ヘッドレスで textures を使う経路を軽く保つ）

    try:
        img = pyglet.image.load(str(p))
        data = img.get_image_data().get_data("RGBA", img.width * 4)
    except Exception as e:  # pyglet のデコーダ例外は型が実装依存
        logger.warning("image decode failed: %s (%s)", p, e)
        return None
    return np.frombuffer(data, dtype=np.uint8).reshape(img.height, img.width, 4).copy()


def resolve_texture(path: str | Path | None, fallback: Callable[[], np.ndarray]) -> np.ndarray:
    """`path` が読めればその画像、そうでなければ `fallback()` の手続き生成結果。"""
    if path:
        arr = load_image_rgba(path)
        if arr is not None:
            return arr
        logger.info("falling back to procedural texture for %s", path)
    return fallback()


__all__ = [
    "load_image_rgba",
    "procedural_background",
    "procedural_displacement_map",
    "resolve_texture",
]
