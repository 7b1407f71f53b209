# どこで: `src/danmaku/interactive/sprite.py`。
# 何を: スタンプ用スプライト画像を読み込む / 手続き的に生成する。
# なぜ: 画像ファイルが無くても、加算合成で光って見える「ぼかした点」を 1 度だけ用意して使い回すため。

from __future__ import annotations

from pathlib import Path

import numpy as np

from danmaku.core.renderer import Sprite


def soft_dot_rgba(size: int, color: tuple[float, float, float]) -> np.ndarray:
    """中心が不透明で外周に向けて透明になる点の RGBA 画像を返す。

    Parameters
    ----------
    size : int
        一辺のピクセル数（正）。
    color : tuple[float, float, float]
        RGB（0..1）。

    Returns
    -------
    np.ndarray
        shape (size, size, 4), dtype uint8 の配列。
    """
    n = int(size)
    if n <= 0:
        raise ValueError(f"size は正の値である必要がある: got={size}")

    c = (n - 1) / 2.0
    yy, xx = np.mgrid[0:n, 0:n].astype(np.float64)
    radius = max(n / 2.0, 1e-9)
    d = np.sqrt((xx - c) ** 2 + (yy - c) ** 2) / radius
    alpha = np.clip(1.0 - d, 0.0, 1.0) ** 2

    rgb = np.clip(np.asarray(color, dtype=np.float64), 0.0, 1.0)
    out = np.empty((n, n, 4), dtype=np.uint8)
    out[..., :3] = np.round(rgb * 255.0).astype(np.uint8)
    out[..., 3] = np.round(alpha * 255.0).astype(np.uint8)
    return out


def _centered(image):
    image.anchor_x = image.width // 2
    image.anchor_y = image.height // 2
    return image


def make_sprite(size: int, color: tuple[float, float, float]) -> Sprite:
    """soft_dot_rgba から pyglet 画像を作り Sprite として返す。

    Notes
    -----
    テクスチャは初回描画時に作られるため、GL コンテキスト（ウィンドウ）作成後に呼ぶ。
    """
    import pyglet

    rgba = soft_dot_rgba(size, color)
    n = int(rgba.shape[0])
    image = pyglet.image.ImageData(n, n, "RGBA", rgba.tobytes(), pitch=n * 4)
    return Sprite(width=n, height=n, image=_centered(image))


def load_sprite(path: str | Path) -> Sprite:
    """画像ファイルを 1 度だけ読み込み、中心アンカーの Sprite として返す。"""
    import pyglet

    _path = Path(path)
    if not _path.is_file():
        raise FileNotFoundError(f"スプライト画像が見つかりません: {_path}")
    image = pyglet.image.load(str(_path))
    return Sprite(width=int(image.width), height=int(image.height), image=_centered(image))


__all__ = ["load_sprite", "make_sprite", "soft_dot_rgba"]
