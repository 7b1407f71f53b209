# どこで: `src/danmaku/interactive/pyglet_renderer.py`。
# 何を: Renderer プロトコルを pyglet の Sprite/Batch で実装する。
# なぜ: 毎フレーム数百個のスタンプを描くため、pyglet.sprite.Sprite をプールして再利用するため。

from __future__ import annotations

from typing import Any

import pyglet
from pyglet.gl import GL_ONE, GL_SRC_ALPHA

from danmaku.core.point import Point
from danmaku.core.renderer import Sprite


class PygletRenderer:
    """加算合成でスプライトをスタンプする Renderer。

    キャンバス座標（y 下向き）を GL の座標（y 上向き）へ反転して配置する。
    `begin_frame()` → `stamp_at()` × N → `end_frame()` → `draw()` の順で使う。
    """

    def __init__(self, canvas_height: int, *, render_scale: float = 1.0) -> None:
        self._canvas_h = float(canvas_height)
        self._render_scale = float(render_scale)
        self._batch = pyglet.graphics.Batch()
        self._pool: list[Any] = []
        self._used = 0

    @property
    def used(self) -> int:
        """現在のフレームで使ったスタンプ数。"""
        return int(self._used)

    def begin_frame(self) -> None:
        self._used = 0

    def _acquire(self, image: Any) -> Any:
        if self._used < len(self._pool):
            s = self._pool[self._used]
            if s.image is not image:
                s.image = image
        else:
            s = pyglet.sprite.Sprite(
                image,
                batch=self._batch,
                blend_src=GL_SRC_ALPHA,
                blend_dest=GL_ONE,
            )
            self._pool.append(s)
        self._used += 1
        return s

    def stamp_at(self, sprite: Sprite, point: Point, scale: float) -> None:
        if sprite.image is None:
            raise ValueError("PygletRenderer には画像付きの Sprite が必要")
        s = self._acquire(sprite.image)
        rs = self._render_scale
        s.x = float(point.x) * rs
        s.y = (self._canvas_h - float(point.y)) * rs
        s.scale = float(scale) * rs
        s.visible = True

    def end_frame(self) -> None:
        """このフレームで使わなかったプール分を非表示にする。"""
        for s in self._pool[self._used :]:
            if s.visible:
                s.visible = False

    def draw(self) -> None:
        self._batch.draw()

    def release(self) -> None:
        """プールしたスプライトを破棄する。"""
        for s in self._pool:
            s.delete()
        self._pool.clear()
        self._used = 0


__all__ = ["PygletRenderer"]
