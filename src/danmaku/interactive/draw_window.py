# どこで: `src/danmaku/interactive/draw_window.py`。
# 何を: パターン描画用の pyglet ウィンドウ生成を行う。
# なぜ: interactive 依存をこの層に閉じ込め、core/export をヘッドレスに保つため。

from __future__ import annotations

import pyglet
from pyglet.gl import Config
from pyglet.window import Window


def create_draw_window(
    canvas_size: tuple[int, int],
    *,
    render_scale: float = 1.0,
    caption: str = "danmaku",
) -> Window:
    """キャンバス寸法に基づき描画ウィンドウを生成する。"""
    config = Config(double_buffer=True)  # type: ignore[abstract]
    canvas_w, canvas_h = canvas_size
    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(canvas_w * render_scale),
        height=int(canvas_h * render_scale),
        resizable=False,
        caption=caption,
        config=config,
    )
    return window


__all__ = ["create_draw_window"]
