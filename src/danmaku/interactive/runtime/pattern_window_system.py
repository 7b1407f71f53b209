# どこで: `src/danmaku/interactive/runtime/pattern_window_system.py`。
# 何を: PatternAnimator の現在パターンを描画ウィンドウへ描くサブシステムを提供する。
# なぜ: `src/danmaku/api/runner.py` の `run()` を「配線」に寄せ、描画と入力処理を独立させるため。

from __future__ import annotations

import logging
from pathlib import Path

from pyglet import gl
from pyglet.window import key, mouse

from danmaku.core.frame import PatternAnimator, capture_stamps
from danmaku.core.renderer import Sprite
from danmaku.export.image import default_output_path
from danmaku.export.svg import export_svg
from danmaku.interactive.draw_window import create_draw_window
from danmaku.interactive.pyglet_renderer import PygletRenderer

_logger = logging.getLogger(__name__)


class PatternWindowSystem:
    """描画（メインウィンドウ）のサブシステム。

    マウスクリックで次のパターンへ切り替え、S キーで現在の状態を SVG に保存する。
    """

    def __init__(
        self,
        animator: PatternAnimator,
        *,
        canvas_size: tuple[int, int],
        background_color: tuple[float, float, float],
        sprite_color: tuple[float, float, float],
    ) -> None:
        self._animator = animator
        self._canvas_size = (int(canvas_size[0]), int(canvas_size[1]))
        self._background_color = background_color
        self._sprite_color = sprite_color
        self._sprite: Sprite | None = None

        self.window = create_draw_window(self._canvas_size)
        self._renderer = PygletRenderer(self._canvas_size[1])
        self.window.push_handlers(
            on_key_press=self._on_key_press,
            on_mouse_press=self._on_mouse_press,
        )

    def attach_sprite(self, sprite: Sprite) -> None:
        """描画に使うスプライトを設定する（ウィンドウ作成後に読み込んだもの）。"""
        self._sprite = sprite

    def _on_mouse_press(self, _x: int, _y: int, button: int, _modifiers: int) -> None:
        if button == mouse.LEFT:
            name = self._animator.next_pattern()
            _logger.info("pattern: %s", name)

    def _on_key_press(self, symbol: int, _modifiers: int) -> None:
        if symbol == key.S:
            try:
                path = self.save_svg()
            except Exception:
                _logger.exception("SVG の保存に失敗しました")
                return
            _logger.info("Saved SVG: %s", path)

    def save_svg(self) -> Path:
        """現在のパターンの状態を SVG として保存し、保存先パスを返す。"""
        if self._sprite is None:
            raise RuntimeError("sprite が未設定です")
        animator = self._animator
        stamps = capture_stamps(animator.shapes, self._sprite)
        path = default_output_path(animator.current_name, animator.frame_index)
        return export_svg(
            stamps,
            path,
            canvas_size=self._canvas_size,
            background_color=self._background_color,
            sprite_color=self._sprite_color,
        )

    def draw_frame(self) -> None:
        """1 フレーム分の描画を行う（`flip()` は呼ばない）。"""
        r, g, b = self._background_color
        gl.glClearColor(float(r), float(g), float(b), 1.0)
        self.window.clear()

        sprite = self._sprite
        if sprite is None:
            return
        renderer = self._renderer
        renderer.begin_frame()
        self._animator.step(renderer, sprite)
        renderer.end_frame()
        renderer.draw()

    def close(self) -> None:
        self._renderer.release()
        self.window.close()


__all__ = ["PatternWindowSystem"]
