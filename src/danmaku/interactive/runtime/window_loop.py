# どこで: `src/danmaku/interactive/runtime/window_loop.py`。
# 何を: 1 つの pyglet window を固定 fps で描画し続ける最小ランナーを提供する。
# なぜ: イベント配送と flip を pyglet の app loop に任せ、描画関数は back buffer へ描くだけにするため。

from __future__ import annotations

from typing import Any, Callable

import pyglet


class WindowLoop:
    """ウィンドウが閉じられるまで `draw_frame()` を一定間隔で呼ぶ。"""

    def __init__(
        self,
        window: Any,
        draw_frame: Callable[[], None],
        *,
        fps: float,
    ) -> None:
        """ループを初期化する。

        Parameters
        ----------
        window : pyglet.window.Window
            描画先ウィンドウ。
        draw_frame : Callable[[], None]
            1 フレーム分の描画処理。`flip()` は pyglet（`Window.draw()`）が行う。
        fps : float
            目標フレームレート。`<=0` の場合はスロットリングしない。
        """

        self._window = window
        self._draw_frame = draw_frame
        self._fps = float(fps)

    def run(self) -> None:
        """ウィンドウが閉じられるまでループを実行する。"""

        window = self._window

        def request_exit(*_: object) -> None:
            pyglet.app.exit()

        window.push_handlers(on_close=request_exit)
        window.push_handlers(on_draw=self._draw_frame)

        def tick(dt: float) -> None:
            # 閉じられたウィンドウへ draw すると例外になり得る。
            if window not in pyglet.app.windows:
                return
            window.draw(dt)

        if self._fps <= 0:
            pyglet.clock.schedule(tick)
        else:
            pyglet.clock.schedule_interval(tick, 1.0 / self._fps)

        try:
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(tick)


__all__ = ["WindowLoop"]
