"""公開 API（`danmaku` / `danmaku.api`）の再エクスポートをテスト。"""

from __future__ import annotations

import danmaku
from danmaku import api


def test_top_level_reexports_core_types() -> None:
    assert danmaku.Vector is api.Vector
    assert danmaku.Circle is api.Circle
    assert danmaku.render_frame is api.render_frame
    assert callable(danmaku.run)


def test_run_is_lazy_wrapper_not_runner_module() -> None:
    assert callable(api.run)
    assert api.run.__module__ == "danmaku.api"


def test_quick_frame_through_public_api() -> None:
    renderer = danmaku.RecordingRenderer()
    sprite = danmaku.Sprite(8, 8)
    shapes = [danmaku.Star(danmaku.Point(0, 0, 0), 5, 3, 40, spin=danmaku.Vector(0, 0, 3))]
    results = danmaku.render_frame(shapes, renderer, sprite)
    assert results[0].ok
    assert len(renderer.stamps) == 5 * 2 * 2
