"""core.presets のデモパターンをテスト。"""

from __future__ import annotations

from danmaku.core.frame import render_frame
from danmaku.core.presets import PRESETS, preset_patterns
from danmaku.core.renderer import RecordingRenderer, Sprite


def test_preset_order_matches_click_cycle() -> None:
    assert list(PRESETS) == ["circle", "polygon", "star", "parallelepiped"]


def test_every_preset_renders_without_errors_for_many_frames() -> None:
    sprite = Sprite(16, 16)
    for name, shapes in preset_patterns().items():
        renderer = RecordingRenderer()
        for _ in range(30):
            results = render_frame(shapes, renderer, sprite)
            assert all(r.ok for r in results), name
        assert renderer.stamps, name


def test_preset_patterns_returns_fresh_instances() -> None:
    a = preset_patterns()
    b = preset_patterns()
    assert a["circle"][0] is not b["circle"][0]
