"""core.frame のフレーム処理（生成 → スタンプ → Spin）と PatternAnimator をテスト。"""

from __future__ import annotations

import logging

import pytest

from danmaku.core.frame import PatternAnimator, capture_stamps, render_frame
from danmaku.core.point import Point
from danmaku.core.renderer import RecordingRenderer, Sprite, Stamp
from danmaku.core.shapes import Circle, Line, PerEdgeCount, Polygon, ShapeConfigError
from danmaku.core.vector import Vector

_SPRITE = Sprite(width=16, height=8)


def _broken_polygon() -> Polygon:
    shape = Polygon(Point(0, 0, 0), 3, 5, 10, spin=5)
    shape.num_per_side = PerEdgeCount((5, 5))
    return shape


def test_render_frame_stamps_in_shape_order_with_scale() -> None:
    renderer = RecordingRenderer()
    shapes = [
        Line(Point(0, 0, 0), Point(4, 0, 0), 2, scale=2.0),
        Circle(Point(100, 100, 0), 3, 10),
    ]
    results = render_frame(shapes, renderer, _SPRITE)

    assert [r.ok for r in results] == [True, True]
    assert len(renderer.stamps) == 2 + 3
    first = renderer.stamps[0]
    assert first == Stamp(x=0.0, y=0.0, z=0.0, width=32.0, height=16.0)
    assert (first.left, first.top) == (-16.0, -8.0)
    assert renderer.stamps[2].width == 16.0


def test_render_frame_spins_after_stamping() -> None:
    renderer = RecordingRenderer()
    shape = Circle(Point(0, 0, 0), 4, 10, spin=90)
    render_frame([shape], renderer, _SPRITE)
    # 1 フレーム目は angle=0 の配置で描かれ、その後 angle が進む
    assert renderer.stamps[0].x == pytest.approx(-10.0)
    assert shape.orientation.angle == pytest.approx(90.0)


def test_generation_failure_is_isolated_and_not_spun() -> None:
    renderer = RecordingRenderer()
    broken = _broken_polygon()
    ok = Circle(Point(0, 0, 0), 4, 10, spin=10)

    results = render_frame([broken, ok], renderer, _SPRITE)

    assert isinstance(results[0].error, ShapeConfigError)
    assert results[0].points == ()
    assert broken.orientation.angle == 0.0
    assert results[1].ok
    assert len(renderer.stamps) == 4
    assert ok.orientation.angle == pytest.approx(10.0)


def test_spin_failure_keeps_stamps_and_records_error() -> None:
    renderer = RecordingRenderer()
    shape = Circle(Point(5, 5, 0), 3, 10, normal_vector=Vector(), spin=Vector(1, 0, 0))
    (result,) = render_frame([shape], renderer, _SPRITE)
    assert isinstance(result.error, ValueError)
    assert len(result.points) == 3
    assert len(renderer.stamps) == 3


def test_capture_stamps_does_not_advance_orientation(caplog: pytest.LogCaptureFixture) -> None:
    shape = Circle(Point(0, 0, 0), 4, 10, spin=45)
    with caplog.at_level(logging.WARNING):
        stamps = capture_stamps([shape, _broken_polygon()], _SPRITE)
    assert len(stamps) == 4
    assert shape.orientation.angle == 0.0
    assert "スキップ" in caplog.text


def test_animator_selects_initial_and_cycles() -> None:
    patterns = {
        "a": [Circle(Point(0, 0, 0), 2, 10)],
        "b": [Circle(Point(0, 0, 0), 3, 10)],
        "c": [Circle(Point(0, 0, 0), 4, 10)],
    }
    animator = PatternAnimator(patterns, initial="b")
    assert animator.names == ("a", "b", "c")
    assert animator.current_name == "b"
    assert animator.next_pattern() == "c"
    assert animator.next_pattern() == "a"
    assert len(animator.shapes) == 1


def test_animator_rejects_unknown_or_empty() -> None:
    with pytest.raises(KeyError):
        PatternAnimator({"a": []}, initial="zzz")
    with pytest.raises(ValueError):
        PatternAnimator({})


def test_animator_step_renders_current_pattern_and_counts_frames() -> None:
    renderer = RecordingRenderer()
    animator = PatternAnimator(
        {"a": [Circle(Point(0, 0, 0), 2, 10)], "b": [Circle(Point(0, 0, 0), 5, 10)]}
    )
    animator.step(renderer, _SPRITE)
    assert len(renderer.stamps) == 2
    renderer.clear()
    animator.next_pattern()
    animator.step(renderer, _SPRITE)
    assert len(renderer.stamps) == 5
    assert animator.frame_index == 2


def test_animator_logs_failing_shape_once(caplog: pytest.LogCaptureFixture) -> None:
    animator = PatternAnimator({"broken": [_broken_polygon(), Circle(Point(0, 0, 0), 2, 10)]})
    renderer = RecordingRenderer()
    with caplog.at_level(logging.ERROR, logger="danmaku.core.frame"):
        for _ in range(3):
            animator.step(renderer, _SPRITE)

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "pattern=broken" in errors[0].getMessage()
    assert errors[0].exc_info is not None
    assert len(renderer.stamps) == 2 * 3
