# どこで: `src/danmaku/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして図形記述子・フレーム処理と run を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from danmaku.core.frame import PatternAnimator, capture_stamps, render_frame
from danmaku.core.point import Point
from danmaku.core.presets import preset_patterns
from danmaku.core.renderer import RecordingRenderer, Renderer, Sprite, Stamp
from danmaku.core.shape_registry import generate, shape_generator
from danmaku.core.shapes import (
    AxisSpin,
    Circle,
    Line,
    Parallelepiped,
    Polygon,
    ScalarSpin,
    ShapeConfigError,
    Star,
)
from danmaku.core.vector import Vector

__all__ = [
    "AxisSpin",
    "Circle",
    "Line",
    "Parallelepiped",
    "PatternAnimator",
    "Point",
    "Polygon",
    "RecordingRenderer",
    "Renderer",
    "ScalarSpin",
    "ShapeConfigError",
    "Sprite",
    "Stamp",
    "Star",
    "Vector",
    "capture_stamps",
    "generate",
    "preset_patterns",
    "render_frame",
    "run",
    "shape_generator",
]


def run(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで GUI 依存を後回しにする）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)
