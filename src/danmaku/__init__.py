# どこで: `src/danmaku/__init__.py`。
# 何を: ルート `danmaku` パッケージを定義する。
# なぜ: import 起点を `danmaku` に統一するため。

from __future__ import annotations

from danmaku.api import (
    AxisSpin,
    Circle,
    Line,
    Parallelepiped,
    PatternAnimator,
    Point,
    Polygon,
    RecordingRenderer,
    ScalarSpin,
    ShapeConfigError,
    Sprite,
    Star,
    Vector,
    render_frame,
    run,
)

__all__ = [
    "AxisSpin",
    "Circle",
    "Line",
    "Parallelepiped",
    "PatternAnimator",
    "Point",
    "Polygon",
    "RecordingRenderer",
    "ScalarSpin",
    "ShapeConfigError",
    "Sprite",
    "Star",
    "Vector",
    "render_frame",
    "run",
]
