"""
どこで: `src/danmaku/core/presets.py`。
何を: デモ用のパターン集合（circle / polygon / star / parallelepiped）を生成する。
なぜ: 記述子は Spin でフレームごとに書き換わるため、呼び出しごとに新しいインスタンスを返す必要がある。
"""

from __future__ import annotations

import math
from typing import Callable

from danmaku.core.point import Point
from danmaku.core.shapes import Circle, Parallelepiped, Polygon, Shape, Star
from danmaku.core.vector import Vector


def circle_patterns() -> list[Shape]:
    return [
        Circle(Point(200, 200), 20, 100, spin=Vector(0, 0, 1)),
        Circle(Point(600, 200), 24, 120, spin=Vector(2, 0, 0)),
        Circle(Point(1000, 200), 20, 100, spin=Vector(0, 1.5, 0)),
        Circle(Point(200, 600), 20, 100, normal_vector=Vector(0, 1, 0.2), spin=Vector(0, 2, 0.4)),
        Circle(Point(200, 600), 20, 100, normal_vector=Vector(1, 0, 0.2), spin=Vector(2, 0, 0.4)),
        Circle(Point(600, 600), 20, 100, scale=2.0, spin=Vector(0, 0.7, 1)),
        Circle(
            Point(1000, 600),
            40,
            100,
            scale=0.5,
            normal_vector=Vector(-0.5, 1, 0.2),
            spin=Vector(-1, 2, 1.4),
        ),
        Circle(
            Point(1000, 600),
            40,
            100,
            scale=0.5,
            normal_vector=Vector(1, 0.5, 0.2),
            spin=Vector(2, 1, 1.4),
        ),
    ]


def polygon_patterns() -> list[Shape]:
    # 同心の 3 つの六角形は半径と開始角をずらして三角格子状に重ねる。
    return [
        Polygon(Point(200, 200), 4, 8, 100, spin=Vector(0, 0, 1)),
        Polygon(Point(600, 200), 5, 8, 100, spin=Vector(0, 0, -1)),
        Polygon(Point(1000, 200), 3, [5, 10, 10], 100, angle=30, spin=Vector(0, 0, 1)),
        Polygon(Point(200, 600), 5, 8, 100, spin=Vector(0, 0, 1)),
        Polygon(Point(600, 600), 6, 15, 200 / math.sqrt(3), angle=30, scale=0.5, spin=Vector(1, 0, 1)),
        Polygon(Point(600, 600), 6, 15, 100, scale=0.5, spin=Vector(1, 0, 1)),
        Polygon(Point(600, 600), 6, 15, 50 * math.sqrt(3), angle=30, scale=0.5, spin=Vector(1, 0, 1)),
        Polygon(Point(1000, 600), 12, 16, 160, scale=0.3, spin=Vector(0, 0, 1)),
    ]


def star_patterns() -> list[Shape]:
    return [
        Star(Point(200, 200), 6, 16, 100, angle=30, fill_inner=True, spin=Vector(0, 2, 0)),
        Star(Point(600, 200), 5, 5, 100, concave=0.8, spin=Vector(0, 0, 2)),
        Star(Point(1000, 200), 5, 5, 100, concave=0.3, spin=Vector(0, 0, 2)),
        Star(Point(200, 600), 5, 5, 100, skew=1.1, spin=Vector(0, 0, 2)),
        Star(Point(600, 600), 6, 6, 100, concave=0.707, scale=0.5, spin=Vector(0, 0, 2)),
        Star(Point(1000, 600), 4, 5, 100, spin=Vector(2, 0, 2)),
    ]


def parallelepiped_patterns() -> list[Shape]:
    return [
        Parallelepiped(
            Point(200, 200, 0),
            (10, 10, 10),
            (Vector(70, 0, 0), Vector(0, 70, 0), Vector(0, 0, 70)),
            spin=Vector(1, 1, 1),
        ),
        Parallelepiped(
            Point(600, 200, 0),
            (10, 10, 10),
            (Vector(50, 0, 0), Vector(0, 100, 0), Vector(0, 0, 100)),
            spin=Vector(1, 1, 1),
        ),
        Parallelepiped(
            Point(1000, 200, 0),
            (10, 10, 10),
            (Vector(40, 30, 0), Vector(-30, 70, 0), Vector(0, 0, 70)),
            spin=Vector(1, 1, 1),
        ),
        Parallelepiped(
            Point(200, 600, 0),
            (10, 16, 10),
            (Vector(50, 0, 0), Vector(0, 80, 0), Vector(0, 0, 50)),
            spin=Vector(1, 1, 1),
        ),
        Parallelepiped(
            Point(600, 600, 0),
            (10, 20, 24),
            (Vector(30, 40, 0), Vector(-60, 80, 0), Vector(0, 0, 120)),
            scale=0.5,
            spin=Vector(1, 1, 1),
        ),
        Parallelepiped(
            Point(1000, 600, 0),
            (10, 10, 10),
            (Vector(70, 0, 0), Vector(0, 70, 0), Vector(0, 0, 70)),
            spin=Vector(-1, -1, -1),
        ),
    ]


PRESETS: dict[str, Callable[[], list[Shape]]] = {
    "circle": circle_patterns,
    "polygon": polygon_patterns,
    "star": star_patterns,
    "parallelepiped": parallelepiped_patterns,
}
"""プリセット名 → 新しい図形列を返すファクトリ。順序はクリック切り替えの巡回順。"""


def preset_patterns() -> dict[str, list[Shape]]:
    """全プリセットを新しいインスタンスで生成して返す。"""
    return {name: factory() for name, factory in PRESETS.items()}


__all__ = [
    "PRESETS",
    "circle_patterns",
    "parallelepiped_patterns",
    "polygon_patterns",
    "preset_patterns",
    "star_patterns",
]
