"""
どこで: `src/danmaku/core/generators/star.py`。星形のスタンプ位置生成。
何を: 外側の頂点と内側の谷を交互に結ぶ輪郭、または頂点飛ばしの星形多角形を点列化する。
なぜ: concave/skew で谷の深さとねじれを変えた星形パターンを作るため。
"""

from __future__ import annotations

import math

from danmaku.core.generators.line import line_points
from danmaku.core.generators.placement import angle_distribution
from danmaku.core.generators.polygon import polygon_points
from danmaku.core.point import Point
from danmaku.core.shape_registry import shape_generator
from danmaku.core.shapes import Star, UniformCount


@shape_generator(Star)
def star(shape: Star) -> list[Point]:
    """Star 記述子のスタンプ位置を返す。

    Notes
    -----
    - fill_inner=True: `is_star=True` の多角形と同じ点列（concave/skew は無視）。
    - fill_inner=False: 谷の半径は ``radius·cos(π/side)·concave``、
      谷の角度は頂点角から ``180°/side + skew·360°`` ずらす。
      skew は [0, 1) に正規化しない。
    """
    side = shape.side
    if shape.fill_inner:
        return polygon_points(
            shape.center_pos,
            side,
            UniformCount(shape.num_per_side).resolve(side),
            shape.radius,
            shape.orientation,
            is_star=True,
        )

    center = shape.center_pos
    radius = float(shape.radius)
    valley_radius = radius * math.cos(math.pi / side) * float(shape.concave)
    valley_shift = math.radians(180.0 / side + float(shape.skew) * 360.0)
    basis = shape.orientation.normal_vector.unit_vectors()

    vertices: list[Point] = []
    valleys: list[Point] = []
    for i in range(side):
        theta = angle_distribution(i, side, shape.orientation.angle)
        vertices.append(center.translated_by_basis(basis, radius, theta))
        valleys.append(center.translated_by_basis(basis, valley_radius, theta + valley_shift))

    number = shape.num_per_side - 1
    out: list[Point] = []
    for i in range(side):
        out.extend(line_points(vertices[i], valleys[i], number))
        out.extend(line_points(valleys[i], vertices[(i + 1) % side], number))
    return out
