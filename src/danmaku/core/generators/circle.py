"""
どこで: `src/danmaku/core/generators/circle.py`。円周上のスタンプ位置生成。
何を: 法線ベクトルが定める平面上に number 個の点を等角度で並べる。
なぜ: 法線を Spin で回すことで、円を 3D 回転させて見せるため。
"""

from __future__ import annotations

from danmaku.core.generators.placement import ring
from danmaku.core.point import Point
from danmaku.core.shape_registry import shape_generator
from danmaku.core.shapes import Circle


@shape_generator(Circle)
def circle(shape: Circle) -> list[Point]:
    """Circle 記述子のスタンプ位置を返す。

    index 0 は angle=0 のとき基準フレームの -90° 位置に置かれ、
    以降 360°/number ずつ進む。
    """
    orientation = shape.orientation
    basis = orientation.normal_vector.unit_vectors()
    return ring(shape.center_pos, basis, float(shape.radius), shape.number, orientation.angle)
