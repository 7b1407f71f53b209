"""円周上の角度配置ヘルパ（circle/polygon/star で共有）。"""

from __future__ import annotations

import math

from danmaku.core.point import Point
from danmaku.core.vector import Basis

ANGLE_OFFSET = -90.0
"""index 0 を基準フレームの右ではなく上側に置くための固定オフセット [deg]。"""


def angle_distribution(index: int, total: int, offset: float) -> float:
    """total 等分した index 番目の角度 [rad] を返す。

    ``index/total·360° + (offset − 90°)`` をラジアンで返す。
    """
    return index / total * 2.0 * math.pi + math.radians(offset + ANGLE_OFFSET)


def ring(
    center: Point,
    basis: Basis,
    radius: float,
    count: int,
    offset: float,
) -> list[Point]:
    """center まわりに count 個の点を等角度で並べる。"""
    return [
        center.translated_by_basis(basis, radius, angle_distribution(i, count, offset))
        for i in range(count)
    ]
