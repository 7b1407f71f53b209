"""
どこで: `src/danmaku/core/generators/polygon.py`。正多角形の辺上のスタンプ位置生成。
何を: side 個の頂点を円周配置し、各辺を Line として点列化する。
なぜ: 星形（fill_inner）からも頂点飛ばし付きで再利用するため。
"""

from __future__ import annotations

from typing import Sequence

from danmaku.core.generators.line import line_points
from danmaku.core.generators.placement import ring
from danmaku.core.point import Point
from danmaku.core.shape_registry import shape_generator
from danmaku.core.shapes import Orientation, Polygon


def polygon_points(
    center: Point,
    side: int,
    counts: Sequence[int],
    radius: float,
    orientation: Orientation,
    *,
    is_star: bool = False,
) -> list[Point]:
    """多角形（または星形多角形）の辺上の点列を返す。

    Parameters
    ----------
    center : Point
        中心。
    side : int
        頂点数。
    counts : Sequence[int]
        辺ごとの個数（長さ side、解決済み）。各辺には ``count − 2`` 個の点を置く。
    radius : float
        中心から頂点までの距離。
    orientation : Orientation
        法線と開始角。
    is_star : bool, optional
        True なら頂点 i から頂点 i+2 へ結ぶ。

    Returns
    -------
    list[Point]
        辺 0 から順に連結した点列。各辺の終点は含めないため、共有頂点は 1 度だけ現れる。
    """
    basis = orientation.normal_vector.unit_vectors()
    vertices = ring(center, basis, float(radius), side, orientation.angle)
    stride = 1 + int(is_star)

    out: list[Point] = []
    for i in range(side):
        out.extend(line_points(vertices[i], vertices[(i + stride) % side], counts[i] - 2))
    return out


@shape_generator(Polygon)
def polygon(shape: Polygon) -> list[Point]:
    """Polygon 記述子のスタンプ位置を返す。

    Raises
    ------
    ShapeConfigError
        num_per_side の長さが side と一致しない場合。
    """
    counts = shape.num_per_side.resolve(shape.side)
    return polygon_points(
        shape.center_pos,
        shape.side,
        counts,
        shape.radius,
        shape.orientation,
        is_star=shape.is_star,
    )
