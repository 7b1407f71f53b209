"""
どこで: `src/danmaku/core/generators/parallelepiped.py`。平行六面体の辺上のスタンプ位置生成。
何を: 3 本の辺ベクトルから 8 頂点を求め、12 辺を Line として点列化する。
なぜ: 辺ベクトルを Spin で回し、立体が回転して見えるパターンを作るため。
"""

from __future__ import annotations

from danmaku.core.generators.line import line_points
from danmaku.core.point import Point
from danmaku.core.shape_registry import shape_generator
from danmaku.core.shapes import Parallelepiped
from danmaku.core.vector import Vector

# 頂点 0..3 が 1 つ目の四角形、4..7 が 2 つ目の四角形。±1 の全組み合わせを 1 回ずつ含む。
CORNER_SIGNS: tuple[tuple[int, int, int], ...] = (
    (1, 1, 1),
    (-1, 1, 1),
    (-1, -1, 1),
    (1, -1, 1),
    (1, 1, -1),
    (-1, 1, -1),
    (-1, -1, -1),
    (1, -1, -1),
)


def corner_offsets(vectors: tuple[Vector, Vector, Vector]) -> list[Vector]:
    """中心からの 8 頂点オフセット ``Σ sign_k·v_k`` を CORNER_SIGNS 順に返す。"""
    v0, v1, v2 = vectors
    out: list[Vector] = []
    for s0, s1, s2 in CORNER_SIGNS:
        out.append(
            Vector(
                v0.x * s0 + v1.x * s1 + v2.x * s2,
                v0.y * s0 + v1.y * s1 + v2.y * s2,
                v0.z * s0 + v1.z * s1 + v2.z * s2,
            )
        )
    return out


@shape_generator(Parallelepiped)
def parallelepiped(shape: Parallelepiped) -> list[Point]:
    """Parallelepiped 記述子のスタンプ位置を返す。

    各 i (0..3) について、2 つの四角形の辺 (j=0,1) と四角形間の接続辺の順に並べる。
    四角形の辺は i が偶数なら number[0]、奇数なら number[1]、接続辺は number[2] を使い、
    それぞれ ``count − 2`` 個の点を置く。
    """
    center = shape.center_pos
    corners = [center.translated_by(v) for v in corner_offsets(shape.orientation.vectors)]
    n0, n1, n2 = shape.number

    out: list[Point] = []
    for i in range(4):
        count = n0 if i % 2 == 0 else n1
        for j in range(2):
            start = corners[i + 4 * j]
            end = corners[(i + 1) % 4 + 4 * j]
            out.extend(line_points(start, end, count - 2))
        out.extend(line_points(corners[i], corners[i + 4], n2 - 2))
    return out
