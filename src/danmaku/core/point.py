"""
どこで: `src/danmaku/core/point.py`。
何を: 描画位置を表す 3D 点と、平行移動・基底上の極座標オフセット・線形分割を定義する。
なぜ: 図形生成器がスタンプ位置を同じ座標系（y 下向きのスクリーン座標）で組み立てるため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from danmaku.core.vector import Basis, Vector


@dataclass(slots=True)
class Point:
    """描画面と同じ座標系の 3D 点。

    `translate` だけが自身を書き換え、それ以外の演算は新しい Point を返す。
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> None:
        """(dx, dy, dz) だけ自身をその場で平行移動する。"""
        self.x += dx
        self.y += dy
        self.z += dz

    def translated_by(self, vector: Vector) -> "Point":
        """vector だけ平行移動した点を返す。"""
        return Point(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def translated_by_basis(self, basis: Basis, radius: float, angle: float) -> "Point":
        """基底平面上で半径 radius・角度 angle [rad] だけ離れた点を返す。

        Parameters
        ----------
        basis : tuple[Vector, Vector]
            `Vector.unit_vectors()` が返す (u0, u1)。
        radius : float
            中心からの距離。
        angle : float
            角度位置 [rad]。

        Notes
        -----
        x/y は減算、z は加算する。y 下向き・z 手前向きのスクリーン規約で
        円の向きを揃えるための符号であり、変更しない。
        """
        u0, u1 = basis
        c = math.cos(angle)
        s = math.sin(angle)
        return Point(
            self.x - radius * (u0.x * c + u1.x * s),
            self.y - radius * (u0.y * c + u1.y * s),
            self.z + radius * (u0.z * c + u1.z * s),
        )

    def subdivide(self, other: "Point", index: int, total: int) -> "Point":
        """self から other へ index/total の位置にある点を返す。

        index == 0 のときは total に関わらず self の複製を返す。
        それ以外で total == 0 は未定義（ZeroDivisionError）。
        """
        if index == 0:
            return Point(self.x, self.y, self.z)
        return Point(
            self.x + (other.x - self.x) / total * index,
            self.y + (other.y - self.y) / total * index,
            self.z + (other.z - self.z) / total * index,
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


__all__ = ["Point"]
