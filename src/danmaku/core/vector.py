"""
どこで: `src/danmaku/core/vector.py`。
何を: 3D ベクトル（正規化・外積・軸角回転・基底生成）を定義する。
なぜ: 図形の法線・回転・基底計算をすべて同じ不変値型で扱うため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True, slots=True)
class Vector:
    """不変の 3D ベクトル。

    Notes
    -----
    magnitude は保持せず毎回成分から計算するため、成分と常に整合する。
    すべての演算は新しい Vector を返す。
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_sequence(cls, value: Sequence[float]) -> "Vector":
        """長さ 3 のシーケンスから Vector を生成する。"""
        try:
            x, y, z = value
        except Exception as exc:
            raise ValueError(
                f"Vector は長さ 3 のシーケンスから生成する必要がある: got={value!r}"
            ) from exc
        return cls(float(x), float(y), float(z))

    @property
    def magnitude(self) -> float:
        """ベクトル長 sqrt(x²+y²+z²) を返す。"""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def is_zero(self) -> bool:
        """全成分が厳密に 0 なら True を返す。"""
        return self.x == 0 and self.y == 0 and self.z == 0

    def normalized(self) -> "Vector":
        """長さ 1 に正規化したベクトルを返す（ゼロベクトルはそのまま返す）。"""
        if self.is_zero():
            return self
        mag = self.magnitude
        return Vector(self.x / mag, self.y / mag, self.z / mag)

    def scaled(self, k: float) -> "Vector":
        """全成分を k 倍したベクトルを返す。"""
        k_f = float(k)
        return Vector(self.x * k_f, self.y * k_f, self.z * k_f)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        """外積 self × other を返す。"""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def rotate(self, axis: "Vector", angle: float) -> "Vector":
        """axis まわりに angle [deg] 回転したベクトルを返す。

        Parameters
        ----------
        axis : Vector
            回転軸。使用前に正規化する（ゼロ軸はゼロのまま使われ、回転行列は cosθ·I になる）。
        angle : float
            回転角 [deg]。

        Returns
        -------
        Vector
            行ベクトル規約 ``self · R`` による回転結果。

        Raises
        ------
        TypeError
            axis が Vector でない場合。
        ValueError
            self がゼロベクトルの場合（回転が定義されない）。
        """
        if not isinstance(axis, Vector):
            raise TypeError(f"回転軸は Vector である必要がある: got={type(axis)!r}")
        if self.is_zero():
            raise ValueError("ゼロベクトルは回転できない")

        unit = axis.normalized()
        x, y, z = unit.x, unit.y, unit.z
        theta = math.radians(float(angle))
        c = math.cos(theta)
        s = math.sin(theta)
        t = 1.0 - c

        # Rodrigues の回転行列。
        rot = np.array(
            [
                [c + x * x * t, x * y * t - z * s, x * z * t + y * s],
                [y * x * t + z * s, c + y * y * t, y * z * t - x * s],
                [z * x * t - y * s, z * y * t + x * s, c + z * z * t],
            ],
            dtype=np.float64,
        )
        # row-vector 規約: out[i] = Σ_j v[j] * R[j][i]
        out = self.as_array() @ rot
        return Vector(float(out[0]), float(out[1]), float(out[2]))

    def unit_vectors(self) -> tuple["Vector", "Vector"]:
        """self に垂直で互いに直交する 2 本の単位ベクトル (u0, u1) を返す。

        Notes
        -----
        u0 = self × (1,0,0)。self が X 軸と平行でゼロになる場合は self × (0,1,0)。
        u1 = normalize(self × u0)。この順序と向きが角度配置の基準フレームになる。
        """
        u0 = self.cross(Vector(1.0, 0.0, 0.0))
        if u0.is_zero():
            u0 = self.cross(Vector(0.0, 1.0, 0.0))
        u1 = self.cross(u0).normalized()
        return u0.normalized(), u1

    def as_array(self) -> np.ndarray:
        """float64 の shape (3,) 配列を返す。"""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


Basis = tuple[Vector, Vector]

UNIT_Z = Vector(0.0, 0.0, 1.0)
"""図形法線の既定値。"""


__all__ = ["Basis", "UNIT_Z", "Vector"]
