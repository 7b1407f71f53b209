"""
どこで: `src/danmaku/core/spin.py`。
何を: 図形記述子の姿勢状態（法線・角度・辺ベクトル）をフレームごとに進める。
なぜ: 点列生成を姿勢の純関数に保ち、フレーム間で持ち越す状態の更新をここに集約するため。
"""

from __future__ import annotations

from typing import Any, TypeVar

from danmaku.core.shapes import AxisSpin, EdgeFrame, Orientation, ScalarSpin, SpinMode
from danmaku.core.vector import Vector

OrientationT = TypeVar("OrientationT", Orientation, EdgeFrame)


def rotate_by_axes(vector: Vector, rotation: Vector) -> Vector:
    """X → Y → Z の順に、各成分の絶対値 [deg] だけ回転した vector を返す。

    回転軸は ``(rx,0,0)`` / ``(0,ry,0)`` / ``(0,0,rz)`` とし、符号を軸の向きに持たせる。
    成分が 0 の軸はゼロ軸・0° となり恒等変換になる。

    Raises
    ------
    ValueError
        vector がゼロベクトルの場合。
    """
    rx, ry, rz = rotation.x, rotation.y, rotation.z
    return (
        vector.rotate(Vector(rx, 0.0, 0.0), abs(rx))
        .rotate(Vector(0.0, ry, 0.0), abs(ry))
        .rotate(Vector(0.0, 0.0, rz), abs(rz))
    )


def _wrap_angle(angle: float) -> float:
    return angle % 360.0


def advance(orientation: OrientationT, spin: SpinMode) -> OrientationT:
    """spin を 1 フレーム分適用した新しい姿勢を返す。

    Parameters
    ----------
    orientation : Orientation or EdgeFrame
        現在の姿勢。
    spin : ScalarSpin or AxisSpin
        1 フレームあたりの回転量。

    Returns
    -------
    Orientation or EdgeFrame
        更新後の姿勢（入力と同じ型）。

    Notes
    -----
    - ScalarSpin(d) × Orientation: ``angle = (angle + d) mod 360``。
    - AxisSpin(s) × Orientation: 法線を X/Y/Z 順に回し、``angle = (angle + s.z) mod 360``。
    - AxisSpin(s) × EdgeFrame: 3 本の辺ベクトルをそれぞれ同じ順に回す。
    - ScalarSpin(d) × EdgeFrame: 変更しない（同じ EdgeFrame を返す）。
    """
    if isinstance(orientation, EdgeFrame):
        # 平行六面体には angle が無いため、ScalarSpin では何も変えない。
        if isinstance(spin, ScalarSpin):
            return orientation
        v0, v1, v2 = (rotate_by_axes(v, spin.rotation) for v in orientation.vectors)
        return EdgeFrame(vectors=(v0, v1, v2))  # type: ignore[return-value]

    if isinstance(spin, ScalarSpin):
        return Orientation(  # type: ignore[return-value]
            normal_vector=orientation.normal_vector,
            angle=_wrap_angle(orientation.angle + float(spin.degrees)),
        )
    if isinstance(spin, AxisSpin):
        rotation = spin.rotation
        return Orientation(  # type: ignore[return-value]
            normal_vector=rotate_by_axes(orientation.normal_vector, rotation),
            angle=_wrap_angle(orientation.angle + rotation.z),
        )
    raise TypeError(f"未対応の spin: {spin!r}")


def spin_shape(shape: Any) -> None:
    """shape.spin を 1 フレーム分適用し、shape.orientation をその場で置き換える。"""
    shape.orientation = advance(shape.orientation, shape.spin)


__all__ = ["advance", "rotate_by_axes", "spin_shape"]
