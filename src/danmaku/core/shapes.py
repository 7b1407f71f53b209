"""
どこで: `src/danmaku/core/shapes.py`。
何を: 5 種類の図形記述子（Line/Circle/Polygon/Star/Parallelepiped）と、
      spin・辺ごとの個数・姿勢状態を表すタグ付きバリアントを定義する。
なぜ: 生の値の型判定を構築時の 1 回に閉じ込め、生成器と Spin が確定済みの型だけを扱えるようにするため。
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Any, ClassVar, Sequence, TypeAlias

from danmaku.core.point import Point
from danmaku.core.vector import UNIT_Z, Vector


class ShapeConfigError(ValueError):
    """図形記述子のパラメータが不正な場合の設定エラー。"""


# --- spin ---------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ScalarSpin:
    """2D spin。毎フレーム angle に degrees [deg] を加える。"""

    degrees: float = 0.0


@dataclass(frozen=True, slots=True)
class AxisSpin:
    """3D spin。各成分の絶対値 [deg] だけ、その符号方向の軸まわりに回す。"""

    rotation: Vector


SpinMode: TypeAlias = ScalarSpin | AxisSpin


def coerce_spin(value: Any) -> SpinMode:
    """数値・Vector・長さ 3 のシーケンスを SpinMode に変換する。"""
    if isinstance(value, (ScalarSpin, AxisSpin)):
        return value
    if isinstance(value, Vector):
        return AxisSpin(value)
    if isinstance(value, bool):
        raise ShapeConfigError(f"spin に bool は使えない: got={value!r}")
    if isinstance(value, (int, float)):
        return ScalarSpin(float(value))
    if isinstance(value, Sequence) and not isinstance(value, str):
        try:
            return AxisSpin(Vector.from_sequence(value))
        except ValueError as exc:
            raise ShapeConfigError(f"spin の値が不正: got={value!r}") from exc
    raise ShapeConfigError(f"spin は数値か Vector である必要がある: got={value!r}")


# --- 辺ごとの個数 -------------------------------------------------------


def _as_count(value: Any, *, key: str) -> int:
    if isinstance(value, bool):
        raise ShapeConfigError(f"{key} に bool は使えない: got={value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ShapeConfigError(f"{key} は整数である必要がある: got={value!r}")


@dataclass(frozen=True, slots=True)
class UniformCount:
    """全辺に同じ個数を使う。"""

    count: int

    def resolve(self, side: int) -> tuple[int, ...]:
        return (self.count,) * side


@dataclass(frozen=True, slots=True)
class PerEdgeCount:
    """辺ごとに個数を指定する。長さは side と一致する必要がある。"""

    counts: tuple[int, ...]

    def resolve(self, side: int) -> tuple[int, ...]:
        if len(self.counts) != side:
            raise ShapeConfigError(
                "num_per_side の長さは side と一致する必要がある: "
                f"side={side}, got={len(self.counts)}"
            )
        return self.counts


EdgeCounts: TypeAlias = UniformCount | PerEdgeCount


def coerce_edge_counts(value: Any) -> EdgeCounts:
    """整数または整数列を EdgeCounts に変換する。"""
    if isinstance(value, (UniformCount, PerEdgeCount)):
        return value
    if isinstance(value, Sequence) and not isinstance(value, str):
        return PerEdgeCount(tuple(_as_count(v, key="num_per_side") for v in value))
    return UniformCount(_as_count(value, key="num_per_side"))


def _coerce_point(value: Any, *, key: str) -> Point:
    if isinstance(value, Point):
        return value
    try:
        coords = [float(v) for v in value]
    except Exception as exc:
        raise ShapeConfigError(f"{key} は Point か座標列である必要がある: got={value!r}") from exc
    if len(coords) == 2:
        coords.append(0.0)
    if len(coords) != 3:
        raise ShapeConfigError(f"{key} は 2 または 3 要素である必要がある: got={value!r}")
    return Point(*coords)


def _coerce_vector(value: Any, *, key: str) -> Vector:
    if isinstance(value, Vector):
        return value
    try:
        return Vector.from_sequence(value)
    except ValueError as exc:
        raise ShapeConfigError(f"{key} は Vector である必要がある: got={value!r}") from exc


def _check_side(side: Any) -> int:
    side_i = _as_count(side, key="side")
    if side_i < 1:
        raise ShapeConfigError(f"side は 1 以上である必要がある: got={side_i}")
    return side_i


# --- 姿勢状態 -----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Orientation:
    """法線ベクトルと面内回転角 [deg] を持つ図形の姿勢。"""

    normal_vector: Vector = UNIT_Z
    angle: float = 0.0


@dataclass(frozen=True, slots=True)
class EdgeFrame:
    """平行六面体の 3 本の辺ベクトル（中心から各面への半辺）。"""

    vectors: tuple[Vector, Vector, Vector]


def _forward_orientation(cls: type) -> type:
    """構築引数 angle / normal_vector を、orientation を読む読み取り専用プロパティに置き換える。

    InitVar の既定値はクラス属性として残り、構築後は古い値を返してしまう。
    生成済みの ``__init__`` は既定値を保持しているため、置き換えても構築には影響しない。
    """
    cls.angle = property(  # type: ignore[attr-defined]
        lambda self: self.orientation.angle,
        doc="現在の面内回転角 [deg]（orientation.angle）。",
    )
    cls.normal_vector = property(  # type: ignore[attr-defined]
        lambda self: self.orientation.normal_vector,
        doc="現在の法線ベクトル（orientation.normal_vector）。",
    )
    return cls


# --- 記述子 -------------------------------------------------------------


@dataclass(slots=True)
class Line:
    """start_pos から end_pos へ number 個のスタンプを並べる。"""

    kind: ClassVar[str] = "line"

    start_pos: Point
    end_pos: Point
    number: int
    include_end: bool = False
    scale: float = 1.0
    spin: SpinMode = ScalarSpin()
    orientation: Orientation = field(init=False, default_factory=Orientation)

    def __post_init__(self) -> None:
        self.start_pos = _coerce_point(self.start_pos, key="start_pos")
        self.end_pos = _coerce_point(self.end_pos, key="end_pos")
        self.number = _as_count(self.number, key="number")
        self.spin = coerce_spin(self.spin)


@_forward_orientation
@dataclass(slots=True)
class Circle:
    """center_pos を中心に number 個のスタンプを等角度で並べる。"""

    kind: ClassVar[str] = "circle"

    center_pos: Point
    number: int
    radius: float
    angle: InitVar[float] = 0.0
    normal_vector: InitVar[Vector] = UNIT_Z
    scale: float = 1.0
    spin: SpinMode = ScalarSpin()
    orientation: Orientation = field(init=False)

    def __post_init__(self, angle: float, normal_vector: Vector) -> None:
        self.center_pos = _coerce_point(self.center_pos, key="center_pos")
        self.number = _as_count(self.number, key="number")
        self.spin = coerce_spin(self.spin)
        self.orientation = Orientation(
            normal_vector=_coerce_vector(normal_vector, key="normal_vector"),
            angle=float(angle),
        )


@_forward_orientation
@dataclass(slots=True)
class Polygon:
    """正 side 角形の辺上にスタンプを並べる。is_star は頂点を 1 つ飛ばして結ぶ。"""

    kind: ClassVar[str] = "polygon"

    center_pos: Point
    side: int
    num_per_side: EdgeCounts
    radius: float
    angle: InitVar[float] = 0.0
    normal_vector: InitVar[Vector] = UNIT_Z
    is_star: bool = False
    scale: float = 1.0
    spin: SpinMode = ScalarSpin()
    orientation: Orientation = field(init=False)

    def __post_init__(self, angle: float, normal_vector: Vector) -> None:
        self.center_pos = _coerce_point(self.center_pos, key="center_pos")
        self.side = _check_side(self.side)
        self.num_per_side = coerce_edge_counts(self.num_per_side)
        self.num_per_side.resolve(self.side)
        self.spin = coerce_spin(self.spin)
        self.orientation = Orientation(
            normal_vector=_coerce_vector(normal_vector, key="normal_vector"),
            angle=float(angle),
        )


@_forward_orientation
@dataclass(slots=True)
class Star:
    """side 個の頂点と谷を交互に結ぶ星形。fill_inner なら星形多角形として描く。"""

    kind: ClassVar[str] = "star"

    center_pos: Point
    side: int
    num_per_side: int
    radius: float
    angle: InitVar[float] = 0.0
    normal_vector: InitVar[Vector] = UNIT_Z
    concave: float = 0.5
    skew: float = 0.0
    fill_inner: bool = False
    scale: float = 1.0
    spin: SpinMode = ScalarSpin()
    orientation: Orientation = field(init=False)

    def __post_init__(self, angle: float, normal_vector: Vector) -> None:
        self.center_pos = _coerce_point(self.center_pos, key="center_pos")
        self.side = _check_side(self.side)
        self.num_per_side = _as_count(self.num_per_side, key="num_per_side")
        self.spin = coerce_spin(self.spin)
        self.orientation = Orientation(
            normal_vector=_coerce_vector(normal_vector, key="normal_vector"),
            angle=float(angle),
        )


@dataclass(slots=True)
class Parallelepiped:
    """中心と 3 本の辺ベクトルで決まる平行六面体の 12 辺にスタンプを並べる。"""

    kind: ClassVar[str] = "parallelepiped"

    center_pos: Point
    number: tuple[int, int, int]
    vectors: InitVar[Sequence[Vector]]
    scale: float = 1.0
    spin: SpinMode = ScalarSpin()
    orientation: EdgeFrame = field(init=False)

    def __post_init__(self, vectors: Sequence[Vector]) -> None:
        self.center_pos = _coerce_point(self.center_pos, key="center_pos")
        number = self.number
        if isinstance(number, Sequence) and not isinstance(number, str):
            counts = tuple(_as_count(v, key="number") for v in number)
            if len(counts) != 3:
                raise ShapeConfigError(f"number は 3 要素である必要がある: got={number!r}")
        else:
            counts = (_as_count(number, key="number"),) * 3
        self.number = counts  # type: ignore[assignment]
        vecs = tuple(_coerce_vector(v, key="vectors") for v in vectors)
        if len(vecs) != 3:
            raise ShapeConfigError(f"vectors は 3 本である必要がある: got={len(vecs)}")
        self.spin = coerce_spin(self.spin)
        self.orientation = EdgeFrame(vectors=vecs)  # type: ignore[arg-type]


Shape: TypeAlias = Line | Circle | Polygon | Star | Parallelepiped

SHAPE_TYPES: tuple[type, ...] = (Line, Circle, Polygon, Star, Parallelepiped)


__all__ = [
    "AxisSpin",
    "Circle",
    "EdgeCounts",
    "EdgeFrame",
    "Line",
    "Orientation",
    "Parallelepiped",
    "PerEdgeCount",
    "Polygon",
    "SHAPE_TYPES",
    "ScalarSpin",
    "Shape",
    "ShapeConfigError",
    "SpinMode",
    "Star",
    "UniformCount",
    "coerce_edge_counts",
    "coerce_spin",
]
