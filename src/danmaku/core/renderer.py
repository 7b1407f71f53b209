"""
どこで: `src/danmaku/core/renderer.py`。
何を: スプライト・スタンプ配置と、エンジンが呼び出す Renderer プロトコルを定義する。
なぜ: core を描画 API から切り離し、headless（記録/エクスポート）と interactive で同じ経路を使うため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from danmaku.core.point import Point


@dataclass(frozen=True, slots=True)
class Sprite:
    """読み込み済みのスプライト画像ハンドル。

    image は描画バックエンド固有のオブジェクト（pyglet の画像など）。core は参照しない。
    """

    width: int
    height: int
    image: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if int(self.width) <= 0 or int(self.height) <= 0:
            raise ValueError(
                f"Sprite の寸法は正の値である必要がある: got=({self.width}, {self.height})"
            )

    @property
    def offset_x(self) -> float:
        return self.width / 2.0

    @property
    def offset_y(self) -> float:
        return self.height / 2.0


@dataclass(frozen=True, slots=True)
class Stamp:
    """1 回分のスプライト配置（中心と描画矩形）。"""

    x: float
    y: float
    z: float
    width: float
    height: float

    @classmethod
    def from_point(cls, sprite: Sprite, point: Point, scale: float) -> "Stamp":
        """point を中心に scale 倍したスプライトの配置を返す。"""
        s = float(scale)
        return cls(
            x=point.x,
            y=point.y,
            z=point.z,
            width=sprite.width * s,
            height=sprite.height * s,
        )

    @property
    def left(self) -> float:
        return self.x - self.width / 2.0

    @property
    def top(self) -> float:
        return self.y - self.height / 2.0


class Renderer(Protocol):
    """スタンプ位置ごとに 1 回呼ばれる描画先。"""

    def stamp_at(self, sprite: Sprite, point: Point, scale: float) -> None:
        """sprite を point 中心・scale 倍で描く。"""
        ...


class RecordingRenderer:
    """スタンプを記録するだけの headless Renderer。"""

    def __init__(self) -> None:
        self.stamps: list[Stamp] = []

    def stamp_at(self, sprite: Sprite, point: Point, scale: float) -> None:
        self.stamps.append(Stamp.from_point(sprite, point, scale))

    def clear(self) -> None:
        """記録済みスタンプを破棄する。"""
        self.stamps.clear()


__all__ = ["RecordingRenderer", "Renderer", "Sprite", "Stamp"]
