# src/danmaku/core/shape_registry.py
# 図形記述子の型から点列生成関数を引くレジストリ。
# 記述子の型ごとに生成器を 1 つだけ対応付ける閉じたディスパッチを提供する。

from __future__ import annotations

from collections.abc import ItemsView
from typing import Any, Callable, Iterable

from danmaku.core.point import Point

ShapeGenerator = Callable[[Any], list[Point]]


class ShapeRegistry:
    """記述子の型と生成関数を対応付けるレジストリ。

    Notes
    -----
    登録された関数のシグネチャは ``func(shape) -> list[Point]`` を想定する。
    生成関数は記述子を読むだけで変更しない（姿勢の更新は Spin が行う）。
    """

    def __init__(self) -> None:
        """空のレジストリを初期化する。"""
        self._items: dict[type, ShapeGenerator] = {}

    def _register(
        self,
        shape_type: type,
        func: ShapeGenerator,
        *,
        overwrite: bool = True,
    ) -> None:
        """生成器を登録する（内部用）。

        Notes
        -----
        登録は `@shape_generator` デコレータ経由に統一する。
        """
        if not overwrite and shape_type in self._items:
            raise ValueError(f"shape '{shape_type.__name__}' は既に登録されている")
        self._items[shape_type] = func

    def get(self, shape_type: type) -> ShapeGenerator:
        """記述子の型に対応する生成器を取得する。

        Raises
        ------
        TypeError
            未登録の型が指定された場合。
        """
        try:
            return self._items[shape_type]
        except KeyError:
            raise TypeError(f"未登録の shape 型: {shape_type!r}") from None

    def __contains__(self, shape_type: object) -> bool:
        return shape_type in self._items

    def items(self) -> ItemsView[type, ShapeGenerator]:
        """登録済みエントリの (type, func) ビューを返す。"""
        return self._items.items()

    def missing(self, shape_types: Iterable[type]) -> tuple[type, ...]:
        """shape_types のうち未登録のものを返す。"""
        return tuple(t for t in shape_types if t not in self._items)


shape_registry = ShapeRegistry()
"""グローバルな shape レジストリインスタンス。"""


def shape_generator(shape_type: type, *, overwrite: bool = True):
    """グローバル shape レジストリ用デコレータ。

    Examples
    --------
    @shape_generator(Circle)
    def circle(shape: Circle) -> list[Point]:
        ...
    """

    def decorator(f: ShapeGenerator) -> ShapeGenerator:
        shape_registry._register(shape_type, f, overwrite=overwrite)
        return f

    return decorator


def generate(shape: Any) -> list[Point]:
    """記述子の現在の姿勢からスタンプ位置列を生成する。

    Parameters
    ----------
    shape : Shape
        図形記述子。

    Returns
    -------
    list[Point]
        描画順のスタンプ位置。毎回新しく計算し、キャッシュしない。
    """
    return shape_registry.get(type(shape))(shape)


__all__ = ["ShapeGenerator", "ShapeRegistry", "generate", "shape_generator", "shape_registry"]
