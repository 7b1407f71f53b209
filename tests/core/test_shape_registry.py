"""core.shape_registry のディスパッチをテスト。"""

from __future__ import annotations

import pytest

import danmaku.core.generators  # noqa: F401
from danmaku.core.point import Point
from danmaku.core.shape_registry import ShapeRegistry, generate, shape_registry
from danmaku.core.shapes import SHAPE_TYPES


def test_all_builtin_shapes_are_registered() -> None:
    assert shape_registry.missing(SHAPE_TYPES) == ()
    for shape_type in SHAPE_TYPES:
        assert shape_type in shape_registry


def test_generate_rejects_unregistered_type() -> None:
    class Unknown:
        pass

    with pytest.raises(TypeError, match="未登録"):
        generate(Unknown())


def test_registry_overwrite_guard() -> None:
    registry = ShapeRegistry()

    class Dummy:
        pass

    def gen(shape: Dummy) -> list[Point]:
        return [Point(1, 2, 3)]

    registry._register(Dummy, gen)
    assert registry.get(Dummy) is gen
    with pytest.raises(ValueError):
        registry._register(Dummy, gen, overwrite=False)
    assert dict(registry.items()) == {Dummy: gen}
