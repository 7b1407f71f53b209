"""parallelepiped 生成器の頂点と 12 辺の配置をテスト。"""

from __future__ import annotations

import itertools

import numpy as np
import pytest

from danmaku.core.generators.parallelepiped import CORNER_SIGNS, corner_offsets
from danmaku.core.point import Point
from danmaku.core.shape_registry import generate
from danmaku.core.shapes import EdgeFrame, Parallelepiped, ShapeConfigError
from danmaku.core.vector import Vector

_UNIT_AXES = (Vector(1, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))


def test_unit_axes_produce_every_sign_corner_exactly_once() -> None:
    corners = [v.as_array() for v in corner_offsets(_UNIT_AXES)]
    got = sorted(tuple(int(c) for c in corner) for corner in corners)
    expected = sorted(itertools.product((-1, 1), repeat=3))
    assert got == expected
    assert len(set(CORNER_SIGNS)) == 8


def test_three_per_edge_places_only_edge_start_corners() -> None:
    points = generate(Parallelepiped(Point(0, 0, 0), 3, _UNIT_AXES))
    assert len(points) == 12
    distinct = {tuple(round(c) for c in p.as_tuple()) for p in points}
    assert distinct == set(itertools.product((-1, 1), repeat=3))


def test_edge_order_is_square_edges_then_connector() -> None:
    points = generate(Parallelepiped(Point(0, 0, 0), 3, _UNIT_AXES))
    # i=0: 上面の辺 (+++ → -++)、下面の辺 (++- → -+-)、接続辺 (+++ → ++-)
    assert points[0].as_tuple() == pytest.approx((1.0, 1.0, 1.0))
    assert points[1].as_tuple() == pytest.approx((1.0, 1.0, -1.0))
    assert points[2].as_tuple() == pytest.approx((1.0, 1.0, 1.0))
    assert points[3].as_tuple() == pytest.approx((-1.0, 1.0, 1.0))


def test_per_axis_counts_follow_parity_and_connector() -> None:
    n0, n1, n2 = 6, 10, 4
    points = generate(Parallelepiped(Point(0, 0, 0), (n0, n1, n2), _UNIT_AXES))
    expected = 2 * (2 * (n0 - 2) + 2 * (n1 - 2)) + 4 * (n2 - 2)
    assert len(points) == expected


def test_points_are_offset_by_center() -> None:
    center = Point(200, 300, 10)
    at_origin = generate(Parallelepiped(Point(0, 0, 0), 5, _UNIT_AXES))
    moved = generate(Parallelepiped(center, 5, _UNIT_AXES))
    delta = np.array([p.as_tuple() for p in moved]) - np.array([p.as_tuple() for p in at_origin])
    np.testing.assert_allclose(delta, np.tile(center.as_tuple(), (len(moved), 1)))


def test_orientation_holds_edge_vectors() -> None:
    shape = Parallelepiped(Point(0, 0, 0), (10, 10, 10), [(70, 0, 0), (0, 70, 0), (0, 0, 70)])
    assert isinstance(shape.orientation, EdgeFrame)
    assert shape.orientation.vectors[0] == Vector(70.0, 0.0, 0.0)
    assert shape.number == (10, 10, 10)


@pytest.mark.parametrize(
    "number, vectors",
    [
        ((10, 10), _UNIT_AXES),
        ((10, 10, "a"), _UNIT_AXES),
        (10, _UNIT_AXES[:2]),
    ],
)
def test_malformed_parallelepiped_raises(number, vectors) -> None:
    with pytest.raises(ShapeConfigError):
        Parallelepiped(Point(0, 0, 0), number, vectors)
