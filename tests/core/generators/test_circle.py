"""circle 生成器の角度配置をテスト。"""

from __future__ import annotations

import math

import numpy as np

from danmaku.core.point import Point
from danmaku.core.shape_registry import generate
from danmaku.core.shapes import Circle
from danmaku.core.vector import Vector


def _coords(points: list[Point]) -> np.ndarray:
    return np.array([p.as_tuple() for p in points], dtype=np.float64)


def test_four_point_circle_is_spaced_by_quarter_turns() -> None:
    points = generate(Circle(Point(0, 0, 0), 4, 10))
    expected = [
        [-10.0, 0.0, 0.0],
        [0.0, -10.0, 0.0],
        [10.0, 0.0, 0.0],
        [0.0, 10.0, 0.0],
    ]
    np.testing.assert_allclose(_coords(points), expected, atol=1e-9)


def test_circle_is_centered_and_has_radius() -> None:
    center = Point(200, 300, 5)
    points = generate(Circle(center, 20, 50, normal_vector=Vector(1, 0.5, 0.2)))
    assert len(points) == 20
    offsets = _coords(points) - np.array(center.as_tuple())
    np.testing.assert_allclose(np.linalg.norm(offsets, axis=1), 50.0)
    np.testing.assert_allclose(offsets.mean(axis=0), 0.0, atol=1e-9)


def test_circle_points_lie_in_plane_orthogonal_to_normal() -> None:
    normal = Vector(0, 1, 0.2)
    points = generate(Circle(Point(0, 0, 0), 12, 30, normal_vector=normal))
    coords = _coords(points)
    n = normal.normalized().as_array()
    # translated_by_basis は x/y を減算、z を加算するため平面の法線も (nx, ny, -nz) になる
    mirrored = np.array([n[0], n[1], -n[2]])
    np.testing.assert_allclose(coords @ mirrored, 0.0, atol=1e-9)


def test_circle_angle_rotates_starting_position() -> None:
    base = generate(Circle(Point(0, 0, 0), 4, 10))
    shifted = generate(Circle(Point(0, 0, 0), 4, 10, angle=90))
    np.testing.assert_allclose(_coords(shifted)[0], _coords(base)[1], atol=1e-9)


def test_circle_with_zero_points_is_empty() -> None:
    assert generate(Circle(Point(0, 0, 0), 0, 10)) == []


def test_circle_generation_does_not_mutate_descriptor() -> None:
    shape = Circle(Point(1, 2, 3), 8, 10, angle=15)
    before = shape.orientation
    generate(shape)
    generate(shape)
    assert shape.orientation == before
    assert shape.center_pos == Point(1, 2, 3)
    assert math.isclose(before.angle, 15.0)
