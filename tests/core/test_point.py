"""core.point の Point 演算をテスト。"""

from __future__ import annotations

import math

import pytest

from danmaku.core.point import Point
from danmaku.core.vector import UNIT_Z, Vector


def test_translate_mutates_in_place() -> None:
    p = Point(1.0, 2.0, 3.0)
    p.translate(1.0, -2.0, 0.5)
    assert p.as_tuple() == (2.0, 0.0, 3.5)


def test_translated_by_returns_new_point() -> None:
    p = Point(1.0, 2.0, 3.0)
    q = p.translated_by(Vector(1.0, 1.0, 1.0))
    assert q == Point(2.0, 3.0, 4.0)
    assert p == Point(1.0, 2.0, 3.0)


def test_translated_by_basis_subtracts_xy_and_adds_z() -> None:
    basis = (Vector(1.0, 0.0, 1.0), Vector(0.0, 1.0, 0.0))
    got = Point(10.0, 10.0, 10.0).translated_by_basis(basis, 2.0, 0.0)
    assert got.x == pytest.approx(8.0)
    assert got.y == pytest.approx(10.0)
    assert got.z == pytest.approx(12.0)


def test_translated_by_basis_quarter_turn_uses_second_unit_vector() -> None:
    basis = UNIT_Z.unit_vectors()
    got = Point(0.0, 0.0, 0.0).translated_by_basis(basis, 5.0, math.pi / 2)
    # u1 = (-1, 0, 0) なので x は +5 になる
    assert got.x == pytest.approx(5.0)
    assert got.y == pytest.approx(0.0, abs=1e-12)
    assert got.z == pytest.approx(0.0, abs=1e-12)


def test_subdivide_interpolates_linearly() -> None:
    a = Point(0.0, 0.0, 0.0)
    b = Point(6.0, -12.0, 3.0)
    mid = a.subdivide(b, 1, 2)
    assert mid.as_tuple() == pytest.approx((3.0, -6.0, 1.5))
    assert a.subdivide(b, 3, 3).as_tuple() == pytest.approx(b.as_tuple())


def test_subdivide_index_zero_is_copy_even_for_zero_total() -> None:
    a = Point(1.0, 2.0, 3.0)
    got = a.subdivide(Point(9.0, 9.0, 9.0), 0, 0)
    assert got == a
    assert got is not a


def test_subdivide_nonzero_index_with_zero_total_is_undefined() -> None:
    with pytest.raises(ZeroDivisionError):
        Point().subdivide(Point(1.0, 1.0, 1.0), 1, 0)
