from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from geometry3d import ORIGIN3D, Point3d, Vector3d

POINTS = [
    Point3d(0.0, 0.0, 0.0),
    Point3d(1.0, 2.0, 3.0),
    Point3d(-4.5, 0.25, 7.0),
    Point3d(1e3, -2e-3, 3.5),
]


def test_create_point3d():
    p = Point3d(1, 2, 3)
    assert p.x == 1
    assert p.y == 2
    assert p.z == 3


def test_origin(origin):
    assert origin.components() == [0, 0, 0]
    assert ORIGIN3D == Point3d(0, 0, 0)


def test_components(p):
    assert p.components() == [1.0, 2.0, 3.0]
    assert p.to_tuple() == (1.0, 2.0, 3.0)
    x, y, z = p
    assert (x, y, z) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize("p", POINTS)
def test_with_components_round_trip(p):
    assert Point3d.with_components(p.components()) == p


def test_with_components_ignores_extra_elements():
    assert Point3d.with_components((7, 8, 9, 10)) == Point3d(7, 8, 9)


def test_with_components_numpy():
    p = Point3d.with_components(np.array([1.0, 2.0, 3.0], dtype=np.float32))
    assert p == Point3d(1, 2, 3)


def test_with_components_too_short():
    with pytest.raises(ValueError):
        Point3d.with_components([1.0, 2.0])


def test_is_frozen(p):
    with pytest.raises(FrozenInstanceError):
        p.x = 100


def test_unhashable(p):
    with pytest.raises(TypeError):
        hash(p)


def test_plus(p):
    assert p.plus(Vector3d(1, 1, 1)) == Point3d(2, 3, 4)
    assert p + Vector3d(-1, 0, 1) == Point3d(0, 2, 4)


def test_minus_point_gives_vector(p, q):
    d = q.minus(p)
    assert isinstance(d, Vector3d)
    assert d == Vector3d(3, -8, 12)
    assert q.minus_point(p) == d
    assert q - p == d


def test_minus_vector_gives_point(p):
    r = p.minus(Vector3d(1, 2, 3))
    assert isinstance(r, Point3d)
    assert r == ORIGIN3D
    assert p.minus_vector(Vector3d(1, 2, 3)) == r
    assert p - Vector3d(1, 2, 3) == r


def test_minus_rejects_other_types(p):
    with pytest.raises(TypeError):
        p.minus((1, 2, 3))
    with pytest.raises(TypeError):
        p - 1


def test_points_do_not_add(p, q):
    with pytest.raises(TypeError):
        p + q


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_difference_antisymmetric(a, b):
    assert a.minus(b).neg() == b.minus(a)


@pytest.mark.parametrize("a", POINTS)
def test_plus_then_minus_round_trip(a, u):
    assert a.plus(u).minus(u) == a


def test_dist(p, q):
    assert p.dist2(q) == 9 + 64 + 144
    assert p.dist(q) == pytest.approx(217**0.5)


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_dist_symmetric(a, b):
    assert a.dist(b) == b.dist(a)
    assert a.dist2(b) >= 0


def test_combo_endpoints(p, q):
    assert p.combo(0, q) == p
    assert p.combo(1, q) == q


def test_combo_midpoint(p, q):
    assert p.combo(0.5, q) == Point3d(2.5, -2.0, 9.0)


def test_combo_extrapolates(p, q):
    """Scalars outside [0, 1] are not clamped."""
    assert p.combo(2, q) == Point3d(7, -14, 27)
    assert p.combo(-1, q) == Point3d(-2, 10, -9)


def test_combos_empty(p):
    assert p.combos([], []) == p


def test_combos_single(p, q):
    assert p.combos([0.25], [q]) == p.combo(0.25, q)


def test_combos_folds_from_running_point(p, q):
    r = Point3d(0, 0, 0)
    assert p.combos([0.5, 0.5], [q, r]) == p.combo(0.5, q).combo(0.5, r)


def test_combos_uses_shortest_sequence(p, q):
    r = Point3d(10, 10, 10)
    assert p.combos([0.5], [q, r]) == p.combo(0.5, q)
    assert p.combos([0.5, 0.1, 0.9], [q]) == p.combo(0.5, q)


def test_max_min(p, q):
    assert p.max(q) == Point3d(4, 2, 15)
    assert p.min(q) == Point3d(1, -6, 3)
