import math

import pytest

from quadkit.geometry import Rect, Vec2, Vec3, polar_to_cartesian


def _dot3(a, b):
    return sum(p * q for p, q in zip(a, b))


def test_vec2_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(4.0, 3.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert (a * 2.0) / 2.0 == a
    assert 3.0 * a == a * 3.0


def test_vec2_length_of_axis_vector():
    assert Vec2(0.0, 7.0).length() == 7.0


@pytest.mark.parametrize("v", [Vec2(3.0, 4.0), Vec2(-1.0, 0.25), Vec2(100.0, -50.0)])
def test_vec2_normalize_is_unit_and_parallel(v):
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.x * v.y - n.y * v.x == pytest.approx(0.0)
    assert n.dot(v) > 0


def test_vec2_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalize()


def test_vec2_dot_perpendicular_and_self():
    v = Vec2(2.0, 5.0)
    assert v.dot(Vec2(-5.0, 2.0)) == 0.0
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_vec3_cross_is_perpendicular():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert _dot3(c, a) == pytest.approx(0.0)
    assert _dot3(c, b) == pytest.approx(0.0)
    assert b.cross(a) == -c


def test_vec3_cross_of_axes():
    x = Vec3(1.0, 0.0, 0.0)
    y = Vec3(0.0, 1.0, 0.0)
    assert x.cross(y) == Vec3(0.0, 0.0, 1.0)


def test_vec3_normalize():
    v = Vec3(2.0, -3.0, 6.0)
    assert v.normalize().length() == pytest.approx(1.0)
    with pytest.raises(ValueError):
        Vec3().normalize()


def test_rect_overlaps_symmetric_and_touching():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    touching = Rect(10.0, 0.0, 5.0, 5.0)
    far = Rect(20.0, 20.0, 1.0, 1.0)
    assert a.overlaps(touching) and touching.overlaps(a)
    assert not a.overlaps(far) and not far.overlaps(a)


def test_rect_contains_excludes_far_edges():
    r = Rect(2.0, 3.0, 4.0, 5.0)
    assert r.contains(Vec2(2.0, 3.0))
    assert not r.contains(Vec2(6.0, 3.0))
    assert not r.contains(Vec2(2.0, 8.0))
    assert r.contains(Vec2(5.9, 7.9))


def test_polar_to_cartesian():
    assert polar_to_cartesian(4.0, 0.0) == Vec2(4.0, 0.0)
    p = polar_to_cartesian(3.0, 1.2)
    assert p.length() == pytest.approx(3.0)
    assert math.atan2(p.y, p.x) == pytest.approx(1.2)