import dataclasses
import math

import pytest

from spheretrace.core.vector import EPSILON, Vector, equal

SAMPLES = [
    Vector(1.0, 2.0, 3.0, 0.0),
    Vector(-4.5, 0.25, 7.0, 1.0),
    Vector(0.0, 0.0, 0.0, 0.0),
    Vector(1e3, -2e-3, 0.5, -1.0),
]


def test_new_pads_missing_components():
    assert Vector.new([]) == Vector(0.0, 0.0, 0.0, 0.0)
    assert Vector.new([1.0, 2.0]) == Vector(1.0, 2.0, 0.0, 0.0)
    assert Vector.new((1, 2, 3, 4)) == Vector(1.0, 2.0, 3.0, 4.0)


def test_new_ignores_extra_components():
    assert Vector.new([1.0, 2.0, 3.0, 4.0, 5.0]) == Vector(1.0, 2.0, 3.0, 4.0)


def test_vector_is_immutable():
    v = Vector(1.0, 2.0, 3.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_add_commutes(a, b):
    assert a.add(b).approx_equal(b.add(a))


@pytest.mark.parametrize("a", SAMPLES)
def test_sub_self_is_zero(a):
    assert a.sub(a) == Vector()


def test_negate_and_scale():
    v = Vector(1.0, -2.0, 3.0, -4.0)
    assert v.negate() == Vector(-1.0, 2.0, -3.0, 4.0)
    assert v.scale(0.5) == Vector(0.5, -1.0, 1.5, -2.0)


def test_dot_includes_w():
    assert Vector(1.0, 2.0, 3.0, 4.0).dot(Vector(1.0, 1.0, 1.0, 1.0)) == 10.0
    assert Vector(1.0, 2.0, 3.0, 0.0).dot(Vector(1.0, 1.0, 1.0, 1.0)) == 6.0


def test_cross_product():
    a = Vector(1.0, 2.0, 3.0, 0.0)
    b = Vector(2.0, 3.0, 4.0, 0.0)
    assert a.cross(b) == Vector(-1.0, 2.0, -1.0, 0.0)
    assert b.cross(a) == Vector(1.0, -2.0, 1.0, 0.0)


def test_cross_drops_w():
    a = Vector(1.0, 0.0, 0.0, 5.0)
    b = Vector(0.0, 1.0, 0.0, 7.0)
    assert a.cross(b) == Vector(0.0, 0.0, 1.0, 0.0)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_cross_anticommutes(a, b):
    assert a.cross(b).approx_equal(b.cross(a).negate())


def test_magnitude():
    assert Vector(1.0, 0.0, 0.0, 0.0).magnitude() == 1.0
    assert equal(Vector(1.0, 2.0, 3.0, 0.0).magnitude(), math.sqrt(14.0))
    assert equal(Vector(-1.0, -2.0, -3.0, -4.0).magnitude(), math.sqrt(30.0))


@pytest.mark.parametrize("a", [v for v in SAMPLES if v.magnitude() > 0])
def test_normalized_has_unit_length(a):
    assert equal(a.normalized().magnitude(), 1.0)


def test_normalized_direction():
    assert Vector(4.0, 0.0, 0.0, 0.0).normalized() == Vector(1.0, 0.0, 0.0, 0.0)
    n = Vector(1.0, 2.0, 3.0, 0.0).normalized()
    assert n.approx_equal(Vector(0.26726, 0.53452, 0.80178, 0.0))


def test_normalized_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector().normalized()


def test_operators_follow_named_operations():
    a = Vector(1.0, 2.0, 3.0, 0.0)
    b = Vector(2.0, 3.0, 4.0, 0.0)
    assert a + b == a.add(b)
    assert a - b == a.sub(b)
    assert -a == a.negate()
    assert a * 2.0 == a.scale(2.0)
    assert 2.0 * a == a.scale(2.0)
    assert a * b == 20.0
    assert a ^ b == a.cross(b)


def test_approx_equal_tolerance():
    a = Vector(1.0, 2.0, 3.0, 0.0)
    assert a.approx_equal(Vector(1.0 + EPSILON / 2, 2.0, 3.0, 0.0))
    assert not a.approx_equal(Vector(1.0 + EPSILON * 2, 2.0, 3.0, 0.0))


def test_as_array_is_a_copy():
    v = Vector(1.0, 2.0, 3.0, 4.0)
    arr = v.as_array()
    arr[0] = 10.0
    assert v.x == 1.0
    assert arr.dtype.name == "float64"


def test_str_draws_box():
    text = str(Vector(1.0, 2.5, -3.0, 0.0))
    lines = text.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("┌") and lines[2].startswith("└")
    assert "1.00" in lines[1] and "2.50" in lines[1] and "-3.00" in lines[1]
