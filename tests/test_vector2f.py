import math

import pytest

from junglerun.vector2f import Vector2f


def test_indexing_matches_constructor_arguments():
    v = Vector2f(1.5, -2.5)
    assert v[0] == 1.5
    assert v[1] == -2.5


def test_setitem_updates_component():
    v = Vector2f(1, 2)
    v[0] = 7
    v[1] = 9
    assert tuple(v) == (7.0, 9.0)


def test_index_out_of_range_raises():
    v = Vector2f(1, 2)
    with pytest.raises(IndexError):
        v[2]
    with pytest.raises(IndexError):
        v[2] = 1.0
    assert tuple(v) == (1.0, 2.0)


def test_default_is_origin():
    assert Vector2f() == Vector2f(0, 0)


def test_add_then_subtract_round_trip():
    a = Vector2f(1.25, -3.5)
    b = Vector2f(4.0, 0.75)
    assert (a + b) - b == a


def test_double_negation_is_identity():
    a = Vector2f(3, -8)
    assert -(-a) == a
    assert a + (-a) == Vector2f(0, 0)


def test_scalar_multiplication_commutes_and_matches_addition():
    a = Vector2f(1.5, 2.5)
    assert 2 * a == a * 2
    assert a * 2 == a + a


def test_division_inverts_multiplication():
    a = Vector2f(3.0, -6.0)
    result = (a * 4) / 4
    assert result[0] == pytest.approx(a[0])
    assert result[1] == pytest.approx(a[1])


@pytest.mark.parametrize("scale", [0.0, 0.0005, -0.0009])
def test_division_by_tiny_scale_raises(scale):
    with pytest.raises(ValueError):
        Vector2f(1, 1) / scale


def test_magnitude_squared_equals_self_dot():
    a = Vector2f(2.5, -1.5)
    assert a.magnitude_squared() == pytest.approx(a.dot(a))
    assert a.magnitude() ** 2 == pytest.approx(a.magnitude_squared())


def test_normalize_gives_unit_length_in_same_direction():
    a = Vector2f(3, 4)
    n = a.normalize()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.dot(a) == pytest.approx(a.magnitude())


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Vector2f(0, 0).normalize()


def test_dot_with_perpendicular_is_zero():
    a = Vector2f(2, 5)
    perp = Vector2f(-5, 2)
    assert a.dot(perp) == 0


def test_copy_is_independent():
    a = Vector2f(1, 2)
    b = a.copy()
    b[0] = 100
    assert a == Vector2f(1, 2)
    assert b[0] == 100


def test_str_uses_parenthesised_format():
    assert str(Vector2f(1, 2)) == "(1, 2)"


def test_equality_with_other_types_is_false():
    assert (Vector2f(1, 2) == (1, 2)) is False


def test_iteration_unpacks():
    x, y = Vector2f(math.pi, math.e)
    assert (x, y) == (math.pi, math.e)