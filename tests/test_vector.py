import math

import pytest

from pixeldodge.vector import Vector2D, round_half_up


def test_add_is_variadic_and_order_independent():
    a, b, c = Vector2D(1, 2), Vector2D(-3, 0.5), Vector2D(10, -7)
    assert Vector2D.add(a, b, c) == Vector2D(8, -4.5)
    assert Vector2D.add(c, a, b) == Vector2D.add(Vector2D.add(a, b), c)
    assert Vector2D.add() == Vector2D(0, 0)
    assert Vector2D.add(a) == a


def test_operations_return_new_values():
    v = Vector2D(3, -4)
    assert v.scale(1) == v
    assert v.scale(2) == Vector2D(6, -8)
    assert v.negate().negate() == v
    assert v == Vector2D(3, -4)
    with pytest.raises(AttributeError):
        v.x = 1


def test_magnitude_and_angle():
    v = Vector2D(3, -4)
    assert v.r() == 5
    assert v.theta() == pytest.approx(math.atan2(-4, 3))


@pytest.mark.parametrize("r, theta", [(1, 0), (2.5, 1.0), (7, -2.0), (0.3, math.pi / 2)])
def test_from_polar_round_trips_through_r_and_theta(r, theta):
    v = Vector2D.from_polar(r, theta)
    assert v.r() == pytest.approx(r)
    assert (v.theta() - theta) % (2 * math.pi) == pytest.approx(0, abs=1e-9) or \
        (v.theta() - theta) % (2 * math.pi) == pytest.approx(2 * math.pi)


def test_rounding_sends_halves_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-1.5) == -1
    assert Vector2D(0.49, -0.51).rounded() == Vector2D(0, -1)
    assert Vector2D(1.9, -0.1).floored() == (1, -1)
