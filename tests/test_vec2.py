import dataclasses

import pytest

from shitris.vec2 import Vec2


def test_add_then_subtract_round_trips():
    a = Vec2(13, -4)
    b = Vec2(7, 22)
    assert (a + b) - b == a


def test_scalar_add_matches_vector_add():
    a = Vec2(3, 9)
    assert a + 5 == a + Vec2(5, 5)
    assert a - 5 == a - Vec2(5, 5)


def test_multiplication_by_scalar_and_vector():
    a = Vec2(6, -2)
    assert a * 2 == a + a
    assert a * Vec2(3, 3) == a * 3
    assert a * 1 == a


def test_floordiv_inverts_multiplication():
    a = Vec2(11, -17)
    assert (a * 4) // 4 == a


def test_floordiv_truncates_toward_zero():
    assert Vec2(-7, 7) // 2 == Vec2(-3, 3)


def test_floordiv_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) // 0


def test_strict_ordering_requires_both_components():
    assert Vec2(1, 5) < Vec2(2, 6)
    assert Vec2(2, 6) > Vec2(1, 5)
    assert not (Vec2(1, 7) < Vec2(2, 6))
    assert not (Vec2(1, 7) > Vec2(2, 6))


def test_non_strict_ordering_includes_equal_components():
    a = Vec2(4, 4)
    assert a <= a
    assert a >= a
    assert a <= Vec2(4, 9)
    assert not (a < Vec2(4, 9))


def test_ordering_is_partial():
    a = Vec2(0, 10)
    b = Vec2(10, 0)
    assert not (a < b or a > b or a <= b or a >= b or a == b)


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        Vec2(1, 2) + "x"
    with pytest.raises(TypeError):
        Vec2(1, 2) < (3, 4)


def test_vector_is_immutable():
    a = Vec2(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.x = 5  # type: ignore[misc]
    assert a.x == 1
    assert a == Vec2(1, 2)


def test_unpacking_yields_components():
    x, y = Vec2(8, 9)
    assert (x, y) == (8, 9)