import dataclasses

import pytest

from algolab.algebra import Complex, Vector


def test_vector_addition_is_commutative():
    a, b = Vector(2, 3), Vector(4, 5)
    assert a + b == b + a


def test_vector_addition_identity():
    v = Vector(2, 3)
    assert v + Vector(0, 0) == v


def test_vector_addition_leaves_operands_unchanged():
    a, b = Vector(2, 3), Vector(4, 5)
    _ = a + b
    assert a == Vector(2, 3)
    assert b == Vector(4, 5)


def test_vector_addition_components():
    result = Vector(2, 3) + Vector(4, 5)
    assert (result.x, result.y) == (6, 8)


def test_incremented_matches_adding_unit_vector():
    v = Vector(7, -2)
    assert v.incremented() == v + Vector(1, 1)


def test_incremented_returns_new_vector():
    v = Vector(2, 3)
    bumped = v.incremented()
    assert v == Vector(2, 3)
    assert bumped.x == v.x + 1 and bumped.y == v.y + 1


def test_vector_add_rejects_other_types():
    with pytest.raises(TypeError):
        Vector(1, 2) + 5


def test_vector_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Vector(1, 2).x = 3


def test_vector_str():
    assert str(Vector(2, 3)) == "x: 2\ny: 3"


def test_complex_add_then_subtract_round_trip():
    c1, c2 = Complex(3.0, 4.0), Complex(2.0, 5.0)
    assert (c1 + c2) - c2 == c1


def test_complex_subtract_self_is_zero():
    c = Complex(3.0, 4.0)
    assert c - c == Complex()


def test_complex_addition_is_commutative():
    c1, c2 = Complex(3.0, 4.0), Complex(2.0, 5.0)
    assert c1 + c2 == c2 + c1


def test_complex_operands_unchanged():
    c1, c2 = Complex(3.0, 4.0), Complex(2.0, 5.0)
    _ = c1 - c2
    assert c1 == Complex(3.0, 4.0)


def test_complex_str_positive_imaginary():
    assert str(Complex(3.0, 4.0)) == "3+4i"


def test_complex_str_negative_imaginary():
    assert str(Complex(3.0, -1.0)) == "3-1i"


def test_complex_rejects_other_types():
    with pytest.raises(TypeError):
        Complex(1.0, 1.0) - "x"