"""Tests for homogeneous tuples."""

import math

import pytest

from phongtracer.core.errors import InvalidTupleError
from phongtracer.core.tuple import Tuple, cross, dot, magnitude, normalize, point, reflect, vector


class TestPointAndVector:
    """w distinguishes points from vectors."""

    def test_tuple_with_w_one_is_point(self):
        t = Tuple(4.3, -4.2, 3.1, 1.0)
        assert t.x == 4.3
        assert t.y == -4.2
        assert t.z == 3.1
        assert t.is_point()
        assert not t.is_vector()

    def test_tuple_with_w_zero_is_vector(self):
        t = Tuple(4.3, -4.2, 3.1, 0.0)
        assert not t.is_point()
        assert t.is_vector()

    def test_point_factory(self):
        assert point(4, -4, 3) == Tuple(4, -4, 3, 1)

    def test_vector_factory(self):
        assert vector(4, -4, 3) == Tuple(4, -4, 3, 0)

    def test_invalid_w_is_reported(self):
        with pytest.raises(InvalidTupleError):
            Tuple(1, 2, 3, 2).is_point()
        with pytest.raises(InvalidTupleError):
            Tuple(1, 2, 3, 0.5).is_vector()

    def test_w_is_compared_with_tolerance(self):
        assert Tuple(0, 0, 0, 1.000001).is_point()


class TestArithmetic:

    def test_adding_vector_to_point(self):
        assert Tuple(3, -2, 5, 1) + Tuple(-2, 3, 1, 0) == Tuple(1, 1, 6, 1)

    def test_subtracting_two_points(self):
        assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)

    def test_subtracting_vector_from_point(self):
        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_subtracting_two_vectors(self):
        assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)

    def test_adding_two_points_is_rejected(self):
        with pytest.raises(TypeError):
            point(1, 2, 3) + point(1, 2, 3)

    def test_subtracting_point_from_vector_is_rejected(self):
        with pytest.raises(TypeError):
            vector(1, 2, 3) - point(1, 2, 3)

    def test_negation(self):
        assert -Tuple(1, -2, 3, -4) == Tuple(-1, 2, -3, 4)

    def test_scalar_multiplication(self):
        a = Tuple(1, -2, 3, -4)
        assert a * 3.5 == Tuple(3.5, -7, 10.5, -14)
        assert a * 0.5 == Tuple(0.5, -1, 1.5, -2)
        assert 2 * a == Tuple(2, -4, 6, -8)

    def test_scalar_division(self):
        assert Tuple(1, -2, 3, -4) / 2 == Tuple(0.5, -1, 1.5, -2)


class TestGeometry:

    @pytest.mark.parametrize("v, expected", [
        (vector(1, 0, 0), 1.0),
        (vector(0, 1, 0), 1.0),
        (vector(0, 0, 1), 1.0),
        (vector(1, 2, 3), math.sqrt(14)),
        (vector(-1, -2, -3), math.sqrt(14)),
    ])
    def test_magnitude(self, v, expected):
        assert magnitude(v) == pytest.approx(expected)

    def test_normalize(self):
        assert normalize(vector(4, 0, 0)) == vector(1, 0, 0)
        root = math.sqrt(14)
        assert vector(1, 2, 3).normalize() == vector(1 / root, 2 / root, 3 / root)

    def test_normalized_vector_has_unit_magnitude(self):
        assert vector(1, 2, 3).normalize().magnitude() == pytest.approx(1.0)

    def test_normalizing_zero_vector_gives_nan(self):
        n = vector(0, 0, 0).normalize()
        assert all(math.isnan(c) for c in n)

    def test_dot_product(self):
        assert dot(vector(1, 2, 3), vector(2, 3, 4)) == 20

    def test_cross_product(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert cross(a, b) == vector(-1, 2, -1)
        assert cross(b, a) == vector(1, -2, 1)

    def test_reflecting_vector_approaching_at_45_degrees(self):
        assert reflect(vector(1, -1, 0), vector(0, 1, 0)) == vector(1, 1, 0)

    def test_reflecting_vector_off_slanted_surface(self):
        h = math.sqrt(2) / 2
        assert vector(0, -1, 0).reflect(vector(h, h, 0)) == vector(1, 0, 0)


class TestEquality:

    def test_equality_tolerates_small_differences(self):
        assert point(1, 2, 3) == point(1, 2, 3.000001)

    def test_equality_rejects_larger_differences(self):
        assert point(0, 0, 0) != point(0, 0, 1e-4)

    def test_tolerance_can_be_passed_explicitly(self):
        assert point(0, 0, 0).approx_eq(point(0, 0, 1e-4), eps=1e-3)
        assert not point(0, 0, 0).approx_eq(point(0, 0, 1e-7), eps=1e-9)

    def test_tuples_are_not_hashable(self):
        with pytest.raises(TypeError):
            hash(point(1, 2, 3))
