"""Tests for rt_canvas.core.tuples — points, vectors, colours and equivalence."""

import math

import pytest
from rt_canvas.core.errors import DimensionMismatch
from rt_canvas.core.tuples import (
    EPSILON,
    Tuple,
    add,
    colour,
    copy,
    cross,
    divide,
    dot,
    equiv_round,
    equiv_round_tuple,
    is_equiv_to,
    is_point,
    is_tuple_equiv_to,
    is_vector,
    magnitude,
    multiply,
    multiply_colours,
    negate,
    normalize,
    point,
    sub,
    vector,
)


class TestCreation:
    def test_components(self):
        t = Tuple(4, 3, 2, 1)
        assert (t.x, t.y, t.z, t.w) == (4, 3, 2, 1)

    def test_class_is_the_raw_constructor(self):
        import rt_canvas.core.tuples as tuples

        assert not hasattr(tuples, 'tuple')
        assert Tuple(1, 2).values == (1.0, 2.0)
        assert Tuple().values == ()

    def test_point_is_tuple_with_w1(self):
        p = point(4, 3, 2)
        assert p == Tuple(4, 3, 2, 1)
        assert p.w == 1

    def test_point_predicates(self):
        t = Tuple(1, 2, 3, 1)
        assert is_point(t)
        assert not is_vector(t)

    def test_vector_is_tuple_with_w0(self):
        assert vector(4, 3, 2) == Tuple(4, 3, 2, 0)
        assert vector(1, 2, 3).w == 0

    def test_vector_predicates(self):
        t = Tuple(1, 2, 3, 0)
        assert is_vector(t)
        assert not is_point(t)

    def test_colour_channels(self):
        c = colour(4, 3, 2)
        assert (c.r, c.g, c.b) == (4, 3, 2)
        assert len(c) == 3

    def test_colour_is_neither_point_nor_vector(self):
        c = colour(0, 0, 1)
        assert not is_point(c)
        assert not is_vector(c)

    def test_missing_w_raises(self):
        with pytest.raises(DimensionMismatch):
            colour(1, 2, 3).w

    def test_components_stored_as_floats(self):
        assert all(isinstance(v, float) for v in Tuple(1, 2, 3))

    def test_copy_is_equal_but_distinct(self):
        t = point(1, 2, 3)
        c = copy(t)
        assert c == t
        assert c is not t

    def test_hashable(self):
        assert len({point(1, 2, 3), point(1, 2, 3), vector(1, 2, 3)}) == 2

    def test_iter_and_index(self):
        t = Tuple(1, 2, 3, 4)
        assert list(t) == [1.0, 2.0, 3.0, 4.0]
        assert t[2] == 3.0


class TestArithmetic:
    def test_add(self):
        assert add(Tuple(3, -2, 5, 1), Tuple(-2, 3, 1, 0)) == Tuple(1, 1, 6, 1)

    def test_sub_two_points(self):
        assert sub(point(3, 2, 1), point(5, 6, 7)) == vector(-2, -4, -6)

    def test_sub_vector_from_point(self):
        assert sub(point(3, 2, 1), vector(5, 6, 7)) == point(-2, -4, -6)

    def test_sub_two_vectors(self):
        assert sub(vector(3, 2, 1), vector(5, 6, 7)) == vector(-2, -4, -6)

    def test_sub_undoes_add(self):
        a = Tuple(0.1, -2.7, 3.3, 1)
        b = Tuple(5.5, 0.2, -1e3, 0)
        assert is_tuple_equiv_to(sub(add(a, b), b), a)

    def test_negate(self):
        assert negate(Tuple(1, -2, 3, -4)) == Tuple(-1, 2, -3, 4)

    def test_multiply_by_scalar(self):
        assert multiply(Tuple(1, -2, 3, -4), 3.5) == Tuple(3.5, -7, 10.5, -14)

    def test_multiply_by_fraction(self):
        assert multiply(Tuple(1, -2, 3, -4), 0.5) == Tuple(0.5, -1, 1.5, -2)

    def test_divide_by_scalar(self):
        assert divide(Tuple(1, -2, 3, -4), 2) == Tuple(0.5, -1, 1.5, -2)

    def test_divide_by_zero_gives_ieee_values(self):
        result = divide(Tuple(1, -1, 0), 0)
        assert result.x == math.inf
        assert result.y == -math.inf
        assert math.isnan(result.z)

    def test_operators_delegate(self):
        a = Tuple(1, 2, 3, 1)
        b = Tuple(1, 1, 1, 0)
        assert a + b == add(a, b)
        assert a - b == sub(a, b)
        assert -a == negate(a)
        assert a * 2 == multiply(a, 2)
        assert 2 * a == multiply(a, 2)
        assert a / 2 == divide(a, 2)

    def test_mismatched_arity_add(self):
        with pytest.raises(DimensionMismatch):
            add(colour(1, 2, 3), point(1, 2, 3))

    def test_mismatched_arity_sub(self):
        with pytest.raises(DimensionMismatch):
            sub(point(1, 2, 3), colour(1, 2, 3))

    def test_dimension_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            add(Tuple(1), Tuple(1, 2))


class TestMagnitude:
    @pytest.mark.parametrize('v', [vector(1, 0, 0), vector(0, 1, 0), vector(0, 0, 1)])
    def test_unit_vectors(self, v):
        assert magnitude(v) == 1

    def test_positive_components(self):
        assert magnitude(vector(1, 2, 3)) == math.sqrt(14)

    def test_negative_components(self):
        assert magnitude(vector(-1, -2, -3)) == math.sqrt(14)

    def test_includes_w(self):
        assert magnitude(Tuple(0, 0, 0, 2)) == 2


class TestNormalize:
    def test_axis_vector(self):
        assert normalize(vector(4, 0, 0)) == vector(1, 0, 0)

    def test_general_vector(self):
        expected = vector(0.26726, 0.53452, 0.80178)
        assert equiv_round_tuple(normalize(vector(1, 2, 3))) == equiv_round_tuple(expected)

    def test_magnitude_of_normalized_is_one(self):
        assert equiv_round(magnitude(normalize(vector(1, 2, 3)))) == 1

    @pytest.mark.parametrize('v', [vector(3, -7, 0.25), vector(1e-3, 0, 0), vector(-5, 5, 5)])
    def test_unit_length(self, v):
        assert is_equiv_to(magnitude(normalize(v)), 1)

    def test_zero_vector_propagates_nan(self):
        assert all(math.isnan(c) for c in normalize(vector(0, 0, 0)))


class TestProducts:
    def test_dot(self):
        assert dot(vector(1, 2, 3), vector(2, 3, 4)) == 20

    def test_dot_commutes(self):
        a = vector(0.3, -2, 7)
        b = vector(4, 0.5, -1)
        assert dot(a, b) == dot(b, a)

    def test_dot_mismatched_arity(self):
        with pytest.raises(DimensionMismatch):
            dot(vector(1, 2, 3), colour(1, 2, 3))

    def test_cross(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert cross(a, b) == vector(-1, 2, -1)
        assert cross(b, a) == vector(1, -2, 1)

    def test_cross_anticommutes(self):
        a = vector(0.5, -1, 2)
        b = vector(3, 0, -4)
        assert cross(a, b) == negate(cross(b, a))

    def test_cross_needs_three_components(self):
        with pytest.raises(DimensionMismatch):
            cross(Tuple(1, 2), vector(1, 2, 3))


class TestColourArithmetic:
    def test_add(self):
        result = add(colour(0.9, 0.6, 0.75), colour(0.7, 0.1, 0.25))
        assert is_tuple_equiv_to(result, colour(1.6, 0.7, 1.0))

    def test_sub(self):
        result = sub(colour(0.9, 0.6, 0.75), colour(0.7, 0.1, 0.25))
        assert equiv_round_tuple(result) == equiv_round_tuple(colour(0.2, 0.5, 0.5))

    def test_multiply_by_scalar(self):
        result = multiply(colour(0.2, 0.3, 0.4), 2)
        assert equiv_round_tuple(result) == equiv_round_tuple(colour(0.4, 0.6, 0.8))

    def test_multiply_colours(self):
        result = multiply_colours(colour(1, 0.2, 0.4), colour(0.9, 1, 0.1))
        assert equiv_round_tuple(result) == equiv_round_tuple(colour(0.9, 0.2, 0.04))

    def test_multiply_colours_is_not_dot(self):
        c = colour(0.5, 0.5, 0.5)
        assert multiply_colours(c, c) == colour(0.25, 0.25, 0.25)


class TestEquivalence:
    def test_numbers(self):
        assert is_equiv_to(math.sqrt(14), 3.7416575)

    def test_numbers_outside_tolerance(self):
        assert not is_equiv_to(1.0, 1.0 + 10 * EPSILON)

    def test_tuples(self):
        t1 = Tuple(1.7416575, 2.7416575, 3.7416575)
        t2 = Tuple(1.74165751, 2.74165751, 3.74165751)
        assert is_tuple_equiv_to(t1, t2)

    def test_tuples_of_different_arity_are_not_equivalent(self):
        assert not is_tuple_equiv_to(colour(0, 0, 0), vector(0, 0, 0))

    def test_round_tuples(self):
        x = Tuple(1.74165752038343, 1.74165752038343, 1.74165752038343)
        y = Tuple(1.74165752099999, 1.74165752099999, 1.74165752099999)
        assert equiv_round_tuple(x) == equiv_round_tuple(y)

    def test_round_numbers(self):
        assert equiv_round(1.7412342) == equiv_round(1.7412342999)
