import warnings

import numpy as np
import pytest


def test_length_of_3_4_is_5(ops):
    assert ops.length((3, 4)) == 5.0
    assert ops.squared_length((3, 4)) == 25.0


def test_length_squared_matches_squared_length(ops, rng):
    for _ in range(20):
        v = ops.vector(*rng.uniform(-100, 100, size=2))
        assert np.isclose(ops.length(v) ** 2, ops.squared_length(v), rtol=1e-5)


def test_length_propagates_nan(ops):
    assert np.isnan(ops.length((np.nan, 1.0)))
    assert ops.length((np.inf, 1.0)) == np.inf


def test_dot(ops):
    assert ops.dot((1, 0), (0, 1)) == 0.0
    assert ops.dot((1, 2), (3, 4)) == 11.0


def test_dot_is_commutative(ops, rng):
    v1 = ops.vector(*rng.uniform(-10, 10, size=2))
    v2 = ops.vector(*rng.uniform(-10, 10, size=2))
    assert ops.dot(v1, v2) == ops.dot(v2, v1)


def test_perp_dot_product_sign(ops):
    # left turn
    assert ops.perp_dot_product((1, 0), (0, 1)) == 1.0
    # right turn
    assert ops.perp_dot_product((1, 0), (0, -1)) == -1.0
    # parallel
    assert ops.perp_dot_product((1, 0), (2, 0)) == 0.0


def test_perp_dot_product_with_self_is_zero(ops, rng):
    for _ in range(10):
        v = ops.vector(*rng.uniform(-10, 10, size=2))
        assert ops.perp_dot_product(v, v) == 0.0


def test_get_normal_is_left_normal(ops):
    np.testing.assert_array_equal(ops.get_normal((1, 0)), [0, 1])
    np.testing.assert_array_equal(ops.get_normal((2, 3)), [-3, 2])


def test_normalize_in_place(ops):
    v = ops.vector(3, 4)
    assert ops.normalize(v) is None
    np.testing.assert_allclose(v, [0.6, 0.8], rtol=1e-6)
    assert v.dtype == ops.float_dtype


def test_normalized_has_unit_length(ops, rng):
    for _ in range(20):
        v = ops.vector(*rng.uniform(-100, 100, size=2))
        assert abs(ops.length(ops.get_normalized(v)) - 1.0) < 1e-5


def test_normalize_zero_vector_stays_zero(ops):
    v = ops.vector(0, 0)
    ops.normalize(v)
    assert not np.isnan(v).any()
    np.testing.assert_array_equal(v, [0, 0])

    out = ops.get_normalized(ops.origin)
    np.testing.assert_array_equal(out, [0, 0])


def test_get_normalized_leaves_input_unchanged(ops):
    v = ops.vector(3, 4)
    out = ops.get_normalized(v)
    np.testing.assert_array_equal(v, [3, 4])
    assert out is not v


def test_add_and_sub_in_place(ops):
    v = ops.vector(1, 2)
    ops.add(v, (3, 4))
    np.testing.assert_array_equal(v, [4, 6])
    ops.sub(v, (1, 1))
    np.testing.assert_array_equal(v, [3, 5])


def test_add_vector_to_itself_doubles_it(ops):
    v = ops.vector(1.5, -2)
    ops.add(v, v)
    np.testing.assert_array_equal(v, [3, -4])
    ops.sub(v, v)
    np.testing.assert_array_equal(v, [0, 0])


def test_added_then_subed_round_trips(ops, rng):
    v1 = ops.vector(*rng.uniform(-10, 10, size=2))
    v2 = ops.vector(*rng.uniform(-10, 10, size=2))
    out = ops.get_subed(ops.get_added(v1, v2), v2)
    assert ops.tol_equals(out, v1, 1e-5)
    assert out.dtype == ops.float_dtype


def test_pure_forms_do_not_mutate(ops):
    v1 = ops.vector(1, 2)
    v2 = ops.vector(3, 4)
    np.testing.assert_array_equal(ops.get_added(v1, v2), [4, 6])
    np.testing.assert_array_equal(ops.get_subed(v1, v2), [-2, -2])
    np.testing.assert_array_equal(ops.get_scaled(v1, 2), [2, 4])
    np.testing.assert_array_equal(ops.get_negated(v1), [-1, -2])
    np.testing.assert_array_equal(v1, [1, 2])
    np.testing.assert_array_equal(v2, [3, 4])


def test_scale(ops, rng):
    v = ops.vector(*rng.uniform(-10, 10, size=2))
    np.testing.assert_array_equal(ops.get_scaled(v, 1), v)
    np.testing.assert_allclose(ops.get_scaled(ops.get_scaled(v, 2.5), -3.0),
                               ops.get_scaled(v, -7.5), rtol=1e-5)

    w = ops.get_copy(v)
    ops.scale_by(w, 2)
    np.testing.assert_allclose(w, 2 * v, rtol=1e-6)


def test_negate(ops):
    v = ops.vector(1, -2)
    ops.negate(v)
    np.testing.assert_array_equal(v, [-1, 2])


def test_vec_projection(ops):
    np.testing.assert_array_equal(ops.vec_projection((3, 3), (1, 0)), [3, 0])
    np.testing.assert_allclose(ops.vec_projection((2, 0), (1, 1)), [1, 1], rtol=1e-6)


def test_vec_projection_onto_zero_vector_is_nan(ops):
    out = ops.vec_projection((3, 3), ops.origin)
    assert np.isnan(out).all()


def test_copy_is_independent(ops):
    v = ops.vector(1, 2)
    c = ops.get_copy(v)
    np.testing.assert_array_equal(c, v)
    ops.negate(c)
    np.testing.assert_array_equal(v, [1, 2])
    np.testing.assert_array_equal(c, [-1, -2])


def test_origin_is_read_only(ops):
    with pytest.raises((TypeError, ValueError)):
        ops.negate(ops.origin)
    np.testing.assert_array_equal(ops.origin, [0, 0])
    assert ops.origin.dtype == ops.float_dtype


def test_repr_rebuilds_vector(ops):
    v = ops.vector(1.0, 2.0)
    text = ops.repr(v)
    assert text == "np.array([1.0, 2.0], dtype=np.%s)" % ops.precision
    out = eval(text, {"np": np})
    np.testing.assert_array_equal(out, v)
    assert out.dtype == v.dtype


def test_repr_rebuilds_values_below_six_decimals(ops):
    for v in (ops.vector(0.1234567, 1e-7),
              ops.vector(-123456.789, 3e-12),
              ops.vector(-0.0, 1.0 / 3.0)):
        out = eval(ops.repr(v), {"np": np})
        np.testing.assert_array_equal(out, v)
        assert out.dtype == v.dtype


def test_repr_rebuilds_non_finite_components(ops):
    v = ops.vector(np.nan, np.inf)
    text = ops.repr(v)
    assert text == "np.array([np.nan, np.inf], dtype=np.%s)" % ops.precision
    out = eval(text, {"np": np})
    assert np.isnan(out[0])
    assert out[1] == np.inf

    out = eval(ops.repr(ops.vector(-np.inf, 2.5)), {"np": np})
    np.testing.assert_array_equal(out, [-np.inf, 2.5])


def test_operations_are_silent_on_overflow_and_inf(ops):
    big = ops.vector(np.finfo(ops.float_dtype).max / 2, 1)
    v = ops.vector(np.inf, 1)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert ops.length(big) == np.inf
        assert ops.squared_length(big) == np.inf
        assert ops.get_scaled(big, 4)[0] == np.inf

        ops.normalize(v)
        assert np.isnan(v[0])
        assert v[1] == 0

        assert np.isnan(ops.vec_projection((3, 3), ops.origin)).all()


def test_to_string(ops):
    assert ops.to_string(ops.vector(1, -2.5)) == "[1.000000, -2.500000]"


def test_tol_equals(ops, rng):
    v = ops.vector(*rng.uniform(-10, 10, size=2))
    assert ops.tol_equals(v, v, 1e-9)
    assert not ops.tol_equals((0, 0), (1, 1), 0.5)
    assert ops.tol_equals((0, 0), (0.25, -0.25), 0.5)
    # the bound is strict
    assert not ops.tol_equals((0, 0), (0.5, 0), 0.5)
    assert not ops.tol_equals((0, 0), (0, np.nan), 0.5)
