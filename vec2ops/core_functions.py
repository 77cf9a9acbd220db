from numba import njit
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for 2D vector operations
#
# Every kernel is compiled for float32 and float64 vectors of shape (2,).
# error_model='numpy' keeps IEEE-754 semantics for division by zero.
##########################################################################################


@njit([sig_len_f32, sig_len_f64], cache=True, error_model='numpy')
def vector_length_2D_nb_core(
    vec):
    """
    Compute length of a 2D vector
    vec: shape (2,)
    returns: sqrt(x**2 + y**2), NaN if a component is NaN
    """
    return np.sqrt(vec[X] * vec[X] + vec[Y] * vec[Y])


@njit([sig_len_f32, sig_len_f64], cache=True, error_model='numpy')
def vector_squared_length_2D_nb_core(
    vec):
    """
    Compute squared length of a 2D vector, for comparing magnitudes
    without the sqrt
    vec: shape (2,)
    returns: x**2 + y**2
    """
    return vec[X] * vec[X] + vec[Y] * vec[Y]


@njit([sig_inplace_unary_f32, sig_inplace_unary_f64], cache=True, error_model='numpy')
def vector_normalize_2D_nb_core(
    vec):
    """
    Normalize a 2D vector in place
    vec: shape (2,), overwritten with the unit vector
    A vector of exactly zero length is left unchanged.
    """
    mag = np.sqrt(vec[X] * vec[X] + vec[Y] * vec[Y])
    if mag == 0:
        # divisor of 1
        return
    vec[X] /= mag
    vec[Y] /= mag


@njit([sig_unary_f32, sig_unary_f64], cache=True, error_model='numpy')
def vector_normalized_2D_nb_core(
    vec):
    """
    Return a normalized copy of a 2D vector
    vec: shape (2,)
    returns: shape (2,), the zero vector maps to itself
    """
    out = np.empty(2, dtype=vec.dtype)
    out[X] = vec[X]
    out[Y] = vec[Y]
    mag = np.sqrt(out[X] * out[X] + out[Y] * out[Y])
    if mag != 0:
        out[X] /= mag
        out[Y] /= mag

    return out


@njit([sig_dot_f32, sig_dot_f64], cache=True, error_model='numpy')
def vector_dot_product_2D_nb_core(
    vec1,
    vec2):
    """
    Compute dot product of two 2D vectors
    vec1, vec2: shape (2,)
    returns: x1*x2 + y1*y2
    """
    return vec1[X] * vec2[X] + vec1[Y] * vec2[Y]


@njit([sig_unary_f32, sig_unary_f64], cache=True, error_model='numpy')
def vector_normal_2D_nb_core(
    vec):
    """
    Left normal of a 2D vector (rotated 90 degrees counter-clockwise)
    vec: shape (2,)
    returns: (-y, x)
    """
    out = np.empty(2, dtype=vec.dtype)
    out[X] = -vec[Y]
    out[Y] = vec[X]

    return out


@njit([sig_inplace_binary_f32, sig_inplace_binary_f64], cache=True, error_model='numpy')
def vector_add_2D_nb_core(
    vec1,
    vec2):
    """
    vec1 = vec1 + vec2, in place
    vec1, vec2: shape (2,), may be the same array
    """
    vec1[X] += vec2[X]
    vec1[Y] += vec2[Y]


@njit([sig_binary_f32, sig_binary_f64], cache=True, error_model='numpy')
def vector_added_2D_nb_core(
    vec1,
    vec2):
    """
    Component-wise sum of two 2D vectors
    vec1, vec2: shape (2,)
    returns: shape (2,)
    """
    out = np.empty(2, dtype=vec1.dtype)
    out[X] = vec1[X] + vec2[X]
    out[Y] = vec1[Y] + vec2[Y]

    return out


@njit([sig_inplace_binary_f32, sig_inplace_binary_f64], cache=True, error_model='numpy')
def vector_sub_2D_nb_core(
    vec1,
    vec2):
    """
    vec1 = vec1 - vec2, in place
    vec1, vec2: shape (2,), may be the same array
    """
    vec1[X] -= vec2[X]
    vec1[Y] -= vec2[Y]


@njit([sig_binary_f32, sig_binary_f64], cache=True, error_model='numpy')
def vector_subbed_2D_nb_core(
    vec1,
    vec2):
    """
    Component-wise difference of two 2D vectors
    vec1, vec2: shape (2,)
    returns: shape (2,)
    """
    out = np.empty(2, dtype=vec1.dtype)
    out[X] = vec1[X] - vec2[X]
    out[Y] = vec1[Y] - vec2[Y]

    return out


@njit([sig_dot_f32, sig_dot_f64], cache=True, error_model='numpy')
def vector_perp_dot_product_2D_nb_core(
    vec1,
    vec2):
    """
    Compute the 2D cross product (perpendicular dot product)
    vec1, vec2: shape (2,)
    returns: x1*y2 - y1*x2
             > 0 if vec2 is left of vec1, < 0 if right, 0 if parallel
    """
    return vec1[X] * vec2[Y] - vec1[Y] * vec2[X]


@njit([sig_scaled_f32, sig_scaled_f64], cache=True, error_model='numpy')
def vector_scaled_2D_nb_core(
    vec,
    mul):
    """
    Return a copy of a 2D vector scaled by mul
    vec: shape (2,)
    returns: shape (2,)
    """
    out = np.empty(2, dtype=vec.dtype)
    out[X] = vec[X] * mul
    out[Y] = vec[Y] * mul

    return out


@njit([sig_inplace_scale_f32, sig_inplace_scale_f64], cache=True, error_model='numpy')
def vector_scale_by_2D_nb_core(
    vec,
    mul):
    """
    Scale a 2D vector by mul, in place
    vec: shape (2,)
    """
    vec[X] *= mul
    vec[Y] *= mul


@njit([sig_inplace_unary_f32, sig_inplace_unary_f64], cache=True, error_model='numpy')
def vector_negate_2D_nb_core(
    vec):
    """
    vec = -vec, in place
    vec: shape (2,)
    """
    vec[X] = -vec[X]
    vec[Y] = -vec[Y]


@njit([sig_unary_f32, sig_unary_f64], cache=True, error_model='numpy')
def vector_negated_2D_nb_core(
    vec):
    """
    Return a negated copy of a 2D vector
    vec: shape (2,)
    returns: shape (2,)
    """
    out = np.empty(2, dtype=vec.dtype)
    out[X] = -vec[X]
    out[Y] = -vec[Y]

    return out


@njit([sig_binary_f32, sig_binary_f64], cache=True, error_model='numpy')
def vector_projection_2D_nb_core(
    vec_a,
    vec_b):
    """
    Project vector A onto vector B: proj_B(A) = (A·B/|B|²) * B
    vec_a, vec_b: shape (2,)
    returns: shape (2,), NaN/inf components when B is the zero vector
    """
    a_dot_b = vec_a[X] * vec_b[X] + vec_a[Y] * vec_b[Y]
    b_dot_b = vec_b[X] * vec_b[X] + vec_b[Y] * vec_b[Y]
    factor = a_dot_b / b_dot_b

    out = np.empty(2, dtype=vec_b.dtype)
    out[X] = vec_b[X] * factor
    out[Y] = vec_b[Y] * factor

    return out


@njit([sig_unary_f32, sig_unary_f64], cache=True, error_model='numpy')
def vector_copy_2D_nb_core(
    vec):
    """
    Independent copy of a 2D vector
    vec: shape (2,)
    returns: shape (2,)
    """
    out = np.empty(2, dtype=vec.dtype)
    out[X] = vec[X]
    out[Y] = vec[Y]

    return out


@njit([sig_tol_equals_f32, sig_tol_equals_f64], cache=True, error_model='numpy')
def vector_tol_equals_2D_nb_core(
    vec1,
    vec2,
    tol):
    """
    Check whether two 2D vectors are equal within a tolerance
    vec1, vec2: shape (2,)
    tol: per-component absolute bound (strict)
    returns: |x1 - x2| < tol and |y1 - y2| < tol
    """
    x_dif = abs(vec1[X] - vec2[X])
    y_dif = abs(vec1[Y] - vec2[Y])

    return x_dif < tol and y_dif < tol
