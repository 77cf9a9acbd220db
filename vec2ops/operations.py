"""
    vec2ops Vector Operations Module

    This module provides the 2D vector operations (length, normalization,
    dot and perpendicular dot products, arithmetic, scaling, projection,
    copying, string forms and tolerance equality) for float32 and float64
    vectors, using Numba kernels for performance. Every operation that can
    update a vector in place comes in two forms: a mutating form and a pure
    ``get_*`` form that returns a new vector.

"""

import os
import logging

import numpy as np
from .constants import *
from .core_functions import *

logger = logging.getLogger(__name__)

_FALSE_VALUES = ("0", "false", "no", "off")
_TRUE_VALUES = ("1", "true", "yes", "on")


def use_numba_from_env() -> bool:
    """Read the numba switch from the VEC2OPS_USE_NUMBA environment variable."""
    value = os.environ.get(USE_NUMBA_ENV, "1").strip().lower()
    if value in _FALSE_VALUES:
        return False
    if value not in _TRUE_VALUES:
        logger.warning("Unrecognised %s=%r, keeping numba enabled",
                       USE_NUMBA_ENV, value)
    return True


class VectorOperations():
    """
    2D vector operations using Numba kernels.

    One instance is bound to a single precision; vectors passed to it are
    numpy arrays of shape (2,) in that precision. Operands that are only
    read may also be tuples or lists, operands that are updated in place
    must be arrays of the instance dtype.
    """

    def __init__(
        self,
        precision: str = DEFAULT_PRECISION,
        use_numba: bool = None) -> None:
        """
        Initialize vector operations.

        Args:
            precision: Numerical precision ('float32' or 'float64')
            use_numba: Whether to run the compiled kernels. None reads the
                       VEC2OPS_USE_NUMBA environment variable (default on).
                       When off, the same kernel bodies run as plain Python.
        """

        if precision not in PRECISIONS:
            raise ValueError("precision must be 'float32' or 'float64'")

        self.precision = precision
        self.use_numba = use_numba_from_env() if use_numba is None else use_numba

        if precision == 'float32':
            self.float_dtype = np.float32
            self.origin = ORIGIN_F32
        else:
            self.float_dtype = np.float64
            self.origin = ORIGIN_F64

        logger.debug("VectorOperations: precision=%s, use_numba=%s",
                     self.precision, self.use_numba)


    def _kernel(self, nb_core):
        if self.use_numba:
            return nb_core
        py_func = nb_core.py_func

        # numpy scalars warn on overflow and 0/0, compiled kernels do not
        def run_silent(*args):
            with np.errstate(all='ignore'):
                return py_func(*args)

        return run_silent


    def _as_vector(
        self,
        vector) -> np.ndarray:
        return np.asarray(vector, dtype=self.float_dtype)


    def vector(
        self,
        x: float,
        y: float) -> np.ndarray:
        """
        New vector (x, y) in the instance precision
        """
        return np.array([x, y], dtype=self.float_dtype)


    def length(
        self,
        vector) -> float:
        """
        Length of a vector, sqrt(x**2 + y**2)
        """
        return self._kernel(vector_length_2D_nb_core)(
            self._as_vector(vector))


    def squared_length(
        self,
        vector) -> float:
        """
        Squared length of a vector. Use it to compare magnitudes
        without a sqrt.
        """
        return self._kernel(vector_squared_length_2D_nb_core)(
            self._as_vector(vector))


    def normalize(
        self,
        vector: np.ndarray) -> None:
        """
        Normalize a vector in place. A zero vector stays zero.
        """
        self._kernel(vector_normalize_2D_nb_core)(vector)


    def get_normalized(
        self,
        vector) -> np.ndarray:
        """
        Normalized copy of a vector
        """
        return self._kernel(vector_normalized_2D_nb_core)(
            self._as_vector(vector))


    def dot(
        self,
        vector_1,
        vector_2) -> float:
        """
        Vector dot product
        """
        return self._kernel(vector_dot_product_2D_nb_core)(
            self._as_vector(vector_1),
            self._as_vector(vector_2))


    def get_normal(
        self,
        vector) -> np.ndarray:
        """
        Left normal of a vector, (-y, x)
        """
        return self._kernel(vector_normal_2D_nb_core)(
            self._as_vector(vector))


    def add(
        self,
        vector_1: np.ndarray,
        vector_2) -> None:
        """
        vector_1 += vector_2. Passing the same array twice doubles it.
        """
        self._kernel(vector_add_2D_nb_core)(
            vector_1,
            self._as_vector(vector_2))


    def get_added(
        self,
        vector_1,
        vector_2) -> np.ndarray:
        """
        Component-wise sum of two vectors
        """
        return self._kernel(vector_added_2D_nb_core)(
            self._as_vector(vector_1),
            self._as_vector(vector_2))


    def sub(
        self,
        vector_1: np.ndarray,
        vector_2) -> None:
        """
        vector_1 -= vector_2
        """
        self._kernel(vector_sub_2D_nb_core)(
            vector_1,
            self._as_vector(vector_2))


    def get_subed(
        self,
        vector_1,
        vector_2) -> np.ndarray:
        """
        Component-wise difference, vector_1 - vector_2
        """
        return self._kernel(vector_subbed_2D_nb_core)(
            self._as_vector(vector_1),
            self._as_vector(vector_2))


    def perp_dot_product(
        self,
        vector_1,
        vector_2) -> float:
        """
        2D cross product, x1*y2 - y1*x2. Positive when vector_2 lies to
        the left of vector_1, negative to the right, zero when parallel.
        """
        return self._kernel(vector_perp_dot_product_2D_nb_core)(
            self._as_vector(vector_1),
            self._as_vector(vector_2))


    def get_scaled(
        self,
        vector,
        mul: float) -> np.ndarray:
        """
        Copy of a vector scaled by mul
        """
        return self._kernel(vector_scaled_2D_nb_core)(
            self._as_vector(vector),
            self.float_dtype(mul))


    def scale_by(
        self,
        vector: np.ndarray,
        mul: float) -> None:
        """
        Scale a vector by mul in place
        """
        self._kernel(vector_scale_by_2D_nb_core)(
            vector,
            self.float_dtype(mul))


    def negate(
        self,
        vector: np.ndarray) -> None:
        """
        Negate a vector in place
        """
        self._kernel(vector_negate_2D_nb_core)(vector)


    def get_negated(
        self,
        vector) -> np.ndarray:
        """
        Negated copy of a vector
        """
        return self._kernel(vector_negated_2D_nb_core)(
            self._as_vector(vector))


    def vec_projection(
        self,
        vector_1,
        vector_2) -> np.ndarray:
        """
        Project vector 1 onto vector 2. Projecting onto the zero vector
        gives NaN/inf components.
        """
        return self._kernel(vector_projection_2D_nb_core)(
            self._as_vector(vector_1),
            self._as_vector(vector_2))


    def get_copy(
        self,
        vector) -> np.ndarray:
        """
        Independent copy of a vector
        """
        return self._kernel(vector_copy_2D_nb_core)(
            self._as_vector(vector))


    def _format_component(
        self,
        value) -> str:
        value = self.float_dtype(value)
        if np.isnan(value):
            return "np.nan"
        if np.isinf(value):
            return "np.inf" if value > 0 else "-np.inf"
        # shortest fixed-point text that reads back to the same value
        return np.format_float_positional(value, unique=True, trim='0')


    def repr(
        self,
        vector) -> str:
        """
        Debug string that rebuilds the vector exactly when evaluated with
        numpy imported as np, e.g. ``np.array([1.0, 2.5], dtype=np.float64)``
        """
        return "np.array([%s, %s], dtype=np.%s)" % (
            self._format_component(vector[X]),
            self._format_component(vector[Y]),
            self.precision)


    def to_string(
        self,
        vector) -> str:
        """
        Human-readable form, ``[x, y]`` with six decimals
        """
        return "[%f, %f]" % (vector[X], vector[Y])


    def tol_equals(
        self,
        vector_1,
        vector_2,
        tol: float) -> bool:
        """
        Whether both components differ by strictly less than tol
        """
        return bool(self._kernel(vector_tol_equals_2D_nb_core)(
            self._as_vector(vector_1),
            self._as_vector(vector_2),
            self.float_dtype(tol)))


# Double and single precision namespaces
vec2d = VectorOperations(precision='float64')
vec2f = VectorOperations(precision='float32')
