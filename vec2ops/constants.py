import numpy as np
from numba import types

##############################################################################
# Global constants
##############################################################################

# Constants
X, Y = 0, 1
PRECISIONS = ('float32', 'float64')
DEFAULT_PRECISION = 'float64'

# Environment switch for the numba kernels ("0", "false", "no", "off" disable)
USE_NUMBA_ENV = "VEC2OPS_USE_NUMBA"

# Origin vectors, read-only
ORIGIN_F64 = np.zeros(2, dtype=np.float64)
ORIGIN_F64.flags.writeable = False
ORIGIN_F32 = np.zeros(2, dtype=np.float32)
ORIGIN_F32.flags.writeable = False


##############################################################################
# Array types
##############################################################################

# Operands that are only read (accepts writable and read-only arrays)
ro_vec_f32 = types.Array(types.float32, 1, 'A', readonly=True)
ro_vec_f64 = types.Array(types.float64, 1, 'A', readonly=True)

# Operands that are updated in place
rw_vec_f32 = types.float32[:]
rw_vec_f64 = types.float64[:]


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Vector length / squared length signatures
sig_len_f32 = types.float32(
    ro_vec_f32
    )
sig_len_f64 = types.float64(
    ro_vec_f64
    )

# Dot product and perpendicular dot product signatures
sig_dot_f32 = types.float32(
    ro_vec_f32,
    ro_vec_f32
    )
sig_dot_f64 = types.float64(
    ro_vec_f64,
    ro_vec_f64
    )

# Unary pure signatures (normalized, normal, negated, copy)
sig_unary_f32 = types.float32[:](
    ro_vec_f32
    )
sig_unary_f64 = types.float64[:](
    ro_vec_f64
    )

# Binary pure signatures (added, subbed, projection)
sig_binary_f32 = types.float32[:](
    ro_vec_f32,
    ro_vec_f32
    )
sig_binary_f64 = types.float64[:](
    ro_vec_f64,
    ro_vec_f64
    )

# Scaled copy signatures
sig_scaled_f32 = types.float32[:](
    ro_vec_f32,
    types.float32
    )
sig_scaled_f64 = types.float64[:](
    ro_vec_f64,
    types.float64
    )

# In-place unary signatures (normalize, negate)
sig_inplace_unary_f32 = types.void(
    rw_vec_f32
    )
sig_inplace_unary_f64 = types.void(
    rw_vec_f64
    )

# In-place binary signatures (add, sub)
sig_inplace_binary_f32 = types.void(
    rw_vec_f32,
    ro_vec_f32
    )
sig_inplace_binary_f64 = types.void(
    rw_vec_f64,
    ro_vec_f64
    )

# In-place scale signatures
sig_inplace_scale_f32 = types.void(
    rw_vec_f32,
    types.float32
    )
sig_inplace_scale_f64 = types.void(
    rw_vec_f64,
    types.float64
    )

# Tolerance equality signatures
sig_tol_equals_f32 = types.boolean(
    ro_vec_f32,
    ro_vec_f32,
    types.float32
    )
sig_tol_equals_f64 = types.boolean(
    ro_vec_f64,
    ro_vec_f64,
    types.float64
    )
