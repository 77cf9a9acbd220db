"""
vec2ops 2D Vector Operations Module

Provides optimized operations on two-component vectors in double and single
precision, including length, normalization, dot and perpendicular dot
products, arithmetic, scaling, projection, copying and tolerance equality.

This module is designed as a leaf dependency for higher-level geometry code.
"""

# Import main classes
from .operations import VectorOperations, vec2d, vec2f, use_numba_from_env

# Origin constants
from .constants import ORIGIN_F32, ORIGIN_F64

# Import core functions for advanced users
from .core_functions import (
    vector_length_2D_nb_core,
    vector_squared_length_2D_nb_core,
    vector_normalize_2D_nb_core,
    vector_normalized_2D_nb_core,
    vector_dot_product_2D_nb_core,
    vector_normal_2D_nb_core,
    vector_add_2D_nb_core,
    vector_added_2D_nb_core,
    vector_sub_2D_nb_core,
    vector_subbed_2D_nb_core,
    vector_perp_dot_product_2D_nb_core,
    vector_scaled_2D_nb_core,
    vector_scale_by_2D_nb_core,
    vector_negate_2D_nb_core,
    vector_negated_2D_nb_core,
    vector_projection_2D_nb_core,
    vector_copy_2D_nb_core,
    vector_tol_equals_2D_nb_core
)

# Version info
__version__ = "0.1.0"
__author__ = "vec2ops developers"

# Define public API
__all__ = [
    'VectorOperations',
    'vec2d',
    'vec2f',
    'use_numba_from_env',
    'ORIGIN_F32',
    'ORIGIN_F64',
    # Core functions for advanced use
    'vector_length_2D_nb_core',
    'vector_squared_length_2D_nb_core',
    'vector_normalize_2D_nb_core',
    'vector_normalized_2D_nb_core',
    'vector_dot_product_2D_nb_core',
    'vector_normal_2D_nb_core',
    'vector_add_2D_nb_core',
    'vector_added_2D_nb_core',
    'vector_sub_2D_nb_core',
    'vector_subbed_2D_nb_core',
    'vector_perp_dot_product_2D_nb_core',
    'vector_scaled_2D_nb_core',
    'vector_scale_by_2D_nb_core',
    'vector_negate_2D_nb_core',
    'vector_negated_2D_nb_core',
    'vector_projection_2D_nb_core',
    'vector_copy_2D_nb_core',
    'vector_tol_equals_2D_nb_core'
]
