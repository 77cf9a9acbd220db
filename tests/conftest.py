import numpy as np
import pytest

from vec2ops import VectorOperations


@pytest.fixture(params=[
    ('float64', True),
    ('float32', True),
    ('float64', False),
    ('float32', False)],
    ids=['f64-numba', 'f32-numba', 'f64-python', 'f32-python'])
def ops(request):
    precision, use_numba = request.param
    return VectorOperations(precision=precision, use_numba=use_numba)


@pytest.fixture
def rng():
    return np.random.default_rng(0xf00d)
