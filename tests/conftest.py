"""Shared test fixtures for PySmolyak tests."""

import math

import numpy as np
import pytest

from pysmolyak import (
    SmolyakApproximation,
    smolyak_anisotropic_index_set,
    smolyak_grid,
    smolyak_isotropic_index_set,
)


# ---------------------------------------------------------------------------
# Test functions
# ---------------------------------------------------------------------------

def gaussian_bump_2d(x1, x2):
    """2 x1 exp(-4 x1^2 - 16 x2^2), vectorised."""
    return 2.0 * x1 * np.exp(-4.0 * x1 ** 2 - 16.0 * x2 ** 2)


def exp_sum_2d(x, _):
    """exp(x) * cos(y)"""
    return math.exp(x[0]) * math.cos(x[1])


def sin_sum_3d(x, _):
    """sin(x) + sin(y) + sin(z)"""
    return math.sin(x[0]) + math.sin(x[1]) + math.sin(x[2])


# ---------------------------------------------------------------------------
# Index-set and grid fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module")
def subset_5_5():
    """Anisotropic index subset for level vector [5, 5] and its grid."""
    iso = smolyak_isotropic_index_set(2, 5)
    subset = smolyak_anisotropic_index_set(iso, [5, 5])
    grid = smolyak_grid(2, 5, subset)
    return subset, grid


@pytest.fixture(scope="module")
def subset_4_2_3():
    """Anisotropic 3D index subset for level vector [4, 2, 3] and its grid."""
    iso = smolyak_isotropic_index_set(3, 4)
    subset = smolyak_anisotropic_index_set(iso, [4, 2, 3])
    grid = smolyak_grid(3, 4, subset)
    return subset, grid


# ---------------------------------------------------------------------------
# Approximation fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module")
def smolyak_exp_2d():
    """Pre-built 2D exp(x)cos(y) on [0, 1] x [-1, 1], levels [4, 4]."""
    sm = SmolyakApproximation(exp_sum_2d, 2, [[0, 1], [-1, 1]], [4, 4])
    sm.build(verbose=False)
    return sm


@pytest.fixture(scope="module")
def smolyak_sin_3d():
    """Pre-built 3D sin(x)+sin(y)+sin(z) on [-1, 1] x [-1, 1] x [1, 3], levels [4, 3, 3]."""
    sm = SmolyakApproximation(
        sin_sum_3d, 3, [[-1, 1], [-1, 1], [1, 3]], [4, 3, 3]
    )
    sm.build(verbose=False)
    return sm
