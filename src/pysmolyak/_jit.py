"""Numba JIT-compiled kernels for Chebyshev series evaluation."""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def clenshaw_jit(coefficients: np.ndarray, x: np.ndarray) -> np.ndarray:
    """Evaluate sum_j c_j T_j(x) with the Clenshaw backward recurrence.

    Parameters
    ----------
    coefficients : ndarray
        Chebyshev coefficients c_0, ..., c_m.
    x : ndarray
        Evaluation points of shape (n,).

    Returns
    -------
    ndarray
        Series values of shape (n,).
    """
    m = coefficients.shape[0] - 1
    out = np.empty(x.shape[0])

    for i in range(x.shape[0]):
        two_x = 2.0 * x[i]
        b0 = 0.0
        b1 = 0.0
        b2 = 0.0
        for j in range(m, -1, -1):
            b2 = b1
            b1 = b0
            b0 = coefficients[j] + two_x * b1 - b2
        out[i] = 0.5 * (coefficients[0] + b0 - b2)

    return out
