"""Fit and evaluate Smolyak-Chebyshev interpolants."""

from __future__ import annotations

import numpy as np

from pysmolyak._linalg import DEFAULT_RCOND, solve_least_squares
from pysmolyak.polynomial import smolyak_polynomial_basis


def smolyak_fit(grid, d: int, mu_max: int, index_subset, function_values,
                rcond: float = DEFAULT_RCOND) -> np.ndarray:
    """Solve for the coefficients of the Smolyak interpolant.

    Solves ``B @ c = function_values`` where ``B`` is the basis matrix of
    ``index_subset`` evaluated at ``grid``. On the subset's own grid ``B`` is
    square and the solve is exact; extra sample points give a least-squares
    fit.

    Parameters
    ----------
    grid : array_like
        Sample points of shape (n_points, d), usually from
        :func:`pysmolyak.grid.smolyak_grid`.
    d : int
        Number of dimensions.
    mu_max : int
        Level the index subset was generated with.
    index_subset : array_like
        Integer array of shape (n_basis, d).
    function_values : array_like
        Samples at ``grid``, shape (n_points,) or (n_points, k).
    rcond : float, optional
        Relative singular-value cutoff for the rank test.

    Returns
    -------
    ndarray
        Coefficients of shape (n_basis,) or (n_basis, k).

    Raises
    ------
    ValueError
        If ``function_values`` does not have one row per point or contains
        NaN or Inf.
    RankDeficientSystemError
        If the basis matrix does not have full column rank.
    """
    basis = smolyak_polynomial_basis(grid, d, mu_max, index_subset)
    values = np.asarray(function_values, dtype=float)
    if values.ndim not in (1, 2) or values.shape[0] != basis.shape[0]:
        raise ValueError(
            f"function_values has shape {values.shape}; expected "
            f"({basis.shape[0]},) to match the number of grid points"
        )
    if not np.isfinite(values).all():
        raise ValueError("function_values contains NaN or Inf")

    return solve_least_squares(basis, values, rcond=rcond)


def smolyak_evaluate(query_points, d: int, mu_max: int, index_subset,
                     coefficients) -> np.ndarray:
    """Evaluate a fitted Smolyak interpolant at arbitrary points in [-1, 1]^d.

    Returns
    -------
    ndarray
        Values of shape (n_points,) or (n_points, k).
    """
    basis = smolyak_polynomial_basis(query_points, d, mu_max, index_subset)
    coeffs = np.asarray(coefficients, dtype=float)
    if coeffs.shape[0] != basis.shape[1]:
        raise ValueError(
            f"Got {coeffs.shape[0]} coefficients for {basis.shape[1]} basis functions"
        )
    return basis @ coeffs
