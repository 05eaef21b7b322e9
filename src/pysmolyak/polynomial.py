"""Multivariate Smolyak-Chebyshev basis evaluation.

Basis function ``j`` belongs to row ``j`` of the index subset
``(e_1, ..., e_d)`` and is the product ``T_{e_1}(x_1) * ... * T_{e_d}(x_d)``.
Element ``e`` names the same position in the nested extrema sequence used
by :func:`pysmolyak.grid.smolyak_grid`, so evaluating the basis on the grid
of the same subset gives a square, invertible matrix.
"""

from __future__ import annotations

import warnings

import numpy as np

from pysmolyak.basis import chebyshev_vandermonde
from pysmolyak.exceptions import DomainOutOfRangeWarning, InvalidDimensionError
from pysmolyak.grid import check_index_subset
from pysmolyak.index_set import _check_dimension, _check_level


def as_point_array(points, d: int) -> np.ndarray:
    """Coerce query points to a float array of shape (n, d).

    A 1-D input is a single point when ``d > 1`` and a batch of scalars
    when ``d == 1``.
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim == 0:
        pts = pts.reshape(1, 1)
    elif pts.ndim == 1:
        pts = pts.reshape(-1, 1) if d == 1 else pts.reshape(1, -1)
    if pts.ndim != 2 or pts.shape[1] != d:
        raise InvalidDimensionError(
            f"points must have shape (n_points, {d}), got {np.shape(points)}"
        )
    return pts


def smolyak_polynomial_basis(points, d: int, mu_max: int, index_subset) -> np.ndarray:
    """Evaluate every Smolyak basis function at every point.

    Parameters
    ----------
    points : array_like
        Query points in [-1, 1]^d, shape (n_points, d). They need not be
        grid points.
    d : int
        Number of dimensions.
    mu_max : int
        Level the index subset was generated with.
    index_subset : array_like
        Integer array of shape (n_basis, d).

    Returns
    -------
    ndarray
        Basis matrix of shape (n_points, n_basis).

    Raises
    ------
    InvalidDimensionError
        If ``points`` or ``index_subset`` do not have ``d`` columns.
    InvalidLevelError
        If ``mu_max`` is out of range or an element exceeds it.

    Warns
    -----
    DomainOutOfRangeWarning
        If a coordinate lies outside [-1, 1]. The values are still computed;
        they grow quickly away from the interval.
    """
    d = _check_dimension(d)
    mu_max = _check_level(mu_max, "mu_max")
    elems = check_index_subset(index_subset, d, mu_max)
    pts = as_point_array(points, d)

    if np.any(np.abs(pts) > 1.0 + 1e-12):
        warnings.warn(
            "Query points outside [-1, 1]^d; Chebyshev polynomials diverge there.",
            DomainOutOfRangeWarning,
            stacklevel=2,
        )

    n_points, n_basis = pts.shape[0], elems.shape[0]
    basis = np.ones((n_points, n_basis))
    if n_basis == 0:
        return basis

    max_degree = int(elems.max())
    for k in range(d):
        table = chebyshev_vandermonde(pts[:, k], max_degree)
        basis *= table[:, elems[:, k]]

    return basis
