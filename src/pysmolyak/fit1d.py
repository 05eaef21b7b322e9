"""One-dimensional Chebyshev least-squares fitting and Clenshaw evaluation.

This is the base case the Smolyak construction builds on: fit the
coefficients of ``sum_k c_k T_k(z)`` to samples ``(x_i, y_i)`` and evaluate
the resulting series without ever forming powers of ``x``.

References
----------
- Clenshaw (1955), "A note on the summation of Chebyshev series",
  Mathematics of Computation 9(51):118-120
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from pysmolyak._jit import clenshaw_jit
from pysmolyak._linalg import DEFAULT_RCOND, solve_least_squares
from pysmolyak.basis import chebyshev_vandermonde, to_canonical
from pysmolyak.exceptions import RankDeficientSystemError


def fit_chebyshev_1d(
    x_grid,
    y_grid,
    degree: int,
    domain: Optional[Tuple[float, float]] = None,
    rcond: float = DEFAULT_RCOND,
) -> np.ndarray:
    """Fit Chebyshev coefficients c_0..c_degree to sampled data.

    Parameters
    ----------
    x_grid : array_like
        Sample locations of shape (n,).
    y_grid : array_like
        Sample values of shape (n,).
    degree : int
        Highest Chebyshev degree ``m``. ``degree=0`` is a constant fit.
    domain : (float, float), optional
        Interval ``[a, b]`` the samples live on. When given, ``x_grid`` is
        mapped onto [-1, 1] before building the basis. When omitted the
        samples are assumed to already lie in [-1, 1].
    rcond : float, optional
        Relative singular-value cutoff for the rank test.

    Returns
    -------
    ndarray
        Coefficients of shape (degree + 1,).

    Raises
    ------
    ValueError
        If the grids differ in length, are not 1-D, or contain NaN or Inf.
    RankDeficientSystemError
        If there are fewer distinct samples than coefficients.

    Examples
    --------
    >>> x = np.linspace(0, 3, 21)
    >>> c = fit_chebyshev_1d(x, np.exp(x), 5, domain=(0, 3))
    >>> c.shape
    (6,)
    """
    x = np.asarray(x_grid, dtype=float)
    y = np.asarray(y_grid, dtype=float)
    if x.ndim != 1 or y.ndim != 1:
        raise ValueError("x_grid and y_grid must be 1-D")
    if x.shape != y.shape:
        raise ValueError(
            f"x_grid has {x.shape[0]} points but y_grid has {y.shape[0]}"
        )
    if not (np.isfinite(x).all() and np.isfinite(y).all()):
        raise ValueError("x_grid or y_grid contains NaN or Inf")

    if domain is not None:
        x = to_canonical(x, *domain)

    n_distinct = np.unique(x).shape[0]
    if n_distinct < degree + 1:
        raise RankDeficientSystemError(
            f"Degree {degree} needs at least {degree + 1} distinct points, "
            f"got {n_distinct}"
        )

    vander = chebyshev_vandermonde(x, degree)
    return solve_least_squares(vander, y, rcond=rcond)


def eval_chebyshev_1d(coefficients, x, domain: Optional[Tuple[float, float]] = None):
    """Evaluate a Chebyshev series with the Clenshaw recurrence.

    Parameters
    ----------
    coefficients : array_like
        Coefficients c_0..c_m, e.g. from :func:`fit_chebyshev_1d`.
    x : float or array_like
        Query point(s).
    domain : (float, float), optional
        Interval the series was fitted on; ``x`` is mapped onto [-1, 1].

    Returns
    -------
    float or ndarray
        Series value(s), matching the shape of ``x``.
    """
    coeffs = np.ascontiguousarray(coefficients, dtype=float)
    if coeffs.ndim != 1 or coeffs.shape[0] == 0:
        raise ValueError("coefficients must be a non-empty 1-D sequence")

    pts = np.asarray(x, dtype=float)
    if domain is not None:
        pts = np.asarray(to_canonical(pts, *domain))

    values = clenshaw_jit(coeffs, np.ascontiguousarray(pts.ravel()))
    if pts.ndim == 0:
        return float(values[0])
    return values.reshape(pts.shape)


class ChebyshevSeries1D:
    """A fitted one-dimensional Chebyshev series on an interval.

    Parameters
    ----------
    coefficients : array_like
        Chebyshev coefficients c_0..c_m.
    domain : (float, float), optional
        Interval the series is defined on. Default is (-1, 1).

    Examples
    --------
    >>> x = np.linspace(-1, 1, 11)
    >>> series = ChebyshevSeries1D.fit(x, x ** 2, 2)
    >>> round(series(0.5), 10)
    0.25
    """

    def __init__(self, coefficients, domain: Tuple[float, float] = (-1.0, 1.0)):
        self.coefficients = np.asarray(coefficients, dtype=float)
        self.domain = (float(domain[0]), float(domain[1]))

    @classmethod
    def fit(cls, x_grid, y_grid, degree: int,
            domain: Optional[Tuple[float, float]] = None,
            rcond: float = DEFAULT_RCOND) -> "ChebyshevSeries1D":
        """Fit a series to samples; ``domain`` defaults to (-1, 1)."""
        coeffs = fit_chebyshev_1d(x_grid, y_grid, degree, domain=domain, rcond=rcond)
        return cls(coeffs, domain if domain is not None else (-1.0, 1.0))

    @property
    def degree(self) -> int:
        return self.coefficients.shape[0] - 1

    def __call__(self, x):
        return eval_chebyshev_1d(self.coefficients, x, domain=self.domain)

    def __repr__(self) -> str:
        lo, hi = self.domain
        return f"ChebyshevSeries1D(degree={self.degree}, domain=[{lo}, {hi}])"
