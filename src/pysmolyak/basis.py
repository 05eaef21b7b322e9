"""Chebyshev polynomials of the first and second kind.

Polynomials are generated by the three-term recurrence

.. math::

    P_0(x) = 1, \\quad P_1(x) = c x, \\quad P_n(x) = 2x P_{n-1}(x) - P_{n-2}(x)

with ``c = 1`` for the first kind (``T_n``) and ``c = 2`` for the second
kind (``U_n``). The recurrence is cheap when many degrees are needed at
once and, unlike ``cos(n arccos x)``, is defined for every real ``x``.

References
----------
- Mason & Handscomb (2003), "Chebyshev Polynomials", Chapman & Hall/CRC
"""

from __future__ import annotations

from typing import Tuple

import numpy as np


def _check_degrees(degrees) -> Tuple[np.ndarray, bool]:
    """Return degrees as a 1-D int array plus a flag for scalar input."""
    arr = np.asarray(degrees)
    is_scalar = arr.ndim == 0
    arr = np.atleast_1d(arr)
    if arr.ndim != 1:
        raise ValueError(f"degrees must be an int or a 1-D sequence, got shape {arr.shape}")
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        if not np.issubdtype(arr.dtype, np.number) or np.any(np.mod(arr, 1) != 0):
            raise ValueError(f"degrees must be integers, got {degrees!r}")
    arr = arr.astype(np.int64)
    if np.any(arr < 0):
        raise ValueError(f"degrees must be non-negative, got {degrees!r}")
    return arr, is_scalar


def _check_points(x) -> Tuple[np.ndarray, bool]:
    """Return x as a 1-D float array plus a flag for scalar input."""
    arr = np.asarray(x, dtype=float)
    if arr.ndim > 1:
        raise ValueError(f"x must be a scalar or a 1-D sequence, got shape {arr.shape}")
    return np.atleast_1d(arr), arr.ndim == 0


def _recurrence_table(x: np.ndarray, max_degree: int, second_kind: bool) -> np.ndarray:
    """Columns P_0..P_max_degree evaluated at x, shape (len(x), max_degree + 1)."""
    table = np.empty((x.shape[0], max_degree + 1))
    table[:, 0] = 1.0
    if max_degree >= 1:
        table[:, 1] = 2.0 * x if second_kind else x
    for k in range(2, max_degree + 1):
        table[:, k] = 2.0 * x * table[:, k - 1] - table[:, k - 2]
    return table


def _evaluate(degrees, x, second_kind: bool):
    degs, deg_scalar = _check_degrees(degrees)
    pts, x_scalar = _check_points(x)
    max_degree = int(degs.max()) if degs.size else 0
    values = _recurrence_table(pts, max_degree, second_kind)[:, degs]

    if deg_scalar and x_scalar:
        return float(values[0, 0])
    if deg_scalar:
        return values[:, 0]
    if x_scalar:
        return values[0, :]
    return values


def chebyshev_t(degrees, x):
    """Evaluate Chebyshev polynomials of the first kind, T_n(x).

    Parameters
    ----------
    degrees : int or sequence of int
        Polynomial degree(s), all non-negative.
    x : float or sequence of float
        Evaluation point(s).

    Returns
    -------
    float or ndarray
        A float when both arguments are scalars, a 1-D array when exactly
        one is a sequence, and a matrix of shape ``(len(x), len(degrees))``
        when both are.

    Raises
    ------
    ValueError
        If any degree is negative or not an integer.

    Examples
    --------
    >>> chebyshev_t(3, 0.5)
    -1.0
    >>> chebyshev_t([0, 1, 2], 0.0).tolist()
    [1.0, 0.0, -1.0]
    """
    return _evaluate(degrees, x, second_kind=False)


def chebyshev_u(degrees, x):
    """Evaluate Chebyshev polynomials of the second kind, U_n(x).

    Same argument and return conventions as :func:`chebyshev_t`.

    Examples
    --------
    >>> chebyshev_u([0, 1, 2], 0.5).tolist()
    [1.0, 1.0, 0.0]
    """
    return _evaluate(degrees, x, second_kind=True)


def chebyshev_t_trig(n: int, x):
    """Evaluate T_n(x) = cos(n arccos x), falling back to the recurrence off [-1, 1].

    ``arccos`` is undefined outside [-1, 1]; those points are evaluated with
    :func:`chebyshev_t` instead, so the result is finite for every real x.
    """
    degs, deg_scalar = _check_degrees(n)
    if not deg_scalar:
        raise ValueError("chebyshev_t_trig takes a single degree")
    pts, x_scalar = _check_points(x)
    n = int(degs[0])

    out = np.empty_like(pts)
    inside = np.abs(pts) <= 1.0
    out[inside] = np.cos(n * np.arccos(pts[inside]))
    if not inside.all():
        out[~inside] = chebyshev_t(n, pts[~inside])

    return float(out[0]) if x_scalar else out


def chebyshev_vandermonde(x, degree: int) -> np.ndarray:
    """Matrix whose column k is T_k evaluated at x, for k = 0..degree."""
    if int(degree) != degree or degree < 0:
        raise ValueError(f"degree must be a non-negative integer, got {degree}")
    pts, _ = _check_points(x)
    return _recurrence_table(pts, int(degree), second_kind=False)


def chebyshev_extrema(n_points: int) -> np.ndarray:
    """Extrema of T_{n-1} in ascending order: -cos(pi j / (n - 1)), j = 0..n-1.

    A single point is the midpoint ``[0.0]``. Values within 1e-12 of zero
    are snapped to exactly zero so that nested sets share that node.
    """
    if int(n_points) != n_points or n_points < 1:
        raise ValueError(f"n_points must be a positive integer, got {n_points}")
    n_points = int(n_points)
    if n_points == 1:
        return np.array([0.0])
    zeta = -np.cos(np.pi * np.arange(n_points) / (n_points - 1))
    zeta[np.abs(zeta) < 1e-12] = 0.0
    return zeta


def _check_interval(a: float, b: float) -> None:
    if a >= b:
        raise ValueError(f"Domain bounds must satisfy a < b, got [{a}, {b}]")


def to_canonical(x, a: float, b: float):
    """Map x from [a, b] onto [-1, 1]: z = (2x - a - b) / (b - a)."""
    _check_interval(a, b)
    z = (2.0 * np.asarray(x, dtype=float) - a - b) / (b - a)
    return float(z) if z.ndim == 0 else z


def from_canonical(z, a: float, b: float):
    """Map z from [-1, 1] back onto [a, b]; inverse of :func:`to_canonical`."""
    _check_interval(a, b)
    x = 0.5 * (a + b) + 0.5 * (b - a) * np.asarray(z, dtype=float)
    return float(x) if x.ndim == 0 else x
