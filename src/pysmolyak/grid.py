"""Smolyak sparse grids built from nested Chebyshev extrema.

The 1-D building block is the nested sequence in which the first ``m(L)``
entries are exactly the extrema of ``T_{m(L)-1}``: level 0 is ``{0}``,
level 1 adds ``-1`` and ``1``, and each further level adds the extrema at
odd positions of the next, twice-as-fine set. Row ``i`` of a Smolyak grid
is then the lookup of row ``i`` of the index set into that sequence.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from pysmolyak.basis import chebyshev_extrema
from pysmolyak.exceptions import InvalidDimensionError, InvalidLevelError
from pysmolyak.index_set import _check_dimension, _check_level, num_points_at_level


def nested_chebyshev_points(mu_max: int) -> np.ndarray:
    """Nested 1-D Chebyshev extrema ordered by element, ``m(mu_max)`` entries.

    Examples
    --------
    >>> nested_chebyshev_points(1).tolist()
    [0.0, -1.0, 1.0]
    """
    mu_max = _check_level(mu_max, "mu_max")
    points: List[float] = [0.0]
    if mu_max >= 1:
        points.extend([-1.0, 1.0])
    for level in range(2, mu_max + 1):
        extrema = chebyshev_extrema(num_points_at_level(level))
        points.extend(extrema[1::2].tolist())
    return np.asarray(points)


def check_index_subset(index_subset, d: int, mu_max: int) -> np.ndarray:
    """Validate an index subset against ``d`` and ``mu_max``; return it as an int array.

    Raises
    ------
    InvalidDimensionError
        If the subset is not 2-D with ``d`` columns.
    InvalidLevelError
        If an element is negative or not available at level ``mu_max``.
    """
    elems = np.asarray(index_subset, dtype=np.int64)
    if elems.ndim != 2 or elems.shape[1] != d:
        raise InvalidDimensionError(
            f"index_subset must have shape (n_elements, {d}), got {elems.shape}"
        )
    if elems.size:
        n_avail = num_points_at_level(mu_max)
        if elems.min() < 0 or elems.max() >= n_avail:
            raise InvalidLevelError(
                f"index_subset elements must lie in [0, {n_avail - 1}] "
                f"for mu_max={mu_max}"
            )
    return elems


def smolyak_grid(d: int, mu_max: int, index_subset) -> np.ndarray:
    """Construct the Smolyak grid for an (isotropic or anisotropic) index subset.

    Parameters
    ----------
    d : int
        Number of dimensions.
    mu_max : int
        Level the index subset was generated with.
    index_subset : array_like
        Integer array of shape (n, d).

    Returns
    -------
    ndarray
        Points in [-1, 1]^d, shape (n, d); row ``i`` corresponds to row ``i``
        of ``index_subset``.

    Raises
    ------
    InvalidDimensionError
        If ``d < 1`` or the subset does not have ``d`` columns.
    InvalidLevelError
        If ``mu_max`` is out of range or an element exceeds it.
    ValueError
        If the subset repeats a row. Distinct rows always give distinct
        points, so a duplicate-free subset yields a duplicate-free grid.

    Examples
    --------
    >>> from pysmolyak.index_set import smolyak_isotropic_index_set
    >>> smolyak_grid(2, 1, smolyak_isotropic_index_set(2, 1)).tolist()
    [[0.0, 0.0], [0.0, -1.0], [0.0, 1.0], [-1.0, 0.0], [1.0, 0.0]]
    """
    d = _check_dimension(d)
    mu_max = _check_level(mu_max, "mu_max")
    elems = check_index_subset(index_subset, d, mu_max)
    if elems.shape[0] > 1 and np.unique(elems, axis=0).shape[0] != elems.shape[0]:
        raise ValueError("index_subset contains duplicate rows")

    return nested_chebyshev_points(mu_max)[elems]


def _domain_bounds(domain: Sequence[Tuple[float, float]], d: int) -> Tuple[np.ndarray, np.ndarray]:
    bounds = np.asarray(domain, dtype=float)
    if bounds.shape != (d, 2):
        raise InvalidDimensionError(
            f"domain must hold {d} (lo, hi) pairs, got shape {bounds.shape}"
        )
    lo, hi = bounds[:, 0], bounds[:, 1]
    if np.any(lo >= hi):
        raise ValueError(f"Domain bounds must satisfy lo < hi, got {domain}")
    return lo, hi


def domain_map(points, domain: Sequence[Tuple[float, float]]) -> np.ndarray:
    """Map points of shape (n, d) from [-1, 1]^d onto the box ``domain``."""
    pts = np.atleast_2d(np.asarray(points, dtype=float))
    lo, hi = _domain_bounds(domain, pts.shape[1])
    return 0.5 * (lo + hi) + 0.5 * (hi - lo) * pts


def cube_map(points, domain: Sequence[Tuple[float, float]]) -> np.ndarray:
    """Map points of shape (n, d) from the box ``domain`` onto [-1, 1]^d."""
    pts = np.atleast_2d(np.asarray(points, dtype=float))
    lo, hi = _domain_bounds(domain, pts.shape[1])
    return (2.0 * pts - lo - hi) / (hi - lo)
