"""Rank-checked least-squares solve shared by the 1-D and Smolyak fitters."""

from __future__ import annotations

import numpy as np
import scipy.linalg as la

from pysmolyak.exceptions import RankDeficientSystemError

DEFAULT_RCOND = 1e-12


def solve_least_squares(matrix: np.ndarray, rhs: np.ndarray,
                        rcond: float = DEFAULT_RCOND) -> np.ndarray:
    """Solve ``matrix @ c = rhs`` in the least-squares sense.

    The numerical rank is the number of singular values above
    ``rcond * s_max``. A square system of full rank is solved exactly.

    Parameters
    ----------
    matrix : ndarray
        System matrix of shape (n_rows, n_cols).
    rhs : ndarray
        Right-hand side of shape (n_rows,) or (n_rows, k).
    rcond : float, optional
        Relative singular-value cutoff for the rank test.

    Returns
    -------
    ndarray
        Solution of shape (n_cols,) or (n_cols, k).

    Raises
    ------
    RankDeficientSystemError
        If the numerical rank is below ``n_cols``.
    """
    n_rows, n_cols = matrix.shape
    if n_cols == 0:
        raise ValueError("Cannot solve a system with no basis functions")
    if n_rows < n_cols:
        raise RankDeficientSystemError(
            f"Underdetermined system: {n_rows} equations for {n_cols} unknowns"
        )

    coeffs, _, _, sing_vals = la.lstsq(matrix, rhs, lapack_driver="gelsd")
    rank = int(np.sum(sing_vals > rcond * sing_vals[0]))
    if rank < n_cols:
        raise RankDeficientSystemError(
            f"Basis matrix has numerical rank {rank} < {n_cols} columns "
            f"(rcond={rcond:g}, cond={sing_vals[0] / max(sing_vals[-1], 1e-300):.3e})"
        )
    return coeffs
