"""Smolyak-Chebyshev approximation of functions on a box.

Ties the pipeline together: anisotropic index set, Smolyak grid mapped onto
the user's domain, function evaluation at the grid points, and the
coefficient solve. The resulting object evaluates the interpolant anywhere
in the domain.

References
----------
- Judd, Maliar, Maliar & Valero (2014), "Smolyak method for solving dynamic
  economic models: Lagrange interpolation, anisotropic grid and adaptive
  domain", Journal of Economic Dynamics and Control 44:92-123
"""

from __future__ import annotations

import os
import pickle
import time
import warnings
from typing import Callable, List, Optional, Tuple

import numpy as np

from pysmolyak._linalg import DEFAULT_RCOND
from pysmolyak.grid import cube_map, domain_map, smolyak_grid
from pysmolyak.index_set import (
    _check_dimension,
    check_level_vector,
    element_levels,
    smolyak_index_set,
    tensor_product_size,
)
from pysmolyak.polynomial import as_point_array
from pysmolyak.solver import smolyak_evaluate, smolyak_fit


class SmolyakApproximation:
    """Multi-dimensional Chebyshev approximation on an anisotropic Smolyak grid.

    Parameters
    ----------
    function : callable or None
        Function to approximate. Signature: ``f(point, data) -> float``
        where ``point`` is a list of floats and ``data`` is arbitrary
        additional data (passed as None).
    num_dimensions : int
        Number of input dimensions.
    domain : list of (float, float)
        Bounds [(lo, hi), ...] for each dimension.
    levels : list of int
        Approximation level per dimension, each in ``[0, MAX_LEVEL]``.
    rcond : float, optional
        Relative singular-value cutoff for the coefficient solve.

    Examples
    --------
    >>> import math
    >>> def f(x, _):
    ...     return math.exp(x[0]) * math.cos(x[1])
    >>> sm = SmolyakApproximation(f, 2, [[0, 1], [-1, 1]], [4, 4])
    >>> sm.build(verbose=False)
    >>> abs(sm.eval([0.3, 0.2]) - f([0.3, 0.2], None)) < 1e-4
    True
    """

    def __init__(
        self,
        function: Optional[Callable],
        num_dimensions: int,
        domain: List[Tuple[float, float]],
        levels: List[int],
        rcond: float = DEFAULT_RCOND,
    ):
        self.function = function
        self.num_dimensions = _check_dimension(num_dimensions)
        self.levels = check_level_vector(levels, self.num_dimensions)
        self.domain = [[float(lo), float(hi)] for lo, hi in domain]
        self.mu_max = max(self.levels)
        self.rcond = rcond

        self.index_set = smolyak_index_set(self.levels)
        self.cube_grid = smolyak_grid(self.num_dimensions, self.mu_max, self.index_set)
        self.grid = domain_map(self.cube_grid, self.domain)

        self.values: np.ndarray | None = None
        self.coefficients: np.ndarray | None = None
        self.build_time: float = 0.0
        self.n_evaluations: int = 0
        self._cached_error_estimate: float | None = None

    @property
    def n_points(self) -> int:
        return self.index_set.shape[0]

    def build(self, verbose: bool = True) -> None:
        """Evaluate the function on the Smolyak grid and solve for coefficients.

        Parameters
        ----------
        verbose : bool, optional
            If True, print build progress. Default is True.
        """
        if self.function is None:
            raise RuntimeError(
                "Cannot build: no function assigned. "
                "This object was created via from_values() or load()."
            )
        if verbose:
            print(f"Building {self.num_dimensions}D Smolyak approximation "
                  f"(levels={self.levels}, {self.n_points:,} evaluations)...")

        start = time.time()
        values = np.array([self.function(list(point), None) for point in self.grid],
                          dtype=float)
        self.n_evaluations = self.n_points
        self._solve(values)
        self.build_time = time.time() - start

        if verbose:
            print(f"  Built in {self.build_time:.3f}s "
                  f"({self.n_points} coefficients vs "
                  f"{tensor_product_size(self.levels):,} for the tensor grid)")

    def _solve(self, values: np.ndarray) -> None:
        coefficients = smolyak_fit(
            self.cube_grid, self.num_dimensions, self.mu_max, self.index_set,
            values, rcond=self.rcond,
        )
        self.values = values
        self.coefficients = coefficients
        self._cached_error_estimate = None

    def eval(self, point: List[float]) -> float:
        """Evaluate the interpolant at a single point of the domain.

        Raises
        ------
        RuntimeError
            If ``build()`` has not been called.
        """
        pt = np.asarray(point, dtype=float)
        if pt.shape != (self.num_dimensions,):
            raise ValueError(
                f"point must have {self.num_dimensions} coordinates, got shape {pt.shape}"
            )
        return float(self.vectorized_eval_batch(pt.reshape(1, -1))[0])

    def vectorized_eval_batch(self, points: np.ndarray) -> np.ndarray:
        """Evaluate at multiple points.

        Parameters
        ----------
        points : ndarray
            Points of shape (N, num_dimensions), in domain coordinates.

        Returns
        -------
        ndarray
            Results of shape (N,).
        """
        if self.coefficients is None:
            raise RuntimeError("Call build() first")
        pts = as_point_array(points, self.num_dimensions)
        return smolyak_evaluate(
            cube_map(pts, self.domain), self.num_dimensions, self.mu_max,
            self.index_set, self.coefficients,
        )

    # ------------------------------------------------------------------
    # Error estimation
    # ------------------------------------------------------------------

    def error_estimate(self) -> float:
        """Estimate the supremum-norm interpolation error.

        For each dimension, takes the largest coefficient magnitude among the
        basis functions whose degree in that dimension was introduced at the
        dimension's top level, and sums these over dimensions. Dimensions at
        level 0 contribute nothing. Slowly decaying top-level coefficients
        signal that a level should be raised.

        Raises
        ------
        RuntimeError
            If ``build()`` has not been called.
        """
        if self.coefficients is None:
            raise RuntimeError("Call build() first")

        if self._cached_error_estimate is not None:
            return self._cached_error_estimate

        total_error = 0.0
        for d in range(self.num_dimensions):
            if self.levels[d] == 0:
                continue
            top = element_levels(self.index_set[:, d]) == self.levels[d]
            if np.any(top):
                total_error += float(np.max(np.abs(self.coefficients[top])))

        self._cached_error_estimate = total_error
        return total_error

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def __getstate__(self) -> dict:
        """Return picklable state, excluding the original function."""
        from pysmolyak._version import __version__

        state = self.__dict__.copy()
        state["function"] = None
        state["_pysmolyak_version"] = __version__
        return state

    def __setstate__(self, state: dict) -> None:
        from pysmolyak._version import __version__

        saved_version = state.pop("_pysmolyak_version", None)
        if saved_version is not None and saved_version != __version__:
            warnings.warn(
                f"This object was saved with pysmolyak {saved_version}, "
                f"but you are loading it with {__version__}. "
                f"Evaluation results may differ if internal data layout changed.",
                UserWarning,
                stacklevel=2,
            )

        self.__dict__.update(state)
        self.function = None

    def save(self, path: str | os.PathLike) -> None:
        """Save the built interpolant to a file.

        The original function is **not** saved, only the grid, index set and
        coefficients needed for evaluation.

        Raises
        ------
        RuntimeError
            If the interpolant has not been built yet.
        """
        if self.coefficients is None:
            raise RuntimeError(
                "Cannot save an unbuilt interpolant. Call build() first."
            )
        with open(os.fspath(path), "wb") as f:
            pickle.dump(self, f, protocol=pickle.HIGHEST_PROTOCOL)

    @classmethod
    def load(cls, path: str | os.PathLike) -> "SmolyakApproximation":
        """Load a previously saved interpolant from a file.

        The ``function`` attribute of the result is ``None``.

        Warns
        -----
        UserWarning
            If the file was saved with a different pysmolyak version.

        .. warning::

            This method uses :mod:`pickle` internally. Pickle can execute
            arbitrary code during deserialization. **Only load files you
            trust.**
        """
        with open(os.fspath(path), "rb") as f:
            obj = pickle.load(f)  # noqa: S301
        if not isinstance(obj, cls):
            raise TypeError(
                f"Expected a {cls.__name__} instance, got {type(obj).__name__}"
            )
        return obj

    # ------------------------------------------------------------------
    # Pre-computed values: nodes first, values later
    # ------------------------------------------------------------------

    @staticmethod
    def nodes(
        num_dimensions: int,
        domain: List[Tuple[float, float]],
        levels: List[int],
    ) -> dict:
        """Generate the Smolyak grid without evaluating any function.

        Use this to obtain the grid points, evaluate your function externally,
        then pass the results to :meth:`from_values`.

        Returns
        -------
        dict
            ``'grid'`` : 2-D array, shape ``(n_points, num_dimensions)``, the
            Smolyak points in domain coordinates. Values passed to
            :meth:`from_values` must follow this row order.

            ``'cube_grid'`` : the same points in [-1, 1]^d.

            ``'index_set'`` : integer array, shape ``(n_points, num_dimensions)``.

            ``'n_points'`` : int.

        Examples
        --------
        >>> info = SmolyakApproximation.nodes(2, [[-1, 1], [-1, 1]], [2, 2])
        >>> info['n_points']
        13
        """
        num_dimensions = _check_dimension(num_dimensions)
        levels = check_level_vector(levels, num_dimensions)
        mu_max = max(levels)
        index_set = smolyak_index_set(levels)
        cube_grid = smolyak_grid(num_dimensions, mu_max, index_set)
        return {
            "grid": domain_map(cube_grid, domain),
            "cube_grid": cube_grid,
            "index_set": index_set,
            "n_points": index_set.shape[0],
        }

    @classmethod
    def from_values(
        cls,
        values: np.ndarray,
        num_dimensions: int,
        domain: List[Tuple[float, float]],
        levels: List[int],
        rcond: float = DEFAULT_RCOND,
    ) -> "SmolyakApproximation":
        """Create an interpolant from function values at the :meth:`nodes` grid.

        Raises
        ------
        ValueError
            If *values* does not have one entry per grid point or contains
            NaN or Inf.
        """
        obj = cls(None, num_dimensions, domain, levels, rcond=rcond)
        values = np.asarray(values, dtype=float)
        if values.shape != (obj.n_points,):
            raise ValueError(
                f"values.shape={values.shape} does not match the "
                f"{obj.n_points} grid points"
            )
        if not np.isfinite(values).all():
            raise ValueError("values contains NaN or Inf")
        obj._solve(values.copy())
        return obj

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        built = self.coefficients is not None
        return (
            f"SmolyakApproximation("
            f"dims={self.num_dimensions}, "
            f"levels={self.levels}, "
            f"built={built})"
        )

    def __str__(self) -> str:
        built = self.coefficients is not None
        status = "built" if built else "not built"

        max_display = 6
        if self.num_dimensions > max_display:
            levels_str = (
                "[" + ", ".join(str(lv) for lv in self.levels[:max_display])
                + ", ...]"
            )
            domain_str = (
                " x ".join(f"[{lo}, {hi}]" for lo, hi in self.domain[:max_display])
                + " x ..."
            )
        else:
            levels_str = str(self.levels)
            domain_str = " x ".join(f"[{lo}, {hi}]" for lo, hi in self.domain)

        lines = [
            f"SmolyakApproximation ({self.num_dimensions}D, {status})",
            f"  Levels:      {levels_str} (mu_max={self.mu_max})",
            f"  Points:      {self.n_points:,} "
            f"(tensor grid: {tensor_product_size(self.levels):,})",
            f"  Domain:      {domain_str}",
        ]

        if built:
            lines.append(
                f"  Build:       {self.build_time:.3f}s, "
                f"{self.n_evaluations:,} evaluations"
            )
            lines.append(f"  Error est:   {self.error_estimate():.2e}")

        return "\n".join(lines)
