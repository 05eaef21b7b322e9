"""PySmolyak: Chebyshev polynomials and anisotropic Smolyak sparse grids.

Provides Chebyshev polynomial evaluation (:func:`chebyshev_t`,
:func:`chebyshev_u`), one-dimensional least-squares Chebyshev fitting with
Clenshaw evaluation (:func:`fit_chebyshev_1d`, :func:`eval_chebyshev_1d`),
and the Smolyak pipeline of Judd, Maliar, Maliar & Valero (2014): index
sets, sparse grids, the multivariate Chebyshev basis, and the coefficient
solve. The :class:`SmolyakApproximation` class wraps the whole pipeline
for functions on an arbitrary box.

Example
-------
>>> from pysmolyak import (smolyak_isotropic_index_set, smolyak_anisotropic_index_set,
...                        smolyak_grid, smolyak_fit, smolyak_evaluate)
>>> iso = smolyak_isotropic_index_set(2, 3)
>>> subset = smolyak_anisotropic_index_set(iso, [3, 2])
>>> grid = smolyak_grid(2, 3, subset)
>>> coeffs = smolyak_fit(grid, 2, 3, subset, grid[:, 0] * grid[:, 1] ** 2)
>>> round(float(smolyak_evaluate([[0.5, 0.5]], 2, 3, subset, coeffs)[0]), 10)
0.125
"""

from pysmolyak._version import __version__
from pysmolyak._linalg import DEFAULT_RCOND
from pysmolyak.approximation import SmolyakApproximation
from pysmolyak.basis import (
    chebyshev_extrema,
    chebyshev_t,
    chebyshev_t_trig,
    chebyshev_u,
    chebyshev_vandermonde,
    from_canonical,
    to_canonical,
)
from pysmolyak.exceptions import (
    DomainOutOfRangeWarning,
    InvalidDimensionError,
    InvalidLevelError,
    RankDeficientSystemError,
)
from pysmolyak.fit1d import ChebyshevSeries1D, eval_chebyshev_1d, fit_chebyshev_1d
from pysmolyak.grid import cube_map, domain_map, nested_chebyshev_points, smolyak_grid
from pysmolyak.index_set import (
    MAX_LEVEL,
    element_levels,
    new_elements_at_level,
    num_points_at_level,
    smolyak_anisotropic_index_set,
    smolyak_index_set,
    smolyak_isotropic_index_set,
    tensor_product_size,
)
from pysmolyak.polynomial import smolyak_polynomial_basis
from pysmolyak.solver import smolyak_evaluate, smolyak_fit

__all__ = [
    "ChebyshevSeries1D",
    "DEFAULT_RCOND",
    "DomainOutOfRangeWarning",
    "InvalidDimensionError",
    "InvalidLevelError",
    "MAX_LEVEL",
    "RankDeficientSystemError",
    "SmolyakApproximation",
    "chebyshev_extrema",
    "chebyshev_t",
    "chebyshev_t_trig",
    "chebyshev_u",
    "chebyshev_vandermonde",
    "cube_map",
    "domain_map",
    "element_levels",
    "eval_chebyshev_1d",
    "fit_chebyshev_1d",
    "from_canonical",
    "nested_chebyshev_points",
    "new_elements_at_level",
    "num_points_at_level",
    "smolyak_anisotropic_index_set",
    "smolyak_evaluate",
    "smolyak_fit",
    "smolyak_grid",
    "smolyak_index_set",
    "smolyak_isotropic_index_set",
    "smolyak_polynomial_basis",
    "tensor_product_size",
    "to_canonical",
    "__version__",
]
