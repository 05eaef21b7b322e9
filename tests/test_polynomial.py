"""Tests for the multivariate Smolyak-Chebyshev basis."""

import warnings

import numpy as np
import pytest

from pysmolyak import (
    DomainOutOfRangeWarning,
    InvalidDimensionError,
    InvalidLevelError,
    chebyshev_t,
    smolyak_grid,
    smolyak_index_set,
    smolyak_isotropic_index_set,
    smolyak_polynomial_basis,
)


class TestBasisMatrix:
    def test_shape(self, subset_4_2_3):
        subset, grid = subset_4_2_3
        basis = smolyak_polynomial_basis(grid, 3, 4, subset)
        assert basis.shape == (grid.shape[0], subset.shape[0])

    def test_entries_are_products_of_univariate_t(self, subset_4_2_3):
        subset, grid = subset_4_2_3
        basis = smolyak_polynomial_basis(grid, 3, 4, subset)
        for i, j in [(0, 0), (3, 5), (10, 2), (len(grid) - 1, len(subset) - 1)]:
            expected = np.prod([chebyshev_t(int(subset[j, k]), grid[i, k]) for k in range(3)])
            assert basis[i, j] == pytest.approx(expected, abs=1e-13)

    def test_constant_column(self, subset_5_5):
        subset, grid = subset_5_5
        basis = smolyak_polynomial_basis(grid, 2, 5, subset)
        np.testing.assert_array_equal(basis[:, 0], 1.0)

    @pytest.mark.parametrize("levels", [[1, 1], [3, 3], [5, 5], [4, 1], [3, 2, 2], [2, 2, 2, 2]])
    def test_square_and_invertible_on_grid(self, levels):
        subset = smolyak_index_set(levels)
        d, mu = len(levels), max(levels)
        basis = smolyak_polynomial_basis(smolyak_grid(d, mu, subset), d, mu, subset)
        assert basis.shape[0] == basis.shape[1]
        assert np.linalg.matrix_rank(basis) == basis.shape[0]
        assert np.linalg.cond(basis) < 1e6

    def test_off_grid_points(self, subset_5_5):
        subset, _ = subset_5_5
        rng = np.random.default_rng(7)
        pts = rng.uniform(-1, 1, size=(50, 2))
        basis = smolyak_polynomial_basis(pts, 2, 5, subset)
        assert basis.shape == (50, subset.shape[0])
        assert np.all(np.abs(basis) <= 1.0 + 1e-12)

    def test_single_point_as_1d(self, subset_5_5):
        subset, grid = subset_5_5
        row = smolyak_polynomial_basis(grid[4], 2, 5, subset)
        full = smolyak_polynomial_basis(grid, 2, 5, subset)
        np.testing.assert_array_equal(row[0], full[4])

    def test_one_dimension_batch(self):
        subset = smolyak_isotropic_index_set(1, 3)
        x = np.linspace(-1, 1, 7)
        basis = smolyak_polynomial_basis(x, 1, 3, subset)
        np.testing.assert_allclose(basis, chebyshev_t(subset[:, 0], x))

    def test_mu_larger_than_needed(self):
        subset = smolyak_index_set([2, 2])
        pts = np.array([[0.3, -0.2]])
        np.testing.assert_allclose(
            smolyak_polynomial_basis(pts, 2, 6, subset),
            smolyak_polynomial_basis(pts, 2, 2, subset),
        )


class TestDomainAndErrors:
    def test_outside_cube_warns(self, subset_5_5):
        subset, _ = subset_5_5
        with pytest.warns(DomainOutOfRangeWarning, match="outside"):
            basis = smolyak_polynomial_basis([[1.2, 0.0]], 2, 5, subset)
        assert np.all(np.isfinite(basis))

    def test_inside_cube_does_not_warn(self, subset_5_5):
        subset, grid = subset_5_5
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            smolyak_polynomial_basis(grid, 2, 5, subset)

    def test_point_dimension_mismatch_raises(self, subset_5_5):
        subset, _ = subset_5_5
        with pytest.raises(InvalidDimensionError, match="points"):
            smolyak_polynomial_basis(np.zeros((4, 3)), 2, 5, subset)

    def test_subset_dimension_mismatch_raises(self):
        with pytest.raises(InvalidDimensionError, match="index_subset"):
            smolyak_polynomial_basis(np.zeros((4, 2)), 2, 2, smolyak_isotropic_index_set(3, 2))

    def test_element_beyond_mu_raises(self):
        with pytest.raises(InvalidLevelError):
            smolyak_polynomial_basis(np.zeros((1, 2)), 2, 1, [[0, 5]])
