"""Tests for nested Chebyshev points, Smolyak grids and domain maps."""

import numpy as np
import pytest

from pysmolyak import (
    InvalidDimensionError,
    InvalidLevelError,
    chebyshev_extrema,
    cube_map,
    domain_map,
    nested_chebyshev_points,
    num_points_at_level,
    smolyak_grid,
    smolyak_index_set,
    smolyak_isotropic_index_set,
    smolyak_polynomial_basis,
)


# ---------------------------------------------------------------------------
# Nested 1-D points
# ---------------------------------------------------------------------------

class TestNestedPoints:
    def test_first_levels(self):
        s = np.sqrt(0.5)
        np.testing.assert_allclose(nested_chebyshev_points(2), [0, -1, 1, -s, s], atol=1e-15)

    @pytest.mark.parametrize("level", [0, 1, 2, 3, 4, 6])
    def test_prefix_is_extrema_set(self, level):
        m = num_points_at_level(level)
        pts = nested_chebyshev_points(6)[:m]
        np.testing.assert_allclose(np.sort(pts), chebyshev_extrema(m), atol=1e-14)

    def test_nested_superset(self):
        pts = nested_chebyshev_points(5)
        for level in range(1, 6):
            coarse = set(np.round(chebyshev_extrema(num_points_at_level(level - 1)), 12))
            fine = set(np.round(pts[:num_points_at_level(level)], 12))
            assert coarse < fine

    def test_distinct(self):
        pts = nested_chebyshev_points(7)
        assert np.unique(pts).shape[0] == pts.shape[0]

    def test_zero_is_exact(self):
        assert nested_chebyshev_points(0).tolist() == [0.0]


# ---------------------------------------------------------------------------
# Smolyak grid
# ---------------------------------------------------------------------------

class TestSmolyakGrid:
    def test_mu_1_explicit(self):
        grid = smolyak_grid(2, 1, smolyak_isotropic_index_set(2, 1))
        assert grid.tolist() == [[0.0, 0.0], [0.0, -1.0], [0.0, 1.0], [-1.0, 0.0], [1.0, 0.0]]

    @pytest.mark.parametrize("mu,size", [(0, 1), (1, 5), (2, 13)])
    def test_2d_point_counts(self, mu, size):
        grid = smolyak_grid(2, mu, smolyak_isotropic_index_set(2, mu))
        assert grid.shape == (size, 2)

    def test_points_distinct(self, subset_4_2_3):
        _, grid = subset_4_2_3
        assert np.unique(grid, axis=0).shape[0] == grid.shape[0]

    def test_points_in_cube(self, subset_5_5):
        _, grid = subset_5_5
        assert np.all(np.abs(grid) <= 1.0)

    @pytest.mark.parametrize("levels", [[2, 2], [5, 5], [3, 1], [4, 2, 3], [2, 2, 2, 2]])
    def test_size_equals_basis_count(self, levels):
        subset = smolyak_index_set(levels)
        d, mu = len(levels), max(levels)
        grid = smolyak_grid(d, mu, subset)
        basis = smolyak_polynomial_basis(grid, d, mu, subset)
        assert grid.shape[0] == basis.shape[1]

    def test_rows_follow_index_subset(self, subset_4_2_3):
        subset, grid = subset_4_2_3
        pts = nested_chebyshev_points(4)
        for i in (0, 7, len(subset) - 1):
            np.testing.assert_array_equal(grid[i], pts[subset[i]])

    def test_anisotropic_grid_is_subset(self):
        iso_grid = smolyak_grid(2, 4, smolyak_isotropic_index_set(2, 4))
        ani_grid = smolyak_grid(2, 4, smolyak_index_set([4, 1]))
        iso_rows = {tuple(r) for r in np.round(iso_grid, 12).tolist()}
        assert all(tuple(r) in iso_rows for r in np.round(ani_grid, 12).tolist())
        assert set(np.round(ani_grid[:, 1], 12)) <= {-1.0, 0.0, 1.0}

    def test_duplicate_rows_raise(self):
        subset = np.array([[0, 0], [1, 0], [0, 0]])
        with pytest.raises(ValueError, match="duplicate"):
            smolyak_grid(2, 1, subset)

    def test_element_beyond_mu_raises(self):
        with pytest.raises(InvalidLevelError, match="mu_max=1"):
            smolyak_grid(2, 1, np.array([[0, 0], [3, 0]]))

    def test_column_mismatch_raises(self):
        with pytest.raises(InvalidDimensionError, match="shape"):
            smolyak_grid(3, 2, smolyak_isotropic_index_set(2, 2))

    def test_invalid_dimension_raises(self):
        with pytest.raises(InvalidDimensionError):
            smolyak_grid(0, 2, np.zeros((1, 0), dtype=int))


# ---------------------------------------------------------------------------
# Domain maps
# ---------------------------------------------------------------------------

class TestDomainMaps:
    def test_corners(self):
        mapped = domain_map([[-1, -1], [1, 1], [0, 0]], [[0, 3], [10, 20]])
        np.testing.assert_allclose(mapped, [[0, 10], [3, 20], [1.5, 15]])

    def test_round_trip(self, subset_5_5):
        _, grid = subset_5_5
        domain = [[-2, 5], [0.1, 0.4]]
        np.testing.assert_allclose(cube_map(domain_map(grid, domain), domain), grid, atol=1e-14)

    def test_wrong_domain_length_raises(self):
        with pytest.raises(InvalidDimensionError, match="pairs"):
            domain_map([[0.0, 0.0]], [[0, 1]])

    def test_inverted_bounds_raise(self):
        with pytest.raises(ValueError, match="lo < hi"):
            cube_map([[0.5]], [[1, 0]])
