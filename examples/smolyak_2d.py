"""
Smolyak interpolation of f(x, y) = 2x exp(-4x^2 - 16y^2) on [-1, 1]^2.

Runs the low-level pipeline step by step: isotropic index set, anisotropic
filter, grid, coefficient solve, then compares against the function on a
dense tensor grid and against 1-D Chebyshev fits of the x-slice.
"""

import time

import numpy as np

from pysmolyak import (
    eval_chebyshev_1d,
    fit_chebyshev_1d,
    smolyak_anisotropic_index_set,
    smolyak_evaluate,
    smolyak_fit,
    smolyak_grid,
    smolyak_isotropic_index_set,
    tensor_product_size,
)


def f(x, y):
    return 2.0 * x * np.exp(-4.0 * x ** 2 - 16.0 * y ** 2)


level_vector = [5, 5]
d, mu_max = len(level_vector), max(level_vector)

t0 = time.time()
iso = smolyak_isotropic_index_set(d, mu_max)
subset = smolyak_anisotropic_index_set(iso, level_vector)
grid = smolyak_grid(d, mu_max, subset)
coefs = smolyak_fit(grid, d, mu_max, subset, f(grid[:, 0], grid[:, 1]))
build_time = time.time() - t0

print(f"Level vector:     {level_vector}")
print(f"Smolyak points:   {grid.shape[0]}")
print(f"Tensor points:    {tensor_product_size(level_vector)}")
print(f"Build time:       {build_time:.4f}s")

# Dense tensor grid comparison
n_dense = 101
xs = np.linspace(-1, 1, n_dense)
X, Y = np.meshgrid(xs, xs, indexing="ij")
dense = np.column_stack([X.ravel(), Y.ravel()])
approx = smolyak_evaluate(dense, d, mu_max, subset, coefs)
err = np.abs(approx - f(dense[:, 0], dense[:, 1]))
print(f"Max error:        {err.max():.3e}")
print(f"Mean error:       {err.mean():.3e}")

# 1-D slice at y = 0
print("\n1-D fits of f(x, 0):")
for degree in (5, 9, 17):
    x_grid = np.cos(np.pi * np.arange(degree + 1) / degree)
    c = fit_chebyshev_1d(x_grid, f(x_grid, 0.0), degree)
    slice_err = np.max(np.abs(eval_chebyshev_1d(c, xs) - f(xs, 0.0)))
    print(f"  degree {degree:2d}: max error {slice_err:.3e}")
