"""Smolyak multi-index sets, isotropic and anisotropic.

Every row of an index set is a d-tuple of *elements*. Element ``e`` in a
dimension names both the ``e``-th point of the nested 1-D Chebyshev
extrema sequence and the polynomial ``T_e``, so one index set drives grid
construction and basis evaluation alike. Level ``L`` of the 1-D hierarchy
holds ``m(L)`` points,

.. math::

    m(0) = 1, \\qquad m(L) = 2^L + 1 \\quad (L \\ge 1),

and introduces the elements ``m(L-1), ..., m(L) - 1`` (level 0 introduces
element 0). The isotropic set of level ``mu`` is the disjoint union, over
level tuples ``(l_1, ..., l_d)`` with ``l_1 + ... + l_d <= mu``, of the
Cartesian products of newly introduced elements.

Row order is part of the contract: level tuples by increasing total level,
then lexicographically; within a level tuple, ``itertools.product`` order.
Anisotropic filtering keeps that relative order.

References
----------
- Judd, Maliar, Maliar & Valero (2014), "Smolyak method for solving dynamic
  economic models: Lagrange interpolation, anisotropic grid and adaptive
  domain", Journal of Economic Dynamics and Control 44:92-123
"""

from __future__ import annotations

from itertools import product
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from pysmolyak.exceptions import InvalidDimensionError, InvalidLevelError

MAX_LEVEL = 10


def _check_level(level, name: str = "level") -> int:
    if int(level) != level:
        raise InvalidLevelError(f"{name} must be an integer, got {level!r}")
    level = int(level)
    if level < 0 or level > MAX_LEVEL:
        raise InvalidLevelError(
            f"{name}={level} outside the supported range [0, {MAX_LEVEL}]"
        )
    return level


def _check_dimension(d) -> int:
    if int(d) != d or d < 1:
        raise InvalidDimensionError(f"Number of dimensions must be >= 1, got {d!r}")
    return int(d)


def check_level_vector(level_vector: Sequence[int], d: int | None = None) -> List[int]:
    """Validate a per-dimension level vector and return it as a list of int.

    Raises
    ------
    InvalidDimensionError
        If the vector is empty or its length differs from ``d``.
    InvalidLevelError
        If any entry is negative, non-integer, or above ``MAX_LEVEL``.
    """
    levels = list(np.atleast_1d(np.asarray(level_vector)).tolist())
    if len(levels) == 0:
        raise InvalidDimensionError("Level vector must have at least one entry")
    if d is not None and len(levels) != d:
        raise InvalidDimensionError(
            f"Level vector has {len(levels)} entries but d={d}"
        )
    return [_check_level(lv, f"levels[{k}]") for k, lv in enumerate(levels)]


def num_points_at_level(level: int) -> int:
    """Number of nested 1-D Chebyshev extrema at ``level``: 1, 3, 5, 9, 17, ..."""
    level = _check_level(level)
    return 1 if level == 0 else 2 ** level + 1


def new_elements_at_level(level: int) -> range:
    """Elements first introduced at ``level``."""
    level = _check_level(level)
    if level == 0:
        return range(0, 1)
    return range(num_points_at_level(level - 1), num_points_at_level(level))


def element_levels(elements) -> np.ndarray:
    """Level at which each element is first introduced (elementwise).

    >>> element_levels([0, 1, 2, 3, 4, 5, 8, 9]).tolist()
    [0, 1, 1, 2, 2, 3, 3, 4]
    """
    arr = np.asarray(elements, dtype=np.int64)
    if np.any(arr < 0):
        raise InvalidLevelError("Elements must be non-negative")
    # Elements 1 and 2 are level 1; beyond that e sits at the smallest L with e <= 2**L.
    levels = [0 if e == 0 else max(1, int(e - 1).bit_length()) for e in arr.ravel().tolist()]
    return np.asarray(levels, dtype=np.int64).reshape(arr.shape)


def _compositions(d: int, total: int) -> Iterator[Tuple[int, ...]]:
    """Non-negative d-tuples summing to ``total``, lexicographically increasing."""
    if d == 1:
        yield (total,)
        return
    for first in range(total + 1):
        for rest in _compositions(d - 1, total - first):
            yield (first,) + rest


def smolyak_isotropic_index_set(d: int, mu_max: int) -> np.ndarray:
    """Build the isotropic Smolyak index set for ``d`` dimensions and level ``mu_max``.

    Parameters
    ----------
    d : int
        Number of dimensions, ``d >= 1``.
    mu_max : int
        Approximation level, ``0 <= mu_max <= MAX_LEVEL``.

    Returns
    -------
    ndarray
        Integer array of shape (n_elements, d). Its row count equals the
        Smolyak grid size: for ``d = 2`` it is 1, 5, 13, 29 for
        ``mu_max = 0, 1, 2, 3``.

    Raises
    ------
    InvalidDimensionError
        If ``d < 1``.
    InvalidLevelError
        If ``mu_max`` is negative or above ``MAX_LEVEL``.

    Examples
    --------
    >>> smolyak_isotropic_index_set(2, 1).tolist()
    [[0, 0], [0, 1], [0, 2], [1, 0], [2, 0]]
    """
    d = _check_dimension(d)
    mu_max = _check_level(mu_max, "mu_max")

    new_elems = [tuple(new_elements_at_level(lv)) for lv in range(mu_max + 1)]
    rows: List[Tuple[int, ...]] = []
    for total in range(mu_max + 1):
        for levels in _compositions(d, total):
            rows.extend(product(*[new_elems[lv] for lv in levels]))

    return np.asarray(rows, dtype=np.int64).reshape(-1, d)


def smolyak_anisotropic_index_set(index_set, level_vector: Sequence[int]) -> np.ndarray:
    """Keep the rows of ``index_set`` allowed by a per-dimension level vector.

    A row survives when the element in every dimension ``k`` is introduced at
    a level ``<= level_vector[k]``. Surviving rows keep their relative order.
    The result depends on nothing but the two arguments, so filtering twice
    with the same vector is a no-op.

    Parameters
    ----------
    index_set : array_like
        Integer array of shape (n, d), typically from
        :func:`smolyak_isotropic_index_set`.
    level_vector : sequence of int
        Level cap for each of the ``d`` dimensions.

    Returns
    -------
    ndarray
        Integer array of shape (n_kept, d).

    Raises
    ------
    InvalidDimensionError
        If ``len(level_vector)`` differs from the index set's column count.
    InvalidLevelError
        If a level is negative or above ``MAX_LEVEL``.
    """
    elems = np.asarray(index_set, dtype=np.int64)
    if elems.ndim != 2:
        raise InvalidDimensionError(
            f"index_set must be 2-D (n_elements, d), got shape {elems.shape}"
        )
    levels = check_level_vector(level_vector, elems.shape[1])

    caps = np.array([num_points_at_level(lv) for lv in levels], dtype=np.int64)
    keep = np.all(elems < caps, axis=1)
    return elems[keep]


def smolyak_index_set(level_vector: Sequence[int]) -> np.ndarray:
    """Anisotropic index set for ``level_vector``, with ``d`` and ``mu_max`` implied.

    Equivalent to ``smolyak_anisotropic_index_set(
    smolyak_isotropic_index_set(len(v), max(v)), v)``.
    """
    levels = check_level_vector(level_vector)
    iso = smolyak_isotropic_index_set(len(levels), max(levels))
    return smolyak_anisotropic_index_set(iso, levels)


def tensor_product_size(level_vector: Sequence[int]) -> int:
    """Size of the full tensor grid with ``m(level_vector[k])`` points per dimension."""
    levels = check_level_vector(level_vector)
    return int(np.prod([num_points_at_level(lv) for lv in levels], dtype=object))
