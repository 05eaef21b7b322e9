"""Error and warning types raised by PySmolyak."""

from __future__ import annotations

from numpy.linalg import LinAlgError


class InvalidDimensionError(ValueError):
    """Dimension count < 1, or a per-dimension argument of the wrong length."""


class InvalidLevelError(ValueError):
    """Approximation level that is negative or above the supported maximum."""


class RankDeficientSystemError(LinAlgError):
    """Basis matrix lacks the column rank needed for a well-posed solve."""


class DomainOutOfRangeWarning(UserWarning):
    """Evaluation point lies outside [-1, 1]; the recurrence is valid but diverges."""
