"""Dense linear-system helpers."""

from __future__ import annotations

import numpy as np

from moswarm.foundation.exceptions import InvalidArgumentError


def gaussian_elimination(A: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Solve ``A @ x = b`` for a square, full-rank ``A``.

    Raises
    ------
    InvalidArgumentError
        If the shapes are inconsistent or ``A`` is singular / rank-deficient.
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise InvalidArgumentError(f"Expected a square matrix, got shape {A.shape}.")
    if b.shape != (A.shape[0],):
        raise InvalidArgumentError(f"Right-hand side must have shape ({A.shape[0]},), got {b.shape}.")
    if np.linalg.matrix_rank(A) < A.shape[0]:
        raise InvalidArgumentError(
            "The matrix is singular or rank-deficient.",
            suggestion="Check for linearly dependent rows",
        )
    try:
        return np.linalg.solve(A, b)
    except np.linalg.LinAlgError as exc:
        raise InvalidArgumentError(f"Linear system could not be solved: {exc}") from exc


__all__ = ["gaussian_elimination"]
