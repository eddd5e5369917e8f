"""Diversity measures used to rank swarm leaders and survivors.

All routines take float arrays and return NumPy arrays; the caller decides
how to order individuals from them.
"""

from __future__ import annotations

import numpy as np


def euclidean_distance(a: np.ndarray, b: np.ndarray) -> float:
    """L2 distance between two vectors of equal length."""
    diff = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    return float(np.sqrt(np.sum(diff * diff)))


def pairwise_distances(C: np.ndarray) -> np.ndarray:
    """Full (N, N) matrix of Euclidean distances between the rows of ``C``."""
    C = np.atleast_2d(np.asarray(C, dtype=float))
    diff = C[:, None, :] - C[None, :, :]
    return np.sqrt(np.sum(diff * diff, axis=2))


def ascending_order(values: np.ndarray) -> np.ndarray:
    """Stable ascending argsort; NaN sorts after every number, ties keep index order."""
    return np.argsort(np.asarray(values, dtype=float), kind="stable")


def maxmin(F: np.ndarray) -> np.ndarray:
    """
    MaxMin fitness of every row of ``F``.

    ``m[i] = max_{j != i} min_k (F[i, k] - F[j, k])``. A negative score means
    no other row is at least as good in every objective, i.e. row ``i`` is
    non-dominated. A single row scores ``-inf``.

    Parameters
    ----------
    F : np.ndarray
        Objective matrix, shape (N, n_obj).

    Returns
    -------
    np.ndarray
        Scores, shape (N,).
    """
    F = np.atleast_2d(np.asarray(F, dtype=float))
    n = F.shape[0]
    if n == 0:
        return np.empty(0, dtype=float)
    min_diff = np.min(F[:, None, :] - F[None, :, :], axis=2)
    np.fill_diagonal(min_diff, -np.inf)
    return np.max(min_diff, axis=1)


def niche_count(C: np.ndarray, delta: float) -> np.ndarray:
    """Number of rows of ``C`` closer than ``delta`` to each row, itself included."""
    C = np.atleast_2d(np.asarray(C, dtype=float))
    if C.shape[0] == 0:
        return np.empty(0, dtype=int)
    return np.sum(pairwise_distances(C) < delta, axis=1).astype(int)


def fonseca_fleming_delta(ideal_point: np.ndarray, nadir_point: np.ndarray, n_points: int) -> float:
    """
    Niche radius for ``n_points`` individuals spread over the box ``[ideal, nadir]``.

    Two and three objectives use the closed forms of Fonseca and Fleming; with
    more objectives the box volume is shared equally among the points.

    For three objectives ``delta`` is the positive root of
    ``(N - 1) delta**2 - (d1 + d2 + d3) delta - (d1 d2 + d1 d3 + d2 d3) = 0``,
    that is ``(sqrt(disc) + d1 + d2 + d3) / (2 (N - 1))`` with the extent sum
    added outside the square root, not inside the radicand.
    """
    extent = np.asarray(nadir_point, dtype=float) - np.asarray(ideal_point, dtype=float)
    n_obj = extent.size
    n = float(n_points)
    if n_points < 2:
        raise ValueError("fonseca_fleming_delta needs at least two points.")
    if n_obj == 2:
        return float((extent[0] + extent[1]) / (n - 1.0))
    if n_obj == 3:
        d1, d2, d3 = (float(v) for v in extent)
        cross = d1 * d2 + d1 * d3 + d2 * d3
        disc = 4.0 * n * cross + d1 * d1 + d2 * d2 + d3 * d3 - 2.0 * cross
        return float((np.sqrt(disc) + d1 + d2 + d3) / (2.0 * (n - 1.0)))
    volume = float(np.prod(extent))
    return float(volume ** (1.0 / n_obj) / n)


__all__ = [
    "euclidean_distance",
    "pairwise_distances",
    "ascending_order",
    "maxmin",
    "niche_count",
    "fonseca_fleming_delta",
]
