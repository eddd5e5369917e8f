"""Multi-objective kernels on NumPy arrays.

Assumes F is float64 of shape (N, M) with every objective minimised.
"""

from __future__ import annotations

from math import comb

import numpy as np


def dominance_matrix(F: np.ndarray) -> np.ndarray:
    """Boolean matrix D with D[i, j] True when row i Pareto-dominates row j."""
    less_equal = F[:, None, :] <= F[None, :, :]
    strictly_less = F[:, None, :] < F[None, :, :]
    return np.logical_and(np.all(less_equal, axis=2), np.any(strictly_less, axis=2))


def fast_non_dominated_sorting(
    F: np.ndarray,
) -> tuple[list[list[int]], list[list[int]], np.ndarray, np.ndarray]:
    """
    Classic O(N^2 M) fast non-dominated sort.

    Args:
        F: objective matrix (N, M), float64.
    Returns:
      - fronts: list of lists with indices per front (0, 1, ...), ascending within a front
      - dom_list: for each individual, the indices it dominates
      - dom_count: for each individual, how many individuals dominate it
      - rank: array with the front rank for each solution
    """
    F = np.asarray(F, dtype=float)
    N = F.shape[0]
    if N == 0:
        return [], [], np.empty(0, dtype=int), np.empty(0, dtype=int)

    dom_matrix = dominance_matrix(F)
    dom_list = [np.flatnonzero(row).tolist() for row in dom_matrix]
    dom_count = dom_matrix.sum(axis=0).astype(np.int64)

    remaining = dom_count.copy()
    rank = np.empty(N, dtype=int)
    fronts: list[list[int]] = []

    current = np.flatnonzero(remaining == 0)
    level = 0
    while current.size > 0:
        fronts.append(current.tolist())
        rank[current] = level
        remaining -= dom_matrix[current].sum(axis=0)
        remaining[current] = -1
        level += 1
        current = np.flatnonzero(remaining == 0)

    return fronts, dom_list, dom_count, rank


def crowding_distance(F: np.ndarray) -> np.ndarray:
    """
    Crowding distance of a single non-dominated front.

    Boundary points of every objective get ``inf``. Fronts of one or two
    points are all boundary.
    """
    F = np.asarray(F, dtype=float)
    n, n_obj = F.shape
    if n <= 2:
        return np.full(n, np.inf)

    d = np.zeros(n, dtype=float)
    for m in range(n_obj):
        order = np.argsort(F[:, m], kind="mergesort")
        sorted_vals = F[order, m]

        d[order[0]] = np.inf
        d[order[-1]] = np.inf

        span = sorted_vals[-1] - sorted_vals[0]
        if span <= 0.0:
            continue

        contrib = (sorted_vals[2:] - sorted_vals[:-2]) / span
        d[order[1:-1]] += contrib
    return d


def sort_population_mo(F: np.ndarray) -> list[int]:
    """
    Rank every individual: non-dominated front first, then descending
    crowding distance within the front. Ties keep index order.
    """
    F = np.asarray(F, dtype=float)
    N = F.shape[0]
    if N < 2:
        return list(range(N))
    fronts, _, _, rank = fast_non_dominated_sorting(F)
    crowding = np.zeros(N)
    for front in fronts:
        crowding[front] = crowding_distance(F[front])
    # lexsort sorts by the last key first; -inf keeps boundary points ahead
    order = np.lexsort((-crowding, rank))
    return order.tolist()


def ideal(F: np.ndarray) -> np.ndarray:
    """Component-wise minimum of the objective matrix."""
    F = np.atleast_2d(np.asarray(F, dtype=float))
    return F.min(axis=0)


def nadir(F: np.ndarray) -> np.ndarray:
    """Component-wise maximum over the first non-dominated front."""
    F = np.atleast_2d(np.asarray(F, dtype=float))
    fronts, _, _, _ = fast_non_dominated_sorting(F)
    return F[fronts[0]].max(axis=0)


def count_reference_points(n_obj: int, divisions: int) -> int:
    if divisions < 1:
        raise ValueError("divisions must be >= 1")
    return comb(divisions + n_obj - 1, n_obj - 1)


def uniform_reference_points(n_obj: int, divisions: int) -> np.ndarray:
    """
    Das-Dennis simplex-lattice design: every point whose coordinates are
    multiples of ``1 / divisions`` and sum to one.

    Returns an array of shape (C(divisions + n_obj - 1, n_obj - 1), n_obj).
    """
    if n_obj < 1:
        raise ValueError("n_obj must be >= 1")
    count = count_reference_points(n_obj, divisions)
    coords = np.empty((count, n_obj), dtype=float)
    row = 0

    def rec(remaining: int, depth: int, current: list[int]) -> None:
        nonlocal row
        if depth == n_obj - 1:
            coords[row, :depth] = current
            coords[row, depth] = remaining
            row += 1
            return
        for value in range(remaining + 1):
            current.append(value)
            rec(remaining - value, depth + 1, current)
            current.pop()

    rec(divisions, 0, [])
    coords /= divisions
    return coords


__all__ = [
    "dominance_matrix",
    "fast_non_dominated_sorting",
    "crowding_distance",
    "sort_population_mo",
    "ideal",
    "nadir",
    "count_reference_points",
    "uniform_reference_points",
]
