"""Pheromone values: kernel weights, per-coordinate spreads and Gaussian sampling."""

from __future__ import annotations

import numpy as np


def kernel_weights(ker: int) -> np.ndarray:
    """Rank weights ``(ker - k + 1) / S`` for ``k = 1..ker`` with ``S = ker (ker + 1) / 2``."""
    total = ker * (ker + 1) / 2.0
    return (ker - np.arange(ker, dtype=float)) / total


def kernel_sigma(
    archive_X: np.ndarray,
    lb: np.ndarray,
    ub: np.ndarray,
    n_gen: int,
    focus: float,
) -> np.ndarray:
    """
    Standard deviation of every coordinate.

    ``(D_max - D_min) / n_gen`` where ``D`` ranges over the absolute
    differences of all archive row pairs; with a non-zero ``focus`` the value
    is capped at ``(ub - lb) / focus``.
    """
    archive_X = np.atleast_2d(np.asarray(archive_X, dtype=float))
    ker, n_x = archive_X.shape
    if ker < 2:
        spread = np.zeros(n_x)
    else:
        a, b = np.triu_indices(ker, k=1)
        diffs = np.abs(archive_X[a] - archive_X[b])
        spread = diffs.max(axis=0) - diffs.min(axis=0)
    sigma = spread / float(n_gen)
    if focus != 0.0:
        cap = (np.asarray(ub, dtype=float) - np.asarray(lb, dtype=float)) / focus
        sigma = np.where(sigma > cap, cap, sigma)
    return sigma


def sample_offspring(
    archive_X: np.ndarray,
    omega: np.ndarray,
    sigma: np.ndarray,
    n_offspring: int,
    rng: np.random.Generator,
    lb: np.ndarray,
    ub: np.ndarray,
    n_ix: int = 0,
) -> np.ndarray:
    """
    Draw offspring from the multi-kernel Gaussian.

    One normal sample per (offspring, coordinate, kernel) is drawn around the
    archive rows and the samples are summed with weights ``omega``. Integer
    coordinates are rounded, then every coordinate is clipped into bounds.
    """
    means = np.asarray(archive_X, dtype=float).T[None, :, :]
    scale = np.asarray(sigma, dtype=float)[None, :, None]
    draws = rng.normal(loc=means, scale=scale, size=(n_offspring,) + means.shape[1:])
    X = np.sum(draws * np.asarray(omega, dtype=float)[None, None, :], axis=2)
    if n_ix > 0:
        X[:, -n_ix:] = np.rint(X[:, -n_ix:])
    return np.clip(X, lb, ub)


__all__ = ["kernel_weights", "kernel_sigma", "sample_offspring"]
