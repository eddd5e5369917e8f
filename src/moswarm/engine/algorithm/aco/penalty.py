"""Feasibility screening and oracle penalty for constrained single-objective ranking.

Reference:
    Schlueter, M., Gerdts, M. (2010). The oracle penalty method.
    Journal of Global Optimization 47(2), pp. 293-325.
"""

from __future__ import annotations

import math

import numpy as np

_SQRT3 = math.sqrt(3.0)
_ORACLE_SLOPE = (6.0 * _SQRT3 - 2.0) / (6.0 * _SQRT3)


def split_fitness(F: np.ndarray, n_obj: int, n_ec: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Objective, equality and inequality blocks of a fitness matrix."""
    F = np.atleast_2d(np.asarray(F, dtype=float))
    return F[:, :n_obj], F[:, n_obj : n_obj + n_ec], F[:, n_obj + n_ec :]


def feasible_mask(F: np.ndarray, n_obj: int, n_ec: int, acc: float) -> np.ndarray:
    """
    Rows whose equality residuals satisfy ``|ec| <= acc`` and whose
    inequality residuals satisfy ``ic < -acc``.
    """
    _, ec, ic = split_fitness(F, n_obj, n_ec)
    return np.all(np.abs(ec) <= acc, axis=1) & np.all(ic < -acc, axis=1)


def residual_norm(ec: np.ndarray, ic: np.ndarray, norm: str = "l2") -> np.ndarray:
    """
    Constraint residual of every row.

    Equality residuals count by magnitude; inequality residuals only by their
    positive (violating) part. Every norm works on these non-negative terms,
    so ``linf`` is the largest of ``|ec|`` and ``max(ic, 0)``, not a maximum
    over signed values.

    Parameters
    ----------
    ec, ic : np.ndarray
        Equality and inequality blocks, shape (N, n_ec) and (N, n_ic).
    norm : str
        ``"l1"``, ``"l2"`` or ``"linf"``.
    """
    ec = np.abs(np.atleast_2d(np.asarray(ec, dtype=float)))
    ic = np.maximum(np.atleast_2d(np.asarray(ic, dtype=float)), 0.0)
    terms = np.hstack([ec, ic])
    if terms.shape[1] == 0:
        return np.zeros(terms.shape[0])
    if norm == "l1":
        return np.sum(terms, axis=1)
    if norm == "l2":
        return np.sqrt(np.sum(terms * terms, axis=1))
    if norm == "linf":
        return np.max(terms, axis=1)
    raise ValueError(f"Unknown residual norm '{norm}'.")


def oracle_alpha(phi: float, res: float, oracle: float) -> float:
    """Weight between objective gap and residual in the oracle penalty."""
    if phi <= oracle:
        return 0.0
    delta = abs(phi - oracle)
    if res < delta / 3.0:
        return (delta * _ORACLE_SLOPE - res) / (delta - res)
    if res <= delta:
        return 1.0 - 1.0 / (2.0 * math.sqrt(delta / res))
    return 0.5 * math.sqrt(delta / res)


def oracle_penalty(phi: float, res: float, oracle: float) -> float:
    """Penalty of one candidate with objective ``phi`` and residual ``res``."""
    delta = abs(phi - oracle)
    if phi > oracle and res < delta / 3.0:
        alpha = oracle_alpha(phi, res, oracle)
        return alpha * delta + (1.0 - alpha) * res
    return -delta


def penalize(
    F: np.ndarray,
    n_obj: int,
    n_ec: int,
    acc: float,
    oracle: float,
    norm: str = "l2",
) -> tuple[np.ndarray, np.ndarray]:
    """
    Feasibility mask and penalty of every row of ``F``.

    Infeasible rows get ``+inf``; feasible rows the oracle penalty of their
    first objective.
    """
    obj, ec, ic = split_fitness(F, n_obj, n_ec)
    feasible = feasible_mask(F, n_obj, n_ec, acc)
    res = residual_norm(ec, ic, norm)
    penalty = np.full(obj.shape[0], np.inf)
    for i in np.flatnonzero(feasible):
        penalty[i] = oracle_penalty(float(obj[i, 0]), float(res[i]), oracle)
    return feasible, penalty


__all__ = [
    "split_fitness",
    "feasible_mask",
    "residual_norm",
    "oracle_alpha",
    "oracle_penalty",
    "penalize",
]
