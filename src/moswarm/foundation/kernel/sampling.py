"""Random draws shared by the algorithms."""

from __future__ import annotations

import numpy as np

from moswarm.foundation.exceptions import InvalidArgumentError


def uniform_real_from_range(lb, ub, rng: np.random.Generator, size=None):
    """Draw uniformly from ``[lb, ub)``; bounds broadcast like :meth:`Generator.uniform`."""
    lb_arr = np.asarray(lb, dtype=float)
    ub_arr = np.asarray(ub, dtype=float)
    if not (np.all(np.isfinite(lb_arr)) and np.all(np.isfinite(ub_arr))):
        raise InvalidArgumentError("Cannot draw from a range with non-finite bounds.")
    if np.any(lb_arr > ub_arr):
        raise InvalidArgumentError("Cannot draw from a range whose lower bound exceeds the upper bound.")
    return rng.uniform(lb_arr, ub_arr, size=size)


def random_decision_vector(lb: np.ndarray, ub: np.ndarray, n_ix: int, rng: np.random.Generator) -> np.ndarray:
    """Uniform point in the box; the trailing ``n_ix`` coordinates are integers."""
    n_x = lb.shape[0]
    n_cx = n_x - n_ix
    x = np.empty(n_x, dtype=float)
    x[:n_cx] = uniform_real_from_range(lb[:n_cx], ub[:n_cx], rng)
    if n_ix:
        low = np.ceil(lb[n_cx:]).astype(np.int64)
        high = np.floor(ub[n_cx:]).astype(np.int64)
        if np.any(low > high):
            raise InvalidArgumentError("Integer bounds contain no integer value.")
        x[n_cx:] = rng.integers(low, high, endpoint=True)
    return x


__all__ = ["uniform_real_from_range", "random_decision_vector"]
