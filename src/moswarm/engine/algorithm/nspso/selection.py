"""Environmental selection over the parent + offspring swarm."""

from __future__ import annotations

import numpy as np

from moswarm.engine.algorithm.components.diversity import ascending_order, maxmin
from moswarm.engine.algorithm.config.nspso import DiversityMechanism
from moswarm.foundation.kernel.multi_objective import fast_non_dominated_sorting


def front_survivors(F: np.ndarray, n_keep: int, rng: np.random.Generator) -> np.ndarray:
    """Fill ``n_keep`` slots with whole fronts; the first front that does not fit is shuffled and cut."""
    fronts, _, _, _ = fast_non_dominated_sorting(F)
    chosen: list[int] = []
    for front in fronts:
        remaining = n_keep - len(chosen)
        if remaining <= 0:
            break
        if len(front) <= remaining:
            chosen.extend(front)
        else:
            members = np.asarray(front, dtype=int)
            rng.shuffle(members)
            chosen.extend(members[:remaining].tolist())
    return np.asarray(chosen, dtype=int)


def maxmin_survivors(F: np.ndarray, n_keep: int) -> np.ndarray:
    return ascending_order(maxmin(F))[:n_keep]


def select_survivors(
    mechanism: DiversityMechanism,
    F: np.ndarray,
    n_keep: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """Indices of the ``n_keep`` rows of ``F`` that survive to the next generation."""
    if mechanism is DiversityMechanism.MAX_MIN:
        return maxmin_survivors(F, n_keep)
    return front_survivors(F, n_keep, rng)


__all__ = ["front_survivors", "maxmin_survivors", "select_survivors"]
