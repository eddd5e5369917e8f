"""Leader ranking for NSPSO.

Each diversity mechanism turns the current fitness matrix into an ordered
sequence of candidate leader indices; the move step only sees that sequence.
"""

from __future__ import annotations

import math

import numpy as np

from moswarm.engine.algorithm.components.diversity import (
    ascending_order,
    fonseca_fleming_delta,
    maxmin,
    niche_count,
)
from moswarm.engine.algorithm.config.nspso import DiversityMechanism
from moswarm.foundation.kernel.multi_objective import (
    fast_non_dominated_sorting,
    ideal,
    nadir,
    sort_population_mo,
)

MIN_LEADERS = 2


def crowding_leaders(F: np.ndarray) -> np.ndarray:
    """Whole population, front by front, most isolated first within a front."""
    return np.asarray(sort_population_mo(F), dtype=int)


def niche_leaders(F: np.ndarray, chromosomes: np.ndarray) -> np.ndarray:
    """
    First front ordered by ascending niche count in decision space.

    The niche radius comes from the ideal and nadir points of ``F``. When the
    first front holds a single individual, the following fronts are absorbed
    whole until at least two leaders are available.
    """
    fronts, _, _, _ = fast_non_dominated_sorting(F)
    front0 = np.asarray(fronts[0], dtype=int)
    if front0.size >= MIN_LEADERS:
        delta = fonseca_fleming_delta(ideal(F), nadir(F), front0.size)
        counts = niche_count(chromosomes[front0], delta)
        return front0[ascending_order(counts)]

    leaders = front0.tolist()
    for front in fronts[1:]:
        if len(leaders) >= MIN_LEADERS:
            break
        leaders.extend(front)
    return np.asarray(leaders, dtype=int)


def maxmin_leaders(F: np.ndarray) -> np.ndarray:
    """Individuals with negative MaxMin score, best first, at least two of them."""
    scores = maxmin(F)
    order = ascending_order(scores)
    n_keep = max(int(np.sum(scores < 0.0)), MIN_LEADERS)
    return order[: min(n_keep, order.size)]


def leader_indices(mechanism: DiversityMechanism, F: np.ndarray, chromosomes: np.ndarray) -> np.ndarray:
    """Dispatch on the diversity mechanism."""
    if mechanism is DiversityMechanism.CROWDING_DISTANCE:
        return crowding_leaders(F)
    if mechanism is DiversityMechanism.NICHE_COUNT:
        return niche_leaders(F, chromosomes)
    if mechanism is DiversityMechanism.MAX_MIN:
        return maxmin_leaders(F)
    raise ValueError(f"Unhandled diversity mechanism: {mechanism!r}")


def leader_extent(n_leaders: int, leader_selection_range: float) -> int:
    """Highest leader rank a particle may draw, always in ``[1, n_leaders - 1]``."""
    ext = math.ceil(n_leaders * leader_selection_range / 100.0) - 1
    return min(max(1, ext), max(1, n_leaders - 1))


__all__ = [
    "MIN_LEADERS",
    "crowding_leaders",
    "niche_leaders",
    "maxmin_leaders",
    "leader_indices",
    "leader_extent",
]
