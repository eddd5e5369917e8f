"""NumPy kernels shared by the algorithms."""

from .linalg import gaussian_elimination
from .multi_objective import (
    count_reference_points,
    crowding_distance,
    dominance_matrix,
    fast_non_dominated_sorting,
    ideal,
    nadir,
    sort_population_mo,
    uniform_reference_points,
)
from .sampling import random_decision_vector, uniform_real_from_range

__all__ = [
    "gaussian_elimination",
    "count_reference_points",
    "crowding_distance",
    "dominance_matrix",
    "fast_non_dominated_sorting",
    "ideal",
    "nadir",
    "sort_population_mo",
    "uniform_reference_points",
    "random_decision_vector",
    "uniform_real_from_range",
]
