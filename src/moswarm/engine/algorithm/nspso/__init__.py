"""
NSPSO algorithm module.

This package provides the NSPSO (Non-dominated Sorting Particle Swarm
Optimization) implementation with modular components:
- `nspso.py`: main NSPSO class (evolve loop, move step)
- `leaders.py`: leader ranking per diversity mechanism
- `selection.py`: environmental selection over parents + offspring
- `state.py`: SwarmBuffer particle arrays

References:
    Li, X. (2003). A non-dominated sorting particle swarm optimizer for
    multiobjective optimization. GECCO 2003, LNCS 2723, pp. 37-48.
"""

from .leaders import leader_extent, leader_indices
from .nspso import NSPSO
from .selection import select_survivors
from .state import SwarmBuffer

__all__ = [
    "NSPSO",
    # Leaders
    "leader_indices",
    "leader_extent",
    # Selection
    "select_survivors",
    # State
    "SwarmBuffer",
]
