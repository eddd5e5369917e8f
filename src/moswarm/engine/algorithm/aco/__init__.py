"""
ACO algorithm module.

- `aco.py`: main ACO class (evolve loop, stopping counters)
- `penalty.py`: feasibility screen and oracle penalty
- `archive.py`: SolutionArchive of the best feasible candidates
- `pheromones.py`: kernel weights, spreads and Gaussian offspring sampling
"""

from .aco import ACO
from .archive import ArchiveUpdate, SolutionArchive
from .penalty import feasible_mask, oracle_penalty, penalize, residual_norm
from .pheromones import kernel_sigma, kernel_weights, sample_offspring

__all__ = [
    "ACO",
    # Archive
    "ArchiveUpdate",
    "SolutionArchive",
    # Penalty
    "feasible_mask",
    "oracle_penalty",
    "penalize",
    "residual_norm",
    # Pheromones
    "kernel_sigma",
    "kernel_weights",
    "sample_offspring",
]
