"""
Population-evolving algorithms and their shared components.
"""

from .aco import ACO
from .nspso import NSPSO
from .registry import available_algorithm_names, make_algorithm, resolve_algorithm

__all__ = ["ACO", "NSPSO", "available_algorithm_names", "make_algorithm", "resolve_algorithm"]
