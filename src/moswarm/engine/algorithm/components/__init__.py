"""Shared algorithm components."""

from .base import GenerationTable, LogEntry, UserAlgorithm, entropy_seed
from .diversity import (
    ascending_order,
    euclidean_distance,
    fonseca_fleming_delta,
    maxmin,
    niche_count,
    pairwise_distances,
)

__all__ = [
    "GenerationTable",
    "LogEntry",
    "UserAlgorithm",
    "entropy_seed",
    "ascending_order",
    "euclidean_distance",
    "fonseca_fleming_delta",
    "maxmin",
    "niche_count",
    "pairwise_distances",
]
