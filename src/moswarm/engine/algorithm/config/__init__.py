"""Algorithm configuration module.

This package provides configuration dataclasses and fluent builders for the
NSPSO and ACO solvers.

Examples:
    from moswarm.engine.algorithm.config import NSPSOConfig

    cfg = NSPSOConfig().gen(50).diversity_mechanism("max min").seed(32).fixed()
    cfg.to_json()
"""

from .aco import RESIDUAL_NORMS, ACOConfig, ACOConfigData
from .nspso import DiversityMechanism, NSPSOConfig, NSPSOConfigData

__all__ = [
    # NSPSO
    "NSPSOConfig",
    "NSPSOConfigData",
    "DiversityMechanism",
    # ACO
    "ACOConfig",
    "ACOConfigData",
    "RESIDUAL_NORMS",
]
