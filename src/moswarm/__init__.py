from .engine.algorithm import ACO, NSPSO, available_algorithm_names, make_algorithm
from .engine.algorithm.config import ACOConfig, DiversityMechanism, NSPSOConfig
from .foundation.checkpoint import load_checkpoint, save_checkpoint
from .foundation.exceptions import (
    ConfigurationError,
    IncompatibleProblemError,
    InfeasiblePopulationError,
    InvalidArgumentError,
    MoswarmError,
)
from .foundation.logging import configure_moswarm_logging
from .foundation.population import Population
from .foundation.problem import (
    HockSchittkowsky71Problem,
    Problem,
    SphereInequalityProblem,
    ZDT1Problem,
    ZDT2Problem,
    ZDT3Problem,
    available_problem_names,
    make_problem,
)
from .foundation.version import __version__

__all__ = [
    "__version__",
    # Algorithms
    "NSPSO",
    "ACO",
    "NSPSOConfig",
    "ACOConfig",
    "DiversityMechanism",
    "available_algorithm_names",
    "make_algorithm",
    # Problems and populations
    "Problem",
    "Population",
    "ZDT1Problem",
    "ZDT2Problem",
    "ZDT3Problem",
    "SphereInequalityProblem",
    "HockSchittkowsky71Problem",
    "available_problem_names",
    "make_problem",
    # Checkpoints
    "save_checkpoint",
    "load_checkpoint",
    # Errors
    "MoswarmError",
    "InvalidArgumentError",
    "ConfigurationError",
    "IncompatibleProblemError",
    "InfeasiblePopulationError",
    # Logging
    "configure_moswarm_logging",
]
