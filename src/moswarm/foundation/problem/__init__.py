"""
Problem definitions and benchmark registry.
"""

from .base import Problem
from .constrained import HockSchittkowsky71Problem, SphereInequalityProblem
from .registry import PROBLEM_SPECS, ProblemSpec, available_problem_names, make_problem
from .zdt import ZDT1Problem, ZDT2Problem, ZDT3Problem

__all__ = [
    "Problem",
    "ZDT1Problem",
    "ZDT2Problem",
    "ZDT3Problem",
    "SphereInequalityProblem",
    "HockSchittkowsky71Problem",
    "ProblemSpec",
    "PROBLEM_SPECS",
    "available_problem_names",
    "make_problem",
]
