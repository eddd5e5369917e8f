"""
Problem registry: name -> factory for the built-in benchmarks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from moswarm.foundation.exceptions import InvalidProblemError
from moswarm.foundation.problem.base import Problem
from moswarm.foundation.problem.constrained import HockSchittkowsky71Problem, SphereInequalityProblem
from moswarm.foundation.problem.zdt import ZDT1Problem, ZDT2Problem, ZDT3Problem


@dataclass(frozen=True)
class ProblemSpec:
    """Metadata and factory for a benchmark problem."""

    key: str
    label: str
    factory: Callable[[int | None], Problem]
    n_obj: int
    description: str = ""


def _with_n_var(cls, default: int) -> Callable[[int | None], Problem]:
    def factory(n_var: int | None = None) -> Problem:
        return cls(n_var if n_var is not None else default)

    return factory


PROBLEM_SPECS: dict[str, ProblemSpec] = {
    "zdt1": ProblemSpec("zdt1", "ZDT1", _with_n_var(ZDT1Problem, 30), 2, "Convex bi-objective front"),
    "zdt2": ProblemSpec("zdt2", "ZDT2", _with_n_var(ZDT2Problem, 30), 2, "Concave bi-objective front"),
    "zdt3": ProblemSpec("zdt3", "ZDT3", _with_n_var(ZDT3Problem, 30), 2, "Disconnected bi-objective front"),
    "sphere_ineq": ProblemSpec(
        "sphere_ineq",
        "Sphere with sum(x) >= 1",
        _with_n_var(SphereInequalityProblem, 5),
        1,
        "Single-objective, one inequality",
    ),
    "hs71": ProblemSpec(
        "hs71",
        "Hock-Schittkowsky 71",
        lambda n_var=None: HockSchittkowsky71Problem(),
        1,
        "Single-objective, one equality and one inequality",
    ),
}


def available_problem_names() -> tuple[str, ...]:
    return tuple(PROBLEM_SPECS.keys())


def make_problem(name: str, n_var: int | None = None) -> Problem:
    spec = PROBLEM_SPECS.get(name.lower())
    if spec is None:
        raise InvalidProblemError(name, list(available_problem_names()))
    return spec.factory(n_var)


__all__ = ["ProblemSpec", "PROBLEM_SPECS", "available_problem_names", "make_problem"]
