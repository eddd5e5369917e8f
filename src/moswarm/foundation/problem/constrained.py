"""Single-objective constrained benchmarks.

Constraints live in the fitness tail: equality residuals first, then
inequality residuals in the g(x) <= 0 form.
"""

from __future__ import annotations

import numpy as np

from moswarm.foundation.problem.base import Problem


class SphereInequalityProblem(Problem):
    """Sphere function subject to ``sum(x) >= threshold``.

    Most of the box is feasible, which makes it a gentle target for
    archive-based methods that need feasible individuals from the start.
    """

    n_ic = 1

    def __init__(self, n_var: int = 5, threshold: float = 1.0) -> None:
        self.n_var = int(n_var)
        self.n_obj = 1
        self.xl = 0.0
        self.xu = 10.0
        self.threshold = float(threshold)

    def objectives(self, x: np.ndarray) -> np.ndarray:
        return np.array([float(np.sum(x**2))])

    def inequality_constraints(self, x: np.ndarray) -> np.ndarray:
        return np.array([self.threshold - float(np.sum(x))])


class HockSchittkowsky71Problem(Problem):
    """Problem 71 of the Hock-Schittkowsky collection.

    minimize  x0 * x3 * (x0 + x1 + x2) + x2
    s.t.      x0^2 + x1^2 + x2^2 + x3^2 - 40 = 0
              25 - x0 * x1 * x2 * x3 <= 0
              1 <= xi <= 5
    """

    n_ec = 1
    n_ic = 1

    def __init__(self) -> None:
        self.n_var = 4
        self.n_obj = 1
        self.xl = np.ones(4)
        self.xu = np.full(4, 5.0)

    def objectives(self, x: np.ndarray) -> np.ndarray:
        return np.array([x[0] * x[3] * (x[0] + x[1] + x[2]) + x[2]])

    def equality_constraints(self, x: np.ndarray) -> np.ndarray:
        return np.array([float(np.sum(x**2)) - 40.0])

    def inequality_constraints(self, x: np.ndarray) -> np.ndarray:
        return np.array([25.0 - float(np.prod(x))])


__all__ = ["SphereInequalityProblem", "HockSchittkowsky71Problem"]
