"""ZDT bi-objective benchmarks (Zitzler, Deb and Thiele, 2000)."""

from __future__ import annotations

import numpy as np

from moswarm.foundation.problem.base import Problem


class _ZDTBase(Problem):
    def __init__(self, n_var: int = 30) -> None:
        if n_var < 2:
            raise ValueError(f"{type(self).__name__} requires at least two decision variables.")
        self.n_var = int(n_var)
        self.n_obj = 2
        # Bounds (identical for all decision variables in this family)
        self.xl = 0.0
        self.xu = 1.0

    @staticmethod
    def _g(x: np.ndarray) -> float:
        return 1.0 + 9.0 * float(np.mean(x[1:]))


class ZDT1Problem(_ZDTBase):
    """Convex Pareto front."""

    def objectives(self, x: np.ndarray) -> np.ndarray:
        f1 = x[0]
        g = self._g(x)
        f2 = g * (1.0 - np.sqrt(f1 / g))
        return np.array([f1, f2])


class ZDT2Problem(_ZDTBase):
    """
    Concave Pareto front.
    Shares structure with ZDT1 but uses a quadratic term in the second objective.
    """

    def objectives(self, x: np.ndarray) -> np.ndarray:
        f1 = x[0]
        g = self._g(x)
        f2 = g * (1.0 - (f1 / g) ** 2)
        return np.array([f1, f2])


class ZDT3Problem(_ZDTBase):
    """Disconnected Pareto front."""

    def objectives(self, x: np.ndarray) -> np.ndarray:
        f1 = x[0]
        g = self._g(x)
        ratio = f1 / g
        f2 = g * (1.0 - np.sqrt(ratio) - ratio * np.sin(10.0 * np.pi * f1))
        return np.array([f1, f2])


__all__ = ["ZDT1Problem", "ZDT2Problem", "ZDT3Problem"]
