"""
Population container: decision vectors and fitness vectors over one problem.
"""

from __future__ import annotations

import numpy as np

from moswarm.foundation.exceptions import InvalidArgumentError
from moswarm.foundation.kernel.sampling import random_decision_vector
from moswarm.foundation.problem.base import Problem


class Population:
    """Ordered set of individuals evaluated on a single problem.

    Parameters
    ----------
    problem : Problem
        Problem every individual is evaluated on.
    size : int
        Number of random individuals to draw and evaluate.
    seed : int, optional
        Seed of the generator used for the random individuals.

    Examples
    --------
    >>> pop = Population(ZDT1Problem(n_var=5), size=20, seed=32)
    >>> pop.get_f().shape
    (20, 2)
    """

    def __init__(self, problem: Problem, size: int = 0, seed: int | None = None) -> None:
        if size < 0:
            raise InvalidArgumentError(f"Population size must be non-negative, got {size}.")
        self._problem = problem
        self._seed = seed
        self._X = np.empty((0, problem.n_x), dtype=float)
        self._F = np.empty((0, problem.n_f), dtype=float)

        lb, ub = problem.bounds()
        rng = np.random.default_rng(seed)
        for _ in range(size):
            self.push_back(random_decision_vector(lb, ub, int(problem.n_ix), rng))

    @property
    def problem(self) -> Problem:
        return self._problem

    def get_seed(self) -> int | None:
        return self._seed

    def size(self) -> int:
        return int(self._X.shape[0])

    def __len__(self) -> int:
        return self.size()

    def get_x(self) -> np.ndarray:
        return self._X.copy()

    def get_f(self) -> np.ndarray:
        return self._F.copy()

    def push_back(self, x, f=None) -> None:
        """Append an individual, evaluating it when ``f`` is not given."""
        x = self._check_x(x)
        f = self._problem.fitness(x) if f is None else self._check_f(f)
        self._X = np.vstack([self._X, x[None, :]])
        self._F = np.vstack([self._F, f[None, :]])

    def set_xf(self, i: int, x, f) -> None:
        """Replace individual ``i`` without re-evaluating it."""
        self._check_index(i)
        self._X[i] = self._check_x(x)
        self._F[i] = self._check_f(f)

    def set_x(self, i: int, x) -> None:
        """Replace individual ``i`` and evaluate the new decision vector."""
        self._check_index(i)
        x = self._check_x(x)
        self.set_xf(i, x, self._problem.fitness(x))

    def best_idx(self) -> int:
        """Index of the individual with the lowest first objective (single-objective only)."""
        if self._problem.n_obj != 1:
            raise InvalidArgumentError("best_idx() is only defined for single-objective problems.")
        if self.size() == 0:
            raise InvalidArgumentError("best_idx() called on an empty population.")
        return int(np.argmin(self._F[:, 0]))

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self.size():
            raise IndexError(f"Index {i} is out of range for a population of size {self.size()}.")

    def _check_x(self, x) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        if x.shape != (self._problem.n_x,):
            raise InvalidArgumentError(
                f"Decision vector has shape {x.shape}, expected ({self._problem.n_x},)."
            )
        return x

    def _check_f(self, f) -> np.ndarray:
        f = np.asarray(f, dtype=float)
        if f.shape != (self._problem.n_f,):
            raise InvalidArgumentError(
                f"Fitness vector has shape {f.shape}, expected ({self._problem.n_f},)."
            )
        return f

    def __repr__(self) -> str:
        return (
            f"Population(problem={self._problem.get_name()}, size={self.size()}, "
            f"fevals={self._problem.get_fevals()})"
        )


__all__ = ["Population"]
