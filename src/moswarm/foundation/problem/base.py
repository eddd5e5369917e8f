"""
Base class for box-bounded optimization problems.
"""

from __future__ import annotations

from collections import OrderedDict

import numpy as np

from moswarm.foundation.exceptions import BoundsError, EvaluationError


class Problem:
    """Base class for class-based optimization problems.

    Subclass this and evaluate one decision vector at a time.

    **Required:** set ``n_var``, ``n_obj``, ``xl``, ``xu`` in ``__init__``
    and override :meth:`objectives`.
    **Optional:** override ``n_ix``, ``n_ec``, ``n_ic`` and ``stochastic``
    as class-level attributes, and the matching constraint methods.

    The fitness vector is ``[objectives, equality residuals, inequality residuals]``.
    An equality residual is satisfied when it is (close to) zero; an inequality
    residual follows the g(x) <= 0 convention, so negative values are feasible.

    Example, constrained::

        import numpy as np
        from moswarm import Problem

        class MyConstrainedProblem(Problem):
            n_ic = 1                   # declare at class level

            def __init__(self):
                self.n_var = 3
                self.n_obj = 1
                self.xl = np.zeros(3)
                self.xu = np.ones(3)

            def objectives(self, x):
                return [np.sum(x ** 2)]

            def inequality_constraints(self, x):
                return [1.0 - np.sum(x)]   # sum(x) >= 1
    """

    # ------------------------------------------------------------------
    # Class-level defaults: override at class body level, not in __init__
    # ------------------------------------------------------------------

    n_ix: int = 0
    """Number of integer variables (the trailing ``n_ix`` coordinates)."""

    n_ec: int = 0
    """Number of equality constraints."""

    n_ic: int = 0
    """Number of inequality constraints."""

    stochastic: bool = False
    """Whether the fitness depends on hidden random state."""

    cache_size: int = 0
    """Size of the fitness memo. ``0`` disables it."""

    # ------------------------------------------------------------------
    # User-overridable interface
    # ------------------------------------------------------------------

    def objectives(self, x: np.ndarray) -> np.ndarray:
        """Compute the objective values (to **minimize**) of one decision vector."""
        raise NotImplementedError(f"{type(self).__name__} must implement objectives(self, x).")

    def equality_constraints(self, x: np.ndarray) -> np.ndarray:
        """Equality residuals of length ``n_ec``."""
        if self.n_ec:
            raise NotImplementedError(
                f"{type(self).__name__} declares n_ec={self.n_ec} but does not implement equality_constraints()."
            )
        return np.empty(0)

    def inequality_constraints(self, x: np.ndarray) -> np.ndarray:
        """Inequality residuals of length ``n_ic`` (g(x) <= 0 is feasible)."""
        if self.n_ic:
            raise NotImplementedError(
                f"{type(self).__name__} declares n_ic={self.n_ic} but does not implement inequality_constraints()."
            )
        return np.empty(0)

    def get_name(self) -> str:
        return type(self).__name__

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def n_x(self) -> int:
        return int(self.n_var)

    @property
    def n_cx(self) -> int:
        """Number of continuous variables."""
        return int(self.n_var) - int(self.n_ix)

    @property
    def n_f(self) -> int:
        return int(self.n_obj) + int(self.n_ec) + int(self.n_ic)

    @property
    def n_constraints(self) -> int:
        return int(self.n_ec) + int(self.n_ic)

    def is_stochastic(self) -> bool:
        return bool(self.stochastic)

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Return ``(lb, ub)`` as float arrays of length ``n_var``."""
        n_var = int(self.n_var)
        lb = np.asarray(self.xl, dtype=float)
        ub = np.asarray(self.xu, dtype=float)
        if lb.ndim == 0:
            lb = np.full(n_var, float(lb))
        if ub.ndim == 0:
            ub = np.full(n_var, float(ub))
        if lb.shape != (n_var,) or ub.shape != (n_var,):
            raise BoundsError(
                f"Bounds of {self.get_name()} must have length {n_var}, got {lb.shape} and {ub.shape}."
            )
        if np.any(lb > ub):
            raise BoundsError(f"Lower bounds of {self.get_name()} exceed upper bounds.")
        return lb.copy(), ub.copy()

    # ------------------------------------------------------------------
    # Framework entry point, do not override
    # ------------------------------------------------------------------

    def fitness(self, x: np.ndarray) -> np.ndarray:
        """Evaluate one decision vector and return its fitness vector.

        Every call that is not served by the fitness memo increments the
        evaluation counter.
        """
        x = np.asarray(x, dtype=float)
        if x.shape != (self.n_x,):
            raise EvaluationError(
                f"{self.get_name()} expects decision vectors of length {self.n_x}, got shape {x.shape}.",
                solution=x,
            )

        memo = self._memo()
        key = x.tobytes() if memo is not None else None
        if key is not None and key in memo:
            memo.move_to_end(key)
            return memo[key].copy()

        parts = [
            np.atleast_1d(np.asarray(self.objectives(x), dtype=float)),
            np.atleast_1d(np.asarray(self.equality_constraints(x), dtype=float)),
            np.atleast_1d(np.asarray(self.inequality_constraints(x), dtype=float)),
        ]
        expected = (int(self.n_obj), int(self.n_ec), int(self.n_ic))
        for part, size, label in zip(parts, expected, ("objectives", "equality residuals", "inequality residuals")):
            if part.shape != (size,):
                raise EvaluationError(
                    f"{self.get_name()} returned {part.size} {label}, expected {size}.",
                    solution=x,
                )
        f = np.concatenate(parts)
        self._fevals = self.get_fevals() + 1

        if key is not None:
            memo[key] = f.copy()
            if len(memo) > int(self.cache_size):
                memo.popitem(last=False)
        return f

    def get_fevals(self) -> int:
        return int(getattr(self, "_fevals", 0))

    def _memo(self) -> OrderedDict[bytes, np.ndarray] | None:
        if int(self.cache_size) <= 0:
            return None
        memo = getattr(self, "_fitness_memo", None)
        if memo is None:
            memo = OrderedDict()
            self._fitness_memo = memo
        return memo


__all__ = ["Problem"]
