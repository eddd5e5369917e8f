"""Solution archive: the ``ker`` best feasible candidates, best first."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from moswarm.engine.algorithm.components.diversity import ascending_order
from moswarm.foundation.exceptions import InfeasiblePopulationError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveUpdate:
    n_inserted: int
    best_changed: bool


@dataclass
class SolutionArchive:
    """
    Rows sorted by ascending penalty.

    Attributes
    ----------
    penalty : np.ndarray
        Penalties, shape (ker,).
    X : np.ndarray
        Decision vectors, shape (ker, n_x).
    F : np.ndarray
        Fitness vectors, shape (ker, n_f).
    """

    penalty: np.ndarray
    X: np.ndarray
    F: np.ndarray

    @classmethod
    def initialise(
        cls,
        penalty: np.ndarray,
        X: np.ndarray,
        F: np.ndarray,
        feasible: np.ndarray,
        ker: int,
        *,
        algorithm: str | None = None,
    ) -> "SolutionArchive":
        """Fill the archive with the ``ker`` best feasible rows of the population."""
        candidates = np.flatnonzero(feasible)
        if candidates.size < ker:
            raise InfeasiblePopulationError(
                f"Only {candidates.size} feasible individuals found, the solution archive needs {ker}.",
                n_feasible=int(candidates.size),
                required=ker,
                algorithm=algorithm,
            )
        chosen = candidates[ascending_order(penalty[candidates])][:ker]
        return cls(
            penalty=np.array(penalty[chosen], dtype=float),
            X=np.array(X[chosen], dtype=float),
            F=np.array(F[chosen], dtype=float),
        )

    def __len__(self) -> int:
        return int(self.penalty.size)

    @property
    def best_penalty(self) -> float:
        return float(self.penalty[0])

    def update(self, penalty: np.ndarray, X: np.ndarray, F: np.ndarray, feasible: np.ndarray) -> ArchiveUpdate:
        """
        Insert feasible candidates that beat the worst row, keeping ``ker`` rows.

        Candidates are scanned in ascending penalty order and stop at the first
        one that is not strictly better than the current worst row. A candidate
        equal to a stored decision vector is skipped. Ties keep the stored row
        ahead of the newcomer.
        """
        candidates = np.flatnonzero(feasible)
        candidates = candidates[ascending_order(penalty[candidates])]
        inserted = 0
        best_changed = False
        for i in candidates:
            p = float(penalty[i])
            if not p < self.penalty[-1]:
                break
            if np.any(np.all(self.X == X[i], axis=1)):
                continue
            pos = int(np.searchsorted(self.penalty, p, side="right"))
            self.penalty = np.insert(self.penalty, pos, p)[:-1]
            self.X = np.insert(self.X, pos, X[i], axis=0)[:-1]
            self.F = np.insert(self.F, pos, F[i], axis=0)[:-1]
            inserted += 1
            best_changed = best_changed or pos == 0
        if inserted:
            _logger.debug("Archive update: %d inserted, best penalty %.6g", inserted, self.best_penalty)
        return ArchiveUpdate(n_inserted=inserted, best_changed=best_changed)


__all__ = ["ArchiveUpdate", "SolutionArchive"]
