"""Flat particle buffer used by NSPSO within one evolve call."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class SwarmBuffer:
    """Row-aligned particle arrays.

    Row ``i`` of every array describes particle ``i``. The buffer holds ``N``
    particles between generations and ``2N`` after the move step appends the
    offspring.

    Attributes
    ----------
    cur_x, best_x : np.ndarray
        Current and personal-best positions, shape (M, n_x).
    cur_v : np.ndarray
        Current velocities, shape (M, n_x).
    cur_f, best_f : np.ndarray
        Current and personal-best fitness, shape (M, n_f).
    """

    cur_x: np.ndarray
    best_x: np.ndarray
    cur_v: np.ndarray
    cur_f: np.ndarray
    best_f: np.ndarray

    @classmethod
    def from_population(cls, X: np.ndarray, F: np.ndarray, V: np.ndarray) -> "SwarmBuffer":
        X = np.array(X, dtype=float)
        F = np.array(F, dtype=float)
        return cls(cur_x=X, best_x=X.copy(), cur_v=np.array(V, dtype=float), cur_f=F, best_f=F.copy())

    def __len__(self) -> int:
        return int(self.cur_x.shape[0])

    def extend(self, X: np.ndarray, V: np.ndarray, F: np.ndarray) -> None:
        """Append offspring whose personal best is their own position."""
        self.cur_x = np.vstack([self.cur_x, X])
        self.best_x = np.vstack([self.best_x, X])
        self.cur_v = np.vstack([self.cur_v, V])
        self.cur_f = np.vstack([self.cur_f, F])
        self.best_f = np.vstack([self.best_f, F])

    def take(self, indices: np.ndarray | list[int]) -> "SwarmBuffer":
        idx = np.asarray(indices, dtype=int)
        return SwarmBuffer(
            cur_x=self.cur_x[idx].copy(),
            best_x=self.best_x[idx].copy(),
            cur_v=self.cur_v[idx].copy(),
            cur_f=self.cur_f[idx].copy(),
            best_f=self.best_f[idx].copy(),
        )


__all__ = ["SwarmBuffer"]
