"""NSPSO core algorithm implementation.

Non-dominated Sorting Particle Swarm Optimization moves every particle
towards its personal best and towards a leader drawn from the top of a
diversity-ranked non-dominated set, then keeps the best half of the
parent + offspring swarm by Pareto dominance.

Reference:
    Li, X. (2003). A non-dominated sorting particle swarm optimizer for
    multiobjective optimization. GECCO 2003, LNCS 2723, pp. 37-48.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from moswarm.engine.algorithm.components.base import GenerationTable, UserAlgorithm
from moswarm.engine.algorithm.config.nspso import DiversityMechanism, NSPSOConfigData
from moswarm.foundation.exceptions import CheckpointError, IncompatibleProblemError
from moswarm.foundation.kernel.multi_objective import ideal
from moswarm.foundation.kernel.sampling import uniform_real_from_range

from .leaders import leader_extent, leader_indices
from .selection import select_survivors
from .state import SwarmBuffer

if TYPE_CHECKING:
    from moswarm.foundation.population import Population
    from moswarm.foundation.problem.base import Problem

_logger = logging.getLogger(__name__)

__all__ = ["NSPSO"]


class NSPSO(UserAlgorithm):
    """Non-dominated Sorting Particle Swarm Optimizer.

    Parameters
    ----------
    gen : int
        Number of generations to evolve.
    min_w, max_w : float
        Final and initial inertia weight; the weight decreases linearly.
    c1, c2 : float
        Magnitudes of the pull towards the personal best and the leader.
    chi : float
        Velocity scaling factor applied when moving a particle.
    v_coeff : float
        Velocity bound as a fraction of each coordinate's range, in (0, 1].
    leader_selection_range : int
        Percentage of the leader ranking from which leaders are drawn.
    diversity_mechanism : str
        ``"crowding distance"``, ``"niche count"`` or ``"max min"``.
    seed : int, optional
        Seed of the internal generator.

    Examples
    --------
    >>> algo = NSPSO(gen=50, seed=32)
    >>> pop = Population(ZDT1Problem(n_var=30), size=40, seed=32)
    >>> pop = algo.evolve(pop)
    """

    name = "NSPSO: Non-dominated Sorting Particle Swarm Optimization"
    registry_key = "nspso"
    config_class = NSPSOConfigData
    _extra_info_labels = (
        ("gen", "Generations"),
        ("min_w", "Minimum particles' inertia weight"),
        ("max_w", "Maximum particles' inertia weight"),
        ("c1", "First magnitude of the force coefficients"),
        ("c2", "Second magnitude of the force coefficients"),
        ("chi", "Velocity scaling factor"),
        ("v_coeff", "Velocity coefficient"),
        ("leader_selection_range", "Leader selection range"),
        ("diversity_mechanism", "Diversity mechanism"),
    )

    def __init__(
        self,
        gen: int = 1,
        min_w: float = 0.95,
        max_w: float = 10.0,
        c1: float = 0.01,
        c2: float = 0.5,
        chi: float = 0.5,
        v_coeff: float = 0.5,
        leader_selection_range: int = 2,
        diversity_mechanism: str | DiversityMechanism = DiversityMechanism.CROWDING_DISTANCE,
        seed: int | None = None,
    ) -> None:
        self.config = NSPSOConfigData(
            gen=gen,
            min_w=min_w,
            max_w=max_w,
            c1=c1,
            c2=c2,
            chi=chi,
            v_coeff=v_coeff,
            leader_selection_range=leader_selection_range,
            diversity_mechanism=DiversityMechanism.parse(diversity_mechanism).value,
            seed=seed,
        )
        super().__init__(seed=seed)
        self._velocity: np.ndarray | None = None

    # -------------------------------------------------------------------------
    # Evolution
    # -------------------------------------------------------------------------

    def evolve(self, pop: "Population") -> "Population":
        """Evolve ``pop`` in place for ``gen`` generations and return it."""
        prob = pop.problem
        self._check_preconditions(prob, pop.size())
        cfg = self.config
        if cfg.gen == 0:
            return pop
        self._log = []

        swarm_size = pop.size()
        n_x = prob.n_x
        lb, ub = prob.bounds()
        vwidth = (ub - lb) * cfg.v_coeff
        minv, maxv = -vwidth, vwidth

        if self._velocity is None or self._velocity.shape != (swarm_size, n_x):
            _logger.debug("Seeding %d particle velocities", swarm_size)
            self._velocity = uniform_real_from_range(minv, maxv, self._rng, size=(swarm_size, n_x))
        else:
            # cached velocities may come from a problem with wider bounds
            self._velocity = np.clip(self._velocity, minv, maxv)

        swarm = SwarmBuffer.from_population(pop.get_x(), pop.get_f(), self._velocity)
        table = GenerationTable(_logger, prob.n_obj)
        mechanism = cfg.mechanism

        for gen in range(1, cfg.gen + 1):
            fit = pop.get_f()
            if self._should_log(gen):
                self._record(table, gen, prob.get_fevals(), ideal(fit))

            leaders = leader_indices(mechanism, fit, swarm.best_x)
            w = cfg.max_w - (cfg.max_w - cfg.min_w) / cfg.gen * gen
            X_off, V_off, F_off = self._move(prob, swarm, leaders, w, lb, ub, minv, maxv)
            swarm.extend(X_off, V_off, F_off)

            survivors = select_survivors(mechanism, swarm.best_f, swarm_size, self._rng)
            swarm = swarm.take(survivors)
            for i in range(swarm_size):
                pop.set_xf(i, swarm.cur_x[i], swarm.cur_f[i])

        self._velocity = swarm.cur_v.copy()
        return pop

    def _move(
        self,
        prob: "Problem",
        swarm: SwarmBuffer,
        leaders: np.ndarray,
        w: float,
        lb: np.ndarray,
        ub: np.ndarray,
        minv: np.ndarray,
        maxv: np.ndarray,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """One offspring per particle; only the continuous coordinates move."""
        cfg = self.config
        rng = self._rng
        swarm_size = len(swarm)
        c = slice(0, prob.n_cx)
        ext = leader_extent(leaders.size, cfg.leader_selection_range)

        X_off = swarm.cur_x.copy()
        V_off = swarm.cur_v.copy()
        F_off = np.empty((swarm_size, prob.n_f), dtype=float)

        for idx in range(swarm_size):
            pick = int(rng.integers(0, ext, endpoint=True))
            while leaders[pick] == idx:
                pick = int(rng.integers(0, ext, endpoint=True))
            leader_x = swarm.best_x[leaders[pick], c]

            r1 = rng.random()
            r2 = rng.random()

            cur_x = swarm.cur_x[idx, c]
            v = (
                w * swarm.cur_v[idx, c]
                + cfg.c1 * r1 * (swarm.best_x[idx, c] - cur_x)
                + cfg.c2 * r2 * (leader_x - cur_x)
            )
            v = np.clip(v, minv[c], maxv[c])
            x = cur_x + cfg.chi * v

            above = x > ub[c]
            below = x < lb[c]
            x = np.where(above, ub[c], np.where(below, lb[c], x))
            v = np.where(above | below, 0.0, v)

            X_off[idx, c] = x
            V_off[idx, c] = v
            F_off[idx] = prob.fitness(X_off[idx])

        return X_off, V_off, F_off

    def _check_preconditions(self, prob: "Problem", swarm_size: int) -> None:
        if prob.n_cx == 0:
            raise IncompatibleProblemError(
                f"{self.name} cannot work on problems without continuous part.", algorithm=self.registry_key
            )
        if prob.is_stochastic():
            raise IncompatibleProblemError(
                f"The problem appears to be stochastic, {self.name} cannot deal with it.", algorithm=self.registry_key
            )
        if prob.n_constraints != 0:
            raise IncompatibleProblemError(
                f"Constraints detected in {prob.get_name()} instance. {self.name} cannot deal with them.",
                algorithm=self.registry_key,
            )
        if prob.n_obj < 2:
            raise IncompatibleProblemError(
                f"This is a multi-objective algorithm, while the number of objectives detected in "
                f"{prob.get_name()} is {prob.n_obj}.",
                algorithm=self.registry_key,
            )
        if swarm_size == 0:
            raise IncompatibleProblemError(
                f"{self.name} does not work on an empty population.", algorithm=self.registry_key
            )
        if swarm_size < 2:
            raise IncompatibleProblemError(
                f"{self.name} needs a swarm of at least 2 particles, got {swarm_size}.",
                algorithm=self.registry_key,
            )

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def get_velocity(self) -> np.ndarray | None:
        """Velocity cache carried between evolve calls on swarms of the same size."""
        return None if self._velocity is None else self._velocity.copy()

    def state_dict(self) -> dict[str, Any]:
        state = super().state_dict()
        state["velocity"] = None if self._velocity is None else self._velocity.copy()
        return state

    def load_state_dict(self, state: dict[str, Any]) -> None:
        super().load_state_dict(state)
        if "velocity" not in state:
            raise CheckpointError("NSPSO state is missing the velocity cache.")
        velocity = state["velocity"]
        self._velocity = None if velocity is None else np.array(velocity, dtype=float)
