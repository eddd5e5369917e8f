"""ACO core algorithm implementation.

Extended ant colony optimization for constrained problems: feasible
individuals are ranked by the oracle penalty, the best ``ker`` of them form
a solution archive, and every generation the whole population is resampled
from a weighted sum of Gaussians centred on the archive rows.

Reference:
    Schlueter, M., Egea, J.A., Banga, J.R. (2009). Extended ant colony
    optimization for non-convex mixed integer nonlinear programming.
    Computers & Operations Research 36(7), pp. 2217-2229.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from moswarm.engine.algorithm.components.base import GenerationTable, UserAlgorithm
from moswarm.engine.algorithm.config.aco import ACOConfigData
from moswarm.foundation.exceptions import IncompatibleProblemError
from moswarm.foundation.kernel.multi_objective import ideal

from .archive import SolutionArchive
from .penalty import penalize
from .pheromones import kernel_sigma, kernel_weights, sample_offspring

if TYPE_CHECKING:
    from moswarm.foundation.population import Population
    from moswarm.foundation.problem.base import Problem

_logger = logging.getLogger(__name__)

__all__ = ["ACO"]


class ACO(UserAlgorithm):
    """Extended Ant Colony Optimizer with oracle-penalty constraint handling.

    Parameters
    ----------
    gen : int
        Number of generations to evolve.
    acc : float
        Constraint tolerance in [0, 1).
    fstop : float
        Stop once any objective value is at or below this target (0 disables).
    impstop : int
        Stop after this many generations without archive insertions (0 disables).
    evalstop : int
        Stop after this many generations without a new best row (0 disables).
    focus : float
        Caps the sampling spread at ``(ub - lb) / focus`` when non-zero; in [0, 1).
    ker : int
        Solution archive size; must not exceed the population size.
    oracle : float
        Target objective value of the oracle penalty.
    paretomax : int
        Reserved: bound on stored non-dominated solutions.
    epsilon : float
        Reserved: Pareto precision in [0, 1).
    residual_norm : str
        ``"l1"``, ``"l2"`` or ``"linf"``.
    seed : int, optional
        Seed of the internal generator.
    """

    name = "ACO: Ant Colony Optimization"
    registry_key = "aco"
    config_class = ACOConfigData
    _extra_info_labels = (
        ("gen", "Generations"),
        ("acc", "Accuracy parameter"),
        ("fstop", "Objective stopping criterion"),
        ("impstop", "Improvement stopping criterion"),
        ("evalstop", "Evaluation stopping criterion"),
        ("focus", "Focus parameter"),
        ("ker", "Kernel"),
        ("oracle", "Oracle parameter"),
        ("paretomax", "Max number of non-dominated solutions"),
        ("epsilon", "Pareto precision"),
        ("residual_norm", "Residual norm"),
    )

    def __init__(
        self,
        gen: int = 1,
        acc: float = 0.95,
        fstop: float = 1.0,
        impstop: int = 1,
        evalstop: int = 1,
        focus: float = 0.9,
        ker: int = 10,
        oracle: float = 1.0,
        paretomax: int = 10,
        epsilon: float = 0.9,
        residual_norm: str = "l2",
        seed: int | None = None,
    ) -> None:
        self.config = ACOConfigData(
            gen=gen,
            acc=acc,
            fstop=fstop,
            impstop=impstop,
            evalstop=evalstop,
            focus=focus,
            ker=ker,
            oracle=oracle,
            paretomax=paretomax,
            epsilon=epsilon,
            residual_norm=residual_norm,
            seed=seed,
        )
        super().__init__(seed=seed)
        self._penalty_trace: list[float] = []

    def get_penalty_trace(self) -> list[float]:
        """Best archive penalty after each archive step of the last evolve call."""
        return list(self._penalty_trace)

    # -------------------------------------------------------------------------
    # Evolution
    # -------------------------------------------------------------------------

    def evolve(self, pop: "Population") -> "Population":
        """Evolve ``pop`` in place for up to ``gen`` generations and return it."""
        prob = pop.problem
        self._check_preconditions(prob, pop.size())
        cfg = self.config
        if cfg.gen == 0:
            return pop
        self._log = []
        self._penalty_trace = []

        size = pop.size()
        lb, ub = prob.bounds()
        omega = kernel_weights(cfg.ker)
        table = GenerationTable(_logger, prob.n_obj)

        archive: SolutionArchive | None = None
        count_impstop = 0
        count_evalstop = 0

        for gen in range(1, cfg.gen + 1):
            if cfg.impstop != 0 and count_impstop >= cfg.impstop:
                _logger.debug("Exit condition -- impstop: %d generations without improvement", count_impstop)
                return pop
            if cfg.evalstop != 0 and count_evalstop >= cfg.evalstop:
                _logger.debug("Exit condition -- evalstop: %d generations without a new best", count_evalstop)
                return pop

            X = pop.get_x()
            F = pop.get_f()
            if cfg.fstop != 0.0 and np.any(F[:, 0] <= cfg.fstop):
                _logger.debug("Exit condition -- fstop: objective reached %.6g", float(np.min(F[:, 0])))
                return pop

            if self._should_log(gen):
                self._record(table, gen, prob.get_fevals(), ideal(F[:, : prob.n_obj]))

            feasible, penalty = penalize(F, prob.n_obj, prob.n_ec, cfg.acc, cfg.oracle, cfg.residual_norm)
            if archive is None:
                archive = SolutionArchive.initialise(
                    penalty, X, F, feasible, cfg.ker, algorithm=self.registry_key
                )
            else:
                if not np.any(feasible):
                    _logger.debug("Generation %d has no feasible individual", gen)
                update = archive.update(penalty, X, F, feasible)
                count_evalstop = 0 if update.best_changed else count_evalstop + 1
                count_impstop = 0 if update.n_inserted else count_impstop + 1
            self._penalty_trace.append(archive.best_penalty)

            sigma = kernel_sigma(archive.X, lb, ub, cfg.gen, cfg.focus)
            offspring = sample_offspring(archive.X, omega, sigma, size, self._rng, lb, ub, int(prob.n_ix))
            for i in range(size):
                pop.set_xf(i, offspring[i], prob.fitness(offspring[i]))

        return pop

    def _check_preconditions(self, prob: "Problem", size: int) -> None:
        if size == 0:
            raise IncompatibleProblemError(f"{self.name} cannot work on an empty population.", algorithm=self.registry_key)
        if prob.is_stochastic():
            raise IncompatibleProblemError(
                f"The problem appears to be stochastic, {self.name} cannot deal with it.", algorithm=self.registry_key
            )
        if prob.n_obj > 1:
            raise IncompatibleProblemError(
                f"{self.name} handles single-objective problems only, {prob.get_name()} has {prob.n_obj} objectives.",
                algorithm=self.registry_key,
            )
        if self.config.ker > size:
            raise IncompatibleProblemError(
                f"{self.name} cannot work with a solution archive ({self.config.ker}) "
                f"bigger than the population size ({size}).",
                algorithm=self.registry_key,
            )
