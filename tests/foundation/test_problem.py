from __future__ import annotations

import numpy as np
import pytest

from moswarm.foundation.exceptions import BoundsError, EvaluationError, InvalidProblemError
from moswarm.foundation.problem import (
    HockSchittkowsky71Problem,
    Problem,
    SphereInequalityProblem,
    ZDT1Problem,
    available_problem_names,
    make_problem,
)


class _CountingProblem(Problem):
    n_ic = 1
    cache_size = 4

    def __init__(self) -> None:
        self.n_var = 2
        self.n_obj = 1
        self.xl = -1.0
        self.xu = 1.0

    def objectives(self, x):
        return [float(np.sum(x))]

    def inequality_constraints(self, x):
        return [float(x[0])]


class _WrongLengthProblem(Problem):
    def __init__(self) -> None:
        self.n_var = 2
        self.n_obj = 2
        self.xl = 0.0
        self.xu = 1.0

    def objectives(self, x):
        return [1.0]


class TestDimensions:
    def test_zdt1_dimensions(self):
        prob = ZDT1Problem(n_var=5)
        assert prob.n_x == 5
        assert prob.n_cx == 5
        assert prob.n_f == 2
        assert prob.n_constraints == 0
        assert not prob.is_stochastic()
        assert prob.get_name() == "ZDT1Problem"

    def test_hs71_dimensions(self):
        prob = HockSchittkowsky71Problem()
        assert prob.n_f == 3
        assert prob.n_constraints == 2

    def test_scalar_bounds_broadcast(self):
        lb, ub = ZDT1Problem(n_var=4).bounds()
        assert np.array_equal(lb, np.zeros(4))
        assert np.array_equal(ub, np.ones(4))

    def test_inverted_bounds_rejected(self):
        prob = ZDT1Problem(n_var=3)
        prob.xl = np.array([0.0, 2.0, 0.0])
        with pytest.raises(BoundsError):
            prob.bounds()

    def test_wrong_bounds_shape_rejected(self):
        prob = ZDT1Problem(n_var=3)
        prob.xu = np.ones(2)
        with pytest.raises(BoundsError):
            prob.bounds()


class TestFitness:
    def test_fitness_layout_and_counter(self):
        prob = HockSchittkowsky71Problem()
        x = np.array([1.0, 5.0, 5.0, 1.0])
        f = prob.fitness(x)
        assert f.shape == (3,)
        assert f[0] == pytest.approx(1.0 * 1.0 * 11.0 + 5.0)
        assert f[1] == pytest.approx(52.0 - 40.0)
        assert f[2] == pytest.approx(25.0 - 25.0)
        assert prob.get_fevals() == 1

    def test_sphere_inequality_sign_convention(self):
        prob = SphereInequalityProblem(n_var=2, threshold=1.0)
        assert prob.fitness(np.array([2.0, 2.0]))[1] < 0.0
        assert prob.fitness(np.array([0.1, 0.1]))[1] > 0.0

    def test_memo_skips_counter(self):
        prob = _CountingProblem()
        x = np.array([0.5, -0.25])
        first = prob.fitness(x)
        second = prob.fitness(x.copy())
        assert np.array_equal(first, second)
        assert prob.get_fevals() == 1
        prob.fitness(np.array([0.1, 0.1]))
        assert prob.get_fevals() == 2

    def test_memo_evicts_oldest(self):
        prob = _CountingProblem()
        for k in range(6):
            prob.fitness(np.array([k / 10.0, 0.0]))
        assert prob.get_fevals() == 6
        prob.fitness(np.array([0.0, 0.0]))
        assert prob.get_fevals() == 7

    def test_no_memo_by_default(self):
        prob = ZDT1Problem(n_var=3)
        x = np.full(3, 0.5)
        prob.fitness(x)
        prob.fitness(x)
        assert prob.get_fevals() == 2

    def test_wrong_input_length(self):
        with pytest.raises(EvaluationError):
            ZDT1Problem(n_var=3).fitness(np.zeros(2))

    def test_wrong_output_length(self):
        with pytest.raises(EvaluationError):
            _WrongLengthProblem().fitness(np.zeros(2))

    def test_undeclared_constraint_method(self):
        class Missing(Problem):
            n_ec = 1

            def __init__(self):
                self.n_var = 1
                self.n_obj = 1
                self.xl = 0.0
                self.xu = 1.0

            def objectives(self, x):
                return [0.0]

        with pytest.raises(NotImplementedError):
            Missing().fitness(np.zeros(1))

    def test_user_exceptions_propagate(self):
        class Exploding(ZDT1Problem):
            def objectives(self, x):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            Exploding(n_var=2).fitness(np.zeros(2))


class TestRegistry:
    def test_available_names(self):
        names = available_problem_names()
        assert {"zdt1", "zdt2", "zdt3", "sphere_ineq", "hs71"} <= set(names)

    def test_make_problem_with_n_var(self):
        prob = make_problem("zdt2", n_var=7)
        assert prob.n_x == 7

    def test_unknown_problem(self):
        with pytest.raises(InvalidProblemError):
            make_problem("does-not-exist")
