from __future__ import annotations

import numpy as np
import pytest

from moswarm.foundation.exceptions import InvalidArgumentError
from moswarm.foundation.population import Population
from moswarm.foundation.problem import Problem, SphereInequalityProblem, ZDT1Problem


class _MixedIntegerProblem(Problem):
    n_ix = 2

    def __init__(self) -> None:
        self.n_var = 4
        self.n_obj = 2
        self.xl = np.array([0.0, 0.0, -3.0, 1.5])
        self.xu = np.array([1.0, 1.0, 3.0, 4.5])

    def objectives(self, x):
        return [float(x[0]), float(np.sum(x[1:] ** 2))]


def test_random_population_is_evaluated():
    prob = ZDT1Problem(n_var=5)
    pop = Population(prob, size=12, seed=3)
    X, F = pop.get_x(), pop.get_f()
    assert X.shape == (12, 5)
    assert F.shape == (12, 2)
    assert len(pop) == pop.size() == 12
    assert prob.get_fevals() == 12
    assert np.all((X >= 0.0) & (X <= 1.0))
    for x, f in zip(X, F):
        assert np.allclose(ZDT1Problem(n_var=5).fitness(x), f)


def test_same_seed_same_population():
    a = Population(ZDT1Problem(n_var=4), size=6, seed=11)
    b = Population(ZDT1Problem(n_var=4), size=6, seed=11)
    assert np.array_equal(a.get_x(), b.get_x())
    assert a.get_seed() == 11


def test_integer_coordinates_are_integral():
    pop = Population(_MixedIntegerProblem(), size=20, seed=5)
    X = pop.get_x()
    assert np.array_equal(X[:, 2:], np.round(X[:, 2:]))
    assert np.all((X[:, 2] >= -3) & (X[:, 2] <= 3))
    assert np.all((X[:, 3] >= 2) & (X[:, 3] <= 4))


def test_set_xf_does_not_evaluate():
    prob = ZDT1Problem(n_var=3)
    pop = Population(prob, size=2, seed=1)
    pop.set_xf(0, np.zeros(3), np.array([9.0, 9.0]))
    assert prob.get_fevals() == 2
    assert np.array_equal(pop.get_f()[0], [9.0, 9.0])


def test_set_x_evaluates():
    prob = ZDT1Problem(n_var=3)
    pop = Population(prob, size=2, seed=1)
    pop.set_x(1, np.zeros(3))
    assert prob.get_fevals() == 3
    assert np.allclose(pop.get_f()[1], [0.0, 1.0])


def test_push_back_with_and_without_fitness():
    prob = ZDT1Problem(n_var=3)
    pop = Population(prob)
    pop.push_back(np.full(3, 0.5))
    pop.push_back(np.zeros(3), f=np.array([0.0, 1.0]))
    assert pop.size() == 2
    assert prob.get_fevals() == 1


def test_getters_return_copies():
    pop = Population(ZDT1Problem(n_var=3), size=2, seed=0)
    X = pop.get_x()
    X[:] = -1.0
    assert np.all(pop.get_x() >= 0.0)


def test_bad_index_and_lengths():
    pop = Population(ZDT1Problem(n_var=3), size=2, seed=0)
    with pytest.raises(IndexError):
        pop.set_xf(2, np.zeros(3), np.zeros(2))
    with pytest.raises(InvalidArgumentError):
        pop.set_xf(0, np.zeros(4), np.zeros(2))
    with pytest.raises(InvalidArgumentError):
        pop.set_xf(0, np.zeros(3), np.zeros(3))


def test_best_idx_single_objective_only():
    pop = Population(SphereInequalityProblem(n_var=2), size=5, seed=2)
    best = pop.best_idx()
    assert pop.get_f()[best, 0] == pop.get_f()[:, 0].min()
    with pytest.raises(InvalidArgumentError):
        Population(ZDT1Problem(n_var=2), size=2, seed=2).best_idx()
