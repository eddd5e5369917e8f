from __future__ import annotations

import numpy as np
import pytest

from moswarm.engine.algorithm.config.nspso import DiversityMechanism
from moswarm.engine.algorithm.nspso.leaders import (
    crowding_leaders,
    leader_extent,
    leader_indices,
    maxmin_leaders,
    niche_leaders,
)
from moswarm.engine.algorithm.nspso.selection import front_survivors, maxmin_survivors, select_survivors
from moswarm.engine.algorithm.nspso.state import SwarmBuffer
from moswarm.foundation.kernel.multi_objective import sort_population_mo

FRONTED = np.array(
    [
        [0.0, 1.0],
        [1.0, 0.0],
        [0.5, 0.5],
        [1.0, 1.0],
        [2.0, 2.0],
    ]
)


class TestLeaderExtent:
    @pytest.mark.parametrize(
        "n_leaders, lsr, expected",
        [
            (2, 2, 1),
            (40, 2, 1),
            (100, 2, 1),
            (100, 50, 49),
            (10, 100, 9),
            (3, 100, 2),
            (7, 30, 2),
        ],
    )
    def test_values(self, n_leaders, lsr, expected):
        assert leader_extent(n_leaders, lsr) == expected

    def test_never_reaches_past_last_leader(self):
        for n in range(2, 30):
            for lsr in (1, 10, 50, 99, 100):
                assert 1 <= leader_extent(n, lsr) <= n - 1


class TestLeaders:
    def test_crowding_orders_whole_population(self):
        leaders = crowding_leaders(FRONTED)
        assert leaders.tolist() == list(sort_population_mo(FRONTED))
        assert sorted(leaders.tolist()) == list(range(5))

    def test_maxmin_keeps_negative_scores(self):
        leaders = maxmin_leaders(FRONTED)
        assert sorted(leaders.tolist()) == [0, 1, 2]

    def test_maxmin_keeps_at_least_two(self):
        F = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]])
        leaders = maxmin_leaders(F)
        assert leaders.tolist() == [0, 1]

    def test_niche_uses_first_front(self):
        C = np.array([[0.0, 0.0], [0.05, 0.0], [5.0, 5.0], [1.0, 1.0], [2.0, 2.0]])
        leaders = niche_leaders(FRONTED, C)
        assert sorted(leaders.tolist()) == [0, 1, 2]
        # the isolated chromosome has the smallest niche count
        assert leaders[0] == 2

    def test_niche_absorbs_next_fronts_when_alone(self):
        F = np.array([[0.0, 0.0], [1.0, 2.0], [2.0, 1.0], [3.0, 3.0]])
        leaders = niche_leaders(F, np.zeros((4, 2)))
        assert leaders.tolist() == [0, 1, 2]

    @pytest.mark.parametrize("mechanism", list(DiversityMechanism))
    def test_dispatch_gives_at_least_two_leaders(self, mechanism):
        rng = np.random.default_rng(3)
        F = rng.random((12, 2))
        leaders = leader_indices(mechanism, F, rng.random((12, 4)))
        assert leaders.size >= 2
        assert len(set(leaders.tolist())) == leaders.size


class TestSelection:
    def test_whole_fronts_fill_the_swarm(self):
        rng = np.random.default_rng(0)
        assert sorted(front_survivors(FRONTED, 4, rng).tolist()) == [0, 1, 2, 3]

    def test_overflowing_front_is_cut(self):
        rng = np.random.default_rng(0)
        chosen = front_survivors(FRONTED, 2, rng)
        assert chosen.size == 2
        assert set(chosen.tolist()) <= {0, 1, 2}

    def test_cut_depends_on_rng(self):
        picks = {tuple(sorted(front_survivors(FRONTED, 1, np.random.default_rng(s)).tolist())) for s in range(30)}
        assert len(picks) > 1

    def test_maxmin_survivors_best_scores_first(self):
        chosen = maxmin_survivors(FRONTED, 3)
        assert sorted(chosen.tolist()) == [0, 1, 2]

    def test_dispatch(self):
        rng = np.random.default_rng(0)
        assert select_survivors(DiversityMechanism.MAX_MIN, FRONTED, 4, rng).size == 4
        assert select_survivors(DiversityMechanism.NICHE_COUNT, FRONTED, 4, rng).size == 4


class TestSwarmBuffer:
    def _buffer(self):
        X = np.arange(6, dtype=float).reshape(3, 2)
        F = X * 10.0
        return SwarmBuffer.from_population(X, F, np.zeros((3, 2)))

    def test_from_population_copies_best(self):
        buf = self._buffer()
        assert len(buf) == 3
        assert np.array_equal(buf.best_x, buf.cur_x)
        buf.cur_x[0, 0] = -1.0
        assert buf.best_x[0, 0] == 0.0

    def test_extend_then_take(self):
        buf = self._buffer()
        buf.extend(np.full((3, 2), 7.0), np.ones((3, 2)), np.full((3, 2), 70.0))
        assert len(buf) == 6
        kept = buf.take([4, 0])
        assert np.array_equal(kept.cur_x, [[7.0, 7.0], [0.0, 1.0]])
        assert np.array_equal(kept.cur_v, [[1.0, 1.0], [0.0, 0.0]])
        assert np.array_equal(kept.best_f, [[70.0, 70.0], [0.0, 10.0]])
