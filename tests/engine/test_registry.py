from __future__ import annotations

import pytest

from moswarm.engine.algorithm import ACO, NSPSO
from moswarm.engine.algorithm.config import NSPSOConfig
from moswarm.engine.algorithm.registry import (
    available_algorithm_names,
    make_algorithm,
    resolve_algorithm,
)
from moswarm.foundation.exceptions import ConfigurationError, InvalidAlgorithmError


def test_available_names():
    assert available_algorithm_names() == ["nspso", "aco"]


def test_resolve_is_case_insensitive():
    assert resolve_algorithm("NSPSO") is NSPSO
    assert resolve_algorithm(" aco ") is ACO


def test_unknown_algorithm_suggests_close_names():
    with pytest.raises(InvalidAlgorithmError) as excinfo:
        resolve_algorithm("nspo")
    err = excinfo.value
    assert err.details["did_you_mean"] == ["nspso"]
    assert "nspso" in err.details["available"]
    assert "Available algorithms" in str(err)


def test_unknown_algorithm_without_suggestion():
    with pytest.raises(InvalidAlgorithmError) as excinfo:
        resolve_algorithm("simulated-annealing")
    assert "did_you_mean" not in excinfo.value.details


def test_make_algorithm_from_mapping_and_overrides():
    algo = make_algorithm("nspso", {"gen": 5, "c1": 0.3}, seed=11, c1=0.4)
    assert isinstance(algo, NSPSO)
    assert algo.config.gen == 5
    assert algo.config.c1 == 0.4
    assert algo.get_seed() == 11


def test_make_algorithm_from_config_dataclass():
    cfg = NSPSOConfig().gen(7).diversity_mechanism("max min").seed(3).fixed()
    algo = make_algorithm("nspso", cfg)
    assert algo.config == cfg
    assert algo.get_seed() == 3


def test_make_algorithm_rejects_unknown_option():
    with pytest.raises(ConfigurationError, match="Unknown aco option"):
        make_algorithm("aco", {"gen": 1, "swarm_size": 4})


def test_make_algorithm_defaults():
    algo = make_algorithm("aco")
    assert isinstance(algo, ACO)
    assert algo.config.gen == 1
