from __future__ import annotations

import json

import pytest

from moswarm.cli import build_parser, main
from moswarm.foundation.checkpoint import load_checkpoint


def _run_args(*extra: str) -> list[str]:
    return ["run", "--n-var", "5", "--pop-size", "10", "--gen", "3", "--seed", "1", *extra]


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "nspso" in out and "aco" in out
    assert "zdt1" in out and "hs71" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_run_nspso(capsys):
    assert main(_run_args("--algorithm", "nspso", "--problem", "zdt1")) == 0
    out = capsys.readouterr().out
    assert "NSPSO" in out
    assert "Non-dominated individuals" in out


def test_run_aco(capsys):
    code = main(
        _run_args(
            "--algorithm", "aco", "--problem", "sphere_ineq", "--set", "ker=3", "--set", "fstop=0", "--quiet"
        )
    )
    assert code == 0
    assert "Best objective" in capsys.readouterr().out


def test_set_values_are_parsed(capsys):
    code = main(_run_args("--set", "diversity_mechanism=max min", "--set", "leader_selection_range=50"))
    assert code == 0
    assert "Diversity mechanism: max min" in capsys.readouterr().out


def test_config_file(tmp_path, capsys):
    path = tmp_path / "nspso.json"
    path.write_text(json.dumps({"c1": 0.3, "diversity_mechanism": "niche count"}), encoding="utf-8")
    assert main(_run_args("--config", str(path))) == 0
    assert "niche count" in capsys.readouterr().out


def test_yaml_config_file(tmp_path, capsys):
    path = tmp_path / "aco.yaml"
    path.write_text("ker: 2\nfstop: 0\nresidual_norm: l1\n", encoding="utf-8")
    assert main(_run_args("--algorithm", "aco", "--problem", "sphere_ineq", "--config", str(path))) == 0
    assert "Residual norm: l1" in capsys.readouterr().out


def test_checkpoint_and_resume(tmp_path):
    ckpt = tmp_path / "run.ckpt"
    assert main(_run_args("--checkpoint", str(ckpt))) == 0
    assert load_checkpoint(ckpt).get_seed() == 1
    assert main(_run_args("--resume", str(ckpt))) == 0


def test_resume_keeps_checkpoint_verbosity(tmp_path):
    first = tmp_path / "first.ckpt"
    second = tmp_path / "second.ckpt"
    assert main(_run_args("--verbosity", "3", "--checkpoint", str(first))) == 0
    assert load_checkpoint(first).get_verbosity() == 3

    assert main(_run_args("--resume", str(first), "--checkpoint", str(second))) == 0
    assert load_checkpoint(second).get_verbosity() == 3

    assert main(_run_args("--resume", str(first), "--verbosity", "0", "--checkpoint", str(second))) == 0
    assert load_checkpoint(second).get_verbosity() == 0


def test_fresh_run_logs_every_generation_by_default(tmp_path):
    ckpt = tmp_path / "run.ckpt"
    assert main(_run_args("--checkpoint", str(ckpt))) == 0
    assert load_checkpoint(ckpt).get_verbosity() == 1


def test_incompatible_problem_exits_with_error(capsys):
    assert main(_run_args("--algorithm", "aco", "--problem", "zdt1")) == 2
    assert "Error:" in capsys.readouterr().err


def test_bad_option_value_exits_with_error(capsys):
    assert main(_run_args("--set", "c1=-1")) == 2
    assert "c1" in capsys.readouterr().err


def test_unknown_option_exits_with_error():
    assert main(_run_args("--set", "swarm=4")) == 2


def test_missing_config_file(tmp_path):
    assert main(_run_args("--config", str(tmp_path / "missing.yaml"))) == 2


def test_malformed_set_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(_run_args("--set", "novalue"))
    assert excinfo.value.code == 2


def test_unknown_algorithm_choice():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["run", "--algorithm", "moead"])
