"""ACO configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from moswarm.foundation.exceptions import ConfigurationError

from .base import (
    _SerializableConfig,
    _check_finite,
    _check_non_negative_int,
    _check_positive_int,
    _check_seed,
    _check_unit_interval,
    _require_fields,
)

RESIDUAL_NORMS = ("l1", "l2", "linf")


@dataclass(frozen=True)
class ACOConfigData(_SerializableConfig):
    gen: int = 1
    acc: float = 0.95
    fstop: float = 1.0
    impstop: int = 1
    evalstop: int = 1
    focus: float = 0.9
    ker: int = 10
    oracle: float = 1.0
    paretomax: int = 10
    epsilon: float = 0.9
    residual_norm: str = "l2"
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        _check_non_negative_int("gen", self.gen)
        _check_unit_interval("acc", self.acc)
        if _check_finite("fstop", self.fstop) < 0.0:
            raise ConfigurationError(
                f"The objective stopping criterion must be >= 0, got {self.fstop}.", parameter="fstop", value=self.fstop
            )
        _check_non_negative_int("impstop", self.impstop)
        _check_non_negative_int("evalstop", self.evalstop)
        _check_unit_interval("focus", self.focus)
        _check_positive_int("ker", self.ker)
        if _check_finite("oracle", self.oracle) < 0.0:
            raise ConfigurationError(
                f"The oracle parameter must be >= 0, while a value of {self.oracle} was given.",
                parameter="oracle",
                value=self.oracle,
            )
        _check_positive_int("paretomax", self.paretomax)
        _check_unit_interval("epsilon", self.epsilon)
        norm = str(self.residual_norm).strip().lower()
        if norm not in RESIDUAL_NORMS:
            raise ConfigurationError(
                f"Unknown residual norm '{self.residual_norm}'.",
                parameter="residual_norm",
                value=self.residual_norm,
                suggestion=f"Use one of: {', '.join(RESIDUAL_NORMS)}",
            )
        object.__setattr__(self, "residual_norm", norm)
        _check_seed(self.seed)


class ACOConfig:
    """Declarative configuration holder for ACO settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def gen(self, value: int) -> "ACOConfig":
        self._cfg["gen"] = value
        return self

    def acc(self, value: float) -> "ACOConfig":
        self._cfg["acc"] = value
        return self

    def stopping(self, fstop: float = 1.0, impstop: int = 1, evalstop: int = 1) -> "ACOConfig":
        self._cfg["fstop"] = fstop
        self._cfg["impstop"] = impstop
        self._cfg["evalstop"] = evalstop
        return self

    def focus(self, value: float) -> "ACOConfig":
        self._cfg["focus"] = value
        return self

    def ker(self, value: int) -> "ACOConfig":
        self._cfg["ker"] = value
        return self

    def oracle(self, value: float) -> "ACOConfig":
        self._cfg["oracle"] = value
        return self

    def pareto(self, paretomax: int = 10, epsilon: float = 0.9) -> "ACOConfig":
        self._cfg["paretomax"] = paretomax
        self._cfg["epsilon"] = epsilon
        return self

    def residual_norm(self, value: str) -> "ACOConfig":
        self._cfg["residual_norm"] = value
        return self

    def seed(self, value: int) -> "ACOConfig":
        self._cfg["seed"] = value
        return self

    def fixed(self) -> ACOConfigData:
        _require_fields(self._cfg, ("gen",), "ACO")
        return ACOConfigData(
            gen=self._cfg["gen"],
            acc=float(self._cfg.get("acc", 0.95)),
            fstop=float(self._cfg.get("fstop", 1.0)),
            impstop=self._cfg.get("impstop", 1),
            evalstop=self._cfg.get("evalstop", 1),
            focus=float(self._cfg.get("focus", 0.9)),
            ker=self._cfg.get("ker", 10),
            oracle=float(self._cfg.get("oracle", 1.0)),
            paretomax=self._cfg.get("paretomax", 10),
            epsilon=float(self._cfg.get("epsilon", 0.9)),
            residual_norm=self._cfg.get("residual_norm", "l2"),
            seed=self._cfg.get("seed"),
        )


__all__ = ["RESIDUAL_NORMS", "ACOConfig", "ACOConfigData"]
