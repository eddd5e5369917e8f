"""NSPSO configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from moswarm.foundation.exceptions import ConfigurationError

from .base import (
    _SerializableConfig,
    _check_non_negative_int,
    _check_positive,
    _check_finite,
    _check_seed,
    _require_fields,
)


class DiversityMechanism(str, Enum):
    """Leader ranking rule used by NSPSO."""

    CROWDING_DISTANCE = "crowding distance"
    NICHE_COUNT = "niche count"
    MAX_MIN = "max min"

    @classmethod
    def parse(cls, value: "str | DiversityMechanism") -> "DiversityMechanism":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("_", " ").replace("-", " ")
        mechanism = _MECHANISM_ALIASES.get(key)
        if mechanism is None:
            raise ConfigurationError(
                f"Non existing diversity mechanism '{value}'.",
                parameter="diversity_mechanism",
                value=value,
                suggestion="Use one of: " + ", ".join(m.value for m in cls),
            )
        return mechanism


_MECHANISM_ALIASES: Dict[str, DiversityMechanism] = {
    "crowding distance": DiversityMechanism.CROWDING_DISTANCE,
    "crowding": DiversityMechanism.CROWDING_DISTANCE,
    "niche count": DiversityMechanism.NICHE_COUNT,
    "niche": DiversityMechanism.NICHE_COUNT,
    "max min": DiversityMechanism.MAX_MIN,
    "maxmin": DiversityMechanism.MAX_MIN,
}


@dataclass(frozen=True)
class NSPSOConfigData(_SerializableConfig):
    gen: int = 1
    min_w: float = 0.95
    max_w: float = 10.0
    c1: float = 0.01
    c2: float = 0.5
    chi: float = 0.5
    v_coeff: float = 0.5
    leader_selection_range: int = 2
    diversity_mechanism: str = DiversityMechanism.CROWDING_DISTANCE.value
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        _check_non_negative_int("gen", self.gen)
        for name in ("min_w", "max_w", "c1", "c2", "chi"):
            _check_positive(name, getattr(self, name))
        if self.min_w > self.max_w:
            raise ConfigurationError(
                f"'min_w' ({self.min_w}) must not exceed 'max_w' ({self.max_w}).",
                parameter="min_w",
                value=self.min_w,
            )
        v_coeff = _check_finite("v_coeff", self.v_coeff)
        if not 0.0 < v_coeff <= 1.0:
            raise ConfigurationError(
                f"Velocity scaling factor should be in the (0, 1] range, while a value of {self.v_coeff} was given.",
                parameter="v_coeff",
                value=self.v_coeff,
            )
        lsr = _check_finite("leader_selection_range", self.leader_selection_range)
        if not 0.0 < lsr <= 100.0:
            raise ConfigurationError(
                f"Leader selection range should be in the (0, 100] range, "
                f"while a value of {self.leader_selection_range} was given.",
                parameter="leader_selection_range",
                value=self.leader_selection_range,
            )
        _check_seed(self.seed)
        object.__setattr__(
            self, "diversity_mechanism", DiversityMechanism.parse(self.diversity_mechanism).value
        )

    @property
    def mechanism(self) -> DiversityMechanism:
        return DiversityMechanism(self.diversity_mechanism)


class NSPSOConfig:
    """Declarative configuration holder for NSPSO settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def gen(self, value: int) -> "NSPSOConfig":
        self._cfg["gen"] = value
        return self

    def inertia(self, min_w: float, max_w: float) -> "NSPSOConfig":
        self._cfg["min_w"] = min_w
        self._cfg["max_w"] = max_w
        return self

    def c1(self, value: float) -> "NSPSOConfig":
        self._cfg["c1"] = value
        return self

    def c2(self, value: float) -> "NSPSOConfig":
        self._cfg["c2"] = value
        return self

    def chi(self, value: float) -> "NSPSOConfig":
        self._cfg["chi"] = value
        return self

    def v_coeff(self, value: float) -> "NSPSOConfig":
        self._cfg["v_coeff"] = value
        return self

    def leader_selection_range(self, value: int) -> "NSPSOConfig":
        self._cfg["leader_selection_range"] = value
        return self

    def diversity_mechanism(self, value: str) -> "NSPSOConfig":
        self._cfg["diversity_mechanism"] = value
        return self

    def seed(self, value: int) -> "NSPSOConfig":
        self._cfg["seed"] = value
        return self

    def fixed(self) -> NSPSOConfigData:
        _require_fields(self._cfg, ("gen",), "NSPSO")
        return NSPSOConfigData(
            gen=self._cfg["gen"],
            min_w=float(self._cfg.get("min_w", 0.95)),
            max_w=float(self._cfg.get("max_w", 10.0)),
            c1=float(self._cfg.get("c1", 0.01)),
            c2=float(self._cfg.get("c2", 0.5)),
            chi=float(self._cfg.get("chi", 0.5)),
            v_coeff=float(self._cfg.get("v_coeff", 0.5)),
            leader_selection_range=self._cfg.get("leader_selection_range", 2),
            diversity_mechanism=self._cfg.get("diversity_mechanism", DiversityMechanism.CROWDING_DISTANCE.value),
            seed=self._cfg.get("seed"),
        )


__all__ = ["DiversityMechanism", "NSPSOConfig", "NSPSOConfigData"]
