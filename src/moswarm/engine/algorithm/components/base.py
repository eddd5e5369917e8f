"""
Base infrastructure shared by the population-evolving algorithms.

This module provides:
- UserAlgorithm: seed/RNG ownership, verbosity, generation log, extra info
  and state-dict serialization
- GenerationTable: the human-readable per-generation table written through
  a logger
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from moswarm.foundation.checkpoint import restore_rng
from moswarm.foundation.exceptions import CheckpointError, ConfigurationError

if TYPE_CHECKING:
    from moswarm.foundation.population import Population

LogEntry = tuple[int, int, tuple[float, ...]]

_logger = logging.getLogger(__name__)


def entropy_seed() -> int:
    """Draw a 32-bit seed from operating-system entropy."""
    return int(np.random.SeedSequence().generate_state(1)[0])


# =============================================================================
# Generation table
# =============================================================================


class GenerationTable:
    """
    Formats ``(gen, fevals, ideal)`` rows and writes them at INFO level.

    The column header is written before the first row and again every
    ``header_every`` rows. Only the first ``max_columns`` ideal components are
    shown; wider problems get a ``... :`` header column.
    """

    def __init__(
        self,
        logger: logging.Logger,
        n_obj: int,
        *,
        header_every: int = 50,
        max_columns: int = 5,
    ) -> None:
        self._logger = logger
        self._n_obj = int(n_obj)
        self._header_every = header_every
        self._max_columns = max_columns
        self._rows = 0

    def header(self) -> str:
        cols = [f"{'Gen:':>7}", f"{'Fevals:':>15}"]
        for i in range(min(self._n_obj, self._max_columns)):
            cols.append(f"{'ideal' + str(i + 1) + ':':>15}")
        if self._n_obj > self._max_columns:
            cols.append(f"{'... :':>15}")
        return "".join(cols)

    def row(self, gen: int, fevals: int, ideal_point: np.ndarray) -> str:
        cols = [f"{gen:>7}", f"{fevals:>15}"]
        cols.extend(f"{float(v):>15.6g}" for v in list(ideal_point)[: self._max_columns])
        return "".join(cols)

    def emit(self, gen: int, fevals: int, ideal_point: np.ndarray) -> None:
        if self._rows % self._header_every == 0:
            self._logger.info(self.header())
        self._logger.info(self.row(gen, fevals, ideal_point))
        self._rows += 1


# =============================================================================
# Algorithm base
# =============================================================================


class UserAlgorithm:
    """
    Base class for algorithms that evolve a :class:`Population` in place.

    Subclasses set ``name``, ``registry_key`` and ``_extra_info_labels``,
    store their frozen configuration in ``self.config`` and implement
    :meth:`evolve`.

    Parameters
    ----------
    seed : int, optional
        Seed of the internal ``numpy.random.Generator``. Drawn from OS entropy
        when omitted.
    """

    name: ClassVar[str] = "User algorithm"
    registry_key: ClassVar[str] = ""
    config_class: ClassVar[type] = object
    _extra_info_labels: ClassVar[tuple[tuple[str, str], ...]] = ()

    config: Any

    def __init__(self, *, seed: int | None = None) -> None:
        self._verbosity = 0
        self._log: list[LogEntry] = []
        self.set_seed(entropy_seed() if seed is None else seed)

    @classmethod
    def from_config(cls, config: Any) -> "UserAlgorithm":
        """Build the algorithm from a config dataclass or a plain mapping."""
        data = config.to_dict() if hasattr(config, "to_dict") else dict(config)
        known = {f.name for f in fields(cls.config_class)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown {cls.registry_key} option(s): {', '.join(unknown)}.",
                parameter=unknown[0],
                suggestion=f"Recognised options: {', '.join(sorted(known))}",
            )
        return cls(**data)

    def evolve(self, pop: "Population") -> "Population":
        raise NotImplementedError(f"{type(self).__name__} must implement evolve(pop).")

    # -------------------------------------------------------------------------
    # Seed and verbosity
    # -------------------------------------------------------------------------

    def set_seed(self, seed: int) -> None:
        if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)) or seed < 0:
            raise ConfigurationError(f"Seed must be a non-negative integer, got {seed!r}.", parameter="seed", value=seed)
        self._seed = int(seed)
        self._rng = np.random.default_rng(self._seed)

    def get_seed(self) -> int:
        return self._seed

    def set_verbosity(self, level: int) -> None:
        """Log one generation line every ``level`` generations (0 disables the log)."""
        if isinstance(level, bool) or not isinstance(level, (int, np.integer)) or level < 0:
            raise ConfigurationError(
                f"Verbosity must be a non-negative integer, got {level!r}.", parameter="verbosity", value=level
            )
        self._verbosity = int(level)

    def get_verbosity(self) -> int:
        return self._verbosity

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def get_gen(self) -> int:
        return int(self.config.gen)

    def get_log(self) -> list[LogEntry]:
        return list(self._log)

    def get_name(self) -> str:
        return self.name

    def get_extra_info(self) -> str:
        lines = [f"\t{label}: {getattr(self.config, field)}" for field, label in self._extra_info_labels]
        lines.append(f"\tSeed: {self._seed}")
        lines.append(f"\tVerbosity: {self._verbosity}")
        return "\n".join(lines)

    def config_dict(self) -> dict[str, Any]:
        """Constructor keyword arguments that rebuild this algorithm."""
        cfg = self.config.to_dict()
        cfg["seed"] = self._seed
        return cfg

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.config_dict().items())
        return f"{type(self).__name__}({params})"

    # -------------------------------------------------------------------------
    # Generation log
    # -------------------------------------------------------------------------

    def _should_log(self, gen: int) -> bool:
        v = self._verbosity
        return v > 0 and (v == 1 or gen % v == 1)

    def _record(self, table: GenerationTable, gen: int, fevals: int, ideal_point: np.ndarray) -> None:
        self._log.append((int(gen), int(fevals), tuple(float(v) for v in ideal_point)))
        table.emit(gen, fevals, ideal_point)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def state_dict(self) -> dict[str, Any]:
        return {
            "algorithm": self.registry_key,
            "config": self.config_dict(),
            "seed": self._seed,
            "verbosity": self._verbosity,
            "log": list(self._log),
            "rng_state": self._rng.bit_generator.state,
        }

    def load_state_dict(self, state: dict[str, Any]) -> None:
        missing = [key for key in ("seed", "verbosity", "log", "rng_state") if key not in state]
        if missing:
            raise CheckpointError(f"State of {self.name} is missing: {', '.join(missing)}")
        stored = state.get("algorithm", self.registry_key)
        if stored != self.registry_key:
            raise CheckpointError(f"State was saved by '{stored}', cannot load it into '{self.registry_key}'.")
        self.set_seed(state["seed"])
        restore_rng(self._rng, state["rng_state"])
        self.set_verbosity(state["verbosity"])
        self._log = [(int(g), int(fe), tuple(ideal)) for g, fe, ideal in state["log"]]
        _logger.debug("Restored %s state at seed %d", self.name, self._seed)


__all__ = ["LogEntry", "GenerationTable", "UserAlgorithm", "entropy_seed"]
