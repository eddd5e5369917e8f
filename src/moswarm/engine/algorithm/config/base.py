"""Base utilities for algorithm configuration."""

from __future__ import annotations

import json
import math
import numbers
from dataclasses import asdict
from typing import Any, Dict, Tuple

from moswarm.foundation.exceptions import ConfigurationError, MissingConfigError


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _require_fields(cfg: Dict[str, Any], fields: Tuple[str, ...], name: str) -> None:
    """Validate that required fields are present in configuration."""
    missing = [field for field in fields if field not in cfg]
    if missing:
        raise MissingConfigError(missing[0], config_class=name)


def _check_non_negative_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise ConfigurationError(
            f"'{name}' must be a non-negative integer, got {value!r}.", parameter=name, value=value
        )


def _check_positive_int(name: str, value: Any) -> None:
    _check_non_negative_int(name, value)
    if value == 0:
        raise ConfigurationError(f"'{name}' must be at least 1, got {value!r}.", parameter=name, value=value)


def _check_finite(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"'{name}' must be a number, got {value!r}.", parameter=name, value=value) from exc
    if not math.isfinite(number):
        raise ConfigurationError(f"'{name}' must be finite, got {value!r}.", parameter=name, value=value)
    return number


def _check_positive(name: str, value: Any) -> None:
    if _check_finite(name, value) <= 0.0:
        raise ConfigurationError(f"'{name}' must be strictly positive, got {value!r}.", parameter=name, value=value)


def _check_unit_interval(name: str, value: Any) -> None:
    """Require ``value`` in [0, 1)."""
    number = _check_finite(name, value)
    if not 0.0 <= number < 1.0:
        raise ConfigurationError(
            f"'{name}' must be in the [0, 1) range, while a value of {value!r} was given.",
            parameter=name,
            value=value,
        )


def _check_seed(value: Any) -> None:
    if value is not None:
        _check_non_negative_int("seed", value)


__all__ = ["_SerializableConfig", "_require_fields"]
