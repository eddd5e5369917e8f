"""
Algorithm registry.

Maps algorithm names to classes so the CLI and checkpoint loading avoid
hard-coded conditionals.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from moswarm.foundation.exceptions import InvalidAlgorithmError

from .aco import ACO
from .components.base import UserAlgorithm
from .nspso import NSPSO

ALGORITHMS: dict[str, type[UserAlgorithm]] = {
    NSPSO.registry_key: NSPSO,
    ACO.registry_key: ACO,
}


def available_algorithm_names() -> list[str]:
    return list(ALGORITHMS)


def _suggest_names(name: str, options: list[str]) -> list[str]:
    if not name or not options:
        return []
    return get_close_matches(name.lower(), options, n=3, cutoff=0.6)


def resolve_algorithm(name: str) -> type[UserAlgorithm]:
    """Algorithm class registered under ``name`` (case-insensitive)."""
    key = str(name).strip().lower()
    try:
        return ALGORITHMS[key]
    except KeyError:
        options = available_algorithm_names()
        err = InvalidAlgorithmError(str(name), available=options)
        suggestions = _suggest_names(key, options)
        if suggestions:
            err.details["did_you_mean"] = suggestions
        raise err from None


def make_algorithm(name: str, config: Any = None, **kwargs: Any) -> UserAlgorithm:
    """
    Build a registered algorithm.

    ``config`` may be a config dataclass or a mapping; keyword arguments
    override its entries.
    """
    algorithm_cls = resolve_algorithm(name)
    data: dict[str, Any] = {}
    if config is not None:
        data.update(config.to_dict() if hasattr(config, "to_dict") else dict(config))
    data.update(kwargs)
    return algorithm_cls.from_config(data)


__all__ = ["ALGORITHMS", "available_algorithm_names", "resolve_algorithm", "make_algorithm"]
