"""
Checkpointing utilities for saving and resuming algorithm instances.
"""

from __future__ import annotations

import pickle
from pathlib import Path
from typing import Any, TYPE_CHECKING, cast

from moswarm.foundation.exceptions import CheckpointError

if TYPE_CHECKING:
    from numpy.random import Generator

CHECKPOINT_VERSION = 1


def save_checkpoint(path: str | Path, algorithm: Any, *, extra: dict[str, Any] | None = None) -> Path:
    """
    Save an algorithm's state to a checkpoint file.

    Args:
        path: File path for checkpoint (will add .ckpt extension if missing).
        algorithm: Algorithm exposing ``state_dict()`` and a registry key.
        extra: Additional caller state stored alongside (optional).

    Returns:
        Path to saved checkpoint file.
    """
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(".ckpt")

    path.parent.mkdir(parents=True, exist_ok=True)

    checkpoint = {
        "version": CHECKPOINT_VERSION,
        "algorithm": algorithm.registry_key,
        "state": algorithm.state_dict(),
        "extra": extra or {},
    }

    with open(path, "wb") as f:
        pickle.dump(checkpoint, f, protocol=pickle.HIGHEST_PROTOCOL)

    return path


def load_checkpoint_data(path: str | Path) -> dict[str, Any]:
    """
    Load the raw checkpoint dictionary.

    Raises:
        FileNotFoundError: If checkpoint file doesn't exist.
        CheckpointError: If the file is not a checkpoint or its version is unsupported.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Checkpoint not found: {path}")

    with open(path, "rb") as f:
        try:
            checkpoint = pickle.load(f)
        except (pickle.UnpicklingError, EOFError) as exc:
            raise CheckpointError(f"Could not read checkpoint: {exc}", path=str(path)) from exc

    if not isinstance(checkpoint, dict):
        raise CheckpointError("Checkpoint payload is not a dictionary.", path=str(path))
    version = checkpoint.get("version", 0)
    if version != CHECKPOINT_VERSION:
        raise CheckpointError(f"Unsupported checkpoint version: {version}", path=str(path))

    return cast(dict[str, Any], checkpoint)


def load_checkpoint(path: str | Path) -> Any:
    """
    Rebuild the algorithm stored in a checkpoint file.

    The algorithm class is looked up by name in the algorithm registry, built
    from the stored configuration and then restored with ``load_state_dict``.
    """
    from moswarm.engine.algorithm.registry import resolve_algorithm

    checkpoint = load_checkpoint_data(path)
    algorithm_cls = resolve_algorithm(checkpoint["algorithm"])
    state = checkpoint["state"]
    algorithm = algorithm_cls(**state["config"])
    algorithm.load_state_dict(state)
    return algorithm


def restore_rng(rng: "Generator", state: dict[str, Any]) -> None:
    """
    Restore RNG state from checkpoint.

    Args:
        rng: NumPy random generator to restore.
        state: State dict from ``rng.bit_generator.state``.
    """
    rng.bit_generator.state = state


__all__ = ["CHECKPOINT_VERSION", "save_checkpoint", "load_checkpoint", "load_checkpoint_data", "restore_rng"]
