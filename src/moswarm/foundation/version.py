"""
Version helpers for moswarm.
"""

from __future__ import annotations

from importlib import metadata as importlib_metadata

_FALLBACK_VERSION = "0.1.0"


def get_version() -> str:
    """Installed distribution version, or the source-tree version when not installed."""
    try:
        return importlib_metadata.version("moswarm")
    except importlib_metadata.PackageNotFoundError:  # pragma: no cover
        return _FALLBACK_VERSION


__version__ = get_version()

__all__ = ["__version__", "get_version"]
