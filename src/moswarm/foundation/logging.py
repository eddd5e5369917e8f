from __future__ import annotations

import logging


def configure_moswarm_logging(*, level: int = logging.INFO) -> None:
    """
    Configure a minimal console logger for moswarm.

    Notes:
        - This is opt-in (library code must not call logging.basicConfig()).
        - The handler is only attached if neither the root logger nor the "moswarm" logger has handlers.
    """
    root = logging.getLogger()
    moswarm_logger = logging.getLogger("moswarm")

    # If the user already configured logging, don't interfere.
    if root.handlers or moswarm_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    moswarm_logger.addHandler(handler)
    moswarm_logger.setLevel(level)
    moswarm_logger.propagate = False


__all__ = ["configure_moswarm_logging"]
