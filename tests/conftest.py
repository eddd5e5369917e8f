from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_moswarm_logger():
    """Undo handlers that configure_moswarm_logging() attaches during CLI tests."""
    logger = logging.getLogger("moswarm")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
