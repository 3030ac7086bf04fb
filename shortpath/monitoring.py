"""Logging setup for the shortpath package."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("shortpath")

_HANDLER_NAME = "shortpath-console"


def configure_logging(
    config: Optional[ObservabilityConfig] = None, level: Optional[str] = None
) -> logging.Logger:
    """Attach a console handler to the ``shortpath`` logger.

    Safe to call more than once: the handler is replaced, not stacked.
    ``level`` overrides the configured level.
    """
    config = config or get_config().observability
    resolved = (level or config.level).upper()

    numeric = logging.getLevelName(resolved)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {resolved!r}")

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    logger.setLevel(numeric)

    logger.debug("Logging configured", extra={"level": resolved})
    return logger
