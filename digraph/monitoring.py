from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("digraph")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply level and format from the configuration to the root logger.

    Only entry points call this; importing the package never touches
    logging handlers.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    known = isinstance(level, int)
    logging.basicConfig(
        level=level if known else logging.INFO, format=config.format, force=True
    )
    if not known:
        logger.warning(f"Unknown log level {config.level!r}, using INFO")
        level = logging.INFO
    logger.debug(f"Logging configured at {logging.getLevelName(level)}")
