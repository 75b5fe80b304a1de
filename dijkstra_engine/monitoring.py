from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

logger = logging.getLogger("dijkstra_engine")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
            expected_type="DEBUG|INFO|WARNING|ERROR|CRITICAL",
        )

    logging.basicConfig(level=level, format=config.format)
    logging.getLogger().setLevel(level)
    logger.debug(f"Logging configured at {config.level.upper()}")
