"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- SPE_ENGINE_DEFAULT_SOURCE=C
- SPE_ENGINE_NO_EDGE_MARKER=0
- SPE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Graph building and search configuration.

    Environment variables prefixed with SPE_ENGINE_.
    """

    model_config = SettingsConfigDict(env_prefix="SPE_ENGINE_")

    no_edge_marker: float = -1
    default_source: str = "A"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SPE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SPE_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.engine.default_source)

    Environment variables prefixed with SPE_.
    """

    model_config = SettingsConfigDict(env_prefix="SPE_")

    engine: EngineConfig = Field(default_factory=EngineConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
