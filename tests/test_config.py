import logging

import pytest

from dijkstra_engine.config import ObservabilityConfig, get_config, reset_config
from dijkstra_engine.domain.errors import ConfigurationError
from dijkstra_engine.monitoring import configure_logging


def test_defaults():
    config = get_config()

    assert config.engine.default_source == "A"
    assert config.engine.no_edge_marker == -1
    assert config.observability.level == "WARNING"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SPE_ENGINE_DEFAULT_SOURCE", "C")
    monkeypatch.setenv("SPE_LOG_LEVEL", "DEBUG")
    reset_config()

    config = get_config()
    assert config.engine.default_source == "C"
    assert config.observability.level == "DEBUG"


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(ObservabilityConfig(level="info"))
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as exc_info:
        configure_logging(ObservabilityConfig(level="LOUD"))
    assert exc_info.value.setting_name == "level"
    assert "LOUD" in str(exc_info.value)
