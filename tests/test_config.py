import importlib
import logging

import pytest

from openmeteo_cli import config


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, config.DEFAULT_TIMEOUT),
        ("", config.DEFAULT_TIMEOUT),
        ("abc", config.DEFAULT_TIMEOUT),
        ("0", config.DEFAULT_TIMEOUT),
        ("-3", config.DEFAULT_TIMEOUT),
        ("2.5", 2.5),
    ],
)
def test_read_timeout(raw, expected):
    assert config._read_timeout(raw) == expected


def test_forecast_api_url_from_environment(monkeypatch):
    monkeypatch.setenv("FORECAST_API_URL", "http://localhost:8080/v1/forecast")
    monkeypatch.setenv("REQUEST_TIMEOUT", "4")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.FORECAST_API_URL == "http://localhost:8080/v1/forecast"
        assert reloaded.REQUEST_TIMEOUT == 4.0
    finally:
        monkeypatch.delenv("FORECAST_API_URL")
        monkeypatch.delenv("REQUEST_TIMEOUT")
        importlib.reload(config)


@pytest.fixture
def basic_config_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


@pytest.mark.parametrize(
    "name, level",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("basic_format", logging.WARNING),
        ("nonsense", logging.WARNING),
    ],
)
def test_setup_logging_level(basic_config_calls, name, level):
    config.setup_logging(name)
    assert len(basic_config_calls) == 1
    assert basic_config_calls[0]["level"] == level
