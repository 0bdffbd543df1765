from typing import Any, Callable, Dict

import pytest

from ucapi_model import config
from ucapi_model.schemas.intg import IntegrationDriver


@pytest.fixture
def language_map() -> Dict[str, str]:
    """Language texts with base languages and country variants."""
    return {
        "en": "English fallback",
        "de": "German fallback",
        "de_DE": "German",
        "de_CH": "Swiss German",
        "en_UK": "UK English",
    }


@pytest.fixture
def make_driver() -> Callable[..., IntegrationDriver]:
    """
    Return a helper to construct a valid IntegrationDriver.
    Usage: driver = make_driver(driver_state="IDLE", release_date="2024-05-01")
    """
    def _make(**overrides: Any) -> IntegrationDriver:
        data: Dict[str, Any] = {
            "driver_id": "hass",
            "name": {"en": "Home Assistant", "de_CH": "Home Assistant CH"},
            "driver_type": "EXTERNAL",
            "driver_url": "ws://192.168.1.10:9090/ws",
            "version": "1.2.0",
            "enabled": True,
            "device_discovery": False,
            "setup_data_schema": {"title": {"en": "Setup"}, "settings": []},
        }
        data.update(overrides)
        return IntegrationDriver.model_validate(data)
    return _make


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """
    Keep a developer's .env log directory from attaching file handlers
    to loggers created in tests.
    """
    monkeypatch.setattr(config, "LOG_DIR", None)
    yield
