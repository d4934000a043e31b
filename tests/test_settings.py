"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pingen_client import Environment, PingenClient, PingenSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PINGEN_TOKEN", "env-token")
    monkeypatch.setenv("PINGEN_ENVIRONMENT", "staging")
    monkeypatch.setenv("PINGEN_TIMEOUT", "15")

    settings = PingenSettings()

    assert settings.token == "env-token"
    assert settings.environment == "staging"
    assert settings.timeout == 15
    assert settings.log_level == "INFO"
    assert settings.debug is False


def test_settings_require_token(monkeypatch):
    monkeypatch.delenv("PINGEN_TOKEN", raising=False)

    with pytest.raises(ValidationError):
        PingenSettings()


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("PINGEN_TOKEN", "cached")

    assert get_settings() is get_settings()


def test_client_from_environment(monkeypatch, session):
    monkeypatch.setenv("PINGEN_TOKEN", "env-token")
    monkeypatch.setenv("PINGEN_ENVIRONMENT", "2")

    client = PingenClient.from_settings(session=session)

    assert client.environment is Environment.STAGING
    assert client.timeout == 30
