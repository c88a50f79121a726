import pytest
from pydantic import ValidationError

from easekit.settings import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.default_easing == "linear"
    assert settings.sample_steps == 11
    assert settings.precision == 6
    assert settings.debug is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("EASEKIT_SAMPLE_STEPS", "25")
    monkeypatch.setenv("EASEKIT_DEBUG", "true")
    settings = get_settings()
    assert settings.sample_steps == 25
    assert settings.debug is True


def test_cached():
    assert get_settings() is get_settings()


def test_invalid_steps(monkeypatch):
    monkeypatch.setenv("EASEKIT_SAMPLE_STEPS", "1")
    with pytest.raises(ValidationError):
        Settings()
