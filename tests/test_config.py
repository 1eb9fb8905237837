import pytest
from pydantic import ValidationError

from fpcontainers.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("FPCONTAINERS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FPCONTAINERS_WARN_ON_UNSAFE_GET", raising=False)
    settings = Settings.load()
    assert settings.log_level == "WARNING"
    assert settings.warn_on_unsafe_get is False


def test_load_from_environment(monkeypatch):
    monkeypatch.setenv("FPCONTAINERS_LOG_LEVEL", "debug")
    monkeypatch.setenv("FPCONTAINERS_WARN_ON_UNSAFE_GET", "true")
    settings = Settings.load()
    assert settings.log_level == "DEBUG"
    assert settings.warn_on_unsafe_get is True


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("FPCONTAINERS_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError, match="log_level must be one of"):
        Settings.load()


def test_invalid_flag(monkeypatch):
    monkeypatch.setenv("FPCONTAINERS_WARN_ON_UNSAFE_GET", "maybe")
    with pytest.raises(ValidationError):
        Settings.load()
