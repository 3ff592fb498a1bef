"""Settings: defaults and HELLO_API_ environment overrides."""

import pytest
from pydantic import ValidationError

from app.config import LOG_LEVELS, Settings, get_settings


def test_defaults_listen_on_localhost_3000(monkeypatch):
    for var in ("HELLO_API_HOST", "HELLO_API_PORT"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.host == "127.0.0.1"
    assert settings.port == 3000
    assert settings.log_format == "json"


def test_env_overrides_apply(monkeypatch):
    monkeypatch.setenv("HELLO_API_PORT", "8080")
    monkeypatch.setenv("HELLO_API_LOG_LEVEL", " debug ")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setenv("HELLO_API_PORT", "70000")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize("level", ["verbose", "WARN", ""])
def test_unknown_log_level_rejected(monkeypatch, level):
    monkeypatch.setenv("HELLO_API_LOG_LEVEL", level)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("level", LOG_LEVELS)
def test_known_log_levels_accepted(monkeypatch, level):
    monkeypatch.setenv("HELLO_API_LOG_LEVEL", level.lower())
    assert Settings(_env_file=None).log_level == level
