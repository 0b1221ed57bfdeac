import dataclasses
from pathlib import Path

import pytest

from quillquest.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "VENICE_API_KEY", "VENICE_API_URL", "VENICE_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.PORT == 3000
    assert settings.VENICE_API_KEY == ""
    assert settings.VENICE_API_URL == "https://api.venice.ai"
    assert settings.VENICE_TIMEOUT == 120.0
    assert settings.LOG_LEVEL == "INFO"


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("VENICE_API_KEY", "abc")
    monkeypatch.setenv("VENICE_API_URL", "https://proxy.local/")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("QUILLQUEST_LOG_DIR", str(tmp_path))

    settings = Settings.from_env()

    assert settings.PORT == 8080
    assert settings.VENICE_API_KEY == "abc"
    assert settings.VENICE_API_URL == "https://proxy.local"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_DIR == Path(tmp_path)


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-number")
    with pytest.raises(ValueError):
        Settings.from_env()


def test_settings_are_immutable():
    settings = Settings(VENICE_API_KEY="abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.VENICE_API_KEY = "changed"


def test_log_dir_is_relative_to_working_directory(monkeypatch):
    monkeypatch.delenv("QUILLQUEST_LOG_DIR", raising=False)

    settings = Settings.from_env()

    assert settings.LOG_DIR == Path("logs")
    assert not settings.LOG_DIR.is_absolute()
