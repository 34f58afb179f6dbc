import pytest
from pydantic import ValidationError

from config import Development, Production, get_settings
from config import Testing as TestingSettings
from config.settings import CacheSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LRU_CAPACITY", raising=False)
    settings = CacheSettings()
    assert settings.capacity == 1000
    assert settings.shards == 1
    assert settings.thread_safe is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LRU_CAPACITY", "64")
    monkeypatch.setenv("LRU_THREAD_SAFE", "true")
    monkeypatch.setenv("LRU_LOG_LEVEL", "warning")
    settings = CacheSettings()
    assert settings.capacity == 64
    assert settings.thread_safe is True
    assert settings.log_level == "WARNING"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"capacity": 0},
        {"capacity": -5},
        {"shards": 0},
        {"capacity": 2, "shards": 4},
        {"log_level": "LOUD"},
        {"log_format": "xml"},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        CacheSettings(**kwargs)


@pytest.mark.parametrize(
    "env, cls",
    [
        ("development", Development),
        ("testing", TestingSettings),
        ("production", Production),
        ("unknown", Development),
    ],
)
def test_get_settings_by_environment(monkeypatch, env, cls):
    monkeypatch.setenv("APP_ENV", env)
    assert type(get_settings()) is cls


def test_environment_presets(monkeypatch):
    monkeypatch.delenv("LRU_CAPACITY", raising=False)
    assert TestingSettings().capacity == 16
    assert Production().thread_safe is True
    assert Development().log_format == "console"
