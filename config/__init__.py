"""Environment-aware cache settings."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import Field

from .settings import CacheSettings


class Development(CacheSettings):
    """Default development configuration."""

    log_format: Literal["json", "console"] = "console"
    log_level: str = "DEBUG"


class Testing(CacheSettings):
    """Small caches for test runs."""

    capacity: int = Field(16, gt=0)
    log_format: Literal["json", "console"] = "console"


class Production(CacheSettings):
    """Settings for production deployments."""

    thread_safe: bool = True
    metrics_enabled: bool = True


_env_map = {
    "development": Development,
    "testing": Testing,
    "production": Production,
}


def get_settings() -> CacheSettings:
    """Return settings based on ``APP_ENV``."""

    env = os.getenv("APP_ENV", "development").lower()
    cls = _env_map.get(env, Development)
    return cls()


__all__ = [
    "CacheSettings",
    "Development",
    "Testing",
    "Production",
    "get_settings",
]
