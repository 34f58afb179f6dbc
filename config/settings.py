from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class CacheSettings(BaseSettings):
    """Cache settings loaded from ``LRU_*`` environment variables."""

    capacity: int = Field(1000, gt=0)
    thread_safe: bool = False
    shards: int = Field(1, ge=1)
    name: str = "lru"

    metrics_enabled: bool = False
    prometheus_port: int = 9090

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        valid = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {valid}")
        return v.upper()

    @field_validator("shards")
    @classmethod
    def _validate_shards(cls, v: int, info) -> int:
        capacity = info.data.get("capacity") if isinstance(info.data, dict) else None
        if capacity is not None and v > capacity:
            raise ValueError("Shard count cannot exceed capacity")
        return v

    class Config:
        env_prefix = "LRU_"
        env_file = ".env"
        case_sensitive = False
