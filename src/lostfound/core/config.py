"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class RoutingConfig(BaseSettings):
    """Routing engine tuning."""

    model_config = {"env_prefix": "LOSTFOUND_ROUTING_"}

    workload_backend: Literal["memory", "redis"] = "memory"
    approaching_breach_threshold: float = Field(default=0.2, gt=0.0, le=1.0)


class RedisConfig(BaseSettings):
    """Redis configuration for the shared workload tracker."""

    model_config = {"env_prefix": "LOSTFOUND_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    key_prefix: str = "lostfound:workload"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "LOSTFOUND_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    routing: RoutingConfig = RoutingConfig()
    redis: RedisConfig = RedisConfig()
