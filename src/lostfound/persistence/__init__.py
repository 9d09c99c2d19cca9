"""Pluggable workload tracker backends behind the IWorkloadTracker protocol."""

from __future__ import annotations

from lostfound.core.config import AppSettings
from lostfound.core.protocols import IWorkloadTracker
from lostfound.persistence.memory_backend import InMemoryWorkloadTracker
from lostfound.persistence.redis_backend import RedisWorkloadTracker


def create_workload_tracker(settings: AppSettings | None = None) -> IWorkloadTracker:
    """Create the workload tracker selected by ``routing.workload_backend``."""
    if settings is None:
        settings = AppSettings()

    if settings.routing.workload_backend == "redis":
        return RedisWorkloadTracker(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            key=settings.redis.key_prefix,
        )

    return InMemoryWorkloadTracker()
