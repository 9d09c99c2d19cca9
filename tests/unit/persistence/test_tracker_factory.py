"""Tests for create_workload_tracker backend selection."""

from __future__ import annotations

from unittest.mock import patch

import fakeredis

from lostfound.core.config import AppSettings, RedisConfig, RoutingConfig
from lostfound.persistence import create_workload_tracker
from lostfound.persistence.memory_backend import InMemoryWorkloadTracker
from lostfound.persistence.redis_backend import RedisWorkloadTracker


def test_defaults_to_memory():
    assert isinstance(create_workload_tracker(AppSettings()), InMemoryWorkloadTracker)


def test_redis_backend_uses_configured_key():
    settings = AppSettings(
        routing=RoutingConfig(workload_backend="redis"),
        redis=RedisConfig(key_prefix="campus:load"),
    )
    with patch("redis.Redis", return_value=fakeredis.FakeRedis(decode_responses=True)):
        tracker = create_workload_tracker(settings)
    assert isinstance(tracker, RedisWorkloadTracker)
    tracker.increment("5")
    assert tracker.snapshot() == {"5": 1}
