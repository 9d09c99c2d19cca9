"""Redis workload tracker implementing IWorkloadTracker.

All counters live in one hash so that worker processes sharing a Redis
instance see a single table. Increments use HINCRBY; releases run in a
WATCH/MULTI transaction so the floor-at-zero check and the decrement are
applied together.
"""

from __future__ import annotations

import redis

from lostfound.core.exceptions import WorkloadStoreError


class RedisWorkloadTracker:
    """Shared IWorkloadTracker backed by a Redis hash."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        key: str = "lostfound:workload",
    ) -> None:
        self._key = key
        self._client = redis.Redis(host=host, port=port, db=db, decode_responses=True)

    def workload_of(self, approver_id: str) -> int:
        try:
            value = self._client.hget(self._key, approver_id)
        except redis.RedisError as exc:
            raise WorkloadStoreError("read", approver_id, str(exc)) from exc
        return int(value) if value is not None else 0

    def increment(self, approver_id: str) -> int:
        try:
            return int(self._client.hincrby(self._key, approver_id, 1))
        except redis.RedisError as exc:
            raise WorkloadStoreError("increment", approver_id, str(exc)) from exc

    def release(self, approver_id: str) -> int:
        def _decrement(pipe: redis.client.Pipeline) -> int:
            value = pipe.hget(self._key, approver_id)
            current = int(value) if value is not None else 0
            pipe.multi()
            if current <= 0:
                return 0
            pipe.hincrby(self._key, approver_id, -1)
            return current - 1

        try:
            return self._client.transaction(_decrement, self._key, value_from_callable=True)
        except redis.RedisError as exc:
            raise WorkloadStoreError("release", approver_id, str(exc)) from exc

    def snapshot(self) -> dict[str, int]:
        try:
            raw = self._client.hgetall(self._key)
        except redis.RedisError as exc:
            raise WorkloadStoreError("snapshot", None, str(exc)) from exc
        return {approver_id: int(count) for approver_id, count in raw.items()}

    def reset(self) -> None:
        try:
            self._client.delete(self._key)
        except redis.RedisError as exc:
            raise WorkloadStoreError("reset", None, str(exc)) from exc
