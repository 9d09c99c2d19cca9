"""In-memory backends — the default workload tracker and a list-backed directory."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from lostfound.models.approver import Approver


class MemoryApproverDirectory:
    """List-backed IApproverDirectory for tests and embedded use.

    Preserves insertion order, which the approver selector relies on for
    deterministic tie-breaks.
    """

    def __init__(self, approvers: Iterable[Approver] | None = None) -> None:
        self._approvers: list[Approver] = list(approvers or [])

    def add(self, approver: Approver) -> None:
        self._approvers.append(approver)

    def list_approvers(self) -> list[Approver]:
        return list(self._approvers)


class InMemoryWorkloadTracker:
    """Process-local IWorkloadTracker guarded by a single lock.

    Counts are lost when the process exits.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: dict[str, int] = {}

    def workload_of(self, approver_id: str) -> int:
        with self._lock:
            return self._counts.get(approver_id, 0)

    def increment(self, approver_id: str) -> int:
        with self._lock:
            count = self._counts.get(approver_id, 0) + 1
            self._counts[approver_id] = count
            return count

    def release(self, approver_id: str) -> int:
        with self._lock:
            current = self._counts.get(approver_id, 0)
            if current <= 0:
                return 0
            self._counts[approver_id] = current - 1
            return current - 1

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()
