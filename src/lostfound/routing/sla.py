"""SlaMonitor — reports overdue requests and requests close to breaching SLA.

Reporting only: nothing here changes a request or aborts work.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Optional

from lostfound.models.work_request import RequestStatus, WorkRequest

DEFAULT_BREACH_THRESHOLD = 0.2

_ACTIVE = (RequestStatus.PENDING, RequestStatus.IN_PROGRESS)


class SlaMonitor:
    """Classifies work requests against their SLA target."""

    def __init__(self, threshold: float = DEFAULT_BREACH_THRESHOLD) -> None:
        self._threshold = threshold

    @property
    def threshold(self) -> float:
        return self._threshold

    def overdue_requests(
        self, requests: Iterable[WorkRequest], now: Optional[datetime] = None
    ) -> list[WorkRequest]:
        """Requests past their SLA, oldest first."""
        now = now or datetime.now(timezone.utc)
        overdue = [r for r in requests if r.is_overdue(now)]
        return sorted(overdue, key=lambda r: r.created_at)

    def approaching_breach(
        self, requests: Iterable[WorkRequest], now: Optional[datetime] = None
    ) -> list[WorkRequest]:
        """Active requests with less than ``threshold`` of their SLA left, most urgent first.

        Requests with a non-positive SLA target are skipped.
        """
        now = now or datetime.now(timezone.utc)
        at_risk: list[tuple[int, WorkRequest]] = []
        for request in requests:
            if request.status not in _ACTIVE:
                continue
            target = request.sla_target_hours
            if target <= 0:
                continue
            remaining = request.hours_until_sla(now)
            fraction = remaining / target
            if 0 < fraction < self._threshold:
                at_risk.append((remaining, request))

        at_risk.sort(key=lambda pair: pair[0])
        return [request for _, request in at_risk]
