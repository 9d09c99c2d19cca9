"""RoutingEngine — the entry point request-handling code talks to."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Optional

import structlog

from lostfound.core.config import RoutingConfig
from lostfound.core.protocols import IApproverDirectory, IRoutingObserver, IWorkloadTracker
from lostfound.models.approver import Approver
from lostfound.models.work_request import RequestPriority, WorkRequest
from lostfound.routing.candidates import CandidateSelector
from lostfound.routing.priority import PriorityClassifier
from lostfound.routing.recommendation import RecommendationBuilder, RoutingRecommendation
from lostfound.routing.selector import ApproverSelector
from lostfound.routing.sla import SlaMonitor

logger = structlog.get_logger(__name__)


class RoutingEngine:
    """Approver routing, workload bookkeeping, priority and SLA reporting.

    The workload tracker is the only state the engine mutates. Every
    successful selection books one unit of work against the chosen approver;
    callers hand it back with ``release_workload`` when the request is
    approved, rejected, completed or cancelled.
    """

    def __init__(
        self,
        *,
        directory: IApproverDirectory,
        tracker: IWorkloadTracker,
        observer: Optional[IRoutingObserver] = None,
        config: Optional[RoutingConfig] = None,
    ) -> None:
        config = config or RoutingConfig()
        self._tracker = tracker
        self._candidates = CandidateSelector(directory)
        self._selector = ApproverSelector(tracker, observer)
        self._classifier = PriorityClassifier()
        self._sla = SlaMonitor(threshold=config.approaching_breach_threshold)
        self._recommendations = RecommendationBuilder(self._candidates, self._selector)

    # ---- Routing ----

    def find_best_approver(
        self,
        role: str,
        organization_id: Optional[str] = None,
        priority: RequestPriority = RequestPriority.NORMAL,
    ) -> Optional[Approver]:
        candidates = self._candidates.find_candidates(role, organization_id)
        if not candidates:
            logger.warning("no_approvers_for_role", role=role, organization_id=organization_id)
            return None
        return self._selector.select(candidates, priority)

    def has_available_approvers(self, role: str, organization_id: Optional[str] = None) -> bool:
        return self._candidates.has_candidates(role, organization_id)

    def recommend(self, request: WorkRequest) -> RoutingRecommendation:
        return self._recommendations.recommend(request)

    # ---- Priority ----

    def determine_priority(self, request: Any) -> RequestPriority:
        return self._classifier.classify(request)

    # ---- SLA ----

    def overdue_requests(
        self, requests: Iterable[WorkRequest], now: Optional[datetime] = None
    ) -> list[WorkRequest]:
        return self._sla.overdue_requests(requests, now)

    def approaching_breach(
        self, requests: Iterable[WorkRequest], now: Optional[datetime] = None
    ) -> list[WorkRequest]:
        return self._sla.approaching_breach(requests, now)

    # ---- Workload ----

    def workload_of(self, approver_id: str) -> int:
        return self._tracker.workload_of(approver_id)

    def release_workload(self, approver_id: str) -> int:
        return self._tracker.release(approver_id)

    def workload_statistics(self) -> dict[str, int]:
        return self._tracker.snapshot()

    def reset_workload_tracking(self) -> None:
        self._tracker.reset()
        logger.info("workload_tracking_reset")
