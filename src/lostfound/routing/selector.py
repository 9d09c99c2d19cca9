"""ApproverSelector — picks one approver from a candidate list and books the work."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from lostfound.core.protocols import IRoutingObserver, IWorkloadTracker
from lostfound.models.approver import Approver
from lostfound.models.events import SelectionEvent, SelectionStrategy
from lostfound.models.work_request import RequestPriority
from lostfound.routing.observers import LoggingRoutingObserver


class ApproverSelector:
    """Least-loaded approver selection with first-in-order tie-breaks.

    URGENT requests take the candidate with the strictly lowest workload.
    Every other priority goes through the "balanced" path, a stable sort by
    workload, which currently lands on the same approver. The chosen
    approver's workload is incremented before returning.
    """

    def __init__(
        self,
        tracker: IWorkloadTracker,
        observer: Optional[IRoutingObserver] = None,
    ) -> None:
        self._tracker = tracker
        self._observer = observer if observer is not None else LoggingRoutingObserver()

    def select(
        self, candidates: Sequence[Approver], priority: RequestPriority
    ) -> Optional[Approver]:
        booked = self.select_with_workload(candidates, priority)
        return booked[0] if booked is not None else None

    def select_with_workload(
        self, candidates: Sequence[Approver], priority: RequestPriority
    ) -> Optional[tuple[Approver, int]]:
        """Like ``select`` but also returns the chosen approver's new workload."""
        if not candidates:
            return None

        if len(candidates) == 1:
            chosen, strategy = candidates[0], SelectionStrategy.SOLE_CANDIDATE
        elif priority == RequestPriority.URGENT:
            chosen, strategy = self._least_busy(candidates), SelectionStrategy.LEAST_BUSY
        else:
            chosen, strategy = self._balanced(candidates), SelectionStrategy.BALANCED

        workload = self._tracker.increment(chosen.key)
        self._observer.on_selection(
            SelectionEvent(
                approver_id=chosen.key,
                approver_name=chosen.full_name,
                priority=priority,
                strategy=strategy,
                candidate_count=len(candidates),
                workload_before=workload - 1,
                workload_after=workload,
            )
        )
        return chosen, workload

    def _least_busy(self, candidates: Sequence[Approver]) -> Approver:
        least_busy = candidates[0]
        lowest = self._tracker.workload_of(least_busy.key)
        for candidate in candidates[1:]:
            workload = self._tracker.workload_of(candidate.key)
            if workload < lowest:
                least_busy, lowest = candidate, workload
        return least_busy

    def _balanced(self, candidates: Sequence[Approver]) -> Approver:
        # TODO: rotate among equally loaded candidates once a rotation policy is agreed.
        ranked = sorted(candidates, key=lambda a: self._tracker.workload_of(a.key))
        return ranked[0]
