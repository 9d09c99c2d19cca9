"""RecommendationBuilder — one routing decision for one work request."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from lostfound.models.approver import Approver
from lostfound.models.work_request import WorkRequest
from lostfound.routing.candidates import CandidateSelector
from lostfound.routing.selector import ApproverSelector


class RoutingRecommendation(BaseModel):
    """Whether a request can be routed now, to whom, and why."""

    can_route: bool
    reason: str
    approver: Optional[Approver] = None

    model_config = {"frozen": True}

    def __str__(self) -> str:
        name = self.approver.full_name if self.approver is not None else "none"
        return f"RoutingRecommendation(can_route={self.can_route}, reason={self.reason!r}, approver={name})"


class RecommendationBuilder:
    def __init__(
        self,
        candidates: CandidateSelector,
        selector: ApproverSelector,
    ) -> None:
        self._candidates = candidates
        self._selector = selector

    def recommend(self, request: WorkRequest) -> RoutingRecommendation:
        role = request.next_required_role
        if role is None:
            return RoutingRecommendation(can_route=False, reason="Request fully approved")

        candidates = self._candidates.find_candidates(role, request.target_organization_id)
        booked = self._selector.select_with_workload(candidates, request.priority)
        if booked is None:
            return RoutingRecommendation(
                can_route=False, reason=f"No approvers available for role: {role}"
            )
        approver, workload = booked
        return RoutingRecommendation(
            can_route=True,
            reason=f"Best match: {approver.full_name} (workload: {workload}, role: {role})",
            approver=approver,
        )
