"""Shared test doubles — re-export memory backends plus a recording observer."""

from __future__ import annotations

from lostfound.models.approver import Approver, ApproverRole
from lostfound.models.events import SelectionEvent
from lostfound.persistence.memory_backend import InMemoryWorkloadTracker, MemoryApproverDirectory


class RecordingObserver:
    """IRoutingObserver that keeps every event for assertions."""

    def __init__(self) -> None:
        self.events: list[SelectionEvent] = []

    def on_selection(self, event: SelectionEvent) -> None:
        self.events.append(event)


def make_approver(
    user_id: int | str,
    role: ApproverRole = ApproverRole.CAMPUS_COORDINATOR,
    organization_id: str | None = None,
    first_name: str | None = None,
    last_name: str = "Tester",
) -> Approver:
    return Approver(
        user_id=user_id,
        role=role,
        organization_id=organization_id,
        first_name=first_name or f"User{user_id}",
        last_name=last_name,
        email=f"user{user_id}@campus.edu",
    )


__all__ = [
    "InMemoryWorkloadTracker",
    "MemoryApproverDirectory",
    "RecordingObserver",
    "make_approver",
]
