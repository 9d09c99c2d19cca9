"""Observation events emitted by the routing engine."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field

from lostfound.models.work_request import RequestPriority


class SelectionStrategy(StrEnum):
    SOLE_CANDIDATE = "SOLE_CANDIDATE"
    LEAST_BUSY = "LEAST_BUSY"
    BALANCED = "BALANCED"


class SelectionEvent(BaseModel):
    """One approver selection, as reported to observers."""

    approver_id: str
    approver_name: str
    priority: RequestPriority
    strategy: SelectionStrategy
    candidate_count: int
    workload_before: int
    workload_after: int
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}
