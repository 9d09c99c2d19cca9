"""Admin endpoints for workload monitoring."""

from __future__ import annotations

from fastapi import APIRouter, Request

from lostfound.routing import RoutingEngine

router = APIRouter(tags=["admin"])


def _engine(request: Request) -> RoutingEngine:
    return request.app.state.engine


@router.get("/workload")
async def get_workload(request: Request) -> dict:
    """Return the current workload count of every tracked approver."""
    return {"workload": _engine(request).workload_statistics()}


@router.post("/workload/reset")
async def reset_workload(request: Request) -> dict:
    """Clear every workload counter."""
    _engine(request).reset_workload_tracking()
    return {"workload": {}}


@router.post("/workload/{approver_id}/release")
async def release_workload(approver_id: str, request: Request) -> dict:
    """Hand back one unit of work for an approver whose request was not closed normally."""
    remaining = _engine(request).release_workload(approver_id)
    return {"approver_id": approver_id, "workload": remaining}
