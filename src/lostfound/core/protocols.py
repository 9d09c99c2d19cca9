"""Protocol interfaces for the routing engine's collaborators.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lostfound.models.approver import Approver
    from lostfound.models.events import SelectionEvent


# ---------------------------------------------------------------------------
# User directory (external, read-only)
# ---------------------------------------------------------------------------

@runtime_checkable
class IApproverDirectory(Protocol):
    """Read-only view of every user who could act as an approver."""

    def list_approvers(self) -> list[Approver]: ...


# ---------------------------------------------------------------------------
# Workload tracking
# ---------------------------------------------------------------------------

@runtime_checkable
class IWorkloadTracker(Protocol):
    """Per-approver count of assigned, unreleased requests.

    Implementations must make ``increment`` and ``release`` atomic per
    approver and must never let a count go below zero.
    """

    def workload_of(self, approver_id: str) -> int: ...

    def increment(self, approver_id: str) -> int: ...

    def release(self, approver_id: str) -> int: ...

    def snapshot(self) -> dict[str, int]: ...

    def reset(self) -> None: ...


# ---------------------------------------------------------------------------
# Observation hook
# ---------------------------------------------------------------------------

@runtime_checkable
class IRoutingObserver(Protocol):
    """Receives selection outcomes; must not influence the decision."""

    def on_selection(self, event: SelectionEvent) -> None: ...
