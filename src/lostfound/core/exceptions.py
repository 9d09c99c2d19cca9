"""Lost-and-found exception hierarchy.

Missing approvers, empty candidate sets and zero SLA targets are ordinary
business outcomes and are returned as data. The exceptions below cover
infrastructure faults only.
"""

from __future__ import annotations


class LostFoundError(Exception):
    """Base exception for all lost-and-found errors."""


class WorkloadStoreError(LostFoundError):
    """Workload tracker backend operation failed."""

    def __init__(self, operation: str, approver_id: str | None, message: str) -> None:
        self.operation = operation
        self.approver_id = approver_id
        target = f" for approver={approver_id!r}" if approver_id is not None else ""
        super().__init__(f"Workload {operation} failed{target}: {message}")
