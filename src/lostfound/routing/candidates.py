"""CandidateSelector — finds directory users qualified for an approval role."""

from __future__ import annotations

from typing import Optional

from lostfound.core.protocols import IApproverDirectory
from lostfound.models.approver import Approver


class CandidateSelector:
    """Filters the approver directory by role, preferring the target organization."""

    def __init__(self, directory: IApproverDirectory) -> None:
        self._directory = directory

    def find_candidates(self, role: str, organization_id: Optional[str] = None) -> list[Approver]:
        """Return approvers holding ``role``, in directory order.

        Users in ``organization_id`` win when there are any. Otherwise every
        holder of the role is returned, so a request never becomes unroutable
        just because its target organization lacks the role. An unknown role
        yields an empty list.
        """
        holders = [a for a in self._directory.list_approvers() if a.role == role]
        if organization_id is None:
            return holders

        exact = [a for a in holders if a.organization_id == organization_id]
        return exact or holders

    def has_candidates(self, role: str, organization_id: Optional[str] = None) -> bool:
        return bool(self.find_candidates(role, organization_id))
