"""Approver (user) model as read from the external user directory."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class ApproverRole(StrEnum):
    # Higher education
    STUDENT = "STUDENT"
    STAFF = "STAFF"
    CAMPUS_COORDINATOR = "CAMPUS_COORDINATOR"
    BUILDING_MANAGER = "BUILDING_MANAGER"
    CAMPUS_SECURITY = "CAMPUS_SECURITY"
    UNIVERSITY_ADMIN = "UNIVERSITY_ADMIN"

    # Public transit
    STATION_MANAGER = "STATION_MANAGER"
    LOST_FOUND_CLERK = "LOST_FOUND_CLERK"
    TRANSIT_SECURITY_INSPECTOR = "TRANSIT_SECURITY_INSPECTOR"
    TRANSIT_OFFICER = "TRANSIT_OFFICER"
    MBTA_ADMIN = "MBTA_ADMIN"

    # Airport
    AIRPORT_LOST_FOUND_SPECIALIST = "AIRPORT_LOST_FOUND_SPECIALIST"
    TSA_SECURITY_COORDINATOR = "TSA_SECURITY_COORDINATOR"
    AIRLINE_REPRESENTATIVE = "AIRLINE_REPRESENTATIVE"
    AIRPORT_ADMIN = "AIRPORT_ADMIN"

    # Law enforcement
    POLICE_EVIDENCE_CUSTODIAN = "POLICE_EVIDENCE_CUSTODIAN"
    DETECTIVE = "DETECTIVE"
    POLICE_ADMIN = "POLICE_ADMIN"

    # Public / general
    PUBLIC_TRAVELER = "PUBLIC_TRAVELER"
    SYSTEM_ADMIN = "SYSTEM_ADMIN"


class Approver(BaseModel):
    """A directory user who may act on a work request.

    Owned by the external user directory; the routing engine only reads it.
    The directory is expected to list active users only, so candidate
    selection does not look at ``active``.
    """

    user_id: int | str
    role: ApproverRole
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    organization_id: Optional[str] = None
    enterprise_id: Optional[str] = None
    active: bool = True

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @property
    def key(self) -> str:
        """Workload table key for this approver."""
        return str(self.user_id)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
