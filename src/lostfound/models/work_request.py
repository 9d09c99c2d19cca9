"""Work request models — the approval workflows the routing engine reads.

Requests are owned and mutated by the external request-lifecycle service.
Each variant knows its own approval chain and exposes a ``priority_hint``
so that classification never needs to branch on the concrete type.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from lostfound.models.approver import ApproverRole


class RequestStatus(StrEnum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class RequestPriority(StrEnum):
    URGENT = "URGENT"
    HIGH = "HIGH"
    NORMAL = "NORMAL"
    LOW = "LOW"


class RequestType(StrEnum):
    ITEM_CLAIM = "ITEM_CLAIM"
    CROSS_CAMPUS_TRANSFER = "CROSS_CAMPUS_TRANSFER"
    TRANSIT_TO_UNIVERSITY_TRANSFER = "TRANSIT_TO_UNIVERSITY_TRANSFER"
    AIRPORT_TO_UNIVERSITY_TRANSFER = "AIRPORT_TO_UNIVERSITY_TRANSFER"
    POLICE_EVIDENCE_REQUEST = "POLICE_EVIDENCE_REQUEST"
    MBTA_TO_AIRPORT_EMERGENCY = "MBTA_TO_AIRPORT_EMERGENCY"
    MULTI_ENTERPRISE_DISPUTE = "MULTI_ENTERPRISE_DISPUTE"


SLA_TARGET_HOURS: dict[RequestPriority, int] = {
    RequestPriority.URGENT: 4,
    RequestPriority.HIGH: 24,
    RequestPriority.NORMAL: 72,
    RequestPriority.LOW: 168,
}

HIGH_VALUE_THRESHOLD = 500.0  # claims above this are flagged high-value by default
URGENT_CLAIM_VALUE = 1000.0  # high-value claims above this are URGENT

_ACTIVE_STATUSES = frozenset({RequestStatus.PENDING, RequestStatus.IN_PROGRESS})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkRequest(BaseModel):
    """Base for every approval workflow in the lost-and-found network."""

    request_id: Optional[str] = None
    request_type: RequestType
    status: RequestStatus = RequestStatus.PENDING
    priority: RequestPriority = RequestPriority.NORMAL

    # --- Requester / target context ---
    requester_id: Optional[str] = None
    requester_name: str = ""
    requester_organization_id: Optional[str] = None
    requester_enterprise_id: Optional[str] = None
    target_organization_id: Optional[str] = None
    target_enterprise_id: Optional[str] = None

    # --- Approval tracking ---
    approver_ids: list[str] = Field(default_factory=list)
    current_approver_id: Optional[str] = None
    approval_step: int = Field(default=0, ge=0)

    description: str = ""
    notes: str = ""
    sla_hours_override: Optional[int] = None  # replaces the priority-based SLA target

    created_at: datetime = Field(default_factory=_utcnow)
    last_updated_at: datetime = Field(default_factory=_utcnow)
    completed_at: Optional[datetime] = None

    @field_validator("created_at", "last_updated_at", "completed_at")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @abstractmethod
    def approval_chain(self) -> list[str]:
        """Roles that must approve, in order."""

    def priority_hint(self) -> RequestPriority:
        """Priority this request should carry, judged from its own attributes."""
        return RequestPriority.NORMAL

    # --- Approval chain navigation ---

    @property
    def next_required_role(self) -> Optional[str]:
        """Role that must act next, or None once the chain is exhausted."""
        chain = self.approval_chain()
        if self.approval_step >= len(chain):
            return None
        return chain[self.approval_step]

    def needs_approval_from(self, role: str) -> bool:
        return self.next_required_role == role

    @property
    def is_pending(self) -> bool:
        return self.status in _ACTIVE_STATUSES

    # --- SLA ---

    @property
    def sla_target_hours(self) -> int:
        if self.sla_hours_override is not None:
            return self.sla_hours_override
        return SLA_TARGET_HOURS.get(self.priority, SLA_TARGET_HOURS[RequestPriority.NORMAL])

    def hours_since_creation(self, now: Optional[datetime] = None) -> int:
        """Whole hours elapsed since creation, truncated toward zero."""
        now = now or _utcnow()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return int((now - self.created_at).total_seconds() / 3600)

    def hours_until_sla(self, now: Optional[datetime] = None) -> int:
        """Hours left before the SLA target is breached; negative once breached."""
        return self.sla_target_hours - self.hours_since_creation(now)

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        if not self.is_pending:
            return False
        return self.hours_since_creation(now) > self.sla_target_hours

    # --- Lifecycle transitions (called by the request-lifecycle service) ---

    def advance_approval(self, approver_id: str) -> None:
        self.approver_ids.append(approver_id)
        self.approval_step += 1
        self.last_updated_at = _utcnow()
        if self.approval_step >= len(self.approval_chain()):
            self.status = RequestStatus.APPROVED
        else:
            self.status = RequestStatus.IN_PROGRESS

    def reject(self, reason: str) -> None:
        self.status = RequestStatus.REJECTED
        self.notes = f"{self.notes}\nREJECTED: {reason}" if self.notes else f"REJECTED: {reason}"
        self.last_updated_at = _utcnow()

    def complete(self) -> None:
        self.status = RequestStatus.COMPLETED
        self.completed_at = _utcnow()
        self.last_updated_at = self.completed_at

    def cancel(self) -> None:
        self.status = RequestStatus.CANCELLED
        self.last_updated_at = _utcnow()


# ---------------------------------------------------------------------------
# Item claims
# ---------------------------------------------------------------------------

_HOLDING_ENTERPRISE_ROLES: dict[str, str] = {
    "PUBLIC_TRANSIT": ApproverRole.STATION_MANAGER,
    "AIRPORT": ApproverRole.AIRPORT_LOST_FOUND_SPECIALIST,
    "LAW_ENFORCEMENT": ApproverRole.POLICE_EVIDENCE_CUSTODIAN,
}


class ItemClaimRequest(WorkRequest):
    """A student claiming a found item.

    The chain always starts with the campus coordinator (identity check),
    adds the holding enterprise's approver when the item sits outside higher
    education, and ends with police verification for high-value items.
    """

    request_type: RequestType = RequestType.ITEM_CLAIM

    item_id: str = ""
    lost_item_id: Optional[str] = None
    item_name: str = ""
    item_category: str = ""
    item_value: float = Field(default=0.0, ge=0.0)
    is_high_value: Optional[bool] = None  # defaults to item_value > HIGH_VALUE_THRESHOLD
    claim_details: str = ""
    identifying_features: str = ""
    item_holding_enterprise_type: Optional[str] = None
    item_holding_enterprise_name: Optional[str] = None

    @model_validator(mode="after")
    def _derive_high_value(self) -> ItemClaimRequest:
        if self.is_high_value is None:
            self.is_high_value = self.item_value > HIGH_VALUE_THRESHOLD
        return self

    @property
    def holding_enterprise_role(self) -> Optional[str]:
        if not self.item_holding_enterprise_type:
            return None
        return _HOLDING_ENTERPRISE_ROLES.get(self.item_holding_enterprise_type.upper())

    def approval_chain(self) -> list[str]:
        chain = [ApproverRole.CAMPUS_COORDINATOR.value]
        external = self.holding_enterprise_role
        if external is not None:
            chain.append(str(external))
        if self.is_high_value and external != ApproverRole.POLICE_EVIDENCE_CUSTODIAN:
            chain.append(ApproverRole.POLICE_EVIDENCE_CUSTODIAN.value)
        return chain

    def priority_hint(self) -> RequestPriority:
        if self.is_high_value and self.item_value > URGENT_CLAIM_VALUE:
            return RequestPriority.URGENT
        if self.is_high_value:
            return RequestPriority.HIGH
        return RequestPriority.NORMAL


# ---------------------------------------------------------------------------
# Police evidence verification
# ---------------------------------------------------------------------------

class PoliceEvidenceRequest(WorkRequest):
    """Coordinator asks the police to verify a found item (serials, stolen lists)."""

    request_type: RequestType = RequestType.POLICE_EVIDENCE_REQUEST

    item_id: str = ""
    item_name: str = ""
    estimated_value: float = 0.0
    serial_number: Optional[str] = None
    verification_reason: str = ""
    is_stolen_check: bool = False
    case_number: Optional[str] = None

    def approval_chain(self) -> list[str]:
        return [
            ApproverRole.CAMPUS_COORDINATOR.value,
            ApproverRole.POLICE_EVIDENCE_CUSTODIAN.value,
        ]

    def priority_hint(self) -> RequestPriority:
        if self.is_stolen_check:
            return RequestPriority.URGENT
        return RequestPriority.HIGH


# ---------------------------------------------------------------------------
# Transfers between sites
# ---------------------------------------------------------------------------

class TransferRequest(WorkRequest):
    """Common shape of every inter-site item transfer."""

    item_id: str = ""
    item_name: str = ""
    item_category: str = ""
    was_in_secure_area: bool = False

    def priority_hint(self) -> RequestPriority:
        if self.was_in_secure_area:
            return RequestPriority.HIGH
        return RequestPriority.NORMAL


class AirportToUniversityTransferRequest(TransferRequest):
    request_type: RequestType = RequestType.AIRPORT_TO_UNIVERSITY_TRANSFER

    terminal_number: str = ""
    airport_incident_number: str = ""
    campus_pickup_location: str = ""
    student_id: Optional[str] = None

    def approval_chain(self) -> list[str]:
        return [
            ApproverRole.AIRPORT_LOST_FOUND_SPECIALIST.value,
            ApproverRole.CAMPUS_COORDINATOR.value,
            ApproverRole.POLICE_EVIDENCE_CUSTODIAN.value,
            ApproverRole.STUDENT.value,
        ]


class TransitToUniversityTransferRequest(TransferRequest):
    request_type: RequestType = RequestType.TRANSIT_TO_UNIVERSITY_TRANSFER

    station_name: str = ""
    route_number: str = ""
    campus_pickup_location: str = ""
    student_id: Optional[str] = None

    def approval_chain(self) -> list[str]:
        return [
            ApproverRole.STATION_MANAGER.value,
            ApproverRole.CAMPUS_COORDINATOR.value,
            ApproverRole.STUDENT.value,
        ]


_DESTINATION_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("mbta", "transit", "transportation", "station"), ApproverRole.STATION_MANAGER),
    (("airport", "logan"), ApproverRole.AIRPORT_LOST_FOUND_SPECIALIST),
    (("police", "law enforcement", "nupd", "bpd"), ApproverRole.POLICE_EVIDENCE_CUSTODIAN),
)


class CrossCampusTransferRequest(TransferRequest):
    """Transfer from one campus to another organization in the network.

    The receiving approver is inferred from the destination's name.
    """

    request_type: RequestType = RequestType.CROSS_CAMPUS_TRANSFER

    source_campus_name: str = ""
    destination_campus_name: Optional[str] = None
    pickup_location: str = ""
    student_name: str = ""

    @property
    def destination_approver_role(self) -> str:
        if not self.destination_campus_name:
            return ApproverRole.CAMPUS_COORDINATOR.value
        destination = self.destination_campus_name.lower()
        for keywords, role in _DESTINATION_KEYWORDS:
            if any(k in destination for k in keywords):
                return str(role)
        return ApproverRole.CAMPUS_COORDINATOR.value

    def approval_chain(self) -> list[str]:
        return [
            ApproverRole.CAMPUS_COORDINATOR.value,
            self.destination_approver_role,
            ApproverRole.STUDENT.value,
        ]


class MBTAToAirportEmergencyRequest(TransferRequest):
    """Fast-track hand-off of travel documents from a station to the airport."""

    request_type: RequestType = RequestType.MBTA_TO_AIRPORT_EMERGENCY
    priority: RequestPriority = RequestPriority.URGENT

    mbta_station_name: str = ""
    airport_terminal: Optional[str] = None
    flight_number: str = ""
    traveler_name: Optional[str] = None

    def approval_chain(self) -> list[str]:
        return [
            ApproverRole.STATION_MANAGER.value,
            ApproverRole.AIRPORT_LOST_FOUND_SPECIALIST.value,
        ]


# ---------------------------------------------------------------------------
# Disputes
# ---------------------------------------------------------------------------

class MultiEnterpriseDisputeResolution(WorkRequest):
    """Ownership dispute between claimants from several enterprises."""

    request_type: RequestType = RequestType.MULTI_ENTERPRISE_DISPUTE
    priority: RequestPriority = RequestPriority.HIGH

    item_id: str = ""
    item_name: str = ""
    claimant_ids: list[str] = Field(default_factory=list)
    involved_enterprise_ids: list[str] = Field(default_factory=list)
    dispute_reason: str = ""

    def approval_chain(self) -> list[str]:
        return [ApproverRole.POLICE_EVIDENCE_CUSTODIAN.value]


REQUEST_CLASSES: dict[RequestType, type[WorkRequest]] = {
    RequestType.ITEM_CLAIM: ItemClaimRequest,
    RequestType.POLICE_EVIDENCE_REQUEST: PoliceEvidenceRequest,
    RequestType.AIRPORT_TO_UNIVERSITY_TRANSFER: AirportToUniversityTransferRequest,
    RequestType.TRANSIT_TO_UNIVERSITY_TRANSFER: TransitToUniversityTransferRequest,
    RequestType.CROSS_CAMPUS_TRANSFER: CrossCampusTransferRequest,
    RequestType.MBTA_TO_AIRPORT_EMERGENCY: MBTAToAirportEmergencyRequest,
    RequestType.MULTI_ENTERPRISE_DISPUTE: MultiEnterpriseDisputeResolution,
}


def parse_work_request(data: dict[str, Any]) -> WorkRequest:
    """Build the concrete request variant named by ``data["request_type"]``."""
    request_type = RequestType(data["request_type"])
    return REQUEST_CLASSES[request_type].model_validate(data)
