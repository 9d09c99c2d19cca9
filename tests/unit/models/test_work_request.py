"""Tests for work request variants: approval chains, lifecycle and SLA arithmetic."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lostfound.models.work_request import (
    AirportToUniversityTransferRequest,
    CrossCampusTransferRequest,
    ItemClaimRequest,
    MBTAToAirportEmergencyRequest,
    MultiEnterpriseDisputeResolution,
    PoliceEvidenceRequest,
    RequestPriority,
    RequestStatus,
    RequestType,
    TransitToUniversityTransferRequest,
    WorkRequest,
    parse_work_request,
)

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


class TestItemClaimChain:
    def test_local_low_value_claim_needs_only_coordinator(self):
        claim = ItemClaimRequest(item_value=40)
        assert claim.approval_chain() == ["CAMPUS_COORDINATOR"]

    def test_high_value_defaults_from_item_value(self):
        assert ItemClaimRequest(item_value=501).is_high_value is True
        assert ItemClaimRequest(item_value=500).is_high_value is False

    def test_explicit_high_value_flag_wins(self):
        assert ItemClaimRequest(item_value=2000, is_high_value=False).is_high_value is False

    def test_high_value_claim_ends_with_police(self):
        claim = ItemClaimRequest(item_value=800)
        assert claim.approval_chain() == ["CAMPUS_COORDINATOR", "POLICE_EVIDENCE_CUSTODIAN"]

    def test_transit_held_item_adds_station_manager(self):
        claim = ItemClaimRequest(item_value=20, item_holding_enterprise_type="public_transit")
        assert claim.approval_chain() == ["CAMPUS_COORDINATOR", "STATION_MANAGER"]

    def test_police_held_high_value_item_is_not_duplicated(self):
        claim = ItemClaimRequest(item_value=900, item_holding_enterprise_type="LAW_ENFORCEMENT")
        assert claim.approval_chain() == ["CAMPUS_COORDINATOR", "POLICE_EVIDENCE_CUSTODIAN"]

    def test_higher_education_holder_adds_nothing(self):
        claim = ItemClaimRequest(item_holding_enterprise_type="HIGHER_EDUCATION")
        assert claim.holding_enterprise_role is None


class TestOtherChains:
    def test_police_evidence(self):
        assert PoliceEvidenceRequest().approval_chain() == [
            "CAMPUS_COORDINATOR",
            "POLICE_EVIDENCE_CUSTODIAN",
        ]

    def test_airport_transfer(self):
        assert AirportToUniversityTransferRequest().approval_chain()[0] == "AIRPORT_LOST_FOUND_SPECIALIST"
        assert len(AirportToUniversityTransferRequest().approval_chain()) == 4

    def test_transit_transfer(self):
        assert TransitToUniversityTransferRequest().approval_chain() == [
            "STATION_MANAGER",
            "CAMPUS_COORDINATOR",
            "STUDENT",
        ]

    @pytest.mark.parametrize(
        ("destination", "role"),
        [
            ("Boston University", "CAMPUS_COORDINATOR"),
            ("MBTA Park Street Station", "STATION_MANAGER"),
            ("Logan International Airport", "AIRPORT_LOST_FOUND_SPECIALIST"),
            ("NUPD Evidence Room", "POLICE_EVIDENCE_CUSTODIAN"),
            (None, "CAMPUS_COORDINATOR"),
        ],
    )
    def test_cross_campus_destination_role(self, destination, role):
        request = CrossCampusTransferRequest(destination_campus_name=destination)
        assert request.approval_chain() == ["CAMPUS_COORDINATOR", role, "STUDENT"]

    def test_emergency_transfer(self):
        assert MBTAToAirportEmergencyRequest().approval_chain() == [
            "STATION_MANAGER",
            "AIRPORT_LOST_FOUND_SPECIALIST",
        ]

    def test_dispute_goes_to_police(self):
        assert MultiEnterpriseDisputeResolution().approval_chain() == ["POLICE_EVIDENCE_CUSTODIAN"]

    def test_emergency_transfer_defaults_to_urgent(self):
        request = MBTAToAirportEmergencyRequest()
        assert request.priority == RequestPriority.URGENT
        assert request.sla_target_hours == 4

    def test_dispute_defaults_to_high(self):
        request = MultiEnterpriseDisputeResolution()
        assert request.priority == RequestPriority.HIGH
        assert request.sla_target_hours == 24

    def test_explicit_priority_still_wins(self):
        assert MBTAToAirportEmergencyRequest(priority=RequestPriority.LOW).sla_target_hours == 168

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            WorkRequest(request_type=RequestType.ITEM_CLAIM)


class TestLifecycle:
    def test_next_required_role_walks_the_chain(self):
        request = PoliceEvidenceRequest()
        assert request.next_required_role == "CAMPUS_COORDINATOR"
        request.advance_approval("7")
        assert request.status == RequestStatus.IN_PROGRESS
        assert request.next_required_role == "POLICE_EVIDENCE_CUSTODIAN"
        request.advance_approval("9")
        assert request.status == RequestStatus.APPROVED
        assert request.next_required_role is None
        assert request.approver_ids == ["7", "9"]

    def test_needs_approval_from(self):
        request = MultiEnterpriseDisputeResolution()
        assert request.needs_approval_from("POLICE_EVIDENCE_CUSTODIAN")
        assert not request.needs_approval_from("CAMPUS_COORDINATOR")

    def test_reject_appends_note(self):
        request = ItemClaimRequest(notes="first look")
        request.reject("photo mismatch")
        assert request.status == RequestStatus.REJECTED
        assert request.notes == "first look\nREJECTED: photo mismatch"
        assert not request.is_pending

    def test_complete_and_cancel(self):
        request = ItemClaimRequest()
        request.complete()
        assert request.status == RequestStatus.COMPLETED
        assert request.completed_at is not None

        other = ItemClaimRequest()
        other.cancel()
        assert other.status == RequestStatus.CANCELLED


class TestSla:
    @pytest.mark.parametrize(
        ("priority", "hours"),
        [
            (RequestPriority.URGENT, 4),
            (RequestPriority.HIGH, 24),
            (RequestPriority.NORMAL, 72),
            (RequestPriority.LOW, 168),
        ],
    )
    def test_target_follows_priority(self, priority, hours):
        assert ItemClaimRequest(priority=priority).sla_target_hours == hours

    def test_override_replaces_target(self):
        assert ItemClaimRequest(priority=RequestPriority.URGENT, sla_hours_override=20).sla_target_hours == 20

    def test_hours_until_sla_truncates_partial_hours(self):
        request = ItemClaimRequest(
            priority=RequestPriority.URGENT, created_at=NOW - timedelta(hours=2, minutes=59)
        )
        assert request.hours_until_sla(NOW) == 2

    def test_hours_until_sla_goes_negative(self):
        request = ItemClaimRequest(priority=RequestPriority.URGENT, created_at=NOW - timedelta(hours=10))
        assert request.hours_until_sla(NOW) == -6
        assert request.is_overdue(NOW)

    def test_closed_requests_are_never_overdue(self):
        request = ItemClaimRequest(
            priority=RequestPriority.URGENT,
            status=RequestStatus.COMPLETED,
            created_at=NOW - timedelta(days=3),
        )
        assert not request.is_overdue(NOW)

    def test_naive_timestamps_are_treated_as_utc(self):
        request = ItemClaimRequest(created_at=datetime(2026, 3, 2, 10, 0))
        assert request.created_at.tzinfo is timezone.utc
        assert request.hours_since_creation(NOW) == 2


class TestParseWorkRequest:
    def test_builds_concrete_variant(self):
        request = parse_work_request(
            {"request_type": "POLICE_EVIDENCE_REQUEST", "request_id": "r1", "is_stolen_check": True}
        )
        assert isinstance(request, PoliceEvidenceRequest)
        assert request.is_stolen_check is True

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValueError):
            parse_work_request({"request_type": "LOST_PET"})
