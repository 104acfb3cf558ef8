"""
Unit tests for PartnerEventSynchronizer.
"""

from datetime import datetime, timezone

import pytest

from core.domain.events import LifecycleEvent
from core.domain.exceptions import PayloadDeserializationError, UnknownEventTypeError
from core.infrastructure.events import LifecycleEventRouter
from partners.domain.partner_mapping import PartnerMapping


def _event(make_payload, topic, data, **kwargs):
    return LifecycleEvent.from_dict(make_payload(topic, data, **kwargs))


class TestApiKeyApproved:
    """Tests for handle_api_key_approved."""

    def test_creates_records_then_mapping(
        self, synchronizer, approval_payload, journal, memory_mapping_repository, now
    ):
        """Test that the mapping is written after the records it links."""
        synchronizer.handle_api_key_approved(LifecycleEvent.from_dict(approval_payload), "alice")

        assert journal == [
            ("partner", "partner-1"),
            ("api_key", "apikey-1"),
            ("policy", "policy-1"),
            ("mapping", ("partner-1", "apikey-1")),
        ]
        mapping = memory_mapping_repository.find_by_partner_and_api_key("partner-1", "apikey-1")
        assert mapping.policy_id == "policy-1"
        assert mapping.created_by == "alice"
        assert mapping.created_at == now

    def test_stamps_created_audit_fields(
        self, synchronizer, approval_payload, memory_partner_repository, memory_policy_repository, now
    ):
        """Test that new records are stamped as created."""
        synchronizer.handle_api_key_approved(LifecycleEvent.from_dict(approval_payload), "alice")

        partner = memory_partner_repository.find_by_id("partner-1")
        assert partner.partner_name == "Acme Bank"
        assert partner.certificate_data == "CERT"
        assert partner.created_by == "alice"
        assert partner.created_at == now
        assert partner.updated_by is None

        policy = memory_policy_repository.find_by_id("policy-1")
        assert policy.policy == {"authPolicies": [{"authType": "otp", "mandatory": True}]}
        assert policy.commence_on == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_missing_section_writes_nothing(
        self, synchronizer, make_payload, partner_data, api_key_data, journal
    ):
        """Test that a missing policy section fails before any write."""
        event = _event(
            make_payload,
            "APIKEY_APPROVED",
            {"partnerData": partner_data, "apiKeyData": api_key_data},
        )

        with pytest.raises(PayloadDeserializationError) as exc_info:
            synchronizer.handle_api_key_approved(event)

        assert exc_info.value.section == "policyData"
        assert journal == []

    def test_malformed_section_writes_nothing(
        self, synchronizer, make_payload, partner_data, api_key_data, policy_data, journal
    ):
        """Test that an unparsable date fails before any write."""
        api_key_data["apiKeyExpiresOn"] = "not-a-date"
        event = _event(
            make_payload,
            "APIKEY_APPROVED",
            {"partnerData": partner_data, "apiKeyData": api_key_data, "policyData": policy_data},
        )

        with pytest.raises(PayloadDeserializationError) as exc_info:
            synchronizer.handle_api_key_approved(event)

        assert exc_info.value.section == "apiKeyData"
        assert "apiKeyExpiresOn" in exc_info.value.errors
        assert journal == []

    def test_redelivery_keeps_existing_mapping(
        self, synchronizer, approval_payload, memory_mapping_repository, journal
    ):
        """Test that a redelivered approval updates records and keeps the mapping."""
        event = LifecycleEvent.from_dict(approval_payload)
        synchronizer.handle_api_key_approved(event, "alice")
        journal.clear()

        synchronizer.handle_api_key_approved(event, "bob")

        assert ("mapping", ("partner-1", "apikey-1")) not in journal
        mapping = memory_mapping_repository.find_by_partner_and_api_key("partner-1", "apikey-1")
        assert mapping.created_by == "alice"

    def test_redelivery_updates_records(
        self, synchronizer, approval_payload, memory_partner_repository, now
    ):
        """Test that records already present take the update path."""
        event = LifecycleEvent.from_dict(approval_payload)
        synchronizer.handle_api_key_approved(event, "alice")
        synchronizer.handle_api_key_approved(event, "bob")

        partner = memory_partner_repository.find_by_id("partner-1")
        assert partner.created_by == "alice"
        assert partner.updated_by == "bob"
        assert partner.updated_at == now

    def test_existing_mapping_is_not_relinked(
        self, synchronizer, approval_payload, memory_mapping_repository, now
    ):
        """Test that an approval never changes the policy of an existing mapping."""
        memory_mapping_repository.save(
            PartnerMapping.create("partner-1", "apikey-1", "policy-old", "admin", now)
        )

        synchronizer.handle_api_key_approved(LifecycleEvent.from_dict(approval_payload))

        mapping = memory_mapping_repository.find_by_partner_and_api_key("partner-1", "apikey-1")
        assert mapping.policy_id == "policy-old"


@pytest.mark.usefixtures("stored_records")
class TestRecordUpdates:
    """Tests for the single-record update handlers."""

    def test_api_key_updated_overwrites_fields(
        self, synchronizer, make_payload, api_key_data, memory_api_key_repository, sample_api_key, now
    ):
        """Test the update path for an API key."""
        api_key_data["apiKeyStatus"] = "INACTIVE"
        synchronizer.handle_api_key_updated(
            _event(make_payload, "APIKEY_UPDATED", {"apiKeyData": api_key_data}), "carol"
        )

        api_key = memory_api_key_repository.find_by_id("apikey-1")
        assert api_key.api_key_status == "INACTIVE"
        assert api_key.expires_on == datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert api_key.created_by == sample_api_key.created_by
        assert api_key.created_at == sample_api_key.created_at
        assert api_key.updated_by == "carol"
        assert api_key.updated_at == now

    def test_api_key_updated_inserts_unknown_key(
        self, synchronizer, make_payload, api_key_data, memory_api_key_repository, now
    ):
        """Test the insert path for an API key seen for the first time."""
        api_key_data["apiKeyId"] = "apikey-2"
        synchronizer.handle_api_key_updated(
            _event(make_payload, "APIKEY_UPDATED", {"apiKeyData": api_key_data})
        )

        api_key = memory_api_key_repository.find_by_id("apikey-2")
        assert api_key.created_by == "PARTNER_MANAGEMENT"
        assert api_key.created_at == now
        assert api_key.updated_by is None

    def test_partner_updated(self, synchronizer, make_payload, partner_data, memory_partner_repository):
        """Test the partner update path."""
        partner_data.update({"partnerName": "Acme Bank Ltd", "partnerStatus": "INACTIVE"})
        partner_data.pop("certificateData")
        synchronizer.handle_partner_updated(
            _event(make_payload, "PARTNER_UPDATED", {"partnerData": partner_data}, publisher=None)
        )

        partner = memory_partner_repository.find_by_id("partner-1")
        assert partner.partner_name == "Acme Bank Ltd"
        assert partner.partner_status == "INACTIVE"
        assert partner.certificate_data is None
        assert partner.updated_by == "IDA"

    def test_policy_updated(self, synchronizer, make_payload, policy_data, memory_policy_repository):
        """Test the policy update path."""
        policy_data.update({"policyName": "Renamed", "policy": {"authPolicies": []}})
        synchronizer.handle_policy_updated(
            _event(make_payload, "POLICY_UPDATED", {"policyData": policy_data}), "carol"
        )

        policy = memory_policy_repository.find_by_id("policy-1")
        assert policy.policy_name == "Renamed"
        assert policy.policy == {"authPolicies": []}
        assert policy.updated_by == "carol"

    def test_misp_license_updated(
        self, synchronizer, make_payload, misp_license_data, memory_misp_license_repository
    ):
        """Test the MISP license update path, including key rotation."""
        misp_license_data.update({"licenseKey": "rotated-key", "mispStatus": "SUSPENDED"})
        synchronizer.handle_misp_license_updated(
            _event(make_payload, "MISP_LICENSE_UPDATED", {"mispLicenseData": misp_license_data})
        )

        misp_license = memory_misp_license_repository.find_by_id("misp-1")
        assert misp_license.license_key == "rotated-key"
        assert misp_license.misp_status == "SUSPENDED"
        assert memory_misp_license_repository.find_by_license_key("misp-license-key-1") is None

    def test_missing_section(self, synchronizer, make_payload, journal):
        """Test that an update without its section raises."""
        with pytest.raises(PayloadDeserializationError):
            synchronizer.handle_policy_updated(_event(make_payload, "POLICY_UPDATED", {}))
        assert journal == []

    def test_overlong_policy_description(self, synchronizer, approval_payload, journal):
        """Test that a description wider than the stored column is rejected."""
        approval_payload["event"]["data"]["policyData"]["policyDescription"] = "d" * 257
        event = LifecycleEvent.from_dict(approval_payload)

        with pytest.raises(PayloadDeserializationError) as exc_info:
            synchronizer.handle_api_key_approved(event)

        assert exc_info.value.section == "policyData"
        assert "policyDescription" in exc_info.value.errors
        assert journal == []


class TestDispatch:
    """Tests for topic routing."""

    def test_handlers_cover_all_topics(self, synchronizer):
        """Test the topic table."""
        assert set(synchronizer.handlers()) == {
            "APIKEY_APPROVED",
            "APIKEY_UPDATED",
            "PARTNER_UPDATED",
            "POLICY_UPDATED",
            "MISP_LICENSE_UPDATED",
        }

    def test_router_routes_by_topic(
        self, synchronizer, make_payload, partner_data, memory_partner_repository
    ):
        """Test dispatching a partner update through a router wired with the handlers."""
        router = LifecycleEventRouter()
        for topic, handler in synchronizer.handlers().items():
            router.subscribe(topic, handler)

        router.dispatch(
            _event(make_payload, "PARTNER_UPDATED", {"partnerData": partner_data}), "dave"
        )

        assert memory_partner_repository.find_by_id("partner-1").created_by == "dave"

    def test_router_rejects_unknown_topic(self, synchronizer, make_payload):
        """Test that topics outside the handler table are rejected."""
        router = LifecycleEventRouter()
        for topic, handler in synchronizer.handlers().items():
            router.subscribe(topic, handler)

        with pytest.raises(UnknownEventTypeError):
            router.dispatch(_event(make_payload, "PARTNER_DELETED", {}))

    def test_system_actor_override(
        self,
        memory_partner_repository,
        memory_api_key_repository,
        memory_policy_repository,
        memory_misp_license_repository,
        memory_mapping_repository,
        make_payload,
        partner_data,
    ):
        """Test a configured fallback identity."""
        from partners.application.handlers.partner_event_handlers import (
            PartnerEventSynchronizer,
        )

        synchronizer = PartnerEventSynchronizer(
            partner_repository=memory_partner_repository,
            api_key_repository=memory_api_key_repository,
            policy_repository=memory_policy_repository,
            misp_license_repository=memory_misp_license_repository,
            partner_mapping_repository=memory_mapping_repository,
            system_actor="SYNC",
        )

        synchronizer.handle_partner_updated(
            _event(make_payload, "PARTNER_UPDATED", {"partnerData": partner_data}, publisher=None)
        )

        assert memory_partner_repository.find_by_id("partner-1").created_by == "SYNC"
