"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta, timezone

import pytest

from fakes import (
    InMemoryApiKeyRepository,
    InMemoryMispLicenseRepository,
    InMemoryPartnerMappingRepository,
    InMemoryPartnerRepository,
    InMemoryPolicyRepository,
)
from partners.application.handlers.partner_event_handlers import PartnerEventSynchronizer
from partners.application.handlers.resolve_policy_handler import ResolvePolicyHandler
from partners.domain.api_key import ApiKey
from partners.domain.misp_license import MispLicense
from partners.domain.partner import Partner
from partners.domain.partner_mapping import PartnerMapping
from partners.domain.policy import Policy
from partners.infrastructure.repositories.django_api_key_repository import (
    DjangoApiKeyRepository,
)
from partners.infrastructure.repositories.django_misp_license_repository import (
    DjangoMispLicenseRepository,
)
from partners.infrastructure.repositories.django_partner_mapping_repository import (
    DjangoPartnerMappingRepository,
)
from partners.infrastructure.repositories.django_partner_repository import (
    DjangoPartnerRepository,
)
from partners.infrastructure.repositories.django_policy_repository import (
    DjangoPolicyRepository,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
CREATED_AT = NOW - timedelta(days=30)


@pytest.fixture
def now():
    """Fixed current time used by the injected clocks."""
    return NOW


@pytest.fixture
def clock(now):
    """Clock returning the fixed current time."""
    return lambda: now


# In-memory repositories


@pytest.fixture
def journal():
    """Ordered list of (record kind, key) writes across fake repositories."""
    return []


@pytest.fixture
def memory_partner_repository(journal):
    return InMemoryPartnerRepository(journal)


@pytest.fixture
def memory_api_key_repository(journal):
    return InMemoryApiKeyRepository(journal)


@pytest.fixture
def memory_policy_repository(journal):
    return InMemoryPolicyRepository(journal)


@pytest.fixture
def memory_misp_license_repository(journal):
    return InMemoryMispLicenseRepository(journal)


@pytest.fixture
def memory_mapping_repository(journal):
    return InMemoryPartnerMappingRepository(journal)


@pytest.fixture
def synchronizer(
    memory_partner_repository,
    memory_api_key_repository,
    memory_policy_repository,
    memory_misp_license_repository,
    memory_mapping_repository,
    clock,
):
    """PartnerEventSynchronizer over in-memory repositories."""
    return PartnerEventSynchronizer(
        partner_repository=memory_partner_repository,
        api_key_repository=memory_api_key_repository,
        policy_repository=memory_policy_repository,
        misp_license_repository=memory_misp_license_repository,
        partner_mapping_repository=memory_mapping_repository,
        clock=clock,
    )


@pytest.fixture
def resolve_handler(
    memory_partner_repository,
    memory_api_key_repository,
    memory_policy_repository,
    memory_misp_license_repository,
    memory_mapping_repository,
    clock,
):
    """ResolvePolicyHandler over in-memory repositories."""
    return ResolvePolicyHandler(
        partner_mapping_repository=memory_mapping_repository,
        partner_repository=memory_partner_repository,
        policy_repository=memory_policy_repository,
        api_key_repository=memory_api_key_repository,
        misp_license_repository=memory_misp_license_repository,
        clock=clock,
    )


# Django repositories


@pytest.fixture
def partner_repository():
    """Fixture for PartnerRepository."""
    return DjangoPartnerRepository()


@pytest.fixture
def api_key_repository():
    """Fixture for ApiKeyRepository."""
    return DjangoApiKeyRepository()


@pytest.fixture
def policy_repository():
    """Fixture for PolicyRepository."""
    return DjangoPolicyRepository()


@pytest.fixture
def misp_license_repository():
    """Fixture for MispLicenseRepository."""
    return DjangoMispLicenseRepository()


@pytest.fixture
def mapping_repository():
    """Fixture for PartnerMappingRepository."""
    return DjangoPartnerMappingRepository()


# Sample records, all valid at NOW


@pytest.fixture
def sample_partner():
    """Fixture for an active Partner."""
    return Partner(
        partner_id="partner-1",
        partner_name="Acme Bank",
        partner_status="ACTIVE",
        certificate_data="-----BEGIN CERTIFICATE-----MIIB-----END CERTIFICATE-----",
        created_by="admin",
        created_at=CREATED_AT,
    )


@pytest.fixture
def sample_api_key():
    """Fixture for an active ApiKey valid for a year around NOW."""
    return ApiKey(
        api_key_id="apikey-1",
        api_key_status="ACTIVE",
        commence_on=NOW - timedelta(days=180),
        expires_on=NOW + timedelta(days=180),
        created_by="admin",
        created_at=CREATED_AT,
    )


@pytest.fixture
def sample_policy():
    """Fixture for an active Policy valid for a year around NOW."""
    return Policy(
        policy_id="policy-1",
        policy_name="Auth Policy",
        policy_status="ACTIVE",
        commence_on=NOW - timedelta(days=180),
        expires_on=NOW + timedelta(days=180),
        policy_description="Demographic and OTP authentication",
        policy={"authPolicies": [{"authType": "otp", "mandatory": True}]},
        created_by="admin",
        created_at=CREATED_AT,
    )


@pytest.fixture
def sample_misp_license():
    """Fixture for an active MispLicense valid for a year around NOW."""
    return MispLicense(
        misp_id="misp-1",
        license_key="misp-license-key-1",
        misp_status="ACTIVE",
        commence_on=NOW - timedelta(days=180),
        expires_on=NOW + timedelta(days=180),
        created_by="admin",
        created_at=CREATED_AT,
    )


@pytest.fixture
def sample_mapping(sample_partner, sample_api_key, sample_policy):
    """Fixture for a PartnerMapping linking the sample records."""
    return PartnerMapping.create(
        partner_id=sample_partner.partner_id,
        api_key_id=sample_api_key.api_key_id,
        policy_id=sample_policy.policy_id,
        created_by="admin",
        created_at=CREATED_AT,
    )


@pytest.fixture
def stored_records(
    memory_partner_repository,
    memory_api_key_repository,
    memory_policy_repository,
    memory_misp_license_repository,
    memory_mapping_repository,
    sample_partner,
    sample_api_key,
    sample_policy,
    sample_misp_license,
    sample_mapping,
    journal,
):
    """Store the sample records in the in-memory repositories."""
    memory_partner_repository.save(sample_partner)
    memory_api_key_repository.save(sample_api_key)
    memory_policy_repository.save(sample_policy)
    memory_misp_license_repository.save(sample_misp_license)
    memory_mapping_repository.save(sample_mapping)
    journal.clear()


@pytest.fixture
def db_records(
    db,
    partner_repository,
    api_key_repository,
    policy_repository,
    misp_license_repository,
    mapping_repository,
    sample_partner,
    sample_api_key,
    sample_policy,
    sample_misp_license,
    sample_mapping,
):
    """Store the sample records in the database."""
    partner_repository.save(sample_partner)
    api_key_repository.save(sample_api_key)
    policy_repository.save(sample_policy)
    misp_license_repository.save(sample_misp_license)
    mapping_repository.save(sample_mapping)


def _lifecycle_payload(topic, data, publisher="PARTNER_MANAGEMENT", event_id="evt-1"):
    """Build a published lifecycle event envelope."""
    return {
        "publisher": publisher,
        "topic": topic,
        "publishedOn": "2024-06-01T12:00:00Z",
        "event": {
            "id": event_id,
            "transactionId": "txn-1",
            "timestamp": "2024-06-01T12:00:00Z",
            "data": data,
        },
    }


@pytest.fixture
def make_payload():
    """Factory for lifecycle event envelopes."""
    return _lifecycle_payload


@pytest.fixture
def partner_data():
    return {
        "partnerId": "partner-1",
        "partnerName": "Acme Bank",
        "certificateData": "CERT",
        "partnerStatus": "ACTIVE",
        "isDeleted": False,
    }


@pytest.fixture
def api_key_data():
    return {
        "apiKeyId": "apikey-1",
        "apiKeyCommenceOn": "2024-01-01T00:00:00Z",
        "apiKeyExpiresOn": "2025-01-01T00:00:00Z",
        "apiKeyStatus": "ACTIVE",
        "isDeleted": False,
    }


@pytest.fixture
def policy_data():
    return {
        "policyId": "policy-1",
        "policyName": "Auth Policy",
        "policyDescription": "Demographic and OTP authentication",
        "policy": {"authPolicies": [{"authType": "otp", "mandatory": True}]},
        "policyCommenceOn": "2024-01-01T00:00:00Z",
        "policyExpiresOn": "2025-01-01T00:00:00Z",
        "policyStatus": "ACTIVE",
        "isDeleted": False,
    }


@pytest.fixture
def misp_license_data():
    return {
        "mispId": "misp-1",
        "licenseKey": "misp-license-key-1",
        "mispCommenceOn": "2024-01-01T00:00:00Z",
        "mispExpiresOn": "2025-01-01T00:00:00Z",
        "mispStatus": "ACTIVE",
        "isDeleted": False,
    }


@pytest.fixture
def approval_payload(partner_data, api_key_data, policy_data):
    """APIKEY_APPROVED envelope carrying all three sections."""
    return _lifecycle_payload(
        "APIKEY_APPROVED",
        {"partnerData": partner_data, "apiKeyData": api_key_data, "policyData": policy_data},
    )


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
