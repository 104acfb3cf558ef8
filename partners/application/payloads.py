"""
Lifecycle event payload readers.

Converts the camelCase sub-documents of a lifecycle event into
domain records, validating their shape with DRF serializers.
"""
import logging
from typing import Any, Callable, Dict, Type, TypeVar

from rest_framework import serializers

from core.domain.events import LifecycleEvent
from core.domain.exceptions import PayloadDeserializationError
from partners.domain.api_key import ApiKey
from partners.domain.events import API_KEY_DATA, MISP_LICENSE_DATA, PARTNER_DATA, POLICY_DATA
from partners.domain.misp_license import MispLicense
from partners.domain.partner import Partner
from partners.domain.policy import Policy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PartnerDataSerializer(serializers.Serializer):
    """Shape of the ``partnerData`` section."""

    partnerId = serializers.CharField(source="partner_id", max_length=36)
    partnerName = serializers.CharField(source="partner_name", max_length=128)
    certificateData = serializers.CharField(
        source="certificate_data", required=False, allow_null=True, allow_blank=True
    )
    partnerStatus = serializers.CharField(source="partner_status", max_length=36)
    isDeleted = serializers.BooleanField(source="is_deleted", default=False)


class ApiKeyDataSerializer(serializers.Serializer):
    """Shape of the ``apiKeyData`` section."""

    apiKeyId = serializers.CharField(source="api_key_id", max_length=36)
    apiKeyCommenceOn = serializers.DateTimeField(source="commence_on")
    apiKeyExpiresOn = serializers.DateTimeField(source="expires_on")
    apiKeyStatus = serializers.CharField(source="api_key_status", max_length=36)
    isDeleted = serializers.BooleanField(source="is_deleted", default=False)


class PolicyDataSerializer(serializers.Serializer):
    """Shape of the ``policyData`` section."""

    policyId = serializers.CharField(source="policy_id", max_length=36)
    policyName = serializers.CharField(source="policy_name", max_length=128)
    policyDescription = serializers.CharField(
        source="policy_description",
        max_length=256,
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    policy = serializers.DictField(default=dict)
    policyCommenceOn = serializers.DateTimeField(source="commence_on")
    policyExpiresOn = serializers.DateTimeField(source="expires_on")
    policyStatus = serializers.CharField(source="policy_status", max_length=36)
    isDeleted = serializers.BooleanField(source="is_deleted", default=False)


class MispLicenseDataSerializer(serializers.Serializer):
    """Shape of the ``mispLicenseData`` section."""

    mispId = serializers.CharField(source="misp_id", max_length=36)
    licenseKey = serializers.CharField(source="license_key", max_length=128)
    mispCommenceOn = serializers.DateTimeField(source="commence_on")
    mispExpiresOn = serializers.DateTimeField(source="expires_on")
    mispStatus = serializers.CharField(source="misp_status", max_length=36)
    isDeleted = serializers.BooleanField(source="is_deleted", default=False)


def _read_section(
    event: LifecycleEvent,
    section: str,
    serializer_class: Type[serializers.Serializer],
    build: Callable[[Dict[str, Any]], T],
) -> T:
    """
    Validate one event section and build a record from it.

    Raises:
        PayloadDeserializationError: If the section is missing or malformed
    """
    document = event.section(section)
    if not isinstance(document, dict):
        raise PayloadDeserializationError(
            f"Event {event.event_id} has no {section} section", section=section
        )

    serializer = serializer_class(data=document)
    if not serializer.is_valid():
        logger.warning(
            "Malformed %s section in %s event %s",
            section,
            event.topic,
            event.event_id,
        )
        raise PayloadDeserializationError(
            f"Invalid {section} section", section=section, errors=dict(serializer.errors)
        )

    try:
        return build(dict(serializer.validated_data))
    except ValueError as e:
        raise PayloadDeserializationError(str(e), section=section) from e


def read_partner(event: LifecycleEvent) -> Partner:
    """Read the ``partnerData`` section as a Partner."""
    return _read_section(event, PARTNER_DATA, PartnerDataSerializer, lambda data: Partner(**data))


def read_api_key(event: LifecycleEvent) -> ApiKey:
    """Read the ``apiKeyData`` section as an ApiKey."""
    return _read_section(event, API_KEY_DATA, ApiKeyDataSerializer, lambda data: ApiKey(**data))


def read_policy(event: LifecycleEvent) -> Policy:
    """Read the ``policyData`` section as a Policy."""
    return _read_section(event, POLICY_DATA, PolicyDataSerializer, lambda data: Policy(**data))


def read_misp_license(event: LifecycleEvent) -> MispLicense:
    """Read the ``mispLicenseData`` section as a MispLicense."""
    return _read_section(
        event, MISP_LICENSE_DATA, MispLicenseDataSerializer, lambda data: MispLicense(**data)
    )
