"""
Serializers for Partner API endpoints.
"""

from rest_framework import serializers


class ResolvePolicyRequestSerializer(serializers.Serializer):
    """Query parameters for policy resolution."""

    api_key = serializers.CharField(required=True)
    misp_license_key = serializers.CharField(required=True)
    include_certificate = serializers.BooleanField(required=False, default=False)


class PartnerPolicyResponseSerializer(serializers.Serializer):
    """Serializer for PartnerPolicyResponseDTO."""

    policy_id = serializers.CharField()
    policy_name = serializers.CharField()
    policy = serializers.DictField()
    policy_description = serializers.CharField(allow_null=True)
    policy_status = serializers.BooleanField()
    partner_id = serializers.CharField()
    partner_name = serializers.CharField()
    certificate_data = serializers.CharField(allow_null=True)
    policy_expires_on = serializers.DateTimeField()
    api_key_expires_on = serializers.DateTimeField()
    misp_expires_on = serializers.DateTimeField()
