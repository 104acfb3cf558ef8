"""
Serializers for Events API endpoints.
"""

from rest_framework import serializers


class LifecycleEventEnvelopeSerializer(serializers.Serializer):
    """Published lifecycle event envelope (documentation only)."""

    publisher = serializers.CharField(required=False, allow_null=True)
    topic = serializers.CharField()
    publishedOn = serializers.DateTimeField(required=False, allow_null=True)
    event = serializers.DictField()


class LifecycleEventAcceptedSerializer(serializers.Serializer):
    """Response after a lifecycle event was applied."""

    topic = serializers.CharField()
    status = serializers.CharField()
