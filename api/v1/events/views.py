"""
Events API views.

HTTP callback for partner lifecycle notifications. Applies the event
synchronously, in the same way the RabbitMQ consumer does.
"""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.events.serializers import (
    LifecycleEventAcceptedSerializer,
    LifecycleEventEnvelopeSerializer,
)
from core.tasks import process_lifecycle_payload

logger = logging.getLogger(__name__)


class LifecycleEventCallbackView(APIView):
    """View receiving published partner lifecycle events."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="receive_lifecycle_event",
        summary="Receive Lifecycle Event",
        description=(
            "Apply a partner lifecycle event (APIKEY_APPROVED, APIKEY_UPDATED, "
            "PARTNER_UPDATED, POLICY_UPDATED, MISP_LICENSE_UPDATED) to the local "
            "records. Requires an authenticated caller, who is recorded as the actor."
        ),
        tags=["Events API"],
        request=LifecycleEventEnvelopeSerializer,
        responses={
            200: LifecycleEventAcceptedSerializer,
            400: {"description": "Malformed payload or unknown topic"},
            401: {"description": "Authentication credentials were not provided"},
        },
    )
    def post(self, request: Request) -> Response:
        """Apply a lifecycle event."""
        actor = request.user.get_username()

        topic = process_lifecycle_payload(request.data, actor=actor)
        logger.info("Lifecycle event applied via callback", extra={"topic": topic})

        return Response({"topic": topic, "status": "processed"}, status=status.HTTP_200_OK)
