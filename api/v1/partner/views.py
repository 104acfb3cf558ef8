"""
Partner API views.

Used by the authentication service to check that a partner may call it
and to fetch the policy that applies.
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.partner.serializers import (
    PartnerPolicyResponseSerializer,
    ResolvePolicyRequestSerializer,
)
from partners.application.handlers.resolve_policy_handler import ResolvePolicyHandler
from partners.application.queries.resolve_policy import ResolvePolicyQuery
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

# Initialize repositories (in production, use DI container)
_partner_mapping_repo = DjangoPartnerMappingRepository()
_partner_repo = DjangoPartnerRepository()
_policy_repo = DjangoPolicyRepository()
_api_key_repo = DjangoApiKeyRepository()
_misp_license_repo = DjangoMispLicenseRepository()


class ResolvePolicyView(APIView):
    """View for resolving the effective policy of a partner."""

    @extend_schema(
        operation_id="resolve_partner_policy",
        summary="Resolve Partner Policy",
        description=(
            "Validate the partner, its API key and the MISP license key, and "
            "return the policy mapped to the partner and API key."
        ),
        tags=["Partner API"],
        parameters=[
            OpenApiParameter(
                name="api_key",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="API key (policy key) issued to the partner",
            ),
            OpenApiParameter(
                name="misp_license_key",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="License key of the MISP relaying the request",
            ),
            OpenApiParameter(
                name="include_certificate",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Include the partner certificate in the response",
            ),
        ],
        responses={
            200: PartnerPolicyResponseSerializer,
            400: {"description": "Missing or invalid query parameters"},
            403: {"description": "Partner is not entitled"},
        },
    )
    def get(self, request: Request, partner_id: str) -> Response:
        """Resolve the policy for a partner."""
        serializer = ResolvePolicyRequestSerializer(data=request.query_params)
        if not serializer.is_valid():
            return Response(
                {
                    "error": {
                        "code": "VALIDATION_ERROR",
                        "message": "Invalid query parameters",
                        "details": serializer.errors,
                    }
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        handler = ResolvePolicyHandler(
            partner_mapping_repository=_partner_mapping_repo,
            partner_repository=_partner_repo,
            policy_repository=_policy_repo,
            api_key_repository=_api_key_repo,
            misp_license_repository=_misp_license_repo,
        )
        query = ResolvePolicyQuery(
            partner_id=partner_id,
            api_key=serializer.validated_data["api_key"],
            misp_license_key=serializer.validated_data["misp_license_key"],
            include_certificate=serializer.validated_data["include_certificate"],
        )

        # EntitlementError is rendered by the API exception handler
        result = handler.handle(query)
        return Response(PartnerPolicyResponseSerializer(result).data, status=status.HTTP_200_OK)
