"""
ResolvePolicyHandler.

Validates a partner's entitlement and returns the effective policy.
"""

import logging
from datetime import datetime
from typing import Callable

from django.utils import timezone

from core.domain.exceptions import EntitlementError
from core.instrumentation import Status, StatusCode, get_tracer
from core.metrics import entitlement_denials_total, policy_resolutions_total
from partners.application.dto.policy_dto import PartnerPolicyResponseDTO
from partners.application.queries.resolve_policy import ResolvePolicyQuery
from partners.domain.services import EntitlementValidator
from partners.ports.api_key_repository import ApiKeyRepository
from partners.ports.misp_license_repository import MispLicenseRepository
from partners.ports.partner_mapping_repository import PartnerMappingRepository
from partners.ports.partner_repository import PartnerRepository
from partners.ports.policy_repository import PolicyRepository

logger = logging.getLogger(__name__)

tracer = get_tracer(__name__)


class ResolvePolicyHandler:
    """Handler for ResolvePolicyQuery."""

    def __init__(
        self,
        partner_mapping_repository: PartnerMappingRepository,
        partner_repository: PartnerRepository,
        policy_repository: PolicyRepository,
        api_key_repository: ApiKeyRepository,
        misp_license_repository: MispLicenseRepository,
        clock: Callable[[], datetime] = timezone.now,
    ):
        """Initialize handler with repositories and a UTC clock."""
        self.partner_mapping_repository = partner_mapping_repository
        self.partner_repository = partner_repository
        self.policy_repository = policy_repository
        self.api_key_repository = api_key_repository
        self.misp_license_repository = misp_license_repository
        self.clock = clock

    def handle(self, query: ResolvePolicyQuery) -> PartnerPolicyResponseDTO:
        """
        Handle resolve policy query.

        Args:
            query: ResolvePolicyQuery

        Returns:
            PartnerPolicyResponseDTO with policy and certificate metadata

        Raises:
            EntitlementError: The first entitlement rule that failed
        """
        with tracer.start_as_current_span("resolve_partner_policy") as span:
            span.set_attribute("partner.id", query.partner_id)
            try:
                response = self._resolve(query)
            except EntitlementError as e:
                policy_resolutions_total.labels(outcome="denied").inc()
                entitlement_denials_total.labels(error_code=e.code).inc()
                span.set_attribute("error.code", e.code)
                span.set_status(Status(StatusCode.ERROR, e.message))
                logger.warning(
                    "Policy resolution denied for partner %s: %s",
                    query.partner_id,
                    e.code,
                )
                raise

            policy_resolutions_total.labels(outcome="granted").inc()
            span.set_attribute("policy.id", response.policy_id)
            span.set_status(Status(StatusCode.OK))
            logger.info(
                "Policy %s resolved for partner %s",
                response.policy_id,
                query.partner_id,
            )
            return response

    def _resolve(self, query: ResolvePolicyQuery) -> PartnerPolicyResponseDTO:
        """Look up the linked records, validate them and build the response."""
        mapping = self.partner_mapping_repository.find_by_partner_and_api_key(
            query.partner_id, query.api_key
        )

        partner = policy = api_key = None
        if mapping is not None:
            partner = self.partner_repository.find_by_id(mapping.partner_id)
            policy = self.policy_repository.find_by_id(mapping.policy_id)
            api_key = self.api_key_repository.find_by_id(mapping.api_key_id)

        misp_license = self.misp_license_repository.find_by_license_key(
            query.misp_license_key
        )

        EntitlementValidator.validate(
            mapping=mapping,
            partner=partner,
            policy=policy,
            api_key=api_key,
            misp_license=misp_license,
            current_time=self.clock(),
        )

        return PartnerPolicyResponseDTO(
            policy_id=policy.policy_id,
            policy_name=policy.policy_name,
            policy=policy.policy,
            policy_description=policy.policy_description,
            policy_status=policy.is_active,
            partner_id=partner.partner_id,
            partner_name=partner.partner_name,
            certificate_data=partner.certificate_data if query.include_certificate else None,
            policy_expires_on=policy.expires_on,
            api_key_expires_on=api_key.expires_on,
            misp_expires_on=misp_license.expires_on,
        )
