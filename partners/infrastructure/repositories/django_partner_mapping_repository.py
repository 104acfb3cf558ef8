"""
Django implementation of PartnerMappingRepository port.
"""
from typing import Optional

from partners.domain.partner_mapping import PartnerMapping
from partners.infrastructure.models import PartnerMapping as PartnerMappingModel
from partners.ports.partner_mapping_repository import PartnerMappingRepository


class DjangoPartnerMappingRepository(PartnerMappingRepository):
    """Django ORM implementation of PartnerMappingRepository."""

    def _to_domain(self, model: PartnerMappingModel) -> PartnerMapping:
        """Convert Django model to domain entity."""
        return PartnerMapping(
            partner_id=model.partner_id,
            api_key_id=model.api_key_id,
            policy_id=model.policy_id,
            is_deleted=model.is_deleted,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_by=model.updated_by,
            updated_at=model.updated_at,
        )

    def save(self, mapping: PartnerMapping) -> PartnerMapping:
        """
        Insert or update the mapping keyed by (partner_id, api_key_id).

        The linked partner, API key and policy rows must already exist.
        """
        # pylint: disable=no-member
        model, _ = PartnerMappingModel.objects.update_or_create(
            partner_id=mapping.partner_id,
            api_key_id=mapping.api_key_id,
            defaults={
                "policy_id": mapping.policy_id,
                "is_deleted": mapping.is_deleted,
                "created_by": mapping.created_by,
                "created_at": mapping.created_at,
                "updated_by": mapping.updated_by,
                "updated_at": mapping.updated_at,
            },
        )
        return self._to_domain(model)

    def find_by_partner_and_api_key(
        self, partner_id: str, api_key_id: str
    ) -> Optional[PartnerMapping]:
        """Find the mapping for a partner and API key."""
        try:
            # pylint: disable=no-member
            model = PartnerMappingModel.objects.get(
                partner_id=partner_id, api_key_id=api_key_id
            )
            return self._to_domain(model)
        except PartnerMappingModel.DoesNotExist:
            return None
