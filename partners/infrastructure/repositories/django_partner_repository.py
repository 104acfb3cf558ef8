"""
Django implementation of PartnerRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import Optional

from partners.domain.partner import Partner
from partners.infrastructure.models import PartnerData as PartnerModel
from partners.ports.partner_repository import PartnerRepository


class DjangoPartnerRepository(PartnerRepository):
    """
    Django ORM implementation of PartnerRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: PartnerModel) -> Partner:
        """
        Convert Django model to domain entity.

        Args:
            model: Django PartnerData model

        Returns:
            Partner domain entity
        """
        return Partner(
            partner_id=model.partner_id,
            partner_name=model.partner_name,
            partner_status=model.partner_status,
            certificate_data=model.certificate_data,
            is_deleted=model.is_deleted,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_by=model.updated_by,
            updated_at=model.updated_at,
        )

    def save(self, partner: Partner) -> Partner:
        """
        Save a partner entity.

        Args:
            partner: Partner entity to save

        Returns:
            Saved partner entity
        """
        # pylint: disable=no-member
        model, _ = PartnerModel.objects.update_or_create(
            partner_id=partner.partner_id,
            defaults={
                "partner_name": partner.partner_name,
                "partner_status": partner.partner_status,
                "certificate_data": partner.certificate_data,
                "is_deleted": partner.is_deleted,
                "created_by": partner.created_by,
                "created_at": partner.created_at,
                "updated_by": partner.updated_by,
                "updated_at": partner.updated_at,
            },
        )
        return self._to_domain(model)

    def find_by_id(self, partner_id: str) -> Optional[Partner]:
        """
        Find a partner by ID.

        Args:
            partner_id: Partner ID

        Returns:
            Partner entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = PartnerModel.objects.get(partner_id=partner_id)
            return self._to_domain(model)
        except PartnerModel.DoesNotExist:
            return None
