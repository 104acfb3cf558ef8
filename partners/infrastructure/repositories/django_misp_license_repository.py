"""
Django implementation of MispLicenseRepository port.
"""
from typing import Optional

from partners.domain.misp_license import MispLicense
from partners.infrastructure.models import MispLicenseData as MispLicenseModel
from partners.ports.misp_license_repository import MispLicenseRepository


class DjangoMispLicenseRepository(MispLicenseRepository):
    """Django ORM implementation of MispLicenseRepository."""

    def _to_domain(self, model: MispLicenseModel) -> MispLicense:
        """Convert Django model to domain entity."""
        return MispLicense(
            misp_id=model.misp_id,
            license_key=model.license_key,
            misp_status=model.misp_status,
            commence_on=model.misp_commence_on,
            expires_on=model.misp_expires_on,
            is_deleted=model.is_deleted,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_by=model.updated_by,
            updated_at=model.updated_at,
        )

    def save(self, misp_license: MispLicense) -> MispLicense:
        """Insert or update a MISP license."""
        # pylint: disable=no-member
        model, _ = MispLicenseModel.objects.update_or_create(
            misp_id=misp_license.misp_id,
            defaults={
                "license_key": misp_license.license_key,
                "misp_status": misp_license.misp_status,
                "misp_commence_on": misp_license.commence_on,
                "misp_expires_on": misp_license.expires_on,
                "is_deleted": misp_license.is_deleted,
                "created_by": misp_license.created_by,
                "created_at": misp_license.created_at,
                "updated_by": misp_license.updated_by,
                "updated_at": misp_license.updated_at,
            },
        )
        return self._to_domain(model)

    def find_by_id(self, misp_id: str) -> Optional[MispLicense]:
        """Find a MISP license by ID."""
        try:
            # pylint: disable=no-member
            return self._to_domain(MispLicenseModel.objects.get(misp_id=misp_id))
        except MispLicenseModel.DoesNotExist:
            return None

    def find_by_license_key(self, license_key: str) -> Optional[MispLicense]:
        """
        Find a MISP license by license key.

        The key is treated as unique; the oldest row wins if the
        store holds duplicates.
        """
        # pylint: disable=no-member
        model = (
            MispLicenseModel.objects.filter(license_key=license_key)
            .order_by("created_at")
            .first()
        )
        if model is None:
            return None
        return self._to_domain(model)
