"""
Django implementation of ApiKeyRepository port.
"""
from typing import Optional

from partners.domain.api_key import ApiKey
from partners.infrastructure.models import ApiKeyData as ApiKeyModel
from partners.ports.api_key_repository import ApiKeyRepository


class DjangoApiKeyRepository(ApiKeyRepository):
    """Django ORM implementation of ApiKeyRepository."""

    def _to_domain(self, model: ApiKeyModel) -> ApiKey:
        """Convert Django model to domain entity."""
        return ApiKey(
            api_key_id=model.api_key_id,
            api_key_status=model.api_key_status,
            commence_on=model.api_key_commence_on,
            expires_on=model.api_key_expires_on,
            is_deleted=model.is_deleted,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_by=model.updated_by,
            updated_at=model.updated_at,
        )

    def save(self, api_key: ApiKey) -> ApiKey:
        """Insert or update an API key."""
        # pylint: disable=no-member
        model, _ = ApiKeyModel.objects.update_or_create(
            api_key_id=api_key.api_key_id,
            defaults={
                "api_key_status": api_key.api_key_status,
                "api_key_commence_on": api_key.commence_on,
                "api_key_expires_on": api_key.expires_on,
                "is_deleted": api_key.is_deleted,
                "created_by": api_key.created_by,
                "created_at": api_key.created_at,
                "updated_by": api_key.updated_by,
                "updated_at": api_key.updated_at,
            },
        )
        return self._to_domain(model)

    def find_by_id(self, api_key_id: str) -> Optional[ApiKey]:
        """Find an API key by ID."""
        try:
            # pylint: disable=no-member
            return self._to_domain(ApiKeyModel.objects.get(api_key_id=api_key_id))
        except ApiKeyModel.DoesNotExist:
            return None
