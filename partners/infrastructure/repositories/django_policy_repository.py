"""
Django implementation of PolicyRepository port.
"""
from typing import Optional

from partners.domain.policy import Policy
from partners.infrastructure.models import PolicyData as PolicyModel
from partners.ports.policy_repository import PolicyRepository


class DjangoPolicyRepository(PolicyRepository):
    """Django ORM implementation of PolicyRepository."""

    def _to_domain(self, model: PolicyModel) -> Policy:
        """Convert Django model to domain entity."""
        return Policy(
            policy_id=model.policy_id,
            policy_name=model.policy_name,
            policy_status=model.policy_status,
            commence_on=model.policy_commence_on,
            expires_on=model.policy_expires_on,
            policy_description=model.policy_description,
            policy=model.policy or {},
            is_deleted=model.is_deleted,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_by=model.updated_by,
            updated_at=model.updated_at,
        )

    def save(self, policy: Policy) -> Policy:
        """Insert or update a policy."""
        # pylint: disable=no-member
        model, _ = PolicyModel.objects.update_or_create(
            policy_id=policy.policy_id,
            defaults={
                "policy": policy.policy,
                "policy_name": policy.policy_name,
                "policy_description": policy.policy_description,
                "policy_status": policy.policy_status,
                "policy_commence_on": policy.commence_on,
                "policy_expires_on": policy.expires_on,
                "is_deleted": policy.is_deleted,
                "created_by": policy.created_by,
                "created_at": policy.created_at,
                "updated_by": policy.updated_by,
                "updated_at": policy.updated_at,
            },
        )
        return self._to_domain(model)

    def find_by_id(self, policy_id: str) -> Optional[Policy]:
        """Find a policy by ID."""
        try:
            # pylint: disable=no-member
            return self._to_domain(PolicyModel.objects.get(policy_id=policy_id))
        except PolicyModel.DoesNotExist:
            return None
