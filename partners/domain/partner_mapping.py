"""
PartnerMapping domain entity.

The mapping asserts that a partner, using a given API key, is entitled
to a given policy. It holds the three record ids only; the linked
records are looked up independently.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PartnerMapping:
    """
    PartnerMapping domain entity, keyed by ``(partner_id, api_key_id)``.
    """

    partner_id: str
    api_key_id: str
    policy_id: str
    is_deleted: bool = False
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate mapping entity."""
        if not self.partner_id:
            raise ValueError("Partner ID is required")
        if not self.api_key_id:
            raise ValueError("API key ID is required")
        if not self.policy_id:
            raise ValueError("Policy ID is required")

    @classmethod
    def create(
        cls,
        partner_id: str,
        api_key_id: str,
        policy_id: str,
        created_by: str,
        created_at: datetime,
    ) -> "PartnerMapping":
        """
        Create a new PartnerMapping.

        Args:
            partner_id: Partner ID
            api_key_id: API key ID
            policy_id: Policy ID
            created_by: Who created the mapping
            created_at: Creation time

        Returns:
            PartnerMapping entity instance
        """
        return cls(
            partner_id=partner_id,
            api_key_id=api_key_id,
            policy_id=policy_id,
            created_by=created_by,
            created_at=created_at,
        )
