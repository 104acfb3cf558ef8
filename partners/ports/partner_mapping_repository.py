"""
PartnerMapping repository port (interface).

This defines the contract for partner mapping persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from partners.domain.partner_mapping import PartnerMapping


class PartnerMappingRepository(ABC):
    """
    Abstract repository for PartnerMapping entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def save(self, mapping: PartnerMapping) -> PartnerMapping:
        """
        Save a partner mapping.

        Args:
            mapping: PartnerMapping entity to save

        Returns:
            Saved PartnerMapping entity
        """
        pass

    @abstractmethod
    def find_by_partner_and_api_key(
        self, partner_id: str, api_key_id: str
    ) -> Optional[PartnerMapping]:
        """
        Find the mapping for a partner and API key.

        Args:
            partner_id: Partner ID
            api_key_id: API key ID

        Returns:
            PartnerMapping entity or None if not found
        """
        pass
