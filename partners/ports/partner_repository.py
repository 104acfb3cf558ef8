"""
Partner repository port (interface).

This defines the contract for partner persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from partners.domain.partner import Partner


class PartnerRepository(ABC):
    """
    Abstract repository for Partner entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def save(self, partner: Partner) -> Partner:
        """
        Save a partner, inserting or updating by primary key.

        Args:
            partner: Partner entity to save

        Returns:
            Saved Partner entity
        """
        pass

    @abstractmethod
    def find_by_id(self, partner_id: str) -> Optional[Partner]:
        """
        Find a partner by ID.

        Args:
            partner_id: Partner ID

        Returns:
            Partner entity or None if not found
        """
        pass
