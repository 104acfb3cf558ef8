"""
Policy repository port (interface).

This defines the contract for policy persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from partners.domain.policy import Policy


class PolicyRepository(ABC):
    """
    Abstract repository for Policy entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def save(self, policy: Policy) -> Policy:
        """
        Save a policy, inserting or updating by primary key.

        Args:
            policy: Policy entity to save

        Returns:
            Saved Policy entity
        """
        pass

    @abstractmethod
    def find_by_id(self, policy_id: str) -> Optional[Policy]:
        """
        Find a policy by ID.

        Args:
            policy_id: Policy ID

        Returns:
            Policy entity or None if not found
        """
        pass
