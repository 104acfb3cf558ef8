"""
ApiKey repository port (interface).

This defines the contract for API key persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from partners.domain.api_key import ApiKey


class ApiKeyRepository(ABC):
    """
    Abstract repository for ApiKey entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def save(self, api_key: ApiKey) -> ApiKey:
        """
        Save a API key, inserting or updating by primary key.

        Args:
            api_key: ApiKey entity to save

        Returns:
            Saved ApiKey entity
        """
        pass

    @abstractmethod
    def find_by_id(self, api_key_id: str) -> Optional[ApiKey]:
        """
        Find a API key by ID.

        Args:
            api_key_id: ApiKey ID

        Returns:
            ApiKey entity or None if not found
        """
        pass
