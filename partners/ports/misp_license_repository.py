"""
MispLicense repository port (interface).

This defines the contract for MISP license persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from partners.domain.misp_license import MispLicense


class MispLicenseRepository(ABC):
    """
    Abstract repository for MispLicense entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def save(self, misp_license: MispLicense) -> MispLicense:
        """
        Save a MISP license, inserting or updating by primary key.

        Args:
            misp_license: MispLicense entity to save

        Returns:
            Saved MispLicense entity
        """
        pass

    @abstractmethod
    def find_by_id(self, misp_id: str) -> Optional[MispLicense]:
        """
        Find a MISP license by ID.

        Args:
            misp_id: MispLicense ID

        Returns:
            MispLicense entity or None if not found
        """
        pass

    @abstractmethod
    def find_by_license_key(self, license_key: str) -> Optional[MispLicense]:
        """
        Find a MISP license by its license key.

        Args:
            license_key: License key string

        Returns:
            MispLicense entity or None if not found
        """
        pass
