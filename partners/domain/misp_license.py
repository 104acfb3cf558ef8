"""
MispLicense domain entity.

A MISP (managed service provider) license key gates partner access
independently of the partner's own API key.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from core.domain.value_objects import RecordStatus, ValidityWindow
from partners.domain.record import AuditedRecord


@dataclass(frozen=True)
class MispLicense(AuditedRecord):
    """
    MISP license domain entity, looked up by ``license_key``.
    """

    misp_id: str
    license_key: str
    misp_status: str
    commence_on: datetime
    expires_on: datetime
    is_deleted: bool = False
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    MUTABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        "license_key",
        "commence_on",
        "expires_on",
        "misp_status",
    )

    def __post_init__(self):
        """Validate MISP license entity."""
        if not self.misp_id:
            raise ValueError("MISP ID is required")
        if not self.license_key or len(self.license_key.strip()) == 0:
            raise ValueError("License key cannot be empty")

    @property
    def record_id(self) -> str:
        """Return the MISP ID."""
        return self.misp_id

    @property
    def is_active(self) -> bool:
        """Check if the license status permits use."""
        return RecordStatus.is_active(self.misp_status)

    @property
    def validity_window(self) -> ValidityWindow:
        """Return the ``[commence_on, expires_on)`` window."""
        return ValidityWindow(self.commence_on, self.expires_on)
