"""
ApiKey domain entity.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from core.domain.value_objects import RecordStatus, ValidityWindow
from partners.domain.record import AuditedRecord


@dataclass(frozen=True)
class ApiKey(AuditedRecord):
    """
    Partner API key with a validity window.
    """

    api_key_id: str
    api_key_status: str
    commence_on: datetime
    expires_on: datetime
    is_deleted: bool = False
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    MUTABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        "commence_on",
        "expires_on",
        "api_key_status",
    )

    def __post_init__(self):
        """Validate API key entity."""
        if not self.api_key_id:
            raise ValueError("API key ID is required")

    @property
    def record_id(self) -> str:
        """Return the API key ID."""
        return self.api_key_id

    @property
    def is_active(self) -> bool:
        """Check if the API key status permits use."""
        return RecordStatus.is_active(self.api_key_status)

    @property
    def validity_window(self) -> ValidityWindow:
        """Return the ``[commence_on, expires_on)`` window."""
        return ValidityWindow(self.commence_on, self.expires_on)
