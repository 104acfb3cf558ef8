"""
Partner domain entity.

A partner is an external relying party registered to consume the
authentication service.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from core.domain.value_objects import RecordStatus
from partners.domain.record import AuditedRecord


@dataclass(frozen=True)
class Partner(AuditedRecord):
    """
    Partner domain entity.

    ``certificate_data`` is an opaque certificate blob echoed to callers
    that ask for it.
    """

    partner_id: str
    partner_name: str
    partner_status: str
    certificate_data: Optional[str] = None
    is_deleted: bool = False
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    MUTABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        "partner_name",
        "certificate_data",
        "partner_status",
    )

    def __post_init__(self):
        """Validate partner entity."""
        if not self.partner_id:
            raise ValueError("Partner ID is required")

    @property
    def record_id(self) -> str:
        """Return the partner ID."""
        return self.partner_id

    @property
    def is_active(self) -> bool:
        """Check if the partner status permits use."""
        return RecordStatus.is_active(self.partner_status)
