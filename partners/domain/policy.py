"""
Policy domain entity.

A policy is a named document describing which authentication
operations and attributes a partner may use.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Tuple

from core.domain.value_objects import RecordStatus, ValidityWindow
from partners.domain.record import AuditedRecord


@dataclass(frozen=True)
class Policy(AuditedRecord):
    """
    Policy domain entity.

    ``policy`` is kept as the structured document received from the
    policy lifecycle events; its contents are not interpreted here.
    """

    policy_id: str
    policy_name: str
    policy_status: str
    commence_on: datetime
    expires_on: datetime
    policy_description: Optional[str] = None
    policy: Dict[str, Any] = field(default_factory=dict)
    is_deleted: bool = False
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    MUTABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        "policy",
        "policy_name",
        "policy_status",
        "policy_description",
        "commence_on",
        "expires_on",
    )

    def __post_init__(self):
        """Validate policy entity."""
        if not self.policy_id:
            raise ValueError("Policy ID is required")

    @property
    def record_id(self) -> str:
        """Return the policy ID."""
        return self.policy_id

    @property
    def is_active(self) -> bool:
        """Check if the policy status permits use."""
        return RecordStatus.is_active(self.policy_status)

    @property
    def validity_window(self) -> ValidityWindow:
        """Return the ``[commence_on, expires_on)`` window."""
        return ValidityWindow(self.commence_on, self.expires_on)
