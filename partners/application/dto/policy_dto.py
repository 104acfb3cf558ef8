"""
Partner policy DTOs for API responses.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class PartnerPolicyResponseDTO:
    """DTO for a resolved partner policy."""

    policy_id: str
    policy_name: str
    policy_description: Optional[str]
    policy_status: bool  # policy_status == "ACTIVE"
    partner_id: str
    partner_name: str
    policy_expires_on: datetime
    api_key_expires_on: datetime
    misp_expires_on: datetime
    policy: Dict[str, Any] = field(default_factory=dict)
    certificate_data: Optional[str] = None  # Only when requested
