"""
Partner lifecycle event types.

Topics published by partner management and the data sections
they carry.
"""

from enum import Enum


class PartnerEventType(Enum):
    """Lifecycle event topics handled by the partners module."""

    APIKEY_APPROVED = "APIKEY_APPROVED"
    APIKEY_UPDATED = "APIKEY_UPDATED"
    PARTNER_UPDATED = "PARTNER_UPDATED"
    POLICY_UPDATED = "POLICY_UPDATED"
    MISP_LICENSE_UPDATED = "MISP_LICENSE_UPDATED"

    def __str__(self) -> str:
        """Return topic as string."""
        return self.value


PARTNER_DATA = "partnerData"
API_KEY_DATA = "apiKeyData"
POLICY_DATA = "policyData"
MISP_LICENSE_DATA = "mispLicenseData"
