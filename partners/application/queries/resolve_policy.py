"""
ResolvePolicyQuery.

Query to validate a partner's entitlement and fetch its policy.
"""
from dataclasses import dataclass


@dataclass
class ResolvePolicyQuery:
    """Query to resolve the policy for a partner, API key and MISP license key."""

    partner_id: str
    api_key: str
    misp_license_key: str
    include_certificate: bool = False
