"""
Model registry for the partners app.
"""
from partners.infrastructure.models import (  # noqa: F401
    ApiKeyData,
    MispLicenseData,
    PartnerData,
    PartnerMapping,
    PolicyData,
)
