"""
Partner domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from datetime import datetime
from typing import Optional

from core.domain.exceptions import (
    InvalidLicenseKeyError,
    InvalidPolicyIdError,
    LicenseKeyExpiredError,
    LicenseKeySuspendedError,
    PartnerDeactivatedError,
    PartnerNotRegisteredError,
    PartnerPolicyNotActiveError,
)
from core.domain.value_objects import utc_now
from partners.domain.api_key import ApiKey
from partners.domain.misp_license import MispLicense
from partners.domain.partner import Partner
from partners.domain.partner_mapping import PartnerMapping
from partners.domain.policy import Policy


class EntitlementValidator:
    """
    Domain service deciding whether a partner may use the service.

    Rules are applied in a fixed order and the first failing rule
    raises; later rules are not evaluated.
    """

    @staticmethod
    def validate(
        mapping: Optional[PartnerMapping],
        partner: Optional[Partner],
        policy: Optional[Policy],
        api_key: Optional[ApiKey],
        misp_license: Optional[MispLicense],
        current_time: Optional[datetime] = None,
    ) -> None:
        """
        Validate a partner mapping and MISP license together.

        Args:
            mapping: Mapping for (partner_id, api_key), if found
            partner: Partner linked by the mapping, if found
            policy: Policy linked by the mapping, if found
            api_key: API key linked by the mapping, if found
            misp_license: MISP license looked up by key, if found
            current_time: Time to validate at (defaults to now, UTC)

        Raises:
            EntitlementError: The first violated rule
        """
        check_time = current_time or utc_now()

        if mapping is None or mapping.is_deleted:
            raise PartnerNotRegisteredError()

        EntitlementValidator.validate_partner(partner)
        EntitlementValidator.validate_policy(policy, check_time)
        EntitlementValidator.validate_api_key(api_key, check_time)
        EntitlementValidator.validate_misp_license(misp_license, check_time)

    @staticmethod
    def validate_partner(partner: Optional[Partner]) -> None:
        """Check the partner is present, not deleted and active."""
        if partner is None or partner.is_deleted:
            raise PartnerNotRegisteredError()
        if not partner.is_active:
            raise PartnerDeactivatedError()

    @staticmethod
    def validate_policy(policy: Optional[Policy], current_time: datetime) -> None:
        """Check the policy is present, not deleted, active and in its window."""
        if policy is None or policy.is_deleted:
            raise InvalidPolicyIdError()
        if not policy.is_active:
            raise PartnerPolicyNotActiveError()
        if not policy.validity_window.contains(current_time):
            raise PartnerPolicyNotActiveError()

    @staticmethod
    def validate_api_key(api_key: Optional[ApiKey], current_time: datetime) -> None:
        """Check the API key is present, not deleted, active and in its window."""
        if api_key is None or api_key.is_deleted:
            raise PartnerNotRegisteredError()
        if not api_key.is_active:
            raise PartnerDeactivatedError()
        if not api_key.validity_window.contains(current_time):
            raise PartnerNotRegisteredError()

    @staticmethod
    def validate_misp_license(
        misp_license: Optional[MispLicense], current_time: datetime
    ) -> None:
        """
        Check the MISP license is present, not deleted, active and in its window.

        A license that has not commenced yet is reported as an invalid key
        rather than with a dedicated code; expiry has its own code.
        """
        if misp_license is None or misp_license.is_deleted:
            raise InvalidLicenseKeyError()
        if not misp_license.is_active:
            raise LicenseKeySuspendedError()
        window = misp_license.validity_window
        if not window.has_commenced(current_time):
            raise InvalidLicenseKeyError()
        if window.has_expired(current_time):
            raise LicenseKeyExpiredError()
