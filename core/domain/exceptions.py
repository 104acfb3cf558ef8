"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class EntitlementError(DomainException):
    """Base exception for partner entitlement failures."""

    pass


class PartnerNotRegisteredError(EntitlementError):
    """Raised when no usable partner mapping, partner or API key exists."""

    def __init__(self, message: str = "Partner is not registered"):
        super().__init__(message, code="PARTNER_NOT_REGISTERED")


class PartnerDeactivatedError(EntitlementError):
    """Raised when the partner or its API key is not active."""

    def __init__(self, message: str = "Partner is deactivated"):
        super().__init__(message, code="PARTNER_DEACTIVATED")


class InvalidPolicyIdError(EntitlementError):
    """Raised when the mapped policy is missing or deleted."""

    def __init__(self, message: str = "Policy ID is invalid"):
        super().__init__(message, code="INVALID_POLICY_ID")


class PartnerPolicyNotActiveError(EntitlementError):
    """Raised when the mapped policy is inactive or outside its validity window."""

    def __init__(self, message: str = "Partner policy is not active"):
        super().__init__(message, code="PARTNER_POLICY_NOT_ACTIVE")


class InvalidLicenseKeyError(EntitlementError):
    """Raised when a MISP license key is unknown, deleted or not yet valid."""

    def __init__(self, message: str = "License key does not belong to a registered MISP"):
        super().__init__(message, code="INVALID_LICENSEKEY")


class LicenseKeySuspendedError(EntitlementError):
    """Raised when a MISP license is not active."""

    def __init__(self, message: str = "License key of MISP is suspended"):
        super().__init__(message, code="LICENSEKEY_SUSPENDED")


class LicenseKeyExpiredError(EntitlementError):
    """Raised when a MISP license has expired."""

    def __init__(self, message: str = "License key of MISP has expired"):
        super().__init__(message, code="LICENSEKEY_EXPIRED")


class PayloadDeserializationError(DomainException):
    """
    Raised when a lifecycle event payload cannot be read.

    Carries the offending section name and field errors, if known.
    """

    def __init__(
        self,
        message: str = "Unable to deserialize event payload",
        section: Optional[str] = None,
        errors: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code="PAYLOAD_DESERIALIZATION_ERROR")
        self.section = section
        self.errors = errors or {}


class UnknownEventTypeError(DomainException):
    """Raised when no handler is registered for a lifecycle event topic."""

    def __init__(self, message: str = "Unknown event type"):
        super().__init__(message, code="UNKNOWN_EVENT_TYPE")
