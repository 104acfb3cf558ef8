"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


class RecordStatus(Enum):
    """
    Status of a partner, API key, policy or MISP license record.

    Statuses arrive as free-form strings from lifecycle events; only
    the literal ``ACTIVE`` permits use.
    """

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value

    @classmethod
    def is_active(cls, status: Optional[str]) -> bool:
        """
        Check whether a raw status string means active.

        Args:
            status: Status string as stored on the record

        Returns:
            True only for the exact value ``ACTIVE``
        """
        return status == cls.ACTIVE.value


def utc_now() -> datetime:
    """Return the current timezone-aware UTC time."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ValidityWindow(ValueObject):
    """
    Half-open validity interval ``[commence_on, expires_on)``.

    A record is usable from the instant it commences up to, but not
    including, the instant it expires.
    """

    commence_on: datetime
    expires_on: datetime

    def __post_init__(self):
        """Validate window bounds."""
        if self.commence_on is None or self.expires_on is None:
            raise ValueError("Validity window requires both bounds")

    def has_commenced(self, current_time: Optional[datetime] = None) -> bool:
        """Return True once ``current_time`` reaches ``commence_on``."""
        check_time = current_time or utc_now()
        return self.commence_on <= check_time

    def has_expired(self, current_time: Optional[datetime] = None) -> bool:
        """Return True at or after ``expires_on``."""
        check_time = current_time or utc_now()
        return self.expires_on <= check_time

    def contains(self, current_time: Optional[datetime] = None) -> bool:
        """
        Check whether a moment lies inside the window.

        Args:
            current_time: Moment to check (defaults to now, UTC)

        Returns:
            True if commenced and not yet expired
        """
        check_time = current_time or utc_now()
        return self.has_commenced(check_time) and not self.has_expired(check_time)
