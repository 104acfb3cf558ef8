"""
Shared behaviour for synchronized partner records.
"""
from dataclasses import replace
from datetime import datetime
from typing import Tuple


class AuditedRecord:
    """
    Mixin for frozen record dataclasses carrying audit fields.

    Subclasses declare ``MUTABLE_FIELDS``, the fields an update event
    overwrites on an existing record.
    """

    MUTABLE_FIELDS: Tuple[str, ...] = ()

    @property
    def record_id(self) -> str:
        """Return the record's primary key."""
        raise NotImplementedError

    def mark_created(self, actor: str, created_at: datetime):
        """
        Return a copy stamped as created.

        Args:
            actor: Who created the record
            created_at: Creation time

        Returns:
            New record instance
        """
        return replace(self, created_by=actor, created_at=created_at)

    def apply_update(self, incoming, actor: str, updated_at: datetime):
        """
        Return a copy with the mutable fields taken from ``incoming``.

        Identity and creation audit fields are kept.

        Args:
            incoming: Record of the same type read from an update event
            actor: Who updated the record
            updated_at: Update time

        Returns:
            New record instance
        """
        if type(incoming) is not type(self):
            raise ValueError(
                f"Cannot update {type(self).__name__} from {type(incoming).__name__}"
            )
        changes = {name: getattr(incoming, name) for name in self.MUTABLE_FIELDS}
        return replace(self, updated_by=actor, updated_at=updated_at, **changes)
