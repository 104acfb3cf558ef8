"""
Inbound lifecycle events.

Lifecycle events describe creation or modification of partner state
that happened outside this service. They are delivered at least once
and in no guaranteed order.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from core.domain.exceptions import PayloadDeserializationError


@dataclass(frozen=True)
class LifecycleEvent:
    """
    A published lifecycle notification.

    ``data`` maps section names (``partnerData``, ``apiKeyData``,
    ``policyData``, ``mispLicenseData``) to structured sub-documents.
    """

    topic: str
    data: Dict[str, Any] = field(default_factory=dict)
    publisher: Optional[str] = None
    event_id: Optional[str] = None
    transaction_id: Optional[str] = None
    published_on: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "LifecycleEvent":
        """
        Build an event from its published envelope.

        The envelope looks like::

            {
                "publisher": "PARTNER_MANAGEMENT",
                "topic": "APIKEY_APPROVED",
                "publishedOn": "2024-01-01T00:00:00Z",
                "event": {"id": "...", "transactionId": "...", "data": {...}},
            }

        Args:
            payload: Decoded JSON envelope

        Returns:
            LifecycleEvent instance

        Raises:
            PayloadDeserializationError: If the envelope is malformed
        """
        if not isinstance(payload, dict):
            raise PayloadDeserializationError("Event envelope must be an object")

        topic = payload.get("topic")
        if not topic or not isinstance(topic, str):
            raise PayloadDeserializationError(
                "Event envelope has no topic", errors={"topic": ["This field is required."]}
            )

        event = payload.get("event")
        if not isinstance(event, dict):
            raise PayloadDeserializationError(
                "Event envelope has no event body", errors={"event": ["This field is required."]}
            )

        data = event.get("data") or {}
        if not isinstance(data, dict):
            raise PayloadDeserializationError(
                "Event data must be an object", errors={"data": ["Expected an object."]}
            )

        return cls(
            topic=topic,
            data=data,
            publisher=payload.get("publisher") or None,
            event_id=event.get("id"),
            transaction_id=event.get("transactionId"),
            published_on=payload.get("publishedOn"),
        )

    def section(self, name: str) -> Any:
        """Return a sub-document of the event data, or None."""
        return self.data.get(name)

