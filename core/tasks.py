"""
Celery tasks for background processing.

Tasks for lifecycle event processing.
"""
import logging
from typing import Any, Dict, Optional

from django.db import OperationalError

from EntitlementService.celery import app

from core.domain.events import LifecycleEvent
from core.infrastructure.database import atomic_operation
from core.infrastructure.events import event_router

logger = logging.getLogger(__name__)


def process_lifecycle_payload(payload: Dict[str, Any], actor: Optional[str] = None) -> str:
    """
    Parse a lifecycle event envelope and dispatch it in one transaction.

    Args:
        payload: Published event envelope
        actor: Authenticated caller, if any

    Returns:
        The event topic

    Raises:
        PayloadDeserializationError: If the envelope or a section is malformed
        UnknownEventTypeError: If no handler is registered for the topic
    """
    event = LifecycleEvent.from_dict(payload)
    with atomic_operation():
        event_router.dispatch(event, actor)
    return event.topic


@app.task(
    bind=True,
    name="core.tasks.process_lifecycle_event",
    acks_late=True,
    max_retries=3,
)
def process_lifecycle_event(self, payload: Dict[str, Any]) -> str:
    """
    Process a lifecycle event received from RabbitMQ.

    Events from the broker carry no caller identity; attribution falls
    back to the publisher.

    The task message is acknowledged only after the task returns, so a
    worker lost mid-event leaves it on the queue. A store that cannot be
    reached is retried with backoff. Malformed payloads and unknown topics
    are not retried.

    Args:
        payload: Published event envelope
    """
    try:
        topic = process_lifecycle_payload(payload)
    except OperationalError as exc:
        logger.warning(
            "Store unavailable, retrying lifecycle event (attempt %s)", self.request.retries + 1
        )
        raise self.retry(exc=exc, countdown=2 ** self.request.retries)
    logger.info("Processed lifecycle event from broker", extra={"topic": topic})
    return topic
