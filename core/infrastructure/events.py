"""
In-process lifecycle event router.

Routes inbound lifecycle events to the handler registered for their
topic. Transport (RabbitMQ consumer, HTTP callback) is handled elsewhere;
this module only decides who processes an event.
"""

import logging
from typing import Callable, Dict, List, Optional

from core.domain.events import LifecycleEvent
from core.domain.exceptions import UnknownEventTypeError
from core.instrumentation import Status, StatusCode, get_tracer
from core.metrics import lifecycle_events_total

logger = logging.getLogger(__name__)

tracer = get_tracer(__name__)

LifecycleEventHandler = Callable[[LifecycleEvent, Optional[str]], None]


class LifecycleEventRouter:
    """
    Topic-based router for lifecycle events.

    Exactly one handler is registered per topic. Handlers run
    synchronously in the caller's transaction.
    """

    def __init__(self):
        """Initialize the router."""
        self._handlers: Dict[str, LifecycleEventHandler] = {}

    def subscribe(self, topic: str, handler: LifecycleEventHandler) -> None:
        """
        Register the handler for a topic, replacing any previous one.

        Args:
            topic: Event topic
            handler: Callable taking ``(event, actor)``
        """
        self._handlers[topic] = handler
        logger.debug("Subscribed %s to %s", getattr(handler, "__name__", handler), topic)

    def topics(self) -> List[str]:
        """Return the registered topics."""
        return sorted(self._handlers)

    def clear(self) -> None:
        """Drop all registered handlers."""
        self._handlers.clear()

    def dispatch(self, event: LifecycleEvent, actor: Optional[str] = None) -> None:
        """
        Dispatch an event to its handler.

        Args:
            event: The lifecycle event
            actor: Authenticated caller, if any

        Raises:
            UnknownEventTypeError: If no handler is registered for the topic
        """
        handler = self._handlers.get(event.topic)
        if handler is None:
            lifecycle_events_total.labels(event_type=event.topic, outcome="unrouted").inc()
            raise UnknownEventTypeError(f"No handler registered for topic {event.topic}")

        with tracer.start_as_current_span("dispatch_lifecycle_event") as span:
            span.set_attribute("event.topic", event.topic)
            if event.event_id:
                span.set_attribute("event.id", event.event_id)
            try:
                handler(event, actor)
            except Exception as e:
                lifecycle_events_total.labels(event_type=event.topic, outcome="failed").inc()
                span.set_status(Status(StatusCode.ERROR, str(e)))
                logger.error(
                    "Error handling %s event %s: %s",
                    event.topic,
                    event.event_id,
                    e,
                    exc_info=True,
                )
                raise

            lifecycle_events_total.labels(event_type=event.topic, outcome="processed").inc()
            span.set_status(Status(StatusCode.OK))
            logger.info(
                "Handled %s event",
                event.topic,
                extra={"event_id": event.event_id, "publisher": event.publisher},
            )


# Global router instance
event_router = LifecycleEventRouter()
