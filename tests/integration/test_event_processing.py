"""
Integration tests for lifecycle event processing outside HTTP.
"""

from unittest.mock import MagicMock, patch

import pytest
from celery.exceptions import Retry
from django.db import OperationalError

from core.domain.exceptions import PayloadDeserializationError
from core.infrastructure.event_handlers import register_event_handlers
from core.infrastructure.events import LifecycleEventRouter
from core.infrastructure.rabbitmq_event_consumer import RabbitMQEventConsumer
from core.tasks import process_lifecycle_event
from partners.infrastructure.models import ApiKeyData, PartnerMapping


@pytest.fixture
def registered_handlers():
    """Wire the partner handlers into the global router."""
    register_event_handlers()


class TestRegisterEventHandlers:
    """Tests for handler registration."""

    def test_registers_all_partner_topics(self):
        """Test that every partner topic gets a handler."""
        router = register_event_handlers(LifecycleEventRouter())

        assert router.topics() == [
            "APIKEY_APPROVED",
            "APIKEY_UPDATED",
            "MISP_LICENSE_UPDATED",
            "PARTNER_UPDATED",
            "POLICY_UPDATED",
        ]


@pytest.mark.django_db
@pytest.mark.integration
@pytest.mark.usefixtures("registered_handlers")
class TestProcessLifecycleEventTask:
    """Tests for the Celery task consuming broker events."""

    def test_task_applies_event(self, approval_payload):
        """Test that the task stores the approved records."""
        result = process_lifecycle_event.apply(args=[approval_payload]).get()

        assert result == "APIKEY_APPROVED"
        assert PartnerMapping.objects.filter(partner_id="partner-1").exists()

    def test_task_attributes_to_publisher(self, make_payload, api_key_data):
        """Test that broker events are attributed to their publisher."""
        payload = make_payload("APIKEY_UPDATED", {"apiKeyData": api_key_data}, publisher="PMS")

        process_lifecycle_event.apply(args=[payload]).get()

        assert ApiKeyData.objects.get(api_key_id="apikey-1").created_by == "PMS"

    def test_task_retries_when_store_unavailable(self, approval_payload):
        """Test that an unreachable store schedules a retry with backoff."""
        error = OperationalError("could not connect to server")

        with patch("core.tasks.process_lifecycle_payload", side_effect=error), patch.object(
            process_lifecycle_event, "retry", side_effect=Retry()
        ) as retry:
            with pytest.raises(Retry):
                process_lifecycle_event(approval_payload)

        retry.assert_called_once_with(exc=error, countdown=1)

    def test_task_does_not_retry_malformed_payload(self):
        """Test that a malformed envelope fails without a retry."""
        with patch.object(process_lifecycle_event, "retry") as retry:
            with pytest.raises(PayloadDeserializationError):
                process_lifecycle_event({"topic": "APIKEY_APPROVED"})

        retry.assert_not_called()

    def test_task_acks_late(self):
        """Test that the task message is acknowledged after processing."""
        assert process_lifecycle_event.acks_late is True


class TestRabbitMQEventConsumer:
    """Tests for the RabbitMQ consumer callback."""

    def test_queue_binding(self):
        """Test the queue is durable and bound to the topic exchange."""
        consumer = RabbitMQEventConsumer(exchange_name="events", queue_name="q", routing_key="#")

        assert consumer.queue.name == "q"
        assert consumer.queue.durable is True
        assert consumer.queue.exchange.name == "events"
        assert consumer.queue.exchange.type == "topic"

    def test_handle_message_dispatches_and_acks(self, approval_payload):
        """Test that a message is handed to Celery and acknowledged."""
        message = MagicMock()
        consumer = RabbitMQEventConsumer()

        with patch("EntitlementService.celery.app.send_task") as send_task:
            consumer.handle_message(approval_payload, message)

        send_task.assert_called_once_with(
            "core.tasks.process_lifecycle_event", args=[approval_payload]
        )
        message.ack.assert_called_once()
        message.reject.assert_not_called()

    def test_handle_message_requeues_on_failure(self, approval_payload):
        """Test that a message is requeued when dispatch fails."""
        message = MagicMock()
        consumer = RabbitMQEventConsumer()

        with patch("EntitlementService.celery.app.send_task", side_effect=ConnectionError("down")):
            consumer.handle_message(approval_payload, message)

        message.reject.assert_called_once_with(requeue=True)
        message.ack.assert_not_called()

    def test_handle_message_acks_non_mapping_body(self):
        """Test that a body that is not an envelope is handed off and acked once."""
        message = MagicMock()
        consumer = RabbitMQEventConsumer()

        with patch("EntitlementService.celery.app.send_task") as send_task:
            consumer.handle_message(["not", "an", "envelope"], message)

        send_task.assert_called_once_with(
            "core.tasks.process_lifecycle_event", args=[["not", "an", "envelope"]]
        )
        message.ack.assert_called_once()
        message.reject.assert_not_called()
