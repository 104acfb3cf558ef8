"""
Django management command to consume partner lifecycle events.

Runs the RabbitMQ consumer in the foreground until interrupted.
"""

import logging

from django.conf import settings
from django.core.management.base import BaseCommand

from core.infrastructure.rabbitmq_event_consumer import RabbitMQEventConsumer

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to consume partner lifecycle events from RabbitMQ."""

    help = "Consume partner lifecycle events from RabbitMQ"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--queue",
            default=settings.PARTNER_EVENTS_QUEUE,
            help="Queue name to consume from",
        )
        parser.add_argument(
            "--max-messages",
            type=int,
            default=None,
            help="Stop after this many messages",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        consumer = RabbitMQEventConsumer(
            broker_url=settings.CELERY_BROKER_URL,
            exchange_name=settings.PARTNER_EVENTS_EXCHANGE,
            queue_name=options["queue"],
        )
        self.stdout.write(f"Consuming partner events from {options['queue']}")
        try:
            consumer.consume(max_messages=options["max_messages"])
        except KeyboardInterrupt:
            consumer.stop()
            logger.info("Consumer interrupted")
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS("Consumer stopped"))
