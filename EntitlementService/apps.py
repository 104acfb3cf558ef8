"""
App configuration for Partner Entitlement Service.
"""

import logging
import sys

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)

# Management commands that never handle events or requests
_SETUP_SKIPPED_COMMANDS = {"migrate", "makemigrations", "collectstatic", "check"}


class EntitlementServiceConfig(AppConfig):
    """App configuration for EntitlementService."""

    name = "EntitlementService"
    verbose_name = "Partner Entitlement Service"

    def ready(self):
        """Called when Django starts."""
        if len(sys.argv) > 1 and sys.argv[1] in _SETUP_SKIPPED_COMMANDS:
            return

        self.register_event_handlers()
        if getattr(settings, "OBSERVABILITY_ENABLED", False):
            self.setup_observability()

    def setup_observability(self):
        """Setup tracing and metrics export after apps are ready."""
        from core.instrumentation import setup_opentelemetry

        try:
            setup_opentelemetry()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Failed to setup OpenTelemetry: %s", e)

    def register_event_handlers(self):
        """Register lifecycle event handlers after apps are ready."""
        from core.infrastructure.event_handlers import register_event_handlers

        register_event_handlers()
