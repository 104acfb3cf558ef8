"""
Lifecycle event handler registration.

Wires the partner event synchronizer into the lifecycle event router.
"""

import logging

from django.conf import settings

from core.infrastructure.events import LifecycleEventRouter
from partners.application.handlers.partner_event_handlers import PartnerEventSynchronizer
from partners.application.services.attribution import SYSTEM_ACTOR
from partners.infrastructure.repositories.django_api_key_repository import (
    DjangoApiKeyRepository,
)
from partners.infrastructure.repositories.django_misp_license_repository import (
    DjangoMispLicenseRepository,
)
from partners.infrastructure.repositories.django_partner_mapping_repository import (
    DjangoPartnerMappingRepository,
)
from partners.infrastructure.repositories.django_partner_repository import (
    DjangoPartnerRepository,
)
from partners.infrastructure.repositories.django_policy_repository import (
    DjangoPolicyRepository,
)

logger = logging.getLogger(__name__)


def build_event_synchronizer() -> PartnerEventSynchronizer:
    """Create a synchronizer backed by the Django repositories."""
    return PartnerEventSynchronizer(
        partner_repository=DjangoPartnerRepository(),
        api_key_repository=DjangoApiKeyRepository(),
        policy_repository=DjangoPolicyRepository(),
        misp_license_repository=DjangoMispLicenseRepository(),
        partner_mapping_repository=DjangoPartnerMappingRepository(),
        system_actor=getattr(settings, "ENTITLEMENT_SYSTEM_ACTOR", SYSTEM_ACTOR),
    )


def register_event_handlers(router: LifecycleEventRouter = None) -> LifecycleEventRouter:
    """
    Register all lifecycle event handlers with the router.

    Args:
        router: Router to register with (defaults to the global one)

    Returns:
        The router
    """
    if router is None:
        from core.infrastructure.events import event_router

        router = event_router

    synchronizer = build_event_synchronizer()
    for topic, handler in synchronizer.handlers().items():
        router.subscribe(topic, handler)

    logger.info("Event handlers registered for topics: %s", ", ".join(router.topics()))
    return router
