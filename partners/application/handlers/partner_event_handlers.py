"""
Partner lifecycle event handlers.

Keeps the local partner, API key, policy, MISP license and mapping
records in sync with lifecycle events published by partner management.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from django.utils import timezone

from core.domain.events import LifecycleEvent
from core.metrics import partner_records_synced_total
from partners.application.payloads import (
    read_api_key,
    read_misp_license,
    read_partner,
    read_policy,
)
from partners.application.services.attribution import SYSTEM_ACTOR, resolve_actor
from partners.domain.events import PartnerEventType
from partners.domain.partner_mapping import PartnerMapping
from partners.domain.record import AuditedRecord
from partners.ports.api_key_repository import ApiKeyRepository
from partners.ports.misp_license_repository import MispLicenseRepository
from partners.ports.partner_mapping_repository import PartnerMappingRepository
from partners.ports.partner_repository import PartnerRepository
from partners.ports.policy_repository import PolicyRepository

logger = logging.getLogger(__name__)


class PartnerEventSynchronizer:
    """
    Upserts partner records from lifecycle events.

    Every entry point takes the event and the explicit authenticated
    actor (None when the event arrived without a caller identity).
    """

    def __init__(
        self,
        partner_repository: PartnerRepository,
        api_key_repository: ApiKeyRepository,
        policy_repository: PolicyRepository,
        misp_license_repository: MispLicenseRepository,
        partner_mapping_repository: PartnerMappingRepository,
        clock: Callable[[], datetime] = timezone.now,
        system_actor: str = SYSTEM_ACTOR,
    ):
        """Initialize handler with repositories."""
        self.partner_repository = partner_repository
        self.api_key_repository = api_key_repository
        self.policy_repository = policy_repository
        self.misp_license_repository = misp_license_repository
        self.partner_mapping_repository = partner_mapping_repository
        self.clock = clock
        self.system_actor = system_actor

    def attribution(self, event: LifecycleEvent, actor: Optional[str] = None) -> str:
        """Return who writes triggered by ``event`` are attributed to."""
        return resolve_actor(actor, event.publisher, self.system_actor)

    def handlers(self):
        """Return the topic to handler table."""
        return {
            PartnerEventType.APIKEY_APPROVED.value: self.handle_api_key_approved,
            PartnerEventType.APIKEY_UPDATED.value: self.handle_api_key_updated,
            PartnerEventType.PARTNER_UPDATED.value: self.handle_partner_updated,
            PartnerEventType.POLICY_UPDATED.value: self.handle_policy_updated,
            PartnerEventType.MISP_LICENSE_UPDATED.value: self.handle_misp_license_updated,
        }

    def handle_api_key_approved(self, event: LifecycleEvent, actor: Optional[str] = None) -> None:
        """
        Handle an API key approval.

        Stores the partner, API key and policy carried by the event and then
        the mapping linking them. All three sections are read before anything
        is written. Redelivered approvals update the records in place and
        keep the existing mapping.

        Args:
            event: APIKEY_APPROVED lifecycle event
            actor: Authenticated caller, if any

        Raises:
            PayloadDeserializationError: If any section is missing or malformed
        """
        partner = read_partner(event)
        api_key = read_api_key(event)
        policy = read_policy(event)

        who = self.attribution(event, actor)
        now = self.clock()

        self._upsert(self.partner_repository, partner, who, now)
        self._upsert(self.api_key_repository, api_key, who, now)
        self._upsert(self.policy_repository, policy, who, now)

        existing = self.partner_mapping_repository.find_by_partner_and_api_key(
            partner.partner_id, api_key.api_key_id
        )
        if existing is not None:
            logger.info(
                "Mapping for partner %s and API key %s already exists, keeping it",
                partner.partner_id,
                api_key.api_key_id,
            )
            return

        self.partner_mapping_repository.save(
            PartnerMapping.create(
                partner_id=partner.partner_id,
                api_key_id=api_key.api_key_id,
                policy_id=policy.policy_id,
                created_by=who,
                created_at=now,
            )
        )
        partner_records_synced_total.labels(record_type="PartnerMapping", action="created").inc()
        logger.info(
            "Mapped partner %s with API key %s to policy %s",
            partner.partner_id,
            api_key.api_key_id,
            policy.policy_id,
        )

    def handle_api_key_updated(self, event: LifecycleEvent, actor: Optional[str] = None) -> None:
        """Upsert the API key carried by an APIKEY_UPDATED event."""
        api_key = read_api_key(event)
        self._upsert(self.api_key_repository, api_key, self.attribution(event, actor), self.clock())

    def handle_partner_updated(self, event: LifecycleEvent, actor: Optional[str] = None) -> None:
        """Upsert the partner carried by a PARTNER_UPDATED event."""
        partner = read_partner(event)
        self._upsert(self.partner_repository, partner, self.attribution(event, actor), self.clock())

    def handle_policy_updated(self, event: LifecycleEvent, actor: Optional[str] = None) -> None:
        """Upsert the policy carried by a POLICY_UPDATED event."""
        policy = read_policy(event)
        self._upsert(self.policy_repository, policy, self.attribution(event, actor), self.clock())

    def handle_misp_license_updated(
        self, event: LifecycleEvent, actor: Optional[str] = None
    ) -> None:
        """Upsert the MISP license carried by a MISP_LICENSE_UPDATED event."""
        misp_license = read_misp_license(event)
        self._upsert(
            self.misp_license_repository,
            misp_license,
            self.attribution(event, actor),
            self.clock(),
        )

    def _upsert(self, repository, incoming: AuditedRecord, actor: str, now: datetime):
        """
        Update the stored record from ``incoming`` or insert it.

        An existing record gets its mutable fields overwritten and is
        stamped as updated; a new one is stamped as created.

        Returns:
            The saved record
        """
        record_type = type(incoming).__name__
        existing = repository.find_by_id(incoming.record_id)
        if existing is not None:
            saved = repository.save(existing.apply_update(incoming, actor, now))
            action = "updated"
        else:
            saved = repository.save(incoming.mark_created(actor, now))
            action = "created"

        partner_records_synced_total.labels(record_type=record_type, action=action).inc()
        logger.info("%s %s %s by %s", record_type, incoming.record_id, action, actor)
        return saved
