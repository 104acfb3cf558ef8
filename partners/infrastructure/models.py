"""
Partner, ApiKey, Policy, MispLicense and PartnerMapping models.

Local copies of records owned by partner management, kept in sync
from lifecycle events.
"""
import uuid

from django.db import models
from django.utils import timezone


class AuditedModel(models.Model):
    """
    Abstract base carrying soft-delete and audit columns.
    """

    is_deleted = models.BooleanField(default=False)
    created_by = models.CharField(max_length=256)
    created_at = models.DateTimeField(default=timezone.now)
    updated_by = models.CharField(max_length=256, null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        abstract = True


class PartnerData(AuditedModel):
    """
    A partner registered to consume the authentication service.
    """

    partner_id = models.CharField(max_length=36, primary_key=True)
    partner_name = models.CharField(max_length=128)
    certificate_data = models.TextField(null=True, blank=True)
    partner_status = models.CharField(max_length=36)

    class Meta:
        db_table = "partner_data"
        ordering = ["partner_id"]

    def __str__(self):
        return f"{self.partner_name} ({self.partner_id})"


class ApiKeyData(AuditedModel):
    """
    A partner API key with its validity window.
    """

    api_key_id = models.CharField(max_length=36, primary_key=True)
    api_key_commence_on = models.DateTimeField()
    api_key_expires_on = models.DateTimeField()
    api_key_status = models.CharField(max_length=36)

    class Meta:
        db_table = "api_key_data"
        ordering = ["api_key_id"]

    def __str__(self):
        return self.api_key_id


class PolicyData(AuditedModel):
    """
    A policy document with its validity window.
    """

    policy_id = models.CharField(max_length=36, primary_key=True)
    policy = models.JSONField(default=dict, help_text="Structured policy document")
    policy_name = models.CharField(max_length=128)
    policy_description = models.CharField(max_length=256, null=True, blank=True)
    policy_commence_on = models.DateTimeField()
    policy_expires_on = models.DateTimeField()
    policy_status = models.CharField(max_length=36)

    class Meta:
        db_table = "policy_data"
        ordering = ["policy_id"]

    def __str__(self):
        return f"{self.policy_name} ({self.policy_id})"


class MispLicenseData(AuditedModel):
    """
    A MISP license key with its validity window.
    """

    misp_id = models.CharField(max_length=36, primary_key=True)
    license_key = models.CharField(max_length=128, db_index=True)
    misp_commence_on = models.DateTimeField()
    misp_expires_on = models.DateTimeField()
    misp_status = models.CharField(max_length=36)

    class Meta:
        db_table = "misp_license_data"
        ordering = ["misp_id"]

    def __str__(self):
        return self.misp_id


class PartnerMapping(AuditedModel):
    """
    Entitles a partner, using an API key, to a policy.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    partner = models.ForeignKey(
        PartnerData, on_delete=models.PROTECT, related_name="mappings"
    )
    api_key = models.ForeignKey(
        ApiKeyData, on_delete=models.PROTECT, related_name="mappings"
    )
    policy = models.ForeignKey(
        PolicyData, on_delete=models.PROTECT, related_name="mappings"
    )

    class Meta:
        db_table = "partner_mapping"
        unique_together = [["partner", "api_key"]]
        indexes = [
            models.Index(fields=["partner", "api_key"]),
        ]

    def __str__(self):
        return f"{self.partner_id} / {self.api_key_id} -> {self.policy_id}"
