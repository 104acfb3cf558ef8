"""
Django admin configuration for partners app.

Records are owned by partner management and synced from lifecycle
events, so they are shown read-only here.
"""
from django.contrib import admin

from partners.infrastructure.models import (
    ApiKeyData,
    MispLicenseData,
    PartnerData,
    PartnerMapping,
    PolicyData,
)

AUDIT_FIELDS = ["is_deleted", "created_by", "created_at", "updated_by", "updated_at"]


class SyncedRecordAdmin(admin.ModelAdmin):
    """Read-only admin for records written by the event synchronizer."""

    list_filter = ["is_deleted", "created_at", "updated_at"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(PartnerData)
class PartnerDataAdmin(SyncedRecordAdmin):
    """Admin interface for PartnerData model."""

    list_display = ["partner_id", "partner_name", "partner_status", *AUDIT_FIELDS]
    list_filter = ["partner_status", *SyncedRecordAdmin.list_filter]
    search_fields = ["partner_id", "partner_name"]


@admin.register(ApiKeyData)
class ApiKeyDataAdmin(SyncedRecordAdmin):
    """Admin interface for ApiKeyData model."""

    list_display = [
        "api_key_id",
        "api_key_status",
        "api_key_commence_on",
        "api_key_expires_on",
        *AUDIT_FIELDS,
    ]
    list_filter = ["api_key_status", *SyncedRecordAdmin.list_filter]
    search_fields = ["api_key_id"]


@admin.register(PolicyData)
class PolicyDataAdmin(SyncedRecordAdmin):
    """Admin interface for PolicyData model."""

    list_display = [
        "policy_id",
        "policy_name",
        "policy_status",
        "policy_commence_on",
        "policy_expires_on",
        *AUDIT_FIELDS,
    ]
    list_filter = ["policy_status", *SyncedRecordAdmin.list_filter]
    search_fields = ["policy_id", "policy_name"]


@admin.register(MispLicenseData)
class MispLicenseDataAdmin(SyncedRecordAdmin):
    """Admin interface for MispLicenseData model."""

    list_display = [
        "misp_id",
        "license_key",
        "misp_status",
        "misp_commence_on",
        "misp_expires_on",
        *AUDIT_FIELDS,
    ]
    list_filter = ["misp_status", *SyncedRecordAdmin.list_filter]
    search_fields = ["misp_id", "license_key"]


@admin.register(PartnerMapping)
class PartnerMappingAdmin(SyncedRecordAdmin):
    """Admin interface for PartnerMapping model."""

    list_display = ["partner", "api_key", "policy", *AUDIT_FIELDS]
    search_fields = ["partner__partner_id", "api_key__api_key_id", "policy__policy_id"]

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("partner", "api_key", "policy")
