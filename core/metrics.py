"""
Prometheus metrics for the entitlement service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Entitlement metrics
policy_resolutions_total = Counter(
    "policy_resolutions_total",
    "Total partner policy resolutions",
    ["outcome"],
)

entitlement_denials_total = Counter(
    "entitlement_denials_total",
    "Total denied policy resolutions by error code",
    ["error_code"],
)

# Synchronization metrics
lifecycle_events_total = Counter(
    "lifecycle_events_total",
    "Total lifecycle events handled",
    ["event_type", "outcome"],
)

partner_records_synced_total = Counter(
    "partner_records_synced_total",
    "Total partner records written from lifecycle events",
    ["record_type", "action"],
)
