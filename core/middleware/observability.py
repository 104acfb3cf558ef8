"""
Observability middleware.

This middleware adds logging, metrics, and request tracing.
"""

import logging
import re
import time
import uuid
from typing import Callable, Optional

from django.http import HttpRequest, HttpResponse
from opentelemetry import trace
from opentelemetry.trace import format_trace_id

from core.metrics import http_request_duration_seconds, http_requests_total

logger = logging.getLogger(__name__)

_UUID_SEGMENT = re.compile(r"/[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")
_NUMERIC_SEGMENT = re.compile(r"/\d+")


class ObservabilityMiddleware:
    """
    Middleware for request observability.

    This middleware:
    1. Generates correlation IDs for request tracing
    2. Logs request/response information
    3. Records Prometheus request count and duration
    4. Adds correlation ID to response headers
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request and add observability.

        Args:
            request: HTTP request

        Returns:
            HTTP response with observability headers
        """
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        request.correlation_id = correlation_id  # type: ignore

        trace_id = self._current_trace_id()
        if trace_id:
            request.trace_id = trace_id  # type: ignore

        endpoint = self._normalize_endpoint(request.path)
        start_time = time.time()

        try:
            response = self.get_response(request)
        except Exception as e:
            duration = time.time() - start_time
            self._record_metrics(request.method, endpoint, 500, duration)
            logger.error(
                "Request failed",
                extra={
                    "correlation_id": correlation_id,
                    "method": request.method,
                    "path": request.path,
                    "error_type": type(e).__name__,
                    "duration_ms": round(duration * 1000, 2),
                },
                exc_info=True,
            )
            raise

        duration = time.time() - start_time
        self._record_metrics(request.method, endpoint, response.status_code, duration)

        log_extra = {
            "correlation_id": correlation_id,
            "method": request.method,
            "path": request.path,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
        }
        if trace_id:
            log_extra["trace_id"] = trace_id

        if response.status_code >= 500:
            logger.error("Request completed with server error", extra=log_extra)
        elif response.status_code >= 400:
            logger.warning("Request completed with client error", extra=log_extra)
        else:
            logger.info("Request completed successfully", extra=log_extra)

        response["X-Correlation-ID"] = correlation_id
        if trace_id:
            response["X-Trace-ID"] = trace_id
        return response

    def _current_trace_id(self) -> Optional[str]:
        """Return the active trace id, if a span is recording."""
        span_context = trace.get_current_span().get_span_context()
        if not span_context.is_valid:
            return None
        return format_trace_id(span_context.trace_id)

    def _normalize_endpoint(self, path: str) -> str:
        """Collapse ids in the path for metric aggregation."""
        endpoint = _UUID_SEGMENT.sub("/{id}", path)
        return _NUMERIC_SEGMENT.sub("/{id}", endpoint)

    def _record_metrics(self, method: str, endpoint: str, status_code: int, duration: float):
        """Record request count and latency."""
        http_requests_total.labels(
            method=method,
            endpoint=endpoint,
            status_code=status_code,
        ).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)
