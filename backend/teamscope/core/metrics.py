"""
Prometheus Metrics Collection for the Teamscope Backend

Exposes HTTP request metrics plus counters for the access-control engine.
Each pod keeps its own registry and is scraped independently.
"""

import logging
import re
import time
from importlib.metadata import version as get_version
from typing import Callable

from fastapi import Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Gauge,
    Histogram,
    Info,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# =============================================================================
# Application Info Metrics
# =============================================================================

try:
    APP_VERSION = get_version("teamscope")
except Exception:
    APP_VERSION = "unknown"

app_info = Info("teamscope_app", "Application information")
app_info.info(
    {
        "version": APP_VERSION,
        "app_name": "Teamscope",
    }
)

# =============================================================================
# HTTP Request Metrics
# =============================================================================

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests by method, endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_requests_in_progress = Gauge(
    "http_requests_in_progress",
    "Number of HTTP requests currently being processed",
    ["method", "endpoint"],
)

# =============================================================================
# Access Control Metrics
# =============================================================================

access_decisions_total = Counter(
    "access_decisions_total",
    "Access decisions by engine operation and outcome",
    ["operation", "outcome"],
)

access_search_results = Histogram(
    "access_search_results",
    "Number of results returned by scoped searches",
    ["operation"],
    buckets=(0, 1, 5, 10, 25, 50, 100, 250),
)

# =============================================================================
# System Metrics
# =============================================================================

uptime_seconds = Gauge(
    "uptime_seconds",
    "Application uptime in seconds",
)

startup_time = time.time()


def update_uptime():
    """Update the uptime metric."""
    uptime_seconds.set(time.time() - startup_time)


def record_access_decision(operation: str, outcome: str) -> None:
    """Count one engine decision (e.g. resolve/visible, search_users/denied)."""
    access_decisions_total.labels(operation=operation, outcome=outcome).inc()


def record_search_results(operation: str, count: int) -> None:
    access_search_results.labels(operation=operation).observe(count)


# =============================================================================
# Prometheus Metrics Endpoint
# =============================================================================


async def metrics_endpoint(request: Request) -> Response:
    """
    Prometheus metrics endpoint.

    Meant to be scraped from inside the cluster, not exposed through the Ingress.
    """
    update_uptime()
    metrics_output = generate_latest(REGISTRY)
    return Response(content=metrics_output, media_type=CONTENT_TYPE_LATEST)


# =============================================================================
# Middleware for HTTP Metrics
# =============================================================================


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to automatically collect HTTP request metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Skip metrics for the /metrics endpoint itself to avoid recursion
        if request.url.path == "/metrics":
            return await call_next(request)

        method = request.method
        endpoint = normalize_path(request.url.path)

        http_requests_in_progress.labels(method=method, endpoint=endpoint).inc()
        start_time = time.time()
        status = 500

        try:
            response = await call_next(request)
            status = response.status_code
        except Exception as e:
            logger.error(f"Error in PrometheusMiddleware: {e}")
            raise
        finally:
            duration = time.time() - start_time
            http_request_duration_seconds.labels(
                method=method, endpoint=endpoint
            ).observe(duration)
            http_requests_total.labels(
                method=method, endpoint=endpoint, status=status
            ).inc()
            http_requests_in_progress.labels(method=method, endpoint=endpoint).dec()

        return response


def normalize_path(path: str) -> str:
    """
    Normalize URL paths to prevent cardinality explosion.

    Examples:
      /api/v1/teams/123 -> /api/v1/teams/{id}
      /api/v1/teams/550e8400-e29b-41d4-a716-446655440000/typeahead -> /api/v1/teams/{id}/typeahead
    """
    path = re.sub(
        r"/[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
        "/{id}",
        path,
        flags=re.IGNORECASE,
    )
    # MongoDB ObjectIds (24 hex chars)
    path = re.sub(r"/[0-9a-f]{24}", "/{id}", path, flags=re.IGNORECASE)
    path = re.sub(r"/\d+", "/{id}", path)
    return path
