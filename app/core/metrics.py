from __future__ import annotations

import time
from typing import cast

from fastapi import APIRouter, Request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.core.route_label import safe_route_label

metrics_router = APIRouter(tags=["monitoring"])

# Labels are low-cardinality only:
# - Route label MUST be a route template (e.g. /api/first-call) or a fixed value.
# - Never label by prompt, model output or request id.

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    labelnames=("method", "route", "status_code"),
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    labelnames=("method", "route", "status_code"),
    # Buckets tuned for typical API latencies (fast endpoints + occasional slower work)
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

llm_upstream_requests_total = Counter(
    "llm_upstream_requests_total",
    "Relay calls by outcome",
    labelnames=("outcome",),
)

llm_upstream_duration_seconds = Histogram(
    "llm_upstream_duration_seconds",
    "Duration of completed upstream chat-completion calls in seconds",
    labelnames=("outcome",),
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)


def observe_relay_outcome(*, outcome: str, latency_ms: int | None) -> None:
    """Record one relay call. Latency is only observed when the upstream call completed."""

    llm_upstream_requests_total.labels(outcome=outcome).inc()
    if latency_ms is not None:
        llm_upstream_duration_seconds.labels(outcome=outcome).observe(latency_ms / 1000.0)


class PrometheusMetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            route_label = safe_route_label(request)
            method = request.method
            code = str(int(status_code))
            duration = time.perf_counter() - started
            http_requests_total.labels(method=method, route=route_label, status_code=code).inc()
            http_request_duration_seconds.labels(
                method=method, route=route_label, status_code=code
            ).observe(duration)


@metrics_router.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    # Use the default registry; sufficient for single-process dev usage.
    payload = generate_latest()
    return Response(content=cast(bytes, payload), media_type=CONTENT_TYPE_LATEST)
