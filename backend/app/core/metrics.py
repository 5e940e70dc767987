"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_operations = Counter(
    'booking_operations_total',
    'Booking lifecycle operations',
    ['operation', 'result']  # create/cancel, success/not_found
)

# Event metrics
event_operations = Counter(
    'event_operations_total',
    'Event lifecycle operations',
    ['operation']  # create, soft_delete, hard_delete
)

cascade_bookings = Counter(
    'event_cascade_bookings_total',
    'Bookings cancelled or removed by an event delete cascade',
    ['mode']  # soft, hard
)

# HTTP metrics
request_latency = Histogram(
    'http_request_latency_seconds',
    'Request latency',
    ['method'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


def metrics_endpoint() -> Response:
    """Prometheus exposition of the default registry."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_operation(operation: str, result: str = "success"):
    """Record booking operation. Result: success, not_found"""
    booking_operations.labels(operation=operation, result=result).inc()


def record_event_operation(operation: str):
    event_operations.labels(operation=operation).inc()


def record_cascade(mode: str, affected: int):
    cascade_bookings.labels(mode=mode).inc(affected)
