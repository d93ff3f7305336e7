"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Lifecycle command metrics
lifecycle_commands = Counter(
    'frontdesk_lifecycle_commands_total',
    'Booking lifecycle commands',
    ['command', 'result']  # command: create, check_in, ...; result: success, rejected, not_found
)

lifecycle_latency = Histogram(
    'frontdesk_lifecycle_latency_seconds',
    'Lifecycle command latency',
    ['command'],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1]
)

# Availability metrics
availability_checks = Counter(
    'frontdesk_availability_checks_total',
    'Room availability checks',
    ['result']  # available, unavailable
)

# Inventory gauges
bookings_stored = Gauge(
    'frontdesk_bookings_stored',
    'Number of booking records held in memory'
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_command(command: str, result: str):
    """Record lifecycle command. Result: success, rejected, not_found"""
    lifecycle_commands.labels(command=command, result=result).inc()


def record_availability(available: bool):
    result = "available" if available else "unavailable"
    availability_checks.labels(result=result).inc()
