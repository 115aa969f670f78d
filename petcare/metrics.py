"""Business metrics for the plan service."""

from opentelemetry import metrics

from .logging_config import get_logger

logger = get_logger(__name__)

meter = metrics.get_meter(__name__)

# HTTP Request Metrics
http_request_duration = meter.create_histogram(
    name="http_request_duration_seconds",
    description="Duration of HTTP requests in seconds",
    unit="s",
)

http_requests_total = meter.create_counter(
    name="http_requests_total",
    description="Total number of HTTP requests",
)

http_request_errors = meter.create_counter(
    name="http_request_errors_total",
    description="Total number of HTTP request errors",
)

# Business Metrics
plans_generated_total = meter.create_counter(
    name="plans_generated_total",
    description="Total number of care plans generated",
)

plan_requests_rejected_total = meter.create_counter(
    name="plan_requests_rejected_total",
    description="Total number of plan requests rejected during normalization",
)


def record_http_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record HTTP request metrics."""
    labels = {"method": method, "endpoint": endpoint, "status_code": str(status_code)}

    http_request_duration.record(duration, labels)
    http_requests_total.add(1, labels)

    if status_code >= 400:
        http_request_errors.add(1, labels)


def record_plan_generated(category: str, intensity: str):
    """Record when a plan is generated."""
    plans_generated_total.add(1, {"category": category, "intensity": intensity})


def record_plan_rejected(field: str):
    """Record when a plan request fails normalization."""
    plan_requests_rejected_total.add(1, {"field": field})


logger.debug("Business metrics instruments created")
