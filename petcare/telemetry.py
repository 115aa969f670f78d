"""OpenTelemetry configuration for the plan service."""

import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from opentelemetry import metrics, trace
from opentelemetry.exporter.prometheus import PrometheusMetricReader
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from prometheus_client import start_http_server

from .logging_config import get_logger

logger = get_logger(__name__)

METRICS_PORT = 8080

tracer = trace.get_tracer("petcare.plans")


@contextmanager
def plan_span(health: str) -> Iterator[trace.Span]:
    """Span around one plan generation; callers add category and intensity."""
    with tracer.start_as_current_span(
        "plan.generate", attributes={"plan.health": health}
    ) as span:
        yield span


def setup_telemetry(app):
    """Configure OpenTelemetry tracing and metrics for the FastAPI application."""
    try:
        # Opt-in only (enable with ENABLE_TELEMETRY=1)
        if not os.getenv("ENABLE_TELEMETRY"):
            return

        if "pytest" in sys.modules or os.getenv("TESTING"):
            logger.info("Skipping OpenTelemetry setup during tests")
            return

        prometheus_reader = PrometheusMetricReader()
        metrics.set_meter_provider(MeterProvider(metric_readers=[prometheus_reader]))

        metrics_port = METRICS_PORT
        try:
            start_http_server(metrics_port)
        except OSError:
            metrics_port += 1
            start_http_server(metrics_port)
        logger.info(f"Prometheus metrics server started on port {metrics_port}")

        trace.set_tracer_provider(TracerProvider())
        tracer_provider = trace.get_tracer_provider()

        # Console exporter; swap for OTLP when a collector is available
        span_processor = BatchSpanProcessor(ConsoleSpanExporter())
        tracer_provider.add_span_processor(span_processor)  # type: ignore[attr-defined]

        FastAPIInstrumentor.instrument_app(app)
        logger.info("OpenTelemetry tracing and metrics setup completed")

    except Exception as e:
        # Telemetry is optional; the service keeps running without it
        logger.error(f"Failed to setup OpenTelemetry: {e}")
