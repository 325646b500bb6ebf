"""
Tracer initialization and configuration for OpenTelemetry.

Tracing is opt-in: until initialize_tracing() is called, get_tracer()
hands out a tracer from whatever provider is globally installed, which is
a no-op by default.
"""

import logging
import os

from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

INSTRUMENTATION_NAME = "rowdiff"

_tracer: trace.Tracer | None = None
_provider: TracerProvider | None = None


def _otlp_exporter(endpoint: str) -> SpanExporter:
    # Imported lazily; the gRPC stack is only needed when exporting
    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

    return OTLPSpanExporter(endpoint=endpoint, insecure=True)


def initialize_tracing(
    service_name: str = "rowdiff",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
    sampling_rate: float = 1.0,
    exporters: list[SpanExporter] | None = None,
) -> trace.Tracer:
    """
    Initialize distributed tracing with OpenTelemetry.

    Args:
        service_name: Name of the service for identification
        otlp_endpoint: OTLP collector endpoint (e.g., "localhost:4317");
            falls back to the OTLP_ENDPOINT environment variable
        console_export: If True, also export traces to console (debug)
        sampling_rate: Sampling rate 0.0-1.0 (1.0 = trace everything)
        exporters: Extra span exporters to attach (e.g., in-memory for tests)

    Returns:
        Configured tracer instance

    Raises:
        ValueError: If sampling_rate is outside 0.0-1.0
    """
    global _tracer, _provider

    if _tracer is not None and _provider is not None:
        logger.warning("Tracing already initialized, returning existing tracer")
        return _tracer

    if not 0.0 <= sampling_rate <= 1.0:
        raise ValueError(f"sampling_rate must be between 0.0 and 1.0, got {sampling_rate}")

    provider = TracerProvider(
        resource=Resource(attributes={SERVICE_NAME: service_name}),
        sampler=TraceIdRatioBased(sampling_rate),
    )

    configured = []

    endpoint = otlp_endpoint or os.getenv("OTLP_ENDPOINT")
    if endpoint:
        provider.add_span_processor(BatchSpanProcessor(_otlp_exporter(endpoint)))
        configured.append("OTLP")
        logger.info(f"OTLP exporter configured: {endpoint}")

    if console_export or os.getenv("TRACE_CONSOLE", "").lower() == "true":
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        configured.append("Console")

    for exporter in exporters or []:
        provider.add_span_processor(BatchSpanProcessor(exporter))
        configured.append(type(exporter).__name__)

    if not configured:
        logger.warning("No trace exporters configured, spans will not be exported")

    _provider = provider
    _tracer = provider.get_tracer(INSTRUMENTATION_NAME)

    logger.info(
        f"Tracing initialized: {service_name} "
        f"(exporters: {', '.join(configured) or 'none'}, sampling: {sampling_rate})"
    )
    return _tracer


def get_tracer() -> trace.Tracer:
    """
    Get the tracer used for diff spans.

    Returns the tracer from initialize_tracing() when it has been called,
    otherwise one from the globally installed provider.
    """
    if _tracer is not None:
        return _tracer
    return trace.get_tracer(INSTRUMENTATION_NAME)


def get_tracer_provider() -> TracerProvider | None:
    return _provider


def shutdown_tracing() -> None:
    """
    Flush pending spans and drop the configured tracer.

    Should be called before application exit.
    """
    global _tracer, _provider

    if _provider is None:
        return
    try:
        _provider.shutdown()
        logger.info("Tracing shutdown complete")
    finally:
        _tracer = None
        _provider = None
