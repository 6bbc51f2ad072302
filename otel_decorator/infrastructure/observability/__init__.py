"""Observability module providing OpenTelemetry tracing and structlog integration."""

from otel_decorator.infrastructure.observability.setup import (
    build_tracer_provider,
    init_observability,
    shutdown_observability,
)
from otel_decorator.infrastructure.observability.structlog_processor import (
    add_trace_context,
)
from otel_decorator.infrastructure.observability.tracing import (
    add_span_attributes,
    get_current_span_id,
    get_current_trace_id,
    get_tracer,
)

__all__ = [
    "add_span_attributes",
    "add_trace_context",
    "build_tracer_provider",
    "get_current_span_id",
    "get_current_trace_id",
    "get_tracer",
    "init_observability",
    "shutdown_observability",
]
