"""OpenTelemetry setup and initialization."""

import logging

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ParentBasedTraceIdRatio

from otel_decorator.config import Settings, get_settings
from otel_decorator.infrastructure.observability.structlog_processor import (
    add_trace_context,
)

logger = structlog.get_logger()

# Module-level state for cleanup
_tracer_provider: TracerProvider | None = None
_initialized: bool = False


def build_tracer_provider(settings: Settings) -> TracerProvider:
    """Create a tracer provider with exporters configured from settings.

    Args:
        settings: Observability settings.

    Returns:
        A TracerProvider that has not been installed globally.
    """
    resource = Resource.create(
        {
            SERVICE_NAME: settings.service_name,
            SERVICE_VERSION: settings.service_version,
        }
    )
    provider = TracerProvider(
        resource=resource,
        sampler=ParentBasedTraceIdRatio(settings.sample_rate),
    )

    if settings.console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    if settings.otlp_endpoint:
        endpoint = f"{settings.otlp_endpoint.rstrip('/')}/v1/traces"
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint))
        )

    return provider


def init_observability(settings: Settings | None = None) -> None:
    """Initialize OpenTelemetry tracing and configure structlog integration.

    Installs the global tracer provider that @trace spans are recorded
    with, and configures structlog so that log events carry the trace
    context and any grouped logger metadata. Calling it again is a no-op
    until shutdown_observability() runs.

    Args:
        settings: Observability settings. Defaults to get_settings().
    """
    global _tracer_provider, _initialized

    if _initialized:
        return

    settings = settings or get_settings()

    _configure_structlog(settings.log_level)

    if not settings.tracing_enabled:
        trace.set_tracer_provider(trace.NoOpTracerProvider())
        _initialized = True
        logger.info("observability_initialized", tracing_enabled=False)
        return

    _tracer_provider = build_tracer_provider(settings)
    trace.set_tracer_provider(_tracer_provider)
    _initialized = True

    logger.info(
        "observability_initialized",
        tracing_enabled=True,
        service_name=settings.service_name,
        otlp_endpoint=settings.otlp_endpoint,
        console_export=settings.console_export,
        sample_rate=settings.sample_rate,
    )


def shutdown_observability() -> None:
    """Shutdown the tracer provider and flush any pending spans.

    This should be called during application shutdown to ensure all
    spans are exported before the process exits.
    """
    global _tracer_provider, _initialized

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None

    _initialized = False


def _configure_structlog(log_level: str) -> None:
    """Configure structlog with trace context and context-var metadata."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            add_trace_context,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        level=log_level,
    )
