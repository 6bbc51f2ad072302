"""Trace decorator for OpenTelemetry spans with attributes from call bindings."""

from otel_decorator.config import Settings, get_settings
from otel_decorator.infrastructure.observability import (
    add_span_attributes,
    add_trace_context,
    get_current_span_id,
    get_current_trace_id,
    get_tracer,
    init_observability,
    shutdown_observability,
)
from otel_decorator.modules.metadata import (
    ContextVarsMetadataStore,
    InMemoryMetadataStore,
    MetadataStore,
    add_metadata,
    add_metadata_from_list,
)
from otel_decorator.modules.trace import (
    RESULT,
    AttributePath,
    DuplicateAttributePathError,
    InvalidAttributePathError,
    InvalidIncludeError,
    InvalidSpanNameError,
    OTelDecoratorError,
    TraceConfigurationError,
    get_field,
    record_locals,
    resolve,
    trace,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "RESULT",
    "AttributePath",
    "ContextVarsMetadataStore",
    "DuplicateAttributePathError",
    "InMemoryMetadataStore",
    "InvalidAttributePathError",
    "InvalidIncludeError",
    "InvalidSpanNameError",
    "MetadataStore",
    "OTelDecoratorError",
    "Settings",
    "TraceConfigurationError",
    "__version__",
    "add_metadata",
    "add_metadata_from_list",
    "add_span_attributes",
    "add_trace_context",
    "get_current_span_id",
    "get_current_trace_id",
    "get_field",
    "get_settings",
    "get_tracer",
    "init_observability",
    "record_locals",
    "resolve",
    "shutdown_observability",
    "trace",
    "validate",
]
