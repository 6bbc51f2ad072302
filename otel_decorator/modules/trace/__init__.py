"""Tracing decorator with span attributes resolved from call bindings."""

from otel_decorator.modules.trace.attributes import (
    get_field,
    resolve,
    to_attribute_value,
)
from otel_decorator.modules.trace.decorator import record_locals, trace
from otel_decorator.modules.trace.exceptions import (
    DuplicateAttributePathError,
    InvalidAttributePathError,
    InvalidIncludeError,
    InvalidSpanNameError,
    OTelDecoratorError,
    TraceConfigurationError,
)
from otel_decorator.modules.trace.schemas import MISSING, RESULT, AttributePath
from otel_decorator.modules.trace.validator import parse_attribute_path, validate

__all__ = [
    "MISSING",
    "RESULT",
    "AttributePath",
    "DuplicateAttributePathError",
    "InvalidAttributePathError",
    "InvalidIncludeError",
    "InvalidSpanNameError",
    "OTelDecoratorError",
    "TraceConfigurationError",
    "get_field",
    "parse_attribute_path",
    "record_locals",
    "resolve",
    "to_attribute_value",
    "trace",
    "validate",
]
