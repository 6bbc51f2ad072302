"""Span helpers for code that is not wrapped with @trace."""

from opentelemetry import trace
from opentelemetry.trace import Tracer
from opentelemetry.util.types import AttributeValue


def get_tracer(name: str) -> Tracer:
    """Get a tracer for the given instrumentation scope.

    Args:
        name: Scope name, typically __name__.

    Returns:
        A Tracer instance for creating spans. Before a tracer provider is
        installed this is a proxy that picks the provider up later.
    """
    return trace.get_tracer(name)


def add_span_attributes(attributes: dict[str, AttributeValue]) -> None:
    """Add attributes to the current span.

    Args:
        attributes: Key-value pairs to add to the span.
    """
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)


def get_current_trace_id() -> str | None:
    """Get the current trace ID as a hex string.

    Returns:
        The trace ID as a 32-character hex string, or None if no active trace.
    """
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        return format(span_context.trace_id, "032x")
    return None


def get_current_span_id() -> str | None:
    """Get the current span ID as a hex string.

    Returns:
        The span ID as a 16-character hex string, or None if no active span.
    """
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        return format(span_context.span_id, "016x")
    return None
