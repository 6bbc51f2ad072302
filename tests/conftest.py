"""Shared fixtures for otel-decorator tests."""

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

# Configure the global TracerProvider once, before any test module is imported,
# so tracers fetched at decoration time record into this exporter.
_exporter = InMemorySpanExporter()
_provider = TracerProvider()
_provider.add_span_processor(SimpleSpanProcessor(_exporter))
trace.set_tracer_provider(_provider)


@pytest.fixture(autouse=True)
def clear_spans():
    """Clear spans before and after each test."""
    _exporter.clear()
    yield
    _exporter.clear()


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """The exporter receiving every finished span."""
    return _exporter
