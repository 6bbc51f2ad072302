"""Validation of @trace configuration.

Runs once when the decorator is applied. Every check raises a
TraceConfigurationError subclass.
"""

from collections.abc import Sequence
from typing import Any

from otel_decorator.modules.trace.exceptions import (
    DuplicateAttributePathError,
    InvalidAttributePathError,
    InvalidIncludeError,
    InvalidSpanNameError,
)
from otel_decorator.modules.trace.schemas import PATH_SEPARATOR, AttributePath


def validate(span_name: Any, include: Any) -> tuple[AttributePath, ...]:
    """Validate a span name and its attribute paths.

    Args:
        span_name: Name of the span to create.
        include: List or tuple of attribute path specs. Each spec is a
            single identifier ("arg1", "result"), a dotted string
            ("arg2.count") or a non-empty sequence of identifiers
            (["arg2", "count"]).

    Returns:
        The normalized attribute paths, in configuration order.

    Raises:
        InvalidSpanNameError: If span_name is not a non-blank string.
        InvalidIncludeError: If include is not a list or tuple.
        InvalidAttributePathError: If an entry is malformed.
        DuplicateAttributePathError: If two entries render to the same name.
    """
    validate_span_name(span_name)

    if not isinstance(include, list | tuple):
        raise InvalidIncludeError(include)

    paths: list[AttributePath] = []
    seen: set[str] = set()

    for spec in include:
        path = parse_attribute_path(spec)
        if path.name in seen:
            raise DuplicateAttributePathError(spec, path.name)
        seen.add(path.name)
        paths.append(path)

    return tuple(paths)


def validate_span_name(span_name: Any) -> None:
    """Ensure the span name is a non-blank string."""
    if not isinstance(span_name, str) or not span_name.strip():
        raise InvalidSpanNameError(span_name)


def parse_attribute_path(spec: Any) -> AttributePath:
    """Normalize one attribute path spec into an AttributePath.

    A string is split on "." so that "arg2.count" and ["arg2", "count"]
    describe the same path.
    """
    if isinstance(spec, str):
        segments = spec.split(PATH_SEPARATOR)
    elif isinstance(spec, Sequence) and not isinstance(spec, bytes | bytearray):
        if not spec:
            raise InvalidAttributePathError(spec, "path must not be empty")
        segments = list(spec)
        for segment in segments:
            if isinstance(segment, str) and PATH_SEPARATOR in segment:
                raise InvalidAttributePathError(
                    spec, f"segment {segment!r} must not contain {PATH_SEPARATOR!r}"
                )
    else:
        raise InvalidAttributePathError(
            spec, "expected an identifier or a sequence of identifiers"
        )

    for segment in segments:
        _check_segment(spec, segment)

    return AttributePath(tuple(segments))


def _check_segment(spec: Any, segment: Any) -> None:
    if not isinstance(segment, str):
        raise InvalidAttributePathError(
            spec, f"segment {segment!r} is not a string"
        )
    if not segment:
        raise InvalidAttributePathError(spec, "segments must not be empty")
    if not segment.isprintable() or any(char.isspace() for char in segment):
        raise InvalidAttributePathError(
            spec, f"segment {segment!r} contains whitespace or unprintable characters"
        )
