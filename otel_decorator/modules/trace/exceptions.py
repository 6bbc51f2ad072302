"""Exceptions for trace decorator configuration."""

from typing import Any


class OTelDecoratorError(Exception):
    """Base exception for otel-decorator errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TraceConfigurationError(OTelDecoratorError, ValueError):
    """Raised when a @trace decoration is malformed.

    Raised at decoration time, so a misconfigured function never gets
    registered. Not retryable: the decoration must be fixed.
    """

    def with_target(self, target: str) -> "TraceConfigurationError":
        """Return a copy of this error with the decorated target prefixed."""
        error = type(self).__new__(type(self))
        error.__dict__.update(self.__dict__)
        OTelDecoratorError.__init__(error, f"{target} {self.message}")
        return error


class InvalidSpanNameError(TraceConfigurationError):
    """Raised when the span name is not a non-blank string."""

    def __init__(self, span_name: Any) -> None:
        self.span_name = span_name
        super().__init__(f"invalid span name: {span_name!r}")


class InvalidIncludeError(TraceConfigurationError):
    """Raised when `include` is not a list or tuple of attribute paths."""

    def __init__(self, include: Any) -> None:
        self.include = include
        super().__init__(
            f"include must be a list or tuple of attribute paths, got {include!r}"
        )


class InvalidAttributePathError(TraceConfigurationError):
    """Raised when an attribute path entry is malformed."""

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid attribute path {path!r}: {reason}")


class DuplicateAttributePathError(TraceConfigurationError):
    """Raised when two attribute paths render to the same attribute name."""

    def __init__(self, path: Any, name: str) -> None:
        self.path = path
        self.name = name
        super().__init__(f"duplicate attribute path {path!r} (renders as {name!r})")
