"""Schemas for the trace module."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias

from opentelemetry.util.types import AttributeValue

# Root identifier bound to the decorated function's return value
RESULT: Final = "result"

# Separator used to render a nested path as a single attribute name
PATH_SEPARATOR: Final = "."

# What callers may pass in `include=[...]`: "arg", "arg.field" or ["arg", "field"]
AttributePathSpec: TypeAlias = str | Sequence[str]

ResolvedAttributes: TypeAlias = dict[str, AttributeValue]


class _Missing:
    """Marker for a value that is not available."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


@dataclass(frozen=True)
class AttributePath:
    """A validated attribute path.

    The first segment names a binding (an argument, a recorded local or
    the result sentinel); the remaining segments are field lookups into
    that value.
    """

    segments: tuple[str, ...]

    @property
    def root(self) -> str:
        return self.segments[0]

    @property
    def fields(self) -> tuple[str, ...]:
        return self.segments[1:]

    @property
    def name(self) -> str:
        """The span attribute name, e.g. "arg2.count"."""
        return PATH_SEPARATOR.join(self.segments)

    @property
    def is_result(self) -> bool:
        return self.root == RESULT
