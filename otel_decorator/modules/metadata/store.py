"""Keyed stores for structured-logging metadata."""

from typing import Any, Protocol

import structlog


class MetadataStore(Protocol):
    """Protocol for logger metadata stores.

    A store maps a metadata key to a value. Values written to the default
    store show up on every log event emitted from the same context.
    """

    def get_all(self) -> dict[str, Any]:
        """Return a copy of all metadata."""
        ...

    def get(self, key: str, default: Any = None) -> Any:
        """Return the metadata stored under key, or default."""
        ...

    def put(self, key: str, value: Any) -> None:
        """Replace the metadata stored under key."""
        ...


class ContextVarsMetadataStore:
    """Metadata store backed by structlog's context variables.

    Anything put here is merged into log events by
    ``structlog.contextvars.merge_contextvars``, scoped to the current
    thread or asyncio task.
    """

    def get_all(self) -> dict[str, Any]:
        return structlog.contextvars.get_contextvars()

    def get(self, key: str, default: Any = None) -> Any:
        return structlog.contextvars.get_contextvars().get(key, default)

    def put(self, key: str, value: Any) -> None:
        structlog.contextvars.bind_contextvars(**{key: value})


class InMemoryMetadataStore:
    """Metadata store backed by a plain dict.

    Useful for tests, or to collect metadata explicitly and bind it to a
    logger with ``logger.bind(**store.get_all())``.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get_all(self) -> dict[str, Any]:
        return dict(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = value
