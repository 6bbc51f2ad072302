"""Grouped logger metadata helpers."""

from otel_decorator.modules.metadata.service import (
    add_metadata,
    add_metadata_from_list,
)
from otel_decorator.modules.metadata.store import (
    ContextVarsMetadataStore,
    InMemoryMetadataStore,
    MetadataStore,
)

__all__ = [
    "ContextVarsMetadataStore",
    "InMemoryMetadataStore",
    "MetadataStore",
    "add_metadata",
    "add_metadata_from_list",
]
