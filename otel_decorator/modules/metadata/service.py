"""Helpers for grouping logger metadata under a single key.

Each group is a mapping stored under one metadata key, so a module can
keep its own log context, e.g. ``{"billing": {"invoice_id": 7}}``,
without clobbering other modules' keys.
"""

from collections.abc import Hashable, Mapping
from typing import Any

import structlog

from otel_decorator.modules.metadata.store import (
    ContextVarsMetadataStore,
    MetadataStore,
)

logger = structlog.get_logger()

_default_store = ContextVarsMetadataStore()


def add_metadata(
    group: str,
    key: Hashable,
    data: Any,
    *,
    store: MetadataStore | None = None,
) -> dict[Hashable, Any]:
    """Add a key to a metadata group, or update it.

    Args:
        group: Metadata key holding the group mapping.
        key: Key within the group.
        data: Value to store.
        store: Metadata store to use (defaults to structlog context vars).

    Returns:
        The merged group mapping that was written back.
    """
    if store is None:
        store = _default_store
    merged = _current_group(store, group)
    merged[key] = data
    store.put(group, merged)
    return merged


def add_metadata_from_list(
    group: str,
    metadata: Any,
    *,
    store: MetadataStore | None = None,
) -> dict[Hashable, Any] | None:
    """Merge a list of (key, data) pairs into a metadata group.

    Args:
        group: Metadata key holding the group mapping.
        metadata: List of (key, data) pairs. Anything other than a list is
            ignored.
        store: Metadata store to use (defaults to structlog context vars).

    Returns:
        The merged group mapping, or None if metadata was not a list.
    """
    if not isinstance(metadata, list):
        return None

    if store is None:
        store = _default_store
    merged = _current_group(store, group)
    for key, data in metadata:
        merged[key] = data
    store.put(group, merged)
    return merged


def _current_group(store: MetadataStore, group: str) -> dict[Hashable, Any]:
    current = store.get(group)
    if current is None:
        return {}
    if not isinstance(current, Mapping):
        logger.warning(
            "metadata_group_replaced",
            group=group,
            previous_type=type(current).__name__,
        )
        return {}
    # Copy so the previous mapping stays untouched
    return dict(current)
