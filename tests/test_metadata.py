"""Tests for grouped logger metadata helpers."""

import pytest
import structlog

from otel_decorator.modules.metadata import (
    ContextVarsMetadataStore,
    InMemoryMetadataStore,
    add_metadata,
    add_metadata_from_list,
)


@pytest.fixture
def store() -> InMemoryMetadataStore:
    """Create an empty in-memory store."""
    return InMemoryMetadataStore()


@pytest.fixture
def clean_contextvars():
    """Clear structlog context variables around a test."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


class TestAddMetadata:
    """Tests for add_metadata."""

    def test_creates_group(self, store):
        """A first key should create the group mapping."""
        merged = add_metadata("billing", "invoice_id", 7, store=store)

        assert merged == {"invoice_id": 7}
        assert store.get("billing") == {"invoice_id": 7}

    def test_updates_existing_key_and_keeps_others(self, store):
        """Existing keys should be replaced without dropping siblings."""
        add_metadata("billing", "invoice_id", 7, store=store)
        add_metadata("billing", "customer", "ada", store=store)
        add_metadata("billing", "invoice_id", 8, store=store)

        assert store.get("billing") == {"invoice_id": 8, "customer": "ada"}

    def test_groups_are_independent(self, store):
        """Writing one group should not touch another."""
        add_metadata("billing", "invoice_id", 7, store=store)
        add_metadata("shipping", "carrier", "dhl", store=store)

        assert store.get_all() == {
            "billing": {"invoice_id": 7},
            "shipping": {"carrier": "dhl"},
        }

    def test_does_not_mutate_previous_mapping(self):
        """The mapping previously stored should not be changed in place."""
        original = {"invoice_id": 7}
        store = InMemoryMetadataStore({"billing": original})

        add_metadata("billing", "customer", "ada", store=store)

        assert original == {"invoice_id": 7}

    def test_replaces_non_mapping_group(self):
        """A non-mapping value under the group key should be replaced."""
        store = InMemoryMetadataStore({"billing": "oops"})

        add_metadata("billing", "invoice_id", 7, store=store)

        assert store.get("billing") == {"invoice_id": 7}


class TestAddMetadataFromList:
    """Tests for add_metadata_from_list."""

    def test_merges_pairs(self, store):
        """All pairs should be merged into the group."""
        add_metadata("billing", "invoice_id", 7, store=store)

        merged = add_metadata_from_list(
            "billing", [("customer", "ada"), ("invoice_id", 9)], store=store
        )

        assert merged == {"invoice_id": 9, "customer": "ada"}
        assert store.get("billing") == merged

    def test_empty_list_creates_empty_group(self, store):
        """An empty list should still write the (empty) group back."""
        assert add_metadata_from_list("billing", [], store=store) == {}
        assert store.get("billing") == {}

    @pytest.mark.parametrize(
        "metadata", [None, {"customer": "ada"}, ("customer", "ada"), "text"]
    )
    def test_non_list_is_noop(self, store, metadata):
        """Anything other than a list should be silently ignored."""
        assert add_metadata_from_list("billing", metadata, store=store) is None
        assert store.get_all() == {}


class TestContextVarsMetadataStore:
    """Tests for the structlog-backed default store."""

    def test_default_store_binds_contextvars(self, clean_contextvars):
        """Without a store the helpers should write structlog context vars."""
        add_metadata("billing", "invoice_id", 7)
        add_metadata_from_list("billing", [("customer", "ada")])

        assert structlog.contextvars.get_contextvars() == {
            "billing": {"invoice_id": 7, "customer": "ada"}
        }

    def test_metadata_appears_in_log_events(self, clean_contextvars):
        """Bound metadata should be merged into log events."""
        add_metadata("billing", "invoice_id", 7, store=ContextVarsMetadataStore())

        event_dict = structlog.contextvars.merge_contextvars(
            None, "info", {"event": "invoice_sent"}
        )

        assert event_dict == {"event": "invoice_sent", "billing": {"invoice_id": 7}}

    def test_get_returns_default(self, clean_contextvars):
        """Missing keys should return the default."""
        assert ContextVarsMetadataStore().get("missing", "fallback") == "fallback"

    def test_get_all_returns_copy(self, clean_contextvars):
        """get_all should return the bound context vars without exposing them."""
        store = ContextVarsMetadataStore()
        store.put("billing", {"invoice_id": 7})
        structlog.contextvars.bind_contextvars(request_id="r-1")

        snapshot = store.get_all()
        snapshot["request_id"] = "changed"

        assert store.get_all() == {"billing": {"invoice_id": 7}, "request_id": "r-1"}
