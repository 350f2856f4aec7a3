"""Tests for index and mapping management."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from docbridge.core.mapper import DocumentMapper
from docbridge.core.schema import IndexManager
from docbridge.transport.exceptions import RequestError
from fakes import Product


@pytest.fixture
def manager(transport: MagicMock) -> IndexManager:
    return IndexManager(transport, DocumentMapper())


# ── Indices ──────────────────────────────────────────────────────────────────


class TestCreateIndex:
    def test_without_settings_sends_no_body(self, manager: IndexManager, transport: MagicMock) -> None:
        manager.create_index(Product)
        transport.indices.create.assert_called_once_with(index="default")

    def test_with_shards_and_replicas(self, manager: IndexManager, transport: MagicMock) -> None:
        manager.create_index(Product, shards=3, replicas=2)
        transport.indices.create.assert_called_once_with(
            index="default",
            body={"settings": {"number_of_shards": 3, "number_of_replicas": 2}},
        )

    def test_only_given_settings_are_sent(self, manager: IndexManager, transport: MagicMock) -> None:
        manager.create_index(Product, replicas=1)
        transport.indices.create.assert_called_once_with(
            index="default",
            body={"settings": {"number_of_replicas": 1}},
        )

    def test_zero_counts_are_not_sent(self, manager: IndexManager, transport: MagicMock) -> None:
        manager.create_index(Product, shards=0, replicas=0)
        transport.indices.create.assert_called_once_with(index="default")

    def test_returns_transport_response(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.create.return_value = {"acknowledged": True}
        assert manager.create_index(Product) == {"acknowledged": True}


class TestIndexLifecycle:
    def test_index_exists(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.exists.return_value = True
        assert manager.index_exists(Product) is True
        transport.indices.exists.assert_called_once_with(index="default")

    def test_delete_index(self, manager: IndexManager, transport: MagicMock) -> None:
        manager.delete_index(Product)
        transport.indices.delete.assert_called_once_with(index="default")


# ── Mappings ─────────────────────────────────────────────────────────────────


class TestMapping:
    def test_get_mapping(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.get_mapping.return_value = {"default": {"mappings": {"products": {}}}}
        assert manager.get_mapping(Product) == {"default": {"mappings": {"products": {}}}}
        transport.indices.get_mapping.assert_called_once_with(index="default", type="products")

    def test_mapping_exists_when_non_empty(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.get_mapping.return_value = {"default": {"mappings": {"products": {}}}}
        assert manager.mapping_exists(Product) is True

    def test_mapping_absent_when_empty(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.get_mapping.return_value = {}
        assert manager.mapping_exists(Product) is False

    def test_mapping_fetch_failure_is_not_absence(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.get_mapping.side_effect = RequestError("boom", status_code=500)
        with pytest.raises(RequestError):
            manager.mapping_exists(Product)

    def test_put_mapping_body(self, manager: IndexManager, transport: MagicMock) -> None:
        manager.put_mapping(Product)
        transport.indices.put_mapping.assert_called_once_with(
            index="default",
            type="products",
            body={
                "products": {
                    "_source": {"enabled": True},
                    "properties": {
                        "name": {"type": "string", "analyzer": "standard"},
                        "price": {"type": "double"},
                    },
                }
            },
            ignore_conflicts=False,
        )

    def test_put_mapping_passes_ignore_conflicts(self, manager: IndexManager, transport: MagicMock) -> None:
        manager.put_mapping(Product, ignore_conflicts=True)
        assert transport.indices.put_mapping.call_args.kwargs["ignore_conflicts"] is True

    def test_delete_mapping(self, manager: IndexManager, transport: MagicMock) -> None:
        manager.delete_mapping(Product)
        transport.indices.delete_mapping.assert_called_once_with(index="default", type="products")

    def test_type_exists(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.exists_type.return_value = False
        assert manager.type_exists(Product) is False
        transport.indices.exists_type.assert_called_once_with(index="default", type="products")


class TestRebuildMapping:
    def test_existing_mapping_is_deleted_then_put(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.get_mapping.return_value = {"default": {"mappings": {"products": {}}}}
        manager.rebuild_mapping(Product)

        calls = [c for c in transport.indices.mock_calls if c[0] in ("delete_mapping", "put_mapping")]
        assert [c[0] for c in calls] == ["delete_mapping", "put_mapping"]
        assert transport.indices.delete_mapping.call_count == 1
        assert transport.indices.put_mapping.call_count == 1

    def test_missing_mapping_is_only_put(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.get_mapping.return_value = {}
        manager.rebuild_mapping(Product)

        transport.indices.delete_mapping.assert_not_called()
        transport.indices.put_mapping.assert_called_once()

    def test_rebuild_checks_conflicts(self, manager: IndexManager, transport: MagicMock) -> None:
        manager.rebuild_mapping(Product)
        assert transport.indices.put_mapping.call_args.kwargs["ignore_conflicts"] is False

    def test_failed_put_after_delete_propagates(self, manager: IndexManager, transport: MagicMock) -> None:
        transport.indices.get_mapping.return_value = {"default": {"mappings": {"products": {}}}}
        transport.indices.put_mapping.side_effect = RequestError("conflict", status_code=400)

        with pytest.raises(RequestError, match="conflict"):
            manager.rebuild_mapping(Product)
        transport.indices.delete_mapping.assert_called_once()
