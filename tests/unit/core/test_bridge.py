"""Tests for the search bridge facade."""

from __future__ import annotations

from unittest.mock import MagicMock

from docbridge.config.settings import Settings
from docbridge.core.bridge import SearchBridge
from docbridge.transport.http import HttpSearchTransport
from fakes import Product


class TestConstruction:
    def test_from_settings_builds_http_transport(self, settings: Settings) -> None:
        bridge = SearchBridge.from_settings(settings)
        try:
            assert isinstance(bridge.transport, HttpSearchTransport)
        finally:
            bridge.close()

    def test_from_settings_uses_configured_index(self, transport: MagicMock) -> None:
        settings = Settings(_env_file=None, default_index="shop")  # type: ignore[call-arg]
        bridge = SearchBridge.from_settings(settings, transport=transport)
        assert bridge.get_index_name(Product) == "shop"

    def test_context_manager_closes_transport(self, transport: MagicMock) -> None:
        with SearchBridge(transport) as bridge:
            assert bridge.transport is transport
        transport.close.assert_called_once()


class TestProductsScenario:
    def test_locator_and_params(self, bridge: SearchBridge, product: Product) -> None:
        assert bridge.get_index_name(Product) == "default"
        assert bridge.get_type_name(Product) == "products"
        assert bridge.get_basic_params(product) == {"index": "default", "type": "products", "id": 42}

    def test_search_products(self, bridge: SearchBridge, transport: MagicMock) -> None:
        transport.search.return_value = {
            "hits": {
                "total": 2,
                "hits": [
                    {"_score": 1.2, "_source": {"id": 1, "name": "Red Shoes"}},
                    {"_score": 0.4, "_source": {"id": 9, "name": "Red Laces"}, "_version": 2},
                ],
            }
        }

        results = bridge.search(Product, "red shoes")

        transport.search.assert_called_once_with(
            index="default",
            type="products",
            body={"query": {"match": {"_all": "red shoes"}}},
        )
        assert [r.get("name") for r in results] == ["Red Shoes", "Red Laces"]
        assert [r.document_version() for r in results] == [None, 2]

    def test_index_then_fetch_same_id(self, bridge: SearchBridge, transport: MagicMock, product: Product) -> None:
        bridge.add_to_index(product)
        bridge.get_indexed_document(product)

        assert transport.index.call_args.kwargs["id"] == transport.get.call_args.kwargs["id"] == 42


class TestDelegation:
    def test_schema_operations(self, bridge: SearchBridge, transport: MagicMock) -> None:
        transport.indices.exists.return_value = True
        transport.indices.exists_type.return_value = True

        bridge.create_index(Product, shards=1)
        assert bridge.index_exists(Product) is True
        assert bridge.type_exists(Product) is True
        assert bridge.mapping_exists(Product) is False
        bridge.put_mapping(Product, ignore_conflicts=True)
        bridge.rebuild_mapping(Product)
        bridge.delete_mapping(Product)
        bridge.delete_index(Product)

        transport.indices.create.assert_called_once()
        assert transport.indices.put_mapping.call_count == 2
        transport.indices.delete_mapping.assert_called_once()
        transport.indices.delete.assert_called_once_with(index="default")

    def test_document_operations(self, bridge: SearchBridge, transport: MagicMock, stored_products: list) -> None:
        records = Product.all_persisted()

        assert len(bridge.add_all_to_index(Product)) == 3
        assert len(bridge.add_many_to_index(records)) == 3
        assert len(bridge.remove_many_from_index(records)) == 3
        assert len(bridge.reindex(records)) == 3
        bridge.remove_from_index(records[0])

        assert transport.index.call_count == 9
        assert transport.delete.call_count == 7

    def test_search_by_query(self, bridge: SearchBridge, transport: MagicMock) -> None:
        bridge.search_by_query(Product, {"term": {"name": "hat"}}, size=5)
        assert transport.search.call_args.kwargs["body"] == {"query": {"term": {"name": "hat"}}, "size": 5}

    def test_new_from_hit(self, bridge: SearchBridge, sample_hit: dict) -> None:
        record = bridge.new_from_hit(Product, sample_hit)
        assert record.is_document() is True
        assert record.document_score() == 0.83
