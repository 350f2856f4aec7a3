"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from docbridge.config.settings import Settings
from docbridge.core.bridge import SearchBridge
from docbridge.core.mapper import DocumentMapper
from docbridge.transport.base import SearchTransport
from fakes import Product


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def transport() -> MagicMock:
    """A transport double; every call returns an acknowledgement."""
    mock = MagicMock(spec=SearchTransport)
    mock.index.return_value = {"_id": "42", "created": True}
    mock.delete.return_value = {"found": True}
    mock.get.return_value = {"_id": "42", "found": True, "_source": {"id": 42}}
    mock.search.return_value = {"hits": {"total": 0, "hits": []}}
    mock.indices.get_mapping.return_value = {}
    return mock


@pytest.fixture
def mapper() -> DocumentMapper:
    return DocumentMapper()


@pytest.fixture
def bridge(transport: MagicMock) -> SearchBridge:
    return SearchBridge(transport)


@pytest.fixture
def product() -> Product:
    """A persisted product with key 42."""
    return Product({"id": 42, "name": "Red Shoes", "price": 59.9}, exists=True)


@pytest.fixture
def stored_products():
    """Populate the in-memory product table, clearing it afterwards."""
    Product.rows = [
        {"id": 1, "name": "Red Shoes", "price": 59.9},
        {"id": 2, "name": "Blue Hat", "price": 19.0},
        {"id": 3, "name": "Green Scarf", "price": 25.5},
    ]
    yield Product.rows
    Product.rows = []


@pytest.fixture
def sample_hit() -> dict[str, Any]:
    """A hit as it appears under ``hits.hits`` in a search response."""
    return {
        "_index": "default",
        "_type": "products",
        "_id": "42",
        "_score": 0.83,
        "_source": {"id": 42, "name": "Red Shoes", "price": 59.9},
    }
