"""docbridge — Keep search-index documents consistent with application records.

Quick start::

    from docbridge import SearchBridge, Settings

    bridge = SearchBridge.from_settings(Settings())
    bridge.add_to_index(product)
    results = bridge.search(Product, "red shoes")
"""

from docbridge.config.settings import Settings
from docbridge.core.bridge import SearchBridge
from docbridge.exceptions import (
    BulkOperationError,
    DocBridgeError,
    DocumentNotPersistedError,
    MalformedHitError,
    RecordNotPersistedError,
)
from docbridge.models.document import IndexLocator, SearchHitMetadata
from docbridge.models.result import ResultSet
from docbridge.records.searchable import Searchable
from docbridge.transport.exceptions import TransportError

__version__ = "0.1.0"

__all__ = [
    "BulkOperationError",
    "DocBridgeError",
    "DocumentNotPersistedError",
    "IndexLocator",
    "MalformedHitError",
    "RecordNotPersistedError",
    "ResultSet",
    "SearchBridge",
    "SearchHitMetadata",
    "Searchable",
    "Settings",
    "TransportError",
]
