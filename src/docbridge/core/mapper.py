"""Document mapper — Derives document identity, body, routing and location.

A document's id always mirrors its record's primary key, even when that key
is not auto-incrementing, so indexing, fetching and deleting address the
same entity.
"""

from __future__ import annotations

from typing import Any

from docbridge.config.settings import DEFAULT_INDEX_NAME
from docbridge.exceptions import RecordNotPersistedError
from docbridge.models.document import IndexLocator
from docbridge.records.searchable import Searchable


class DocumentMapper:
    """Maps records to documents and record kinds to index locators.

    Args:
        default_index: Configured index name. ``None`` falls back to
            ``"default"``. A kind's own ``index_name`` takes precedence.
    """

    def __init__(self, default_index: str | None = None) -> None:
        self._default_index = default_index

    def index_name(self, record_cls: type[Searchable]) -> str:
        return record_cls.index_name or self._default_index or DEFAULT_INDEX_NAME

    def type_name(self, record_cls: type[Searchable]) -> str:
        return record_cls.table_name()

    def index_locator(self, record_cls: type[Searchable]) -> IndexLocator:
        return IndexLocator(index=self.index_name(record_cls), type=self.type_name(record_cls))

    def locator_params(self, record_cls: type[Searchable]) -> dict[str, Any]:
        """Return ``{index, type}`` request parameters for a record kind."""
        return self.index_locator(record_cls).as_params()

    def basic_params(self, record: Searchable, include_id: bool = True) -> dict[str, Any]:
        """Return ``{index, type[, id]}`` for a record.

        The id is included when ``include_id`` is set and the record has a
        primary key.
        """
        params = self.locator_params(type(record))
        key = record.primary_key()
        if include_id and key is not None:
            params["id"] = key
        return params

    def document_params(self, record: Searchable) -> dict[str, Any]:
        """Return the parameters addressing one existing document.

        Raises:
            RecordNotPersistedError: If the record has no primary key.
        """
        params = self.locator_params(type(record))
        params["id"] = self.document_identity(record)
        routing = self.document_routing(record)
        if routing is not None:
            params["routing"] = routing
        return params

    def document_identity(self, record: Searchable) -> Any:
        """Return the document id for a record, which is its primary key.

        Raises:
            RecordNotPersistedError: If the record has no primary key.
        """
        key = record.primary_key()
        if key is None:
            raise RecordNotPersistedError(
                f"{type(record).__name__} has no primary key; it has no document in the index."
            )
        return key

    def document_body(self, record: Searchable) -> dict[str, Any]:
        return record.document_body()

    def document_routing(self, record: Searchable) -> str | None:
        return record.document_routing()
