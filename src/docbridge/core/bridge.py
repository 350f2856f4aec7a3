"""Search bridge — One object wiring the mapper, schema, sync and query parts.

Application code usually only needs this class::

    bridge = SearchBridge.from_settings(Settings())
    bridge.put_mapping(Product)
    bridge.add_to_index(product)
    for hit in bridge.search(Product, "red shoes"):
        print(hit.name, hit.document_score())
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from docbridge.core.hydrator import Hydrator
from docbridge.core.mapper import DocumentMapper
from docbridge.core.query import QueryExecutor
from docbridge.core.schema import IndexManager
from docbridge.core.sync import DocumentSync
from docbridge.records.searchable import Searchable
from docbridge.transport.http import HttpSearchTransport

if TYPE_CHECKING:
    from docbridge.config.settings import Settings
    from docbridge.models.result import ResultSet
    from docbridge.transport.base import SearchTransport

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Searchable)


class SearchBridge:
    """Facade over the document mapping and hydration components.

    Every operation is a synchronous request/response against the
    transport. Nothing is cached and nothing is locked: callers serialize
    access to a given record and sequence mapping changes against writes.

    Attributes:
        transport: The search transport.
        mapper: Document identity, body and locator derivation.
        indices: Index and mapping lifecycle.
        documents: Single-document and bulk sync.
        queries: Search execution.
        hydrator: Hit to record conversion.
    """

    def __init__(self, transport: SearchTransport, default_index: str | None = None) -> None:
        self.transport = transport
        self.mapper = DocumentMapper(default_index=default_index)
        self.hydrator = Hydrator()
        self.indices = IndexManager(transport, self.mapper)
        self.documents = DocumentSync(transport, self.mapper)
        self.queries = QueryExecutor(transport, self.mapper, self.hydrator)

    @classmethod
    def from_settings(cls, settings: Settings, transport: SearchTransport | None = None) -> SearchBridge:
        """Build a bridge from settings, creating an HTTP transport unless one is given."""
        if transport is None:
            transport = HttpSearchTransport.from_settings(settings.transport)
            logger.info("Search bridge using %s", settings.transport.hosts[0])
        return cls(transport, default_index=settings.default_index)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> SearchBridge:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ── Locator ──────────────────────────────────────────────────────────

    def get_index_name(self, record_cls: type[Searchable]) -> str:
        return self.mapper.index_name(record_cls)

    def get_type_name(self, record_cls: type[Searchable]) -> str:
        return self.mapper.type_name(record_cls)

    def get_basic_params(self, record: Searchable, include_id: bool = True) -> dict[str, Any]:
        return self.mapper.basic_params(record, include_id=include_id)

    # ── Schema ───────────────────────────────────────────────────────────

    def create_index(
        self,
        record_cls: type[Searchable],
        shards: int | None = None,
        replicas: int | None = None,
    ) -> dict[str, Any]:
        return self.indices.create_index(record_cls, shards=shards, replicas=replicas)

    def index_exists(self, record_cls: type[Searchable]) -> bool:
        return self.indices.index_exists(record_cls)

    def delete_index(self, record_cls: type[Searchable]) -> dict[str, Any]:
        return self.indices.delete_index(record_cls)

    def mapping_exists(self, record_cls: type[Searchable]) -> bool:
        return self.indices.mapping_exists(record_cls)

    def get_mapping(self, record_cls: type[Searchable]) -> dict[str, Any]:
        return self.indices.get_mapping(record_cls)

    def put_mapping(self, record_cls: type[Searchable], ignore_conflicts: bool = False) -> dict[str, Any]:
        return self.indices.put_mapping(record_cls, ignore_conflicts=ignore_conflicts)

    def delete_mapping(self, record_cls: type[Searchable]) -> dict[str, Any]:
        return self.indices.delete_mapping(record_cls)

    def rebuild_mapping(self, record_cls: type[Searchable]) -> dict[str, Any]:
        return self.indices.rebuild_mapping(record_cls)

    def type_exists(self, record_cls: type[Searchable]) -> bool:
        return self.indices.type_exists(record_cls)

    # ── Documents ────────────────────────────────────────────────────────

    def add_to_index(self, record: Searchable) -> dict[str, Any]:
        return self.documents.add_to_index(record)

    def remove_from_index(self, record: Searchable) -> dict[str, Any]:
        return self.documents.remove_from_index(record)

    def get_indexed_document(self, record: Searchable) -> dict[str, Any]:
        return self.documents.get_indexed_document(record)

    def add_all_to_index(
        self,
        record_cls: type[Searchable],
        columns: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        return self.documents.add_all_to_index(record_cls, columns=columns)

    def add_many_to_index(self, records: Iterable[Searchable]) -> list[dict[str, Any]]:
        return self.documents.add_many_to_index(records)

    def remove_many_from_index(self, records: Iterable[Searchable]) -> list[dict[str, Any]]:
        return self.documents.remove_many_from_index(records)

    def reindex(self, records: Iterable[Searchable]) -> list[dict[str, Any]]:
        return self.documents.reindex(records)

    # ── Queries ──────────────────────────────────────────────────────────

    def search_by_query(
        self,
        record_cls: type[R],
        query: dict[str, Any] | None = None,
        size: int | None = None,
        offset: int | None = None,
    ) -> ResultSet[R]:
        return self.queries.search_by_query(record_cls, query, size=size, offset=offset)

    def search(self, record_cls: type[R], term: str | None = None) -> ResultSet[R]:
        return self.queries.search(record_cls, term)

    def new_from_hit(self, record_cls: type[R], hit: dict[str, Any]) -> R:
        return self.hydrator.hydrate_one(record_cls, hit)
