"""Query executor — Runs searches for a record kind and hydrates the hits."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from docbridge.core.hydrator import Hydrator
from docbridge.core.mapper import DocumentMapper
from docbridge.models.result import ResultSet
from docbridge.records.searchable import Searchable
from docbridge.transport.base import SearchTransport

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Searchable)


class QueryExecutor:
    """Issues search requests against a kind's index locator.

    Attributes:
        transport: Search transport used for every call.
        mapper: Resolves the index locator.
        hydrator: Converts hits into records.
    """

    def __init__(self, transport: SearchTransport, mapper: DocumentMapper, hydrator: Hydrator) -> None:
        self.transport = transport
        self.mapper = mapper
        self.hydrator = hydrator

    def search_by_query(
        self,
        record_cls: type[R],
        query: dict[str, Any] | None = None,
        size: int | None = None,
        offset: int | None = None,
    ) -> ResultSet[R]:
        """Search with a caller-supplied query object.

        Args:
            record_cls: The record kind to search and hydrate.
            query: Query DSL placed under ``body.query`` as-is.
            size: Page size, only sent when given.
            offset: Number of hits to skip (``from``), only sent when given.
        """
        body: dict[str, Any] = {"query": query if query is not None else {}}
        if size is not None:
            body["size"] = size
        if offset is not None:
            body["from"] = offset
        return self._execute(record_cls, body)

    def search(self, record_cls: type[R], term: str | None = None) -> ResultSet[R]:
        """Free-text search across all fields.

        The term is forwarded even when empty or ``None``; the engine
        decides what that means.
        """
        return self._execute(record_cls, {"query": {"match": {"_all": term}}})

    def _execute(self, record_cls: type[R], body: dict[str, Any]) -> ResultSet[R]:
        params = self.mapper.locator_params(record_cls)
        params["body"] = body

        logger.debug("Searching %s/%s", params["index"], params["type"])
        response = self.transport.search(**params)
        return self.hydrator.hydrate_response(record_cls, response)
