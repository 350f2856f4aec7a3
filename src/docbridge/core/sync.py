"""Document sync — Add, remove and fetch the documents of individual records.

Bulk helpers are plain loops over single-document calls. They are not
atomic: when one call fails, the records before it are already applied
remotely. That failure surfaces as ``BulkOperationError`` carrying the
completed responses, so "nothing to do" (an empty list) and "failed
partway" are never confused.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from docbridge.core.mapper import DocumentMapper
from docbridge.exceptions import BulkOperationError, DocBridgeError, RecordNotPersistedError
from docbridge.records.searchable import Searchable
from docbridge.transport.base import SearchTransport

logger = logging.getLogger(__name__)


class DocumentSync:
    """Keeps index documents in step with records.

    Attributes:
        transport: Search transport used for every call.
        mapper: Derives ids, bodies, routing and locators.
    """

    def __init__(self, transport: SearchTransport, mapper: DocumentMapper) -> None:
        self.transport = transport
        self.mapper = mapper

    def add_to_index(self, record: Searchable) -> dict[str, Any]:
        """Index the record's document under its primary key.

        Raises:
            RecordNotPersistedError: If the record is not persisted. No
                remote call is made.
        """
        if not record.exists():
            raise RecordNotPersistedError(f"{type(record).__name__} does not exist; persist it before indexing.")

        params = self.mapper.document_params(record)
        params["body"] = self.mapper.document_body(record)

        logger.debug("Indexing %s/%s/%s", params["index"], params["type"], params["id"])
        return self.transport.index(**params)

    def remove_from_index(self, record: Searchable) -> dict[str, Any]:
        """Delete the record's document.

        A document that is not in the index is not an error; the engine's
        not-found answer is returned like any other response.
        """
        params = self.mapper.document_params(record)
        logger.debug("Removing %s/%s/%s", params["index"], params["type"], params["id"])
        return self.transport.delete(**params)

    def get_indexed_document(self, record: Searchable) -> dict[str, Any]:
        """Fetch the record's document as stored in the index.

        Returns:
            The raw engine response; ``found`` is false when there is none.
        """
        return self.transport.get(**self.mapper.document_params(record))

    # ── Bulk ─────────────────────────────────────────────────────────────

    def add_all_to_index(
        self,
        record_cls: type[Searchable],
        columns: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Index every persisted record of a kind, one call per record."""
        return self.add_many_to_index(record_cls.all_persisted(columns))

    def add_many_to_index(self, records: Iterable[Searchable]) -> list[dict[str, Any]]:
        return self._each(records, self.add_to_index, "index")

    def remove_many_from_index(self, records: Iterable[Searchable]) -> list[dict[str, Any]]:
        return self._each(records, self.remove_from_index, "remove")

    def reindex(self, records: Iterable[Searchable]) -> list[dict[str, Any]]:
        """Remove then re-add each record's document.

        Returns:
            The add responses, one per record.
        """
        records = list(records)
        self.remove_many_from_index(records)
        return self.add_many_to_index(records)

    def _each(
        self,
        records: Iterable[Searchable],
        operation: Callable[[Searchable], dict[str, Any]],
        action: str,
    ) -> list[dict[str, Any]]:
        completed: list[dict[str, Any]] = []
        for record in records:
            try:
                completed.append(operation(record))
            except DocBridgeError as e:
                logger.warning(
                    "Bulk %s failed after %d record(s) on %s",
                    action,
                    len(completed),
                    type(record).__name__,
                )
                raise BulkOperationError(
                    f"Bulk {action} failed after {len(completed)} record(s): {e}",
                    completed=completed,
                    failed_record=record,
                ) from e
        return completed
