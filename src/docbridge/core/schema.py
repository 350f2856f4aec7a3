"""Index and schema manager — Index creation and mapping lifecycle.

Mappings are replaced wholesale, never merged: ``rebuild_mapping`` is a
delete followed by a put. The two calls are not transactional; if the put
fails after the delete went through, the type is left without a mapping and
the error reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from docbridge.core.mapper import DocumentMapper
from docbridge.records.searchable import Searchable
from docbridge.transport.base import SearchTransport

logger = logging.getLogger(__name__)


class IndexManager:
    """Provisions indices and mappings for record kinds.

    Attributes:
        transport: Search transport used for every call.
        mapper: Resolves index and type names.
    """

    def __init__(self, transport: SearchTransport, mapper: DocumentMapper) -> None:
        self.transport = transport
        self.mapper = mapper

    # ── Indices ──────────────────────────────────────────────────────────

    def create_index(
        self,
        record_cls: type[Searchable],
        shards: int | None = None,
        replicas: int | None = None,
    ) -> dict[str, Any]:
        """Create the kind's index.

        Shard and replica counts are only sent when given, so the engine's
        own defaults apply otherwise.
        """
        params: dict[str, Any] = {"index": self.mapper.index_name(record_cls)}

        settings: dict[str, int] = {}
        if shards:
            settings["number_of_shards"] = shards
        if replicas:
            settings["number_of_replicas"] = replicas
        if settings:
            params["body"] = {"settings": settings}

        response = self.transport.indices.create(**params)
        logger.info("Created index '%s' (settings=%s)", params["index"], settings or "engine defaults")
        return response

    def index_exists(self, record_cls: type[Searchable]) -> bool:
        return self.transport.indices.exists(index=self.mapper.index_name(record_cls))

    def delete_index(self, record_cls: type[Searchable]) -> dict[str, Any]:
        index = self.mapper.index_name(record_cls)
        response = self.transport.indices.delete(index=index)
        logger.info("Deleted index '%s'", index)
        return response

    # ── Mappings ─────────────────────────────────────────────────────────

    def get_mapping(self, record_cls: type[Searchable]) -> dict[str, Any]:
        """Return the kind's mapping, or an empty dict when there is none."""
        return self.transport.indices.get_mapping(**self.mapper.locator_params(record_cls))

    def mapping_exists(self, record_cls: type[Searchable]) -> bool:
        return bool(self.get_mapping(record_cls))

    def put_mapping(self, record_cls: type[Searchable], ignore_conflicts: bool = False) -> dict[str, Any]:
        """Submit the kind's declared mapping properties.

        Args:
            record_cls: The record kind.
            ignore_conflicts: Passed to the engine as-is.
        """
        params = self.mapper.locator_params(record_cls)
        params["body"] = {
            params["type"]: {
                "_source": {"enabled": True},
                "properties": record_cls.get_mapping_properties(),
            }
        }

        response = self.transport.indices.put_mapping(**params, ignore_conflicts=ignore_conflicts)
        logger.info("Put mapping for %s/%s", params["index"], params["type"])
        return response

    def delete_mapping(self, record_cls: type[Searchable]) -> dict[str, Any]:
        params = self.mapper.locator_params(record_cls)
        response = self.transport.indices.delete_mapping(**params)
        logger.info("Deleted mapping for %s/%s", params["index"], params["type"])
        return response

    def rebuild_mapping(self, record_cls: type[Searchable]) -> dict[str, Any]:
        """Delete the kind's mapping if it exists, then put it again."""
        if self.mapping_exists(record_cls):
            self.delete_mapping(record_cls)

        # The slate is clean, so conflicts are checked.
        return self.put_mapping(record_cls, ignore_conflicts=False)

    def type_exists(self, record_cls: type[Searchable]) -> bool:
        return self.transport.indices.exists_type(**self.mapper.locator_params(record_cls))
