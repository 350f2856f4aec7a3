"""Hydrator — Turns raw search hits back into records.

Hydration is a pure transformation of wire data: it never reads from or
writes to the record store. Each record gets its attributes from the
hit's ``_source`` through the raw construction path, plus search metadata
(score, version, provenance) that stays outside its attributes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from docbridge.exceptions import MalformedHitError
from docbridge.models.document import SearchHitMetadata
from docbridge.models.result import ResultSet
from docbridge.records.searchable import Searchable

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Searchable)


class Hydrator:
    """Builds records and result sets from search responses."""

    def hydrate_one(self, record_cls: type[R], hit: Mapping[str, Any]) -> R:
        """Build one record from one hit.

        ``_version`` is only recorded when the hit has one, so a missing
        version stays distinguishable from version 0.

        Raises:
            MalformedHitError: If ``hit`` is not a mapping.
        """
        if not isinstance(hit, Mapping):
            raise MalformedHitError(f"Expected a hit mapping, got {type(hit).__name__}")

        source = hit.get("_source") or {}
        if not isinstance(source, Mapping):
            raise MalformedHitError(f"Hit _source must be a mapping, got {type(source).__name__}")

        record = record_cls.from_search_source(source)
        record.attach_search_metadata(
            SearchHitMetadata(
                score=hit.get("_score"),
                version=hit.get("_version"),
                is_document=True,
            )
        )
        return record

    def hydrate_many(self, record_cls: type[R], hits: Iterable[Mapping[str, Any]]) -> ResultSet[R]:
        """Build a result set from hits, keeping the engine's order."""
        results: ResultSet[R] = ResultSet()
        for hit in hits:
            results.append(self.hydrate_one(record_cls, hit))
        return results

    def hydrate_response(self, record_cls: type[R], response: Mapping[str, Any]) -> ResultSet[R]:
        """Build a result set from a full search response, keeping its metadata."""
        hits_section = response.get("hits") or {}
        hits = list(hits_section.get("hits") or [])

        results = self.hydrate_many(record_cls, hits)
        results.took = response.get("took")
        results.timed_out = bool(response.get("timed_out", False))
        results.shards = response.get("_shards") or {}
        results.total_hits = _total_hits(hits_section.get("total"))
        results.max_score = hits_section.get("max_score")
        results.hits = hits

        logger.debug(
            "Hydrated %d of %d hit(s) into %s",
            len(results),
            results.total_hits,
            record_cls.__name__,
        )
        return results


def _total_hits(total: Any) -> int:
    # Newer engines report {"value": n, "relation": "eq"} instead of n.
    if isinstance(total, Mapping):
        return int(total.get("value", 0))
    return int(total or 0)
