"""Searchable records — The capability a record kind implements to be indexed.

The bridge never owns persistence. A record kind plugs in by subclassing
``Searchable`` and supplying:
  1. Identity and existence (``primary_key``, ``exists``)
  2. Its attribute snapshot and table name
  3. A way to load all persisted rows (``all_persisted``)
  4. Construction paths: ``new_instance`` for normal use and
     ``set_raw_attributes`` for loading data without setter side effects

Everything else (document body, routing, mapping properties, search
metadata) has a working default that kinds may override.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, ClassVar, Self

from docbridge.models.document import SearchHitMetadata


class Searchable(ABC):
    """Abstract base class for records that can be synced to a search index.

    Class attributes:
        index_name: Index for this kind. ``None`` defers to configuration.
        mapping_properties: Per-field property definitions for the mapping.
        uses_timestamps_in_index: Whether timestamp fields go into the document.
        timestamp_fields: Attribute names treated as timestamps.

    Example:
        >>> class Product(Searchable):
        ...     mapping_properties = {"name": {"type": "string"}}
        ...
        ...     @classmethod
        ...     def table_name(cls) -> str:
        ...         return "products"
        ...     ...
    """

    index_name: ClassVar[str | None] = None
    mapping_properties: ClassVar[dict[str, Any]] = {}
    uses_timestamps_in_index: bool = True
    timestamp_fields: ClassVar[tuple[str, ...]] = ("created_at", "updated_at")

    _search_metadata: SearchHitMetadata | None = None

    # ── Record adapter contract ──────────────────────────────────────────

    @classmethod
    @abstractmethod
    def table_name(cls) -> str:
        """Table or collection name; used as the index type name."""

    @abstractmethod
    def primary_key(self) -> Any:
        """Primary key, or ``None`` when none has been assigned."""

    @abstractmethod
    def attributes_snapshot(self) -> dict[str, Any]:
        """Current in-memory attributes, keyed by field name."""

    @abstractmethod
    def exists(self) -> bool:
        """Whether the record is persisted."""

    @classmethod
    @abstractmethod
    def all_persisted(cls, columns: Sequence[str] | None = None) -> Iterable[Self]:
        """Load every persisted record of this kind.

        Args:
            columns: Columns to load. ``None`` loads all of them.
        """

    @classmethod
    @abstractmethod
    def new_instance(cls, attributes: Mapping[str, Any] | None = None, exists: bool = False) -> Self:
        """Create an instance through the normal construction path."""

    @abstractmethod
    def set_raw_attributes(self, attributes: Mapping[str, Any], sync: bool = False) -> None:
        """Replace attributes without casting, validation or dirty tracking.

        Args:
            attributes: The new attributes.
            sync: Mark the attributes as matching their origin (nothing dirty).
        """

    # ── Construction from the index ──────────────────────────────────────

    @classmethod
    def from_search_source(cls, source: Mapping[str, Any]) -> Self:
        """Build an instance from a document's ``_source``.

        This is the "loaded from an external source" path: attributes are
        set raw, so setters that assume a database origin do not run.
        """
        instance = cls.new_instance({}, exists=True)
        instance.set_raw_attributes(dict(source), sync=True)
        return instance

    # ── Document hooks ───────────────────────────────────────────────────

    def document_body(self) -> dict[str, Any]:
        """Data the index stores for this record.

        Defaults to the full attribute snapshot, minus timestamp fields when
        ``uses_timestamps_in_index`` is off.
        """
        body = dict(self.attributes_snapshot())
        if not self.uses_timestamps_in_index:
            for field in self.timestamp_fields:
                body.pop(field, None)
        return body

    def document_routing(self) -> str | None:
        """Routing key for this record's document. ``None`` means default routing."""
        return None

    def use_timestamps_in_index(self) -> None:
        self.uses_timestamps_in_index = True

    def dont_use_timestamps_in_index(self) -> None:
        self.uses_timestamps_in_index = False

    @classmethod
    def get_mapping_properties(cls) -> dict[str, Any]:
        return dict(cls.mapping_properties)

    @classmethod
    def set_mapping_properties(cls, properties: dict[str, Any]) -> None:
        cls.mapping_properties = dict(properties)

    # ── Search metadata ──────────────────────────────────────────────────

    def attach_search_metadata(self, metadata: SearchHitMetadata) -> None:
        self._search_metadata = metadata

    @property
    def search_metadata(self) -> SearchHitMetadata | None:
        return self._search_metadata

    def is_document(self) -> bool:
        """Whether this instance was built from a search hit rather than storage."""
        return self._search_metadata is not None and self._search_metadata.is_document

    def document_score(self) -> float | None:
        return self._search_metadata.score if self._search_metadata else None

    def document_version(self) -> int | None:
        """Document version from the hit; ``None`` when the hit carried none."""
        return self._search_metadata.version if self._search_metadata else None
