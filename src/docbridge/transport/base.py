"""Base search transport — Abstract interface to the remote search engine.

The transport is the only component that talks to the network. It is
responsible for:
  1. Executing document operations (index, get, delete, search)
  2. Executing index and mapping management operations
  3. Translating engine "not found" answers into plain data
  4. Raising ``TransportError`` for everything else that goes wrong

Keyword argument names match the keys of the engine's request parameters
(``index``, ``type``, ``id``, ``body``), so a parameter dict built by the
core can be splatted straight into a call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IndicesTransport(ABC):
    """Index and mapping management calls (``transport.indices``)."""

    @abstractmethod
    def create(self, *, index: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        """Create an index, optionally with a settings body."""

    @abstractmethod
    def exists(self, *, index: str) -> bool:
        """Return whether the index exists."""

    @abstractmethod
    def delete(self, *, index: str) -> dict[str, Any]:
        """Delete an index."""

    @abstractmethod
    def get_mapping(self, *, index: str, type: str) -> dict[str, Any]:
        """Fetch the mapping of a type.

        Returns:
            The mapping structure, or an empty dict when the engine has none.
        """

    @abstractmethod
    def put_mapping(
        self,
        *,
        index: str,
        type: str,
        body: dict[str, Any],
        ignore_conflicts: bool = False,
    ) -> dict[str, Any]:
        """Submit a mapping for a type."""

    @abstractmethod
    def delete_mapping(self, *, index: str, type: str) -> dict[str, Any]:
        """Delete the mapping (and documents) of a type."""

    @abstractmethod
    def exists_type(self, *, index: str, type: str) -> bool:
        """Return whether the type exists in the index."""


class SearchTransport(ABC):
    """Abstract base class for search engine transports.

    Implementations own connection handling, timeouts and retries. The
    core never retries a call, so anything of that kind must be configured
    here.
    """

    @property
    @abstractmethod
    def indices(self) -> IndicesTransport:
        """Index and mapping management calls."""

    @abstractmethod
    def index(
        self,
        *,
        index: str,
        type: str,
        id: Any,
        body: dict[str, Any],
        routing: str | None = None,
    ) -> dict[str, Any]:
        """Create or replace a document."""

    @abstractmethod
    def get(self, *, index: str, type: str, id: Any, routing: str | None = None) -> dict[str, Any]:
        """Fetch a document.

        Returns:
            The engine response, carrying ``_source`` and optionally
            ``_version``. A missing document yields the engine's
            ``found: false`` body rather than an exception.
        """

    @abstractmethod
    def delete(self, *, index: str, type: str, id: Any, routing: str | None = None) -> dict[str, Any]:
        """Delete a document.

        Returns:
            The engine response. A missing document yields the engine's
            not-found body rather than an exception.
        """

    @abstractmethod
    def search(self, *, index: str, type: str, body: dict[str, Any]) -> dict[str, Any]:
        """Run a search request and return the raw response."""

    def close(self) -> None:
        """Release any resources held by the transport."""

    def __enter__(self) -> SearchTransport:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
