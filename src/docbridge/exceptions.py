"""Bridge exceptions."""

from __future__ import annotations

from typing import Any


class DocBridgeError(Exception):
    """Base exception for docbridge errors."""


class RecordNotPersistedError(DocBridgeError):
    """Raised when an operation needs a stable document id the record does not have."""


DocumentNotPersistedError = RecordNotPersistedError


class MalformedHitError(DocBridgeError):
    """Raised when a search hit cannot be hydrated into a record."""


class BulkOperationError(DocBridgeError):
    """Raised when a sequence of per-record calls fails partway.

    Calls that completed before the failure have already been applied
    remotely; their responses are kept in ``completed``. The underlying
    error is chained as ``__cause__``.
    """

    def __init__(self, message: str, completed: list[dict[str, Any]], failed_record: Any) -> None:
        super().__init__(message)
        self.completed = completed
        self.failed_record = failed_record
