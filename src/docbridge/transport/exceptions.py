"""Transport-specific exceptions."""

from __future__ import annotations

from typing import Any

from docbridge.exceptions import DocBridgeError


class TransportError(DocBridgeError):
    """Base exception for failed calls to the search engine."""


class ConnectionError(TransportError):
    """Raised when the transport cannot reach the search engine."""


class RequestError(TransportError):
    """Raised when the search engine answers with an error status."""

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigurationError(TransportError):
    """Raised when transport configuration is invalid."""
