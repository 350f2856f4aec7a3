"""Search transport layer — The only code that talks to the search engine.

Implement ``SearchTransport`` to reach an engine through something other
than its REST API.
"""

from docbridge.transport.base import IndicesTransport, SearchTransport
from docbridge.transport.exceptions import (
    ConfigurationError,
    ConnectionError,
    RequestError,
    TransportError,
)
from docbridge.transport.http import HttpSearchTransport

__all__ = [
    "ConfigurationError",
    "ConnectionError",
    "HttpSearchTransport",
    "IndicesTransport",
    "RequestError",
    "SearchTransport",
    "TransportError",
]
