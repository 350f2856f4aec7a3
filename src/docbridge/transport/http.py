"""HTTP transport — Search engine access over its REST API.

Talks to the engine with ``httpx`` (sync). Paths follow the typed
document API::

    PUT    /{index}/{type}/{id}        index a document
    GET    /{index}/{type}/{id}        fetch a document
    DELETE /{index}/{type}/{id}        delete a document
    POST   /{index}/{type}/_search     search
    PUT    /{index}                    create an index
    GET    /{index}/_mapping/{type}    read a mapping

Usage::

    with HttpSearchTransport(hosts=["http://localhost:9200"]) as transport:
        transport.index(index="default", type="products", id=42, body={...})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from docbridge.transport.base import IndicesTransport, SearchTransport
from docbridge.transport.exceptions import ConfigurationError, ConnectionError, RequestError

if TYPE_CHECKING:
    from docbridge.config.settings import TransportSettings

logger = logging.getLogger(__name__)


def _path(*parts: Any) -> str:
    return "/" + "/".join(quote(str(p), safe="") for p in parts)


class HttpSearchTransport(SearchTransport):
    """Search transport backed by an ``httpx.Client``.

    Only the first host is used; load balancing belongs to whatever sits in
    front of the cluster.

    Args:
        hosts: Engine base URLs.
        timeout: Request timeout in seconds.
        max_retries: Connection retries performed by ``httpx``.
        username: Optional basic-auth username.
        password: Optional basic-auth password.
        verify_certs: Whether to verify TLS certificates.
        client: Pre-built client, mainly for tests. Overrides every other option.
    """

    def __init__(
        self,
        hosts: list[str] | None = None,
        timeout: float = 30.0,
        max_retries: int = 0,
        username: str | None = None,
        password: str | None = None,
        verify_certs: bool = True,
        client: httpx.Client | None = None,
    ) -> None:
        if client is None:
            hosts = hosts or ["http://localhost:9200"]
            if not hosts[0]:
                raise ConfigurationError("At least one search engine host is required.")
            auth = None
            if username and password:
                auth = httpx.BasicAuth(username, password)
            client = httpx.Client(
                base_url=hosts[0].rstrip("/"),
                timeout=httpx.Timeout(timeout),
                auth=auth,
                transport=httpx.HTTPTransport(retries=max_retries, verify=verify_certs),
            )
        self._client = client
        self._indices = HttpIndicesTransport(self)

    @classmethod
    def from_settings(cls, settings: TransportSettings) -> HttpSearchTransport:
        """Build a transport from ``TransportSettings``."""
        return cls(
            hosts=settings.hosts,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            username=settings.username,
            password=settings.password,
            verify_certs=settings.verify_certs,
        )

    @property
    def indices(self) -> HttpIndicesTransport:
        return self._indices

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    # ── Documents ────────────────────────────────────────────────────────

    def index(
        self,
        *,
        index: str,
        type: str,
        id: Any,
        body: dict[str, Any],
        routing: str | None = None,
    ) -> dict[str, Any]:
        return self.request("PUT", _path(index, type, id), params=_routing(routing), json=body)

    def get(self, *, index: str, type: str, id: Any, routing: str | None = None) -> dict[str, Any]:
        return self.request("GET", _path(index, type, id), params=_routing(routing), not_found_ok=True)

    def delete(self, *, index: str, type: str, id: Any, routing: str | None = None) -> dict[str, Any]:
        return self.request("DELETE", _path(index, type, id), params=_routing(routing), not_found_ok=True)

    def search(self, *, index: str, type: str, body: dict[str, Any]) -> dict[str, Any]:
        return self.request("POST", _path(index, type, "_search"), json=body)

    # ── Plumbing ─────────────────────────────────────────────────────────

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        not_found_ok: bool = False,
    ) -> dict[str, Any]:
        """Send a request and decode the JSON answer.

        Args:
            method: HTTP method.
            path: Path relative to the engine base URL.
            params: Query string parameters.
            json: Request body.
            not_found_ok: Return the decoded 404 body instead of raising.

        Raises:
            ConnectionError: If the engine could not be reached.
            RequestError: If the engine answered with an error status.
        """
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as e:
            raise ConnectionError(f"Search engine request {method} {path} failed: {e}") from e

        if response.status_code == 404 and not_found_ok:
            return _decode(response)
        if response.is_error:
            raise RequestError(
                f"Search engine returned {response.status_code} for {method} {path}",
                status_code=response.status_code,
                body=_decode(response, strict=False),
            )
        return _decode(response)

    def head(self, path: str) -> bool:
        """Return True for a 2xx answer, False for 404."""
        logger.debug("HEAD %s", path)
        try:
            response = self._client.head(path)
        except httpx.HTTPError as e:
            raise ConnectionError(f"Search engine request HEAD {path} failed: {e}") from e

        if response.status_code == 404:
            return False
        if response.is_error:
            raise RequestError(
                f"Search engine returned {response.status_code} for HEAD {path}",
                status_code=response.status_code,
            )
        return True


class HttpIndicesTransport(IndicesTransport):
    """Index and mapping calls sharing the parent transport's client."""

    def __init__(self, transport: HttpSearchTransport) -> None:
        self._transport = transport

    def create(self, *, index: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._transport.request("PUT", _path(index), json=body)

    def exists(self, *, index: str) -> bool:
        return self._transport.head(_path(index))

    def delete(self, *, index: str) -> dict[str, Any]:
        return self._transport.request("DELETE", _path(index))

    def get_mapping(self, *, index: str, type: str) -> dict[str, Any]:
        try:
            return self._transport.request("GET", _path(index, "_mapping", type))
        except RequestError as e:
            if e.status_code == 404:
                return {}
            raise

    def put_mapping(
        self,
        *,
        index: str,
        type: str,
        body: dict[str, Any],
        ignore_conflicts: bool = False,
    ) -> dict[str, Any]:
        params = {"ignore_conflicts": "true"} if ignore_conflicts else None
        return self._transport.request("PUT", _path(index, "_mapping", type), params=params, json=body)

    def delete_mapping(self, *, index: str, type: str) -> dict[str, Any]:
        return self._transport.request("DELETE", _path(index, "_mapping", type), not_found_ok=True)

    def exists_type(self, *, index: str, type: str) -> bool:
        return self._transport.head(_path(index, type))


def _routing(routing: str | None) -> dict[str, str] | None:
    return {"routing": routing} if routing is not None else None


def _decode(response: httpx.Response, strict: bool = True) -> dict[str, Any]:
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError as e:
        if not strict:
            return {"raw": response.text}
        raise RequestError(
            f"Search engine returned a non-JSON body ({response.status_code})",
            status_code=response.status_code,
            body=response.text,
        ) from e
    return data if isinstance(data, dict) else {"raw": data}
