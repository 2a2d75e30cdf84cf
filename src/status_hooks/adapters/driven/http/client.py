"""HTTP client adapter: one fresh aiohttp session per outbound request."""

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp
from aiohttp import ClientResponse, ClientTimeout
from multidict import CIMultiDict
from yarl import URL

from status_hooks.adapters.driven.http.tls import build_ssl
from status_hooks.ports.errors import (
    NetworkError,
    RequestConstructionError,
    SerializationError,
)
from status_hooks.ports.http import (
    BODYLESS_METHODS,
    DEFAULT_TIMEOUT_SEC,
    SUPPORTED_METHODS,
    BasicAuthDto,
    HttpRequestDto,
    TransportDto,
)

__all__ = ["HttpClient", "encode_body", "CONTENT_TYPE_JSON", "CONTENT_TYPE_JSON_PATCH"]

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json;charset=utf-8"
CONTENT_TYPE_JSON_PATCH = "application/json-patch+json"

Params = Mapping[str, str] | None
Headers = Mapping[str, str] | None

_FORBIDDEN_HEADER_CHARS = frozenset("\r\n\0")


def encode_body(body: Any) -> bytes | None:
    """Convert a request body to bytes.

    Args:
        body: None, raw bytes, a file-like object with ``read()``, or any
            JSON-serializable value.

    Returns:
        Encoded body, or None when there is nothing to send.

    Raises:
        SerializationError: If the value cannot be read or JSON encoded.
    """
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if hasattr(body, "read"):
        try:
            data = body.read()
        except (OSError, ValueError) as e:
            raise SerializationError(f"Reading request body failed: {e}") from e
        return data.encode("utf-8") if isinstance(data, str) else bytes(data)
    try:
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Request body to JSON failed: {e}") from e


def build_url(raw_url: str, params: Params) -> URL:
    """Parse the target URL and append query parameters to it.

    Raises:
        RequestConstructionError: If the URL is not an absolute URL with a host.
    """
    try:
        url = URL(raw_url)
    except (TypeError, ValueError) as e:
        raise RequestConstructionError(f"Invalid URL {raw_url!r}: {e}") from e
    if not url.absolute or not url.host:
        raise RequestConstructionError(f"Invalid URL {raw_url!r}: absolute URL required")

    if params:
        url = url.extend_query(dict(params))
    return url


def build_headers(method: str, headers: Headers) -> CIMultiDict[str]:
    """Return default headers for method plus caller headers, added not replaced.

    Raises:
        RequestConstructionError: If a header name or value contains CR, LF or NUL.
    """
    merged: CIMultiDict[str] = CIMultiDict()
    if method not in BODYLESS_METHODS:
        merged["Content-Type"] = CONTENT_TYPE_JSON_PATCH if method == "PATCH" else CONTENT_TYPE_JSON

    if headers:
        for key, value in headers.items():
            if _FORBIDDEN_HEADER_CHARS.intersection(key + value):
                raise RequestConstructionError(f"Invalid header {key!r}: control characters")
            merged.add(key, value)
    return merged


class HttpClient:
    """Outbound HTTP helper.

    Every call builds its own session and connector, so nothing is shared
    between calls and no keep-alive connection is reused. The response is
    returned unparsed, with its body already read.
    """

    def __init__(self, timeout_sec: float = DEFAULT_TIMEOUT_SEC) -> None:
        """Initialize HTTP client.

        Args:
            timeout_sec: Dial, read and response-header timeout for each
                request. The whole exchange is bounded by twice this value.
        """
        self.timeout_sec = timeout_sec

    async def get(
        self,
        url: str,
        params: Params = None,
        headers: Headers = None,
        *,
        ca_path: str | None = None,
        auth: BasicAuthDto | None = None,
    ) -> ClientResponse:
        """Send a GET request (no body)."""
        req = HttpRequestDto(method="GET", url=url, params=params, headers=headers)
        return await self.request(req, ca_path=ca_path, auth=auth)

    async def delete(
        self,
        url: str,
        params: Params = None,
        headers: Headers = None,
        *,
        ca_path: str | None = None,
        auth: BasicAuthDto | None = None,
    ) -> ClientResponse:
        """Send a DELETE request (no body)."""
        req = HttpRequestDto(method="DELETE", url=url, params=params, headers=headers)
        return await self.request(req, ca_path=ca_path, auth=auth)

    async def post(
        self,
        url: str,
        body: Any = None,
        params: Params = None,
        headers: Headers = None,
        *,
        ca_path: str | None = None,
        auth: BasicAuthDto | None = None,
    ) -> ClientResponse:
        """Send a POST request with a JSON body."""
        req = HttpRequestDto(method="POST", url=url, body=body, params=params, headers=headers)
        return await self.request(req, ca_path=ca_path, auth=auth)

    async def put(
        self,
        url: str,
        body: Any = None,
        params: Params = None,
        headers: Headers = None,
        *,
        ca_path: str | None = None,
        auth: BasicAuthDto | None = None,
    ) -> ClientResponse:
        """Send a PUT request with a JSON body."""
        req = HttpRequestDto(method="PUT", url=url, body=body, params=params, headers=headers)
        return await self.request(req, ca_path=ca_path, auth=auth)

    async def patch(
        self,
        url: str,
        body: Any = None,
        params: Params = None,
        headers: Headers = None,
        *,
        ca_path: str | None = None,
        auth: BasicAuthDto | None = None,
    ) -> ClientResponse:
        """Send a PATCH request with a JSON patch body."""
        req = HttpRequestDto(method="PATCH", url=url, body=body, params=params, headers=headers)
        return await self.request(req, ca_path=ca_path, auth=auth)

    async def request(
        self,
        req: HttpRequestDto,
        *,
        ca_path: str | None = None,
        auth: BasicAuthDto | None = None,
    ) -> ClientResponse:
        """Build and send one request.

        Args:
            req: Request to send.
            ca_path: PEM CA bundle to validate the server against. When
                omitted the server certificate is not verified.
            auth: Optional basic credentials.

        Returns:
            HTTP response, body already read.

        Raises:
            RequestConstructionError: Invalid method, URL or CA bundle.
            SerializationError: Body could not be encoded.
            NetworkError: The exchange with the server failed.
        """
        method = req.method.upper()
        if method not in SUPPORTED_METHODS:
            raise RequestConstructionError(f"Unsupported HTTP method {req.method!r}")

        url = build_url(req.url, req.params)
        data = None if method in BODYLESS_METHODS else encode_body(req.body)
        headers = build_headers(method, req.headers)
        transport = TransportDto(timeout_sec=self.timeout_sec, ca_path=ca_path, auth=auth)

        return await self._send(method, url, data, headers, transport)

    async def _send(
        self,
        method: str,
        url: URL,
        data: bytes | None,
        headers: CIMultiDict[str],
        transport: TransportDto,
    ) -> ClientResponse:
        """Send one request over a session that lives only for this call."""
        t = transport.timeout_sec
        client_timeout = ClientTimeout(total=t * 2, connect=t, sock_connect=t, sock_read=t)
        connector = aiohttp.TCPConnector(ssl=build_ssl(transport.ca_path), force_close=True)
        auth = (
            aiohttp.BasicAuth(transport.auth.username, transport.auth.password)
            if transport.auth
            else None
        )

        logger.debug(f"{method} {url}")
        try:
            async with aiohttp.ClientSession(connector=connector, timeout=client_timeout) as session:
                # sock_read resets per chunk; headers get a hard deadline of t
                async with asyncio.timeout(t):
                    resp = await session.request(
                        method, url, data=data, headers=headers, auth=auth
                    )
                async with resp:
                    await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug(f"{method} {url} failed: {e!r}")
            raise NetworkError(f"{method} {url} failed: {e!r}") from e

        logger.debug(f"{method} {url} returned status {resp.status}")
        return resp
