"""HTTP port definitions (DTOs)."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = [
    "BODYLESS_METHODS",
    "BasicAuthDto",
    "DEFAULT_TIMEOUT_SEC",
    "HttpRequestDto",
    "SUPPORTED_METHODS",
    "TransportDto",
]

DEFAULT_TIMEOUT_SEC = 30.0

BODYLESS_METHODS = frozenset({"GET", "DELETE"})
SUPPORTED_METHODS = BODYLESS_METHODS | {"POST", "PUT", "PATCH"}


@dataclass(slots=True, frozen=True)
class HttpRequestDto:
    """Outbound HTTP request, built once per call.

    Attributes:
        method: HTTP method name (upper case).
        url: Absolute target URL, may already carry a query string.
        body: JSON-serializable value, raw bytes or a file-like object.
            Ignored for GET and DELETE.
        params: Query parameters appended to the URL.
        headers: Headers added on top of the defaults.
    """

    method: str
    url: str
    body: Any = None
    params: Mapping[str, str] | None = None
    headers: Mapping[str, str] | None = None


@dataclass(slots=True, frozen=True)
class BasicAuthDto:
    """HTTP basic credentials."""

    username: str
    password: str


@dataclass(slots=True, frozen=True)
class TransportDto:
    """Transport options for one request.

    Attributes:
        timeout_sec: Dial, read and response-header timeout. The whole
            exchange is bounded by twice this value.
        ca_path: PEM CA bundle to validate the server against. None means
            the server certificate is not verified.
        auth: Optional basic credentials.
    """

    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    ca_path: str | None = None
    auth: BasicAuthDto | None = None
