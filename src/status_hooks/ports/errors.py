"""Errors raised by the HTTP helper and the status trigger."""

__all__ = [
    "HttpClientError",
    "NetworkError",
    "RequestConstructionError",
    "SerializationError",
    "UnexpectedStatusError",
]


class HttpClientError(Exception):
    """Base class for outbound request failures."""


class SerializationError(HttpClientError):
    """Request body could not be converted to its wire representation."""


class RequestConstructionError(HttpClientError):
    """Request could not be built (bad method, URL or CA bundle)."""


class NetworkError(HttpClientError):
    """Exchange with the server failed (DNS, connect, TLS, timeout).

    The underlying transport error is available as ``__cause__``.
    """


class UnexpectedStatusError(HttpClientError):
    """A trigger target answered with something other than 200."""

    def __init__(self, target: str, status: int) -> None:
        self.target = target
        self.status = status
        super().__init__(f"invalid trigger request to target `{target}`, code is `{status}`")
