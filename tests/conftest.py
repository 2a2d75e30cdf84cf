"""Shared fixtures: local aiohttp servers that record what they receive."""

import ssl
from collections.abc import AsyncIterator
from dataclasses import dataclass, field

import pytest
import pytest_asyncio
import trustme
from aiohttp import web
from aiohttp.test_utils import unused_port
from multidict import CIMultiDictProxy, MultiDictProxy

__all__ = []


@dataclass
class RecordedRequest:
    """What the server saw for one request."""

    method: str
    path: str
    query: MultiDictProxy[str]
    headers: CIMultiDictProxy[str]
    body: bytes


@dataclass
class RecordingServer:
    """Answers every request with ``statuses.get(path, 200)`` and records it."""

    base_url: str = ""
    statuses: dict[str, int] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.read()
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                query=request.query,
                headers=request.headers,
                body=body,
            )
        )
        return web.Response(status=self.statuses.get(request.path, 200), text="ok")


async def _start(
    server: RecordingServer, ssl_context: ssl.SSLContext | None = None
) -> web.AppRunner:
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", server.handle)
    runner = web.AppRunner(app)
    await runner.setup()

    port = unused_port()
    site = web.TCPSite(runner, "127.0.0.1", port, ssl_context=ssl_context)
    await site.start()

    scheme = "https" if ssl_context else "http"
    server.base_url = f"{scheme}://127.0.0.1:{port}"
    return runner


@pytest_asyncio.fixture
async def http_server() -> AsyncIterator[RecordingServer]:
    """Plain HTTP recording server."""
    server = RecordingServer()
    runner = await _start(server)
    yield server
    await runner.cleanup()


@pytest.fixture
def server_ca() -> trustme.CA:
    """CA that signs the TLS server certificate."""
    return trustme.CA()


@pytest_asyncio.fixture
async def https_server(server_ca: trustme.CA) -> AsyncIterator[RecordingServer]:
    """HTTPS recording server with a certificate for 127.0.0.1."""
    ssl_context = ssl.create_default_context(ssl.Purpose.CLIENT_AUTH)
    server_ca.issue_cert("127.0.0.1").configure_cert(ssl_context)

    server = RecordingServer()
    runner = await _start(server, ssl_context)
    yield server
    await runner.cleanup()
