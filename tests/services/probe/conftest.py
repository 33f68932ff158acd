"""
Pytest fixtures for reachability probe tests.
"""
import asyncio

import pytest
from aiohttp import WSMsgType, web
from aiohttp.test_utils import TestServer, unused_port

from services.probe import ReachabilityService


@pytest.fixture
async def endpoint_server():
    """Local server exposing HTTP, WebSocket and never-answering endpoints"""
    release = asyncio.Event()

    async def health(request):
        return web.Response(text="ok")

    async def inbound(request):
        # HTTP inbound transports only accept POST
        return web.Response(status=405)

    async def hang(request):
        await release.wait()
        return web.Response(text="late")

    async def streaming(request):
        response = web.StreamResponse()
        await response.prepare(request)
        await response.write(b"x")
        await release.wait()
        return response

    async def silent_websocket(request):
        ws = web.WebSocketResponse()
        await ws.prepare(request)
        await release.wait()
        return ws

    async def websocket(request):
        ws = web.WebSocketResponse()
        await ws.prepare(request)
        async for msg in ws:
            if msg.type == WSMsgType.ERROR:
                break
        return ws

    app = web.Application()
    app.router.add_get("/health", health)
    app.router.add_get("/inbound", inbound)
    app.router.add_get("/hang", hang)
    app.router.add_get("/ws", websocket)
    app.router.add_get("/stream", streaming)
    app.router.add_get("/ws_silent", silent_websocket)

    server = TestServer(app, host="127.0.0.1")
    await server.start_server()
    yield server
    release.set()
    await server.close()


@pytest.fixture
def http_url(endpoint_server):
    """Build an http:// URL on the endpoint server"""

    def _url(path: str) -> str:
        return str(endpoint_server.make_url(path))

    return _url


@pytest.fixture
def ws_url(http_url):
    """Build a ws:// URL on the endpoint server"""

    def _url(path: str) -> str:
        return "ws" + http_url(path)[len("http"):]

    return _url


@pytest.fixture
def closed_port():
    """A local port nothing listens on"""
    return unused_port()


@pytest.fixture
def reachability_service():
    """Create reachability service"""
    return ReachabilityService()
